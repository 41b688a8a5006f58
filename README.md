# teamcityapi

A Python client for the TeamCity REST API. It models the entities a TeamCity
server keeps and offers services that create, read, update and delete them.

## What it covers

- **REST access**: `teamcityapi.rest.RestClient` sends JSON and plain-text
  requests relative to a base URL over a shared `requests` session. Every
  service takes one. A failed request raises `TeamCityError`, whose message
  starts with the HTTP status code (for example `404`) and whose
  `status_code` attribute holds it.
- **Projects** (`teamcityapi.project`): `Project`, `ProjectReference` and
  `ProjectService`: create, get by id or name, update (name, description,
  parent and parameters) and delete.
- **Build configurations and templates** (`teamcityapi.build_type`):
  `BuildType`, `BuildTypeReference` and `BuildTypeService`, which also adds,
  lists and deletes build steps and updates single settings.
  `teamcityapi.build_template.BuildTemplateService` attaches templates to a
  build configuration and detaches them.
- **Build settings** (`teamcityapi.build_type_options`): `BuildTypeOptions`,
  with the defaults TeamCity gives a new configuration or template.
- **Parameters** (`teamcityapi.parameter`): `Parameter`, `Parameters` and
  `ParameterType` for configuration, system (`system.`) and environment
  (`env.`) parameters. `Property` and `Properties` are the raw name/value
  collections the API exchanges.
- **Artifact dependencies**: `ArtifactDependency`
  (`teamcityapi.artifact_dependency`), `ArtifactDependencyOptions` and
  `ArtifactDependencyRevision` (`teamcityapi.artifact_dependency_options`),
  and `DependencyService` (`teamcityapi.dependency`) to add, get and delete
  them on a build type.
- **Agent requirements** (`teamcityapi.agent_requirement`):
  `AgentRequirement`, `Condition` and `AgentRequirementService`.
- **Agent pools** (`teamcityapi.agent_pool`): `AgentPool`,
  `AgentPoolReference`, `CreateAgentPool`, `AgentPoolList` and
  `AgentPoolsService`, including assigning projects to a pool and removing
  them.
- **User groups** (`teamcityapi.group`): `Group` and `GroupService`.
- **Locators** (`teamcityapi.locator`): `locator_id`, `locator_id_int`,
  `locator_name`, `locator_key` and `locator_type` build the escaped locators
  used in request paths.

Constructors that check their arguments (`Group`, `Project`, `Parameter`,
`ArtifactDependency`, `ArtifactDependencyOptions.create`,
`AgentRequirement.create`, `BuildType.create`) raise `ValueError` when a
required value is missing.

## Installation

```
pip install teamcityapi
```

## Examples

Connecting and reading a project:

```python
from teamcityapi.rest import RestClient
from teamcityapi.project import ProjectService

rest = RestClient("http://localhost:8111/app/rest/", auth=("user", "password"))
projects = ProjectService(rest)
root = projects.get_by_name("<Root project>")
```

Locators come out escaped and ready to use in a URL path:

```python
from teamcityapi.locator import locator_id, locator_name

locator_name("<Root Project>")   # 'name%3A%3CRoot%20Project%3E'
locator_id("_Root")              # 'id%3A_Root'
```

Build settings leave out the values TeamCity omits when they are at their
defaults, so reads and writes stay consistent:

```python
from teamcityapi.build_type_options import BuildTypeOptions

props = BuildTypeOptions.with_defaults().properties()
props.get("artifactRules")        # '' (always sent)
props.get("buildNumberPattern")   # None: the default pattern is left out
```

## What it does not do

- There are no build feature services; features on a build type cannot be
  created, read or deleted through this package.
- Only artifact dependencies are handled; snapshot dependencies are not.
- VCS roots, triggers and typed build step models are not provided. Build
  steps and VCS root entries are passed and returned as plain JSON
  dictionaries.
- There is no command-line tool; the package is a library only.

## Running the tests

```
pip install -e ".[test]"
pytest
```

The tests use `responses` to stand in for a TeamCity server and do not need a
running instance.
import json

import pytest
import responses

from teamcityapi.parameter import ParameterType, Parameters
from teamcityapi.project import Project, ProjectReference, ProjectService
from teamcityapi.rest import RestClient, TeamCityError

BASE = "http://teamcity.test/app/rest/"
PROJECTS = BASE + "projects/"
TEST_PROJECT_ID = "ProjectTest"


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def service():
    return ProjectService(RestClient(BASE))


def _register_updates(mock, project_id):
    mock.add(responses.PUT, PROJECTS + f"{project_id}/name", body="ok")
    mock.add(responses.PUT, PROJECTS + f"{project_id}/description", body="ok")


def _urls(mock, method):
    return [c.request.url for c in mock.calls if c.request.method == method]


def test_validate_name():
    with pytest.raises(ValueError, match="name is required"):
        Project("", "", "")


def test_parent_reference_created_from_id():
    child = Project("ChildProject", "Child Project", TEST_PROJECT_ID)
    assert child.parent_project_id == TEST_PROJECT_ID
    assert child.parent_project == ProjectReference(id=TEST_PROJECT_ID)
    assert Project("Top").parent_project is None


def test_set_parent_project():
    project = Project("ChildProject")
    project.set_parent_project("NewParent")
    assert project.parent_project_id == "NewParent"
    assert project.parent_project.id == "NewParent"


def test_reference():
    project = Project("Name", "Desc", id="P1", web_url="http://teamcity.test/p")
    assert project.reference() == ProjectReference(
        id="P1", name="Name", description="Desc", web_url="http://teamcity.test/p"
    )


def test_to_dict_from_dict_round_trip():
    project = Project("ChildProject", "Child Project", TEST_PROJECT_ID, id="ProjectTest_ChildProject")
    project.parameters.add_or_replace_value(ParameterType.CONFIGURATION, "param1", "value1")
    again = Project.from_dict(project.to_dict())
    assert again.name == project.name
    assert again.parent_project_id == TEST_PROJECT_ID
    assert again.parent_project.id == TEST_PROJECT_ID
    assert again.parameters.get(ParameterType.CONFIGURATION, "param1").value == "value1"


def test_from_dict_children_and_build_types():
    data = {
        "id": TEST_PROJECT_ID,
        "name": TEST_PROJECT_ID,
        "projects": {"count": 2, "project": [
            {"id": "ProjectTest_ChildProjectTest1", "name": "ChildProjectTest1"},
            {"id": "ProjectTest_ChildProjectTest2", "name": "ChildProjectTest2"},
        ]},
        "buildTypes": {"count": 2, "buildType": [
            {"id": "ProjectTest_Build1", "name": "Build1"},
            {"id": "ProjectTest_Build2", "name": "Build2"},
        ]},
    }
    project = Project.from_dict(data)
    assert {c.id: c.name for c in project.child_projects} == {
        "ProjectTest_ChildProjectTest1": "ChildProjectTest1",
        "ProjectTest_ChildProjectTest2": "ChildProjectTest2",
    }
    assert [b["id"] for b in project.build_types] == ["ProjectTest_Build1", "ProjectTest_Build2"]
    assert project.parameters is None


def test_create(mock, service):
    new_project = Project(TEST_PROJECT_ID, "Test Project Description")
    mock.add(responses.POST, PROJECTS, json={"id": TEST_PROJECT_ID, "name": TEST_PROJECT_ID})
    _register_updates(mock, TEST_PROJECT_ID)
    mock.add(responses.GET, PROJECTS + "id%3AProjectTest", json={
        "id": TEST_PROJECT_ID,
        "name": TEST_PROJECT_ID,
        "description": "Test Project Description",
    })
    actual = service.create(new_project)
    assert actual.id == TEST_PROJECT_ID
    assert actual.name == new_project.name
    assert actual.description == new_project.description
    assert PROJECTS + "ProjectTest/description" in _urls(mock, "PUT")
    assert mock.calls[2].request.body == b"Test Project Description"


def test_get_by_id_filters_inherited(mock, service):
    mock.add(responses.GET, PROJECTS + "id%3AProjectTest", json={
        "id": TEST_PROJECT_ID,
        "name": TEST_PROJECT_ID,
        "parameters": {"count": 2, "property": [
            {"name": "param1", "value": "value1"},
            {"name": "project_inherited", "value": "value", "inherited": True},
        ]},
    })
    actual = service.get_by_id(TEST_PROJECT_ID)
    props = actual.parameters.properties()
    assert props.get("param1") == "value1"
    assert props.get("project_inherited") is None


def test_get_by_name_root(mock, service):
    url = PROJECTS + "name%3A%3CRoot%20project%3E"
    mock.add(responses.GET, url, json={"id": "_Root", "name": "<Root project>"})
    actual = service.get_by_name("<Root project>")
    assert actual.name == "<Root project>"
    assert mock.calls[0].request.url == url


def test_update_with_same_parent_does_not_move(mock, service):
    current = {
        "id": "ParentProject_ChildProject",
        "name": "ChildProject",
        "parentProjectId": "ParentProject",
        "parentProject": {"id": "ParentProject"},
    }
    _register_updates(mock, "ParentProject_ChildProject")
    mock.add(responses.GET, PROJECTS + "id%3AParentProject_ChildProject", json=current)
    updated = service.update(Project.from_dict(current))
    assert updated.name == "ChildProject"
    assert not any(url.endswith("/parentProject") for url in _urls(mock, "PUT"))


def test_update_parent(mock, service):
    current = {
        "id": "ProjectTest_ChildProject",
        "name": "ChildProject",
        "parentProjectId": TEST_PROJECT_ID,
        "parentProject": {"id": TEST_PROJECT_ID},
    }
    _register_updates(mock, "ProjectTest_ChildProject")
    mock.add(responses.GET, PROJECTS + "id%3AProjectTest_ChildProject", json=current)
    mock.add(responses.PUT, PROJECTS + "ProjectTest_ChildProject/parentProject", json={"id": "NewParent"})
    project = Project.from_dict(current)
    project.set_parent_project("NewParent")
    service.update(project)
    parent_calls = [c for c in mock.calls if c.request.url.endswith("/parentProject")]
    assert len(parent_calls) == 1
    assert json.loads(parent_calls[0].request.body) == {"id": "NewParent"}


def test_update_parameters(mock, service):
    _register_updates(mock, TEST_PROJECT_ID)
    mock.add(responses.PUT, PROJECTS + "ProjectTest/parameters", json={})
    refreshed = {
        "id": TEST_PROJECT_ID,
        "name": TEST_PROJECT_ID,
        "parameters": {"count": 2, "property": [
            {"name": "param1", "value": "value1"},
            {"name": "param2", "value": "value2"},
        ]},
    }
    mock.add(responses.GET, PROJECTS + "id%3AProjectTest", json=refreshed)
    project = Project(TEST_PROJECT_ID, id=TEST_PROJECT_ID)
    params = Parameters()
    params.add_or_replace_value(ParameterType.CONFIGURATION, "param1", "value1")
    params.add_or_replace_value(ParameterType.CONFIGURATION, "param2", "value2")
    project.parameters = params
    updated = service.update(project)
    props = updated.parameters.properties()
    assert props.get("param1") == "value1"
    assert props.get("param2") == "value2"
    sent = [c for c in mock.calls if c.request.url.endswith("/parameters")]
    assert [p["name"] for p in json.loads(sent[0].request.body)["property"]] == ["param1", "param2"]


def test_update_without_parameters_skips_put(mock, service):
    _register_updates(mock, TEST_PROJECT_ID)
    mock.add(responses.GET, PROJECTS + "id%3AProjectTest", json={"id": TEST_PROJECT_ID, "name": "n"})
    service.update(Project("n", id=TEST_PROJECT_ID))
    assert not any(url.endswith("/parameters") for url in _urls(mock, "PUT"))


def test_delete_then_get_is_404(mock, service):
    mock.add(responses.DELETE, PROJECTS + TEST_PROJECT_ID, status=204)
    mock.add(responses.GET, PROJECTS + "id%3AProjectTest", status=404, body="not found")
    service.delete(TEST_PROJECT_ID)
    with pytest.raises(TeamCityError) as info:
        service.get_by_id(TEST_PROJECT_ID)
    assert "404" in str(info.value)


def test_unauthorized_handled(mock, service):
    mock.add(responses.POST, PROJECTS, status=401, body="Unauthorized")
    with pytest.raises(TeamCityError) as info:
        service.create(Project(TEST_PROJECT_ID, "Test Project Description"))
    assert "401" in str(info.value)
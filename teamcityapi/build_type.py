"""Build configurations, build configuration templates and their operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .build_type_options import BuildTypeOptions
from .locator import locator_id
from .parameter import Parameters, Properties
from .rest import RestClient, TeamCityError


@dataclass
class BuildTypeReference:
    """A short reference to a build configuration or template."""

    id: str = ""
    name: str = ""
    project_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        pairs = (("id", self.id), ("name", self.name), ("projectId", self.project_id))
        return {key: value for key, value in pairs if value}

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "BuildTypeReference":
        data = data or {}
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            project_id=data.get("projectId", ""),
        )


def _steps_dict(steps: list[dict[str, Any]]) -> dict[str, Any]:
    return {"count": len(steps), "step": list(steps)}


def _steps_from(data: Optional[dict[str, Any]]) -> list[dict[str, Any]]:
    return list((data or {}).get("step") or [])


@dataclass
class BuildType:
    """A build configuration, or a build configuration template.

    Steps and VCS root entries are kept in their JSON form.
    """

    project_id: str = ""
    name: str = ""
    id: str = ""
    description: str = ""
    options: BuildTypeOptions = field(default_factory=BuildTypeOptions.with_defaults)
    disabled: bool = False
    is_template: bool = False
    steps: list[dict[str, Any]] = field(default_factory=list)
    templates: Optional[list[BuildTypeReference]] = None
    vcs_root_entries: list[dict[str, Any]] = field(default_factory=list)
    parameters: Parameters = field(default_factory=Parameters)

    @staticmethod
    def _check(project_id: str, name: str) -> None:
        if not project_id or not name:
            raise ValueError("projectID and name are required")

    @classmethod
    def create(cls, project_id: str, name: str) -> "BuildType":
        """A build configuration with default settings."""
        cls._check(project_id, name)
        return cls(project_id=project_id, name=name, options=BuildTypeOptions.with_defaults())

    @classmethod
    def create_template(cls, project_id: str, name: str) -> "BuildType":
        """A build configuration template with default settings."""
        cls._check(project_id, name)
        return cls(
            project_id=project_id,
            name=name,
            options=BuildTypeOptions.for_template(),
            is_template=True,
        )

    def reference(self) -> BuildTypeReference:
        return BuildTypeReference(id=self.id, name=self.name, project_id=self.project_id)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        # The server rejects a description when a template is created.
        if not self.is_template and self.description:
            out["description"] = self.description
        if self.id:
            out["id"] = self.id
        if self.name:
            out["name"] = self.name
        if self.parameters is not None:
            out["parameters"] = self.parameters.to_dict()
        if self.project_id:
            out["projectId"] = self.project_id
        out["templateFlag"] = self.is_template
        out["settings"] = self.options.properties().to_dict()
        if self.templates is not None:
            templates: dict[str, Any] = {}
            if self.templates:
                templates["count"] = len(self.templates)
            templates["buildType"] = [t.to_dict() for t in self.templates]
            out["templates"] = templates
        if self.steps:
            out["steps"] = _steps_dict(self.steps)
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BuildType":
        is_template = bool(data.get("templateFlag", False))
        templates = data.get("templates")
        parameters = data.get("parameters")
        return cls(
            project_id=data.get("projectId", ""),
            name=data.get("name", ""),
            id=data.get("id", ""),
            description=data.get("description", ""),
            options=BuildTypeOptions.from_properties(
                Properties.from_dict(data.get("settings")), is_template
            ),
            is_template=is_template,
            steps=_steps_from(data.get("steps")),
            templates=None
            if templates is None
            else [BuildTypeReference.from_dict(t) for t in templates.get("buildType") or []],
            vcs_root_entries=list(
                (data.get("vcs-root-entries") or {}).get("vcs-root-entry") or []
            ),
            parameters=Parameters.from_dict(parameters),
        )


class BuildTypeService:
    """Operations on build configurations and templates."""

    def __init__(self, rest: RestClient) -> None:
        self._rest = rest.scoped("buildTypes/")

    def create(self, build_type: BuildType) -> BuildTypeReference:
        """Create the build type under the project named by its project id."""
        created = self._rest.post("", build_type.to_dict(), "Build Type")
        return BuildTypeReference.from_dict(created)

    def get_by_id(self, id: str) -> BuildType:
        out = BuildType.from_dict(self._rest.get(id, "BuildType") or {})
        # Inherited parameters are left out of what callers see.
        out.parameters = out.parameters.non_inherited()
        return out

    def update(self, build_type: BuildType) -> BuildType:
        """Update name, description, settings, parameters and steps; not atomic."""
        bt_id = build_type.id
        self._rest.put_text(f"{bt_id}/name", build_type.name, "build type name")
        self._rest.put_text(
            f"{bt_id}/description", build_type.description, "build type description"
        )
        self._rest.put(
            f"{bt_id}/settings",
            build_type.options.properties().to_dict(),
            "build type settings",
        )
        parameters = build_type.parameters if build_type.parameters is not None else Parameters()
        self._rest.put(f"{bt_id}/parameters", parameters.to_dict(), "build type parameters")
        if build_type.steps:
            self._rest.put(f"{bt_id}/steps", _steps_dict(build_type.steps), "build type steps")
        return self.get_by_id(bt_id)

    def delete(self, id: str) -> None:
        self._rest.delete(id, "build type")

    def add_step(self, id: str, step: dict[str, Any]) -> dict[str, Any]:
        """Add a build step, given in its JSON form; returns the created step."""
        return self._rest.post(f"{locator_id(id)}/steps/", step, "build step") or {}

    def get_steps(self, id: str) -> list[dict[str, Any]]:
        return _steps_from(self._rest.get(f"{locator_id(id)}/steps/", "build steps"))

    def update_settings(self, id: str, settings: Properties) -> None:
        """Update each setting in order, stopping at the first failure."""
        for prop in settings:
            try:
                self._rest.put_text(
                    f"{locator_id(id)}/settings/{prop.name}", prop.value, "build type setting"
                )
            except TeamCityError as exc:
                raise TeamCityError(
                    f"error updating buildType id: '{id}' setting '{prop.name}': {exc}",
                    exc.status_code,
                ) from exc

    def delete_step(self, id: str, step_id: str) -> None:
        self._rest.delete(f"{locator_id(id)}/steps/{step_id}", "build step")
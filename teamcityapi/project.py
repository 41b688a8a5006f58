"""Projects and the operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .locator import locator_id, locator_name
from .parameter import Parameters
from .rest import RestClient


@dataclass
class ProjectReference:
    """Basic project identity, as used in relationships and creation replies."""

    id: str = ""
    name: str = ""
    description: str = ""
    href: str = ""
    web_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        pairs = (
            ("id", self.id),
            ("name", self.name),
            ("description", self.description),
            ("href", self.href),
            ("webUrl", self.web_url),
        )
        return {key: value for key, value in pairs if value}

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "ProjectReference":
        data = data or {}
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            description=data.get("description", ""),
            href=data.get("href", ""),
            web_url=data.get("webUrl", ""),
        )


@dataclass
class Project:
    """A TeamCity project. An empty parent id makes it a top-level project."""

    name: str
    description: str = ""
    parent_project_id: str = ""
    id: str = ""
    href: str = ""
    web_url: str = ""
    archived: Optional[bool] = None
    parameters: Optional[Parameters] = field(default_factory=Parameters)
    parent_project: Optional[ProjectReference] = None
    child_projects: list[ProjectReference] = field(default_factory=list)
    # Raw build type references ({"id", "name", "projectId", ...}).
    build_types: list[dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name is required")
        if self.parent_project_id and self.parent_project is None:
            self.parent_project = ProjectReference(id=self.parent_project_id)

    def set_parent_project(self, parent_id: str) -> None:
        self.parent_project_id = parent_id
        self.parent_project = ProjectReference(id=parent_id)

    def reference(self) -> ProjectReference:
        return ProjectReference(
            id=self.id,
            name=self.name,
            description=self.description,
            href=self.href,
            web_url=self.web_url,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.archived is not None:
            out["archived"] = self.archived
        for key, value in (
            ("description", self.description),
            ("href", self.href),
            ("id", self.id),
            ("name", self.name),
        ):
            if value:
                out[key] = value
        if self.parameters is not None:
            out["parameters"] = self.parameters.to_dict()
        if self.parent_project is not None:
            out["parentProject"] = self.parent_project.to_dict()
        if self.parent_project_id:
            out["parentProjectId"] = self.parent_project_id
        if self.web_url:
            out["webUrl"] = self.web_url
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Project":
        parameters = (
            Parameters.from_dict(data["parameters"]) if "parameters" in data else None
        )
        parent = data.get("parentProject")
        return cls(
            name=data.get("name", ""),
            description=data.get("description", ""),
            parent_project_id=data.get("parentProjectId", ""),
            id=data.get("id", ""),
            href=data.get("href", ""),
            web_url=data.get("webUrl", ""),
            archived=data.get("archived"),
            parameters=parameters,
            parent_project=ProjectReference.from_dict(parent) if parent else None,
            child_projects=[
                ProjectReference.from_dict(p)
                for p in (data.get("projects") or {}).get("project") or []
            ],
            build_types=list((data.get("buildTypes") or {}).get("buildType") or []),
        )


class ProjectService:
    """Operations on projects."""

    def __init__(self, rest: RestClient) -> None:
        self._rest = rest.scoped("projects/")

    def create(self, project: Project) -> Project:
        """Create the project, then set what creation does not persist."""
        created = ProjectReference.from_dict(self._rest.post("", project.to_dict(), "project"))
        project.id = created.id
        return self._update(project, is_create=True)

    def _read(self, locator: str) -> Project:
        out = Project.from_dict(self._rest.get(locator, "project"))
        # Parameters are absent for users without permission to view them.
        if out.parameters is not None:
            out.parameters = out.parameters.non_inherited()
        return out

    def get_by_id(self, id: str) -> Project:
        return self._read(locator_id(id))

    def get_by_name(self, name: str) -> Project:
        return self._read(locator_name(name))

    def update(self, project: Project) -> Project:
        """Update name, description, parent and parameters; not atomic."""
        return self._update(project, is_create=False)

    def delete(self, id: str) -> None:
        self._rest.delete(id, "project")

    def _update(self, project: Project, is_create: bool) -> Project:
        self._rest.put_text(f"{project.id}/name", project.name, "project name")
        self._rest.put_text(f"{project.id}/description", project.description, "project description")

        if not is_create:
            current = self.get_by_id(project.id)
            # Re-sending an unchanged parent makes TeamCity copy the project.
            wants_parent = bool(project.parent_project_id) or project.parent_project is not None
            if wants_parent and current.parent_project_id != project.parent_project_id:
                parent = project.parent_project or ProjectReference(id=project.parent_project_id)
                self._rest.put(f"{project.id}/parentProject", parent.to_dict(), "parent project")

        if project.parameters is not None and project.parameters.count > 0:
            self._rest.put(
                f"{project.id}/parameters", project.parameters.to_dict(), "project parameters"
            )

        return self.get_by_id(project.id)
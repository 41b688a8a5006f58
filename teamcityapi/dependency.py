"""Operations on the artifact dependencies of a build type."""

from __future__ import annotations

from typing import Optional

from .artifact_dependency import ArtifactDependency
from .rest import RestClient


class DependencyService:
    """Manages the artifact dependencies of one build type."""

    def __init__(self, build_type_id: str, rest: RestClient) -> None:
        self.build_type_id = build_type_id
        self._artifacts = rest.scoped(f"buildTypes/{build_type_id}/artifact-dependencies/")

    def _attach(self, data: dict) -> ArtifactDependency:
        out = ArtifactDependency.from_dict(data or {})
        out.build_type_id = self.build_type_id
        return out

    def add_artifact_dependency(self, dep: Optional[ArtifactDependency]) -> ArtifactDependency:
        if dep is None:
            raise ValueError("dep can't be nil")
        created = self._artifacts.post("", dep.to_dict(), "artifact dependency")
        return self._attach(created)

    def get_artifact_by_id(self, dep_id: str) -> ArtifactDependency:
        return self._attach(self._artifacts.get(dep_id, "artifact dependency"))

    def delete_artifact(self, dep_id: str) -> None:
        self._artifacts.delete(dep_id, "artifact dependency")
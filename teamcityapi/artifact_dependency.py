"""Artifact dependencies between build configurations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .artifact_dependency_options import ArtifactDependencyOptions
from .parameter import Properties

ARTIFACT_DEPENDENCY_TYPE = "artifact_dependency"


@dataclass
class ArtifactDependency:
    """A build type's dependency on artifacts produced by another build type."""

    source_build_type_id: str
    options: Optional[ArtifactDependencyOptions]
    id: str = ""
    disabled: bool = False
    build_type_id: str = ""

    def __post_init__(self) -> None:
        if not self.source_build_type_id:
            raise ValueError("sourceBuildTypeID is required")
        if self.options is None:
            raise ValueError("options must be valid")

    @property
    def type(self) -> str:
        return ARTIFACT_DEPENDENCY_TYPE

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"disabled": self.disabled}
        if self.id:
            out["id"] = self.id
        out["properties"] = self.options.properties().to_dict()
        out["source-buildType"] = {"id": self.source_build_type_id}
        out["type"] = self.type
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArtifactDependency":
        kind = data.get("type", "")
        if kind != ARTIFACT_DEPENDENCY_TYPE:
            raise ValueError(
                f"invalid type {kind} trying to deserialize into ArtifactDependency entity"
            )
        source = data.get("source-buildType") or {}
        return cls(
            source_build_type_id=source.get("id", ""),
            options=ArtifactDependencyOptions.from_properties(
                Properties.from_dict(data.get("properties"))
            ),
            id=data.get("id", ""),
            disabled=bool(data.get("disabled", False)),
        )
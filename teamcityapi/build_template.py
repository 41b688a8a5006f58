"""Attaching and detaching templates on a build configuration."""

from __future__ import annotations

from .build_type import BuildTypeReference
from .rest import RestClient


class BuildTemplateService:
    """Manages the templates attached to one build configuration."""

    def __init__(self, build_type_id: str, rest: RestClient) -> None:
        self.build_type_id = build_type_id
        self._rest = rest.scoped(f"buildTypes/{build_type_id}/templates/")

    def attach(self, build_template_id: str) -> BuildTypeReference:
        """Attach the template; attaching twice has no further effect."""
        body = BuildTypeReference(id=build_template_id).to_dict()
        return BuildTypeReference.from_dict(self._rest.post("", body, "attach build template"))

    def detach(self, build_template_id: str) -> None:
        self._rest.delete(build_template_id, "detach build template")
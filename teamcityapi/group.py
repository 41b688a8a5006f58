"""User groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .locator import locator_key
from .rest import RestClient


@dataclass
class Group:
    """A user group; key and name are required."""

    key: str
    name: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Key is required")
        if not self.name:
            raise ValueError("Name is required")

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"key": self.key}
        if self.description:
            out["description"] = self.description
        out["name"] = self.name
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Group":
        return cls(
            key=data.get("key", ""),
            name=data.get("name", ""),
            description=data.get("description", ""),
        )


class GroupService:
    """Operations on user groups."""

    def __init__(self, rest: RestClient) -> None:
        self._rest = rest.scoped("userGroups/")

    def create(self, group: Group) -> Group:
        return Group.from_dict(self._rest.post("", group.to_dict(), "group"))

    def get_by_key(self, key: str) -> Group:
        return Group.from_dict(self._rest.get(locator_key(key), "group"))

    def delete(self, key: str) -> None:
        self._rest.delete(locator_key(key), "group")
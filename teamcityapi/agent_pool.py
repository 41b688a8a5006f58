"""Agent pools and their project assignments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .locator import locator_id, locator_id_int, locator_name
from .project import ProjectReference
from .rest import RestClient


@dataclass
class AgentPoolReference:
    """A short reference to an agent pool."""

    id: int = 0
    name: str = ""
    href: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AgentPoolReference":
        return cls(id=data.get("id", 0), name=data.get("name", ""), href=data.get("href", ""))


@dataclass
class AgentPool:
    """An agent pool with its limit and assigned projects."""

    id: int = 0
    name: str = ""
    href: str = ""
    max_agents: Optional[int] = None
    projects: Optional[list[ProjectReference]] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AgentPool":
        projects = data.get("projects")
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            href=data.get("href", ""),
            max_agents=data.get("maxAgents"),
            projects=None
            if projects is None
            else [ProjectReference.from_dict(p) for p in projects.get("project") or []],
        )


@dataclass
class CreateAgentPool:
    """What is needed to create an agent pool; the name must be unique."""

    name: str
    max_agents: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.max_agents is not None:
            out["maxAgents"] = self.max_agents
        return out


@dataclass
class AgentPoolList:
    """A listing of agent pools."""

    count: int = 0
    href: str = ""
    agent_pools: list[AgentPoolReference] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "AgentPoolList":
        data = data or {}
        return cls(
            count=data.get("count", 0),
            href=data.get("href", ""),
            agent_pools=[AgentPoolReference.from_dict(p) for p in data.get("agentPool") or []],
        )


class AgentPoolsService:
    """Operations on agent pools. Updating a pool is not offered by the server."""

    def __init__(self, rest: RestClient) -> None:
        self._rest = rest.scoped("agentPools/")

    def assign_project(self, pool_id: int, project_id: str) -> None:
        self._rest.post(f"{locator_id_int(pool_id)}/projects", {"id": project_id}, "Agent Pool")

    def create(self, pool: CreateAgentPool) -> AgentPool:
        return AgentPool.from_dict(self._rest.post("", pool.to_dict(), "Agent Pool"))

    def delete(self, id: int) -> None:
        self._rest.delete(locator_id_int(id), "Agent Pool")

    def get_by_id(self, id: int) -> AgentPool:
        return AgentPool.from_dict(self._rest.get(locator_id_int(id), "Agent Pool"))

    def get_by_name(self, name: str) -> AgentPool:
        return AgentPool.from_dict(self._rest.get(locator_name(name), "Agent Pool"))

    def list(self) -> AgentPoolList:
        return AgentPoolList.from_dict(self._rest.get("", "Agent Pools"))

    def list_for_project(self, project_id: str) -> AgentPoolList:
        path = f"?locator=project:({locator_id(project_id)})"
        return AgentPoolList.from_dict(self._rest.get(path, "Agent Pools"))

    def unassign_project(self, pool_id: int, project_id: str) -> None:
        path = f"{locator_id_int(pool_id)}/projects/{locator_id(project_id)}"
        self._rest.delete(path, "Agent Pool")
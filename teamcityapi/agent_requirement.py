"""Agent requirements: conditions an agent must meet to run a build type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from .parameter import Properties, Property
from .rest import RestClient, TeamCityError


class Condition(str, Enum):
    """The conditions TeamCity accepts for an agent requirement."""

    EXISTS = "exists"
    NOT_EXISTS = "not-exists"
    EQUALS = "equals"
    DOES_NOT_EQUAL = "does-not-equal"
    MORE_THAN = "more-than"
    NO_MORE_THAN = "no-more-than"
    LESS_THAN = "less-than"
    NO_LESS_THAN = "no-less-than"
    STARTS_WITH = "starts-with"
    CONTAINS = "contains"
    DOES_NOT_CONTAIN = "does-not-contain"
    ENDS_WITH = "ends-with"
    MATCHES = "matches"
    DOES_NOT_MATCH = "does-not-match"
    VERSION_MORE_THAN = "ver-more-than"
    VERSION_NO_MORE_THAN = "ver-no-more-than"
    VERSION_LESS_THAN = "ver-less-than"
    VERSION_NO_LESS_THAN = "ver-no-less-than"


ConditionValue = Union[Condition, str]

_NAME_PROPERTY = "property-name"
_VALUE_PROPERTY = "property-value"


def _as_condition(value: ConditionValue) -> ConditionValue:
    try:
        return Condition(value)
    except ValueError:
        return value


def _condition_text(value: ConditionValue) -> str:
    return value.value if isinstance(value, Condition) else str(value)


@dataclass
class AgentRequirement:
    """A condition evaluated per agent to decide if it can run a build type."""

    condition: ConditionValue = ""
    properties: Optional[Properties] = None
    id: str = ""
    inherited: Optional[bool] = None
    disabled: Optional[bool] = None
    build_type_id: str = ""

    @property
    def name(self) -> str:
        """The parameter name the condition is applied to."""
        if self.properties is None:
            return ""
        return self.properties.get(_NAME_PROPERTY) or ""

    @property
    def value(self) -> str:
        """The value the parameter is compared with."""
        if self.properties is None:
            return ""
        return self.properties.get(_VALUE_PROPERTY) or ""

    @classmethod
    def create(
        cls, condition: ConditionValue, param_name: str, param_value: str = ""
    ) -> "AgentRequirement":
        """Build a requirement; every condition except 'exists' needs a value."""
        condition = _as_condition(condition)
        if condition != Condition.EXISTS and not param_value:
            raise ValueError("paramValue is required except for 'exists' condition")
        props = Properties([Property(_NAME_PROPERTY, param_name)])
        if condition != Condition.EXISTS:
            props.add(Property(_VALUE_PROPERTY, param_value))
        return cls(condition=condition, properties=props)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.id:
            out["id"] = self.id
        if self.inherited is not None:
            out["inherited"] = self.inherited
        if self.disabled is not None:
            out["disabled"] = self.disabled
        if self.condition:
            out["type"] = _condition_text(self.condition)
        if self.properties is not None:
            out["properties"] = self.properties.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AgentRequirement":
        props = data.get("properties")
        return cls(
            condition=_as_condition(data.get("type", "")),
            properties=None if props is None else Properties.from_dict(props),
            id=data.get("id", ""),
            inherited=data.get("inherited"),
            disabled=data.get("disabled"),
        )


class AgentRequirementService:
    """Operations on the agent requirements of one build type."""

    def __init__(self, build_type_id: str, rest: RestClient) -> None:
        self.build_type_id = build_type_id
        self._rest = rest.scoped(f"buildTypes/{build_type_id}/agent-requirements/")

    def _attach(self, data: dict[str, Any]) -> AgentRequirement:
        out = AgentRequirement.from_dict(data or {})
        out.build_type_id = self.build_type_id
        return out

    def create(self, requirement: AgentRequirement) -> AgentRequirement:
        created = self._rest.post("", requirement.to_dict(), "agent requirement")
        return self._attach(created)

    def get_by_id(self, id: str) -> AgentRequirement:
        try:
            data = self._rest.get(id, "agent requirement")
        except TeamCityError as exc:
            if exc.status_code == 404:
                raise TeamCityError(
                    f"404 Not Found - Trigger (id: {id}) for buildTypeId "
                    f"(id: {self.build_type_id}) was not found",
                    404,
                ) from exc
            raise
        return self._attach(data)

    def get_all(self) -> list[AgentRequirement]:
        data = self._rest.get("", "agent requirements") or {}
        return [self._attach(item) for item in data.get("agent-requirement") or []]

    def delete(self, id: str) -> None:
        self._rest.delete(id, "agent requirement")
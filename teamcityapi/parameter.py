"""Properties and typed parameters as exchanged with the TeamCity REST API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional


class ParameterType(str, Enum):
    """The kinds of parameter TeamCity knows."""

    CONFIGURATION = "configuration"
    SYSTEM = "system"
    ENVIRONMENT_VARIABLE = "env"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]


_PREFIXES = {
    ParameterType.CONFIGURATION: "",
    ParameterType.SYSTEM: "system.",
    ParameterType.ENVIRONMENT_VARIABLE: "env.",
}


@dataclass
class Property:
    """A single name/value pair."""

    name: str
    value: str = ""
    inherited: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "value": self.value}
        if self.inherited is not None:
            out["inherited"] = self.inherited
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Property":
        return cls(
            name=data.get("name", ""),
            value=data.get("value", ""),
            inherited=data.get("inherited"),
        )


@dataclass
class Properties:
    """An ordered collection of properties keyed by name."""

    items: list[Property] = field(default_factory=list)

    def __iter__(self) -> Iterator[Property]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def _find(self, name: str) -> Optional[Property]:
        return next((p for p in self.items if p.name == name), None)

    def add(self, prop: Property) -> None:
        self.items.append(prop)

    def add_or_replace_value(self, name: str, value: str) -> None:
        """Set the value of the named property, adding it if missing."""
        existing = self._find(name)
        if existing is None:
            self.items.append(Property(name, value))
        else:
            existing.value = value

    def _add_or_replace(self, prop: Property) -> None:
        existing = self._find(prop.name)
        if existing is None:
            self.items.append(prop)
        else:
            existing.value = prop.value
            existing.inherited = prop.inherited

    def get(self, name: str) -> Optional[str]:
        """Return the value of the named property, or None if absent."""
        prop = self._find(name)
        return None if prop is None else prop.value

    def remove(self, name: str) -> None:
        prop = self._find(name)
        if prop is not None:
            self.items.remove(prop)

    def to_dict(self) -> dict[str, Any]:
        return {"count": len(self.items), "property": [p.to_dict() for p in self.items]}

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "Properties":
        if not data:
            return cls()
        return cls([Property.from_dict(p) for p in data.get("property") or []])


@dataclass
class Parameter:
    """A configuration, system or environment-variable parameter."""

    type: ParameterType
    name: str
    value: str = ""
    inherited: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name is required")
        try:
            self.type = ParameterType(self.type)
        except ValueError:
            raise ValueError(
                "invalid parameter type, use one of the values defined in ParameterType"
            ) from None

    def to_property(self) -> Property:
        return Property(
            name=f"{self.type.prefix}{self.name}",
            value=self.value,
            inherited=True if self.inherited else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.to_property().to_dict()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Parameter":
        prop = Property.from_dict(data)
        name = prop.name
        kind = ParameterType.CONFIGURATION
        for candidate in (ParameterType.SYSTEM, ParameterType.ENVIRONMENT_VARIABLE):
            if name.startswith(candidate.prefix):
                name = name[len(candidate.prefix):]
                kind = candidate
                break
        return cls(kind, name, prop.value, bool(prop.inherited))


@dataclass
class Parameters:
    """An ordered collection of parameters."""

    items: list[Parameter] = field(default_factory=list)
    href: str = ""

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def count(self) -> int:
        return len(self.items)

    def add(self, param: Parameter) -> None:
        self.items.append(param)

    def add_or_replace_value(self, type: ParameterType, name: str, value: str) -> None:
        """Update the value of the parameter with this name, or add a new one."""
        for item in self.items:
            if item.name == name:
                item.value = value
                return
        self.add(Parameter(type, name, value))

    def add_or_replace_parameter(self, param: Parameter) -> None:
        self.add_or_replace_value(param.type, param.name, param.value)

    def concat(self, source: "Parameters") -> "Parameters":
        for item in source.items:
            self.add_or_replace_parameter(item)
        return self

    def remove(self, type: ParameterType, name: str) -> None:
        found = self.get(type, name)
        if found is not None:
            self.items.remove(found)

    def non_inherited(self) -> "Parameters":
        out = Parameters()
        for item in self.items:
            if not item.inherited:
                out.add_or_replace_parameter(item)
        return out

    def get(self, type: ParameterType, name: str) -> Optional[Parameter]:
        return next(
            (p for p in self.items if p.name == name and p.type == type), None
        )

    def properties(self) -> Properties:
        out = Properties()
        for item in self.items:
            out._add_or_replace(item.to_property())
        return out

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.items:
            out["count"] = len(self.items)
        if self.href:
            out["href"] = self.href
        if self.items:
            out["property"] = [p.to_dict() for p in self.items]
        return out

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "Parameters":
        if not data:
            return cls()
        return cls(
            items=[Parameter.from_dict(p) for p in data.get("property") or []],
            href=data.get("href", ""),
        )
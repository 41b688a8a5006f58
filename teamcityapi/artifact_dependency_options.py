"""Options of an artifact dependency between build configurations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .parameter import Properties

_TAG_SUFFIX = ".tcbuildtag"


class ArtifactDependencyRevision(str, Enum):
    """Which build of the source configuration artifacts are taken from."""

    LATEST_SUCCESSFUL_BUILD = "lastSuccessful"
    LATEST_PINNED_BUILD = "lastPinned"
    LATEST_FINISHED_BUILD = "lastFinished"
    BUILD_FROM_SAME_CHAIN = "sameChainOrLastFinished"
    BUILD_WITH_SPECIFIED_NUMBER = "buildNumber"
    LAST_BUILD_FINISHED_WITH_TAG = "buildTag"


RevisionType = Union[ArtifactDependencyRevision, str]


def _as_revision(value: RevisionType) -> RevisionType:
    try:
        return ArtifactDependencyRevision(value)
    except ValueError:
        return value


def _revision_text(value: RevisionType) -> str:
    return value.value if isinstance(value, ArtifactDependencyRevision) else str(value)


@dataclass
class ArtifactDependencyOptions:
    """Path rules and revision choice for an artifact dependency."""

    revision_type: RevisionType = ""
    path_rules: list[str] = field(default_factory=list)
    clean_destination: bool = False
    revision_number: str = ""

    @classmethod
    def create(
        cls,
        path_rules: list[str],
        revision_type: RevisionType,
        clean_destination: bool = False,
        revision_value: str = "",
    ) -> "ArtifactDependencyOptions":
        """Validated options; a revision value is needed for build-number and tag revisions."""
        if not path_rules:
            raise ValueError("pathRules is required")
        if not revision_type:
            raise ValueError("revisionType is required")
        revision_type = _as_revision(revision_type)
        if revision_type == ArtifactDependencyRevision.BUILD_WITH_SPECIFIED_NUMBER and not revision_value:
            raise ValueError("revisionValue is required is using 'BuildWithSpecifiedNumber'")
        if revision_type == ArtifactDependencyRevision.LAST_BUILD_FINISHED_WITH_TAG and not revision_value:
            raise ValueError("revisionValue is required is using 'LastBuildFinishedWithTag'")
        return cls(
            revision_type=revision_type,
            path_rules=list(path_rules),
            clean_destination=clean_destination,
            revision_number=revision_value,
        )

    def properties(self) -> Properties:
        props = Properties()
        props.add_or_replace_value("pathRules", "\r\n".join(self.path_rules))
        props.add_or_replace_value(
            "cleanDestinationDirectory", "true" if self.clean_destination else "false"
        )
        revision = _as_revision(self.revision_type)
        if revision == ArtifactDependencyRevision.BUILD_WITH_SPECIFIED_NUMBER:
            props.add_or_replace_value("revisionValue", self.revision_number)
        elif revision == ArtifactDependencyRevision.LAST_BUILD_FINISHED_WITH_TAG:
            props.add_or_replace_value("revisionValue", self.revision_number + _TAG_SUFFIX)
        else:
            props.add_or_replace_value("revisionValue", "latest." + _revision_text(revision))
        props.add_or_replace_value("revisionName", _revision_text(revision))
        return props

    @classmethod
    def from_properties(cls, props: Properties) -> "ArtifactDependencyOptions":
        out = cls()
        if props is None:
            return out
        if (v := props.get("revisionName")) is not None:
            out.revision_type = _as_revision(v)
        if (v := props.get("pathRules")) is not None:
            out.path_rules = v.splitlines() if v else []
        if (v := props.get("cleanDestinationDirectory")) is not None:
            out.clean_destination = v.lower() in ("true", "t", "1")
        if (v := props.get("revisionValue")) is not None:
            out.revision_number = v.removesuffix(_TAG_SUFFIX)
        return out
"""Settings of a build configuration and their property representation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .parameter import Properties

DEFAULT_BUILD_NUMBER_FORMAT = "%build.counter%"
"""TeamCity's default build number format."""

DEFAULT_BUILD_CONFIGURATION_TYPE = "REGULAR"
"""Default build configuration type; "DEPLOYMENT" and "COMPOSITE" also exist."""

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}
_BOOL_TEXT = {True: "true", False: "false"}


def _parse_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"invalid boolean value {value!r}")


def _split_rules(value: str) -> list[str]:
    return value.splitlines() if value else []


@dataclass
class BuildTypeOptions:
    """Settings of a build configuration or template."""

    allow_personal_build_triggering: bool = False
    artifact_rules: list[str] = field(default_factory=list)
    enable_hanging_builds_detection: bool = False
    enable_status_widget: bool = False
    build_counter: int = 0
    clean_build: bool = False
    build_number_format: str = ""
    build_configuration_type: str = ""
    max_simultaneous_builds: int = 0
    template: bool = False
    build_type_id: int = 0

    @classmethod
    def with_defaults(cls) -> "BuildTypeOptions":
        """Settings the TeamCity UI gives a new build configuration."""
        return cls(
            allow_personal_build_triggering=True,
            artifact_rules=[],
            enable_hanging_builds_detection=True,
            enable_status_widget=False,
            max_simultaneous_builds=0,
            build_configuration_type=DEFAULT_BUILD_CONFIGURATION_TYPE,
            build_counter=1,
            clean_build=False,
            build_number_format=DEFAULT_BUILD_NUMBER_FORMAT,
        )

    @classmethod
    def for_template(cls) -> "BuildTypeOptions":
        """Settings for a new build configuration template."""
        return cls(
            allow_personal_build_triggering=True,
            artifact_rules=[],
            enable_hanging_builds_detection=True,
            enable_status_widget=False,
            max_simultaneous_builds=0,
            build_configuration_type=DEFAULT_BUILD_CONFIGURATION_TYPE,
            build_number_format=DEFAULT_BUILD_NUMBER_FORMAT,
            template=True,
        )

    def properties(self) -> Properties:
        """Serialize to settings properties, omitting values TeamCity leaves out when default."""
        props = Properties()
        props.add_or_replace_value(
            "allowPersonalBuildTriggering", _BOOL_TEXT[bool(self.allow_personal_build_triggering)]
        )
        props.add_or_replace_value("artifactRules", "\n".join(self.artifact_rules))
        props.add_or_replace_value(
            "enableHangingBuildsDetection", _BOOL_TEXT[bool(self.enable_hanging_builds_detection)]
        )
        if self.enable_status_widget:
            props.add_or_replace_value("allowExternalStatus", "true")
        props.add_or_replace_value("buildNumberCounter", str(self.build_counter))
        if self.clean_build:
            props.add_or_replace_value("cleanBuild", "true")
        if self.build_number_format:
            props.add_or_replace_value("buildNumberPattern", self.build_number_format)
        if self.build_configuration_type:
            props.add_or_replace_value("buildConfigurationType", self.build_configuration_type)
        props.add_or_replace_value("maximumNumberOfBuilds", str(self.max_simultaneous_builds))

        # TeamCity omits these settings when they hold their default value;
        # mirror that so reads and writes stay consistent.
        if self.allow_personal_build_triggering:
            props.remove("allowPersonalBuildTriggering")
        if self.enable_hanging_builds_detection:
            props.remove("enableHangingBuildsDetection")
        if props.get("buildConfigurationType") == DEFAULT_BUILD_CONFIGURATION_TYPE:
            props.remove("buildConfigurationType")
        if props.get("buildNumberPattern") == DEFAULT_BUILD_NUMBER_FORMAT:
            props.remove("buildNumberPattern")
        if props.get("maximumNumberOfBuilds") == "0":
            props.remove("maximumNumberOfBuilds")
        if self.template:
            props.remove("buildNumberCounter")
        return props

    @classmethod
    def from_properties(cls, props: Properties, template: bool = False) -> "BuildTypeOptions":
        """Read settings properties on top of the defaults for a configuration or template."""
        out = cls.for_template() if template else cls.with_defaults()
        if props is None:
            return out

        if (v := props.get("allowPersonalBuildTriggering")) is not None:
            out.allow_personal_build_triggering = _parse_bool(v)
        if (v := props.get("artifactRules")) is not None:
            out.artifact_rules = _split_rules(v)
        if (v := props.get("enableHangingBuildsDetection")) is not None:
            out.enable_hanging_builds_detection = _parse_bool(v)
        if (v := props.get("allowExternalStatus")) is not None:
            out.enable_status_widget = _parse_bool(v)
        if (v := props.get("buildNumberCounter")) is not None:
            out.build_counter = int(v)
        if (v := props.get("cleanBuild")) is not None:
            out.clean_build = _parse_bool(v)
        if (v := props.get("buildNumberPattern")) is not None:
            out.build_number_format = v
        if (v := props.get("buildConfigurationType")) is not None:
            out.build_configuration_type = v
        if (v := props.get("maximumNumberOfBuilds")) is not None:
            out.max_simultaneous_builds = int(v)
        return out
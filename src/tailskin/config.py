"""Compiler configuration."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import StrEnum
from typing import Any

from tailskin.candidate.design_system import (
    DesignSystem,
    create_simplified_design_system,
    default_design_system,
)
from tailskin.transforms.imports import DEFAULT_EXCLUDE_PATTERNS

__all__ = [
    "CSSStrategy",
    "CompilerConfig",
    "ConfigError",
    "DEFAULT_EXCLUDE_PATTERNS",
    "InputType",
    "OutputFormat",
]


class ConfigError(ValueError):
    """Raised for an unknown option or an invalid option value."""


class InputType(StrEnum):
    SKIN = "skin"


class OutputFormat(StrEnum):
    WEB_COMPONENT = "web-component"
    REACT = "react"


class CSSStrategy(StrEnum):
    INLINE = "inline"
    VANILLA = "vanilla"
    CSS_MODULES = "css-modules"


def _coerce(enum: type[StrEnum], value: object, option: str) -> Any:
    try:
        return enum(value)
    except ValueError:
        choices = ", ".join(m.value for m in enum)
        raise ConfigError(f"invalid {option} {value!r} (expected one of: {choices})") from None


def _snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower().replace("-", "_")


@dataclass(frozen=True)
class CompilerConfig:
    input_type: InputType = InputType.SKIN
    output_format: OutputFormat = OutputFormat.WEB_COMPONENT
    css_strategy: CSSStrategy = CSSStrategy.INLINE
    package_mappings: Mapping[str, str] = field(default_factory=dict)
    component_mappings: Mapping[str, str] | None = None
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    warnings: bool = True
    indent_size: int = 2
    base_import: str = "../media-skin"
    design_system_extra: Mapping[str, Any] | None = None
    _design_system: DesignSystem = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_type", _coerce(InputType, self.input_type, "input type"))
        object.__setattr__(
            self, "output_format", _coerce(OutputFormat, self.output_format, "output format")
        )
        object.__setattr__(
            self, "css_strategy", _coerce(CSSStrategy, self.css_strategy, "CSS strategy")
        )
        if isinstance(self.exclude_patterns, str):
            raise ConfigError("exclude_patterns must be a list of patterns, not a string")
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))
        if not isinstance(self.indent_size, int) or self.indent_size < 0:
            raise ConfigError(f"indent_size must be a non-negative integer, got {self.indent_size!r}")
        for name in ("package_mappings", "component_mappings", "design_system_extra"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, Mapping):
                raise ConfigError(f"{name} must be a mapping, got {type(value).__name__}")
        if not self.design_system_extra:
            design_system = default_design_system()
        else:
            try:
                design_system = create_simplified_design_system(self.design_system_extra)
            except TypeError as exc:
                raise ConfigError(str(exc)) from exc
        object.__setattr__(self, "_design_system", design_system)

    def design_system(self) -> DesignSystem:
        """The registry for this config, shared by every file compiled with it."""
        return self._design_system

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], **overrides: Any) -> CompilerConfig:
        """Build a config from JSON-style data; camelCase keys are accepted.

        Keyword *overrides* that are not None win over *data*.

        Raises:
            ConfigError: on unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls) if f.init}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _snake(key)
            if name == "import_mappings":
                name = "package_mappings"
            if name not in known:
                raise ConfigError(f"unknown configuration option {key!r}")
            kwargs[name] = value
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**kwargs)
        except TypeError as exc:
            raise ConfigError(str(exc)) from exc

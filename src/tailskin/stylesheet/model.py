"""Stylesheet model: Declaration, StyleRule, AtRule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    property: str
    value: str
    important: bool = False

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.property}: {self.value}{suffix};"


@dataclass(frozen=True)
class StyleRule:
    """A selector paired with its declarations."""

    selector: str
    declarations: tuple[Declaration, ...] = ()


@dataclass(frozen=True)
class AtRule:
    """An at-rule such as ``@media (...) { ... }`` or ``@import url(...);``.

    ``rules`` is None for statement at-rules that have no block.
    """

    name: str  # "media", "container", "supports", ...
    params: str = ""
    rules: tuple[Rule, ...] | None = ()

    @property
    def prelude(self) -> str:
        return f"@{self.name} {self.params}".rstrip()


Rule = Union[StyleRule, AtRule]


@dataclass
class Stylesheet:
    """A collection of rules in source order."""

    rules: list[Rule] = field(default_factory=list)

"""Base types for JSX attribute transforms."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from tailskin.parser.nodes import JSXAttribute


@dataclass(frozen=True)
class AttributeContext:
    """Everything an attribute transform may look at."""

    attribute: JSXAttribute
    element_name: str
    html_element_name: str
    styles: Mapping[str, str] = field(default_factory=dict)
    component_map: Mapping[str, str] = field(default_factory=dict)
    styles_identifier: str | None = None


@dataclass(frozen=True)
class AttributeResult:
    """An HTML attribute; ``value`` None renders it bare (``hidden``)."""

    name: str
    value: str | None = None


class AttributePredicate(Protocol):
    """Decides whether a rule claims an attribute."""

    def __call__(self, context: AttributeContext) -> bool: ...


class AttributeTransform(Protocol):
    """Turns a JSX attribute into an HTML one; None drops it."""

    def __call__(self, context: AttributeContext) -> AttributeResult | None: ...

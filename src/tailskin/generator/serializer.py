"""Serialise a JSX tree as the HTML of a web-component template."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from tailskin.model.diagnostic import Diagnostic, warning
from tailskin.naming import HTML_ELEMENTS, to_custom_element_name
from tailskin.parser.nodes import (
    Identifier,
    JSXAttribute,
    JSXChild,
    JSXElement,
    JSXExpressionContainer,
    JSXFragment,
    JSXText,
    MemberExpression,
)
from tailskin.transforms.attributes import AttributeProcessorPipeline
from tailskin.transforms.base import AttributeContext

__all__ = [
    "MEDIA_SLOT",
    "SerializeOptions",
    "build_component_map",
    "serialize_to_html",
]

logger = logging.getLogger(__name__)

MEDIA_SLOT = '<slot name="media" slot="media"></slot>'


@dataclass(frozen=True)
class SerializeOptions:
    indent: int = 0
    indent_size: int = 2
    styles: Mapping[str, str] = field(default_factory=dict)
    component_map: Mapping[str, str] = field(default_factory=dict)
    styles_identifier: str | None = None
    pipeline: AttributeProcessorPipeline | None = None


def _flatten(children: tuple[JSXChild, ...]) -> Iterator[JSXChild]:
    for child in children:
        if isinstance(child, JSXFragment):
            yield from _flatten(child.children)
        else:
            yield child


def _is_children(child: JSXExpressionContainer) -> bool:
    return isinstance(child.expression, Identifier) and child.expression.name == "children"


def _escape_attribute(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;")


class _Serializer:
    def __init__(self, options: SerializeOptions, diagnostics: list[Diagnostic]):
        self.options = options
        self.pipeline = options.pipeline or AttributeProcessorPipeline()
        self.diagnostics = diagnostics

    def attributes(self, element: JSXElement, tag: str) -> str:
        out = []
        for attr in element.attributes:
            if not isinstance(attr, JSXAttribute):
                self.diagnostics.append(
                    warning("spread-attribute", f"spread attribute on <{element.name}> dropped", token=attr.code or None)
                )
                continue
            context = AttributeContext(
                attribute=attr,
                element_name=element.name,
                html_element_name=tag,
                styles=self.options.styles,
                component_map=self.options.component_map,
                styles_identifier=self.options.styles_identifier,
            )
            result = self.pipeline.process(context)
            if result is None:
                continue
            if result.value is None:
                out.append(f" {result.name}")
            else:
                out.append(f' {result.name}="{_escape_attribute(result.value)}"')
        return "".join(out)

    def element(self, element: JSXElement, depth: int) -> str:
        unit = " " * self.options.indent_size
        pad = " " * self.options.indent + unit * depth
        child_pad = pad + unit
        tag = to_custom_element_name(element.name)
        opening = f"{pad}<{tag}{self.attributes(element, tag)}>"

        blocks: list[str] = []
        texts: list[str] = []
        for child in _flatten(element.children):
            if isinstance(child, JSXElement):
                blocks.append(self.element(child, depth + 1))
            elif isinstance(child, JSXText):
                text = " ".join(child.value.split())
                if text:
                    texts.append(text)
                    blocks.append(child_pad + text)
            elif isinstance(child, JSXExpressionContainer):
                if child.expression is None:
                    continue
                if _is_children(child):
                    blocks.append(child_pad + MEDIA_SLOT)
                    continue
                self.diagnostics.append(
                    warning(
                        "dropped-expression",
                        f"expression child of <{element.name}> has no HTML form and was dropped",
                        token=child.code or None,
                    )
                )

        if len(blocks) == len(texts):
            return f"{opening}{' '.join(texts)}</{tag}>"
        return "\n".join([opening, *blocks, f"{pad}</{tag}>"])


def serialize_to_html(
    element: JSXElement,
    options: SerializeOptions | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> str:
    """Render *element* and its descendants as indented HTML.

    Attributes go through the attribute pipeline.  ``{children}`` becomes the
    media slot; other expression children are dropped and reported in
    *diagnostics* when a list is given.
    """
    sink: list[Diagnostic] = [] if diagnostics is None else diagnostics
    html = _Serializer(options or SerializeOptions(), sink).element(element, 0)
    logger.debug("serialised <%s> with %d diagnostics", element.name, len(sink))
    return html


def _iter_elements(element: JSXElement) -> Iterator[JSXElement]:
    yield element
    for child in _flatten(element.children):
        if isinstance(child, JSXElement):
            yield from _iter_elements(child)


def _class_keys(element: JSXElement, styles_identifier: str | None) -> list[str]:
    attr = element.attribute("className")
    if attr is None or not isinstance(attr.value, JSXExpressionContainer):
        return []
    keys = []
    stack = [attr.value.expression]
    while stack:
        node = stack.pop()
        if (
            isinstance(node, MemberExpression)
            and isinstance(node.object, Identifier)
            and node.object.name == styles_identifier
        ):
            keys.append(node.property)
        elif node is not None:
            for name in ("arguments", "expressions"):
                stack.extend(getattr(node, name, ()))
            for name in ("consequent", "alternate", "left", "right"):
                stack.append(getattr(node, name, None))
    return keys


def build_component_map(element: JSXElement, styles_identifier: str | None) -> dict[str, str]:
    """Style keys that name the component element they are applied to.

    ``<PlayButton className={styles.PlayButton}>`` maps ``PlayButton`` to
    ``media-play-button``, so its CSS can target the element directly.
    Keys are compared case-insensitively with member tags joined
    (``TimeRange.Root`` matches ``TimeRangeRoot``).
    """
    component_map: dict[str, str] = {}
    for node in _iter_elements(element):
        if node.name in HTML_ELEMENTS:
            continue
        flat = node.name.replace(".", "").lower()
        for key in _class_keys(node, styles_identifier):
            if key.replace("-", "").replace("_", "").lower() == flat:
                component_map.setdefault(key, to_custom_element_name(node.name))
    return component_map

"""Name conversions between JSX/React conventions and HTML ones."""

from __future__ import annotations

import re

__all__ = [
    "HTML_ELEMENTS",
    "CUSTOM_ELEMENT_PREFIX",
    "to_kebab_case",
    "to_custom_element_name",
    "to_attribute_name",
    "to_pascal_case",
]

CUSTOM_ELEMENT_PREFIX = "media-"

HTML_ELEMENTS = frozenset(
    {
        "a", "abbr", "article", "aside", "audio", "b", "blockquote", "body", "br",
        "button", "canvas", "caption", "code", "dd", "details", "dialog", "div", "dl",
        "dt", "em", "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2",
        "h3", "h4", "h5", "h6", "header", "hr", "i", "iframe", "img", "input", "label",
        "legend", "li", "main", "menu", "nav", "ol", "optgroup", "option", "output",
        "p", "picture", "pre", "progress", "section", "select", "slot", "small",
        "source", "span", "strong", "sub", "summary", "sup", "table", "tbody", "td",
        "template", "textarea", "tfoot", "th", "thead", "time", "tr", "track", "u",
        "ul", "video",
        # SVG
        "svg", "g", "path", "circle", "rect", "line", "polyline", "polygon", "defs",
        "use", "symbol", "clipPath", "mask", "linearGradient", "stop", "text",
    }
)

# React property names whose HTML attribute is not simply kebab-cased.
_ATTRIBUTE_NAMES = {
    "className": "class",
    "htmlFor": "for",
    "tabIndex": "tabindex",
    "readOnly": "readonly",
    "autoPlay": "autoplay",
    "autoFocus": "autofocus",
    "playsInline": "playsinline",
    "crossOrigin": "crossorigin",
    "contentEditable": "contenteditable",
    "spellCheck": "spellcheck",
    "maxLength": "maxlength",
    "srcSet": "srcset",
    "viewBox": "viewBox",
    "xlinkHref": "xlink:href",
    "preserveAspectRatio": "preserveAspectRatio",
}

_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATOR_RE = re.compile(r"[\s._]+")


def to_kebab_case(name: str) -> str:
    """``PlayButton`` -> ``play-button``; ``TimeRange.Root`` -> ``time-range-root``."""
    text = _ACRONYM_RE.sub(r"\1-\2", name)
    text = _LOWER_UPPER_RE.sub(r"\1-\2", text)
    text = _SEPARATOR_RE.sub("-", text)
    return re.sub(r"-{2,}", "-", text).strip("-").lower()


def to_pascal_case(name: str) -> str:
    """``play-button`` -> ``PlayButton``."""
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"[-_\s.]+", name) if part)


def to_custom_element_name(name: str) -> str:
    """Map a JSX tag to an HTML tag.

    Built-in elements are kept; components become ``media-`` prefixed
    custom elements (``MediaContainer`` keeps a single prefix).
    """
    if name in HTML_ELEMENTS or ("-" in name and name == name.lower()):
        return name
    kebab = to_kebab_case(name)
    if kebab.startswith(CUSTOM_ELEMENT_PREFIX):
        return kebab
    return CUSTOM_ELEMENT_PREFIX + kebab


def to_attribute_name(name: str) -> str:
    """Map a JSX attribute name to its HTML spelling."""
    if name in _ATTRIBUTE_NAMES:
        return _ATTRIBUTE_NAMES[name]
    if name.startswith(("aria-", "data-")) or name == name.lower():
        return name
    return to_kebab_case(name)

"""Decoding and best-effort validation of bracketed arbitrary values."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from tailskin.candidate.segment import is_balanced

__all__ = [
    "DecodedValue",
    "decode_arbitrary_value",
    "classify_arbitrary_value",
    "is_valid_arbitrary",
    "underscores_to_spaces",
    "TYPE_HINTS",
]

logger = logging.getLogger(__name__)

# Explicit ``type:`` prefixes accepted inside brackets, e.g. ``text-[length:1rem]``.
TYPE_HINTS = frozenset(
    {
        "length", "percentage", "number", "integer", "color", "url", "image",
        "position", "size", "family-name", "line-width", "shadow", "angle",
        "absolute-size", "relative-size", "vector",
    }
)

_PERCENT_ESCAPE_RE = re.compile(r"%([0-9A-Fa-f]{2})")
_HINT_RE = re.compile(r"^(?P<hint>[a-z][a-z-]*):(?P<rest>.+)$", re.DOTALL)

_NUMBER_RE = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)$")
_LENGTH_RE = re.compile(
    r"^-?(?:\d+\.?\d*|\.\d+)"
    r"(?:px|rem|em|vh|vw|vmin|vmax|dvh|dvw|svh|lvh|ch|ex|lh|cqw|cqh|cqi|cqb|pt|pc|cm|mm|in|fr)$"
)
_PERCENT_RE = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)%$")
_MATH_RE = re.compile(r"^(?:calc|min|max|clamp)\(")
_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_COLOR_FN_RE = re.compile(r"^(?:rgba?|hsla?|hwb|lab|lch|oklab|oklch|color|color-mix)\(")
_IMAGE_RE = re.compile(r"^(?:(?:repeating-)?(?:linear|radial|conic)-gradient|image-set|image)\(")
_SELECTOR_START = (":", ".", "#", ">", "~", "+", "[", "@", "*")

_NAMED_COLORS = frozenset(
    {
        "transparent", "currentcolor", "black", "white", "red", "green", "blue",
        "yellow", "orange", "purple", "pink", "gray", "grey", "silver", "navy",
        "teal", "aqua", "lime", "maroon", "olive", "fuchsia", "inherit",
    }
)

# Classifications each expected type tolerates.
_COMPATIBLE = {
    "length": {"length", "percentage", "number"},
    "percentage": {"percentage"},
    "number": {"number"},
    "integer": {"number"},
    "color": {"color"},
    "url": {"url"},
    "image": {"image", "url"},
    "selector": {"selector"},
}


@dataclass(frozen=True)
class DecodedValue:
    """The decoded content of a ``[...]`` value and its inferred type."""

    value: str
    data_type: str | None = None


def classify_arbitrary_value(value: str) -> str | None:
    """Infer the CSS data type of *value*, or None when it is not recognised."""
    value = value.strip()
    if not value:
        return None
    if value.startswith("var(") or value.startswith("--"):
        return "custom-property"
    if _NUMBER_RE.match(value):
        return "number"
    if _PERCENT_RE.match(value):
        return "percentage"
    if _LENGTH_RE.match(value) or _MATH_RE.match(value):
        return "length"
    if _HEX_RE.match(value) or _COLOR_FN_RE.match(value) or value.lower() in _NAMED_COLORS:
        return "color"
    if value.startswith("url("):
        return "url"
    if _IMAGE_RE.match(value):
        return "image"
    if "&" in value or value.startswith(_SELECTOR_START):
        return "selector"
    return None


def decode_arbitrary_value(raw: str) -> DecodedValue | None:
    """Decode the content between ``[`` and ``]`` of an arbitrary value.

    Returns None for empty or unbalanced content.  ``%XX`` escapes are
    decoded, and a leading ``type:`` hint (``length:var(--w)``) overrides the
    inferred data type.
    """
    if not raw or not raw.strip() or not is_balanced(raw):
        return None

    data_type: str | None = None
    match = _HINT_RE.match(raw)
    if match and match.group("hint") in TYPE_HINTS:
        data_type = match.group("hint")
        raw = match.group("rest")

    value = _PERCENT_ESCAPE_RE.sub(lambda m: chr(int(m.group(1), 16)), raw)
    if data_type is None:
        data_type = classify_arbitrary_value(value)
    return DecodedValue(value=value, data_type=data_type)


def is_valid_arbitrary(value: str, expected_type: str) -> bool:
    """Check *value* against *expected_type* without ever raising.

    Values that cannot be classified, and custom-property references, are
    accepted as valid but unverified.
    """
    data_type = classify_arbitrary_value(value)
    if data_type is None or data_type == "custom-property":
        logger.debug("arbitrary value %r accepted unverified as %s", value, expected_type)
        return True
    allowed = _COMPATIBLE.get(expected_type, {expected_type})
    return data_type in allowed


def underscores_to_spaces(value: str) -> str:
    """Turn ``_`` into spaces, keeping escaped ``\\_`` as a literal underscore."""
    out: list[str] = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch == "\\" and i + 1 < len(value) and value[i + 1] == "_":
            out.append("_")
            i += 2
            continue
        out.append(" " if ch == "_" else ch)
        i += 1
    return "".join(out)

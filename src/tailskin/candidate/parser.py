"""Parse utility-class tokens into :class:`~tailskin.model.Candidate` values.

Parsing is total: every function here returns None for input it cannot make
sense of and never raises.  ``format_candidate`` is the inverse direction and
produces a token that parses back to an equal candidate.
"""

from __future__ import annotations

import re

from tailskin.candidate.arbitrary import (
    classify_arbitrary_value,
    decode_arbitrary_value,
)
from tailskin.candidate.design_system import DesignSystem
from tailskin.candidate.segment import is_balanced, segment
from tailskin.model.candidate import (
    ArbitraryUtilityValue,
    Candidate,
    Modifier,
    NamedUtilityValue,
    UtilityValue,
    Variant,
)

__all__ = ["parse_candidate", "parse_variant", "format_candidate", "format_variant"]

_NAMED_VALUE_RE = re.compile(r"^[A-Za-z0-9._%]+(?:-[A-Za-z0-9._%]+)*$")
_NAMED_MODIFIER_RE = re.compile(r"^[A-Za-z0-9._-]+$")
_PROPERTY_RE = re.compile(r"^(?:--[A-Za-z0-9_-]+|-?[a-z][a-z-]*)$")
_INTEGER_RE = re.compile(r"^\d+$")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _dash_positions(text: str) -> list[int]:
    """Indices of ``-`` outside brackets, rightmost first.

    Trying split points from the right tries the longest root first.
    """
    positions: list[int] = []
    depth = 0
    for i, ch in enumerate(text):
        if ch in "[(":
            depth += 1
        elif ch in "])":
            depth -= 1
        elif ch == "-" and depth == 0 and 0 < i < len(text) - 1:
            positions.append(i)
    positions.reverse()
    return positions


def _split_modifier(text: str) -> tuple[str, str | None] | None:
    parts = segment(text, "/")
    if len(parts) == 1:
        return text, None
    if len(parts) == 2 and parts[0] and parts[1]:
        return parts[0], parts[1]
    return None


def _parse_modifier(raw: str) -> Modifier | None:
    if raw.startswith("[") and raw.endswith("]"):
        decoded = decode_arbitrary_value(raw[1:-1])
        return Modifier(kind="arbitrary", value=decoded.value) if decoded else None
    if raw.startswith("(") and raw.endswith(")"):
        inner = raw[1:-1]
        return Modifier(kind="arbitrary", value=f"var({inner})") if inner.startswith("--") else None
    if _NAMED_MODIFIER_RE.match(raw):
        return Modifier(kind="named", value=raw)
    return None


def _parse_value(raw: str) -> UtilityValue | None:
    if raw.startswith("[") and raw.endswith("]"):
        decoded = decode_arbitrary_value(raw[1:-1])
        if decoded is None:
            return None
        return ArbitraryUtilityValue(value=decoded.value, data_type=decoded.data_type)
    if raw.startswith("(") and raw.endswith(")"):
        inner = raw[1:-1]
        if not inner.startswith("--") or len(inner) < 3:
            return None
        return ArbitraryUtilityValue(value=f"var({inner})", data_type="custom-property")
    if _NAMED_VALUE_RE.match(raw):
        return NamedUtilityValue(value=raw)
    return None


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


def parse_variant(raw: str, design_system: DesignSystem) -> Variant | None:
    """Parse one variant segment (the part before a ``:``)."""
    if not raw or not is_balanced(raw):
        return None
    variants = design_system.variants

    if raw.startswith("[") and raw.endswith("]"):
        selector = raw[1:-1]
        if not selector or not ("&" in selector or selector.startswith("@")):
            return None
        return Variant(kind="arbitrary", selector=selector)

    if raw in variants.static:
        return Variant(kind="static", root=raw)

    split = _split_modifier(raw)
    if split is None:
        return None
    base, modifier_raw = split
    modifier = None
    if modifier_raw is not None:
        modifier = _parse_modifier(modifier_raw)
        if modifier is None:
            return None

    if base.startswith("@") and variants.kind(base) == "functional":
        value = _parse_value(base[1:]) if len(base) > 1 else None
        if value is None:
            return None
        return Variant(kind="functional", root="@", value=value, modifier=modifier)

    for pos in _dash_positions(base):
        root, rest = base[:pos], base[pos + 1 :]
        if root in variants.compound:
            inner = parse_variant(rest, design_system)
            if inner is not None:
                return Variant(kind="compound", root=root, modifier=modifier, variant=inner)
        elif root in variants.functional:
            value = _parse_value(rest)
            if value is not None:
                return Variant(kind="functional", root=root, value=value, modifier=modifier)
    return None


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def _parse_arbitrary_property(
    base: str, modifier: Modifier | None
) -> tuple[str, str, UtilityValue | None, Modifier | None] | None:
    parts = segment(base[1:-1], ":")
    if len(parts) < 2:
        return None
    prop, value = parts[0], ":".join(parts[1:])
    if not _PROPERTY_RE.match(prop) or not value:
        return None
    decoded = decode_arbitrary_value(value)
    if decoded is None:
        return None
    return "arbitrary", prop, ArbitraryUtilityValue(decoded.value, decoded.data_type), modifier


def _parse_utility(
    text: str, design_system: DesignSystem
) -> tuple[str, str, UtilityValue | None, Modifier | None] | None:
    utilities = design_system.utilities
    split = _split_modifier(text)
    if split is None:
        return None
    base, modifier_raw = split
    modifier = None
    if modifier_raw is not None:
        modifier = _parse_modifier(modifier_raw)
        if modifier is None:
            return None

    if base.startswith("[") and base.endswith("]"):
        return _parse_arbitrary_property(base, modifier)

    if utilities.has(base, "static") and (
        modifier is None or utilities.accepts_modifier(base)
    ):
        return "static", base, None, modifier

    for pos in _dash_positions(base):
        root, rest = base[:pos], base[pos + 1 :]
        if not utilities.has(root, "functional"):
            continue
        value = _parse_value(rest)
        if value is None:
            continue
        if (
            isinstance(value, NamedUtilityValue)
            and modifier is not None
            and modifier.kind == "named"
            and _INTEGER_RE.match(value.value)
            and _INTEGER_RE.match(modifier.value)
        ):
            fraction = f"{value.value}/{modifier.value}"
            return "functional", root, NamedUtilityValue(fraction, fraction=fraction), None
        return "functional", root, value, modifier
    return None


def parse_candidate(raw: str, design_system: DesignSystem) -> Candidate | None:
    """Parse a single class token, or return None if it is not a utility.

    Leading ``!`` marks the candidate important and leading ``-`` negative;
    both markers are also accepted directly on the utility segment
    (``hover:!flex``, ``hover:-mt-2``, ``flex!``).  Every segment before the
    last is parsed as a variant and all of them must resolve.
    """
    if not raw or not is_balanced(raw):
        return None

    text = raw
    important = negative = False
    if text.startswith("!"):
        important, text = True, text[1:]
    if text.startswith("-"):
        negative, text = True, text[1:]

    parts = segment(text, ":")
    if any(not part for part in parts):
        return None

    utility = parts[-1]
    if utility.startswith("!"):
        important, utility = True, utility[1:]
    elif utility.endswith("!"):
        important, utility = True, utility[:-1]
    if utility.startswith("-"):
        negative, utility = True, utility[1:]
    if not utility:
        return None

    variants: list[Variant] = []
    for part in parts[:-1]:
        variant = parse_variant(part, design_system)
        if variant is None:
            return None
        variants.append(variant)

    resolved = _parse_utility(utility, design_system)
    if resolved is None:
        return None
    kind, root, value, modifier = resolved
    if negative and kind != "functional":
        return None

    return Candidate(
        kind=kind,
        root=root,
        value=value,
        modifier=modifier,
        variants=tuple(variants),
        important=important,
        negative=negative,
        raw=raw,
    )


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


def _format_value(value: UtilityValue) -> str:
    if isinstance(value, NamedUtilityValue):
        return value.fraction or value.value
    if value.data_type and classify_arbitrary_value(value.value) != value.data_type:
        return f"[{value.data_type}:{value.value}]"
    return f"[{value.value}]"


def _format_modifier(modifier: Modifier | None) -> str:
    if modifier is None:
        return ""
    if modifier.kind == "arbitrary":
        return f"/[{modifier.value}]"
    return f"/{modifier.value}"


def format_variant(variant: Variant) -> str:
    """Serialise a variant back to its token form."""
    if variant.kind == "arbitrary":
        return f"[{variant.selector}]"
    if variant.kind == "static":
        return variant.root
    if variant.kind == "compound" and variant.variant is not None:
        text = f"{variant.root}-{format_variant(variant.variant)}"
    elif variant.root == "@" and variant.value is not None:
        text = f"@{_format_value(variant.value)}"
    elif variant.value is not None:
        text = f"{variant.root}-{_format_value(variant.value)}"
    else:
        text = variant.root
    return text + _format_modifier(variant.modifier)


def format_candidate(candidate: Candidate) -> str:
    """Serialise a candidate back to a token that parses to an equal candidate."""
    if candidate.kind == "arbitrary" and candidate.value is not None:
        utility = f"[{candidate.root}:{candidate.value.value}]"
    elif candidate.kind == "functional" and candidate.value is not None:
        utility = f"{candidate.root}-{_format_value(candidate.value)}"
    else:
        utility = candidate.root
    utility += _format_modifier(candidate.modifier)
    if candidate.negative:
        utility = "-" + utility

    prefix = "!" if candidate.important else ""
    variants = "".join(f"{format_variant(v)}:" for v in candidate.variants)
    return f"{prefix}{variants}{utility}"

"""Turn a candidate's variant stack into a selector and enclosing at-rules."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from tailskin.candidate.arbitrary import underscores_to_spaces
from tailskin.candidate.parser import format_variant
from tailskin.css.theme import DEFAULT_THEME, Theme
from tailskin.model.candidate import ArbitraryUtilityValue, NamedUtilityValue, Variant

__all__ = [
    "PSEUDO_CLASSES",
    "PSEUDO_ELEMENTS",
    "ResolvedSelector",
    "SelectorContext",
    "UnsupportedVariantError",
    "apply_variants",
]

PSEUDO_CLASSES: dict[str, str] = {
    "hover": ":hover",
    "focus": ":focus",
    "focus-visible": ":focus-visible",
    "focus-within": ":focus-within",
    "active": ":active",
    "visited": ":visited",
    "target": ":target",
    "disabled": ":disabled",
    "enabled": ":enabled",
    "checked": ":checked",
    "indeterminate": ":indeterminate",
    "required": ":required",
    "invalid": ":invalid",
    "valid": ":valid",
    "placeholder-shown": ":placeholder-shown",
    "read-only": ":read-only",
    "empty": ":empty",
    "first": ":first-child",
    "last": ":last-child",
    "only": ":only-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
    "first-of-type": ":first-of-type",
    "last-of-type": ":last-of-type",
    "open": ":is([open], :popover-open)",
    "inert": ":is([inert], [inert] *)",
    "rtl": ':where(:dir(rtl), [dir="rtl"], [dir="rtl"] *)',
    "ltr": ':where(:dir(ltr), [dir="ltr"], [dir="ltr"] *)',
}

PSEUDO_ELEMENTS: dict[str, str] = {
    "before": "::before",
    "after": "::after",
    "placeholder": "::placeholder",
    "selection": "::selection",
    "marker": "::marker",
    "file": "::file-selector-button",
    "backdrop": "::backdrop",
    "first-letter": "::first-letter",
    "first-line": "::first-line",
}

_MEDIA_FEATURES: dict[str, str] = {
    "dark": "(prefers-color-scheme: dark)",
    "motion-safe": "(prefers-reduced-motion: no-preference)",
    "motion-reduce": "(prefers-reduced-motion: reduce)",
    "contrast-more": "(prefers-contrast: more)",
    "contrast-less": "(prefers-contrast: less)",
    "print": "print",
    "portrait": "(orientation: portrait)",
    "landscape": "(orientation: landscape)",
    "pointer-fine": "(pointer: fine)",
    "pointer-coarse": "(pointer: coarse)",
}

_AT_RULE_NAME_RE = re.compile(r"^@([a-zA-Z-]+)\s*")


class UnsupportedVariantError(Exception):
    """Raised when a parsed variant has no selector translation."""

    def __init__(self, variant: Variant, reason: str = "has no CSS translation"):
        self.variant = variant
        super().__init__(f"variant '{format_variant(variant)}' {reason}")


@dataclass(frozen=True)
class SelectorContext:
    """Anchors registered by ``group``/``peer`` markers, keyed by name (``""`` for unnamed)."""

    groups: Mapping[str, str] = field(default_factory=dict)
    peers: Mapping[str, str] = field(default_factory=dict)
    theme: Theme = DEFAULT_THEME


@dataclass(frozen=True)
class ResolvedSelector:
    """A selector plus the at-rule preludes wrapping it, outermost first."""

    selector: str
    at_rules: tuple[str, ...] = ()
    pseudo_element: str | None = None


def _value_text(variant: Variant) -> str | None:
    value = variant.value
    if isinstance(value, ArbitraryUtilityValue):
        return underscores_to_spaces(value.value)
    if isinstance(value, NamedUtilityValue):
        return value.value
    return None


def _anchor(kind: str, name: str, context: SelectorContext) -> str:
    registered = context.groups if kind == "group" else context.peers
    if name in registered:
        return registered[name]
    return f".{kind}\\/{name}" if name else f".{kind}"


def _functional(variant: Variant, selector: str, context: SelectorContext) -> tuple[str, str | None]:
    """Return ``(selector, at_rule)`` for a functional variant."""
    text = _value_text(variant)
    arbitrary = isinstance(variant.value, ArbitraryUtilityValue)
    theme = context.theme
    if text is None:
        raise UnsupportedVariantError(variant)

    if variant.root == "data":
        return f"{selector}[data-{text}]", None
    if variant.root == "aria":
        return (f"{selector}[aria-{text}]" if arbitrary else f'{selector}[aria-{text}="true"]'), None
    if variant.root == "has" and arbitrary:
        return f"{selector}:has({text})", None
    if variant.root == "nth" and (arbitrary or text.isdigit()):
        return f"{selector}:nth-child({text})", None
    if variant.root == "supports":
        condition = text if ":" in text or text.startswith("(") else f"{text}: var(--tw)"
        if not condition.startswith("("):
            condition = f"({condition})"
        return selector, f"@supports {condition}"
    if variant.root in ("min", "max"):
        width = text if arbitrary else theme.breakpoints.get(text)
        if width is None:
            raise UnsupportedVariantError(variant, "uses an unknown breakpoint")
        operator = ">=" if variant.root == "min" else "<"
        return selector, f"@media (width {operator} {width})"
    if variant.root == "@":
        width = text if arbitrary else theme.containers.get(text)
        if width is None:
            raise UnsupportedVariantError(variant, "uses an unknown container size")
        name = f"{variant.modifier.value} " if variant.modifier else ""
        return selector, f"@container {name}(width >= {width})"
    raise UnsupportedVariantError(variant)


def _apply_one(
    variant: Variant, selector: str, context: SelectorContext
) -> tuple[str, list[str], str | None]:
    """Apply one variant; returns the new selector, new at-rules and any pseudo-element."""
    if variant.kind == "static":
        root = variant.root
        if root in PSEUDO_CLASSES:
            return selector + PSEUDO_CLASSES[root], [], None
        if root in PSEUDO_ELEMENTS:
            return selector + PSEUDO_ELEMENTS[root], [], root
        if root in context.theme.breakpoints:
            return selector, [f"@media (width >= {context.theme.breakpoints[root]})"], None
        if root in _MEDIA_FEATURES:
            return selector, [f"@media {_MEDIA_FEATURES[root]}"], None
        raise UnsupportedVariantError(variant)

    if variant.kind == "arbitrary":
        fragment = underscores_to_spaces(variant.selector)
        if fragment.startswith("@"):
            return selector, [_AT_RULE_NAME_RE.sub(r"@\1 ", fragment).strip()], None
        return fragment.replace("&", selector), [], None

    if variant.kind == "functional":
        new_selector, at_rule = _functional(variant, selector, context)
        return new_selector, [at_rule] if at_rule else [], None

    if variant.kind == "compound" and variant.variant is not None:
        inner = variant.variant
        if variant.root in ("group", "peer"):
            name = variant.modifier.value if variant.modifier else ""
            anchor = _anchor(variant.root, name, context)
            anchored, at_rules, _ = _apply_one(inner, anchor, context)
            combinator = " " if variant.root == "group" else " ~ "
            return f"{anchored}{combinator}{selector}", at_rules, None
        if variant.root == "not":
            negated, at_rules, _ = _apply_one(inner, "", context)
            if at_rules or not negated:
                raise UnsupportedVariantError(variant, "cannot negate an at-rule")
            return f"{selector}:not({negated})", [], None
    raise UnsupportedVariantError(variant)


def apply_variants(
    base_selector: str,
    variants: tuple[Variant, ...],
    context: SelectorContext | None = None,
) -> ResolvedSelector:
    """Apply *variants* left to right to *base_selector*.

    Raises:
        UnsupportedVariantError: if a variant has no CSS translation.
    """
    context = context or SelectorContext()
    selector = base_selector
    at_rules: list[str] = []
    pseudo_element: str | None = None
    for variant in variants:
        selector, new_at_rules, element = _apply_one(variant, selector, context)
        at_rules.extend(new_at_rules)
        pseudo_element = element or pseudo_element
    return ResolvedSelector(selector=selector, at_rules=tuple(at_rules), pseudo_element=pseudo_element)

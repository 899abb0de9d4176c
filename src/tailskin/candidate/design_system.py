"""The design-system registry: which utility and variant roots exist.

The registry answers membership questions only ("is ``hover`` a static
variant?", "is ``bg`` a functional utility?"); turning a parsed candidate into
CSS is the job of :mod:`tailskin.css`.  Instances are immutable and safe to
share between compilations.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache

__all__ = [
    "DesignSystem",
    "UtilityRegistry",
    "VariantRegistry",
    "create_simplified_design_system",
    "default_design_system",
    "STATIC_UTILITIES",
    "FUNCTIONAL_UTILITIES",
    "MODIFIER_UTILITIES",
    "STATIC_VARIANTS",
    "FUNCTIONAL_VARIANTS",
    "COMPOUND_VARIANTS",
]

STATIC_UTILITIES: frozenset[str] = frozenset(
    {
        # display and position
        "block", "inline-block", "inline", "flex", "inline-flex", "grid",
        "inline-grid", "contents", "hidden", "table",
        "static", "fixed", "absolute", "relative", "sticky",
        "visible", "invisible", "collapse", "isolate",
        "sr-only", "not-sr-only",
        # flexbox and alignment
        "flex-row", "flex-row-reverse", "flex-col", "flex-col-reverse",
        "flex-wrap", "flex-nowrap", "flex-wrap-reverse",
        "flex-auto", "flex-initial", "flex-none", "grow", "shrink",
        "items-start", "items-end", "items-center", "items-baseline", "items-stretch",
        "justify-start", "justify-end", "justify-center", "justify-between",
        "justify-around", "justify-evenly",
        "self-auto", "self-start", "self-end", "self-center", "self-stretch",
        "content-start", "content-end", "content-center", "content-between",
        "place-items-center", "place-content-center",
        # overflow and interaction
        "overflow-hidden", "overflow-visible", "overflow-auto", "overflow-scroll",
        "overflow-clip", "overflow-x-hidden", "overflow-y-hidden",
        "overflow-x-auto", "overflow-y-auto",
        "pointer-events-none", "pointer-events-auto",
        "select-none", "select-text", "select-all", "select-auto",
        "cursor-pointer", "cursor-default", "cursor-not-allowed", "cursor-grab",
        "cursor-text", "cursor-move",
        "appearance-none", "will-change-transform",
        # typography
        "text-left", "text-center", "text-right", "text-justify",
        "truncate", "uppercase", "lowercase", "capitalize", "normal-case",
        "italic", "not-italic", "underline", "line-through", "no-underline",
        "whitespace-nowrap", "whitespace-normal", "whitespace-pre",
        "tabular-nums", "antialiased", "subpixel-antialiased",
        "text-ellipsis", "text-clip", "break-words", "break-all", "text-shadow",
        # box, borders and effects
        "box-border", "box-content",
        "rounded", "rounded-full", "rounded-none",
        "border", "border-solid", "border-dashed", "border-dotted", "border-none",
        "outline", "outline-none", "outline-hidden",
        "shadow", "shadow-none", "ring", "ring-inset",
        "blur", "backdrop-blur", "drop-shadow", "grayscale", "invert",
        "object-cover", "object-contain", "object-fill", "object-none",
        "aspect-square", "aspect-video", "aspect-auto",
        "bg-cover", "bg-contain", "bg-center", "bg-no-repeat",
        # transitions
        "transition", "transition-all", "transition-colors", "transition-opacity",
        "transition-transform", "transition-shadow", "transition-none",
        "ease-linear", "ease-in", "ease-out", "ease-in-out",
        # markers
        "group", "peer", "@container",
    }
)

FUNCTIONAL_UTILITIES: frozenset[str] = frozenset(
    {
        "p", "px", "py", "pt", "pr", "pb", "pl", "ps", "pe",
        "m", "mx", "my", "mt", "mr", "mb", "ml", "ms", "me",
        "gap", "gap-x", "gap-y",
        "inset", "inset-x", "inset-y", "top", "right", "bottom", "left", "start", "end",
        "w", "h", "size", "min-w", "min-h", "max-w", "max-h", "basis",
        "bg", "text", "font", "leading", "tracking", "text-shadow",
        "rounded", "rounded-t", "rounded-r", "rounded-b", "rounded-l",
        "rounded-tl", "rounded-tr", "rounded-bl", "rounded-br",
        "border", "border-t", "border-r", "border-b", "border-l", "border-x", "border-y",
        "ring", "ring-offset", "outline", "outline-offset",
        "shadow", "opacity", "z", "order", "flex", "grow", "shrink",
        "grid-cols", "grid-rows", "col-span", "row-span",
        "duration", "delay", "ease", "transition",
        "scale", "scale-x", "scale-y", "rotate", "translate-x", "translate-y",
        "blur", "backdrop-blur", "brightness", "contrast", "saturate", "drop-shadow",
        "fill", "stroke", "from", "via", "to",
        "aspect", "line-clamp", "accent", "caret", "decoration", "underline-offset",
        "content", "cursor",
    }
)

# Static utilities that accept a ``/name`` modifier.
MODIFIER_UTILITIES: frozenset[str] = frozenset({"group", "peer", "@container"})

STATIC_VARIANTS: frozenset[str] = frozenset(
    {
        # interaction and form state
        "hover", "focus", "focus-visible", "focus-within", "active", "visited",
        "target", "disabled", "enabled", "checked", "indeterminate", "required",
        "invalid", "valid", "placeholder-shown", "read-only", "open", "inert",
        # structure
        "empty", "first", "last", "only", "odd", "even",
        "first-of-type", "last-of-type",
        # pseudo-elements
        "before", "after", "placeholder", "selection", "marker", "file",
        "backdrop", "first-letter", "first-line",
        # media
        "sm", "md", "lg", "xl", "2xl",
        "dark", "motion-safe", "motion-reduce", "contrast-more", "contrast-less",
        "print", "portrait", "landscape", "pointer-fine", "pointer-coarse",
        "rtl", "ltr",
    }
)

FUNCTIONAL_VARIANTS: frozenset[str] = frozenset(
    {"data", "aria", "has", "supports", "nth", "min", "max", "@"}
)

COMPOUND_VARIANTS: frozenset[str] = frozenset({"group", "peer", "not"})


@dataclass(frozen=True)
class UtilityRegistry:
    """Known utility roots, split by how they take values."""

    static: frozenset[str]
    functional: frozenset[str]
    with_modifier: frozenset[str] = frozenset()

    def has(self, root: str, kind: str) -> bool:
        if kind == "static":
            return root in self.static
        if kind == "functional":
            return root in self.functional
        return False

    def accepts_modifier(self, root: str) -> bool:
        return root in self.with_modifier


@dataclass(frozen=True)
class VariantRegistry:
    """Known variant roots, split by kind."""

    static: frozenset[str]
    functional: frozenset[str]
    compound: frozenset[str]

    def kind(self, root: str) -> str:
        """Classify *root* as static, functional, compound, arbitrary or none."""
        if root.startswith("["):
            return "arbitrary"
        if root in self.static:
            return "static"
        if root in self.compound:
            return "compound"
        if root in self.functional:
            return "functional"
        if root.startswith("@") and "@" in self.functional:
            return "functional"
        return "none"

    def has(self, root: str) -> bool:
        return self.kind(root) in ("static", "functional", "compound")


@dataclass(frozen=True)
class DesignSystem:
    """Immutable registry of utility and variant roots."""

    utilities: UtilityRegistry
    variants: VariantRegistry
    prefix: str | None = None


def _extend(base: frozenset[str], extra: Mapping[str, object], key: str) -> frozenset[str]:
    values = extra.get(key)
    if not values:
        return base
    if isinstance(values, str) or not isinstance(values, Iterable):
        raise TypeError(f"design system extension {key!r} must be a list of names")
    return base | frozenset(str(v) for v in values)


def create_simplified_design_system(
    extra: Mapping[str, object] | None = None,
) -> DesignSystem:
    """Build the default registry, optionally extended.

    *extra* may carry the keys ``utilities``, ``functional_utilities``,
    ``variants``, ``functional_variants`` and ``compound_variants``, each a
    list of root names added to the built-in vocabulary.  An optional
    ``prefix`` is carried through unchanged.
    """
    extra = extra or {}
    return DesignSystem(
        utilities=UtilityRegistry(
            static=_extend(STATIC_UTILITIES, extra, "utilities"),
            functional=_extend(FUNCTIONAL_UTILITIES, extra, "functional_utilities"),
            with_modifier=MODIFIER_UTILITIES,
        ),
        variants=VariantRegistry(
            static=_extend(STATIC_VARIANTS, extra, "variants"),
            functional=_extend(FUNCTIONAL_VARIANTS, extra, "functional_variants"),
            compound=_extend(COMPOUND_VARIANTS, extra, "compound_variants"),
        ),
        prefix=extra.get("prefix") or None,  # type: ignore[arg-type]
    )


@lru_cache(maxsize=1)
def default_design_system() -> DesignSystem:
    """The built-in registry, built on first use and shared afterwards."""
    return create_simplified_design_system()

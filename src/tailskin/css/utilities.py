"""Declarations for parsed utility candidates.

``utility_declarations`` is the single entry point: it returns the CSS
declarations for one candidate (ignoring its variants), or None when the
candidate's value has no meaning for its root.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from tailskin.candidate.arbitrary import underscores_to_spaces
from tailskin.css.theme import DEFAULT_THEME, Theme
from tailskin.model.candidate import (
    ArbitraryUtilityValue,
    Candidate,
    Modifier,
    NamedUtilityValue,
    UtilityValue,
)
from tailskin.stylesheet.model import Declaration

__all__ = ["STATIC_CSS", "MARKER_UTILITIES", "utility_declarations", "expected_arbitrary_type"]

Pairs = list[tuple[str, str]]

_NUMBER_RE = re.compile(r"^\d+(?:\.\d+)?$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")

_TRANSITION_PROPERTIES = {
    "transition": (
        "color, background-color, border-color, outline-color, text-decoration-color, "
        "fill, stroke, opacity, box-shadow, transform, translate, scale, rotate, filter, "
        "backdrop-filter"
    ),
    "transition-all": "all",
    "transition-colors": (
        "color, background-color, border-color, outline-color, text-decoration-color, fill, stroke"
    ),
    "transition-opacity": "opacity",
    "transition-transform": "transform, translate, scale, rotate",
    "transition-shadow": "box-shadow",
}


def _transition(prop: str) -> Pairs:
    theme = DEFAULT_THEME
    return [
        ("transition-property", _TRANSITION_PROPERTIES[prop]),
        ("transition-timing-function", theme.default_ease),
        ("transition-duration", theme.default_duration),
    ]


# Utilities that only mark an element for group/peer/container variants.
MARKER_UTILITIES = frozenset({"group", "peer", "@container"})

STATIC_CSS: dict[str, Pairs] = {
    "block": [("display", "block")],
    "inline-block": [("display", "inline-block")],
    "inline": [("display", "inline")],
    "flex": [("display", "flex")],
    "inline-flex": [("display", "inline-flex")],
    "grid": [("display", "grid")],
    "inline-grid": [("display", "inline-grid")],
    "contents": [("display", "contents")],
    "hidden": [("display", "none")],
    "table": [("display", "table")],
    "static": [("position", "static")],
    "fixed": [("position", "fixed")],
    "absolute": [("position", "absolute")],
    "relative": [("position", "relative")],
    "sticky": [("position", "sticky")],
    "visible": [("visibility", "visible")],
    "invisible": [("visibility", "hidden")],
    "collapse": [("visibility", "collapse")],
    "isolate": [("isolation", "isolate")],
    "sr-only": [
        ("position", "absolute"),
        ("width", "1px"),
        ("height", "1px"),
        ("padding", "0"),
        ("margin", "-1px"),
        ("overflow", "hidden"),
        ("clip", "rect(0, 0, 0, 0)"),
        ("white-space", "nowrap"),
        ("border-width", "0"),
    ],
    "not-sr-only": [
        ("position", "static"),
        ("width", "auto"),
        ("height", "auto"),
        ("padding", "0"),
        ("margin", "0"),
        ("overflow", "visible"),
        ("clip", "auto"),
        ("white-space", "normal"),
    ],
    "flex-row": [("flex-direction", "row")],
    "flex-row-reverse": [("flex-direction", "row-reverse")],
    "flex-col": [("flex-direction", "column")],
    "flex-col-reverse": [("flex-direction", "column-reverse")],
    "flex-wrap": [("flex-wrap", "wrap")],
    "flex-nowrap": [("flex-wrap", "nowrap")],
    "flex-wrap-reverse": [("flex-wrap", "wrap-reverse")],
    "flex-auto": [("flex", "1 1 auto")],
    "flex-initial": [("flex", "0 1 auto")],
    "flex-none": [("flex", "none")],
    "grow": [("flex-grow", "1")],
    "shrink": [("flex-shrink", "1")],
    "items-start": [("align-items", "flex-start")],
    "items-end": [("align-items", "flex-end")],
    "items-center": [("align-items", "center")],
    "items-baseline": [("align-items", "baseline")],
    "items-stretch": [("align-items", "stretch")],
    "justify-start": [("justify-content", "flex-start")],
    "justify-end": [("justify-content", "flex-end")],
    "justify-center": [("justify-content", "center")],
    "justify-between": [("justify-content", "space-between")],
    "justify-around": [("justify-content", "space-around")],
    "justify-evenly": [("justify-content", "space-evenly")],
    "self-auto": [("align-self", "auto")],
    "self-start": [("align-self", "flex-start")],
    "self-end": [("align-self", "flex-end")],
    "self-center": [("align-self", "center")],
    "self-stretch": [("align-self", "stretch")],
    "content-start": [("align-content", "flex-start")],
    "content-end": [("align-content", "flex-end")],
    "content-center": [("align-content", "center")],
    "content-between": [("align-content", "space-between")],
    "place-items-center": [("place-items", "center")],
    "place-content-center": [("place-content", "center")],
    "overflow-hidden": [("overflow", "hidden")],
    "overflow-visible": [("overflow", "visible")],
    "overflow-auto": [("overflow", "auto")],
    "overflow-scroll": [("overflow", "scroll")],
    "overflow-clip": [("overflow", "clip")],
    "overflow-x-hidden": [("overflow-x", "hidden")],
    "overflow-y-hidden": [("overflow-y", "hidden")],
    "overflow-x-auto": [("overflow-x", "auto")],
    "overflow-y-auto": [("overflow-y", "auto")],
    "pointer-events-none": [("pointer-events", "none")],
    "pointer-events-auto": [("pointer-events", "auto")],
    "select-none": [("-webkit-user-select", "none"), ("user-select", "none")],
    "select-text": [("-webkit-user-select", "text"), ("user-select", "text")],
    "select-all": [("-webkit-user-select", "all"), ("user-select", "all")],
    "select-auto": [("-webkit-user-select", "auto"), ("user-select", "auto")],
    "cursor-pointer": [("cursor", "pointer")],
    "cursor-default": [("cursor", "default")],
    "cursor-not-allowed": [("cursor", "not-allowed")],
    "cursor-grab": [("cursor", "grab")],
    "cursor-text": [("cursor", "text")],
    "cursor-move": [("cursor", "move")],
    "appearance-none": [("appearance", "none")],
    "will-change-transform": [("will-change", "transform")],
    "text-left": [("text-align", "left")],
    "text-center": [("text-align", "center")],
    "text-right": [("text-align", "right")],
    "text-justify": [("text-align", "justify")],
    "truncate": [
        ("overflow", "hidden"),
        ("text-overflow", "ellipsis"),
        ("white-space", "nowrap"),
    ],
    "uppercase": [("text-transform", "uppercase")],
    "lowercase": [("text-transform", "lowercase")],
    "capitalize": [("text-transform", "capitalize")],
    "normal-case": [("text-transform", "none")],
    "italic": [("font-style", "italic")],
    "not-italic": [("font-style", "normal")],
    "underline": [("text-decoration-line", "underline")],
    "line-through": [("text-decoration-line", "line-through")],
    "no-underline": [("text-decoration-line", "none")],
    "whitespace-nowrap": [("white-space", "nowrap")],
    "whitespace-normal": [("white-space", "normal")],
    "whitespace-pre": [("white-space", "pre")],
    "tabular-nums": [("font-variant-numeric", "tabular-nums")],
    "antialiased": [
        ("-webkit-font-smoothing", "antialiased"),
        ("-moz-osx-font-smoothing", "grayscale"),
    ],
    "subpixel-antialiased": [
        ("-webkit-font-smoothing", "auto"),
        ("-moz-osx-font-smoothing", "auto"),
    ],
    "text-ellipsis": [("text-overflow", "ellipsis")],
    "text-clip": [("text-overflow", "clip")],
    "break-words": [("overflow-wrap", "break-word")],
    "break-all": [("word-break", "break-all")],
    "text-shadow": [("text-shadow", DEFAULT_THEME.text_shadows[""])],
    "box-border": [("box-sizing", "border-box")],
    "box-content": [("box-sizing", "content-box")],
    "rounded": [("border-radius", DEFAULT_THEME.radius[""])],
    "rounded-full": [("border-radius", DEFAULT_THEME.radius["full"])],
    "rounded-none": [("border-radius", "0")],
    "border": [("border-style", "solid"), ("border-width", "1px")],
    "border-solid": [("border-style", "solid")],
    "border-dashed": [("border-style", "dashed")],
    "border-dotted": [("border-style", "dotted")],
    "border-none": [("border-style", "none")],
    "outline": [("outline-style", "solid"), ("outline-width", "1px")],
    "outline-none": [("outline-style", "none")],
    "outline-hidden": [("outline", "2px solid transparent"), ("outline-offset", "2px")],
    "shadow": [("box-shadow", DEFAULT_THEME.shadows[""])],
    "shadow-none": [("box-shadow", DEFAULT_THEME.shadows["none"])],
    "ring": [("box-shadow", "0 0 0 1px var(--tw-ring-color, currentColor)")],
    "ring-inset": [("--tw-ring-inset", "inset")],
    "blur": [("filter", f"blur({DEFAULT_THEME.blur['']})")],
    "backdrop-blur": [("backdrop-filter", f"blur({DEFAULT_THEME.blur['']})")],
    "drop-shadow": [("filter", f"drop-shadow({DEFAULT_THEME.drop_shadows['']})")],
    "grayscale": [("filter", "grayscale(100%)")],
    "invert": [("filter", "invert(100%)")],
    "object-cover": [("object-fit", "cover")],
    "object-contain": [("object-fit", "contain")],
    "object-fill": [("object-fit", "fill")],
    "object-none": [("object-fit", "none")],
    "aspect-square": [("aspect-ratio", "1 / 1")],
    "aspect-video": [("aspect-ratio", "16 / 9")],
    "aspect-auto": [("aspect-ratio", "auto")],
    "bg-cover": [("background-size", "cover")],
    "bg-contain": [("background-size", "contain")],
    "bg-center": [("background-position", "center")],
    "bg-no-repeat": [("background-repeat", "no-repeat")],
    "transition": _transition("transition"),
    "transition-all": _transition("transition-all"),
    "transition-colors": _transition("transition-colors"),
    "transition-opacity": _transition("transition-opacity"),
    "transition-transform": _transition("transition-transform"),
    "transition-shadow": _transition("transition-shadow"),
    "transition-none": [("transition-property", "none")],
    "ease-linear": [("transition-timing-function", "linear")],
    "ease-in": [("transition-timing-function", DEFAULT_THEME.ease["in"])],
    "ease-out": [("transition-timing-function", DEFAULT_THEME.ease["out"])],
    "ease-in-out": [("transition-timing-function", DEFAULT_THEME.ease["in-out"])],
}


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------


def _fmt(number: float) -> str:
    text = f"{number:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _negate(value: str) -> str:
    if value in ("0", "0px", "auto"):
        return value
    if value.startswith("-"):
        return value[1:]
    if value[0].isdigit() or value[0] == ".":
        return "-" + value
    return f"calc({value} * -1)"


def _arbitrary(value: ArbitraryUtilityValue) -> str:
    if value.value.startswith("url("):
        return value.value
    return underscores_to_spaces(value.value)


def _percent(numerator: str, denominator: str) -> str | None:
    if float(denominator) == 0:
        return None
    return f"{_fmt(float(numerator) / float(denominator) * 100)}%"


def _spacing(
    value: UtilityValue,
    theme: Theme,
    keywords: dict[str, str] | None = None,
) -> str | None:
    """Resolve a spacing-scale value (``4``, ``px``, ``1/2``, ``[3px]``)."""
    if isinstance(value, ArbitraryUtilityValue):
        return _arbitrary(value)
    name = value.value
    if keywords and name in keywords:
        return keywords[name]
    if name == "px":
        return "1px"
    fraction = _FRACTION_RE.match(value.fraction or name)
    if fraction:
        return _percent(fraction.group(1), fraction.group(2))
    if _NUMBER_RE.match(name):
        number = float(name)
        if (number * 4) % 1:
            return None
        if number == 0:
            return "0px"
        return f"{_fmt(number * theme.spacing)}rem"
    return None


def _opacity(modifier: Modifier | None) -> str | None:
    if modifier is None:
        return None
    raw = modifier.value
    if modifier.kind == "arbitrary":
        if raw.endswith("%"):
            return raw
        if _NUMBER_RE.match(raw):
            number = float(raw)
            return f"{_fmt(number * 100 if number <= 1 else number)}%"
        return raw
    if _NUMBER_RE.match(raw):
        return f"{_fmt(float(raw))}%"
    return None


def _color(value: UtilityValue, modifier: Modifier | None, theme: Theme) -> str | None:
    if isinstance(value, ArbitraryUtilityValue):
        if value.data_type not in (None, "color", "custom-property"):
            return None
        color = _arbitrary(value)
    else:
        color = theme.color(value.value)
    if color is None:
        return None
    alpha = _opacity(modifier)
    if alpha is None or color in ("transparent", "inherit"):
        return color
    return f"color-mix(in oklab, {color} {alpha}, transparent)"


def _is_length(value: UtilityValue) -> bool:
    if isinstance(value, ArbitraryUtilityValue):
        return value.data_type in ("length", "percentage", "number")
    return bool(_NUMBER_RE.match(value.value))


def _named(value: UtilityValue, scale: dict[str, str] | object) -> str | None:
    if isinstance(value, ArbitraryUtilityValue):
        return _arbitrary(value)
    return scale.get(value.value)  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Functional handlers
# ---------------------------------------------------------------------------

Handler = Callable[[Candidate, UtilityValue, Theme], "Pairs | None"]

_SIZE_KEYWORDS = {
    "auto": "auto",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
    "none": "none",
}

_SPACING_PROPERTIES: dict[str, tuple[str, ...]] = {
    "p": ("padding",),
    "px": ("padding-left", "padding-right"),
    "py": ("padding-top", "padding-bottom"),
    "pt": ("padding-top",),
    "pr": ("padding-right",),
    "pb": ("padding-bottom",),
    "pl": ("padding-left",),
    "ps": ("padding-inline-start",),
    "pe": ("padding-inline-end",),
    "m": ("margin",),
    "mx": ("margin-left", "margin-right"),
    "my": ("margin-top", "margin-bottom"),
    "mt": ("margin-top",),
    "mr": ("margin-right",),
    "mb": ("margin-bottom",),
    "ml": ("margin-left",),
    "ms": ("margin-inline-start",),
    "me": ("margin-inline-end",),
    "gap": ("gap",),
    "gap-x": ("column-gap",),
    "gap-y": ("row-gap",),
    "inset": ("inset",),
    "inset-x": ("left", "right"),
    "inset-y": ("top", "bottom"),
    "top": ("top",),
    "right": ("right",),
    "bottom": ("bottom",),
    "left": ("left",),
    "start": ("inset-inline-start",),
    "end": ("inset-inline-end",),
    "w": ("width",),
    "h": ("height",),
    "size": ("width", "height"),
    "min-w": ("min-width",),
    "min-h": ("min-height",),
    "max-w": ("max-width",),
    "max-h": ("max-height",),
    "basis": ("flex-basis",),
}

# Roots where a leading ``-`` is meaningful.
_NEGATABLE = frozenset(
    {"m", "mx", "my", "mt", "mr", "mb", "ml", "ms", "me", "inset", "inset-x", "inset-y",
     "top", "right", "bottom", "left", "start", "end", "translate-x", "translate-y",
     "rotate", "scale", "scale-x", "scale-y", "z", "order", "tracking", "outline-offset"}
)


def _spacing_handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    props = _SPACING_PROPERTIES[candidate.root]
    keywords = dict(_SIZE_KEYWORDS)
    if candidate.root in ("w", "min-w", "max-w", "size"):
        keywords["screen"] = "100vw"
    if candidate.root in ("h", "min-h", "max-h"):
        keywords["screen"] = "100vh"
        keywords["dvh"] = "100dvh"
    if candidate.root == "max-w":
        keywords.update(theme.containers)
        keywords["prose"] = "65ch"
    resolved = _spacing(value, theme, keywords)
    if resolved is None:
        return None
    if candidate.negative:
        resolved = _negate(resolved)
    return [(prop, resolved) for prop in props]


def _bg(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    if isinstance(value, ArbitraryUtilityValue) and value.data_type in ("url", "image"):
        return [("background-image", _arbitrary(value))]
    if isinstance(value, NamedUtilityValue) and value.value == "none":
        return [("background-image", "none")]
    color = _color(value, candidate.modifier, theme)
    return [("background-color", color)] if color else None


def _text(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    if isinstance(value, ArbitraryUtilityValue) and value.data_type in (
        "length", "percentage", "number", "absolute-size", "relative-size"
    ):
        return [("font-size", _arbitrary(value))]
    if isinstance(value, NamedUtilityValue) and value.value in theme.font_sizes:
        size, line_height = theme.font_sizes[value.value]
        if candidate.modifier is not None:
            line_height = (
                _spacing(NamedUtilityValue(candidate.modifier.value), theme)
                if candidate.modifier.kind == "named"
                else candidate.modifier.value
            ) or line_height
        return [("font-size", size), ("line-height", line_height)]
    color = _color(value, candidate.modifier, theme)
    return [("color", color)] if color else None


def _font(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    if isinstance(value, ArbitraryUtilityValue):
        if value.data_type == "number":
            return [("font-weight", value.value)]
        return [("font-family", _arbitrary(value))]
    if value.value in theme.font_weights:
        return [("font-weight", theme.font_weights[value.value])]
    if value.value in theme.font_families:
        return [("font-family", theme.font_families[value.value])]
    return None


def _leading(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    resolved = _named(value, theme.leading) or _spacing(value, theme)
    return [("line-height", resolved)] if resolved else None


def _tracking(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    resolved = _named(value, theme.tracking)
    if resolved is None:
        return None
    return [("letter-spacing", _negate(resolved) if candidate.negative else resolved)]


_RADIUS_CORNERS: dict[str, tuple[str, ...]] = {
    "rounded": ("border-radius",),
    "rounded-t": ("border-top-left-radius", "border-top-right-radius"),
    "rounded-r": ("border-top-right-radius", "border-bottom-right-radius"),
    "rounded-b": ("border-bottom-right-radius", "border-bottom-left-radius"),
    "rounded-l": ("border-top-left-radius", "border-bottom-left-radius"),
    "rounded-tl": ("border-top-left-radius",),
    "rounded-tr": ("border-top-right-radius",),
    "rounded-bl": ("border-bottom-left-radius",),
    "rounded-br": ("border-bottom-right-radius",),
}


def _rounded(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    resolved = _named(value, theme.radius)
    if resolved is None:
        return None
    return [(prop, resolved) for prop in _RADIUS_CORNERS[candidate.root]]


_BORDER_SIDES: dict[str, tuple[str, ...]] = {
    "border": ("",),
    "border-t": ("-top",),
    "border-r": ("-right",),
    "border-b": ("-bottom",),
    "border-l": ("-left",),
    "border-x": ("-left", "-right"),
    "border-y": ("-top", "-bottom"),
}


def _border(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    sides = _BORDER_SIDES[candidate.root]
    if _is_length(value):
        width = _arbitrary(value) if isinstance(value, ArbitraryUtilityValue) else f"{value.value}px"
        pairs: Pairs = []
        for side in sides:
            pairs.extend([(f"border{side}-style", "solid"), (f"border{side}-width", width)])
        return pairs
    color = _color(value, candidate.modifier, theme)
    return [(f"border{side}-color", color) for side in sides] if color else None


def _width_or_color(width_prop: str, color_prop: str, unit: str = "px") -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        if _is_length(value):
            width = _arbitrary(value) if isinstance(value, ArbitraryUtilityValue) else f"{value.value}{unit}"
            if candidate.negative:
                width = _negate(width)
            return [(width_prop, width)]
        color = _color(value, candidate.modifier, theme)
        return [(color_prop, color)] if color else None

    return handler


def _ring(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    if _is_length(value):
        width = _arbitrary(value) if isinstance(value, ArbitraryUtilityValue) else f"{value.value}px"
        return [("box-shadow", f"var(--tw-ring-inset,) 0 0 0 {width} var(--tw-ring-color, currentColor)")]
    color = _color(value, candidate.modifier, theme)
    return [("--tw-ring-color", color)] if color else None


def _outline(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    if _is_length(value):
        width = _arbitrary(value) if isinstance(value, ArbitraryUtilityValue) else f"{value.value}px"
        return [("outline-style", "solid"), ("outline-width", width)]
    color = _color(value, candidate.modifier, theme)
    return [("outline-color", color)] if color else None


def _shadow_scale(prop: str, scale_name: str, color_var: str, wrap: str = "{}") -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        scale = getattr(theme, scale_name)
        if isinstance(value, NamedUtilityValue) and value.value in scale:
            return [(prop, wrap.format(scale[value.value]))]
        if isinstance(value, ArbitraryUtilityValue) and value.data_type not in ("color",):
            return [(prop, wrap.format(_arbitrary(value)))]
        color = _color(value, candidate.modifier, theme)
        return [(color_var, color)] if color else None

    return handler


def _opacity_handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    if isinstance(value, ArbitraryUtilityValue):
        return [("opacity", _arbitrary(value))]
    if _NUMBER_RE.match(value.value):
        return [("opacity", _fmt(float(value.value) / 100))]
    return None


def _integer(prop: str, keywords: dict[str, str] | None = None) -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        resolved = _named(value, keywords or {})
        if resolved is None and value.value.isdigit():
            resolved = value.value
        if resolved is None:
            return None
        return [(prop, _negate(resolved) if candidate.negative else resolved)]

    return handler


def _flex(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    keywords = {"1": "1 1 0%", "auto": "1 1 auto", "initial": "0 1 auto", "none": "none"}
    resolved = _named(value, keywords)
    if resolved is None and _NUMBER_RE.match(value.value):
        resolved = value.value
    return [("flex", resolved)] if resolved else None


def _number(prop: str) -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        if isinstance(value, ArbitraryUtilityValue):
            return [(prop, _arbitrary(value))]
        return [(prop, value.value)] if _NUMBER_RE.match(value.value) else None

    return handler


def _grid_template(prop: str) -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        resolved = _named(value, {"none": "none", "subgrid": "subgrid"})
        if resolved is None and value.value.isdigit():
            resolved = f"repeat({value.value}, minmax(0, 1fr))"
        return [(prop, resolved)] if resolved else None

    return handler


def _span(prop: str) -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        resolved = _named(value, {"full": "1 / -1"})
        if resolved is None and value.value.isdigit():
            resolved = f"span {value.value} / span {value.value}"
        return [(prop, resolved)] if resolved else None

    return handler


def _time(prop: str) -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        if isinstance(value, ArbitraryUtilityValue):
            return [(prop, _arbitrary(value))]
        return [(prop, f"{value.value}ms")] if value.value.isdigit() else None

    return handler


def _ease(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    resolved = _named(value, theme.ease)
    return [("transition-timing-function", resolved)] if resolved else None


def _transition_handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    if not isinstance(value, ArbitraryUtilityValue):
        return None
    return [
        ("transition-property", _arbitrary(value)),
        ("transition-timing-function", theme.default_ease),
        ("transition-duration", theme.default_duration),
    ]


def _scale(axis: str) -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        if isinstance(value, ArbitraryUtilityValue):
            amount = _arbitrary(value)
        elif _NUMBER_RE.match(value.value):
            amount = f"{value.value}%"
        else:
            return None
        if candidate.negative:
            amount = _negate(amount)
        if not axis:
            return [("scale", amount)]
        return [
            (f"--tw-scale-{axis}", amount),
            ("scale", "var(--tw-scale-x, 100%) var(--tw-scale-y, 100%)"),
        ]

    return handler


def _rotate(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    if isinstance(value, ArbitraryUtilityValue):
        angle = _arbitrary(value)
    elif _NUMBER_RE.match(value.value):
        angle = f"{value.value}deg"
    else:
        return None
    return [("rotate", _negate(angle) if candidate.negative else angle)]


def _translate(axis: str) -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        resolved = _spacing(value, theme, {"full": "100%"})
        if resolved is None:
            return None
        if candidate.negative:
            resolved = _negate(resolved)
        return [
            (f"--tw-translate-{axis}", resolved),
            ("translate", "var(--tw-translate-x, 0) var(--tw-translate-y, 0)"),
        ]

    return handler


def _filter(prop: str, function: str, scale_name: str | None = None, unit: str = "%") -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        if isinstance(value, ArbitraryUtilityValue):
            amount = _arbitrary(value)
        elif scale_name is not None:
            amount = getattr(theme, scale_name).get(value.value)
        elif _NUMBER_RE.match(value.value):
            amount = f"{value.value}{unit}"
        else:
            amount = None
        return [(prop, f"{function}({amount})")] if amount else None

    return handler


def _paint(prop: str) -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        if prop == "stroke" and _is_length(value) and isinstance(value, NamedUtilityValue):
            return [("stroke-width", value.value)]
        if isinstance(value, NamedUtilityValue) and value.value == "none":
            return [(prop, "none")]
        color = _color(value, candidate.modifier, theme)
        return [(prop, color)] if color else None

    return handler


def _gradient_stop(position: str) -> Handler:
    def handler(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
        color = _color(value, candidate.modifier, theme)
        return [(f"--tw-gradient-{position}", color)] if color else None

    return handler


def _aspect(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    resolved = _named(value, {"square": "1 / 1", "video": "16 / 9", "auto": "auto"})
    if resolved is None and value.fraction:
        resolved = value.fraction.replace("/", " / ")
    return [("aspect-ratio", resolved)] if resolved else None


def _line_clamp(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    if isinstance(value, NamedUtilityValue) and value.value == "none":
        return [("overflow", "visible"), ("display", "block"), ("-webkit-line-clamp", "unset")]
    lines = _arbitrary(value) if isinstance(value, ArbitraryUtilityValue) else value.value
    if not (isinstance(value, ArbitraryUtilityValue) or lines.isdigit()):
        return None
    return [
        ("overflow", "hidden"),
        ("display", "-webkit-box"),
        ("-webkit-box-orient", "vertical"),
        ("-webkit-line-clamp", lines),
    ]


def _content(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    if isinstance(value, NamedUtilityValue):
        return [("content", "none")] if value.value == "none" else None
    return [("content", _arbitrary(value))]


def _cursor(candidate: Candidate, value: UtilityValue, theme: Theme) -> Pairs | None:
    return [("cursor", _arbitrary(value) if isinstance(value, ArbitraryUtilityValue) else value.value)]


FUNCTIONAL_CSS: dict[str, Handler] = {
    **{root: _spacing_handler for root in _SPACING_PROPERTIES},
    "bg": _bg,
    "text": _text,
    "font": _font,
    "leading": _leading,
    "tracking": _tracking,
    **{root: _rounded for root in _RADIUS_CORNERS},
    **{root: _border for root in _BORDER_SIDES},
    "ring": _ring,
    "ring-offset": _width_or_color("--tw-ring-offset-width", "--tw-ring-offset-color"),
    "outline": _outline,
    "outline-offset": _width_or_color("outline-offset", "outline-color"),
    "shadow": _shadow_scale("box-shadow", "shadows", "--tw-shadow-color"),
    "drop-shadow": _shadow_scale("filter", "drop_shadows", "--tw-drop-shadow-color", "drop-shadow({})"),
    "text-shadow": _shadow_scale("text-shadow", "text_shadows", "--tw-text-shadow-color"),
    "opacity": _opacity_handler,
    "z": _integer("z-index", {"auto": "auto"}),
    "order": _integer("order", {"first": "-9999", "last": "9999", "none": "0"}),
    "flex": _flex,
    "grow": _number("flex-grow"),
    "shrink": _number("flex-shrink"),
    "grid-cols": _grid_template("grid-template-columns"),
    "grid-rows": _grid_template("grid-template-rows"),
    "col-span": _span("grid-column"),
    "row-span": _span("grid-row"),
    "duration": _time("transition-duration"),
    "delay": _time("transition-delay"),
    "ease": _ease,
    "transition": _transition_handler,
    "scale": _scale(""),
    "scale-x": _scale("x"),
    "scale-y": _scale("y"),
    "rotate": _rotate,
    "translate-x": _translate("x"),
    "translate-y": _translate("y"),
    "blur": _filter("filter", "blur", "blur"),
    "backdrop-blur": _filter("backdrop-filter", "blur", "blur"),
    "brightness": _filter("filter", "brightness"),
    "contrast": _filter("filter", "contrast"),
    "saturate": _filter("filter", "saturate"),
    "fill": _paint("fill"),
    "stroke": _paint("stroke"),
    "from": _gradient_stop("from"),
    "via": _gradient_stop("via"),
    "to": _gradient_stop("to"),
    "aspect": _aspect,
    "line-clamp": _line_clamp,
    "accent": _width_or_color("accent-color", "accent-color"),
    "caret": _paint("caret-color"),
    "decoration": _width_or_color("text-decoration-thickness", "text-decoration-color"),
    "underline-offset": _width_or_color("text-underline-offset", "text-underline-offset"),
    "content": _content,
    "cursor": _cursor,
}

# Expected data type of an arbitrary value, for roots that take one kind.
_EXPECTED_TYPES: dict[str, str] = {
    **{root: "length" for root in _SPACING_PROPERTIES},
    "opacity": "number",
    "z": "number",
    "order": "number",
    "grow": "number",
    "shrink": "number",
    "rotate": "angle",
    "fill": "color",
    "accent": "color",
    "caret": "color",
    "from": "color",
    "via": "color",
    "to": "color",
}


def expected_arbitrary_type(root: str) -> str | None:
    """The data type an arbitrary value for *root* should have, if fixed."""
    return _EXPECTED_TYPES.get(root)


def utility_declarations(candidate: Candidate, theme: Theme = DEFAULT_THEME) -> list[Declaration] | None:
    """Declarations for *candidate*, or None if it has no CSS.

    Marker utilities (``group``, ``peer``, ``@container``) are handled by the
    compiler and return None here.
    """
    pairs: Pairs | None
    if candidate.kind == "arbitrary" and candidate.value is not None:
        pairs = [(candidate.root, _arbitrary(candidate.value))]  # type: ignore[arg-type]
    elif candidate.kind == "static":
        pairs = STATIC_CSS.get(candidate.root)
    else:
        handler = FUNCTIONAL_CSS.get(candidate.root)
        if handler is None or candidate.value is None:
            return None
        if candidate.negative and candidate.root not in _NEGATABLE:
            return None
        pairs = handler(candidate, candidate.value, theme)
    if not pairs:
        return None
    return [Declaration(prop, value, important=candidate.important) for prop, value in pairs]

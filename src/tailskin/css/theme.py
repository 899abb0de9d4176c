"""Theme scales used to turn named utility values into CSS values."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace

__all__ = ["Theme", "DEFAULT_THEME", "SHADES"]

SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")


def _palette(*hexes: str) -> dict[str, str]:
    return dict(zip(SHADES, hexes))


_COLORS: dict[str, dict[str, str]] = {
    "slate": _palette(
        "#f8fafc", "#f1f5f9", "#e2e8f0", "#cbd5e1", "#94a3b8", "#64748b",
        "#475569", "#334155", "#1e293b", "#0f172a", "#020617",
    ),
    "gray": _palette(
        "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280",
        "#4b5563", "#374151", "#1f2937", "#111827", "#030712",
    ),
    "zinc": _palette(
        "#fafafa", "#f4f4f5", "#e4e4e7", "#d4d4d8", "#a1a1aa", "#71717a",
        "#52525b", "#3f3f46", "#27272a", "#18181b", "#09090b",
    ),
    "neutral": _palette(
        "#fafafa", "#f5f5f5", "#e5e5e5", "#d4d4d4", "#a3a3a3", "#737373",
        "#525252", "#404040", "#262626", "#171717", "#0a0a0a",
    ),
    "red": _palette(
        "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444",
        "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a",
    ),
    "orange": _palette(
        "#fff7ed", "#ffedd5", "#fed7aa", "#fdba74", "#fb923c", "#f97316",
        "#ea580c", "#c2410c", "#9a3412", "#7c2d12", "#431407",
    ),
    "amber": _palette(
        "#fffbeb", "#fef3c7", "#fde68a", "#fcd34d", "#fbbf24", "#f59e0b",
        "#d97706", "#b45309", "#92400e", "#78350f", "#451a03",
    ),
    "yellow": _palette(
        "#fefce8", "#fef9c3", "#fef08a", "#fde047", "#facc15", "#eab308",
        "#ca8a04", "#a16207", "#854d0e", "#713f12", "#422006",
    ),
    "green": _palette(
        "#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80", "#22c55e",
        "#16a34a", "#15803d", "#166534", "#14532d", "#052e16",
    ),
    "emerald": _palette(
        "#ecfdf5", "#d1fae5", "#a7f3d0", "#6ee7b7", "#34d399", "#10b981",
        "#059669", "#047857", "#065f46", "#064e3b", "#022c22",
    ),
    "sky": _palette(
        "#f0f9ff", "#e0f2fe", "#bae6fd", "#7dd3fc", "#38bdf8", "#0ea5e9",
        "#0284c7", "#0369a1", "#075985", "#0c4a6e", "#082f49",
    ),
    "blue": _palette(
        "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa", "#3b82f6",
        "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554",
    ),
    "indigo": _palette(
        "#eef2ff", "#e0e7ff", "#c7d2fe", "#a5b4fc", "#818cf8", "#6366f1",
        "#4f46e5", "#4338ca", "#3730a3", "#312e81", "#1e1b4b",
    ),
    "violet": _palette(
        "#f5f3ff", "#ede9fe", "#ddd6fe", "#c4b5fd", "#a78bfa", "#8b5cf6",
        "#7c3aed", "#6d28d9", "#5b21b6", "#4c1d95", "#2e1065",
    ),
    "purple": _palette(
        "#faf5ff", "#f3e8ff", "#e9d5ff", "#d8b4fe", "#c084fc", "#a855f7",
        "#9333ea", "#7e22ce", "#6b21a8", "#581c87", "#3b0764",
    ),
    "pink": _palette(
        "#fdf2f8", "#fce7f3", "#fbcfe8", "#f9a8d4", "#f472b6", "#ec4899",
        "#db2777", "#be185d", "#9d174d", "#831843", "#500724",
    ),
    "rose": _palette(
        "#fff1f2", "#ffe4e6", "#fecdd3", "#fda4af", "#fb7185", "#f43f5e",
        "#e11d48", "#be123c", "#9f1239", "#881337", "#4c0519",
    ),
}

_SPECIAL_COLORS = {
    "black": "#000",
    "white": "#fff",
    "transparent": "transparent",
    "current": "currentColor",
    "inherit": "inherit",
}

_RADIUS = {
    "none": "0",
    "xs": "0.125rem",
    "sm": "0.25rem",
    "": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "4xl": "2rem",
    "full": "9999px",
}

# (font-size, line-height)
_FONT_SIZES = {
    "xs": ("0.75rem", "1rem"),
    "sm": ("0.875rem", "1.25rem"),
    "base": ("1rem", "1.5rem"),
    "lg": ("1.125rem", "1.75rem"),
    "xl": ("1.25rem", "1.75rem"),
    "2xl": ("1.5rem", "2rem"),
    "3xl": ("1.875rem", "2.25rem"),
    "4xl": ("2.25rem", "2.5rem"),
    "5xl": ("3rem", "1"),
    "6xl": ("3.75rem", "1"),
    "7xl": ("4.5rem", "1"),
    "8xl": ("6rem", "1"),
    "9xl": ("8rem", "1"),
}

_FONT_WEIGHTS = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

_FONT_FAMILIES = {
    "sans": 'ui-sans-serif, system-ui, sans-serif, "Apple Color Emoji", "Segoe UI Emoji"',
    "serif": 'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif',
    "mono": 'ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", monospace',
}

_LEADING = {
    "none": "1",
    "tight": "1.25",
    "snug": "1.375",
    "normal": "1.5",
    "relaxed": "1.625",
    "loose": "2",
}

_TRACKING = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

_SHADOWS = {
    "2xs": "0 1px rgb(0 0 0 / 0.05)",
    "xs": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "sm": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "none": "0 0 #0000",
}

_DROP_SHADOWS = {
    "xs": "0 1px 1px rgb(0 0 0 / 0.05)",
    "sm": "0 1px 2px rgb(0 0 0 / 0.15)",
    "": "0 1px 2px rgb(0 0 0 / 0.1)",
    "md": "0 3px 3px rgb(0 0 0 / 0.12)",
    "lg": "0 4px 4px rgb(0 0 0 / 0.15)",
    "xl": "0 9px 7px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 25px rgb(0 0 0 / 0.15)",
    "none": "0 0 #0000",
}

_TEXT_SHADOWS = {
    "2xs": "0px 1px 0px rgb(0 0 0 / 0.15)",
    "xs": "0px 1px 1px rgb(0 0 0 / 0.2)",
    "sm": "0px 1px 0px rgb(0 0 0 / 0.075), 0px 1px 1px rgb(0 0 0 / 0.075), 0px 2px 2px rgb(0 0 0 / 0.075)",
    "": "0px 1px 2px rgb(0 0 0 / 0.1)",
    "md": "0px 1px 1px rgb(0 0 0 / 0.1), 0px 1px 2px rgb(0 0 0 / 0.1), 0px 2px 4px rgb(0 0 0 / 0.1)",
    "lg": "0px 1px 2px rgb(0 0 0 / 0.1), 0px 3px 2px rgb(0 0 0 / 0.1), 0px 4px 8px rgb(0 0 0 / 0.1)",
    "none": "none",
}

_BLUR = {
    "none": "0",
    "xs": "4px",
    "sm": "8px",
    "": "8px",
    "md": "12px",
    "lg": "16px",
    "xl": "24px",
    "2xl": "40px",
    "3xl": "64px",
}

_BREAKPOINTS = {
    "sm": "40rem",
    "md": "48rem",
    "lg": "64rem",
    "xl": "80rem",
    "2xl": "96rem",
}

_CONTAINERS = {
    "3xs": "16rem",
    "2xs": "18rem",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
}

_EASE = {
    "linear": "linear",
    "in": "cubic-bezier(0.4, 0, 1, 1)",
    "out": "cubic-bezier(0, 0, 0.2, 1)",
    "in-out": "cubic-bezier(0.4, 0, 0.2, 1)",
}


@dataclass(frozen=True)
class Theme:
    """Named scales consulted when resolving utility values.

    ``spacing`` is the size of one spacing step; ``p-4`` is four steps.
    """

    spacing: float = 0.25
    colors: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: _COLORS)
    special_colors: Mapping[str, str] = field(default_factory=lambda: _SPECIAL_COLORS)
    radius: Mapping[str, str] = field(default_factory=lambda: _RADIUS)
    font_sizes: Mapping[str, tuple[str, str]] = field(default_factory=lambda: _FONT_SIZES)
    font_weights: Mapping[str, str] = field(default_factory=lambda: _FONT_WEIGHTS)
    font_families: Mapping[str, str] = field(default_factory=lambda: _FONT_FAMILIES)
    leading: Mapping[str, str] = field(default_factory=lambda: _LEADING)
    tracking: Mapping[str, str] = field(default_factory=lambda: _TRACKING)
    shadows: Mapping[str, str] = field(default_factory=lambda: _SHADOWS)
    drop_shadows: Mapping[str, str] = field(default_factory=lambda: _DROP_SHADOWS)
    text_shadows: Mapping[str, str] = field(default_factory=lambda: _TEXT_SHADOWS)
    blur: Mapping[str, str] = field(default_factory=lambda: _BLUR)
    breakpoints: Mapping[str, str] = field(default_factory=lambda: _BREAKPOINTS)
    containers: Mapping[str, str] = field(default_factory=lambda: _CONTAINERS)
    ease: Mapping[str, str] = field(default_factory=lambda: _EASE)
    default_duration: str = "150ms"
    default_ease: str = "cubic-bezier(0.4, 0, 0.2, 1)"

    def color(self, name: str) -> str | None:
        """Resolve ``white``, ``blue-500`` or a single-value extended colour."""
        if name in self.special_colors:
            return self.special_colors[name]
        family, _, shade = name.rpartition("-")
        if family and family in self.colors:
            return self.colors[family].get(shade)
        flat = self.colors.get(name)
        if flat is not None:
            return flat.get("DEFAULT")
        return None

    def extend(self, overrides: Mapping[str, object]) -> Theme:
        """A copy with each named scale merged with *overrides*.

        Colour values may be a hex string (stored as ``DEFAULT``) or a shade
        mapping.
        """
        changes: dict[str, object] = {}
        for key, value in overrides.items():
            if not hasattr(self, key):
                raise KeyError(f"Unknown theme scale: {key!r}")
            current = getattr(self, key)
            if key == "colors" and isinstance(value, Mapping):
                merged = dict(current)
                for name, shades in value.items():
                    merged[name] = {"DEFAULT": shades} if isinstance(shades, str) else dict(shades)
                changes[key] = merged
            elif isinstance(current, Mapping) and isinstance(value, Mapping):
                changes[key] = {**current, **value}
            else:
                changes[key] = value
        return replace(self, **changes)


DEFAULT_THEME = Theme()

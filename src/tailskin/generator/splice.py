"""Apply text edits to a source string by character range."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["Edit", "apply_splices"]

Edit = tuple[int, int, str]


def apply_splices(source: str, edits: Iterable[Edit]) -> str:
    """Replace each ``source[start:end]`` with its text.

    Edits may come in any order but must not overlap.  Empty ranges insert.

    Raises:
        ValueError: if two edits overlap or a range is outside *source*.
    """
    ordered = sorted(edits, key=lambda e: (e[0], e[1]))
    out: list[str] = []
    cursor = 0
    for start, end, text in ordered:
        if start < cursor or end < start or end > len(source):
            raise ValueError(f"invalid or overlapping edit range {start}:{end}")
        out.append(source[cursor:start])
        out.append(text)
        cursor = end
    out.append(source[cursor:])
    return "".join(out)

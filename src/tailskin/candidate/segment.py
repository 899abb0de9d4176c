"""Bracket-aware splitting of class tokens.

``segment("hover:bg-[url(a:b)]", ":")`` splits only on the top-level colon,
leaving the one inside brackets alone.
"""

from __future__ import annotations

__all__ = ["segment", "is_balanced"]

_CLOSERS = {"[": "]", "(": ")", "{": "}"}
_QUOTES = {"'", '"', "`"}


def _scan(text: str, separator: str) -> tuple[list[int], int | None]:
    """Return top-level separator positions and the index where balance broke.

    The break index is the opening position of the outermost scope left
    unclosed, or the position of a closer that matches nothing.
    """
    splits: list[int] = []
    stack: list[tuple[str, int]] = []
    quote: tuple[str, int] | None = None
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if quote is not None:
            if ch == quote[0]:
                quote = None
        elif ch in _QUOTES:
            quote = (ch, i)
        elif ch in _CLOSERS:
            stack.append((_CLOSERS[ch], i))
        elif ch in _CLOSERS.values():
            if not stack or stack[-1][0] != ch:
                return splits, stack[0][1] if stack else i
            stack.pop()
        elif ch == separator and not stack:
            splits.append(i)
        i += 1

    if quote is not None:
        return splits, stack[0][1] if stack else quote[1]
    if stack:
        return splits, stack[0][1]
    return splits, None


def segment(text: str, separator: str) -> list[str]:
    """Split *text* on *separator* wherever it is not nested.

    Square brackets, parentheses, braces and quoted strings open scopes in
    which the separator is ignored; a backslash escapes the next character.
    If a scope is never closed (or a closer matches nothing), the segments
    found before that scope opened are returned followed by the unsplit
    remainder.  Never raises.
    """
    splits, broken_at = _scan(text, separator)
    if broken_at is not None:
        splits = [pos for pos in splits if pos < broken_at]

    parts: list[str] = []
    start = 0
    for pos in splits:
        parts.append(text[start:pos])
        start = pos + len(separator)
    parts.append(text[start:])
    return parts


def is_balanced(text: str) -> bool:
    """Return True if every bracket and quote in *text* is closed."""
    _, broken_at = _scan(text, "\0")
    return broken_at is None

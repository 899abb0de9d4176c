"""Hand-written parser and renderer for plain CSS.

Handles style rules, nested at-rule blocks (``@media``, ``@container``,
``@supports``...), statement at-rules and comments.  Selectors and values are
kept as text; no cascade or validation is attempted.
"""

from __future__ import annotations

import re

from tailskin.candidate.segment import segment
from tailskin.stylesheet.model import AtRule, Declaration, Rule, StyleRule, Stylesheet

__all__ = ["parse_css", "render_stylesheet", "render_rules"]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Matches an at-rule prelude: @name params
_AT_RULE_RE = re.compile(
    r"""
    @(?P<name>[a-zA-Z-]+)   # at-rule name
    \s*
    (?P<params>.*)          # everything up to the block or semicolon
    """,
    re.VERBOSE | re.DOTALL,
)

# Matches a single declaration: property: value [!important]
_DECL_RE = re.compile(
    r"""
    ^\s*
    (?P<property>-{0,2}[a-zA-Z_][a-zA-Z0-9_-]*)   # property name or custom property
    \s*:\s*
    (?P<value>.*?)                               # value
    (?P<important>\s*!important)?
    \s*$
    """,
    re.VERBOSE | re.DOTALL,
)


def _find_block_end(text: str, open_at: int) -> int:
    """Index of the ``}`` matching the ``{`` at *open_at*."""
    depth = 0
    quote: str | None = None
    for i in range(open_at, len(text)):
        ch = text[i]
        if quote:
            if ch == quote and text[i - 1] != "\\":
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    raise ValueError("Unterminated block in stylesheet")


def _parse_declarations(body: str) -> tuple[Declaration, ...]:
    declarations: list[Declaration] = []
    for chunk in segment(body, ";"):
        match = _DECL_RE.match(chunk)
        if not match or not match.group("value"):
            continue
        declarations.append(
            Declaration(
                property=match.group("property"),
                value=match.group("value").strip(),
                important=bool(match.group("important")),
            )
        )
    return tuple(declarations)


def _parse_rules(text: str) -> list[Rule]:
    rules: list[Rule] = []
    pos = 0
    while pos < len(text):
        brace = text.find("{", pos)
        semi = text.find(";", pos)
        prelude_end = brace if brace != -1 else len(text)

        if semi != -1 and semi < prelude_end and text[pos:semi].strip().startswith("@"):
            match = _AT_RULE_RE.match(text[pos:semi].strip())
            if match:
                rules.append(AtRule(match.group("name"), match.group("params").strip(), None))
            pos = semi + 1
            continue
        if brace == -1:
            break

        prelude = text[pos:brace].strip()
        end = _find_block_end(text, brace)
        body = text[brace + 1 : end]
        pos = end + 1

        if prelude.startswith("@"):
            match = _AT_RULE_RE.match(prelude)
            if match:
                rules.append(
                    AtRule(
                        name=match.group("name"),
                        params=match.group("params").strip(),
                        rules=tuple(_parse_rules(body)),
                    )
                )
            continue
        declarations = _parse_declarations(body)
        if prelude:
            rules.append(StyleRule(selector=" ".join(prelude.split()), declarations=declarations))
    return rules


def parse_css(source: str) -> Stylesheet:
    """Parse a CSS string into a Stylesheet containing rules in source order.

    Raises:
        ValueError: if a ``{`` block is never closed.
    """
    return Stylesheet(rules=_parse_rules(_COMMENT_RE.sub("", source)))


def _render(rule: Rule, depth: int, indent: str) -> str:
    pad = indent * depth
    if isinstance(rule, AtRule):
        if rule.rules is None:
            return f"{pad}{rule.prelude};"
        inner = "\n\n".join(_render(r, depth + 1, indent) for r in rule.rules)
        return f"{pad}{rule.prelude} {{\n{inner}\n{pad}}}"
    lines = [f"{pad}{rule.selector} {{"]
    lines.extend(f"{pad}{indent}{decl}" for decl in rule.declarations)
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def render_rules(rules: list[Rule] | tuple[Rule, ...], indent_size: int = 2) -> str:
    """Render rules as CSS text, one blank line between top-level rules."""
    indent = " " * indent_size
    return "\n\n".join(_render(rule, 0, indent) for rule in rules)


def render_stylesheet(stylesheet: Stylesheet, indent_size: int = 2) -> str:
    """Render a Stylesheet back to CSS text ending in a newline."""
    text = render_rules(stylesheet.rules, indent_size)
    return text + "\n" if text else ""

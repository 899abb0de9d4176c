"""Read a ``styles`` object literal into a plain ``{key: class string}`` dict."""

from __future__ import annotations

from tailskin.parser.nodes import (
    CallExpression,
    Expression,
    Identifier,
    Literal,
    LogicalExpression,
    ConditionalExpression,
    MemberExpression,
    ObjectExpression,
    TemplateLiteral,
)

__all__ = ["extract_styles_object", "static_class_string"]

# Helpers whose string arguments are simply joined.
CLASS_HELPERS = frozenset({"cn", "clsx", "classNames", "classnames", "cx", "twMerge"})


def _callee_name(call: CallExpression) -> str | None:
    if isinstance(call.callee, Identifier):
        return call.callee.name
    if isinstance(call.callee, MemberExpression):
        return call.callee.property
    return None


def static_class_string(node: Expression | None) -> str | None:
    """The static class text of *node*, or None when it has none.

    Template-literal placeholders and non-literal helper arguments are
    treated as opaque and dropped; only literal text is kept.
    """
    if isinstance(node, Literal) and isinstance(node.value, str):
        return node.value
    if isinstance(node, TemplateLiteral):
        parts = list(node.quasis)
        for i, expression in enumerate(node.expressions):
            text = static_class_string(expression)
            if text:
                parts[i] = f"{parts[i]} {text} "
        return " ".join(" ".join(parts).split())
    if isinstance(node, CallExpression) and _callee_name(node) in CLASS_HELPERS:
        pieces = [static_class_string(arg) for arg in node.arguments]
        return " ".join(p for p in pieces if p)
    if isinstance(node, LogicalExpression):
        return static_class_string(node.right)
    if isinstance(node, ConditionalExpression):
        pieces = [static_class_string(node.consequent), static_class_string(node.alternate)]
        return " ".join(p for p in pieces if p)
    return None


def extract_styles_object(node: Expression | None) -> dict[str, str] | None:
    """Turn a styles object node into a ``{key: class string}`` mapping.

    Accepts an object literal directly or wrapped in a call such as
    ``Object.freeze({...})``; ``as const`` is already stripped by the parser.
    Returns None when *node* is not an object.  Keys whose value has no
    static class text are skipped.
    """
    if isinstance(node, CallExpression):
        node = next((a for a in node.arguments if isinstance(a, ObjectExpression)), None)
    if not isinstance(node, ObjectExpression):
        return None

    styles: dict[str, str] = {}
    for prop in node.properties:
        if prop.spread or prop.key is None:
            continue
        text = static_class_string(prop.value)
        if text is None:
            continue
        styles[prop.key] = " ".join(text.split())
    return styles

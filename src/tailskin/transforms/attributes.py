"""Attribute processor pipeline: JSX attributes to HTML attributes.

Rules are an explicit ordered tuple of predicate/transform pairs; the first
rule whose predicate matches decides the attribute, otherwise the default
transform does.
"""

from __future__ import annotations

from dataclasses import dataclass

from tailskin.naming import to_attribute_name, to_kebab_case
from tailskin.parser.nodes import (
    CallExpression,
    ConditionalExpression,
    Expression,
    Identifier,
    JSXExpressionContainer,
    Literal,
    LogicalExpression,
    MemberExpression,
    TemplateLiteral,
)
from tailskin.parser.styles import CLASS_HELPERS
from tailskin.transforms.base import (
    AttributeContext,
    AttributePredicate,
    AttributeResult,
    AttributeTransform,
)

__all__ = [
    "AttributeProcessorPipeline",
    "AttributeRule",
    "DEFAULT_RULES",
    "default_attribute",
    "literal_text",
    "resolve_class_names",
]

# Attributes that only mean something to React.
REACT_ONLY_ATTRIBUTES = frozenset({"key", "ref", "dangerouslySetInnerHTML", "suppressHydrationWarning"})


@dataclass(frozen=True)
class AttributeRule:
    name: str
    predicate: AttributePredicate
    transform: AttributeTransform


def literal_text(value: object) -> str:
    """Render a literal value as attribute text (``1.0`` -> ``"1"``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _expression(context: AttributeContext) -> Expression | None:
    value = context.attribute.value
    if isinstance(value, JSXExpressionContainer):
        return value.expression
    if isinstance(value, Literal):
        return value
    return None


def _style_key(node: Expression, context: AttributeContext) -> str | None:
    if (
        isinstance(node, MemberExpression)
        and isinstance(node.object, Identifier)
        and node.object.name == context.styles_identifier
    ):
        return node.property
    return None


def resolve_class_names(node: Expression | None, context: AttributeContext) -> list[str]:
    """The HTML classes a ``className`` expression stands for.

    Style keys are kebab-cased; keys mapped onto a component element are
    matched by the element selector instead and left out.
    """
    if node is None:
        return []
    if isinstance(node, Literal):
        return str(node.value).split() if isinstance(node.value, str) else []
    key = _style_key(node, context)
    if key is not None:
        return [] if key in context.component_map else [to_kebab_case(key)]
    if isinstance(node, TemplateLiteral):
        classes: list[str] = []
        for i, quasi in enumerate(node.quasis):
            classes.extend(quasi.split())
            if i < len(node.expressions):
                classes.extend(resolve_class_names(node.expressions[i], context))
        return classes
    if isinstance(node, CallExpression):
        callee = node.callee
        name = callee.name if isinstance(callee, Identifier) else None
        if name in CLASS_HELPERS:
            return [c for arg in node.arguments for c in resolve_class_names(arg, context)]
        return []
    if isinstance(node, ConditionalExpression):
        return resolve_class_names(node.consequent, context)
    if isinstance(node, LogicalExpression):
        return resolve_class_names(node.right, context) or resolve_class_names(node.left, context)
    return []


def _is_react_only(context: AttributeContext) -> bool:
    name = context.attribute.name
    return name in REACT_ONLY_ATTRIBUTES or (
        len(name) > 2 and name.startswith("on") and name[2].isupper()
    )


def _drop(context: AttributeContext) -> AttributeResult | None:
    return None


def _is_class_name(context: AttributeContext) -> bool:
    return context.attribute.name in ("className", "class")


def _class_name(context: AttributeContext) -> AttributeResult | None:
    classes = resolve_class_names(_expression(context), context)
    unique = list(dict.fromkeys(classes))
    if not unique:
        return None
    return AttributeResult("class", " ".join(unique))


def default_attribute(context: AttributeContext) -> AttributeResult | None:
    """Generic conversion used when no rule claims the attribute."""
    name = to_attribute_name(context.attribute.name)
    value = context.attribute.value
    if value is None:
        return AttributeResult(name)
    if isinstance(value, Literal):
        return AttributeResult(name, literal_text(value.value))
    if isinstance(value, JSXExpressionContainer):
        expression = value.expression
        if isinstance(expression, Literal):
            if expression.value is True:
                return AttributeResult(name)
            if expression.value is False or expression.value is None:
                return None
            return AttributeResult(name, literal_text(expression.value))
        if isinstance(expression, TemplateLiteral) and not expression.expressions:
            return AttributeResult(name, expression.quasis[0])
        # Resolved later, if at all.
        return AttributeResult(name)
    return None


DEFAULT_RULES: tuple[AttributeRule, ...] = (
    AttributeRule("react-only", _is_react_only, _drop),
    AttributeRule("class-name", _is_class_name, _class_name),
)


class AttributeProcessorPipeline:
    """Ordered attribute rules plus one guaranteed default transform."""

    def __init__(
        self,
        rules: tuple[AttributeRule, ...] | list[AttributeRule] | None = None,
        default: AttributeTransform | None = None,
    ) -> None:
        self.rules: tuple[AttributeRule, ...] = tuple(DEFAULT_RULES if rules is None else rules)
        self.default: AttributeTransform = default or default_attribute

    def with_rule(self, rule: AttributeRule, first: bool = True) -> AttributeProcessorPipeline:
        """A copy of this pipeline with *rule* added at the front (or the back)."""
        rules = (rule, *self.rules) if first else (*self.rules, rule)
        return AttributeProcessorPipeline(rules, self.default)

    def process(self, context: AttributeContext) -> AttributeResult | None:
        for rule in self.rules:
            if rule.predicate(context):
                return rule.transform(context)
        return self.default(context)

"""Node model for parsed component sources.

Every node keeps the source text it was parsed from in ``code`` and its
character range in ``span``; neither takes part in equality, so two parses of
equivalent source compare equal.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Union


def _code() -> str:
    return field(default="", compare=False, repr=False)  # type: ignore[return-value]


def _span() -> tuple[int, int]:
    return field(default=(0, 0), compare=False, repr=False)  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Identifier:
    name: str
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class Literal:
    """A string, number, boolean, null or undefined literal."""

    value: str | float | bool | None
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class TemplateLiteral:
    """A template string; ``quasis`` has one more entry than ``expressions``."""

    quasis: tuple[str, ...]
    expressions: tuple[Expression, ...] = ()
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class MemberExpression:
    """``object.property`` or ``object["property"]``."""

    object: Expression
    property: str
    computed: bool = False
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class CallExpression:
    callee: Expression
    arguments: tuple[Expression, ...] = ()
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class ConditionalExpression:
    test: Expression
    consequent: Expression
    alternate: Expression
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class LogicalExpression:
    operator: str  # "&&", "||", "??"
    left: Expression
    right: Expression
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class Property:
    """One member of an object literal; spreads have no key."""

    key: str | None
    value: Expression
    shorthand: bool = False
    spread: bool = False
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class ObjectExpression:
    properties: tuple[Property, ...] = ()
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class ArrayExpression:
    elements: tuple[Expression, ...] = ()
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class OpaqueExpression:
    """Any expression the compiler does not look inside (arithmetic, ``new``...)."""

    kind: str
    code: str = field(default="", compare=True)
    span: tuple[int, int] = _span()


# ---------------------------------------------------------------------------
# Statements and functions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ReturnStatement:
    argument: Expression | None = None
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class VariableDeclarator:
    """``name = init``; destructuring patterns have no name."""

    name: str | None
    init: Expression | None = None
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class VariableDeclaration:
    kind: str  # "const", "let", "var"
    declarations: tuple[VariableDeclarator, ...] = ()
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class Block:
    statements: tuple[Statement, ...] = ()
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class FunctionNode:
    """A function declaration, function expression or arrow function.

    ``body`` is a :class:`Block` or, for expression-bodied arrows, the
    returned expression.
    """

    name: str | None
    body: Block | Expression
    is_arrow: bool = False
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class OtherStatement:
    """A statement with no bearing on extraction (``if``, expressions...)."""

    kind: str
    code: str = _code()
    span: tuple[int, int] = _span()


# ---------------------------------------------------------------------------
# JSX
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class JSXText:
    value: str
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class JSXExpressionContainer:
    """``{expression}``; ``expression`` is None for ``{}`` and ``{/* comment */}``."""

    expression: Expression | None = None
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class JSXAttribute:
    """``name``, ``name="value"``, ``name={expr}`` or ``name=<El/>``.

    ``value`` is None for a bare boolean attribute.
    """

    name: str
    value: Literal | JSXExpressionContainer | JSXElement | None = None
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class JSXSpreadAttribute:
    argument: Expression
    code: str = _code()
    span: tuple[int, int] = _span()


@dataclass(frozen=True)
class JSXElement:
    """An element; ``name`` is dotted for member tags (``TimeRange.Root``)."""

    name: str
    attributes: tuple[JSXAttribute | JSXSpreadAttribute, ...] = ()
    children: tuple[JSXChild, ...] = ()
    self_closing: bool = False
    code: str = _code()
    span: tuple[int, int] = _span()

    def attribute(self, name: str) -> JSXAttribute | None:
        for attr in self.attributes:
            if isinstance(attr, JSXAttribute) and attr.name == name:
                return attr
        return None


@dataclass(frozen=True)
class JSXFragment:
    children: tuple[JSXChild, ...] = ()
    code: str = _code()
    span: tuple[int, int] = _span()


Expression = Union[
    Identifier,
    Literal,
    TemplateLiteral,
    MemberExpression,
    CallExpression,
    ConditionalExpression,
    LogicalExpression,
    ObjectExpression,
    ArrayExpression,
    FunctionNode,
    JSXElement,
    JSXFragment,
    OpaqueExpression,
]

JSXChild = Union[JSXElement, JSXFragment, JSXText, JSXExpressionContainer]

Statement = Union[
    VariableDeclaration, FunctionNode, ReturnStatement, Block, OtherStatement
]


# ---------------------------------------------------------------------------
# Extraction results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ImportInfo:
    """One import declaration.

    ``specifiers`` holds the local names (the default import first).
    Renamed imports read ``"name as local"`` and namespace imports
    ``"* as local"``.  ``span`` locates the declaration in its source for
    rewriting.
    """

    source: str
    specifiers: tuple[str, ...] = ()
    is_default: bool = False
    type_only: bool = False
    span: tuple[int, int] | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ParseConfig:
    """Which parts of a source to extract."""

    extract_jsx: bool = True
    extract_component_name: bool = True
    extract_imports: bool = True
    extract_styles: bool = True


JSX_ONLY_CONFIG = ParseConfig(
    extract_jsx=True, extract_component_name=False, extract_imports=False, extract_styles=False
)
SKIN_CONFIG = ParseConfig()
STYLES_CONFIG = ParseConfig(
    extract_jsx=False, extract_component_name=False, extract_imports=True, extract_styles=True
)


@dataclass
class ParsedSource:
    """What the compiler needs to know about one component source."""

    imports: list[ImportInfo] = field(default_factory=list)
    jsx_root: JSXElement | None = None
    component_name: str | None = None
    styles_node: Expression | None = None
    styles_identifier: str | None = None
    styles_import: ImportInfo | None = None
    styles_span: tuple[int, int] | None = None


def iter_nodes(node: object) -> Iterator[object]:
    """Yield *node* and every node below it, depth first in source order."""
    if not is_dataclass(node):
        return
    yield node
    for f in fields(node):
        if f.name in ("code", "span"):
            continue
        value = getattr(node, f.name)
        children = value if isinstance(value, tuple) else (value,)
        for child in children:
            yield from iter_nodes(child)

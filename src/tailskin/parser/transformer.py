"""Lark Transformer that converts a TSX parse tree into a ParsedSource."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, VisitError

from tailskin.parser.errors import ParseError
from tailskin.parser.nodes import (
    ArrayExpression,
    Block,
    CallExpression,
    ConditionalExpression,
    Expression,
    FunctionNode,
    Identifier,
    ImportInfo,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXFragment,
    JSXSpreadAttribute,
    JSXText,
    Literal,
    LogicalExpression,
    MemberExpression,
    ObjectExpression,
    OpaqueExpression,
    OtherStatement,
    ParseConfig,
    ParsedSource,
    Property,
    ReturnStatement,
    SKIN_CONFIG,
    TemplateLiteral,
    VariableDeclaration,
    VariableDeclarator,
)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

ANONYMOUS_COMPONENT = "AnonymousSkin"

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}


def _unescape(body: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            out.append(_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _line_col(source: str, pos: int) -> tuple[int, int]:
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


class _Sentinel:
    """Marker objects returned by transformer rules for non-expression syntax."""


class _TypeSyntax(_Sentinel):
    """TypeScript-only syntax; carries nothing."""


class _TypeOnly(_Sentinel):
    pass


class _Pattern(_Sentinel):
    def __init__(self, name: str | None = None):
        self.name = name


class _Computed(_Sentinel):
    pass


class _ImportDecl(_Sentinel):
    def __init__(self, info: ImportInfo):
        self.info = info


class _ExportDefault(_Sentinel):
    def __init__(self, value: Expression):
        self.value = value


class _Exported(_Sentinel):
    def __init__(self, declaration: VariableDeclaration | FunctionNode):
        self.declaration = declaration


class _ModuleOther(_Sentinel):
    pass


def _is_node(item: object) -> bool:
    return not isinstance(item, (_Sentinel, Token, str, tuple, list)) and item is not None


@v_args(meta=True)
class SourceTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into nodes and intermediate sentinels.

    ``offset`` shifts every recorded span; it is non-zero when parsing an
    expression embedded in a template literal.
    """

    def __init__(self, source: str, offset: int = 0):
        super().__init__()
        self._source = source
        self._offset = offset

    def _loc(self, meta) -> dict[str, object]:
        if getattr(meta, "empty", True):
            return {"code": "", "span": (self._offset, self._offset)}
        start = self._offset + meta.start_pos
        end = self._offset + meta.end_pos
        return {"code": self._source[start:end], "span": (start, end)}

    def _opaque(self, kind: str, meta) -> OpaqueExpression:
        return OpaqueExpression(kind=kind, **self._loc(meta))  # type: ignore[arg-type]

    # ---- module level ----

    def start(self, meta, items: list[object]) -> list[object]:
        return items

    def expression_root(self, meta, items: list[object]) -> object:
        return items[0]

    def type_only(self, meta, items: list[object]) -> _TypeOnly:
        return _TypeOnly()

    def default_import(self, meta, items: list[Token]) -> tuple[str, list[str]]:
        return ("default", [str(items[0])])

    def namespace_import(self, meta, items: list[Token]) -> tuple[str, list[str]]:
        return ("namespace", [f"* as {items[0]}"])

    def import_spec(self, meta, items: list[object]) -> str | None:
        names = [str(t) for t in items if isinstance(t, Token)]
        if any(isinstance(t, _TypeOnly) for t in items):
            return None
        if len(names) == 2 and names[0] != names[1]:
            return f"{names[0]} as {names[1]}"
        return names[0]

    def named_imports(self, meta, items: list[str | None]) -> tuple[str, list[str]]:
        return ("named", [name for name in items if name is not None])

    def import_clause(self, meta, items: list[tuple[str, list[str]]]) -> list[tuple[str, list[str]]]:
        return items

    def import_from(self, meta, items: list[object]) -> _ImportDecl:
        type_only = any(isinstance(i, _TypeOnly) for i in items)
        clause = next(i for i in items if isinstance(i, list))
        source = _unescape(str(items[-1])[1:-1])
        specifiers: list[str] = []
        is_default = False
        for kind, names in clause:
            if kind == "default":
                is_default = True
            specifiers.extend(names)
        loc = self._loc(meta)
        return _ImportDecl(
            ImportInfo(
                source=source,
                specifiers=tuple(specifiers),
                is_default=is_default,
                type_only=type_only,
                span=loc["span"],  # type: ignore[arg-type]
            )
        )

    def import_bare(self, meta, items: list[Token]) -> _ImportDecl:
        loc = self._loc(meta)
        return _ImportDecl(
            ImportInfo(source=_unescape(str(items[0])[1:-1]), span=loc["span"])  # type: ignore[arg-type]
        )

    def export_default_function(self, meta, items: list[object]) -> _ExportDefault:
        return _ExportDefault(items[0])  # type: ignore[arg-type]

    def export_default_expr(self, meta, items: list[object]) -> _ExportDefault:
        return _ExportDefault(items[0])  # type: ignore[arg-type]

    def export_var(self, meta, items: list[object]) -> _Exported:
        return _Exported(items[0])  # type: ignore[arg-type]

    def export_function(self, meta, items: list[object]) -> _Exported:
        return _Exported(items[0])  # type: ignore[arg-type]

    def export_type(self, meta, items: list[object]) -> _ModuleOther:
        return _ModuleOther()

    export_list = export_all = export_spec = export_type

    # ---- types (discarded) ----

    def type_decl(self, meta, items: list[object]) -> _ModuleOther:
        return _ModuleOther()

    def type_ann(self, meta, items: list[object]) -> _TypeSyntax:
        return _TypeSyntax()

    type_params = type_param = type_list = type_expr = type_ann
    type_postfix = type_primary = type_ref = type_args = type_ann
    type_object = type_member = type_ann

    # ---- patterns ----

    def name_pattern(self, meta, items: list[Token]) -> _Pattern:
        return _Pattern(str(items[0]))

    def object_pattern(self, meta, items: list[object]) -> _Pattern:
        return _Pattern()

    array_pattern = pattern_prop = param = params = arrow_params = object_pattern

    # ---- statements ----

    def declarator(self, meta, items: list[object]) -> VariableDeclarator:
        pattern = items[0]
        name = pattern.name if isinstance(pattern, _Pattern) else None
        init = next((i for i in items[1:] if _is_node(i)), None)
        return VariableDeclarator(name=name, init=init, **self._loc(meta))  # type: ignore[arg-type]

    def var_decl(self, meta, items: list[object]) -> VariableDeclaration:
        kind = str(items[0])
        declarations = tuple(i for i in items[1:] if isinstance(i, VariableDeclarator))
        return VariableDeclaration(kind=kind, declarations=declarations, **self._loc(meta))  # type: ignore[arg-type]

    def function_decl(self, meta, items: list[object]) -> FunctionNode:
        name = next(str(i) for i in items if isinstance(i, Token))
        body = items[-1]
        return FunctionNode(name=name, body=body, **self._loc(meta))  # type: ignore[arg-type]

    def function_expr(self, meta, items: list[object]) -> FunctionNode:
        return FunctionNode(name=None, body=items[-1], **self._loc(meta))  # type: ignore[arg-type]

    def arrow_fn(self, meta, items: list[object]) -> FunctionNode:
        return FunctionNode(name=None, body=items[-1], is_arrow=True, **self._loc(meta))  # type: ignore[arg-type]

    def block(self, meta, items: list[object]) -> Block:
        return Block(statements=tuple(items), **self._loc(meta))  # type: ignore[arg-type]

    def return_stmt(self, meta, items: list[object]) -> ReturnStatement:
        argument = items[0] if items else None
        return ReturnStatement(argument=argument, **self._loc(meta))  # type: ignore[arg-type]

    bare_return = return_stmt

    def if_stmt(self, meta, items: list[object]) -> OtherStatement:
        return OtherStatement(kind="if", **self._loc(meta))  # type: ignore[arg-type]

    def expr_stmt(self, meta, items: list[object]) -> OtherStatement:
        return OtherStatement(kind="expression", **self._loc(meta))  # type: ignore[arg-type]

    def empty_stmt(self, meta, items: list[object]) -> OtherStatement:
        return OtherStatement(kind="empty", **self._loc(meta))  # type: ignore[arg-type]

    # ---- expressions ----

    def identifier(self, meta, items: list[Token]) -> Identifier:
        return Identifier(name=str(items[0]), **self._loc(meta))  # type: ignore[arg-type]

    def string(self, meta, items: list[Token]) -> Literal:
        return Literal(value=_unescape(str(items[0])[1:-1]), **self._loc(meta))  # type: ignore[arg-type]

    def number(self, meta, items: list[Token]) -> Literal:
        raw = str(items[0])
        value: float = float(raw) if any(c in raw for c in ".eE") else int(raw)
        return Literal(value=value, **self._loc(meta))  # type: ignore[arg-type]

    def literal(self, meta, items: list[Token]) -> Literal:
        value = {"true": True, "false": False}.get(str(items[0]))
        return Literal(value=value, **self._loc(meta))  # type: ignore[arg-type]

    def template(self, meta, items: list[Token]) -> TemplateLiteral:
        token = items[0]
        raw = str(token)
        base = self._offset + token.start_pos  # type: ignore[operator]
        quasis: list[str] = []
        expressions: list[Expression] = []
        current: list[str] = []
        i = 1
        while i < len(raw) - 1:
            ch = raw[i]
            if ch == "\\" and i + 1 < len(raw) - 1:
                current.append(_ESCAPES.get(raw[i + 1], raw[i + 1]))
                i += 2
                continue
            if raw.startswith("${", i):
                end = _matching_brace(raw, i + 1)
                quasis.append("".join(current))
                current = []
                expressions.append(
                    _parse_fragment(raw[i + 2 : end], self._source, base + i + 2)
                )
                i = end + 1
                continue
            current.append(ch)
            i += 1
        quasis.append("".join(current))
        return TemplateLiteral(
            quasis=tuple(quasis), expressions=tuple(expressions), **self._loc(meta)  # type: ignore[arg-type]
        )

    def paren_expr(self, meta, items: list[object]) -> object:
        return items[0]

    def as_expr(self, meta, items: list[object]) -> object:
        return items[0]

    def member_expr(self, meta, items: list[object]) -> MemberExpression:
        return MemberExpression(
            object=items[0], property=str(items[1]), **self._loc(meta)  # type: ignore[arg-type]
        )

    def index_expr(self, meta, items: list[object]) -> Expression:
        index = items[1]
        if isinstance(index, Literal) and isinstance(index.value, str):
            return MemberExpression(
                object=items[0], property=index.value, computed=True, **self._loc(meta)  # type: ignore[arg-type]
            )
        return self._opaque("index", meta)

    def arguments(self, meta, items: list[object]) -> tuple[object, ...]:
        return tuple(items)

    def call_expr(self, meta, items: list[object]) -> CallExpression:
        return CallExpression(
            callee=items[0], arguments=items[1], **self._loc(meta)  # type: ignore[arg-type]
        )

    def conditional_expr(self, meta, items: list[object]) -> ConditionalExpression:
        test, consequent, alternate = items
        return ConditionalExpression(
            test=test, consequent=consequent, alternate=alternate, **self._loc(meta)  # type: ignore[arg-type]
        )

    def logical_expr(self, meta, items: list[object]) -> LogicalExpression:
        left, operator, right = items
        return LogicalExpression(
            operator=str(operator), left=left, right=right, **self._loc(meta)  # type: ignore[arg-type]
        )

    def binary_expr(self, meta, items: list[object]) -> OpaqueExpression:
        return self._opaque("binary", meta)

    def unary_expr(self, meta, items: list[object]) -> OpaqueExpression:
        return self._opaque("unary", meta)

    def new_expr(self, meta, items: list[object]) -> OpaqueExpression:
        return self._opaque("new", meta)

    def assignment(self, meta, items: list[object]) -> OpaqueExpression:
        return self._opaque("assignment", meta)

    def spread(self, meta, items: list[object]) -> OpaqueExpression:
        return self._opaque("spread", meta)

    def prop_key(self, meta, items: list[object]) -> str | _Computed:
        key = items[0]
        if isinstance(key, Token):
            if key.type == "STRING":
                return _unescape(str(key)[1:-1])
            return str(key)
        return _Computed()

    def obj_property(self, meta, items: list[object]) -> Property:
        key = items[0] if isinstance(items[0], str) else None
        return Property(key=key, value=items[1], **self._loc(meta))  # type: ignore[arg-type]

    def obj_shorthand(self, meta, items: list[Token]) -> Property:
        loc = self._loc(meta)
        name = str(items[0])
        return Property(key=name, value=Identifier(name=name, **loc), shorthand=True, **loc)  # type: ignore[arg-type]

    def obj_spread(self, meta, items: list[object]) -> Property:
        return Property(key=None, value=items[0], spread=True, **self._loc(meta))  # type: ignore[arg-type]

    def obj_method(self, meta, items: list[object]) -> Property:
        loc = self._loc(meta)
        key = items[0] if isinstance(items[0], str) else None
        function = FunctionNode(name=key, body=items[-1], **loc)  # type: ignore[arg-type]
        return Property(key=key, value=function, **loc)  # type: ignore[arg-type]

    def object_literal(self, meta, items: list[Property]) -> ObjectExpression:
        return ObjectExpression(properties=tuple(items), **self._loc(meta))  # type: ignore[arg-type]

    def array_literal(self, meta, items: list[object]) -> ArrayExpression:
        return ArrayExpression(elements=tuple(items), **self._loc(meta))  # type: ignore[arg-type]

    # ---- JSX ----

    def jsx_name(self, meta, items: list[Token]) -> str:
        return ".".join(str(t) for t in items)

    def jsx_attribute(self, meta, items: list[object]) -> JSXAttribute:
        value = items[1] if len(items) > 1 else None
        return JSXAttribute(name=str(items[0]), value=value, **self._loc(meta))  # type: ignore[arg-type]

    def jsx_spread_attribute(self, meta, items: list[object]) -> JSXSpreadAttribute:
        return JSXSpreadAttribute(argument=items[0], **self._loc(meta))  # type: ignore[arg-type]

    def jsx_expression_container(self, meta, items: list[object]) -> JSXExpressionContainer:
        expression = items[0] if items else None
        return JSXExpressionContainer(expression=expression, **self._loc(meta))  # type: ignore[arg-type]

    def jsx_text(self, meta, items: list[Token]) -> JSXText:
        return JSXText(value=str(items[0]), **self._loc(meta))  # type: ignore[arg-type]

    def jsx_self_closing(self, meta, items: list[object]) -> JSXElement:
        return JSXElement(
            name=items[0],  # type: ignore[arg-type]
            attributes=tuple(items[1:]),  # type: ignore[arg-type]
            self_closing=True,
            **self._loc(meta),  # type: ignore[arg-type]
        )

    def jsx_element(self, meta, items: list[object]) -> JSXElement:
        opening, closing = items[0], items[-1]
        if opening != closing:
            line, column = _line_col(self._source, self._offset + meta.end_pos)
            raise ParseError(
                f"Expected closing tag </{opening}> but found </{closing}>",
                line=line,
                column=column,
                token=str(closing),
            )
        attributes = tuple(
            i for i in items[1:-1] if isinstance(i, (JSXAttribute, JSXSpreadAttribute))
        )
        children = tuple(
            i for i in items[1:-1] if not isinstance(i, (JSXAttribute, JSXSpreadAttribute))
        )
        return JSXElement(
            name=opening,  # type: ignore[arg-type]
            attributes=attributes,
            children=children,  # type: ignore[arg-type]
            **self._loc(meta),  # type: ignore[arg-type]
        )

    def jsx_fragment(self, meta, items: list[object]) -> JSXFragment:
        return JSXFragment(children=tuple(items), **self._loc(meta))  # type: ignore[arg-type]


def _matching_brace(text: str, open_at: int) -> int:
    """Index of the ``}`` closing the ``{`` at *open_at*, skipping strings."""
    depth = 0
    quote: str | None = None
    i = open_at
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return len(text) - 1


# ---------------------------------------------------------------------------
# Parsing entry points
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def _get_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="earley",
        lexer="dynamic",
        start=["start", "expression_root"],
        propagate_positions=True,
        ambiguity="resolve",
    )


def _describe(error: UnexpectedInput) -> tuple[str, str | None]:
    if isinstance(error, UnexpectedCharacters):
        return f"Unexpected character {error.char!r}", error.char
    if isinstance(error, UnexpectedEOF):
        return "Unexpected end of input", None
    token = getattr(error, "token", None)
    if token is not None:
        return f"Unexpected token {str(token)!r}", str(token)
    return "Syntax error", None


def _parse(text: str, start: str, source: str, offset: int) -> object:
    try:
        tree = _get_parser().parse(text, start=start)
    except UnexpectedInput as e:
        pos = getattr(e, "pos_in_stream", None)
        if pos is None:
            pos = len(text)
        line, column = _line_col(source, offset + pos)
        message, token = _describe(e)
        raise ParseError(message, line=line, column=column, token=token) from e
    try:
        return SourceTransformer(source, offset).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise


def _parse_fragment(text: str, source: str, offset: int) -> Expression:
    """Parse an expression embedded at *offset* within *source*."""
    return _parse(text, "expression_root", source, offset)  # type: ignore[return-value]


def parse_expression(text: str) -> Expression:
    """Parse a standalone expression such as ``cn(styles.A, 'flex')``."""
    return _parse_fragment(text, text, 0)


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def _is_styles_source(source: str) -> bool:
    return "styles" in source or source.endswith(".css")


def _find_jsx(function: FunctionNode) -> JSXElement | None:
    """The JSX returned by a function: an arrow's body or a top-level return."""
    body = function.body
    if isinstance(body, JSXElement):
        return body
    if isinstance(body, Block):
        for statement in body.statements:
            if isinstance(statement, ReturnStatement) and isinstance(
                statement.argument, JSXElement
            ):
                return statement.argument
    return None


def _assemble_source(items: list[object], config: ParseConfig) -> ParsedSource:
    """Walk the flat list of module items and pull out what compilation needs."""
    imports: list[ImportInfo] = []
    declarators: dict[str, tuple[VariableDeclarator, VariableDeclaration]] = {}
    functions: dict[str, FunctionNode] = {}
    ordered_functions: list[tuple[str | None, FunctionNode]] = []
    exported: list[tuple[str | None, FunctionNode]] = []
    default_export: Expression | None = None

    def record(item: object, is_exported: bool) -> None:
        if isinstance(item, FunctionNode):
            functions[item.name or ""] = item
            ordered_functions.append((item.name, item))
            if is_exported:
                exported.append((item.name, item))
        elif isinstance(item, VariableDeclaration):
            for declarator in item.declarations:
                if declarator.name is None:
                    continue
                declarators[declarator.name] = (declarator, item)
                if isinstance(declarator.init, FunctionNode):
                    functions[declarator.name] = declarator.init
                    ordered_functions.append((declarator.name, declarator.init))
                    if is_exported:
                        exported.append((declarator.name, declarator.init))

    for item in items:
        if isinstance(item, _ImportDecl):
            imports.append(item.info)
        elif isinstance(item, _Exported):
            record(item.declaration, True)
        elif isinstance(item, _ExportDefault):
            default_export = item.value
            if isinstance(item.value, FunctionNode) and item.value.name:
                record(item.value, False)
        else:
            record(item, False)

    result = ParsedSource()
    if config.extract_imports:
        result.imports = imports

    if config.extract_jsx or config.extract_component_name:
        name, function = _resolve_component(default_export, functions, exported, ordered_functions)
        if config.extract_component_name:
            result.component_name = name
        if config.extract_jsx and function is not None:
            result.jsx_root = _find_jsx(function)

    if config.extract_styles:
        for info in imports:
            if _is_styles_source(info.source) and info.specifiers and not info.type_only:
                result.styles_import = info
                result.styles_identifier = info.specifiers[0].split(" as ")[-1]
                break
        if result.styles_identifier is None and "styles" in declarators:
            result.styles_identifier = "styles"
        if result.styles_identifier in declarators:
            declarator, declaration = declarators[result.styles_identifier]  # type: ignore[index]
            result.styles_node = declarator.init
            result.styles_span = declaration.span
    return result


def _resolve_component(
    default_export: Expression | None,
    functions: dict[str, FunctionNode],
    exported: list[tuple[str | None, FunctionNode]],
    ordered_functions: list[tuple[str | None, FunctionNode]],
) -> tuple[str | None, FunctionNode | None]:
    if isinstance(default_export, FunctionNode):
        return default_export.name or ANONYMOUS_COMPONENT, default_export
    if isinstance(default_export, Identifier):
        return default_export.name, functions.get(default_export.name)
    for name, function in exported:
        if _find_jsx(function) is not None:
            return name, function
    for name, function in ordered_functions:
        if _find_jsx(function) is not None:
            return name, function
    return None, None


def parse_source(source: str, config: ParseConfig = SKIN_CONFIG) -> ParsedSource:
    """Parse component source text and extract imports, JSX, name and styles.

    Raises:
        ParseError: if the source is not valid in the supported TSX subset.
    """
    items = _parse(source, "start", source, 0)
    return _assemble_source(items, config)  # type: ignore[arg-type]

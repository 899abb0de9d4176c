from tailskin.parser.errors import ParseError
from tailskin.parser.nodes import (
    JSX_ONLY_CONFIG,
    SKIN_CONFIG,
    STYLES_CONFIG,
    ImportInfo,
    JSXAttribute,
    JSXElement,
    ParseConfig,
    ParsedSource,
)
from tailskin.parser.styles import extract_styles_object, static_class_string
from tailskin.parser.transformer import parse_expression, parse_source

__all__ = [
    "JSX_ONLY_CONFIG",
    "SKIN_CONFIG",
    "STYLES_CONFIG",
    "ImportInfo",
    "JSXAttribute",
    "JSXElement",
    "ParseConfig",
    "ParseError",
    "ParsedSource",
    "extract_styles_object",
    "parse_expression",
    "parse_source",
    "static_class_string",
]

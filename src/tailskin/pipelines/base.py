"""Pipeline types, errors, and the skin-loading step every pipeline shares."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Protocol

from tailskin.candidate.design_system import DesignSystem
from tailskin.config import CompilerConfig, CSSStrategy, InputType, OutputFormat
from tailskin.model.diagnostic import Diagnostic, warning
from tailskin.parser import (
    SKIN_CONFIG,
    STYLES_CONFIG,
    ParseConfig,
    ParsedSource,
    ParseError,
    extract_styles_object,
    parse_source,
)
from tailskin.parser.nodes import JSXElement

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class CompilationError(Exception):
    """A fatal problem with one entry file; no output is produced for it."""

    def __init__(
        self,
        path: str,
        message: str,
        line: int | None = None,
        column: int | None = None,
        token: str | None = None,
    ) -> None:
        self.path = path
        self.message = message
        self.line = line
        self.column = column
        self.token = token
        super().__init__(str(self))

    def __str__(self) -> str:
        location = self.path
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return f"{location}: {self.message}"


class PipelineConfigError(Exception):
    """Raised for an invalid pipeline registration."""


class PipelineNotFoundError(PipelineConfigError):
    """Raised when no pipeline is registered for a key."""

    def __init__(self, key: PipelineKey, available: list[PipelineKey]) -> None:
        self.key = key
        self.available = available
        names = ", ".join(str(k) for k in available) or "none"
        super().__init__(f"no pipeline registered for {key} (available: {names})")


# ---------------------------------------------------------------------------
# Keys and outputs
# ---------------------------------------------------------------------------


class PipelineKey(NamedTuple):
    input_type: InputType
    output_format: OutputFormat
    css_strategy: CSSStrategy

    @classmethod
    def from_config(cls, config: CompilerConfig) -> PipelineKey:
        return cls(config.input_type, config.output_format, config.css_strategy)

    def __str__(self) -> str:
        return f"{self.input_type}/{self.output_format}/{self.css_strategy}"


@dataclass(frozen=True)
class CompilationFile:
    path: str
    content: str
    type: str


@dataclass
class CompilationOutput:
    """Files in output order plus human-readable warnings."""

    files: list[CompilationFile] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class CompilationPipeline(Protocol):
    """Compiles one entry source; performs no file I/O."""

    key: PipelineKey
    name: str

    def compile(
        self,
        entry_file: str,
        source: str,
        config: CompilerConfig,
        styles_source: str | None = None,
    ) -> CompilationOutput: ...


# ---------------------------------------------------------------------------
# Shared loading step
# ---------------------------------------------------------------------------


@dataclass
class SkinContext:
    """A parsed skin plus its styles and the diagnostics collected so far."""

    entry_file: str
    source: str
    parsed: ParsedSource
    jsx_root: JSXElement
    component_name: str
    styles: dict[str, str]
    design_system: DesignSystem
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def warnings(self, config: CompilerConfig) -> list[str]:
        return [str(d) for d in self.diagnostics] if config.warnings else []


def _parse(path: str, source: str, parse_config: ParseConfig = SKIN_CONFIG) -> ParsedSource:
    try:
        return parse_source(source, parse_config)
    except ParseError as exc:
        raise CompilationError(path, exc.message, exc.line, exc.column, exc.token) from exc


def load_skin(
    entry_file: str,
    source: str,
    config: CompilerConfig,
    styles_source: str | None = None,
) -> SkinContext:
    """Parse *source* and resolve its styles object.

    Styles come from an object in the skin itself, else from *styles_source*
    (the separate styles module the skin imports).

    Raises:
        CompilationError: on a syntax error or when no component JSX is found.
    """
    parsed = _parse(entry_file, source)
    if parsed.jsx_root is None or parsed.component_name is None:
        raise CompilationError(entry_file, "no component returning JSX found")

    diagnostics: list[Diagnostic] = []
    styles_node = parsed.styles_node
    if styles_node is None and styles_source is not None:
        styles_node = _parse(f"{entry_file} (styles)", styles_source, STYLES_CONFIG).styles_node
        if styles_node is None:
            diagnostics.append(warning("missing-styles", "styles module has no styles object"))
    elif styles_node is None and parsed.styles_identifier is not None:
        diagnostics.append(
            warning(
                "missing-styles",
                f"'{parsed.styles_identifier}' is imported but no styles object was provided",
            )
        )
    styles = extract_styles_object(styles_node) or {}

    logger.debug(
        "loaded %s: component %s, %d style keys", entry_file, parsed.component_name, len(styles)
    )
    return SkinContext(
        entry_file=entry_file,
        source=source,
        parsed=parsed,
        jsx_root=parsed.jsx_root,
        component_name=parsed.component_name,
        styles=styles,
        design_system=config.design_system(),
        diagnostics=diagnostics,
    )

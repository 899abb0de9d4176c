"""Skin to React pipelines: CSS Modules output or inlined class strings."""

from __future__ import annotations

import json
import logging
from pathlib import PurePath

from tailskin.config import CompilerConfig, CSSStrategy, InputType, OutputFormat
from tailskin.css import TailwindCompilationConfig, compile_tailwind_to_css
from tailskin.generator import apply_splices
from tailskin.generator.splice import Edit
from tailskin.model.diagnostic import warning
from tailskin.parser.nodes import (
    Identifier,
    JSXAttribute,
    JSXExpressionContainer,
    MemberExpression,
    iter_nodes,
)
from tailskin.pipelines.base import (
    CompilationFile,
    CompilationOutput,
    PipelineKey,
    SkinContext,
    load_skin,
)

logger = logging.getLogger(__name__)


def _line_end(source: str, end: int) -> int:
    """Extend a removal to swallow the rest of its line when that is blank."""
    newline = source.find("\n", end)
    if newline != -1 and not source[end:newline].strip(" \t;"):
        return newline + 1
    return end


def _line_start(source: str, start: int) -> int:
    """Include the ``export`` keyword and indentation before *start*."""
    line_start = source.rfind("\n", 0, start) + 1
    prefix = source[line_start:start].strip()
    if prefix in ("", "export"):
        return line_start
    return start


def _removal(source: str, span: tuple[int, int]) -> Edit:
    return (_line_start(source, span[0]), _line_end(source, span[1]), "")


def _styles_edits(skin: SkinContext, replacement: str) -> list[Edit]:
    """Edits that swap the styles import/object for *replacement* (may be empty)."""
    parsed = skin.parsed
    source = skin.source
    edits: list[Edit] = []
    inserted = False
    if parsed.styles_import is not None and parsed.styles_import.span is not None:
        start, end = parsed.styles_import.span
        if replacement:
            edits.append((start, _line_end(source, end), replacement + "\n"))
            inserted = True
        else:
            edits.append(_removal(source, (start, end)))
    if parsed.styles_span is not None and parsed.styles_node is not None:
        edits.append(_removal(source, parsed.styles_span))
    if replacement and not inserted:
        spans = [i.span for i in parsed.imports if i.span is not None]
        at = _line_end(source, max(end for _, end in spans)) if spans else 0
        edits.append((at, at, replacement + "\n"))
    return edits


def _style_references(skin: SkinContext) -> list[tuple[MemberExpression, JSXExpressionContainer | None]]:
    """Every ``styles.Key`` in the JSX, with its container when it is the whole attribute value."""
    identifier = skin.parsed.styles_identifier
    found: list[tuple[MemberExpression, JSXExpressionContainer | None]] = []
    seen: set[tuple[int, int]] = set()
    for node in iter_nodes(skin.jsx_root):
        if not isinstance(node, JSXAttribute) or not isinstance(node.value, JSXExpressionContainer):
            continue
        container = node.value
        for inner in iter_nodes(container.expression):
            if (
                isinstance(inner, MemberExpression)
                and isinstance(inner.object, Identifier)
                and inner.object.name == identifier
                and inner.span not in seen
            ):
                seen.add(inner.span)
                found.append((inner, container if container.expression is inner else None))
    return found


def _base_name(entry_file: str) -> str:
    return PurePath(entry_file).stem


class ReactCSSModulesPipeline:
    """Keep the React skin; compile its styles object to a CSS Module."""

    key = PipelineKey(InputType.SKIN, OutputFormat.REACT, CSSStrategy.CSS_MODULES)
    name = "Skin -> React (CSS Modules)"

    def compile(
        self,
        entry_file: str,
        source: str,
        config: CompilerConfig,
        styles_source: str | None = None,
    ) -> CompilationOutput:
        skin = load_skin(entry_file, source, config, styles_source)
        name = _base_name(entry_file)
        identifier = skin.parsed.styles_identifier or "styles"
        module_path = f"./{name}.module.css"

        compiled = compile_tailwind_to_css(
            TailwindCompilationConfig(
                styles_object=skin.styles,
                design_system=skin.design_system,
                warnings=config.warnings,
            )
        )
        import_line = f"import {identifier} from '{module_path}';"
        component = apply_splices(source, _styles_edits(skin, import_line))

        files = [
            CompilationFile(f"{name}.tsx", component, "tsx"),
            CompilationFile(f"{name}.module.css", compiled.css, "css"),
            CompilationFile(f"{name}.module.css.d.ts", compiled.dts, "dts"),
        ]
        logger.info("compiled %s with %s into %d file(s)", entry_file, self.key, len(files))
        return CompilationOutput(files=files, warnings=compiled.warnings + skin.warnings(config))


class ReactInlinePipeline:
    """Keep the React skin; replace ``styles.Key`` with its class string."""

    key = PipelineKey(InputType.SKIN, OutputFormat.REACT, CSSStrategy.INLINE)
    name = "Skin -> React (inline classes)"

    def compile(
        self,
        entry_file: str,
        source: str,
        config: CompilerConfig,
        styles_source: str | None = None,
    ) -> CompilationOutput:
        skin = load_skin(entry_file, source, config, styles_source)
        edits = _styles_edits(skin, "")
        for member, container in _style_references(skin):
            classes = skin.styles.get(member.property)
            if classes is None:
                skin.diagnostics.append(
                    warning(
                        "unknown-style-key",
                        f"'{member.property}' is not defined in the styles object",
                        style_key=member.property,
                    )
                )
                classes = ""
            literal = json.dumps(classes)
            if container is not None:
                # JSX attribute strings have no escapes.
                if "\\" in classes or '"' in classes:
                    literal = "{" + literal + "}"
                edits.append((container.span[0], container.span[1], literal))
            else:
                edits.append((member.span[0], member.span[1], literal))

        component = apply_splices(source, edits)
        name = _base_name(entry_file)
        logger.info("compiled %s with %s into 1 file", entry_file, self.key)
        return CompilationOutput(
            files=[CompilationFile(f"{name}.tsx", component, "tsx")],
            warnings=skin.warnings(config),
        )

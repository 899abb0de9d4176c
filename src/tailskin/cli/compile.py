"""CLI command: tailskin compile -- compile one skin and write its output files."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from tailskin.config import CompilerConfig, ConfigError, CSSStrategy, OutputFormat
from tailskin.parser import STYLES_CONFIG, ParseError, parse_source
from tailskin.pipelines import CompilationError, PipelineConfigError, compile_skin


def _load_config(config_path: str | None, **overrides: object) -> CompilerConfig:
    data: dict = {}
    if config_path:
        try:
            data = json.loads(Path(config_path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{config_path}: invalid JSON ({exc})") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path}: expected a JSON object")
    return CompilerConfig.from_mapping(data, **overrides)


def _sibling_styles(entry: Path, source: str) -> str | None:
    """The skin's ``styles.ts`` when it imports ``./styles`` without an inline object."""
    try:
        parsed = parse_source(source, STYLES_CONFIG)
    except ParseError:
        # Reported properly by the compile step.
        return None
    if parsed.styles_node is not None or parsed.styles_import is None:
        return None
    for candidate in (f"{parsed.styles_import.source}.ts", f"{parsed.styles_import.source}.tsx"):
        path = (entry.parent / candidate).resolve()
        if path.is_file():
            return path.read_text(encoding="utf-8")
    return None


@click.command(name="compile")
@click.argument("entry", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=None,
    help="Output format (default: web-component)",
)
@click.option(
    "--css-strategy",
    type=click.Choice([s.value for s in CSSStrategy]),
    default=None,
    help="How CSS is emitted (default: inline)",
)
@click.option("--out-dir", type=click.Path(file_okay=False), default=None, help="Output directory")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON compiler configuration",
)
@click.option(
    "--styles",
    "styles_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Separate styles module (default: the skin's ./styles.ts)",
)
@click.option("--no-warnings", is_flag=True, help="Do not report warnings")
@click.option("--verbose", "-v", is_flag=True, help="Verbose logging")
def compile_command(
    entry: str,
    output_format: str | None,
    css_strategy: str | None,
    out_dir: str | None,
    config_path: str | None,
    styles_path: str | None,
    no_warnings: bool,
    verbose: bool,
) -> None:
    """Compile a skin ENTRY file and write the generated files.

    Exits with code 1, writing nothing, if the skin cannot be compiled.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    entry_path = Path(entry)

    try:
        config = _load_config(
            config_path,
            output_format=output_format,
            css_strategy=css_strategy,
            warnings=False if no_warnings else None,
        )
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    source = entry_path.read_text(encoding="utf-8")
    if styles_path:
        styles_source = Path(styles_path).read_text(encoding="utf-8")
    else:
        styles_source = _sibling_styles(entry_path, source)

    try:
        output = compile_skin(str(entry_path), source, config, styles_source)
    except (CompilationError, PipelineConfigError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    target = Path(out_dir) if out_dir else entry_path.parent
    target.mkdir(parents=True, exist_ok=True)
    for file in output.files:
        path = target / file.path
        path.write_text(file.content, encoding="utf-8")
        click.echo(f"Wrote {path}")

    if output.warnings:
        click.echo()
        for message in output.warnings:
            click.echo(message, err=True)
    click.echo(f"Summary: {len(output.files)} file(s), {len(output.warnings)} warning(s)")

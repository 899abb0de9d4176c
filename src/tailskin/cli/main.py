"""tailskin CLI entry point: Click group with subcommands."""

import click

from tailskin import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tailskin")
def cli() -> None:
    """tailskin - compile Tailwind-styled TSX skins into Web Components and React modules."""


# Import and register subcommands
from tailskin.cli.compile import compile_command  # noqa: E402
from tailskin.cli.inspect import parse_class, pipelines  # noqa: E402

cli.add_command(compile_command)
cli.add_command(parse_class)
cli.add_command(pipelines)

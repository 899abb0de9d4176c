"""CLI commands: tailskin parse-class and tailskin pipelines."""

from __future__ import annotations

import sys

import click

from tailskin.candidate import default_design_system, format_variant, parse_candidate
from tailskin.model.candidate import ArbitraryUtilityValue, Candidate, NamedUtilityValue
from tailskin.pipelines import default_registry


def _describe(candidate: Candidate) -> list[str]:
    lines = [f"  kind: {candidate.kind}", f"  root: {candidate.root}"]
    value = candidate.value
    if isinstance(value, ArbitraryUtilityValue):
        hint = f" ({value.data_type})" if value.data_type else ""
        lines.append(f"  value: [{value.value}]{hint}")
    elif isinstance(value, NamedUtilityValue):
        fraction = f" (fraction {value.fraction})" if value.fraction else ""
        lines.append(f"  value: {value.value}{fraction}")
    if candidate.modifier is not None:
        lines.append(f"  modifier: {candidate.modifier.kind} {candidate.modifier.value}")
    for variant in candidate.variants:
        lines.append(f"  variant: {variant.kind} {format_variant(variant)}")
    flags = [name for name in ("important", "negative") if getattr(candidate, name)]
    if flags:
        lines.append(f"  flags: {', '.join(flags)}")
    return lines


@click.command(name="parse-class")
@click.argument("classes", nargs=-1, required=True)
def parse_class(classes: tuple[str, ...]) -> None:
    """Parse each utility class and print its structure.

    Exits with code 1 if any class is unparseable.
    """
    design_system = default_design_system()
    failed = 0
    for raw in classes:
        candidate = parse_candidate(raw, design_system)
        if candidate is None:
            click.echo(f"{raw}: unparseable")
            failed += 1
            continue
        click.echo(f"{raw}:")
        for line in _describe(candidate):
            click.echo(line)
    if failed:
        sys.exit(1)


@click.command()
def pipelines() -> None:
    """List the registered compilation pipelines."""
    registry = default_registry()
    for key in registry.keys():
        click.echo(f"{key}  {registry.get(key).name}")

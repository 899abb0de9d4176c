"""Compile a ``{key: utility classes}`` styles object into CSS Modules output."""

from __future__ import annotations

import hashlib
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from tailskin.candidate.arbitrary import is_valid_arbitrary
from tailskin.candidate.design_system import DesignSystem, default_design_system
from tailskin.candidate.parser import parse_candidate
from tailskin.css.theme import DEFAULT_THEME, Theme
from tailskin.css.utilities import (
    MARKER_UTILITIES,
    expected_arbitrary_type,
    utility_declarations,
)
from tailskin.css.variants import (
    ResolvedSelector,
    SelectorContext,
    UnsupportedVariantError,
    apply_variants,
)
from tailskin.model.candidate import ArbitraryUtilityValue, Candidate, Variant
from tailskin.model.diagnostic import Diagnostic, warning
from tailskin.stylesheet.model import AtRule, Declaration, Rule, StyleRule, Stylesheet
from tailskin.stylesheet.parser import render_stylesheet

__all__ = [
    "CSSModulesOutput",
    "TailwindCompilationConfig",
    "compile_tailwind_to_css",
    "generate_dts",
    "scoped_class_name",
]

logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")


@dataclass(frozen=True)
class TailwindCompilationConfig:
    """Input to :func:`compile_tailwind_to_css`.

    ``scoped_name`` is an optional class-name pattern using ``[name]`` and
    ``[hash]`` placeholders (e.g. ``"[name]_[hash]"``); by default each key
    is its own class name.
    """

    styles_object: Mapping[str, str]
    design_system: DesignSystem | None = None
    warnings: bool = True
    scoped_name: str | None = None
    theme: Theme | None = None


@dataclass(frozen=True)
class CSSModulesOutput:
    css: str
    dts: str
    class_names: dict[str, str]
    warnings: list[str] = field(default_factory=list)
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass
class _Group:
    """Declarations sharing one variant stack within a key."""

    resolved: ResolvedSelector
    declarations: list[Declaration] = field(default_factory=list)


def scoped_class_name(key: str, classes: str, pattern: str | None) -> str:
    """The generated class name for *key*; stable for the same input."""
    if not pattern:
        return key
    digest = hashlib.sha1(f"{key}:{classes}".encode("utf-8")).hexdigest()[:6]
    return pattern.replace("[name]", key).replace("[local]", key).replace("[hash]", digest)


def generate_dts(keys: list[str]) -> str:
    """Type declarations for a CSS module exporting *keys*."""
    lines = ["declare const styles: {"]
    for key in keys:
        name = key if _IDENTIFIER_RE.match(key) else repr(key)
        lines.append(f"  readonly {name}: string;")
    lines.append("};")
    lines.append("export default styles;")
    return "\n".join(lines) + "\n"


def _wrap(rule: Rule, at_rules: tuple[str, ...]) -> Rule:
    for prelude in reversed(at_rules):
        name, _, params = prelude[1:].partition(" ")
        rule = AtRule(name=name, params=params.strip(), rules=(rule,))
    return rule


def _marker_name(candidate: Candidate) -> str:
    return candidate.modifier.value if candidate.modifier else ""


def _container_declarations(candidate: Candidate) -> list[Declaration]:
    declarations = [Declaration("container-type", "inline-size", candidate.important)]
    if candidate.modifier is not None:
        declarations.append(
            Declaration("container-name", candidate.modifier.value, candidate.important)
        )
    return declarations


def compile_tailwind_to_css(config: TailwindCompilationConfig) -> CSSModulesOutput:
    """Compile every key of the styles object into one CSS rule per variant stack.

    Tokens that cannot be parsed, have no CSS, or use an unsupported variant
    are reported as warnings and skipped; compilation never fails on them.
    """
    design_system = config.design_system or default_design_system()
    theme = config.theme or DEFAULT_THEME
    diagnostics: list[Diagnostic] = []

    class_names = {
        key: scoped_class_name(key, classes, config.scoped_name)
        for key, classes in config.styles_object.items()
    }

    # First pass: parse every token and register group/peer anchors.
    parsed: dict[str, list[tuple[str, Candidate | None]]] = {}
    groups: dict[str, str] = {}
    peers: dict[str, str] = {}
    for key, classes in config.styles_object.items():
        tokens = [(token, parse_candidate(token, design_system)) for token in classes.split()]
        parsed[key] = tokens
        for _, candidate in tokens:
            if candidate is None or candidate.kind != "static" or candidate.variants:
                continue
            registry = {"group": groups, "peer": peers}.get(candidate.root)
            if registry is not None:
                registry.setdefault(_marker_name(candidate), f".{class_names[key]}")
    context = SelectorContext(groups=groups, peers=peers, theme=theme)

    # Second pass: declarations grouped by variant stack, first occurrence first.
    rules: list[Rule] = []
    for key, tokens in parsed.items():
        selector = f".{class_names[key]}"
        key_groups: dict[tuple[Variant, ...], _Group] = {}
        for token, candidate in tokens:
            if candidate is None:
                diagnostics.append(
                    warning("unparseable-class", f"could not parse class '{token}'", style_key=key, token=token)
                )
                logger.debug("unparseable class %r in %s", token, key)
                continue
            if candidate.kind == "static" and candidate.root in MARKER_UTILITIES:
                if candidate.root != "@container":
                    continue
                declarations = _container_declarations(candidate)
            else:
                declarations = utility_declarations(candidate, theme)
            if declarations is None:
                diagnostics.append(
                    warning("no-css", f"no CSS generated for class '{token}'", style_key=key, token=token)
                )
                continue

            expected = expected_arbitrary_type(candidate.root)
            if (
                candidate.kind == "functional"
                and isinstance(candidate.value, ArbitraryUtilityValue)
                and expected is not None
                and not is_valid_arbitrary(candidate.value.value, expected)
            ):
                diagnostics.append(
                    warning(
                        "invalid-arbitrary-value",
                        f"arbitrary value '{candidate.value.value}' is not a valid {expected}",
                        style_key=key,
                        token=token,
                        fix=f"add a type hint: {candidate.root}-[{expected}:...]",
                    )
                )

            group = key_groups.get(candidate.variants)
            if group is None:
                try:
                    resolved = apply_variants(selector, candidate.variants, context)
                except UnsupportedVariantError as exc:
                    diagnostics.append(
                        warning("unsupported-variant", str(exc), style_key=key, token=token)
                    )
                    continue
                group = _Group(resolved)
                if resolved.pseudo_element in ("before", "after"):
                    group.declarations.append(Declaration("content", "''"))
                key_groups[candidate.variants] = group
            group.declarations.extend(declarations)

        for group in key_groups.values():
            rule = StyleRule(group.resolved.selector, tuple(group.declarations))
            rules.append(_wrap(rule, group.resolved.at_rules))

    css = render_stylesheet(Stylesheet(rules=rules))
    reported = diagnostics if config.warnings else []
    logger.debug("compiled %d style keys into %d rules", len(class_names), len(rules))
    return CSSModulesOutput(
        css=css,
        dts=generate_dts(list(config.styles_object)),
        class_names=class_names,
        warnings=[str(d) for d in reported],
        diagnostics=tuple(reported),
    )

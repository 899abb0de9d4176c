"""Rewrite CSS Modules output into plain CSS for custom elements."""

from __future__ import annotations

import re
from collections.abc import Mapping

from tailskin.naming import to_kebab_case
from tailskin.stylesheet.model import AtRule, Rule, StyleRule
from tailskin.stylesheet.parser import parse_css, render_stylesheet

__all__ = ["css_modules_to_vanilla_css", "rewrite_selector"]

# A class selector; escaped characters (``.hover\:flex``) stay part of the name.
_CLASS_RE = re.compile(r"\.((?:[\w-]|\\.)+)")


def rewrite_selector(
    selector: str, component_map: Mapping[str, str], use_data_attributes: bool = False
) -> str:
    """Rewrite every class in *selector*.

    Classes naming a component become its element selector (or a
    ``[data-<name>]`` attribute selector); other classes are kebab-cased.
    """

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in component_map:
            element = component_map[name]
            return f"[data-{to_kebab_case(name)}]" if use_data_attributes else element
        if "\\" in name:
            return match.group(0)
        return "." + to_kebab_case(name)

    return _CLASS_RE.sub(replace, selector)


def _rewrite(rule: Rule, component_map: Mapping[str, str], use_data_attributes: bool) -> Rule:
    if isinstance(rule, StyleRule):
        return StyleRule(
            rewrite_selector(rule.selector, component_map, use_data_attributes),
            rule.declarations,
        )
    if rule.rules is None:
        return rule
    return AtRule(
        rule.name,
        rule.params,
        tuple(_rewrite(r, component_map, use_data_attributes) for r in rule.rules),
    )


def css_modules_to_vanilla_css(
    css: str,
    component_map: Mapping[str, str] | None = None,
    use_data_attributes: bool = False,
    indent_size: int = 2,
) -> str:
    """Turn CSS Modules class selectors into selectors that match the generated HTML.

    Raises:
        ValueError: if *css* has an unterminated block.
    """
    sheet = parse_css(css)
    component_map = component_map or {}
    sheet.rules = [_rewrite(rule, component_map, use_data_attributes) for rule in sheet.rules]
    return render_stylesheet(sheet, indent_size)

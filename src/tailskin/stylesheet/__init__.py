from tailskin.stylesheet.model import AtRule, Declaration, Rule, StyleRule, Stylesheet
from tailskin.stylesheet.parser import parse_css, render_rules, render_stylesheet

__all__ = [
    "AtRule",
    "Declaration",
    "Rule",
    "StyleRule",
    "Stylesheet",
    "parse_css",
    "render_rules",
    "render_stylesheet",
]

"""Tests for the plain-CSS parser and renderer."""

import pytest

from tailskin.stylesheet import (
    AtRule,
    Declaration,
    StyleRule,
    Stylesheet,
    parse_css,
    render_rules,
    render_stylesheet,
)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseCss:
    def test_single_rule(self) -> None:
        sheet = parse_css(".a { color: red; padding: 0.5rem }")
        assert sheet.rules == [
            StyleRule(".a", (Declaration("color", "red"), Declaration("padding", "0.5rem")))
        ]

    def test_selector_whitespace_collapsed(self) -> None:
        sheet = parse_css(".a\n  .b { color: red; }")
        assert sheet.rules[0].selector == ".a .b"  # type: ignore[union-attr]

    def test_important(self) -> None:
        sheet = parse_css(".a { color: red !important; }")
        assert sheet.rules[0].declarations == (Declaration("color", "red", important=True),)  # type: ignore[union-attr]

    def test_custom_property(self) -> None:
        sheet = parse_css(".a { --tw-ring-color: #fff; }")
        assert sheet.rules[0].declarations[0].property == "--tw-ring-color"  # type: ignore[union-attr]

    def test_semicolon_inside_string(self) -> None:
        sheet = parse_css(".a::before { content: 'a;b'; }")
        assert sheet.rules[0].declarations == (Declaration("content", "'a;b'"),)  # type: ignore[union-attr]

    def test_nested_at_rules(self) -> None:
        sheet = parse_css("@media (width >= 48rem) { @supports (display: grid) { .a { display: grid; } } }")
        media = sheet.rules[0]
        assert isinstance(media, AtRule)
        assert media.name == "media"
        assert media.params == "(width >= 48rem)"
        assert media.rules is not None
        supports = media.rules[0]
        assert isinstance(supports, AtRule)
        assert supports.rules == (StyleRule(".a", (Declaration("display", "grid"),)),)

    def test_statement_at_rule(self) -> None:
        sheet = parse_css("@import url('a.css');\n.a { color: red; }")
        assert sheet.rules[0] == AtRule("import", "url('a.css')", None)
        assert isinstance(sheet.rules[1], StyleRule)

    def test_comments_removed(self) -> None:
        sheet = parse_css("/* top */ .a { /* inner */ color: red; }")
        assert sheet.rules == [StyleRule(".a", (Declaration("color", "red"),))]

    def test_empty(self) -> None:
        assert parse_css("").rules == []

    def test_unterminated_block(self) -> None:
        with pytest.raises(ValueError, match="Unterminated"):
            parse_css(".a { color: red;")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_render_rule(self) -> None:
        sheet = Stylesheet([StyleRule(".a", (Declaration("color", "red", important=True),))])
        assert render_stylesheet(sheet) == ".a {\n  color: red !important;\n}\n"

    def test_render_nested(self) -> None:
        rule = AtRule("media", "print", (StyleRule(".a", (Declaration("display", "none"),)),))
        assert render_rules([rule], indent_size=4) == (
            "@media print {\n    .a {\n        display: none;\n    }\n}"
        )

    def test_rules_separated_by_blank_line(self) -> None:
        sheet = Stylesheet(
            [StyleRule(".a", (Declaration("color", "red"),)), StyleRule(".b", ())]
        )
        assert render_stylesheet(sheet) == ".a {\n  color: red;\n}\n\n.b {\n}\n"

    def test_statement_at_rule(self) -> None:
        assert render_rules([AtRule("import", "url(a.css)", None)]) == "@import url(a.css);"

    def test_empty_stylesheet(self) -> None:
        assert render_stylesheet(Stylesheet()) == ""

    def test_round_trip_is_stable(self) -> None:
        text = "@container root (width >= 28rem) {\n  .a:hover {\n    opacity: 1;\n  }\n}\n"
        assert render_stylesheet(parse_css(text)) == text

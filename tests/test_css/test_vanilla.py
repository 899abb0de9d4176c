"""Tests for rewriting CSS Modules output into plain CSS."""

import pytest

from tailskin.css import css_modules_to_vanilla_css
from tailskin.css.vanilla import rewrite_selector

COMPONENT_MAP = {"PlayButton": "media-play-button"}


class TestRewriteSelector:
    def test_class_is_kebab_cased(self) -> None:
        assert rewrite_selector(".MediaContainer", {}) == ".media-container"

    def test_component_becomes_element(self) -> None:
        assert rewrite_selector(".PlayButton:hover", COMPONENT_MAP) == "media-play-button:hover"

    def test_component_as_data_attribute(self) -> None:
        selector = rewrite_selector(".PlayButton", COMPONENT_MAP, use_data_attributes=True)
        assert selector == "[data-play-button]"

    def test_descendant_selector(self) -> None:
        selector = rewrite_selector(".Controls:hover .PlayButton", COMPONENT_MAP)
        assert selector == ".controls:hover media-play-button"

    def test_escaped_class_kept(self) -> None:
        assert rewrite_selector(".group\\/item:hover .A", {}) == ".group\\/item:hover .a"

    def test_attribute_selectors_untouched(self) -> None:
        assert rewrite_selector('.A[data-state="open"]', {}) == '.a[data-state="open"]'


class TestVanillaCss:
    def test_rewrites_rules(self) -> None:
        css = ".MediaContainer {\n  display: flex;\n}\n\n.PlayButton {\n  padding: 0.5rem;\n}\n"
        assert css_modules_to_vanilla_css(css, COMPONENT_MAP) == (
            ".media-container {\n  display: flex;\n}\n\nmedia-play-button {\n  padding: 0.5rem;\n}\n"
        )

    def test_rewrites_inside_at_rules(self) -> None:
        css = "@media (width >= 48rem) {\n  .PlayButton {\n    display: none;\n  }\n}\n"
        assert "  media-play-button {" in css_modules_to_vanilla_css(css, COMPONENT_MAP)

    def test_indent_size(self) -> None:
        output = css_modules_to_vanilla_css(".A { color: red; }", indent_size=4)
        assert output == ".a {\n    color: red;\n}\n"

    def test_empty(self) -> None:
        assert css_modules_to_vanilla_css("") == ""

    def test_unterminated(self) -> None:
        with pytest.raises(ValueError):
            css_modules_to_vanilla_css(".A { color: red;")

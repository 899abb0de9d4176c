"""Tests for the attribute processor pipeline."""

import pytest

from tailskin.parser import JSXAttribute, parse_source
from tailskin.parser.nodes import JSXElement
from tailskin.transforms import (
    AttributeContext,
    AttributeProcessorPipeline,
    AttributeResult,
    AttributeRule,
    default_attribute,
    literal_text,
)


def _element(jsx: str) -> JSXElement:
    root = parse_source(f"export default () => {jsx};").jsx_root
    assert root is not None
    return root


def _context(jsx: str, name: str, **kwargs) -> AttributeContext:
    element = _element(jsx)
    attribute = element.attribute(name)
    assert attribute is not None
    kwargs.setdefault("styles_identifier", "styles")
    return AttributeContext(attribute, element.name, element.name, **kwargs)


def _process(jsx: str, name: str, **kwargs) -> AttributeResult | None:
    return AttributeProcessorPipeline().process(_context(jsx, name, **kwargs))


# ---------------------------------------------------------------------------
# Default transform
# ---------------------------------------------------------------------------


class TestDefaultAttribute:
    def test_string_passes_through(self) -> None:
        assert _process('<div title="Play now" />', "title") == AttributeResult("title", "Play now")

    def test_bare_attribute(self) -> None:
        assert _process("<button disabled />", "disabled") == AttributeResult("disabled")

    def test_true_is_bare(self) -> None:
        assert _process("<video muted={true} />", "muted") == AttributeResult("muted")

    @pytest.mark.parametrize("value", ["false", "null"])
    def test_false_and_null_omitted(self, value: str) -> None:
        assert _process(f"<video muted={{{value}}} />", "muted") is None

    def test_number(self) -> None:
        assert _process("<div tabIndex={0} />", "tabIndex") == AttributeResult("tabindex", "0")

    def test_static_template(self) -> None:
        assert _process("<div title={`Play`} />", "title") == AttributeResult("title", "Play")

    def test_dynamic_expression_is_bare(self) -> None:
        assert _process("<div title={label} />", "title") == AttributeResult("title")

    def test_camel_case_kebab_cased(self) -> None:
        assert _process('<svg strokeWidth="2" />', "strokeWidth") == AttributeResult("stroke-width", "2")

    def test_data_and_aria_kept(self) -> None:
        assert _process('<div aria-label="Mute" />', "aria-label") == AttributeResult("aria-label", "Mute")

    def test_element_value_omitted(self) -> None:
        assert _process("<Tooltip content=<span /> />", "content") is None

    def test_literal_text(self) -> None:
        assert literal_text(1.0) == "1"
        assert literal_text(1.5) == "1.5"
        assert literal_text("x") == "x"


# ---------------------------------------------------------------------------
# React-only attributes
# ---------------------------------------------------------------------------


class TestReactOnly:
    @pytest.mark.parametrize("name", ["key", "ref", "onClick", "onPointerDown"])
    def test_dropped(self, name: str) -> None:
        assert _process(f"<div {name}={{x}} />", name) is None

    def test_lowercase_on_attribute_kept(self) -> None:
        assert _process('<div one="1" />', "one") == AttributeResult("one", "1")


# ---------------------------------------------------------------------------
# className
# ---------------------------------------------------------------------------


class TestClassName:
    def test_literal(self) -> None:
        assert _process('<div className="a b" />', "className") == AttributeResult("class", "a b")

    def test_style_key_kebab_cased(self) -> None:
        result = _process("<div className={styles.MediaContainer} />", "className")
        assert result == AttributeResult("class", "media-container")

    def test_component_key_left_out(self) -> None:
        result = _process(
            "<PlayButton className={styles.PlayButton} />",
            "className",
            component_map={"PlayButton": "media-play-button"},
        )
        assert result is None

    def test_template(self) -> None:
        result = _process("<div className={`${styles.A} extra ${props.x}`} />", "className")
        assert result == AttributeResult("class", "a extra")

    def test_helper_call(self) -> None:
        result = _process("<div className={cn(styles.A, 'b', on && styles.C)} />", "className")
        assert result == AttributeResult("class", "a b c")

    def test_conditional_uses_consequent(self) -> None:
        result = _process("<div className={on ? styles.On : styles.Off} />", "className")
        assert result == AttributeResult("class", "on")

    def test_duplicates_removed(self) -> None:
        result = _process("<div className={cn('a', 'a', styles.A)} />", "className")
        assert result == AttributeResult("class", "a")

    def test_other_identifier(self) -> None:
        result = _process("<div className={css.A} />", "className")
        assert result is None


# ---------------------------------------------------------------------------
# Pipeline configuration
# ---------------------------------------------------------------------------


def _upper_title(context: AttributeContext) -> AttributeResult | None:
    return AttributeResult("title", "TITLE")


class TestPipeline:
    def test_first_matching_rule_wins(self) -> None:
        rule = AttributeRule("title", lambda c: c.attribute.name == "title", _upper_title)
        pipeline = AttributeProcessorPipeline().with_rule(rule)
        result = pipeline.process(_context('<div title="x" />', "title"))
        assert result == AttributeResult("title", "TITLE")

    def test_rule_appended_after_defaults(self) -> None:
        rule = AttributeRule("all", lambda c: True, _upper_title)
        pipeline = AttributeProcessorPipeline().with_rule(rule, first=False)
        assert pipeline.process(_context("<div key={1} />", "key")) is None
        assert pipeline.process(_context('<div id="x" />', "id")) == AttributeResult("title", "TITLE")

    def test_with_rule_returns_copy(self) -> None:
        pipeline = AttributeProcessorPipeline()
        pipeline.with_rule(AttributeRule("all", lambda c: True, _upper_title))
        assert [r.name for r in pipeline.rules] == ["react-only", "class-name"]

    def test_custom_rules_and_default(self) -> None:
        pipeline = AttributeProcessorPipeline(rules=[], default=_upper_title)
        assert pipeline.process(_context("<div key={1} />", "key")) == AttributeResult("title", "TITLE")

    def test_default_attribute_is_exported(self) -> None:
        context = AttributeContext(JSXAttribute("hidden"), "div", "div")
        assert default_attribute(context) == AttributeResult("hidden")

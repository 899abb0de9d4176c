"""Tests for the candidate and variant parser."""

import pytest

from tailskin.candidate import (
    create_simplified_design_system,
    format_candidate,
    format_variant,
    parse_candidate,
    parse_variant,
)
from tailskin.candidate.design_system import MODIFIER_UTILITIES, STATIC_UTILITIES
from tailskin.model import (
    ArbitraryUtilityValue,
    Candidate,
    Modifier,
    NamedUtilityValue,
    Variant,
)

DS = create_simplified_design_system()


def _parse(raw: str) -> Candidate:
    candidate = parse_candidate(raw, DS)
    assert candidate is not None, raw
    return candidate


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


class TestStaticUtilities:
    @pytest.mark.parametrize("root", sorted(STATIC_UTILITIES))
    def test_every_static_root_parses(self, root: str) -> None:
        candidate = _parse(root)
        assert candidate.kind == "static"
        assert candidate.root == root
        assert candidate.value is None
        assert candidate.variants == ()

    def test_marker_accepts_modifier(self) -> None:
        candidate = _parse("group/item")
        assert candidate.root == "group"
        assert candidate.modifier == Modifier("named", "item")
        assert "group" in MODIFIER_UTILITIES

    def test_static_without_modifier_support(self) -> None:
        assert parse_candidate("flex/50", DS) is None


class TestFunctionalUtilities:
    def test_named_value(self) -> None:
        candidate = _parse("bg-blue-500")
        assert candidate.kind == "functional"
        assert candidate.root == "bg"
        assert candidate.value == NamedUtilityValue("blue-500")

    def test_longest_root_wins(self) -> None:
        candidate = _parse("rounded-tl-lg")
        assert candidate.root == "rounded-tl"
        assert candidate.value == NamedUtilityValue("lg")

    def test_opacity_modifier(self) -> None:
        candidate = _parse("bg-blue-500/50")
        assert candidate.value == NamedUtilityValue("blue-500")
        assert candidate.modifier == Modifier("named", "50")

    def test_fraction(self) -> None:
        candidate = _parse("w-1/2")
        assert candidate.value == NamedUtilityValue("1/2", fraction="1/2")
        assert candidate.modifier is None

    def test_arbitrary_value(self) -> None:
        candidate = _parse("bg-[#ff0000]")
        assert candidate.value == ArbitraryUtilityValue("#ff0000", "color")

    def test_arbitrary_value_with_hint(self) -> None:
        candidate = _parse("text-[length:var(--size)]")
        assert candidate.value == ArbitraryUtilityValue("var(--size)", "length")

    def test_custom_property_shorthand(self) -> None:
        candidate = _parse("w-(--media-width)")
        assert candidate.value == ArbitraryUtilityValue("var(--media-width)", "custom-property")

    def test_arbitrary_modifier(self) -> None:
        candidate = _parse("bg-white/[0.35]")
        assert candidate.modifier == Modifier("arbitrary", "0.35")

    def test_arbitrary_property(self) -> None:
        candidate = _parse("[mask-type:luminance]")
        assert candidate.kind == "arbitrary"
        assert candidate.root == "mask-type"
        assert candidate.value == ArbitraryUtilityValue("luminance", None)

    def test_arbitrary_custom_property(self) -> None:
        candidate = _parse("[--gap:4px]")
        assert candidate.root == "--gap"


class TestFlags:
    def test_negative(self) -> None:
        candidate = _parse("-translate-x-px")
        assert candidate.negative
        assert candidate.root == "translate-x"
        assert candidate.value == NamedUtilityValue("px")

    def test_important_prefix(self) -> None:
        candidate = _parse("!hover:flex")
        assert candidate.important
        assert candidate.root == "flex"
        assert candidate.variants == (Variant(kind="static", root="hover"),)

    def test_important_on_utility(self) -> None:
        assert _parse("hover:!flex").important
        assert _parse("flex!").important

    def test_negative_after_variants(self) -> None:
        candidate = _parse("hover:-mt-2")
        assert candidate.negative
        assert candidate.root == "mt"

    def test_negative_static_rejected(self) -> None:
        assert parse_candidate("-flex", DS) is None


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class TestVariants:
    def test_order_preserved(self) -> None:
        candidate = _parse("hover:focus:bg-blue-500")
        assert [v.root for v in candidate.variants] == ["hover", "focus"]

    def test_compound_with_modifier_and_arbitrary(self) -> None:
        candidate = _parse("group-hover/parent-name:[&_p]:flex")
        outer, inner = candidate.variants
        assert outer.kind == "compound"
        assert outer.root == "group"
        assert outer.variant == Variant(kind="static", root="hover")
        assert outer.modifier == Modifier("named", "parent-name")
        assert inner == Variant(kind="arbitrary", selector="&_p")
        assert candidate.root == "flex"

    def test_functional_arbitrary_variant(self) -> None:
        candidate = _parse("data-[disabled]:flex")
        (variant,) = candidate.variants
        assert variant.kind == "functional"
        assert variant.root == "data"
        assert variant.value == ArbitraryUtilityValue("disabled", None)

    def test_functional_named_variant(self) -> None:
        variant = parse_variant("aria-pressed", DS)
        assert variant == Variant(kind="functional", root="aria", value=NamedUtilityValue("pressed"))

    def test_container_query_variant(self) -> None:
        variant = parse_variant("@md", DS)
        assert variant is not None
        assert variant.root == "@"
        assert variant.value == NamedUtilityValue("md")

    def test_named_container_query(self) -> None:
        variant = parse_variant("@md/controls", DS)
        assert variant is not None
        assert variant.modifier == Modifier("named", "controls")

    def test_nested_compound(self) -> None:
        variant = parse_variant("group-not-hover", DS)
        assert variant is not None
        assert variant.variant is not None
        assert variant.variant.kind == "compound"
        assert variant.variant.root == "not"

    @pytest.mark.parametrize("raw", ["[]", "[flex]", "nope", "data-", "group-nope", ""])
    def test_invalid_variant(self, raw: str) -> None:
        assert parse_variant(raw, DS) is None


# ---------------------------------------------------------------------------
# Failure is total
# ---------------------------------------------------------------------------


class TestUnparseable:
    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "not-a-utility",
            "banana",
            "nope:flex",
            "hover:",
            ":flex",
            "bg-[red",
            "bg-[]",
            "w-(size)",
            "flex/",
            "a/b/c",
            "[color]",
            "[Color:red]",
        ],
    )
    def test_returns_none(self, raw: str) -> None:
        assert parse_candidate(raw, DS) is None

    def test_deterministic(self) -> None:
        raw = "md:group-hover:bg-[url(a:b)]/50"
        assert parse_candidate(raw, DS) == parse_candidate(raw, DS)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class TestFormat:
    @pytest.mark.parametrize(
        "raw",
        [
            "flex",
            "hover:focus:bg-blue-500/50",
            "!md:-translate-x-px",
            "group-hover/parent-name:[&_p]:flex",
            "data-[state=open]:w-1/2",
            "@md/controls:text-[length:var(--s)]",
            "[mask-type:luminance]",
        ],
    )
    def test_reparses_equal(self, raw: str) -> None:
        candidate = _parse(raw)
        assert parse_candidate(format_candidate(candidate), DS) == candidate

    def test_format_variant(self) -> None:
        variant = parse_variant("group-hover/item", DS)
        assert variant is not None
        assert format_variant(variant) == "group-hover/item"

    def test_raw_not_compared(self) -> None:
        assert _parse("!flex") == _parse("flex!")

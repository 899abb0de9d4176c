"""Tests for arbitrary-value decoding and validation."""

import pytest

from tailskin.candidate import (
    DecodedValue,
    classify_arbitrary_value,
    decode_arbitrary_value,
    is_valid_arbitrary,
    underscores_to_spaces,
)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestClassify:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("12px", "length"),
            ("1.5rem", "length"),
            ("calc(100%-2px)", "length"),
            ("50%", "percentage"),
            ("0.5", "number"),
            ("#ff0000", "color"),
            ("rgb(0,0,0)", "color"),
            ("transparent", "color"),
            ("url(/a.png)", "url"),
            ("linear-gradient(red,blue)", "image"),
            ("var(--x)", "custom-property"),
            ("--x", "custom-property"),
            ("&>svg", "selector"),
            (":hover", "selector"),
            ("banana", None),
            ("", None),
        ],
    )
    def test_classify(self, value: str, expected: str | None) -> None:
        assert classify_arbitrary_value(value) == expected


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestDecode:
    def test_plain_value(self) -> None:
        assert decode_arbitrary_value("12px") == DecodedValue("12px", "length")

    def test_type_hint(self) -> None:
        assert decode_arbitrary_value("length:var(--w)") == DecodedValue("var(--w)", "length")

    def test_unknown_hint_is_not_a_hint(self) -> None:
        decoded = decode_arbitrary_value("mask:none")
        assert decoded is not None
        assert decoded.value == "mask:none"

    def test_percent_escape(self) -> None:
        assert decode_arbitrary_value("a%20b") == DecodedValue("a b", None)

    def test_underscores_untouched(self) -> None:
        decoded = decode_arbitrary_value("&_p")
        assert decoded is not None
        assert decoded.value == "&_p"

    @pytest.mark.parametrize("raw", ["", "   ", "calc(1px", "a]"])
    def test_unparseable(self, raw: str) -> None:
        assert decode_arbitrary_value(raw) is None


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestIsValid:
    def test_matching_type(self) -> None:
        assert is_valid_arbitrary("#fff", "color")

    def test_length_accepts_percentage(self) -> None:
        assert is_valid_arbitrary("50%", "length")

    def test_mismatch(self) -> None:
        assert not is_valid_arbitrary("#fff", "length")

    def test_unknown_is_valid_unverified(self) -> None:
        assert is_valid_arbitrary("banana", "color")

    def test_custom_property_is_valid(self) -> None:
        assert is_valid_arbitrary("var(--c)", "color")


class TestUnderscores:
    def test_replaced(self) -> None:
        assert underscores_to_spaces("&_p") == "& p"

    def test_escaped_kept(self) -> None:
        assert underscores_to_spaces(r"a\_b_c") == "a_b c"

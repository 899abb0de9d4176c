"""Tests for bracket-aware class segmentation."""

import pytest

from tailskin.candidate import is_balanced, segment


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


class TestSegment:
    def test_plain_split(self) -> None:
        assert segment("hover:focus:flex", ":") == ["hover", "focus", "flex"]

    def test_no_separator(self) -> None:
        assert segment("flex", ":") == ["flex"]

    def test_brackets_do_not_split(self) -> None:
        assert segment("data-[disabled]:flex", ":") == ["data-[disabled]", "flex"]

    def test_colon_inside_brackets_kept(self) -> None:
        assert segment("bg-[url(a:b)]:flex", ":") == ["bg-[url(a:b)]", "flex"]

    def test_arbitrary_variant_kept_whole(self) -> None:
        assert segment("group-hover/parent-name:[&_p]:flex", ":") == [
            "group-hover/parent-name",
            "[&_p]",
            "flex",
        ]

    def test_parentheses_open_a_scope(self) -> None:
        assert segment("w-(--size/2)/50", "/") == ["w-(--size/2)", "50"]

    def test_quotes_open_a_scope(self) -> None:
        assert segment("content-['a:b']:x", ":") == ["content-['a:b']", "x"]

    def test_escaped_separator(self) -> None:
        assert segment(r"a\:b:c", ":") == [r"a\:b", "c"]

    def test_empty_segments_preserved(self) -> None:
        assert segment("a::b", ":") == ["a", "", "b"]

    def test_slash_separator(self) -> None:
        assert segment("bg-red-500/50", "/") == ["bg-red-500", "50"]


# ---------------------------------------------------------------------------
# Unbalanced input
# ---------------------------------------------------------------------------


class TestUnbalanced:
    def test_unclosed_bracket_returns_remainder(self) -> None:
        assert segment("hover:bg-[red:flex", ":") == ["hover", "bg-[red:flex"]

    def test_stray_closer_returns_remainder(self) -> None:
        assert segment("a:b]:c", ":") == ["a", "b]:c"]

    def test_unterminated_quote(self) -> None:
        assert segment("a:'b:c", ":") == ["a", "'b:c"]

    @pytest.mark.parametrize("text", ["[", "(", "a]", "[(])", "'"])
    def test_never_raises(self, text: str) -> None:
        assert "".join(segment(text, ":")) == text


class TestIsBalanced:
    @pytest.mark.parametrize("text", ["flex", "[&_p]", "bg-[url('x')]", "(a[b]{c})"])
    def test_balanced(self, text: str) -> None:
        assert is_balanced(text)

    @pytest.mark.parametrize("text", ["[", "a]", "[(])", "'open", "(]"])
    def test_unbalanced(self, text: str) -> None:
        assert not is_balanced(text)

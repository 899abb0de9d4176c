"""Tests for compiling styles objects into CSS Modules output."""

from tailskin.candidate import create_simplified_design_system
from tailskin.css import (
    CSSModulesOutput,
    TailwindCompilationConfig,
    compile_tailwind_to_css,
    generate_dts,
)
from tailskin.css.modules import scoped_class_name


def _compile(styles: dict[str, str], **kwargs) -> CSSModulesOutput:
    return compile_tailwind_to_css(TailwindCompilationConfig(styles_object=styles, **kwargs))


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestCompile:
    def test_single_key(self) -> None:
        output = _compile({"Button": "p-2 rounded"})
        assert output.css == ".Button {\n  padding: 0.5rem;\n  border-radius: 0.25rem;\n}\n"
        assert output.class_names == {"Button": "Button"}
        assert output.warnings == []

    def test_deterministic(self) -> None:
        first = _compile({"Button": "p-2 rounded"}, scoped_name="[name]_[hash]")
        second = _compile({"Button": "p-2 rounded"}, scoped_name="[name]_[hash]")
        assert first.css == second.css
        assert first.class_names == second.class_names

    def test_variant_groups_in_first_occurrence_order(self) -> None:
        output = _compile({"A": "hover:opacity-50 flex hover:p-1 block"})
        assert output.css == (
            ".A:hover {\n  opacity: 0.5;\n  padding: 0.25rem;\n}\n\n"
            ".A {\n  display: flex;\n  display: block;\n}\n"
        )

    def test_keys_in_declaration_order(self) -> None:
        output = _compile({"Zed": "flex", "Alpha": "block"})
        assert output.css.index(".Zed") < output.css.index(".Alpha")

    def test_media_variant_wraps_rule(self) -> None:
        output = _compile({"A": "md:hidden"})
        assert output.css == "@media (width >= 48rem) {\n  .A {\n    display: none;\n  }\n}\n"

    def test_container_query(self) -> None:
        output = _compile({"Root": "@container/root", "A": "@md/root:p-4"})
        assert ".Root {\n  container-type: inline-size;\n  container-name: root;\n}" in output.css
        assert "@container root (width >= 28rem) {\n  .A {\n    padding: 1rem;\n  }\n}" in output.css

    def test_data_attribute_variant(self) -> None:
        output = _compile({"A": "data-[muted]:opacity-50"})
        assert ".A[data-muted] {" in output.css

    def test_aria_named_variant(self) -> None:
        output = _compile({"A": "aria-pressed:flex"})
        assert '.A[aria-pressed="true"] {' in output.css

    def test_arbitrary_variant(self) -> None:
        output = _compile({"A": "[&_svg]:hidden"})
        assert ".A svg {" in output.css

    def test_group_anchor_uses_marker_key(self) -> None:
        output = _compile({"Controls": "group", "Button": "group-hover:opacity-100"})
        assert ".Controls:hover .Button {\n  opacity: 1;\n}" in output.css
        assert ".Controls {" not in output.css

    def test_unregistered_group_uses_group_class(self) -> None:
        output = _compile({"A": "group-hover/item:flex"})
        assert ".group\\/item:hover .A {" in output.css

    def test_peer_anchor(self) -> None:
        output = _compile({"Input": "peer", "Label": "peer-checked:flex"})
        assert ".Input:checked ~ .Label {" in output.css

    def test_pseudo_element_gets_content(self) -> None:
        output = _compile({"A": "before:absolute"})
        assert output.css == ".A::before {\n  content: '';\n  position: absolute;\n}\n"

    def test_important(self) -> None:
        output = _compile({"A": "!flex"})
        assert "display: flex !important;" in output.css

    def test_opacity_modifier(self) -> None:
        output = _compile({"A": "bg-white/10"})
        assert "background-color: color-mix(in oklab, #fff 10%, transparent);" in output.css

    def test_arbitrary_property(self) -> None:
        output = _compile({"A": "[mask-type:luminance]"})
        assert "mask-type: luminance;" in output.css

    def test_empty_key_emits_nothing(self) -> None:
        output = _compile({"A": ""})
        assert output.css == ""
        assert output.class_names == {"A": "A"}

    def test_custom_design_system(self) -> None:
        ds = create_simplified_design_system({"variants": ["paused"]})
        output = _compile({"A": "paused:flex"}, design_system=ds)
        assert output.diagnostics[0].rule == "unsupported-variant"


# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------


class TestWarnings:
    def test_unparseable_class(self) -> None:
        output = _compile({"A": "flex not-a-class"})
        assert output.css == ".A {\n  display: flex;\n}\n"
        assert output.warnings == ["WARNING [A: not-a-class]: could not parse class 'not-a-class'"]
        assert output.diagnostics[0].rule == "unparseable-class"

    def test_no_css(self) -> None:
        output = _compile({"A": "bg-nothing-500"})
        assert [d.rule for d in output.diagnostics] == ["no-css"]

    def test_invalid_arbitrary_value_still_emitted(self) -> None:
        output = _compile({"A": "p-[#fff]"})
        assert [d.rule for d in output.diagnostics] == ["invalid-arbitrary-value"]
        assert output.warnings[0].endswith("(add a type hint: p-[length:...])")
        assert "padding: #fff;" in output.css

    def test_warnings_disabled(self) -> None:
        output = _compile({"A": "not-a-class"}, warnings=False)
        assert output.warnings == []
        assert output.diagnostics == ()

    def test_compilation_continues_after_warning(self) -> None:
        output = _compile({"A": "nope", "B": "flex"})
        assert ".B {" in output.css


# ---------------------------------------------------------------------------
# Names and type declarations
# ---------------------------------------------------------------------------


class TestNames:
    def test_scoped_name_pattern(self) -> None:
        name = scoped_class_name("Button", "p-2", "[name]_[hash]")
        assert name.startswith("Button_")
        assert len(name) == len("Button_") + 6

    def test_hash_depends_on_classes(self) -> None:
        assert scoped_class_name("A", "p-2", "[hash]") != scoped_class_name("A", "p-4", "[hash]")

    def test_default_name_is_key(self) -> None:
        assert scoped_class_name("Button", "p-2", None) == "Button"

    def test_scoped_name_used_in_css(self) -> None:
        output = _compile({"A": "flex"}, scoped_name="x-[local]")
        assert output.css.startswith(".x-A {")

    def test_dts(self) -> None:
        assert generate_dts(["Button", "play-icon"]) == (
            "declare const styles: {\n"
            "  readonly Button: string;\n"
            "  readonly 'play-icon': string;\n"
            "};\n"
            "export default styles;\n"
        )

    def test_output_dts_lists_keys(self) -> None:
        output = _compile({"A": "flex", "B": ""})
        assert "readonly A: string;" in output.dts
        assert "readonly B: string;" in output.dts

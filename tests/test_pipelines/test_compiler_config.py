"""Tests for CompilerConfig validation and loading."""

import pytest

from tailskin.config import (
    DEFAULT_EXCLUDE_PATTERNS,
    CompilerConfig,
    ConfigError,
    CSSStrategy,
    OutputFormat,
)


class TestDefaults:
    def test_defaults(self) -> None:
        config = CompilerConfig()
        assert config.output_format is OutputFormat.WEB_COMPONENT
        assert config.css_strategy is CSSStrategy.INLINE
        assert config.exclude_patterns == DEFAULT_EXCLUDE_PATTERNS
        assert config.warnings is True
        assert config.indent_size == 2

    def test_strings_coerced(self) -> None:
        config = CompilerConfig(output_format="react", css_strategy="css-modules")
        assert config.output_format is OutputFormat.REACT
        assert config.css_strategy is CSSStrategy.CSS_MODULES

    def test_exclude_patterns_become_tuple(self) -> None:
        assert CompilerConfig(exclude_patterns=[".css"]).exclude_patterns == (".css",)


class TestValidation:
    def test_invalid_enum(self) -> None:
        with pytest.raises(ConfigError, match="invalid CSS strategy 'sass'"):
            CompilerConfig(css_strategy="sass")

    def test_exclude_patterns_string(self) -> None:
        with pytest.raises(ConfigError):
            CompilerConfig(exclude_patterns=".css")

    @pytest.mark.parametrize("indent", [-1, "2"])
    def test_indent_size(self, indent) -> None:
        with pytest.raises(ConfigError):
            CompilerConfig(indent_size=indent)

    def test_mappings_must_be_mappings(self) -> None:
        with pytest.raises(ConfigError, match="package_mappings"):
            CompilerConfig(package_mappings=["react"])

    def test_design_system_extra(self) -> None:
        config = CompilerConfig(design_system_extra={"utilities": ["scrollbar-none"]})
        assert "scrollbar-none" in config.design_system().utilities.static
        with pytest.raises(ConfigError):
            CompilerConfig(design_system_extra={"utilities": "scrollbar-none"})

    def test_design_system_built_once(self) -> None:
        assert CompilerConfig().design_system() is CompilerConfig(output_format="react").design_system()
        config = CompilerConfig(design_system_extra={"variants": ["paused"]})
        assert config.design_system() is config.design_system()
        assert config.design_system() is not CompilerConfig().design_system()


class TestFromMapping:
    def test_camel_case_keys(self) -> None:
        config = CompilerConfig.from_mapping(
            {"outputFormat": "react", "cssStrategy": "inline", "indentSize": 4}
        )
        assert config.output_format is OutputFormat.REACT
        assert config.indent_size == 4

    def test_import_mappings_alias(self) -> None:
        config = CompilerConfig.from_mapping({"importMappings": {"@a/react": "@a/html"}})
        assert config.package_mappings == {"@a/react": "@a/html"}

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="unknown configuration option 'colour'"):
            CompilerConfig.from_mapping({"colour": "red"})

    def test_overrides(self) -> None:
        config = CompilerConfig.from_mapping(
            {"outputFormat": "react", "warnings": True},
            output_format=None,
            warnings=False,
        )
        assert config.output_format is OutputFormat.REACT
        assert config.warnings is False

    def test_derived_fields_rejected(self) -> None:
        with pytest.raises(ConfigError, match="unknown configuration option"):
            CompilerConfig.from_mapping({"_designSystem": None})

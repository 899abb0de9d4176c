"""Tests for the compilation pipelines and their registry."""

from pathlib import Path

import pytest

from tailskin.config import CompilerConfig, CSSStrategy, InputType, OutputFormat
from tailskin.pipelines import (
    CompilationError,
    PipelineConfigError,
    PipelineKey,
    PipelineNotFoundError,
    PipelineRegistry,
    ReactInlinePipeline,
    WebComponentPipeline,
    compile_skin,
    default_registry,
    load_skin,
)

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _skin() -> str:
    return (FIXTURES / "MediaSkinDefault.tsx").read_text()


def _styles() -> str:
    return (FIXTURES / "styles.ts").read_text()


def _inline_skin() -> str:
    return (FIXTURES / "InlineSkin.tsx").read_text()


def _config(output_format: str = "web-component", css_strategy: str = "inline", **kwargs) -> CompilerConfig:
    return CompilerConfig(output_format=output_format, css_strategy=css_strategy, **kwargs)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_default_pipelines(self) -> None:
        registry = default_registry()
        assert len(registry) == 4
        assert PipelineKey(InputType.SKIN, OutputFormat.REACT, CSSStrategy.INLINE) in registry
        assert PipelineKey(InputType.SKIN, OutputFormat.WEB_COMPONENT, CSSStrategy.VANILLA) in registry

    def test_duplicate_registration(self) -> None:
        registry = PipelineRegistry()
        registry.register(ReactInlinePipeline())
        with pytest.raises(PipelineConfigError, match="already registered"):
            registry.register(ReactInlinePipeline())

    def test_unknown_key(self) -> None:
        with pytest.raises(PipelineNotFoundError) as exc_info:
            compile_skin("Skin.tsx", _skin(), _config("web-component", "css-modules"))
        assert exc_info.value.key.css_strategy is CSSStrategy.CSS_MODULES
        assert len(exc_info.value.available) == 4

    def test_empty_registry(self) -> None:
        with pytest.raises(PipelineNotFoundError, match="available: none"):
            compile_skin("Skin.tsx", _skin(), registry=PipelineRegistry())

    def test_web_component_rejects_css_modules(self) -> None:
        with pytest.raises(ValueError):
            WebComponentPipeline(CSSStrategy.CSS_MODULES)

    def test_key_str(self) -> None:
        key = PipelineKey(InputType.SKIN, OutputFormat.REACT, CSSStrategy.CSS_MODULES)
        assert str(key) == "skin/react/css-modules"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadSkin:
    def test_styles_from_separate_module(self) -> None:
        skin = load_skin("MediaSkinDefault.tsx", _skin(), CompilerConfig(), _styles())
        assert skin.component_name == "MediaSkinDefault"
        assert skin.styles["Label"] == "text-sm text-white"
        assert skin.diagnostics == []

    def test_inline_styles_object(self) -> None:
        skin = load_skin("InlineSkin.tsx", _inline_skin(), CompilerConfig())
        assert skin.styles == {"Wrapper": "flex items-center", "Button": "p-2 hover:bg-black"}

    def test_missing_styles_warns(self) -> None:
        skin = load_skin("MediaSkinDefault.tsx", _skin(), CompilerConfig())
        assert skin.styles == {}
        assert [d.rule for d in skin.diagnostics] == ["missing-styles"]

    def test_syntax_error(self) -> None:
        with pytest.raises(CompilationError) as exc_info:
            load_skin("Broken.tsx", "export default () => <div></span>;", CompilerConfig())
        error = exc_info.value
        assert error.path == "Broken.tsx"
        assert error.line == 1
        assert str(error).startswith("Broken.tsx:1:")

    def test_no_component(self) -> None:
        with pytest.raises(CompilationError, match="no component"):
            load_skin("Empty.tsx", "export const x = 1;", CompilerConfig())

    def test_design_system_shared_across_files(self) -> None:
        config = CompilerConfig()
        first = load_skin("MediaSkinDefault.tsx", _skin(), config, _styles())
        second = load_skin("InlineSkin.tsx", _inline_skin(), config)
        assert first.design_system is config.design_system()
        assert second.design_system is first.design_system


# ---------------------------------------------------------------------------
# Web components
# ---------------------------------------------------------------------------


class TestWebComponentInline:
    @pytest.fixture()
    def output(self):
        return compile_skin("skins/MediaSkinDefault.tsx", _skin(), _config(), _styles())

    def test_single_module(self, output) -> None:
        assert [(f.path, f.type) for f in output.files] == [("media-skin-default.ts", "ts")]

    def test_module_contents(self, output) -> None:
        module = output.files[0].content
        assert module.startswith(
            "import { MediaSkin } from '../media-skin';\n"
            "import '../../components/media-play-button';\n"
            "import '@player/react';\n"
            "\n"
        )
        assert "    <style>\n" in module
        assert '    <div class="media-container">\n' in module
        assert "<slot name=\"media\" slot=\"media\"></slot>" in module
        assert "export class MediaSkinDefault extends MediaSkin {" in module
        assert "customElements.define('media-skin-default', MediaSkinDefault);" in module

    def test_component_styles_target_element(self, output) -> None:
        module = output.files[0].content
        assert ".controls:hover media-play-button {" in module
        assert ".play-button" not in module
        assert "<media-play-button></media-play-button>" in module

    def test_react_imports_removed(self, output) -> None:
        module = output.files[0].content
        assert "'react'" not in module
        assert "./styles" not in module

    def test_idempotent(self, output) -> None:
        again = compile_skin("skins/MediaSkinDefault.tsx", _skin(), _config(), _styles())
        assert again.files == output.files

    def test_local_statements_before_return(self, output) -> None:
        source = _skin().replace(
            "  return (\n",
            "  const label = 'Play';\n  const visible = label.length > 0;\n  return (\n",
        )
        result = compile_skin("skins/MediaSkinDefault.tsx", source, _config(), _styles())
        module = result.files[0].content
        assert '    <div class="media-container">\n' in module
        assert "<media-play-button></media-play-button>" in module
        assert result.files == output.files

    def test_package_mappings(self) -> None:
        config = _config(package_mappings={"@player/react": "@player/html"})
        output = compile_skin("MediaSkinDefault.tsx", _skin(), config, _styles())
        assert "import '@player/html';" in output.files[0].content


class TestWebComponentVanilla:
    def test_linked_stylesheet(self) -> None:
        output = compile_skin("MediaSkinDefault.tsx", _skin(), _config(css_strategy="vanilla"), _styles())
        assert [f.path for f in output.files] == ["media-skin-default.ts", "media-skin-default.css"]
        module, css = (f.content for f in output.files)
        assert '<link rel="stylesheet" href="./media-skin-default.css">' in module
        assert "<style>" not in module
        assert css.startswith(".media-container {\n")
        assert "media-play-button" in css

    def test_indent_size(self) -> None:
        config = _config(css_strategy="vanilla", indent_size=4)
        output = compile_skin("MediaSkinDefault.tsx", _skin(), config, _styles())
        assert "\n    position: relative;\n" in output.files[1].content


# ---------------------------------------------------------------------------
# React
# ---------------------------------------------------------------------------


class TestReactCSSModules:
    @pytest.fixture()
    def output(self):
        return compile_skin("MediaSkinDefault.tsx", _skin(), _config("react", "css-modules"), _styles())

    def test_files(self, output) -> None:
        assert [(f.path, f.type) for f in output.files] == [
            ("MediaSkinDefault.tsx", "tsx"),
            ("MediaSkinDefault.module.css", "css"),
            ("MediaSkinDefault.module.css.d.ts", "dts"),
        ]

    def test_styles_import_replaced(self, output) -> None:
        component = output.files[0].content
        assert "import styles from './MediaSkinDefault.module.css';\n" in component
        assert "from './styles'" not in component
        assert "<PlayButton className={styles.PlayButton} />" in component

    def test_css_module(self, output) -> None:
        css = output.files[1].content
        assert ".MediaContainer {" in css
        assert ".Controls:hover .PlayButton {" in css

    def test_inline_object_replaced_by_import(self) -> None:
        output = compile_skin("InlineSkin.tsx", _inline_skin(), _config("react", "css-modules"))
        component = output.files[0].content
        assert "const styles" not in component
        assert component.startswith(
            "import { cn } from '@/lib/utils';\nimport styles from './InlineSkin.module.css';\n"
        )


class TestReactInline:
    def test_class_strings_inlined(self) -> None:
        output = compile_skin("InlineSkin.tsx", _inline_skin(), _config("react", "inline"))
        assert [f.path for f in output.files] == ["InlineSkin.tsx"]
        component = output.files[0].content
        assert "const styles" not in component
        assert '<div className="flex items-center">' in component
        assert "cn(\"p-2 hover:bg-black\", 'rounded')" in component
        assert output.warnings == []

    def test_separate_styles_import_removed(self) -> None:
        output = compile_skin("MediaSkinDefault.tsx", _skin(), _config("react", "inline"), _styles())
        component = output.files[0].content
        assert "./styles" not in component
        assert '<span className="text-sm text-white">Play</span>' in component
        assert '`${"relative flex flex-col @container/root"} ${className}`' in component

    def test_unknown_key_warns(self) -> None:
        source = (
            "const styles = { A: 'flex' };\n"
            "export default () => <div className={styles.Missing} />;\n"
        )
        output = compile_skin("Skin.tsx", source, _config("react", "inline"))
        assert 'className=""' in output.files[0].content
        assert output.warnings == ["WARNING [Missing]: 'Missing' is not defined in the styles object"]

    def test_warnings_disabled(self) -> None:
        source = (
            "const styles = { A: 'flex' };\n"
            "export default () => <div className={styles.Missing} />;\n"
        )
        output = compile_skin("Skin.tsx", source, _config("react", "inline", warnings=False))
        assert output.warnings == []

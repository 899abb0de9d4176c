"""Skin to web-component pipelines (inline ``<style>`` or linked stylesheet)."""

from __future__ import annotations

import logging
from pathlib import PurePath

from tailskin.config import CompilerConfig, CSSStrategy, InputType, OutputFormat
from tailskin.css import TailwindCompilationConfig, compile_tailwind_to_css, css_modules_to_vanilla_css
from tailskin.generator import (
    SerializeOptions,
    SkinModuleData,
    SkinModuleOptions,
    build_component_map,
    generate_skin_module,
    serialize_to_html,
)
from tailskin.naming import to_custom_element_name, to_kebab_case
from tailskin.pipelines.base import (
    CompilationFile,
    CompilationOutput,
    PipelineKey,
    load_skin,
)
from tailskin.transforms.imports import (
    ImportMappingConfig,
    format_side_effect_imports,
    media_relative_import,
    transform_imports,
)

logger = logging.getLogger(__name__)


class WebComponentPipeline:
    """Compile a skin into a custom-element module.

    With the ``inline`` strategy the CSS is embedded in the template;
    with ``vanilla`` it is written to a sibling ``.css`` file that the
    template links.
    """

    def __init__(self, css_strategy: CSSStrategy = CSSStrategy.INLINE) -> None:
        if css_strategy not in (CSSStrategy.INLINE, CSSStrategy.VANILLA):
            raise ValueError(f"web components do not support the {css_strategy} strategy")
        self.key = PipelineKey(InputType.SKIN, OutputFormat.WEB_COMPONENT, css_strategy)
        self.name = f"Skin -> Web Component ({css_strategy} CSS)"

    def compile(
        self,
        entry_file: str,
        source: str,
        config: CompilerConfig,
        styles_source: str | None = None,
    ) -> CompilationOutput:
        skin = load_skin(entry_file, source, config, styles_source)
        identifier = skin.parsed.styles_identifier
        component_map = build_component_map(skin.jsx_root, identifier)

        html = serialize_to_html(
            skin.jsx_root,
            SerializeOptions(
                indent_size=config.indent_size,
                styles=skin.styles,
                component_map=component_map,
                styles_identifier=identifier,
            ),
            skin.diagnostics,
        )

        compiled = compile_tailwind_to_css(
            TailwindCompilationConfig(
                styles_object=skin.styles,
                design_system=skin.design_system,
                warnings=config.warnings,
            )
        )
        css = ""
        if compiled.css.strip():
            css = css_modules_to_vanilla_css(
                compiled.css, component_map, indent_size=config.indent_size
            )

        imports = transform_imports(
            skin.parsed.imports,
            ImportMappingConfig(
                package_mappings=config.package_mappings,
                exclude_patterns=config.exclude_patterns,
                component_mappings=config.component_mappings,
                transform_relative_import=media_relative_import,
            ),
        )

        base_name = to_kebab_case(PurePath(entry_file).stem)
        linked = self.key.css_strategy is CSSStrategy.VANILLA
        module = generate_skin_module(
            SkinModuleData(
                imports=format_side_effect_imports(imports),
                html=html,
                class_name=skin.component_name,
                element_name=to_custom_element_name(skin.component_name),
                styles="" if linked else css,
                stylesheet_href=f"./{base_name}.css" if linked else None,
            ),
            SkinModuleOptions(indent_size=config.indent_size, base_import=config.base_import),
        )

        files = [CompilationFile(f"{base_name}.ts", module, "ts")]
        if linked:
            files.append(CompilationFile(f"{base_name}.css", css, "css"))
        logger.info("compiled %s with %s into %d file(s)", entry_file, self.key, len(files))
        return CompilationOutput(
            files=files, warnings=compiled.warnings + skin.warnings(config)
        )

from tailskin.css.modules import (
    CSSModulesOutput,
    TailwindCompilationConfig,
    compile_tailwind_to_css,
    generate_dts,
)
from tailskin.css.theme import DEFAULT_THEME, Theme
from tailskin.css.utilities import utility_declarations
from tailskin.css.vanilla import css_modules_to_vanilla_css
from tailskin.css.variants import SelectorContext, UnsupportedVariantError, apply_variants

__all__ = [
    "CSSModulesOutput",
    "DEFAULT_THEME",
    "SelectorContext",
    "TailwindCompilationConfig",
    "Theme",
    "UnsupportedVariantError",
    "apply_variants",
    "compile_tailwind_to_css",
    "css_modules_to_vanilla_css",
    "generate_dts",
    "utility_declarations",
]

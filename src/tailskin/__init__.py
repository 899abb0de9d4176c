"""tailskin: compile Tailwind-styled TSX skins into Web Component and React modules."""

__version__ = "0.1.0"

from tailskin.candidate import (  # noqa: E402
    create_simplified_design_system,
    format_candidate,
    parse_candidate,
    parse_variant,
    segment,
)
from tailskin.config import CompilerConfig  # noqa: E402
from tailskin.css import compile_tailwind_to_css, css_modules_to_vanilla_css  # noqa: E402
from tailskin.parser import parse_source  # noqa: E402
from tailskin.pipelines import CompilationOutput, compile_skin, default_registry  # noqa: E402
from tailskin.transforms.imports import transform_imports  # noqa: E402

__all__ = [
    "__version__",
    "CompilationOutput",
    "CompilerConfig",
    "compile_skin",
    "compile_tailwind_to_css",
    "create_simplified_design_system",
    "css_modules_to_vanilla_css",
    "default_registry",
    "format_candidate",
    "parse_candidate",
    "parse_source",
    "parse_variant",
    "segment",
    "transform_imports",
]

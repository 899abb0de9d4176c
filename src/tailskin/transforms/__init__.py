from tailskin.transforms.attributes import (
    DEFAULT_RULES,
    AttributeProcessorPipeline,
    AttributeRule,
    default_attribute,
    literal_text,
    resolve_class_names,
)
from tailskin.transforms.base import AttributeContext, AttributeResult
from tailskin.transforms.imports import (
    DEFAULT_EXCLUDE_PATTERNS,
    ImportMappingConfig,
    default_should_exclude,
    format_imports,
    format_side_effect_imports,
    identity_relative_import,
    media_relative_import,
    transform_imports,
)

__all__ = [
    "DEFAULT_EXCLUDE_PATTERNS",
    "DEFAULT_RULES",
    "AttributeContext",
    "AttributeProcessorPipeline",
    "AttributeResult",
    "AttributeRule",
    "ImportMappingConfig",
    "default_attribute",
    "default_should_exclude",
    "format_imports",
    "format_side_effect_imports",
    "identity_relative_import",
    "literal_text",
    "media_relative_import",
    "resolve_class_names",
    "transform_imports",
]

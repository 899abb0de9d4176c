from tailskin.generator.serializer import (
    MEDIA_SLOT,
    SerializeOptions,
    build_component_map,
    serialize_to_html,
)
from tailskin.generator.skin_module import (
    SkinModuleData,
    SkinModuleOptions,
    generate_skin_module,
)
from tailskin.generator.splice import apply_splices

__all__ = [
    "MEDIA_SLOT",
    "SerializeOptions",
    "SkinModuleData",
    "SkinModuleOptions",
    "apply_splices",
    "build_component_map",
    "generate_skin_module",
    "serialize_to_html",
]

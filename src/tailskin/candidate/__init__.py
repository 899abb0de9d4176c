from tailskin.candidate.arbitrary import (
    DecodedValue,
    classify_arbitrary_value,
    decode_arbitrary_value,
    is_valid_arbitrary,
    underscores_to_spaces,
)
from tailskin.candidate.design_system import (
    DesignSystem,
    create_simplified_design_system,
    default_design_system,
)
from tailskin.candidate.parser import (
    format_candidate,
    format_variant,
    parse_candidate,
    parse_variant,
)
from tailskin.candidate.segment import is_balanced, segment

__all__ = [
    "DecodedValue",
    "DesignSystem",
    "classify_arbitrary_value",
    "create_simplified_design_system",
    "default_design_system",
    "decode_arbitrary_value",
    "format_candidate",
    "format_variant",
    "is_balanced",
    "is_valid_arbitrary",
    "parse_candidate",
    "parse_variant",
    "segment",
    "underscores_to_spaces",
]

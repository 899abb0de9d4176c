from tailskin.model.candidate import (
    ArbitraryUtilityValue,
    Candidate,
    Modifier,
    NamedUtilityValue,
    UtilityValue,
    Variant,
)
from tailskin.model.diagnostic import Diagnostic, Severity, warning

__all__ = [
    "ArbitraryUtilityValue",
    "Candidate",
    "Diagnostic",
    "Modifier",
    "NamedUtilityValue",
    "Severity",
    "UtilityValue",
    "Variant",
    "warning",
]

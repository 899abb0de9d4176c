"""Findings collected while compiling a skin.

Nothing here is raised.  Compilation keeps going and the findings are
handed back to the caller as text in ``CompilationOutput.warnings``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """One finding, e.g. an unparseable class token or a dropped JSX child.

    ``rule`` names the check (``unknown-utility``, ``dropped-expression``...);
    ``style_key`` and ``token`` locate it in the styles object or the markup.
    """

    rule: str
    severity: Severity
    message: str
    style_key: str | None = None
    token: str | None = None
    fix: str | None = None

    @property
    def location(self) -> str:
        """``Key: token``, ``Key`` or ``token``; empty when neither is known."""
        return ": ".join(part for part in (self.style_key, self.token) if part)

    def __str__(self) -> str:
        text = self.severity.value
        if self.location:
            text += f" [{self.location}]"
        text += f": {self.message}"
        if self.fix:
            text += f" ({self.fix})"
        return text


def warning(rule: str, message: str, **kwargs: str | None) -> Diagnostic:
    return Diagnostic(rule, Severity.WARNING, message, **kwargs)

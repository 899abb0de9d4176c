"""Candidate model: the structured form of a single utility-class token.

A token such as ``hover:bg-blue-500/50`` parses into a :class:`Candidate`
whose root is ``bg``, whose value is the named value ``blue-500``, whose
modifier is ``50`` and whose variant stack holds the ``hover`` variant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class NamedUtilityValue:
    """A value drawn from the theme vocabulary (``500``, ``blue-500``, ``1/2``).

    Also used for the named argument of a functional variant.
    """

    value: str
    fraction: str | None = None


@dataclass(frozen=True)
class ArbitraryUtilityValue:
    """A bracketed value such as ``[#ff0000]`` or ``[length:1rem]``.

    Also used for the arbitrary argument of a functional variant.
    """

    value: str
    data_type: str | None = None


UtilityValue = Union[NamedUtilityValue, ArbitraryUtilityValue]


@dataclass(frozen=True)
class Modifier:
    """A ``/suffix`` on a utility or variant."""

    kind: str  # "named", "arbitrary"
    value: str


@dataclass(frozen=True)
class Variant:
    """One ``prefix:`` of a candidate.

    ``kind`` is one of ``static`` (``hover``), ``functional``
    (``data-[state=open]``), ``arbitrary`` (``[&>svg]``) or ``compound``
    (``group-hover``, which wraps another variant in ``variant``).
    """

    kind: str
    root: str = ""
    value: UtilityValue | None = None
    modifier: Modifier | None = None
    selector: str = ""
    variant: Variant | None = None


@dataclass(frozen=True)
class Candidate:
    """A fully parsed utility-class token.

    ``kind`` is ``static``, ``functional`` or ``arbitrary``; for the
    arbitrary-property form ``[mask-type:luminance]`` the root holds the CSS
    property name.  Variants are kept outer to inner, in written order.
    """

    kind: str
    root: str
    value: UtilityValue | None = None
    modifier: Modifier | None = None
    variants: tuple[Variant, ...] = ()
    important: bool = False
    negative: bool = False
    raw: str = field(default="", compare=False)

"""Linear length conversion to and from millimeters."""

from __future__ import annotations

import math

from .value_objects import LengthUnit

# Millimeters in one of each unit
MM_PER_UNIT: dict[LengthUnit, float] = {
    LengthUnit.MM: 1.0,
    LengthUnit.M: 1000.0,
    LengthUnit.FT: 304.8,
    LengthUnit.IN: 25.4,
}


def to_base_unit(value: float, unit: LengthUnit | str) -> float:
    """Convert a value expressed in ``unit`` to millimeters."""
    return value * MM_PER_UNIT[LengthUnit(unit)]


def from_base_unit(value_mm: float, unit: LengthUnit | str) -> float:
    """Convert millimeters to ``unit``."""
    return value_mm / MM_PER_UNIT[LengthUnit(unit)]


def convert_unit(
    value: float, from_unit: LengthUnit | str, to_unit: LengthUnit | str
) -> float:
    """Convert a value between two length units."""
    return from_base_unit(to_base_unit(value, from_unit), to_unit)


def round_to(value: float, decimals: int = 2) -> float:
    """Round half up to ``decimals`` places (no banker's rounding)."""
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


__all__ = [
    "MM_PER_UNIT",
    "convert_unit",
    "from_base_unit",
    "round_to",
    "to_base_unit",
]

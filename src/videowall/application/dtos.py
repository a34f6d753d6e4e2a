"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from videowall.domain import Cabinet, GridConfig, LengthUnit, ParameterId, ParameterPair

PARAMETER_SELECTION_ERROR = (
    "Exactly two distinct parameters must be selected from: "
    "ar, height, width, diagonal."
)


@dataclass
class CalcInput:
    """Input DTO for a sizing calculation.

    Attributes:
        active_params: The two parameter ids the user fixed.
        values: Raw text per length parameter (height, width, diagonal), in
            ``unit``. Entries for inactive parameters are ignored.
        ar_value: The aspect ratio as a plain ratio; required when "ar" is
            active.
        cabinet: Cabinet the wall is built from.
        unit: Unit the raw values are expressed in.
    """

    active_params: Sequence[ParameterId | str]
    values: Mapping[str, str] = field(default_factory=dict)
    ar_value: float | None = None
    cabinet: Cabinet | None = None
    unit: LengthUnit | str = LengthUnit.MM

    def validate(self) -> list[str]:
        """Validate the parameter selection and return error messages."""
        errors: list[str] = []
        try:
            self.pair()
        except ValueError:
            errors.append(PARAMETER_SELECTION_ERROR)
        if self.cabinet is None:
            errors.append("A cabinet must be selected.")
        try:
            LengthUnit(self.unit)
        except ValueError:
            valid_units = ", ".join(u.value for u in LengthUnit)
            errors.append(f"Unit must be one of: {valid_units}")
        return errors

    def pair(self) -> ParameterPair:
        """The active pair.

        Raises:
            ValueError: If the selection is not exactly two distinct known ids.
        """
        if len(self.active_params) != 2:
            raise ValueError(PARAMETER_SELECTION_ERROR)
        first, second = self.active_params
        return ParameterPair.of(first, second)


@dataclass
class CalcResult:
    """Output DTO of a sizing calculation.

    Attributes:
        lower: Best grid no larger than the target, or None.
        upper: Best grid no smaller than the target, or None.
        errors: Blocking problems. When present, both brackets are None.
        notices: Informational messages that never block a result.
    """

    lower: GridConfig | None = None
    upper: GridConfig | None = None
    errors: list[str] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the calculation completed without blocking errors."""
        return len(self.errors) == 0

    @classmethod
    def failed(cls, errors: list[str], notices: list[str] | None = None) -> "CalcResult":
        """Build a result carrying only errors (and any notices so far)."""
        return cls(lower=None, upper=None, errors=list(errors), notices=list(notices or []))

    def to_dict(self) -> dict[str, Any]:
        return {
            "lower": self.lower.to_dict() if self.lower else None,
            "upper": self.upper.to_dict() if self.upper else None,
            "errors": list(self.errors),
            "notices": list(self.notices),
        }


__all__ = [
    "CalcInput",
    "CalcResult",
    "PARAMETER_SELECTION_ERROR",
]

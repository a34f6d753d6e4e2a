"""Immutable value objects for the video wall domain.

All physical dimensions are stored in millimeters. Conversion to the user's
unit happens only at the edges (input parsing and formatting).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class LengthUnit(str, Enum):
    """Length units accepted for user input and output."""

    MM = "mm"
    M = "m"
    FT = "ft"
    IN = "in"


class ParameterId(str, Enum):
    """The four ways a user can describe the desired display."""

    AR = "ar"
    HEIGHT = "height"
    WIDTH = "width"
    DIAGONAL = "diagonal"

    @property
    def label(self) -> str:
        """Human readable name used in messages."""
        if self is ParameterId.AR:
            return "aspect ratio"
        return self.value

    @property
    def is_length(self) -> bool:
        """True for parameters measured in a length unit."""
        return self is not ParameterId.AR


class ParameterPair(Enum):
    """The six valid two-of-four parameter selections.

    A closed set: any selection that isn't one of these members is rejected
    by ``of()`` rather than falling through at derivation time.
    """

    AR_HEIGHT = (ParameterId.AR, ParameterId.HEIGHT)
    AR_WIDTH = (ParameterId.AR, ParameterId.WIDTH)
    AR_DIAGONAL = (ParameterId.AR, ParameterId.DIAGONAL)
    HEIGHT_WIDTH = (ParameterId.HEIGHT, ParameterId.WIDTH)
    HEIGHT_DIAGONAL = (ParameterId.HEIGHT, ParameterId.DIAGONAL)
    WIDTH_DIAGONAL = (ParameterId.WIDTH, ParameterId.DIAGONAL)

    @property
    def parameters(self) -> tuple[ParameterId, ParameterId]:
        """The two parameters of this pair, in canonical order."""
        return self.value

    def includes(self, parameter: ParameterId) -> bool:
        """Check whether the pair contains the given parameter."""
        return parameter in self.value

    @property
    def uses_aspect_ratio(self) -> bool:
        """True when the aspect ratio is one of the fixed parameters."""
        return self.includes(ParameterId.AR)

    @classmethod
    def of(cls, first: ParameterId | str, second: ParameterId | str) -> "ParameterPair":
        """Build a pair from two parameter ids in any order.

        Raises:
            ValueError: If an id is unknown or both ids are the same.
        """
        a = ParameterId(first)
        b = ParameterId(second)
        if a is b:
            raise ValueError(f"Parameter '{a.value}' cannot be paired with itself")
        wanted = {a, b}
        for pair in cls:
            if set(pair.value) == wanted:
                return pair
        raise ValueError(f"Unsupported parameter combination: {a.value}, {b.value}")


@dataclass(frozen=True)
class Cabinet:
    """A physical display cabinet tiled to form the wall."""

    id: str
    label: str
    width_mm: float
    height_mm: float

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Cabinet id must not be empty")
        if not (self.width_mm > 0 and self.height_mm > 0):
            raise ValueError("Cabinet dimensions must be positive")

    @property
    def native_aspect_ratio(self) -> float:
        """Width to height ratio of a single cabinet."""
        return self.width_mm / self.height_mm


@dataclass(frozen=True)
class GridConfig:
    """A cols x rows arrangement of identical cabinets.

    Every dimension is derived from (cols, rows, cabinet); nothing else is
    stored.
    """

    cols: int
    rows: int
    cabinet: Cabinet

    def __post_init__(self) -> None:
        if self.cols < 1 or self.rows < 1:
            raise ValueError("Grid must have at least one column and one row")

    @property
    def total_cabinets(self) -> int:
        return self.cols * self.rows

    @property
    def width_mm(self) -> float:
        return self.cols * self.cabinet.width_mm

    @property
    def height_mm(self) -> float:
        return self.rows * self.cabinet.height_mm

    @property
    def diag_mm(self) -> float:
        return math.sqrt(self.width_mm**2 + self.height_mm**2)

    @property
    def aspect_ratio(self) -> float:
        return self.width_mm / self.height_mm

    def same_arrangement(self, other: "GridConfig | None") -> bool:
        """True when ``other`` has the same column and row counts."""
        return other is not None and (self.cols, self.rows) == (other.cols, other.rows)

    def to_dict(self) -> dict[str, Any]:
        """Flat dictionary view with all derived dimensions."""
        return {
            "cols": self.cols,
            "rows": self.rows,
            "total_cabinets": self.total_cabinets,
            "width_mm": self.width_mm,
            "height_mm": self.height_mm,
            "diag_mm": self.diag_mm,
            "aspect_ratio": self.aspect_ratio,
            "cabinet_id": self.cabinet.id,
        }


@dataclass(frozen=True)
class TargetSpec:
    """The real-world display size being solved for, in millimeters."""

    width_mm: float
    height_mm: float

    def __post_init__(self) -> None:
        if self.width_mm < 0 or self.height_mm < 0:
            raise ValueError("Target dimensions must be non-negative")

    @property
    def diag_mm(self) -> float:
        return math.sqrt(self.width_mm**2 + self.height_mm**2)

    @property
    def aspect_ratio(self) -> float | None:
        """Width to height ratio, or None for a zero-height target."""
        if self.height_mm == 0:
            return None
        return self.width_mm / self.height_mm


# Default physical envelope of a wall
MAX_WIDTH_MM: float = 6000.0
MAX_HEIGHT_MM: float = 2500.0


@dataclass(frozen=True)
class PhysicalLimits:
    """Maximum physical envelope of a wall, in millimeters."""

    max_width_mm: float = MAX_WIDTH_MM
    max_height_mm: float = MAX_HEIGHT_MM

    def __post_init__(self) -> None:
        if not (self.max_width_mm > 0 and self.max_height_mm > 0):
            raise ValueError("Physical limits must be positive")

    def max_cols(self, cabinet: Cabinet) -> int:
        """Most columns of ``cabinet`` that fit the maximum width."""
        return math.floor(self.max_width_mm / cabinet.width_mm)

    def max_rows(self, cabinet: Cabinet) -> int:
        """Most rows of ``cabinet`` that fit the maximum height."""
        return math.floor(self.max_height_mm / cabinet.height_mm)


@dataclass(frozen=True)
class AspectRatioPreset:
    """A named aspect ratio such as 16:9."""

    label: str
    value: float

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Preset label must not be empty")
        if not self.value > 0:
            raise ValueError("Aspect ratio must be positive")


__all__ = [
    "MAX_HEIGHT_MM",
    "MAX_WIDTH_MM",
    "AspectRatioPreset",
    "Cabinet",
    "GridConfig",
    "LengthUnit",
    "ParameterId",
    "ParameterPair",
    "PhysicalLimits",
    "TargetSpec",
]

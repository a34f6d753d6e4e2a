"""Aspect-ratio locked strategies.

When the aspect ratio is fixed together with a height (or width), that
dimension decides the row (or column) count and the other count is chosen
to match the aspect ratio as closely as possible. The two strategies are
mirror images of each other; the shared search lives in the base class and
the subclasses only say which axis is which.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from ...tolerance import is_strictly_above, is_strictly_below
from ...value_objects import Cabinet, GridConfig, PhysicalLimits, TargetSpec
from ..grid_geometry import build_grid
from .primitives import (
    SolverOutcome,
    candidate_counts,
    capped_cols_notice,
    capped_rows_notice,
    closest_aspect_ratio,
    describe_grid,
    too_small_notice,
)

logger = logging.getLogger(__name__)


class _AspectLockedStrategy(ABC):
    """Search along a driving axis, fitting the free axis to the aspect ratio.

    The driving axis is rows for a fixed height and columns for a fixed
    width. Terminology below uses "primary" for the driving axis count and
    "secondary" for the free one.
    """

    def __init__(self, limits: PhysicalLimits) -> None:
        self.limits = limits

    # -------------------------------------------------------------------------
    # Axis mapping, supplied by subclasses
    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def dimension(self) -> str:
        """Name of the fixed dimension, used in notices."""

    @abstractmethod
    def natural_count(self, target: TargetSpec, cabinet: Cabinet) -> float:
        """Real-valued primary count implied by the fixed dimension."""

    @abstractmethod
    def primary_max(self, cabinet: Cabinet) -> int: ...

    @abstractmethod
    def secondary_max(self, cabinet: Cabinet) -> int: ...

    @abstractmethod
    def ideal_secondary(self, primary: int, aspect_ratio: float, cabinet: Cabinet) -> float:
        """Real-valued secondary count giving exactly ``aspect_ratio``."""

    @abstractmethod
    def make_grid(self, primary: int, secondary: int, cabinet: Cabinet) -> GridConfig: ...

    @abstractmethod
    def secondary_of(self, grid: GridConfig) -> int: ...

    @abstractmethod
    def capped_notice(self, cabinet: Cabinet) -> str: ...

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def best_for(self, primary: int, aspect_ratio: float, cabinet: Cabinet) -> GridConfig | None:
        """Closest-AR grid for a given primary count."""
        ideal = self.ideal_secondary(primary, aspect_ratio, cabinet)
        candidates = [
            self.make_grid(primary, secondary, cabinet)
            for secondary in candidate_counts(ideal, self.secondary_max(cabinet))
        ]
        return closest_aspect_ratio(candidates, aspect_ratio)

    def solve(
        self,
        target: TargetSpec,
        cabinet: Cabinet,
        aspect_ratio: float | None = None,
    ) -> SolverOutcome:
        """Find the lower/upper bracket for an aspect-locked target.

        Args:
            target: Clamped target dimensions in millimeters.
            cabinet: Cabinet the wall is built from.
            aspect_ratio: The fixed aspect ratio. Required.

        Returns:
            SolverOutcome with the bracket and any notices.
        """
        if aspect_ratio is None:
            raise ValueError(f"{type(self).__name__} requires an aspect ratio")

        natural = self.natural_count(target, cabinet)
        if is_strictly_below(natural, 1.0):
            return SolverOutcome(
                lower=None,
                upper=build_grid(1, 1, cabinet),
                notices=[too_small_notice(self.dimension)],
            )

        notices: list[str] = []
        primary_max = self.primary_max(cabinet)
        below = min(primary_max, max(1, math.floor(natural)))
        above = math.ceil(natural)

        if above > primary_max:
            notices.append(self.capped_notice(cabinet))
        above_clamped = min(primary_max, above)

        lower = self.best_for(below, aspect_ratio, cabinet)
        upper: GridConfig | None = None

        if above_clamped == below:
            # Natural count is integral or capped: ceil gives nothing new
            if below + 1 <= primary_max:
                upper = self.best_for(below + 1, aspect_ratio, cabinet)
            elif lower is not None:
                widened = self.make_grid(
                    below,
                    min(self.secondary_max(cabinet), self.secondary_of(lower) + 1),
                    cabinet,
                )
                if is_strictly_above(widened.diag_mm, lower.diag_mm):
                    upper = widened
        else:
            upper = self.best_for(above_clamped, aspect_ratio, cabinet)

        logger.debug(
            f"{type(self).__name__}: natural={natural:.4f} below={below} "
            f"above={above_clamped} lower={describe_grid(lower)} upper={describe_grid(upper)}"
        )
        return SolverOutcome(lower=lower, upper=upper, notices=notices)


class AspectHeightStrategy(_AspectLockedStrategy):
    """Aspect ratio fixed with height: rows driven, columns free."""

    @property
    def dimension(self) -> str:
        return "height"

    def natural_count(self, target: TargetSpec, cabinet: Cabinet) -> float:
        return target.height_mm / cabinet.height_mm

    def primary_max(self, cabinet: Cabinet) -> int:
        return self.limits.max_rows(cabinet)

    def secondary_max(self, cabinet: Cabinet) -> int:
        return self.limits.max_cols(cabinet)

    def ideal_secondary(self, primary: int, aspect_ratio: float, cabinet: Cabinet) -> float:
        return (primary * cabinet.height_mm * aspect_ratio) / cabinet.width_mm

    def make_grid(self, primary: int, secondary: int, cabinet: Cabinet) -> GridConfig:
        return build_grid(secondary, primary, cabinet)

    def secondary_of(self, grid: GridConfig) -> int:
        return grid.cols

    def capped_notice(self, cabinet: Cabinet) -> str:
        return capped_rows_notice(self.primary_max(cabinet), self.limits)


class AspectWidthStrategy(_AspectLockedStrategy):
    """Aspect ratio fixed with width: columns driven, rows free."""

    @property
    def dimension(self) -> str:
        return "width"

    def natural_count(self, target: TargetSpec, cabinet: Cabinet) -> float:
        return target.width_mm / cabinet.width_mm

    def primary_max(self, cabinet: Cabinet) -> int:
        return self.limits.max_cols(cabinet)

    def secondary_max(self, cabinet: Cabinet) -> int:
        return self.limits.max_rows(cabinet)

    def ideal_secondary(self, primary: int, aspect_ratio: float, cabinet: Cabinet) -> float:
        return (primary * cabinet.width_mm / aspect_ratio) / cabinet.height_mm

    def make_grid(self, primary: int, secondary: int, cabinet: Cabinet) -> GridConfig:
        return build_grid(primary, secondary, cabinet)

    def secondary_of(self, grid: GridConfig) -> int:
        return grid.rows

    def capped_notice(self, cabinet: Cabinet) -> str:
        return capped_cols_notice(self.primary_max(cabinet), self.limits)


__all__ = [
    "AspectHeightStrategy",
    "AspectWidthStrategy",
]

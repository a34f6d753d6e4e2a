"""Diagonal-driven bracket search.

Used whenever both the target width and height are pinned in millimeters
(ar+diagonal, height+width, height+diagonal, width+diagonal). Grids in a
small neighbourhood of the natural column/row counts are compared by
straight-line diagonal distance to the target.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from ...tolerance import is_at_or_below, is_strictly_above, is_strictly_below
from ...value_objects import Cabinet, GridConfig, PhysicalLimits, TargetSpec
from ..grid_geometry import build_grid
from .primitives import (
    SolverOutcome,
    capped_grid_notice,
    describe_grid,
    too_small_notice,
)

logger = logging.getLogger(__name__)


class DiagonalStrategy:
    """Brackets the target diagonal with the nearest grids below and above."""

    def __init__(self, limits: PhysicalLimits, window_margin: int = 1) -> None:
        """Initialize the strategy.

        Args:
            limits: Physical envelope bounding the search window.
            window_margin: Extra columns/rows searched beyond the natural
                floor and ceiling counts on each side.
        """
        if window_margin < 0:
            raise ValueError("window_margin must be non-negative")
        self.limits = limits
        self.window_margin = window_margin

    def window(
        self, target: TargetSpec, cabinet: Cabinet
    ) -> tuple[range, range]:
        """Column and row ranges searched for ``target``."""
        natural_cols = target.width_mm / cabinet.width_mm
        natural_rows = target.height_mm / cabinet.height_mm
        cols = range(
            max(1, math.floor(natural_cols) - self.window_margin),
            min(self.limits.max_cols(cabinet), math.ceil(natural_cols) + self.window_margin) + 1,
        )
        rows = range(
            max(1, math.floor(natural_rows) - self.window_margin),
            min(self.limits.max_rows(cabinet), math.ceil(natural_rows) + self.window_margin) + 1,
        )
        return cols, rows

    def _grids(self, target: TargetSpec, cabinet: Cabinet) -> Iterator[GridConfig]:
        # Rows outer, columns inner: the order decides ties
        cols, rows = self.window(target, cabinet)
        for r in rows:
            for c in cols:
                yield build_grid(c, r, cabinet)

    def solve(
        self,
        target: TargetSpec,
        cabinet: Cabinet,
        aspect_ratio: float | None = None,
    ) -> SolverOutcome:
        """Find the closest grids at-or-below and at-or-above the target diagonal.

        Args:
            target: Clamped target dimensions in millimeters.
            cabinet: Cabinet the wall is built from.
            aspect_ratio: Unused; accepted for interface compatibility.

        Returns:
            SolverOutcome with the bracket and any notices.
        """
        if is_strictly_below(target.width_mm, cabinet.width_mm) or is_strictly_below(
            target.height_mm, cabinet.height_mm
        ):
            return SolverOutcome(
                lower=None,
                upper=build_grid(1, 1, cabinet),
                notices=[too_small_notice("size")],
            )

        notices: list[str] = []
        max_cols = self.limits.max_cols(cabinet)
        max_rows = self.limits.max_rows(cabinet)
        if (
            math.ceil(target.width_mm / cabinet.width_mm) > max_cols
            or math.ceil(target.height_mm / cabinet.height_mm) > max_rows
        ):
            notices.append(capped_grid_notice(max_cols, max_rows, self.limits))

        target_diag = target.diag_mm
        lower: GridConfig | None = None
        upper: GridConfig | None = None
        lower_gap = math.inf
        upper_gap = math.inf

        for grid in self._grids(target, cabinet):
            delta = grid.diag_mm - target_diag
            if is_at_or_below(grid.diag_mm, target_diag) and abs(delta) < lower_gap:
                lower, lower_gap = grid, abs(delta)
            if not is_strictly_below(grid.diag_mm, target_diag) and delta < upper_gap:
                upper, upper_gap = grid, delta

        if lower is not None and lower.same_arrangement(upper):
            # Exact diagonal match: promote the next strictly larger grid
            upper = None
            upper_gap = math.inf
            for grid in self._grids(target, cabinet):
                delta = grid.diag_mm - target_diag
                if is_strictly_above(grid.diag_mm, target_diag) and delta < upper_gap:
                    upper, upper_gap = grid, delta

        logger.debug(
            f"DiagonalStrategy: target_diag={target_diag:.3f} "
            f"lower={describe_grid(lower)} upper={describe_grid(upper)}"
        )
        return SolverOutcome(lower=lower, upper=upper, notices=notices)


__all__ = [
    "DiagonalStrategy",
]

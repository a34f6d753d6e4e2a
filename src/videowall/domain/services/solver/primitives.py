"""Shared building blocks for the grid search strategies."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ...value_objects import GridConfig, PhysicalLimits


@dataclass(frozen=True)
class SolverOutcome:
    """Lower/upper bracket found by a strategy.

    ``None`` on either side means no configuration exists there; it is a
    legitimate answer, not an error.
    """

    lower: GridConfig | None
    upper: GridConfig | None
    notices: list[str] = field(default_factory=list)


class OrderedIntSet:
    """Insertion-ordered set of integers.

    Keeps candidate generation order deterministic so that the first-wins
    tie-break in ``closest_aspect_ratio`` is reproducible.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: dict[int, None] = {}
        for value in values:
            self.add(value)

    def add(self, value: int) -> None:
        self._items.setdefault(value, None)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __repr__(self) -> str:
        return f"OrderedIntSet({list(self._items)!r})"


def candidate_counts(ideal: float, maximum: int) -> OrderedIntSet:
    """Integer counts bracketing a real-valued ideal count.

    Floor first, then ceiling. Both are kept within ``[1, maximum]``; an
    ideal that overflowed to infinity collapses to ``maximum``.
    """
    ideal = min(ideal, maximum)
    low = min(maximum, max(1, math.floor(ideal)))
    high = max(1, min(maximum, math.ceil(ideal)))
    return OrderedIntSet((low, high))


def closest_aspect_ratio(
    candidates: Iterable[GridConfig], target_ar: float
) -> GridConfig | None:
    """Pick the candidate whose aspect ratio is nearest ``target_ar``.

    Ties keep the earliest candidate. Returns None for no candidates.
    """
    best: GridConfig | None = None
    best_distance = math.inf
    for grid in candidates:
        distance = abs(grid.aspect_ratio - target_ar)
        if distance < best_distance:
            best = grid
            best_distance = distance
    return best


def describe_grid(grid: GridConfig | None) -> str:
    """Short "colsxrows" label for logs."""
    return "none" if grid is None else f"{grid.cols}x{grid.rows}"


# =============================================================================
# Notice text
# =============================================================================


def too_small_notice(dimension: str) -> str:
    """Notice for a target below a single cabinet on ``dimension``."""
    return (
        f"Requested {dimension} is smaller than a single cabinet. "
        "No lower configuration exists; showing the minimum 1x1 grid as upper."
    )


def capped_rows_notice(max_rows: int, limits: PhysicalLimits) -> str:
    return (
        "Requested size exceeds maximum supported dimensions. "
        f"Results are capped at {max_rows} rows (max height {limits.max_height_mm:g} mm)."
    )


def capped_cols_notice(max_cols: int, limits: PhysicalLimits) -> str:
    return (
        "Requested size exceeds maximum supported dimensions. "
        f"Results are capped at {max_cols} columns (max width {limits.max_width_mm:g} mm)."
    )


def capped_grid_notice(max_cols: int, max_rows: int, limits: PhysicalLimits) -> str:
    return (
        "Requested size exceeds maximum supported dimensions. "
        f"Results are capped at {max_cols} columns x {max_rows} rows "
        f"(max {limits.max_width_mm:g} mm wide x {limits.max_height_mm:g} mm tall)."
    )


__all__ = [
    "OrderedIntSet",
    "SolverOutcome",
    "candidate_counts",
    "capped_cols_notice",
    "capped_grid_notice",
    "capped_rows_notice",
    "closest_aspect_ratio",
    "describe_grid",
    "too_small_notice",
]

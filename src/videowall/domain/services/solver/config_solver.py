"""Configuration solver: the lower/upper grid bracket search."""

from __future__ import annotations

import logging

from ...value_objects import Cabinet, ParameterPair, PhysicalLimits, TargetSpec
from .factory import SolverStrategyFactory
from .primitives import SolverOutcome

logger = logging.getLogger(__name__)


class ConfigSolver:
    """Finds the best grids no larger and no smaller than a target.

    The strategy is chosen by the parameter pair the user fixed; see
    SolverStrategyFactory.
    """

    def __init__(
        self,
        limits: PhysicalLimits | None = None,
        strategy_factory: SolverStrategyFactory | None = None,
    ) -> None:
        self.limits = limits or PhysicalLimits()
        self._strategy_factory = strategy_factory or SolverStrategyFactory(self.limits)

    def solve(
        self,
        pair: ParameterPair,
        target: TargetSpec,
        cabinet: Cabinet,
        aspect_ratio: float | None = None,
    ) -> SolverOutcome:
        """Solve for the bracket around ``target``.

        Args:
            pair: The active parameter pair.
            target: Clamped target dimensions in millimeters.
            cabinet: Cabinet the wall is built from.
            aspect_ratio: The fixed aspect ratio when ``pair`` includes it.

        Returns:
            SolverOutcome with lower, upper and notices.

        Raises:
            ValueError: If a single cabinet does not fit within the limits.
        """
        if self.limits.max_cols(cabinet) < 1 or self.limits.max_rows(cabinet) < 1:
            raise ValueError(
                f"Cabinet '{cabinet.id}' ({cabinet.width_mm:g} x {cabinet.height_mm:g} mm) "
                f"does not fit within {self.limits.max_width_mm:g} x "
                f"{self.limits.max_height_mm:g} mm"
            )

        strategy = self._strategy_factory.create_strategy(pair)
        logger.debug(f"Solving {pair.name} with {type(strategy).__name__}")
        return strategy.solve(target, cabinet, aspect_ratio=aspect_ratio)


__all__ = [
    "ConfigSolver",
]

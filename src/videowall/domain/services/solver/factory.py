"""Factory for creating solver strategies.

Keeps the pair-to-strategy mapping in one place so the solver itself never
branches on the parameter selection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...value_objects import ParameterPair, PhysicalLimits
from .aspect import AspectHeightStrategy, AspectWidthStrategy
from .diagonal import DiagonalStrategy

if TYPE_CHECKING:
    from videowall.contracts.strategies import SolverStrategy


class SolverStrategyFactory:
    """Creates the search strategy appropriate for a parameter pair.

    Example:
        ```python
        factory = SolverStrategyFactory(PhysicalLimits())
        strategy = factory.create_strategy(ParameterPair.AR_HEIGHT)
        outcome = strategy.solve(target, cabinet, aspect_ratio=16 / 9)
        ```
    """

    def __init__(self, limits: PhysicalLimits, window_margin: int = 1) -> None:
        """Initialize with the limits every strategy searches within.

        Args:
            limits: Physical envelope shared by all strategies.
            window_margin: Neighbourhood margin for the diagonal search.
        """
        self._limits = limits
        self._window_margin = window_margin

    def create_strategy(self, pair: ParameterPair) -> "SolverStrategy":
        """Return the strategy for ``pair``.

        Selection:
        1. aspect ratio + height: AspectHeightStrategy
        2. aspect ratio + width: AspectWidthStrategy
        3. anything else (both dimensions pinned): DiagonalStrategy
        """
        if pair is ParameterPair.AR_HEIGHT:
            return AspectHeightStrategy(self._limits)
        if pair is ParameterPair.AR_WIDTH:
            return AspectWidthStrategy(self._limits)
        return DiagonalStrategy(self._limits, window_margin=self._window_margin)


__all__ = [
    "SolverStrategyFactory",
]

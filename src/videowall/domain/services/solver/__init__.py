"""Grid search strategies and the solver that dispatches to them.

Available Strategies:
    - AspectHeightStrategy: aspect ratio fixed with height
    - AspectWidthStrategy: aspect ratio fixed with width
    - DiagonalStrategy: both dimensions pinned, compared by diagonal

Factory:
    - SolverStrategyFactory: picks the strategy for a parameter pair
"""

from .aspect import AspectHeightStrategy, AspectWidthStrategy
from .config_solver import ConfigSolver
from .diagonal import DiagonalStrategy
from .factory import SolverStrategyFactory
from .primitives import (
    OrderedIntSet,
    SolverOutcome,
    candidate_counts,
    closest_aspect_ratio,
)

__all__ = [
    "AspectHeightStrategy",
    "AspectWidthStrategy",
    "ConfigSolver",
    "DiagonalStrategy",
    "OrderedIntSet",
    "SolverOutcome",
    "SolverStrategyFactory",
    "candidate_counts",
    "closest_aspect_ratio",
]

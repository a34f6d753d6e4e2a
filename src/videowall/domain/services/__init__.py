"""Domain services for video wall sizing."""

from .grid_geometry import build_grid
from .limit_clamper import AR_ACHIEVABILITY_TOLERANCE, ClampResult, LimitClamper
from .solver import (
    AspectHeightStrategy,
    AspectWidthStrategy,
    ConfigSolver,
    DiagonalStrategy,
    SolverOutcome,
    SolverStrategyFactory,
)
from .target_deriver import (
    DerivationError,
    GeometryError,
    InvalidValueError,
    TargetDeriver,
)

__all__ = [
    "AR_ACHIEVABILITY_TOLERANCE",
    "AspectHeightStrategy",
    "AspectWidthStrategy",
    "ClampResult",
    "ConfigSolver",
    "DerivationError",
    "DiagonalStrategy",
    "GeometryError",
    "InvalidValueError",
    "LimitClamper",
    "SolverOutcome",
    "SolverStrategyFactory",
    "TargetDeriver",
    "build_grid",
]

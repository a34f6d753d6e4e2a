"""Domain layer - value objects, catalog data and sizing services."""

from .catalog import (
    ASPECT_RATIO_PRESETS,
    DEFAULT_CABINETS,
    find_cabinet,
    format_aspect_ratio,
    parse_aspect_ratio,
)
from .services import (
    ClampResult,
    ConfigSolver,
    DerivationError,
    GeometryError,
    InvalidValueError,
    LimitClamper,
    SolverOutcome,
    TargetDeriver,
    build_grid,
)
from .tolerance import EPS
from .units import MM_PER_UNIT, convert_unit, from_base_unit, round_to, to_base_unit
from .value_objects import (
    MAX_HEIGHT_MM,
    MAX_WIDTH_MM,
    AspectRatioPreset,
    Cabinet,
    GridConfig,
    LengthUnit,
    ParameterId,
    ParameterPair,
    PhysicalLimits,
    TargetSpec,
)

__all__ = [
    "ASPECT_RATIO_PRESETS",
    "AspectRatioPreset",
    "Cabinet",
    "ClampResult",
    "ConfigSolver",
    "DEFAULT_CABINETS",
    "DerivationError",
    "EPS",
    "GeometryError",
    "GridConfig",
    "InvalidValueError",
    "LengthUnit",
    "LimitClamper",
    "MAX_HEIGHT_MM",
    "MAX_WIDTH_MM",
    "MM_PER_UNIT",
    "ParameterId",
    "ParameterPair",
    "PhysicalLimits",
    "SolverOutcome",
    "TargetDeriver",
    "TargetSpec",
    "build_grid",
    "convert_unit",
    "find_cabinet",
    "format_aspect_ratio",
    "from_base_unit",
    "parse_aspect_ratio",
    "round_to",
    "to_base_unit",
]

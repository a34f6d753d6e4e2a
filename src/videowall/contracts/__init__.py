"""Contracts module - protocols shared across layers."""

from .protocols import (
    ConfigSolverProtocol as ConfigSolverProtocol,
    LimitClamperProtocol as LimitClamperProtocol,
    TargetDeriverProtocol as TargetDeriverProtocol,
)
from .strategies import SolverStrategy as SolverStrategy

__all__ = [
    "ConfigSolverProtocol",
    "LimitClamperProtocol",
    "SolverStrategy",
    "TargetDeriverProtocol",
]

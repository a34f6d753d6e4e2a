"""Application layer - commands, DTOs and service wiring."""

from .commands import CalculateConfigurationCommand, calculate, parse_positive
from .dtos import PARAMETER_SELECTION_ERROR, CalcInput, CalcResult
from .factory import ServiceFactory, get_factory, set_factory

__all__ = [
    "CalcInput",
    "CalcResult",
    "CalculateConfigurationCommand",
    "PARAMETER_SELECTION_ERROR",
    "ServiceFactory",
    "calculate",
    "get_factory",
    "parse_positive",
    "set_factory",
]

"""Service protocols for dependency injection.

The calculation command depends on these protocols rather than on the
concrete services, so tests can substitute any stage of the pipeline.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from videowall.domain.services.limit_clamper import ClampResult
    from videowall.domain.services.solver.primitives import SolverOutcome
    from videowall.domain.value_objects import (
        Cabinet,
        LengthUnit,
        ParameterId,
        ParameterPair,
        TargetSpec,
    )


class TargetDeriverProtocol(Protocol):
    """Turns a parameter pair and its values into target dimensions."""

    def derive(
        self,
        pair: "ParameterPair",
        measurements: Mapping["ParameterId", float | None],
    ) -> "TargetSpec":
        """Derive the target, raising DerivationError on invalid input."""
        ...


class LimitClamperProtocol(Protocol):
    """Caps targets at the physical limits and reports advisories."""

    def clamp(self, target: "TargetSpec", unit: "LengthUnit | str" = ...) -> "ClampResult":
        ...

    def aspect_ratio_notice(self, cabinet: "Cabinet", aspect_ratio: float) -> str | None:
        ...


class ConfigSolverProtocol(Protocol):
    """Finds the lower/upper grid bracket for a clamped target."""

    def solve(
        self,
        pair: "ParameterPair",
        target: "TargetSpec",
        cabinet: "Cabinet",
        aspect_ratio: float | None = None,
    ) -> "SolverOutcome":
        ...


__all__ = [
    "ConfigSolverProtocol",
    "LimitClamperProtocol",
    "TargetDeriverProtocol",
]

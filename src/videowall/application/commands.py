"""Application commands (use cases) for video wall sizing."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from videowall.domain import (
    ConfigSolver,
    DerivationError,
    LengthUnit,
    LimitClamper,
    ParameterId,
    TargetDeriver,
    to_base_unit,
)

from .dtos import CalcInput, CalcResult

if TYPE_CHECKING:
    from videowall.contracts.protocols import (
        ConfigSolverProtocol,
        LimitClamperProtocol,
        TargetDeriverProtocol,
    )

logger = logging.getLogger(__name__)


def parse_positive(raw: str | None) -> float | None:
    """Parse raw user text as a finite positive number, or return None.

    Digit separators (``1_000``) are not accepted.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


class CalculateConfigurationCommand:
    """Command computing the lower/upper grid bracket for a requested display.

    Pipeline: derive the target from the two fixed parameters, clamp it to
    the physical limits, then search for the bracketing grids.
    """

    def __init__(
        self,
        deriver: "TargetDeriverProtocol | None" = None,
        clamper: "LimitClamperProtocol | None" = None,
        solver: "ConfigSolverProtocol | None" = None,
    ) -> None:
        self.deriver = deriver or TargetDeriver()
        self.clamper = clamper or LimitClamper()
        self.solver = solver or ConfigSolver()

    def execute(self, calc_input: CalcInput) -> CalcResult:
        """Execute the sizing calculation.

        Args:
            calc_input: Parameter selection, raw values, cabinet and unit.

        Returns:
            CalcResult. Blocking problems are reported in ``errors`` with
            both brackets None; everything else informational goes to
            ``notices``.
        """
        errors = calc_input.validate()
        if errors:
            return CalcResult.failed(errors)

        pair = calc_input.pair()
        unit = LengthUnit(calc_input.unit)
        cabinet = calc_input.cabinet
        assert cabinet is not None

        measurements: dict[ParameterId, float | None] = {}
        for parameter in pair.parameters:
            if parameter is ParameterId.AR:
                measurements[parameter] = calc_input.ar_value
                continue
            value = parse_positive(calc_input.values.get(parameter.value))
            # Huge values may overflow to infinity here and are clamped later
            measurements[parameter] = None if value is None else to_base_unit(value, unit)

        try:
            target = self.deriver.derive(pair, measurements)
        except DerivationError as e:
            logger.debug(f"Derivation failed: {e}")
            return CalcResult.failed(e.messages)

        notices: list[str] = []
        clamped = self.clamper.clamp(target, unit)
        notices.extend(clamped.notices)

        aspect_ratio = measurements.get(ParameterId.AR)
        if aspect_ratio is not None:
            ar_notice = self.clamper.aspect_ratio_notice(cabinet, aspect_ratio)
            if ar_notice:
                notices.append(ar_notice)

        outcome = self.solver.solve(pair, clamped.target, cabinet, aspect_ratio=aspect_ratio)
        notices.extend(outcome.notices)

        return CalcResult(
            lower=outcome.lower,
            upper=outcome.upper,
            errors=[],
            notices=notices,
        )


def calculate(calc_input: CalcInput) -> CalcResult:
    """Compute the lower/upper grid bracket using the default services."""
    from .factory import get_factory

    return get_factory().create_calculate_command().execute(calc_input)


__all__ = [
    "CalculateConfigurationCommand",
    "calculate",
    "parse_positive",
]

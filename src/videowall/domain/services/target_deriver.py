"""Target size derivation from a two-parameter selection.

Turns the two values the user fixed (already in millimeters, or a plain
ratio for the aspect ratio) into the width and height of the display being
solved for.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from ..tolerance import is_strictly_above
from ..value_objects import ParameterId, ParameterPair, TargetSpec

logger = logging.getLogger(__name__)


class DerivationError(Exception):
    """Raised when the selected values cannot describe a display.

    Attributes:
        messages: One user-facing message per problem found.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class InvalidValueError(DerivationError):
    """A selected value is missing, non-numeric, non-finite or not positive."""

    def __init__(self, parameters: list[ParameterId]) -> None:
        self.parameters = list(parameters)
        super().__init__(
            [f"Please enter a valid positive value for {p.label}." for p in parameters]
        )


class GeometryError(DerivationError):
    """The selected values are numerically valid but geometrically impossible."""

    def __init__(self, message: str) -> None:
        super().__init__([message])


def _is_valid_value(parameter: ParameterId, value: float | None) -> bool:
    if value is None or math.isnan(value) or value <= 0:
        return False
    # A length may overflow to infinity during unit conversion; the clamper caps it
    return parameter.is_length or math.isfinite(value)


def _leg(hypotenuse: float, side: float) -> float:
    """Remaining side of a right triangle, without squaring either input."""
    return math.sqrt(hypotenuse - side) * math.sqrt(hypotenuse + side)


class TargetDeriver:
    """Derives a TargetSpec from any of the six parameter pairs."""

    def derive(
        self,
        pair: ParameterPair,
        measurements: Mapping[ParameterId, float | None],
    ) -> TargetSpec:
        """Validate the pair's values and compute the target width and height.

        Args:
            pair: The active parameter pair.
            measurements: Value per parameter id. Lengths must already be in
                millimeters; the aspect ratio is a plain width/height ratio.
                ``None`` marks a value that could not be parsed.

        Returns:
            The target dimensions in millimeters.

        Raises:
            InvalidValueError: If any value of the pair is missing, NaN or
                not positive, or the aspect ratio is infinite. Checked before
                any geometry rule.
            GeometryError: If a fixed diagonal does not exceed the fixed
                height or width.
        """
        invalid = [p for p in pair.parameters if not _is_valid_value(p, measurements.get(p))]
        if invalid:
            raise InvalidValueError(invalid)

        values: dict[ParameterId, float] = {p: float(measurements[p]) for p in pair.parameters}  # type: ignore[arg-type]

        if pair is ParameterPair.HEIGHT_DIAGONAL and not is_strictly_above(
            values[ParameterId.DIAGONAL], values[ParameterId.HEIGHT]
        ):
            raise GeometryError("Diagonal must be greater than height.")

        if pair is ParameterPair.WIDTH_DIAGONAL and not is_strictly_above(
            values[ParameterId.DIAGONAL], values[ParameterId.WIDTH]
        ):
            raise GeometryError("Diagonal must be greater than width.")

        target = self._compute(pair, values)
        logger.debug(
            f"Derived target {target.width_mm:.3f} x {target.height_mm:.3f} mm "
            f"from {pair.name}"
        )
        return target

    @staticmethod
    def _compute(pair: ParameterPair, values: dict[ParameterId, float]) -> TargetSpec:
        match pair:
            case ParameterPair.AR_HEIGHT:
                height = values[ParameterId.HEIGHT]
                return TargetSpec(width_mm=height * values[ParameterId.AR], height_mm=height)

            case ParameterPair.AR_WIDTH:
                width = values[ParameterId.WIDTH]
                return TargetSpec(width_mm=width, height_mm=width / values[ParameterId.AR])

            case ParameterPair.AR_DIAGONAL:
                ar = values[ParameterId.AR]
                height = values[ParameterId.DIAGONAL] / math.hypot(ar, 1.0)
                return TargetSpec(width_mm=height * ar, height_mm=height)

            case ParameterPair.HEIGHT_WIDTH:
                return TargetSpec(
                    width_mm=values[ParameterId.WIDTH],
                    height_mm=values[ParameterId.HEIGHT],
                )

            case ParameterPair.HEIGHT_DIAGONAL:
                height = values[ParameterId.HEIGHT]
                diagonal = values[ParameterId.DIAGONAL]
                return TargetSpec(
                    width_mm=_leg(diagonal, height),
                    height_mm=height,
                )

            case ParameterPair.WIDTH_DIAGONAL:
                width = values[ParameterId.WIDTH]
                diagonal = values[ParameterId.DIAGONAL]
                return TargetSpec(
                    width_mm=width,
                    height_mm=_leg(diagonal, width),
                )

        raise ValueError(f"Unsupported parameter pair: {pair!r}")


__all__ = [
    "DerivationError",
    "GeometryError",
    "InvalidValueError",
    "TargetDeriver",
]

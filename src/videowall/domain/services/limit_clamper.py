"""Clamping of target sizes to the physical envelope of a wall."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..catalog import format_aspect_ratio
from ..tolerance import is_strictly_above
from ..units import from_base_unit
from ..value_objects import Cabinet, LengthUnit, PhysicalLimits, TargetSpec

logger = logging.getLogger(__name__)

# Largest |native AR - requested AR| treated as achievable
AR_ACHIEVABILITY_TOLERANCE: float = 0.02


@dataclass(frozen=True)
class ClampResult:
    """Outcome of clamping a target.

    Attributes:
        target: The clamped target (a new object; the input is untouched).
        notices: One notice per clamped dimension, height first.
    """

    target: TargetSpec
    notices: list[str] = field(default_factory=list)

    @property
    def was_clamped(self) -> bool:
        return bool(self.notices)


class LimitClamper:
    """Caps target dimensions at the configured physical limits."""

    def __init__(self, limits: PhysicalLimits | None = None) -> None:
        self.limits = limits or PhysicalLimits()

    def clamp(
        self, target: TargetSpec, unit: LengthUnit | str = LengthUnit.MM
    ) -> ClampResult:
        """Clamp height and width independently.

        Args:
            target: Target dimensions in millimeters.
            unit: Unit used to phrase the notices, normally the user's unit.

        Returns:
            ClampResult with the clamped target and any notices.
        """
        unit = LengthUnit(unit)
        notices: list[str] = []
        width = target.width_mm
        height = target.height_mm

        if is_strictly_above(height, self.limits.max_height_mm):
            notices.append(
                self._clamp_notice("height", height, self.limits.max_height_mm, unit)
            )
            height = self.limits.max_height_mm

        if is_strictly_above(width, self.limits.max_width_mm):
            notices.append(
                self._clamp_notice("width", width, self.limits.max_width_mm, unit)
            )
            width = self.limits.max_width_mm

        if notices:
            logger.debug(
                f"Clamped target {target.width_mm:.3f} x {target.height_mm:.3f} mm "
                f"to {width:.3f} x {height:.3f} mm"
            )
        return ClampResult(target=TargetSpec(width_mm=width, height_mm=height), notices=notices)

    def aspect_ratio_notice(self, cabinet: Cabinet, aspect_ratio: float) -> str | None:
        """Return an advisory when the cabinet's own ratio differs from ``aspect_ratio``."""
        native = cabinet.native_aspect_ratio
        if abs(native - aspect_ratio) <= AR_ACHIEVABILITY_TOLERANCE:
            return None
        return (
            f"The {cabinet.id} cabinet (native AR approx. {native:.3f}) may not "
            f"perfectly achieve a {format_aspect_ratio(aspect_ratio)} aspect ratio. "
            "The closest achievable ratio is shown in each result."
        )

    @staticmethod
    def _clamp_notice(
        dimension: str, value_mm: float, limit_mm: float, unit: LengthUnit
    ) -> str:
        shown = from_base_unit(value_mm, unit)
        limit = from_base_unit(limit_mm, unit)
        return (
            f"Your {dimension} input ({shown:.2f} {unit.value}) exceeds the maximum of "
            f"{limit:.2f} {unit.value} ({limit_mm:g} mm). "
            f"It has been clamped to {limit:.2f} {unit.value}."
        )


__all__ = [
    "AR_ACHIEVABILITY_TOLERANCE",
    "ClampResult",
    "LimitClamper",
]

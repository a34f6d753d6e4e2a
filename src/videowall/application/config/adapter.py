"""Adapters converting a CatalogConfiguration into domain objects."""

from videowall.application.config.schema import CatalogConfiguration
from videowall.domain import (
    ASPECT_RATIO_PRESETS,
    DEFAULT_CABINETS,
    AspectRatioPreset,
    Cabinet,
    PhysicalLimits,
)


def config_to_limits(config: CatalogConfiguration | None) -> PhysicalLimits:
    """Physical limits from the catalog, or the built-in limits."""
    if config is None or config.limits is None:
        return PhysicalLimits()
    return PhysicalLimits(
        max_width_mm=config.limits.max_width_mm,
        max_height_mm=config.limits.max_height_mm,
    )


def config_to_cabinets(config: CatalogConfiguration | None) -> tuple[Cabinet, ...]:
    """Cabinets from the catalog, or the built-in cabinets.

    A cabinet without a label is labelled from its id and dimensions.
    """
    if config is None or not config.cabinets:
        return DEFAULT_CABINETS
    return tuple(
        Cabinet(
            id=c.id,
            label=c.label or f"{c.id} Cabinet ({c.width_mm:g} x {c.height_mm:g} mm)",
            width_mm=c.width_mm,
            height_mm=c.height_mm,
        )
        for c in config.cabinets
    )


def config_to_presets(
    config: CatalogConfiguration | None,
) -> tuple[AspectRatioPreset, ...]:
    """Aspect-ratio presets from the catalog, or the built-in presets."""
    if config is None or config.aspect_ratios is None:
        return ASPECT_RATIO_PRESETS
    return tuple(
        AspectRatioPreset(label=p.label, value=p.value) for p in config.aspect_ratios
    )


__all__ = [
    "config_to_cabinets",
    "config_to_limits",
    "config_to_presets",
]

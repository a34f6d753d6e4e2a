"""Pydantic configuration schema models for cabinet catalogs.

A catalog file overrides the built-in cabinets, aspect-ratio presets and
physical limits. Every section is optional; omitted sections fall back to
the built-in catalog.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from videowall.domain.catalog import DEFAULT_CABINETS
from videowall.domain.value_objects import MAX_HEIGHT_MM, MAX_WIDTH_MM

# Supported schema versions for catalog files
# Version 1.0: Initial schema with limits, cabinets and aspect ratios
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class LimitsConfig(BaseModel):
    """Maximum physical envelope of a wall.

    Attributes:
        max_width_mm: Maximum wall width in millimeters
        max_height_mm: Maximum wall height in millimeters
    """

    model_config = ConfigDict(extra="forbid")

    max_width_mm: float = Field(default=MAX_WIDTH_MM, gt=0, description="Maximum wall width")
    max_height_mm: float = Field(default=MAX_HEIGHT_MM, gt=0, description="Maximum wall height")


class CabinetConfig(BaseModel):
    """A cabinet (tile) the wall is assembled from.

    Attributes:
        id: Unique identifier used on the command line (e.g. "16:9")
        label: Human readable name; defaults to the id
        width_mm: Cabinet width in millimeters
        height_mm: Cabinet height in millimeters
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    label: str | None = None
    width_mm: float = Field(..., gt=0)
    height_mm: float = Field(..., gt=0)


class AspectRatioConfig(BaseModel):
    """A named aspect-ratio preset."""

    model_config = ConfigDict(extra="forbid")

    label: str = Field(..., min_length=1)
    value: float = Field(..., gt=0)


class CatalogConfiguration(BaseModel):
    """Root configuration model for catalog files.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        limits: Optional physical limits override
        cabinets: Optional cabinet list replacing the built-in cabinets
        aspect_ratios: Optional preset list replacing the built-in presets

    Example:
        >>> config = CatalogConfiguration(
        ...     schema_version="1.0",
        ...     cabinets=[CabinetConfig(id="4:3", width_mm=640, height_mm=480)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    limits: LimitsConfig | None = Field(default=None, description="Physical limits (optional)")
    cabinets: list[CabinetConfig] | None = Field(
        default=None, min_length=1, description="Cabinet catalog (optional)"
    )
    aspect_ratios: list[AspectRatioConfig] | None = Field(
        default=None, description="Aspect-ratio presets (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("cabinets")
    @classmethod
    def validate_unique_cabinet_ids(
        cls, v: list[CabinetConfig] | None
    ) -> list[CabinetConfig] | None:
        """Validate that cabinet ids are unique."""
        if v is None:
            return v
        seen: set[str] = set()
        for cabinet in v:
            if cabinet.id in seen:
                raise ValueError(f"Duplicate cabinet id '{cabinet.id}'")
            seen.add(cabinet.id)
        return v

    @model_validator(mode="after")
    def validate_cabinets_fit_limits(self) -> "CatalogConfiguration":
        """Validate that a single cabinet of each kind fits within the limits.

        Without a cabinets section the built-in cabinets are checked.
        """
        limits = self.limits or LimitsConfig()
        cabinets = self.cabinets or DEFAULT_CABINETS
        for cabinet in cabinets:
            if (
                cabinet.width_mm > limits.max_width_mm
                or cabinet.height_mm > limits.max_height_mm
            ):
                raise ValueError(
                    f"Cabinet '{cabinet.id}' ({cabinet.width_mm:g} x {cabinet.height_mm:g} mm) "
                    f"does not fit within the limits "
                    f"({limits.max_width_mm:g} x {limits.max_height_mm:g} mm)"
                )
        return self


__all__ = [
    "AspectRatioConfig",
    "CabinetConfig",
    "CatalogConfiguration",
    "LimitsConfig",
    "SUPPORTED_VERSIONS",
]

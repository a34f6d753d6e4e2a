"""Built-in cabinet catalog and aspect-ratio presets."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from .value_objects import AspectRatioPreset, Cabinet

DEFAULT_CABINETS: tuple[Cabinet, ...] = (
    Cabinet(id="16:9", label="16:9 Cabinet (600 x 337.5 mm)", width_mm=600.0, height_mm=337.5),
    Cabinet(id="1:1", label="1:1 Cabinet (500 x 500 mm)", width_mm=500.0, height_mm=500.0),
)

ASPECT_RATIO_PRESETS: tuple[AspectRatioPreset, ...] = (
    AspectRatioPreset(label="16:9", value=16 / 9),
    AspectRatioPreset(label="32:9", value=32 / 9),
    AspectRatioPreset(label="4:3", value=4 / 3),
    AspectRatioPreset(label="24:9", value=24 / 9),
    AspectRatioPreset(label="9:16", value=9 / 16),
    AspectRatioPreset(label="16:10", value=16 / 10),
    AspectRatioPreset(label="2.40:1", value=2.40),
    AspectRatioPreset(label="16:18", value=16 / 18),
    AspectRatioPreset(label="48:9", value=48 / 9),
)

_RATIO_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[:/x]\s*(\d+(?:\.\d+)?)\s*$")


def find_cabinet(
    cabinet_id: str, cabinets: Iterable[Cabinet] = DEFAULT_CABINETS
) -> Cabinet:
    """Look up a cabinet by id.

    Raises:
        KeyError: If no cabinet has the given id.
    """
    for cabinet in cabinets:
        if cabinet.id == cabinet_id:
            return cabinet
    raise KeyError(cabinet_id)


def parse_aspect_ratio(
    text: str, presets: Iterable[AspectRatioPreset] = ASPECT_RATIO_PRESETS
) -> float:
    """Turn user text into an aspect ratio.

    Accepts a preset label ("2.40:1"), a "W:H" ratio ("21:9") or a plain
    decimal ("1.85"). Preset labels win so that their exact stored value is
    used.

    Raises:
        ValueError: If the text is not a positive, finite ratio.
    """
    cleaned = text.strip()
    for preset in presets:
        if preset.label == cleaned:
            return preset.value

    match = _RATIO_PATTERN.match(cleaned)
    if match:
        numerator = float(match.group(1))
        denominator = float(match.group(2))
        if numerator <= 0 or denominator <= 0:
            raise ValueError(f"Invalid aspect ratio: {text!r}")
        return numerator / denominator

    try:
        value = float(cleaned)
    except ValueError:
        raise ValueError(f"Invalid aspect ratio: {text!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"Invalid aspect ratio: {text!r}")
    return value


def format_aspect_ratio(value: float) -> str:
    """Format a ratio with up to four decimals, trailing zeros dropped."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return text or "0"


__all__ = [
    "ASPECT_RATIO_PRESETS",
    "DEFAULT_CABINETS",
    "find_cabinet",
    "format_aspect_ratio",
    "parse_aspect_ratio",
]

"""Output formatters and exporters for sizing results."""

from __future__ import annotations

import json
from typing import Any

from videowall.application.dtos import CalcInput, CalcResult
from videowall.domain import (
    GridConfig,
    LengthUnit,
    ParameterId,
    format_aspect_ratio,
    from_base_unit,
    round_to,
)


def _length(value_mm: float, unit: LengthUnit | str) -> float:
    return round_to(from_base_unit(value_mm, unit), 2)


class ResultFormatter:
    """Formats a sizing result as a plain-text report."""

    def format(self, result: CalcResult, unit: LengthUnit | str = LengthUnit.MM) -> str:
        """Format lower/upper configurations, notices and errors."""
        unit = LengthUnit(unit)
        lines = [
            "VIDEO WALL CONFIGURATIONS",
            "=" * 60,
        ]

        if not result.is_valid:
            lines.append("")
            lines.append("Errors:")
            lines.extend(f"  - {error}" for error in result.errors)
        else:
            lines.append("")
            lines.extend(self._format_grid("LOWER (fits within target)", result.lower, unit))
            lines.append("")
            lines.extend(self._format_grid("UPPER (covers target)", result.upper, unit))

        if result.notices:
            lines.append("")
            lines.append("Notices:")
            lines.extend(f"  - {notice}" for notice in result.notices)

        return "\n".join(lines)

    def _format_grid(
        self, title: str, grid: GridConfig | None, unit: LengthUnit
    ) -> list[str]:
        lines = [title, "-" * 60]
        if grid is None:
            lines.append("  No configuration available.")
            return lines
        lines.append(f"  Grid:         {grid.cols} cols x {grid.rows} rows")
        lines.append(f"  Cabinets:     {grid.total_cabinets}")
        lines.append(f"  Width:        {_length(grid.width_mm, unit):.2f} {unit.value}")
        lines.append(f"  Height:       {_length(grid.height_mm, unit):.2f} {unit.value}")
        lines.append(f"  Diagonal:     {_length(grid.diag_mm, unit):.2f} {unit.value}")
        lines.append(f"  Aspect ratio: {grid.aspect_ratio:.3f}")
        return lines


class GridDiagramFormatter:
    """Formats ASCII diagrams of cabinet grids."""

    def __init__(self, cell_width: int = 3, compact_above: int = 20) -> None:
        """Initialize formatter.

        Args:
            cell_width: Characters inside each cabinet cell.
            compact_above: Column count beyond which cells shrink to one
                character so wide walls stay readable.
        """
        self._cell_width = cell_width
        self._compact_above = compact_above

    def format(self, grid: GridConfig | None) -> str:
        """Generate an ASCII diagram of the grid."""
        if grid is None:
            return "No configuration to display."

        cell = self._cell_width if grid.cols <= self._compact_above else 1
        border = "+" + ("-" * cell + "+") * grid.cols
        body = "|" + (" " * cell + "|") * grid.cols

        lines = [f"{grid.cols} cols x {grid.rows} rows ({grid.cabinet.id} cabinets)"]
        lines.append(border)
        for _ in range(grid.rows):
            lines.append(body)
            lines.append(border)
        lines.append(f"{grid.total_cabinets} cabinets total")
        return "\n".join(lines)


class InputSummaryFormatter:
    """Formats a one-line echo of the supplied parameters."""

    def format(self, calc_input: CalcInput) -> str:
        unit = LengthUnit(calc_input.unit)
        parts: list[str] = []
        for raw_id in calc_input.active_params:
            parameter = ParameterId(raw_id)
            if parameter is ParameterId.AR:
                if calc_input.ar_value is not None:
                    parts.append(f"aspect ratio {format_aspect_ratio(calc_input.ar_value)}")
                continue
            raw = calc_input.values.get(parameter.value, "")
            parts.append(f"{parameter.label} {str(raw).strip()} {unit.value}")
        cabinet = calc_input.cabinet.id if calc_input.cabinet else "none"
        return f"Input: {', '.join(parts)} | cabinet {cabinet}"


class JsonResultExporter:
    """Exports sizing results as JSON."""

    def export(self, result: CalcResult, unit: LengthUnit | str = LengthUnit.MM) -> str:
        """Export the result as a JSON string.

        Millimeter values are always present; ``width``, ``height`` and
        ``diagonal`` repeat them in the requested unit.
        """
        unit = LengthUnit(unit)
        data = {
            "unit": unit.value,
            "lower": self._format_grid(result.lower, unit),
            "upper": self._format_grid(result.upper, unit),
            "errors": list(result.errors),
            "notices": list(result.notices),
        }
        return json.dumps(data, indent=2)

    def _format_grid(self, grid: GridConfig | None, unit: LengthUnit) -> dict[str, Any] | None:
        if grid is None:
            return None
        data = grid.to_dict()
        data["width"] = _length(grid.width_mm, unit)
        data["height"] = _length(grid.height_mm, unit)
        data["diagonal"] = _length(grid.diag_mm, unit)
        return data


__all__ = [
    "GridDiagramFormatter",
    "InputSummaryFormatter",
    "JsonResultExporter",
    "ResultFormatter",
]

"""Infrastructure layer - output formatters and exporters."""

from .formatters import (
    GridDiagramFormatter,
    InputSummaryFormatter,
    JsonResultExporter,
    ResultFormatter,
)

__all__ = [
    "GridDiagramFormatter",
    "InputSummaryFormatter",
    "JsonResultExporter",
    "ResultFormatter",
]

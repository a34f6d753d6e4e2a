"""Video wall sizing from fixed-size cabinets.

Solves for the closest integer grid of display cabinets that brackets a
requested display size given any two of aspect ratio, height, width and
diagonal.
"""

from videowall.application import CalcInput, CalcResult, calculate

__all__ = [
    "CalcInput",
    "CalcResult",
    "calculate",
]

"""Tolerance-aware float comparisons.

Unit conversion and square roots leave small rounding residue on every
measurement, so all geometry comparisons in the solver go through these
predicates instead of raw ``<``/``>``.
"""

from __future__ import annotations

EPS: float = 1e-6


def is_at_or_below(value: float, reference: float) -> bool:
    """True when value <= reference, within tolerance."""
    return value <= reference + EPS


def is_strictly_above(value: float, reference: float) -> bool:
    """True when value exceeds reference by more than the tolerance."""
    return value > reference + EPS


def is_strictly_below(value: float, reference: float) -> bool:
    """True when value falls short of reference by more than the tolerance."""
    return value < reference - EPS


def is_close(value: float, reference: float) -> bool:
    """True when the two values are equal within tolerance."""
    return abs(value - reference) <= EPS


__all__ = [
    "EPS",
    "is_at_or_below",
    "is_close",
    "is_strictly_above",
    "is_strictly_below",
]

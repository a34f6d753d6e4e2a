"""Sweeps over realistic inputs checking the bracket invariants.

For every successful result:
- every grid is at least 1x1 and fits within the physical limits
- lower and upper are never the same arrangement
- upper is never smaller than lower
- lower exists unless the target is smaller than one cabinet
"""

from __future__ import annotations

import pytest

from videowall.application import CalcInput, CalcResult, ServiceFactory
from videowall.domain import (
    ASPECT_RATIO_PRESETS,
    DEFAULT_CABINETS,
    EPS,
    Cabinet,
    PhysicalLimits,
)

LIMITS = PhysicalLimits()
COMMAND = ServiceFactory(limits=LIMITS).create_calculate_command()


def _check(result: CalcResult, cabinet: Cabinet) -> None:
    assert result.errors == []
    for grid in (result.lower, result.upper):
        if grid is None:
            continue
        assert 1 <= grid.cols <= LIMITS.max_cols(cabinet)
        assert 1 <= grid.rows <= LIMITS.max_rows(cabinet)

    if result.lower is not None and result.upper is not None:
        assert not result.lower.same_arrangement(result.upper)
        assert result.upper.diag_mm >= result.lower.diag_mm - EPS

    if result.lower is None:
        assert any("smaller than a single cabinet" in n for n in result.notices)


@pytest.mark.slow
@pytest.mark.parametrize("cabinet", DEFAULT_CABINETS, ids=lambda c: c.id)
class TestSweep:
    """Invariant sweeps per cabinet."""

    def test_height_width(self, cabinet: Cabinet) -> None:
        for height in range(200, 3001, 150):
            for width in range(200, 7001, 350):
                result = COMMAND.execute(
                    CalcInput(
                        ["height", "width"],
                        {"height": str(height), "width": str(width)},
                        None,
                        cabinet,
                    )
                )
                _check(result, cabinet)

    def test_aspect_height(self, cabinet: Cabinet) -> None:
        for preset in ASPECT_RATIO_PRESETS:
            for height in range(100, 3001, 125):
                result = COMMAND.execute(
                    CalcInput(["ar", "height"], {"height": str(height)}, preset.value, cabinet)
                )
                _check(result, cabinet)

    def test_aspect_width(self, cabinet: Cabinet) -> None:
        for preset in ASPECT_RATIO_PRESETS:
            for width in range(100, 7001, 300):
                result = COMMAND.execute(
                    CalcInput(["ar", "width"], {"width": str(width)}, preset.value, cabinet)
                )
                _check(result, cabinet)

    def test_aspect_diagonal(self, cabinet: Cabinet) -> None:
        for preset in ASPECT_RATIO_PRESETS:
            for diagonal in range(300, 8001, 350):
                result = COMMAND.execute(
                    CalcInput(
                        ["ar", "diagonal"], {"diagonal": str(diagonal)}, preset.value, cabinet
                    )
                )
                _check(result, cabinet)

    def test_diagonal_brackets_target(self, cabinet: Cabinet) -> None:
        """With both sides pinned, lower <= target diagonal <= upper."""
        for height in range(400, 2501, 100):
            for width in range(700, 6001, 300):
                result = COMMAND.execute(
                    CalcInput(
                        ["height", "width"],
                        {"height": str(height), "width": str(width)},
                        None,
                        cabinet,
                    )
                )
                _check(result, cabinet)
                target_diag = (height**2 + width**2) ** 0.5
                assert result.lower.diag_mm <= target_diag + EPS
                if result.upper is not None:
                    assert result.upper.diag_mm >= target_diag - EPS

"""Integration tests for end-to-end sizing through ``calculate``.

These tests verify the full pipeline (parse, derive, clamp, solve) for:
- Reference scenarios for every strategy
- Unit handling and clamping notices
- Blocking errors leaving both brackets empty
"""

from __future__ import annotations

import pytest

from videowall import CalcInput, calculate
from videowall.application import set_factory
from videowall.domain import Cabinet


@pytest.fixture(autouse=True)
def default_factory():
    set_factory(None)
    yield
    set_factory(None)


def _arrangement(grid) -> tuple[int, int] | None:
    return None if grid is None else (grid.cols, grid.rows)


class TestReferenceScenarios:
    """Reference scenarios with known answers."""

    def test_aspect_height_capped_by_max_height(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(["ar", "height"], {"height": "100"}, 16 / 9, cabinet_16_9, "in")
        )
        assert result.errors == []
        assert _arrangement(result.lower) == (7, 7)
        assert _arrangement(result.upper) == (8, 7)

    def test_aspect_width(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(["ar", "width"], {"width": "3000"}, 16 / 9, cabinet_16_9, "mm")
        )
        assert result.lower.cols == 5
        assert result.upper.cols == 6

    def test_height_width_exact_fit(self, cabinet_1_1: Cabinet) -> None:
        result = calculate(
            CalcInput(["height", "width"], {"height": "1500", "width": "2000"}, None, cabinet_1_1)
        )
        assert _arrangement(result.lower) == (4, 3)
        assert result.upper is not None
        assert _arrangement(result.upper) != (4, 3)

    def test_diagonal_shorter_than_height(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(
                ["height", "diagonal"],
                {"height": "60", "diagonal": "50"},
                None,
                cabinet_16_9,
                "in",
            )
        )
        assert result.errors == ["Diagonal must be greater than height."]
        assert result.lower is None
        assert result.upper is None

    def test_height_clamped(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(["ar", "height"], {"height": "3000"}, 16 / 9, cabinet_16_9, "mm")
        )
        assert result.lower is not None
        assert any("clamped" in n and "2500" in n for n in result.notices)

    def test_smaller_than_one_cabinet(self, cabinet_1_1: Cabinet) -> None:
        result = calculate(
            CalcInput(["ar", "width"], {"width": "200"}, 16 / 9, cabinet_1_1, "mm")
        )
        assert result.errors == []
        assert result.lower is None
        assert _arrangement(result.upper) == (1, 1)
        assert any("smaller than a single cabinet" in n for n in result.notices)


class TestEdgeCases:
    """Boundary behaviour."""

    def test_exact_single_row(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(["ar", "height"], {"height": "337.5"}, 16 / 9, cabinet_16_9)
        )
        assert result.lower.rows == 1
        assert result.upper.rows == 2

    def test_maximum_envelope(self, cabinet_1_1: Cabinet) -> None:
        result = calculate(
            CalcInput(["height", "width"], {"height": "2500", "width": "6000"}, None, cabinet_1_1)
        )
        assert _arrangement(result.lower) == (12, 5)
        assert result.upper is None
        assert result.notices == []

    def test_full_width_stays_within_columns(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(["ar", "width"], {"width": "6000"}, 16 / 9, cabinet_16_9)
        )
        assert result.lower.cols <= 10
        assert result.upper is None or result.upper.cols <= 10

    def test_diagonal_equal_to_height(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(
                ["height", "diagonal"], {"height": "2000", "diagonal": "2000"}, None, cabinet_16_9
            )
        )
        assert result.errors == ["Diagonal must be greater than height."]

    def test_units_agree(self, cabinet_16_9: Cabinet) -> None:
        in_inches = calculate(
            CalcInput(["ar", "diagonal"], {"diagonal": "120"}, 16 / 9, cabinet_16_9, "in")
        )
        in_mm = calculate(
            CalcInput(["ar", "diagonal"], {"diagonal": "3048"}, 16 / 9, cabinet_16_9, "mm")
        )
        assert _arrangement(in_inches.lower) == _arrangement(in_mm.lower)
        assert _arrangement(in_inches.upper) == _arrangement(in_mm.upper)

    def test_deterministic(self, cabinet_1_1: Cabinet) -> None:
        calc_input = CalcInput(
            ["width", "diagonal"], {"width": "3000", "diagonal": "3500"}, None, cabinet_1_1
        )
        assert calculate(calc_input) == calculate(calc_input)


class TestExtremeValues:
    """Finite inputs large enough to overflow intermediate arithmetic."""

    def test_huge_height_and_diagonal(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(
                ["height", "diagonal"],
                {"height": "1e199", "diagonal": "1e200"},
                None,
                cabinet_16_9,
                "mm",
            )
        )
        assert result.errors == []
        assert sum("clamped" in n for n in result.notices) == 2
        assert _arrangement(result.lower) == (10, 7)
        assert result.upper is None

    def test_huge_aspect_ratio(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(["ar", "height"], {"height": "1000"}, 1e307, cabinet_16_9)
        )
        assert result.errors == []
        assert _arrangement(result.lower) == (10, 2)
        assert _arrangement(result.upper) == (10, 3)

    def test_tiny_aspect_ratio(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(["ar", "width"], {"width": "3000"}, 1e-320, cabinet_16_9)
        )
        assert result.errors == []
        assert _arrangement(result.lower) == (5, 7)
        assert _arrangement(result.upper) == (6, 7)

    def test_length_overflowing_unit_conversion_is_clamped(self, cabinet_16_9: Cabinet) -> None:
        result = calculate(
            CalcInput(
                ["height", "width"], {"height": "1e308", "width": "100"}, None, cabinet_16_9, "in"
            )
        )
        assert result.errors == []
        assert result.notices[0].startswith("Your height input")
        assert "clamped to 98.43 in" in result.notices[0]
        assert result.lower is not None

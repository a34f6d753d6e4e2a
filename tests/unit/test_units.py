"""Unit tests for length conversion and rounding."""

import pytest

from videowall.domain import EPS, LengthUnit, convert_unit, from_base_unit, round_to, to_base_unit
from videowall.domain.tolerance import (
    is_at_or_below,
    is_close,
    is_strictly_above,
    is_strictly_below,
)


class TestConversion:
    """Tests for unit conversion."""

    def test_inches_to_mm(self) -> None:
        assert to_base_unit(100, "in") == pytest.approx(2540.0)

    def test_feet_to_mm(self) -> None:
        assert to_base_unit(1, LengthUnit.FT) == pytest.approx(304.8)

    def test_mm_to_inches(self) -> None:
        assert from_base_unit(25.4, LengthUnit.IN) == pytest.approx(1.0)

    def test_meters_to_feet(self) -> None:
        assert convert_unit(2, "m", "ft") == pytest.approx(6.5617, abs=1e-4)

    def test_feet_to_meters(self) -> None:
        assert convert_unit(8.2, "ft", "m") == pytest.approx(2.49936)

    @pytest.mark.parametrize("unit", list(LengthUnit))
    def test_conversion_is_reversible(self, unit: LengthUnit) -> None:
        assert from_base_unit(to_base_unit(123.456, unit), unit) == pytest.approx(123.456)

    def test_unknown_unit_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_base_unit(1, "yd")


class TestRoundTo:
    """Tests for half-up rounding."""

    def test_rounds_half_up(self) -> None:
        # Python's round() gives 0.12 here
        assert round_to(0.125, 2) == 0.13

    def test_rounds_to_zero_decimals(self) -> None:
        assert round_to(2.5, 0) == 3.0

    def test_truncates_extra_digits(self) -> None:
        assert round_to(3.14159) == 3.14


class TestTolerance:
    """Tests for tolerance-aware comparisons."""

    def test_within_eps_counts_as_equal(self) -> None:
        assert is_close(100.0, 100.0 + EPS / 2)
        assert is_at_or_below(100.0 + EPS / 2, 100.0)
        assert not is_strictly_above(100.0 + EPS / 2, 100.0)
        assert not is_strictly_below(100.0 - EPS / 2, 100.0)

    def test_beyond_eps(self) -> None:
        assert is_strictly_above(100.0 + 10 * EPS, 100.0)
        assert is_strictly_below(100.0 - 10 * EPS, 100.0)
        assert not is_at_or_below(100.0 + 10 * EPS, 100.0)

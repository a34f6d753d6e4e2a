"""Unit tests for TargetDeriver."""

import math

import pytest

from videowall.domain import (
    DerivationError,
    GeometryError,
    InvalidValueError,
    ParameterId,
    ParameterPair,
    TargetDeriver,
)

AR = ParameterId.AR
HEIGHT = ParameterId.HEIGHT
WIDTH = ParameterId.WIDTH
DIAGONAL = ParameterId.DIAGONAL


@pytest.fixture
def deriver() -> TargetDeriver:
    return TargetDeriver()


class TestDerivationFormulas:
    """Tests for the six derivation formulas."""

    def test_ar_height(self, deriver: TargetDeriver) -> None:
        target = deriver.derive(ParameterPair.AR_HEIGHT, {AR: 2.0, HEIGHT: 1000.0})
        assert target.width_mm == pytest.approx(2000.0)
        assert target.height_mm == pytest.approx(1000.0)

    def test_ar_width(self, deriver: TargetDeriver) -> None:
        target = deriver.derive(ParameterPair.AR_WIDTH, {AR: 2.0, WIDTH: 2000.0})
        assert target.width_mm == pytest.approx(2000.0)
        assert target.height_mm == pytest.approx(1000.0)

    def test_ar_diagonal(self, deriver: TargetDeriver) -> None:
        target = deriver.derive(ParameterPair.AR_DIAGONAL, {AR: 4 / 3, DIAGONAL: 5000.0})
        assert target.width_mm == pytest.approx(4000.0)
        assert target.height_mm == pytest.approx(3000.0)

    def test_height_width(self, deriver: TargetDeriver) -> None:
        target = deriver.derive(ParameterPair.HEIGHT_WIDTH, {HEIGHT: 1500.0, WIDTH: 2000.0})
        assert (target.width_mm, target.height_mm) == (2000.0, 1500.0)

    def test_height_diagonal(self, deriver: TargetDeriver) -> None:
        target = deriver.derive(
            ParameterPair.HEIGHT_DIAGONAL, {HEIGHT: 3000.0, DIAGONAL: 5000.0}
        )
        assert target.width_mm == pytest.approx(4000.0)

    def test_width_diagonal(self, deriver: TargetDeriver) -> None:
        target = deriver.derive(
            ParameterPair.WIDTH_DIAGONAL, {WIDTH: 4000.0, DIAGONAL: 5000.0}
        )
        assert target.height_mm == pytest.approx(3000.0)

    def test_huge_height_diagonal_stays_finite(self, deriver: TargetDeriver) -> None:
        target = deriver.derive(
            ParameterPair.HEIGHT_DIAGONAL, {HEIGHT: 1e199, DIAGONAL: 1e200}
        )
        assert math.isfinite(target.width_mm)
        assert target.width_mm == pytest.approx(math.sqrt(99) * 1e199)

    def test_huge_width_diagonal_stays_finite(self, deriver: TargetDeriver) -> None:
        target = deriver.derive(
            ParameterPair.WIDTH_DIAGONAL, {WIDTH: 3e300, DIAGONAL: 5e300}
        )
        assert target.height_mm == pytest.approx(4e300)

    def test_huge_aspect_ratio_with_diagonal(self, deriver: TargetDeriver) -> None:
        target = deriver.derive(ParameterPair.AR_DIAGONAL, {AR: 1e307, DIAGONAL: 3000.0})
        assert target.height_mm > 0
        assert target.width_mm == pytest.approx(3000.0)

    def test_inactive_values_are_ignored(self, deriver: TargetDeriver) -> None:
        target = deriver.derive(
            ParameterPair.AR_HEIGHT, {AR: 2.0, HEIGHT: 1000.0, WIDTH: None}
        )
        assert target.width_mm == pytest.approx(2000.0)


class TestInvalidValues:
    """Tests for value validation."""

    @pytest.mark.parametrize("bad", [None, 0.0, -5.0, math.nan, -math.inf])
    def test_bad_value_rejected(self, deriver: TargetDeriver, bad: float | None) -> None:
        with pytest.raises(InvalidValueError) as exc_info:
            deriver.derive(ParameterPair.AR_HEIGHT, {AR: 16 / 9, HEIGHT: bad})
        assert exc_info.value.messages == ["Please enter a valid positive value for height."]

    def test_every_bad_value_reported(self, deriver: TargetDeriver) -> None:
        with pytest.raises(InvalidValueError) as exc_info:
            deriver.derive(ParameterPair.AR_HEIGHT, {AR: 0.0, HEIGHT: None})
        assert exc_info.value.messages == [
            "Please enter a valid positive value for aspect ratio.",
            "Please enter a valid positive value for height.",
        ]

    def test_infinite_aspect_ratio_rejected(self, deriver: TargetDeriver) -> None:
        with pytest.raises(InvalidValueError) as exc_info:
            deriver.derive(ParameterPair.AR_HEIGHT, {AR: math.inf, HEIGHT: 1000.0})
        assert exc_info.value.messages == ["Please enter a valid positive value for aspect ratio."]

    def test_infinite_length_passes_through(self, deriver: TargetDeriver) -> None:
        """A length that overflowed during unit conversion is left for the clamper."""
        target = deriver.derive(ParameterPair.HEIGHT_WIDTH, {HEIGHT: math.inf, WIDTH: 1000.0})
        assert target.height_mm == math.inf
        assert target.width_mm == 1000.0

    def test_values_checked_before_geometry(self, deriver: TargetDeriver) -> None:
        with pytest.raises(InvalidValueError):
            deriver.derive(ParameterPair.HEIGHT_DIAGONAL, {HEIGHT: 3000.0, DIAGONAL: -1.0})

    def test_errors_share_a_base_class(self) -> None:
        assert issubclass(InvalidValueError, DerivationError)
        assert issubclass(GeometryError, DerivationError)


class TestGeometryRules:
    """Tests for diagonal vs. side checks."""

    def test_diagonal_shorter_than_height(self, deriver: TargetDeriver) -> None:
        with pytest.raises(GeometryError) as exc_info:
            deriver.derive(ParameterPair.HEIGHT_DIAGONAL, {HEIGHT: 1524.0, DIAGONAL: 1270.0})
        assert exc_info.value.messages == ["Diagonal must be greater than height."]

    def test_diagonal_equal_to_height(self, deriver: TargetDeriver) -> None:
        with pytest.raises(GeometryError, match="height"):
            deriver.derive(ParameterPair.HEIGHT_DIAGONAL, {HEIGHT: 2000.0, DIAGONAL: 2000.0})

    def test_diagonal_equal_within_tolerance(self, deriver: TargetDeriver) -> None:
        with pytest.raises(GeometryError):
            deriver.derive(
                ParameterPair.HEIGHT_DIAGONAL, {HEIGHT: 2000.0, DIAGONAL: 2000.0 + 1e-7}
            )

    def test_diagonal_not_greater_than_width(self, deriver: TargetDeriver) -> None:
        with pytest.raises(GeometryError) as exc_info:
            deriver.derive(ParameterPair.WIDTH_DIAGONAL, {WIDTH: 3000.0, DIAGONAL: 2999.0})
        assert str(exc_info.value) == "Diagonal must be greater than width."

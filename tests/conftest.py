"""Pytest configuration and shared fixtures for video wall tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from videowall.domain import DEFAULT_CABINETS, Cabinet, PhysicalLimits, find_cabinet

if TYPE_CHECKING:
    from videowall.application.commands import CalculateConfigurationCommand


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def cabinet_16_9() -> Cabinet:
    """The built-in 600 x 337.5 mm cabinet."""
    return find_cabinet("16:9", DEFAULT_CABINETS)


@pytest.fixture
def cabinet_1_1() -> Cabinet:
    """The built-in 500 x 500 mm cabinet."""
    return find_cabinet("1:1", DEFAULT_CABINETS)


@pytest.fixture
def limits() -> PhysicalLimits:
    return PhysicalLimits()


@pytest.fixture
def calculate_command() -> "CalculateConfigurationCommand":
    """Create a CalculateConfigurationCommand using a fresh factory."""
    from videowall.application.factory import ServiceFactory

    return ServiceFactory().create_calculate_command()


"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from videowall.domain import PhysicalLimits

if TYPE_CHECKING:
    from videowall.application.commands import CalculateConfigurationCommand
    from videowall.domain import ConfigSolver, LimitClamper, TargetDeriver


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so tests and alternate catalogs can
    swap the physical limits without touching module state. Services are
    stateless and cached per factory.

    Example:
        ```python
        factory = ServiceFactory(limits=PhysicalLimits(max_width_mm=8000))
        result = factory.create_calculate_command().execute(calc_input)
        ```
    """

    limits: PhysicalLimits = field(default_factory=PhysicalLimits)
    window_margin: int = 1

    # Cached instances
    _deriver: "TargetDeriver | None" = field(default=None, init=False, repr=False)
    _clamper: "LimitClamper | None" = field(default=None, init=False, repr=False)
    _solver: "ConfigSolver | None" = field(default=None, init=False, repr=False)

    def get_target_deriver(self) -> "TargetDeriver":
        """Get or create the target deriver."""
        if self._deriver is None:
            from videowall.domain import TargetDeriver

            self._deriver = TargetDeriver()
        return self._deriver

    def get_limit_clamper(self) -> "LimitClamper":
        """Get or create the limit clamper."""
        if self._clamper is None:
            from videowall.domain import LimitClamper

            self._clamper = LimitClamper(self.limits)
        return self._clamper

    def get_config_solver(self) -> "ConfigSolver":
        """Get or create the configuration solver."""
        if self._solver is None:
            from videowall.domain import ConfigSolver
            from videowall.domain.services.solver import SolverStrategyFactory

            self._solver = ConfigSolver(
                self.limits,
                strategy_factory=SolverStrategyFactory(
                    self.limits, window_margin=self.window_margin
                ),
            )
        return self._solver

    def create_calculate_command(self) -> "CalculateConfigurationCommand":
        """Create a calculation command wired to this factory's services."""
        from videowall.application.commands import CalculateConfigurationCommand

        return CalculateConfigurationCommand(
            deriver=self.get_target_deriver(),
            clamper=self.get_limit_clamper(),
            solver=self.get_config_solver(),
        )


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


__all__ = [
    "ServiceFactory",
    "get_factory",
    "set_factory",
]

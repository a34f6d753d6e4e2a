"""Strategy protocol for the grid search.

The solver picks one of several search strategies depending on which
parameter pair the user fixed. All of them present this interface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from videowall.domain.services.solver.primitives import SolverOutcome
    from videowall.domain.value_objects import Cabinet, TargetSpec


@runtime_checkable
class SolverStrategy(Protocol):
    """Protocol for lower/upper bracket search strategies.

    Implementations:
    - AspectHeightStrategy: aspect ratio + height, rows driven
    - AspectWidthStrategy: aspect ratio + width, columns driven
    - DiagonalStrategy: width and height both pinned, diagonal comparison

    Example:
        ```python
        class DiagonalStrategy:
            def solve(
                self,
                target: TargetSpec,
                cabinet: Cabinet,
                aspect_ratio: float | None = None,
            ) -> SolverOutcome:
                ...
        ```
    """

    def solve(
        self,
        target: "TargetSpec",
        cabinet: "Cabinet",
        aspect_ratio: float | None = None,
    ) -> "SolverOutcome":
        """Search for the grids bracketing ``target``.

        Args:
            target: Clamped target dimensions in millimeters.
            cabinet: Cabinet the wall is built from.
            aspect_ratio: Fixed aspect ratio, for strategies that need one.

        Returns:
            SolverOutcome with lower, upper and notices.
        """
        ...


__all__ = [
    "SolverStrategy",
]

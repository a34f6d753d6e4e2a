"""Grid construction helpers."""

from __future__ import annotations

from ..value_objects import Cabinet, GridConfig


def build_grid(cols: int, rows: int, cabinet: Cabinet) -> GridConfig:
    """Create the grid configuration for ``cols`` x ``rows`` cabinets."""
    return GridConfig(cols=cols, rows=rows, cabinet=cabinet)


__all__ = [
    "build_grid",
]

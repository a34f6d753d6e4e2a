"""Command line interface for video wall sizing."""

from videowall.cli.main import app

__all__ = ["app"]

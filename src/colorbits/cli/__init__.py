"""Command-line interface for colorbits."""

from .main import cli

__all__ = ["cli"]

"""Command line interface for bibcite."""

from .main import cli

__all__ = ["cli"]

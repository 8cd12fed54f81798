"""Command line interface for island transit search."""

from .main import cli

__all__ = ["cli"]

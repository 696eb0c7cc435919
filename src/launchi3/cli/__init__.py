"""Command-line interface for launchi3."""

from .main import cli

__all__ = ["cli"]

"""Command-line interface for citemap."""

from citemap.cli.main import cli

__all__ = ["cli"]

"""Shared utilities."""

from citemap.utils.logging import configure_logging

__all__ = ["configure_logging"]

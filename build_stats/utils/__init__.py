"""Utility helpers."""

from .logging import configure_logging
from .validation import ensure_file

__all__ = ["configure_logging", "ensure_file"]

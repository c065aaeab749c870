"""Logging utilities."""
from __future__ import annotations

import logging
import os
from typing import Optional


def configure_logging(level: Optional[str] = None) -> None:
    """Configure build-stats logging once per process."""
    if getattr(configure_logging, "_configured", False):
        return
    resolved = level or os.getenv("BUILD_STATS_LOG_LEVEL") or "INFO"
    logging.basicConfig(
        level=getattr(logging, str(resolved).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    configure_logging._configured = True


__all__ = ["configure_logging"]

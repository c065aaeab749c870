"""Input validation helpers."""
from __future__ import annotations

from pathlib import Path


def ensure_file(path: Path) -> Path:
    """Return ``path`` if it points at an existing file."""
    if not path.is_file():
        raise FileNotFoundError(f"{path} not found")
    return path


__all__ = ["ensure_file"]

"""Human-readable rendering of group statistics."""
from __future__ import annotations

import math
from typing import IO, TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..registry import Entry

# Legacy divisor; existing dashboards compare against numbers produced with it.
KB_DIVISOR = 1204
MANY_FILES = 100


class Colors:
    GREY = "\033[90m"
    GREEN = "\033[32m"
    RED = "\033[31m"
    END = "\033[0m"


def _paint(text: str, code: str, enabled: bool) -> str:
    return f"{code}{text}{Colors.END}" if enabled else text


def resolve_color(setting: Any = "auto", stream: Optional[IO[str]] = None) -> bool:
    """Turn a ``color`` setting into a yes/no for ``stream``.

    ``True``/``False`` (or ``"always"``/``"never"``) are taken as given;
    ``None`` and ``"auto"`` color only when ``stream`` is a terminal.
    """
    if isinstance(setting, bool):
        return setting
    value = str(setting or "auto").strip().lower()
    if value in {"always", "true", "yes", "on"}:
        return True
    if value in {"never", "false", "no", "off"}:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty()) if callable(isatty) else False


def format_kb(total_size: int) -> int:
    """Size in (legacy) kilobytes, rounding halves up."""
    return int(math.floor(total_size / KB_DIVISOR + 0.5))


def format_count(total_count: int, color: bool = False) -> str:
    code = Colors.GREEN if total_count < MANY_FILES else Colors.RED
    return _paint(str(total_count), code, color)


def format_entry(entry: "Entry", pretty: bool = False, color: bool = False) -> str:
    if not pretty:
        if entry.total_count == 1:
            return f"{entry.name}: {entry.total_size} bytes"
        return f"{entry.name}: {entry.total_count} files with {entry.total_size} bytes"

    name = _paint(entry.name, Colors.GREY, color)
    if entry.total_count == 1:
        return f"Stats for '{name}': {format_kb(entry.total_size)}KB"
    count = format_count(entry.total_count, color)
    return f"Stats for '{name}': {count} files, {format_kb(entry.total_size)}KB"


__all__ = [
    "Colors",
    "KB_DIVISOR",
    "MANY_FILES",
    "format_count",
    "format_entry",
    "format_kb",
    "resolve_color",
]

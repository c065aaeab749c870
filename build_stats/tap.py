"""Pass-through pipeline stage that counts files per group."""
from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, NamedTuple, Optional

from .registry import Entry, StatsRegistry
from .reporting.formatting import format_entry, resolve_color

LOGGER = logging.getLogger("build_stats.tap")

_MISSING = object()


@dataclass(frozen=True)
class FileStat:
    size: int


@dataclass
class FileItem:
    """Minimal file record as produced by build pipelines."""

    path: Optional[str] = None
    contents: Optional[bytes] = None
    stat: Optional[FileStat] = None


class ItemInfo(NamedTuple):
    has_path: bool
    byte_count: Optional[int]


def _field(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name, _MISSING)
    return getattr(source, name, _MISSING)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def classify_item(item: Any) -> ItemInfo:
    """Describe what an incoming pipeline item exposes.

    ``has_path`` is set when the item carries a string ``path``. The byte
    count comes from in-memory ``contents`` when they are a bytes-like
    buffer, otherwise from a numeric ``stat.size``, otherwise it is unknown.
    """
    has_path = isinstance(_field(item, "path"), str)
    contents = _field(item, "contents")
    if isinstance(contents, memoryview):
        return ItemInfo(has_path, contents.nbytes)
    if isinstance(contents, (bytes, bytearray)):
        return ItemInfo(has_path, len(contents))
    stat = _field(item, "stat")
    if stat is not _MISSING and stat is not None:
        size = _field(stat, "size")
        if _is_number(size):
            return ItemInfo(has_path, int(round(size)))
    return ItemInfo(has_path, None)


class StatsTap:
    """Forward items unchanged while accounting them against one group."""

    def __init__(self, registry: StatsRegistry, group: str, log: bool = False, color: Any = "auto") -> None:
        self.entry: Entry = registry.get_or_create(group)
        self.log = log
        self.color = color
        self._ended = False

    def write(self, item: Any) -> Any:
        info = classify_item(item)
        if info.has_path:
            self.entry.add(info.byte_count or 0)
        return item

    def end(self) -> None:
        if self._ended:
            return
        self._ended = True
        if self.log:
            enabled = resolve_color(self.color, sys.stderr)
            LOGGER.info(format_entry(self.entry, pretty=True, color=enabled))

    def __call__(self, items: Iterable[Any]) -> Iterator[Any]:
        for item in items:
            yield self.write(item)
        self.end()


def create_stats_stream(
    registry: StatsRegistry, group: str, log: bool = False, color: Any = "auto"
) -> StatsTap:
    """Create a tap bound to ``group``, registering the group immediately."""
    return StatsTap(registry, group, log=log, color=color)


__all__ = [
    "FileItem",
    "FileStat",
    "ItemInfo",
    "StatsTap",
    "classify_item",
    "create_stats_stream",
]

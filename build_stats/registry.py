"""Per-group file count and size accounting."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterator, List


@dataclass
class Entry:
    """Accumulated totals for one group of files."""

    name: str
    total_count: int = 0
    total_size: int = 0

    def add(self, size: int) -> None:
        self.total_count += 1
        self.total_size += max(0, size)

    def __str__(self) -> str:
        from .reporting.formatting import format_entry

        return format_entry(self)


class StatsRegistry:
    """Group name to :class:`Entry` mapping for one build invocation.

    Entries keep their insertion order. The registry is not synchronised;
    drive all taps bound to it from a single thread.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Entry] = {}

    def get_or_create(self, group: str) -> Entry:
        entry = self._entries.get(group)
        if entry is None:
            entry = Entry(group)
            self._entries[group] = entry
        return entry

    def snapshot(self) -> List[Entry]:
        """Return detached copies of all entries in encounter order."""
        return [replace(entry) for entry in self._entries.values()]

    def __getitem__(self, group: str) -> Entry:
        return self._entries[group]

    def __contains__(self, group: object) -> bool:
        return group in self._entries

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["Entry", "StatsRegistry"]

"""Per-group file count and size statistics for build pipelines."""

__version__ = "0.1.0"

from .registry import Entry, StatsRegistry
from .reporting import submit_all_stats
from .tap import FileItem, FileStat, StatsTap, classify_item, create_stats_stream

__all__ = [
    "Entry",
    "FileItem",
    "FileStat",
    "StatsRegistry",
    "StatsTap",
    "classify_item",
    "create_stats_stream",
    "submit_all_stats",
    "__version__",
]

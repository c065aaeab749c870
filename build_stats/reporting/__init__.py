"""Console and telemetry reporting of build statistics."""

from .formatting import format_entry, format_kb
from .summary import build_payload, order_entries, print_summary, submit_all_stats, telemetry_key

__all__ = [
    "build_payload",
    "format_entry",
    "format_kb",
    "order_entries",
    "print_summary",
    "submit_all_stats",
    "telemetry_key",
]

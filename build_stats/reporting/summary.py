"""Print per-group build statistics and submit them as one telemetry event."""
from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from ..config import DEFAULT_CONFIG, load_config
from ..registry import Entry, StatsRegistry
from ..telemetry import TelemetryClient
from .formatting import format_entry, resolve_color

LOGGER = logging.getLogger("build_stats.reporting")


def order_entries(entries: Iterable[Entry]) -> List[Entry]:
    """Single-file groups first, then the rest, each in encounter order."""
    singles: List[Entry] = []
    others: List[Entry] = []
    for entry in entries:
        (singles if entry.total_count == 1 else others).append(entry)
    return singles + others


def print_summary(
    entries: Iterable[Entry],
    color: Any = "auto",
    echo: Callable[[str], Any] = print,
) -> None:
    """Write one pretty line per entry; ``"auto"`` colors only on a terminal stdout."""
    enabled = resolve_color(color, sys.stdout)
    for entry in entries:
        echo(format_entry(entry, pretty=True, color=enabled))


def telemetry_key(product_config: Optional[Mapping[str, Any]]) -> Optional[str]:
    """Return the configured telemetry key, or ``None`` when telemetry is off."""
    if not isinstance(product_config, Mapping):
        return None
    ai_config = product_config.get("aiConfig")
    if not isinstance(ai_config, Mapping):
        return None
    key = ai_config.get("asimovKey")
    if not isinstance(key, str) or not key:
        return None
    return key


def build_payload(entries: Iterable[Entry]) -> Dict[str, Dict[str, int]]:
    payload: Dict[str, Dict[str, int]] = {"size": {}, "count": {}}
    for entry in entries:
        payload["size"][entry.name] = entry.total_size
        payload["count"][entry.name] = entry.total_count
    return payload


async def submit_all_stats(
    registry: StatsRegistry,
    product_config: Optional[Mapping[str, Any]],
    *,
    settings: Optional[Dict[str, Any]] = None,
    client_factory: Callable[..., TelemetryClient] = TelemetryClient,
    echo: Callable[[str], Any] = print,
) -> None:
    """Print every group's totals and, if configured, report them.

    Returns after the telemetry event has been flushed, or right after
    printing when ``product_config`` carries no telemetry key. Errors raised
    by the client are not caught here.
    """
    cfg = dict(DEFAULT_CONFIG, **settings) if settings is not None else load_config()
    entries = order_entries(registry.snapshot())
    print_summary(entries, color=cfg.get("color", "auto"), echo=echo)

    key = telemetry_key(product_config)
    if key is None:
        LOGGER.debug("No telemetry key configured; skipping upload of %d group(s)", len(entries))
        return

    client = client_factory(
        key,
        endpoint_url=str(cfg["telemetry_endpoint"]),
        timeout=float(cfg.get("request_timeout", 10.0)),
    )
    event_name = str(cfg["event_name"])
    client.track_event(event_name, build_payload(entries))
    LOGGER.info("Submitting %s for %d group(s)", event_name, len(entries))
    await client.flush()


__all__ = [
    "build_payload",
    "order_entries",
    "print_summary",
    "submit_all_stats",
    "telemetry_key",
]

"""Drive grouped file streams through taps and report the totals."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional

from .config import load_config, load_product_config
from .registry import StatsRegistry
from .reporting.summary import submit_all_stats
from .tap import create_stats_stream
from .telemetry import TelemetryClient
from .utils import configure_logging

logger = logging.getLogger(__name__)


def collect_stats(
    groups: Mapping[str, Iterable[Any]],
    registry: Optional[StatsRegistry] = None,
    log: bool = False,
    color: Any = "auto",
) -> StatsRegistry:
    """Run each group's items through its own tap and return the registry."""
    registry = registry if registry is not None else StatsRegistry()
    for group, items in groups.items():
        tap = create_stats_stream(registry, group, log=log, color=color)
        for _ in tap(items):
            pass
    return registry


def run_build_stats(
    groups: Mapping[str, Iterable[Any]],
    product_config_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
    log: bool = False,
    client_factory: Callable[..., TelemetryClient] = TelemetryClient,
) -> StatsRegistry:
    """Account every group, print the summary, and submit telemetry if enabled."""
    cfg = load_config(str(config_path) if config_path else None)
    configure_logging(cfg.get("log_level"))
    product_config = load_product_config(product_config_path) if product_config_path else None
    logger.info("Collecting stats for %d group(s)", len(groups))
    registry = collect_stats(groups, log=log, color=cfg.get("color", "auto"))
    asyncio.run(submit_all_stats(registry, product_config, settings=cfg, client_factory=client_factory))
    return registry


__all__ = ["collect_stats", "run_build_stats"]

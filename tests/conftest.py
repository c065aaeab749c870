from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from build_stats.registry import StatsRegistry

FIXTURES = Path(__file__).parent / "fixtures"


class FakeTelemetryClient:
    """Records what the reporter asks of the telemetry client."""

    instances: List["FakeTelemetryClient"] = []

    def __init__(self, instrumentation_key: str, endpoint_url: str = "", timeout: float = 0.0) -> None:
        self.instrumentation_key = instrumentation_key
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self.events: List[tuple] = []
        self.flushed = 0
        FakeTelemetryClient.instances.append(self)

    def track_event(self, name: str, properties: Optional[Dict[str, object]] = None) -> None:
        self.events.append((name, properties))

    async def flush(self) -> None:
        self.flushed += 1


@pytest.fixture()
def registry() -> StatsRegistry:
    return StatsRegistry()


@pytest.fixture()
def fake_client():
    FakeTelemetryClient.instances = []
    yield FakeTelemetryClient
    FakeTelemetryClient.instances = []


@pytest.fixture()
def product_config() -> dict:
    return json.loads((FIXTURES / "product.json").read_text(encoding="utf-8"))


@pytest.fixture()
def settings() -> dict:
    return {
        "telemetry_endpoint": "https://collector.invalid/collect/v1",
        "event_name": "monacoworkbench/packagemetrics",
        "request_timeout": 5.0,
        "color": False,
    }

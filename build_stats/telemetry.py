"""Send-only Application Insights event client."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional

import aiohttp

from .config import DEFAULT_ENDPOINT

LOGGER = logging.getLogger("build_stats.telemetry")


class TelemetryClient:
    """Queue explicit events and post them to a collection endpoint.

    Only events passed to :meth:`track_event` are reported. The
    ``auto_collect_*`` switches exist so callers can see that nothing
    ambient (console output, exceptions, performance counters, requests)
    is gathered; they are always off.
    """

    def __init__(
        self,
        instrumentation_key: str,
        endpoint_url: str = DEFAULT_ENDPOINT,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float = 10.0,
    ) -> None:
        if not instrumentation_key:
            raise ValueError("instrumentation_key must be a non-empty string")
        self.instrumentation_key = instrumentation_key
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self.auto_collect_console = False
        self.auto_collect_exceptions = False
        self.auto_collect_performance = False
        self.auto_collect_requests = False
        self._session = session
        self._queue: List[Dict[str, object]] = []

    @property
    def pending(self) -> List[Dict[str, object]]:
        return list(self._queue)

    def track_event(
        self,
        name: str,
        properties: Optional[Mapping[str, object]] = None,
    ) -> None:
        base_data: Dict[str, object] = {"ver": 2, "name": name}
        if properties:
            base_data["properties"] = dict(properties)
        self._queue.append(
            {
                "name": "Microsoft.ApplicationInsights.Event",
                "time": datetime.now(timezone.utc).isoformat(),
                "iKey": self.instrumentation_key,
                "tags": {},
                "data": {"baseType": "EventData", "baseData": base_data},
            }
        )

    async def flush(self) -> None:
        """Post every queued envelope; the queue is kept if the post fails."""
        if not self._queue:
            return
        batch = list(self._queue)
        if self._session is not None:
            await self._post(self._session, batch)
        else:
            async with aiohttp.ClientSession() as session:
                await self._post(session, batch)
        del self._queue[: len(batch)]
        LOGGER.debug("Sent %d telemetry event(s) to %s", len(batch), self.endpoint_url)

    async def _post(self, session: aiohttp.ClientSession, batch: List[Dict[str, object]]) -> None:
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with session.post(self.endpoint_url, json=batch, timeout=timeout) as response:
            response.raise_for_status()


__all__ = ["TelemetryClient"]

"""Concurrent fan-out over the configured upstream clients."""

import asyncio
import logging
from typing import Any, List, Optional, Sequence

from ..providers.event_models import CanonicalEvent
from ..providers.models import FetchResult, FetchStatus


class FetchOrchestrator:
    """
    Runs every upstream client concurrently and waits for all of them.

    A failing client contributes nothing and never cancels its siblings.
    Results are concatenated in client order, not completion order.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    async def collect(self, clients: Sequence[Any]) -> List[CanonicalEvent]:
        """
        Fetch from every client and concatenate the events.

        Args:
            clients: Upstream clients in priority order

        Returns:
            Events from all clients, in client order
        """
        results = await self.collect_results(clients)
        events = []
        for result in results:
            events.extend(result.events)
        return events

    async def collect_results(self, clients: Sequence[Any]) -> List[FetchResult]:
        """
        Fetch from every client and keep each call's outcome.

        Args:
            clients: Upstream clients in priority order

        Returns:
            One FetchResult per client, in client order
        """
        if not clients:
            self.logger.warning("No upstream clients configured")
            return []

        # gather keeps argument order regardless of which task finishes first
        results = await asyncio.gather(*(self._settle(client) for client in clients))

        failed = [r.provenance for r in results if r.status == FetchStatus.FAILED]
        self.logger.info(
            f"Collected {sum(len(r.events) for r in results)} events from "
            f"{len(results) - len(failed)}/{len(results)} clients"
        )
        if failed:
            self.logger.warning(f"Failed clients: {', '.join(failed)}")

        return list(results)

    async def _settle(self, client: Any) -> FetchResult:
        """Run one client, turning any exception into a failed result."""
        provenance = getattr(client, "provenance", None) or repr(client)

        try:
            fetch_result = getattr(client, "fetch_result", None)
            if fetch_result is not None:
                return await fetch_result()

            events = list(await client.fetch())
            return FetchResult(
                provenance=provenance,
                status=FetchStatus.OK if events else FetchStatus.EMPTY,
                events=events,
                raw_count=len(events)
            )
        except Exception as e:
            self.logger.error(f"Client {provenance} raised: {e}")
            return FetchResult.failed(provenance, str(e))

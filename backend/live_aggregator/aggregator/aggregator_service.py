"""Live match aggregation across upstream providers."""

import time
import logging
from typing import Any, List, Optional, Sequence

import httpx

from .models import AggregationCycle
from .orchestrator import FetchOrchestrator
from .deduplicator import EventDeduplicator
from ..config import Settings
from ..providers.event_models import CanonicalEvent
from ..providers.factory import UpstreamClientFactory


class LiveMatchAggregator:
    """
    Queries all configured upstream clients and returns unique live matches.

    Holds no state between calls beyond its client list, so one instance
    can be shared by concurrent callers.
    """

    def __init__(
        self,
        clients: Sequence[Any],
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize aggregator.

        Args:
            clients: Upstream clients in priority order
            logger: Optional logger
        """
        self.clients = list(clients)
        self.logger = logger or logging.getLogger(__name__)
        self.orchestrator = FetchOrchestrator(self.logger)
        self.deduplicator = EventDeduplicator(self.logger)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> "LiveMatchAggregator":
        """
        Build an aggregator with the default API-Football clients.

        Args:
            settings: Settings, loaded from the environment when omitted
            transport: Optional httpx transport for every client
            logger: Optional logger

        Returns:
            Configured aggregator
        """
        settings = settings or Settings()
        clients = UpstreamClientFactory.create_default_clients(settings, transport)
        return cls(clients, logger)

    async def get_live_matches(self) -> List[CanonicalEvent]:
        """
        Get deduplicated live matches from every client.

        Never raises; an internal fault yields an empty list.

        Returns:
            Unique events in client priority order
        """
        cycle = await self.run_cycle()
        return cycle.events

    async def run_cycle(self) -> AggregationCycle:
        """
        Run one aggregation cycle and keep per-client diagnostics.

        Returns:
            AggregationCycle, with no events if aggregation failed
        """
        cycle = AggregationCycle()
        start_time = time.monotonic()

        try:
            cycle.fetch_results = await self.orchestrator.collect_results(self.clients)
            collected = []
            for result in cycle.fetch_results:
                collected.extend(result.events)
            cycle.events = self.deduplicator.dedupe(collected)
        except Exception:
            self.logger.exception("Aggregation cycle failed")
            cycle.events = []

        cycle.duration_ms = (time.monotonic() - start_time) * 1000
        self.logger.info(
            f"Aggregated {len(cycle.events)} live matches in {cycle.duration_ms:.0f}ms"
        )
        return cycle

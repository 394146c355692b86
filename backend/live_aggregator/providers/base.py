"""Abstract base class for upstream fixture clients."""

import time
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any

import httpx

from .event_models import CanonicalEvent
from .models import FetchResult, FetchStatus
from .normalizer import FixtureNormalizer


DEFAULT_TIMEOUT = 8.0
MAX_RECORDS_PER_CALL = 10


class BaseUpstreamClient(ABC):
    """
    Base class for clients that query one provider endpoint.

    Each call to fetch() issues exactly one request. Every failure is
    absorbed here and turned into an empty result, so callers never see
    an exception from a provider.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        api_host: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        max_records: int = MAX_RECORDS_PER_CALL,
        normalizer: Optional[FixtureNormalizer] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the client.

        Args:
            base_url: Provider base URL
            api_key: Provider API key
            api_host: Provider API host identifier
            timeout: Request timeout in seconds
            max_records: Maximum raw records normalized per call
            normalizer: Optional fixture normalizer
            transport: Optional httpx transport, used to fake the provider
            logger: Optional logger
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.api_host = api_host
        self.timeout = timeout
        self.max_records = max_records
        self.transport = transport
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self.normalizer = normalizer or FixtureNormalizer(self.logger)

    @property
    @abstractmethod
    def provenance(self) -> str:
        """Tag identifying this client on every record it produces."""
        pass

    @property
    @abstractmethod
    def path(self) -> str:
        """Endpoint path relative to the base URL."""
        pass

    @abstractmethod
    def build_params(self) -> Dict[str, Any]:
        """
        Build query parameters for the next request.

        Returns:
            Dictionary of query parameters
        """
        pass

    def build_headers(self) -> Dict[str, str]:
        """Build request headers carrying the provider credentials."""
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.api_host
        }

    def select_records(self, records: List[Any]) -> List[Any]:
        """
        Choose which raw records to normalize.

        Subclasses may filter; the cap is applied afterwards.
        """
        return records

    async def fetch(self) -> List[CanonicalEvent]:
        """
        Fetch and normalize fixtures from the provider.

        Returns:
            List of canonical events, empty on any failure
        """
        result = await self.fetch_result()
        return result.events

    async def fetch_result(self) -> FetchResult:
        """
        Fetch fixtures and report how the call went.

        Returns:
            FetchResult describing the call
        """
        start_time = time.monotonic()

        try:
            # bounds the whole call; httpx timeouts only bound each phase
            payload = await asyncio.wait_for(self._request(), self.timeout)
            records = self._extract_records(payload)
        except (httpx.TimeoutException, asyncio.TimeoutError):
            return self._failure("timed out", start_time)
        except httpx.HTTPStatusError as e:
            return self._failure(f"HTTP {e.response.status_code}", start_time)
        except httpx.HTTPError as e:
            return self._failure(f"transport error: {e.__class__.__name__}: {e}", start_time)
        except ValueError as e:
            return self._failure(f"bad response body: {e}", start_time)
        except Exception as e:
            self.logger.exception(f"Unexpected error fetching {self.provenance}")
            return self._failure(f"unexpected error: {e}", start_time)

        selected = self.select_records(records)[:self.max_records]
        events = []
        skipped = 0
        for record in selected:
            try:
                event = self.normalizer.normalize_match(record, self.provenance)
            except Exception as e:
                self.logger.warning(f"Skipping fixture from {self.provenance}: {e}")
                event = None
            if event is None:
                skipped += 1
                continue
            events.append(event)

        result = FetchResult(
            provenance=self.provenance,
            status=FetchStatus.OK if events else FetchStatus.EMPTY,
            events=events,
            raw_count=len(records),
            skipped=skipped,
            latency_ms=(time.monotonic() - start_time) * 1000
        )
        self.logger.info(
            f"{self.provenance}: {len(events)} events from {len(records)} fixtures "
            f"({result.latency_ms:.0f}ms)"
        )
        return result

    async def _request(self) -> Any:
        """Issue the single outbound request and decode the JSON body."""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(
                f"{self.base_url}{self.path}",
                params=self.build_params(),
                headers=self.build_headers()
            )
            response.raise_for_status()
            return response.json()

    def _extract_records(self, payload: Any) -> List[Any]:
        """
        Pull the fixture list out of a decoded response body.

        Raises:
            ValueError: If the body does not have the expected shape
        """
        if not isinstance(payload, dict):
            raise ValueError(f"expected object, got {type(payload).__name__}")

        # API-Football reports auth and quota problems in-band
        errors = payload.get("errors")
        if errors:
            raise ValueError(f"provider errors: {errors}")

        records = payload.get("response")
        if not isinstance(records, list):
            raise ValueError("missing 'response' list")
        return records

    def _failure(self, reason: str, start_time: float) -> FetchResult:
        latency_ms = (time.monotonic() - start_time) * 1000
        self.logger.warning(f"{self.provenance} failed: {reason}")
        return FetchResult.failed(self.provenance, reason, latency_ms)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provenance={self.provenance!r})"

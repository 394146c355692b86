"""Shared pytest fixtures for live aggregator tests."""

import asyncio
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from live_aggregator.config import Settings
from live_aggregator.providers.event_models import CanonicalEvent, MatchPhase, OddsTriple, Score


def build_fixture(
    fixture_id: Any = 1001,
    home: str = "Club Brugge",
    away: str = "Aston Villa",
    league: str = "UEFA Champions League",
    short: str = "1H",
    elapsed: Any = 30,
    home_goals: Any = 1,
    away_goals: Any = 0,
    **extra
) -> Dict[str, Any]:
    """Build an API-Football style fixture object."""
    fixture = {
        "fixture": {
            "id": fixture_id,
            "date": "2026-10-18T19:00:00+00:00",
            "status": {"short": short, "elapsed": elapsed}
        },
        "league": {"id": 2, "name": league},
        "teams": {
            "home": {"id": 569, "name": home},
            "away": {"id": 66, "name": away}
        },
        "goals": {"home": home_goals, "away": away_goals}
    }
    fixture.update(extra)
    return fixture


def api_response(fixtures: List[Any], errors: Any = None) -> Dict[str, Any]:
    """Wrap fixtures the way API-Football does."""
    return {
        "get": "fixtures",
        "parameters": {},
        "errors": errors if errors is not None else [],
        "results": len(fixtures),
        "response": fixtures
    }


class FakeClient:
    """In-memory upstream client returning fixed events."""

    def __init__(
        self,
        provenance: str,
        events: Optional[List[CanonicalEvent]] = None,
        delay: float = 0.0,
        error: Optional[Exception] = None
    ):
        self.provenance = provenance
        self.events = events or []
        self.delay = delay
        self.error = error
        self.calls = 0

    async def fetch(self) -> List[CanonicalEvent]:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return list(self.events)


@pytest.fixture
def fixture_factory() -> Callable[..., Dict[str, Any]]:
    """Factory for raw fixture objects."""
    return build_fixture


@pytest.fixture
def make_event() -> Callable[..., CanonicalEvent]:
    """Factory for canonical events."""
    def _make(
        home: str,
        away: str,
        source: str = "test_source",
        native_id: str = "1",
        home_goals: int = 0,
        away_goals: int = 0
    ) -> CanonicalEvent:
        return CanonicalEvent(
            id=f"{source}_{native_id}",
            home_team=home,
            away_team=away,
            league="Test League",
            sport="football",
            phase=MatchPhase.FIRST_HALF,
            status="30'",
            score=Score(home=home_goals, away=away_goals),
            odds=OddsTriple(home=2.0, away=3.0, draw=3.2),
            source=source
        )
    return _make


@pytest.fixture
def settings() -> Settings:
    """Settings that do not depend on the local environment."""
    return Settings(
        _env_file=None,
        rapid_api_key="test-key",
        api_football_base_url="https://api.test",
        api_football_host="api.test",
        request_timeout=1.0,
        league_ids="39,140",
        season=2026
    )


@pytest.fixture
def json_transport() -> Callable[..., httpx.MockTransport]:
    """Build a mock transport answering every request with the same JSON body."""
    def _build(body: Any, status_code: int = 200, seen: Optional[list] = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return httpx.Response(status_code, json=body)
        return httpx.MockTransport(handler)
    return _build

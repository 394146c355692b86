"""Upstream fixture providers and normalization."""

from .base import BaseUpstreamClient
from .api_football import LiveFixturesClient, TodayFixturesClient, LeagueFixturesClient
from .factory import UpstreamClientFactory
from .normalizer import FixtureNormalizer, normalize
from .status_mapper import map_phase
from .odds import synthesize_odds
from .event_models import CanonicalEvent, MatchPhase, OddsTriple, Score
from .models import RawFixture, FetchResult, FetchStatus

__all__ = [
    "BaseUpstreamClient",
    "LiveFixturesClient",
    "TodayFixturesClient",
    "LeagueFixturesClient",
    "UpstreamClientFactory",
    "FixtureNormalizer",
    "normalize",
    "map_phase",
    "synthesize_odds",
    "CanonicalEvent",
    "MatchPhase",
    "OddsTriple",
    "Score",
    "RawFixture",
    "FetchResult",
    "FetchStatus"
]

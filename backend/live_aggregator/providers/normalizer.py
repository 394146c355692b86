"""Fixture normalizer for converting provider payloads to canonical events."""

import random
import logging
import uuid
from typing import Dict, Any, Optional

from .event_models import CanonicalEvent, OddsTriple, Score
from .models import RawFixture
from .odds import synthesize_odds
from .status_mapper import map_phase


DEFAULT_HOME_TEAM = "Home Team"
DEFAULT_AWAY_TEAM = "Away Team"
DEFAULT_LEAGUE = "Football League"
DEFAULT_SPORT = "football"
DEFAULT_SPORT_ID = 1


def dig(data: Any, *path: str) -> Any:
    """Walk nested dictionaries, returning None at the first gap."""
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _text(value: Any, default: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return default
    text = str(value).strip()
    return text or default


def _goals(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        goals = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(goals, 0)


def _price(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        price = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return price if OddsTriple.is_valid_price(price) else None


class FixtureNormalizer:
    """Normalizes API-Football fixture payloads to canonical events."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize normalizer.

        Args:
            logger: Optional logger
            rng: Optional random source for placeholder odds
        """
        self.logger = logger or logging.getLogger(__name__)
        self.rng = rng

    def normalize_match(self, payload: Any, provenance: str) -> Optional[CanonicalEvent]:
        """
        Normalize one raw fixture from a provider response.

        Args:
            payload: Raw fixture object as decoded from JSON
            provenance: Tag of the client that fetched the fixture

        Returns:
            CanonicalEvent, or None if the payload is not a fixture object
        """
        raw = self.parse_fixture(payload, provenance)
        if raw is None:
            self.logger.warning(
                f"Skipping non-object fixture from {provenance}: {type(payload).__name__}"
            )
            return None
        return self.normalize(raw, provenance)

    def parse_fixture(self, payload: Any, provenance: str) -> Optional[RawFixture]:
        """
        Extract the fields we use from an API-Football fixture object.

        Args:
            payload: Raw fixture object
            provenance: Client provenance tag

        Returns:
            RawFixture, or None if payload is not a dictionary
        """
        if not isinstance(payload, dict):
            return None

        odds = payload.get("odds")
        return RawFixture(
            provenance=provenance,
            fixture_id=dig(payload, "fixture", "id"),
            status_short=dig(payload, "fixture", "status", "short"),
            elapsed=dig(payload, "fixture", "status", "elapsed"),
            home_team=dig(payload, "teams", "home", "name"),
            away_team=dig(payload, "teams", "away", "name"),
            league=dig(payload, "league", "name"),
            home_goals=dig(payload, "goals", "home"),
            away_goals=dig(payload, "goals", "away"),
            start_time=dig(payload, "fixture", "date"),
            odds=odds if isinstance(odds, dict) else None
        )

    def normalize(self, raw: RawFixture, provenance: Optional[str] = None) -> CanonicalEvent:
        """
        Map a raw fixture to the canonical event schema.

        Missing or malformed fields fall back to defaults.

        Args:
            raw: Raw fixture
            provenance: Client provenance tag, defaults to the raw fixture's tag

        Returns:
            CanonicalEvent
        """
        source = provenance or raw.provenance
        phase, status = map_phase(raw.status_short, raw.elapsed)

        native_id = _text(raw.fixture_id, "")
        if not native_id:
            native_id = uuid.uuid4().hex[:12]

        odds = self._native_odds(raw.odds)
        if odds is None:
            odds = synthesize_odds(self.rng)

        start_time = raw.start_time if isinstance(raw.start_time, str) else None

        return CanonicalEvent(
            id=f"{source}_{native_id}",
            home_team=_text(raw.home_team, DEFAULT_HOME_TEAM),
            away_team=_text(raw.away_team, DEFAULT_AWAY_TEAM),
            league=_text(raw.league, DEFAULT_LEAGUE),
            sport=DEFAULT_SPORT,
            sport_id=DEFAULT_SPORT_ID,
            phase=phase,
            status=status,
            score=Score(home=_goals(raw.home_goals), away=_goals(raw.away_goals)),
            odds=odds,
            source=source,
            start_time=start_time
        )

    def _native_odds(self, block: Optional[Dict[str, Any]]) -> Optional[OddsTriple]:
        """Use provider odds only when all three prices are usable."""
        if not block:
            return None

        home = _price(block.get("home"))
        away = _price(block.get("away"))
        draw = _price(block.get("draw"))
        if home is None or away is None or draw is None:
            return None

        return OddsTriple(home=home, away=away, draw=draw)


_default_normalizer = FixtureNormalizer()


def normalize(payload: Any, provenance: str) -> Optional[CanonicalEvent]:
    """Normalize a raw fixture with the shared default normalizer."""
    return _default_normalizer.normalize_match(payload, provenance)

"""Provider-agnostic live event models."""

import math
from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from enum import Enum


class MatchPhase(Enum):
    """Canonical match phase."""
    FIRST_HALF = "first_half"
    HALF_TIME = "half_time"
    SECOND_HALF = "second_half"
    EXTRA_TIME = "extra_time"
    BREAK_TIME = "break_time"
    PENALTIES = "penalties"
    SUSPENDED = "suspended"
    INTERRUPTED = "interrupted"
    IN_PLAY = "in_play"


@dataclass
class Score:
    """Current goals for each side."""
    home: int = 0
    away: int = 0


@dataclass
class OddsTriple:
    """Decimal odds for the three match outcomes."""
    home: float
    away: float
    draw: float
    synthesized: bool = False

    @staticmethod
    def is_valid_price(value: Any) -> bool:
        """Check a decimal price is a finite number above evens floor."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return math.isfinite(value) and value > 1.0

    def is_valid(self) -> bool:
        """Check every price in the triple."""
        return all(self.is_valid_price(v) for v in (self.home, self.away, self.draw))


@dataclass
class CanonicalEvent:
    """A live match normalized from any upstream provider."""
    id: str
    home_team: str
    away_team: str
    league: str
    sport: str
    phase: MatchPhase
    status: str  # Elapsed-time display, e.g. "55'" or "Half Time"
    odds: OddsTriple
    source: str  # Provenance tag of the client that produced the record
    score: Score = field(default_factory=Score)
    sport_id: int = 1
    start_time: Optional[str] = None

    @property
    def is_live(self) -> bool:
        """Whether the match is being played right now."""
        return self.phase not in (MatchPhase.SUSPENDED, MatchPhase.INTERRUPTED)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "homeTeam": self.home_team,
            "awayTeam": self.away_team,
            "league": self.league,
            "sport": self.sport,
            "sportId": self.sport_id,
            "phase": self.phase.value,
            "status": self.status,
            "isLive": self.is_live,
            "startTime": self.start_time,
            "score": {
                "home": self.score.home,
                "away": self.score.away
            },
            "odds": {
                "home": self.odds.home,
                "away": self.odds.away,
                "draw": self.odds.draw
            },
            "oddsSynthesized": self.odds.synthesized,
            "source": self.source
        }

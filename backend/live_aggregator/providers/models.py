"""Transport-level models shared by the upstream clients."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any
from datetime import datetime
from enum import Enum

from .event_models import CanonicalEvent


class FetchStatus(Enum):
    """Outcome of a single upstream call."""
    OK = "ok"
    EMPTY = "empty"  # Call succeeded but produced no usable records
    FAILED = "failed"


@dataclass
class RawFixture:
    """
    One provider fixture with every field explicitly optional.

    Built from the provider payload by the normalizer and discarded once
    the canonical event exists.
    """
    provenance: str
    fixture_id: Optional[str] = None
    status_short: Optional[str] = None
    elapsed: Optional[Any] = None
    home_team: Optional[str] = None
    away_team: Optional[str] = None
    league: Optional[str] = None
    home_goals: Optional[Any] = None
    away_goals: Optional[Any] = None
    start_time: Optional[str] = None
    odds: Optional[Dict[str, Any]] = None


@dataclass
class FetchResult:
    """Result of one upstream call, kept for diagnostics."""
    provenance: str
    status: FetchStatus
    events: List[CanonicalEvent] = field(default_factory=list)
    error: Optional[str] = None
    raw_count: int = 0
    skipped: int = 0
    latency_ms: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def failed(cls, provenance: str, error: str, latency_ms: float = 0.0) -> "FetchResult":
        """Create a failed result."""
        return cls(
            provenance=provenance,
            status=FetchStatus.FAILED,
            error=error,
            latency_ms=latency_ms
        )

    @property
    def succeeded(self) -> bool:
        """Whether the upstream call itself succeeded."""
        return self.status != FetchStatus.FAILED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "provenance": self.provenance,
            "status": self.status.value,
            "events": len(self.events),
            "raw_count": self.raw_count,
            "skipped": self.skipped,
            "error": self.error,
            "latency_ms": round(self.latency_ms, 1),
            "timestamp": self.timestamp.isoformat()
        }

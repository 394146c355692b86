"""Models for a single aggregation cycle."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Any

from ..providers.event_models import CanonicalEvent
from ..providers.models import FetchResult, FetchStatus


@dataclass
class AggregationCycle:
    """Everything produced by one call to the aggregator."""
    events: List[CanonicalEvent] = field(default_factory=list)
    fetch_results: List[FetchResult] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)
    duration_ms: float = 0.0

    @property
    def failed_sources(self) -> List[str]:
        """Provenance tags of clients whose call failed."""
        return [
            result.provenance for result in self.fetch_results
            if result.status == FetchStatus.FAILED
        ]

    @property
    def collected_count(self) -> int:
        """Events collected before deduplication."""
        return sum(len(result.events) for result in self.fetch_results)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "matches": [event.to_dict() for event in self.events],
            "total": len(self.events),
            "collected": self.collected_count,
            "sources": [result.to_dict() for result in self.fetch_results],
            "failed_sources": self.failed_sources,
            "started_at": self.started_at.isoformat(),
            "duration_ms": round(self.duration_ms, 1)
        }

"""Live football event aggregation across upstream data providers."""

from .aggregator import LiveMatchAggregator
from .config import Settings
from .providers import CanonicalEvent, MatchPhase

__version__ = "0.1.0"

__all__ = [
    "LiveMatchAggregator",
    "Settings",
    "CanonicalEvent",
    "MatchPhase"
]

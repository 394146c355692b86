"""Aggregation of live matches across upstream providers."""

from .models import AggregationCycle
from .orchestrator import FetchOrchestrator
from .deduplicator import EventDeduplicator, dedupe, dedup_key
from .aggregator_service import LiveMatchAggregator

__all__ = [
    "AggregationCycle",
    "FetchOrchestrator",
    "EventDeduplicator",
    "dedupe",
    "dedup_key",
    "LiveMatchAggregator"
]

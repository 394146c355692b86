"""Live match API endpoints."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from ..aggregator import LiveMatchAggregator

logger = logging.getLogger(__name__)


class LiveMatchListResponse(BaseModel):
    """Response for the live match list endpoint."""
    matches: List[Dict[str, Any]]
    total: int
    failed_sources: List[str] = []
    timestamp: datetime


router = APIRouter(prefix="/api", tags=["live"])


def get_aggregator(request: Request) -> LiveMatchAggregator:
    """Get the aggregator created at startup."""
    return request.app.state.aggregator


@router.get("/live-matches", response_model=LiveMatchListResponse)
async def get_live_matches(
    league: Optional[str] = None,
    aggregator: LiveMatchAggregator = Depends(get_aggregator)
) -> LiveMatchListResponse:
    """Get deduplicated live matches from every configured provider."""
    cycle = await aggregator.run_cycle()

    events = cycle.events
    if league:
        events = [event for event in events if event.league.lower() == league.lower()]

    return LiveMatchListResponse(
        matches=[event.to_dict() for event in events],
        total=len(events),
        failed_sources=cycle.failed_sources,
        timestamp=datetime.now()
    )

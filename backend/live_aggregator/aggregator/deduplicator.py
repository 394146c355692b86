"""Collapsing of events reported by more than one upstream client."""

import logging
from typing import Iterable, List, Optional, Tuple

from ..providers.event_models import CanonicalEvent


def dedup_key(home_team: str, away_team: str) -> Tuple[str, str]:
    """
    Build the team-pairing key for a match.

    Args:
        home_team: Home team name
        away_team: Away team name

    Returns:
        Case-normalized (home, away) pair
    """
    return (home_team.strip().lower(), away_team.strip().lower())


class EventDeduplicator:
    """
    Keeps the first event seen for each team pairing.

    Input order is the client priority order, so the first writer wins.
    Later duplicates are dropped whole; no fields are merged.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def dedupe(self, events: Iterable[CanonicalEvent]) -> List[CanonicalEvent]:
        """
        Remove duplicate reports of the same match.

        Args:
            events: Events in priority order

        Returns:
            Events with unique team pairings, in input order
        """
        seen = set()
        unique = []
        dropped = 0

        for event in events:
            key = dedup_key(event.home_team, event.away_team)
            if key in seen:
                dropped += 1
                self.logger.debug(f"Dropping {event.id}: already have {key}")
                continue
            seen.add(key)
            unique.append(event)

        if dropped:
            self.logger.info(f"Dropped {dropped} duplicate events, {len(unique)} remain")

        return unique


def dedupe(events: Iterable[CanonicalEvent]) -> List[CanonicalEvent]:
    """Remove duplicates with a default deduplicator."""
    return EventDeduplicator().dedupe(events)

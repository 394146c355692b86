"""API-Football fixture clients."""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from .base import BaseUpstreamClient
from .normalizer import dig
from .status_mapper import IN_PLAY_CODES


API_FOOTBALL_BASE_URL = "https://v3.football.api-sports.io"
API_FOOTBALL_HOST = "v3.football.api-sports.io"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ApiFootballClient(BaseUpstreamClient):
    """Common settings for every API-Football fixtures endpoint."""

    def __init__(
        self,
        base_url: str = API_FOOTBALL_BASE_URL,
        api_host: str = API_FOOTBALL_HOST,
        clock: Optional[Callable[[], datetime]] = None,
        **kwargs
    ):
        super().__init__(base_url=base_url, api_host=api_host, **kwargs)
        self.clock = clock or _utc_now

    @property
    def path(self) -> str:
        return "/fixtures"


class LiveFixturesClient(ApiFootballClient):
    """All fixtures currently in play."""

    @property
    def provenance(self) -> str:
        return "apifootball_live_fixtures"

    def build_params(self) -> Dict[str, Any]:
        return {"live": "all"}


class TodayFixturesClient(ApiFootballClient):
    """Today's fixtures, restricted to in-play status codes."""

    def __init__(self, status_codes: Sequence[str] = IN_PLAY_CODES, **kwargs):
        super().__init__(**kwargs)
        self.status_codes = tuple(status_codes)

    @property
    def provenance(self) -> str:
        return "apifootball_today_live"

    def build_params(self) -> Dict[str, Any]:
        return {
            "date": self.clock().strftime("%Y-%m-%d"),
            "status": "-".join(self.status_codes)
        }

    def select_records(self, records: List[Any]) -> List[Any]:
        # The status filter is not always honoured upstream
        return [
            record for record in records
            if dig(record, "fixture", "status", "short") in self.status_codes
        ]


class LeagueFixturesClient(ApiFootballClient):
    """Live fixtures for a single league and season."""

    def __init__(self, league_id: str, season: Optional[int] = None, **kwargs):
        """
        Args:
            league_id: API-Football league identifier, e.g. "39"
            season: Season year, the current year when omitted
        """
        super().__init__(**kwargs)
        self.league_id = str(league_id)
        self.season = season

    @property
    def provenance(self) -> str:
        return f"apifootball_league_{self.league_id}"

    def build_params(self) -> Dict[str, Any]:
        return {
            "league": self.league_id,
            "season": self.season or self.clock().year,
            "live": "all"
        }

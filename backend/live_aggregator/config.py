"""Application configuration."""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Aggregator settings, read from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server configuration
    app_name: str = "Live Events Aggregator"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    # API-Football credentials
    rapid_api_key: str = ""  # RAPID_API_KEY
    api_football_base_url: str = "https://v3.football.api-sports.io"
    api_football_host: str = "v3.football.api-sports.io"

    # Upstream call limits
    request_timeout: float = 8.0
    max_records_per_client: int = 10

    # Client selection, in priority order
    enable_live_fixtures: bool = True
    enable_today_fixtures: bool = True
    enable_league_fixtures: bool = True
    league_ids: str = "39,140,78,135,61"  # Comma-separated
    season: Optional[int] = None

    @property
    def league_id_list(self) -> List[str]:
        """Configured league ids in priority order."""
        return [league.strip() for league in self.league_ids.split(",") if league.strip()]

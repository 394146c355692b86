"""Factory for creating upstream client instances."""

import logging
from typing import Dict, List, Optional, Type

import httpx

from ..config import Settings
from .base import BaseUpstreamClient
from .api_football import LiveFixturesClient, TodayFixturesClient, LeagueFixturesClient


class UpstreamClientFactory:
    """Factory class for creating upstream clients from settings."""

    # Registry of available client variants
    _clients: Dict[str, Type[BaseUpstreamClient]] = {
        "live_fixtures": LiveFixturesClient,
        "today_fixtures": TodayFixturesClient,
        "league_fixtures": LeagueFixturesClient,
    }

    @classmethod
    def register_client(cls, name: str, client_class: Type[BaseUpstreamClient]) -> None:
        """
        Register a new client variant.

        Args:
            name: Name identifier for the variant
            client_class: Class that extends BaseUpstreamClient
        """
        if not issubclass(client_class, BaseUpstreamClient):
            raise TypeError(f"{client_class} must be a subclass of BaseUpstreamClient")

        cls._clients[name.lower()] = client_class
        logging.info(f"Registered upstream client: {name}")

    @classmethod
    def create_client(
        cls,
        variant: str,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
        **kwargs
    ) -> BaseUpstreamClient:
        """
        Create a client instance by variant name.

        Args:
            variant: Registered variant name
            settings: Settings carrying credentials and limits
            transport: Optional httpx transport
            logger: Optional logger instance
            **kwargs: Variant parameters, e.g. league_id

        Returns:
            Instance of the requested client

        Raises:
            ValueError: If the variant is not recognized
        """
        variant = variant.lower()

        if variant not in cls._clients:
            available = ", ".join(cls.list_clients())
            raise ValueError(
                f"Unknown upstream client '{variant}'. "
                f"Available clients: {available}"
            )

        client_class = cls._clients[variant]

        if logger is None:
            logger = logging.getLogger(f"providers.{variant}")

        return client_class(
            base_url=settings.api_football_base_url,
            api_key=settings.rapid_api_key,
            api_host=settings.api_football_host,
            timeout=settings.request_timeout,
            max_records=settings.max_records_per_client,
            transport=transport,
            logger=logger,
            **kwargs
        )

    @classmethod
    def list_clients(cls) -> list:
        """
        Get list of available client variants.

        Returns:
            List of registered variant names
        """
        return list(cls._clients.keys())

    @classmethod
    def create_default_clients(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> List[BaseUpstreamClient]:
        """
        Create the configured clients in priority order.

        Live fixtures first, then today's in-play fixtures, then one
        client per league in the configured league order.

        Args:
            settings: Application settings
            transport: Optional httpx transport shared by every client

        Returns:
            Ordered list of clients
        """
        if not settings.rapid_api_key:
            logging.warning("RAPID_API_KEY is not set; upstream calls will be rejected")

        clients = []
        if settings.enable_live_fixtures:
            clients.append(cls.create_client("live_fixtures", settings, transport))
        if settings.enable_today_fixtures:
            clients.append(cls.create_client("today_fixtures", settings, transport))
        if settings.enable_league_fixtures:
            for league_id in settings.league_id_list:
                clients.append(cls.create_client(
                    "league_fixtures",
                    settings,
                    transport,
                    league_id=league_id,
                    season=settings.season
                ))

        return clients

"""Tests for settings-driven client construction."""

import pytest

from live_aggregator.config import Settings
from live_aggregator.providers.api_football import (
    LiveFixturesClient,
    TodayFixturesClient,
    LeagueFixturesClient
)
from live_aggregator.providers.factory import UpstreamClientFactory


def test_default_clients_in_priority_order(settings):
    clients = UpstreamClientFactory.create_default_clients(settings)

    assert [type(c) for c in clients] == [
        LiveFixturesClient, TodayFixturesClient, LeagueFixturesClient, LeagueFixturesClient
    ]
    assert [c.provenance for c in clients] == [
        "apifootball_live_fixtures",
        "apifootball_today_live",
        "apifootball_league_39",
        "apifootball_league_140",
    ]


def test_clients_carry_settings(settings):
    client = UpstreamClientFactory.create_client("league_fixtures", settings, league_id="61")

    assert client.base_url == "https://api.test"
    assert client.api_key == "test-key"
    assert client.api_host == "api.test"
    assert client.timeout == 1.0
    assert client.max_records == 10
    assert client.season == 2026


def test_disabled_variants_are_left_out(settings):
    settings.enable_today_fixtures = False
    settings.enable_league_fixtures = False

    clients = UpstreamClientFactory.create_default_clients(settings)

    assert [c.provenance for c in clients] == ["apifootball_live_fixtures"]


def test_unknown_variant():
    with pytest.raises(ValueError, match="Unknown upstream client") as excinfo:
        UpstreamClientFactory.create_client("bookmaker", Settings(_env_file=None))

    assert "live_fixtures, today_fixtures, league_fixtures" in str(excinfo.value)


def test_list_clients():
    assert UpstreamClientFactory.list_clients() == [
        "live_fixtures", "today_fixtures", "league_fixtures"
    ]


def test_register_rejects_non_clients():
    with pytest.raises(TypeError):
        UpstreamClientFactory.register_client("bogus", dict)


def test_league_id_list_parsing():
    settings = Settings(_env_file=None, league_ids=" 39, ,140,78 ")

    assert settings.league_id_list == ["39", "140", "78"]


def test_default_settings():
    settings = Settings(_env_file=None)

    assert settings.request_timeout == 8.0
    assert settings.max_records_per_client == 10
    assert settings.league_id_list == ["39", "140", "78", "135", "61"]


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("RAPID_API_KEY", "from-env")

    assert Settings(_env_file=None).rapid_api_key == "from-env"

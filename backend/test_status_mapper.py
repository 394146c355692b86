"""Tests for match-phase mapping."""

import pytest

from live_aggregator.providers.event_models import MatchPhase
from live_aggregator.providers.status_mapper import map_phase, parse_elapsed


class TestMapPhase:
    """Provider status code to canonical phase."""

    def test_first_half_shows_running_minutes(self):
        assert map_phase("1H", 30) == (MatchPhase.FIRST_HALF, "30'")

    def test_second_half_is_offset_by_first_half(self):
        assert map_phase("2H", 10) == (MatchPhase.SECOND_HALF, "55'")

    @pytest.mark.parametrize("elapsed", [None, 0, 45, 90])
    def test_half_time_ignores_elapsed(self, elapsed):
        assert map_phase("HT", elapsed) == (MatchPhase.HALF_TIME, "Half Time")

    @pytest.mark.parametrize("code, phase, display", [
        ("ET", MatchPhase.EXTRA_TIME, "Extra Time"),
        ("BT", MatchPhase.BREAK_TIME, "Break Time"),
        ("P", MatchPhase.PENALTIES, "Penalty"),
        ("SUSP", MatchPhase.SUSPENDED, "Suspended"),
        ("INT", MatchPhase.INTERRUPTED, "Interrupted"),
        ("LIVE", MatchPhase.IN_PLAY, "Live"),
    ])
    def test_fixed_display_codes(self, code, phase, display):
        assert map_phase(code, 77) == (phase, display)

    def test_missing_elapsed_uses_nominal_half(self):
        assert map_phase("1H", None) == (MatchPhase.FIRST_HALF, "45'")
        assert map_phase("2H", None) == (MatchPhase.SECOND_HALF, "90'")

    def test_codes_are_case_and_whitespace_insensitive(self):
        assert map_phase(" ht ", None) == (MatchPhase.HALF_TIME, "Half Time")
        assert map_phase("2h", "20") == (MatchPhase.SECOND_HALF, "65'")

    def test_unknown_code_falls_back_to_elapsed(self):
        assert map_phase("XYZ", 12) == (MatchPhase.IN_PLAY, "12'")

    @pytest.mark.parametrize("code, elapsed", [
        (None, None),
        ("", "abc"),
        (42, -5),
        ({"short": "1H"}, []),
        ("FT", float("nan")),
    ])
    def test_total_over_garbage_input(self, code, elapsed):
        phase, display = map_phase(code, elapsed)
        assert phase == MatchPhase.IN_PLAY
        assert display == "0'"


class TestParseElapsed:
    """Elapsed-minute coercion."""

    @pytest.mark.parametrize("value, expected", [
        (30, 30),
        ("30", 30),
        (30.7, 30),
        (None, None),
        (True, None),
        (-1, None),
        ("later", None),
        (float("inf"), None),
    ])
    def test_parse_elapsed(self, value, expected):
        assert parse_elapsed(value) == expected

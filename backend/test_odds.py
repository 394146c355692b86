"""Tests for placeholder odds."""

import random

from live_aggregator.providers.odds import synthesize_odds, HOME_AWAY_RANGE, DRAW_RANGE


class StubRandom(random.Random):
    """Random source returning a fixed value."""

    def __init__(self, value: float):
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


def test_synthesized_odds_stay_in_range():
    rng = random.Random(1234)
    for _ in range(2000):
        odds = synthesize_odds(rng)
        assert HOME_AWAY_RANGE[0] <= odds.home < HOME_AWAY_RANGE[1]
        assert HOME_AWAY_RANGE[0] <= odds.away < HOME_AWAY_RANGE[1]
        assert DRAW_RANGE[0] <= odds.draw < DRAW_RANGE[1]
        assert odds.is_valid()
        assert odds.synthesized


def test_range_bounds():
    low = synthesize_odds(StubRandom(0.0))
    assert (low.home, low.away, low.draw) == (1.40, 1.40, 2.80)

    high = synthesize_odds(StubRandom(0.999999))
    assert high.home < 4.40
    assert high.away < 4.40
    assert high.draw < 4.50


def test_default_source_is_not_fixed():
    triples = {
        (odds.home, odds.away, odds.draw)
        for odds in (synthesize_odds() for _ in range(20))
    }
    assert len(triples) > 1

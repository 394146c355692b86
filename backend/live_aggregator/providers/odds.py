"""Placeholder odds for fixtures that arrive without market data."""

import random
from typing import Callable, Optional

from .event_models import OddsTriple


HOME_AWAY_RANGE = (1.40, 4.40)
DRAW_RANGE = (2.80, 4.50)


def _draw(uniform: Callable[[], float], low: float, high: float) -> float:
    # uniform() is in [0, 1) so the result stays below high
    return low + (high - low) * uniform()


def synthesize_odds(rng: Optional[random.Random] = None) -> OddsTriple:
    """
    Produce a placeholder home/away/draw odds triple.

    The values are drawn independently and do not depend on match state.
    They are not suitable for settling real bets.

    Args:
        rng: Optional random source, the module generator by default

    Returns:
        OddsTriple flagged as synthesized
    """
    uniform = rng.random if rng is not None else random.random
    return OddsTriple(
        home=_draw(uniform, *HOME_AWAY_RANGE),
        away=_draw(uniform, *HOME_AWAY_RANGE),
        draw=_draw(uniform, *DRAW_RANGE),
        synthesized=True
    )

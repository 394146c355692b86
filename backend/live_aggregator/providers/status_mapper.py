"""Mapping of provider match-phase codes to canonical phases."""

from typing import Any, Optional, Tuple

from .event_models import MatchPhase


# Nominal length of the first half, used to offset second-half minutes
HALF_DURATION = 45

# Codes with a fixed display string
_FIXED_PHASES = {
    "HT": (MatchPhase.HALF_TIME, "Half Time"),
    "ET": (MatchPhase.EXTRA_TIME, "Extra Time"),
    "BT": (MatchPhase.BREAK_TIME, "Break Time"),
    "P": (MatchPhase.PENALTIES, "Penalty"),
    "SUSP": (MatchPhase.SUSPENDED, "Suspended"),
    "INT": (MatchPhase.INTERRUPTED, "Interrupted"),
    "LIVE": (MatchPhase.IN_PLAY, "Live"),
}

# Status codes that API-Football uses for matches in play
IN_PLAY_CODES = ("1H", "2H", "HT", "ET", "BT", "P", "SUSP", "INT")


def parse_elapsed(value: Any) -> Optional[int]:
    """
    Coerce a provider elapsed-minutes value to an int.

    Returns None for missing, negative or unparseable values.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        minutes = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None
    return minutes if minutes >= 0 else None


def map_phase(code: Any, elapsed: Any = None) -> Tuple[MatchPhase, str]:
    """
    Map a provider status short-code and elapsed minutes to a phase.

    Args:
        code: Provider status short-code (e.g. "1H", "HT")
        elapsed: Elapsed minutes as reported by the provider

    Returns:
        Tuple of (canonical phase, display string)
    """
    short = str(code).strip().upper() if code is not None else ""
    minutes = parse_elapsed(elapsed)

    if short == "1H":
        running = minutes if minutes is not None else HALF_DURATION
        return MatchPhase.FIRST_HALF, f"{running}'"

    if short == "2H":
        running = minutes if minutes is not None else HALF_DURATION
        return MatchPhase.SECOND_HALF, f"{running + HALF_DURATION}'"

    if short in _FIXED_PHASES:
        return _FIXED_PHASES[short]

    return MatchPhase.IN_PLAY, f"{minutes or 0}'"

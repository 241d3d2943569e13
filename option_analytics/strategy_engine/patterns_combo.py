"""Call + put combinations: Straddle, Strangle."""

from typing import List, Optional

from .types import Leg, StrategyKind, distinct_strikes


def match_combo(legs: List[Leg]) -> Optional[StrategyKind]:
    """Match 2-leg mixed-type strategies.

    Only matches one call and one put. Same-type pairs are verticals
    (handled elsewhere). Actions are not inspected: a bought and a sold
    straddle share the name, and the direction field tells them apart.
    """
    if len(legs) != 2:
        return None

    a, b = legs
    if a.option_type == b.option_type:
        return None

    strikes = distinct_strikes(legs)
    if strikes is None:
        return None

    if len(strikes) == 1:
        return StrategyKind.STRADDLE
    return StrategyKind.STRANGLE

"""Vertical spread patterns (2-leg, same option type)."""

from typing import List, Optional

from .types import Action, Leg, StrategyKind, distinct_strikes

_BUY, _SELL = Action.BUY, Action.SELL

# (option is call, lower-strike action, higher-strike action) -> kind
_VERTICALS = {
    (True, _BUY, _SELL): StrategyKind.BULL_CALL_SPREAD,   # debit: long lower call, short higher call
    (True, _SELL, _BUY): StrategyKind.BEAR_CALL_SPREAD,   # credit: short lower call, long higher call
    (False, _BUY, _SELL): StrategyKind.BULL_PUT_SPREAD,   # credit: long lower put, short higher put
    (False, _SELL, _BUY): StrategyKind.BEAR_PUT_SPREAD,   # debit: short lower put, long higher put
}


def match_vertical(legs: List[Leg]) -> Optional[StrategyKind]:
    """Identify a vertical spread from exactly 2 option legs.

    Preconditions (checked here):
    - Exactly 2 legs
    - Same option_type
    - Two distinct, positive strikes
    """
    if len(legs) != 2:
        return None

    a, b = legs
    if a.option_type != b.option_type:
        return None
    strikes = distinct_strikes(legs)
    if strikes is None or len(strikes) != 2:
        return None

    # Sort by strike: low, high
    low, high = sorted(legs, key=lambda l: l.strike)

    return _VERTICALS.get((low.is_call, low.action, high.action))

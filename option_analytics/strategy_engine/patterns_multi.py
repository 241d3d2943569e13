"""Four-leg patterns: Iron Condor, Butterflies, single-type Condors."""

from typing import List, Optional

from .types import Leg, StrategyKind as K, distinct_strikes


def match_multi(legs: List[Leg]) -> Optional[K]:
    """Identify 4-leg option strategies.

    Mixed call/put with 4 strikes is the iron condor family. Single-type legs
    form a butterfly on 3 strikes or a condor on 4.
    """
    if len(legs) != 4:
        return None

    strikes = distinct_strikes(legs)
    if strikes is None:
        return None

    types = {leg.option_type for leg in legs}
    if len(types) == 2:
        if len(strikes) == 4:
            return _match_iron_condor(legs)
        return None

    is_call = legs[0].is_call
    if len(strikes) == 3:
        return _match_butterfly(legs, strikes, is_call)
    if len(strikes) == 4:
        return _match_condor(legs, is_call)
    return None


def _outer_buys_inner_sells(legs: List[Leg]) -> bool:
    """Sorted by strike: wings [0],[3] bought and body [1],[2] sold."""
    ordered = sorted(legs, key=lambda l: l.strike)
    return (ordered[0].is_buy and ordered[3].is_buy
            and ordered[1].is_sell and ordered[2].is_sell)


def _match_iron_condor(legs: List[Leg]) -> K:
    # Bought wings around a sold body is the reverse form here; every other
    # arrangement keeps the plain name.
    if _outer_buys_inner_sells(legs):
        return K.REVERSE_IRON_CONDOR
    return K.IRON_CONDOR


def _match_butterfly(legs: List[Leg], strikes: List[float], is_call: bool) -> Optional[K]:
    low, middle, high = strikes
    if sum(1 for leg in legs if leg.strike == middle) != 2:
        return None

    outer = [leg for leg in legs if leg.strike in (low, high)]
    if all(leg.is_buy for leg in outer):
        return K.LONG_CALL_BUTTERFLY if is_call else K.LONG_PUT_BUTTERFLY
    if all(leg.is_sell for leg in outer):
        return K.SHORT_CALL_BUTTERFLY if is_call else K.SHORT_PUT_BUTTERFLY
    return None


def _match_condor(legs: List[Leg], is_call: bool) -> K:
    if _outer_buys_inner_sells(legs):
        return K.REVERSE_CALL_CONDOR if is_call else K.REVERSE_PUT_CONDOR
    return K.CALL_CONDOR if is_call else K.PUT_CONDOR

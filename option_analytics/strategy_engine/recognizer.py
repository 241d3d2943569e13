"""Main strategy recognition dispatcher."""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from .constants import STRATEGIES
from .parsing import coerce_legs
from .patterns_combo import match_combo
from .patterns_multi import match_multi
from .patterns_single import match_single
from .patterns_vertical import match_vertical
from .types import Classification, Composition, Direction, Leg, StrategyKind

logger = logging.getLogger(__name__)

__all__ = ["classify", "composition_of", "net_premium", "not_applicable"]


def composition_of(legs: List[Leg]) -> Composition:
    """Calls if every leg is a call, Puts if every leg is a put, else Mixed."""
    if legs and all(leg.is_call for leg in legs):
        return Composition.CALLS
    if legs and not any(leg.is_call for leg in legs):
        return Composition.PUTS
    return Composition.MIXED


def net_premium(legs: Iterable[Leg]) -> float:
    """Credit received minus debit paid (Sell positive), full precision."""
    return sum((leg.signed_premium for leg in legs), 0.0)


def classify(legs: Iterable[Union[Leg, Mapping[str, Any]]]) -> Classification:
    """Recognize the strategy formed by a set of legs.

    Algorithm:
    1. Option-type composition (Calls / Puts / Mixed)
    2. Net premium decides credit vs debit, Short vs Long
    3. Dispatch on leg count; first matching pattern wins
       - 1 leg: Long / Naked
       - 2 legs: vertical spreads, then straddle / strangle
       - 4 legs: iron condor, butterfly, condor
    4. Fall back to Custom
    """
    legs = coerce_legs(legs)
    kind = _match(legs) or StrategyKind.CUSTOM
    result = _result(kind, legs)
    logger.debug("Classified %d legs as %s", len(legs), result.name)
    return result


def not_applicable() -> Classification:
    """Classification reported when there are no legs at all."""
    return _result(StrategyKind.NOT_APPLICABLE, [])


def _match(legs: List[Leg]) -> Optional[StrategyKind]:
    if len(legs) == 1:
        return match_single(legs[0])
    if len(legs) == 2:
        return match_vertical(legs) or match_combo(legs)
    if len(legs) == 4:
        return match_multi(legs)
    return None


def _result(kind: StrategyKind, legs: List[Leg]) -> Classification:
    """Build a Classification from a strategy kind using the registry."""
    defn = STRATEGIES[kind]
    is_credit = net_premium(legs) > 0
    return Classification(
        kind=kind,
        name=defn.name,
        category=defn.category,
        direction=Direction.SHORT if is_credit else Direction.LONG,
        is_credit=is_credit,
        is_reverse=defn.is_reverse,
        composition=composition_of(legs),
    )

"""Single-leg strategy patterns."""

from typing import Optional

from .types import Leg, StrategyKind


def match_single(leg: Leg) -> Optional[StrategyKind]:
    """Identify a single-leg strategy: bought legs are Long, sold legs Naked."""
    if leg.is_call:
        return StrategyKind.LONG_CALL if leg.is_buy else StrategyKind.NAKED_CALL
    return StrategyKind.LONG_PUT if leg.is_buy else StrategyKind.NAKED_PUT

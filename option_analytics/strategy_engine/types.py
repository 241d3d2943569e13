"""Data types for the strategy engine."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Action(Enum):
    BUY = "Buy"
    SELL = "Sell"


class OptionType(Enum):
    CALL = "Call"
    PUT = "Put"


class Composition(Enum):
    CALLS = "Calls"
    PUTS = "Puts"
    MIXED = "Mixed"


class Direction(Enum):
    LONG = "Long"
    SHORT = "Short"


class StrategyKind(Enum):
    """Every shape the recognizer can name."""
    LONG_CALL = "long_call"
    LONG_PUT = "long_put"
    NAKED_CALL = "naked_call"
    NAKED_PUT = "naked_put"
    BULL_CALL_SPREAD = "bull_call_spread"
    BEAR_CALL_SPREAD = "bear_call_spread"
    BULL_PUT_SPREAD = "bull_put_spread"
    BEAR_PUT_SPREAD = "bear_put_spread"
    STRADDLE = "straddle"
    STRANGLE = "strangle"
    IRON_CONDOR = "iron_condor"
    REVERSE_IRON_CONDOR = "reverse_iron_condor"
    LONG_CALL_BUTTERFLY = "long_call_butterfly"
    SHORT_CALL_BUTTERFLY = "short_call_butterfly"
    LONG_PUT_BUTTERFLY = "long_put_butterfly"
    SHORT_PUT_BUTTERFLY = "short_put_butterfly"
    CALL_CONDOR = "call_condor"
    REVERSE_CALL_CONDOR = "reverse_call_condor"
    PUT_CONDOR = "put_condor"
    REVERSE_PUT_CONDOR = "reverse_put_condor"
    CUSTOM = "custom"
    NOT_APPLICABLE = "not_applicable"


@dataclass(frozen=True)
class Leg:
    """A single option position, already normalized by the parsing layer."""
    action: Action
    option_type: OptionType
    strike: float
    premium: float
    contracts: int = 1

    @property
    def is_buy(self) -> bool:
        return self.action is Action.BUY

    @property
    def is_sell(self) -> bool:
        return self.action is Action.SELL

    @property
    def is_call(self) -> bool:
        return self.option_type is OptionType.CALL

    @property
    def sign(self) -> int:
        """+1 for premium received (Sell), -1 for premium paid (Buy)."""
        return 1 if self.is_sell else -1

    @property
    def signed_premium(self) -> float:
        return self.premium * self.contracts * self.sign


@dataclass(frozen=True)
class StrategyDef:
    """Registry entry defining a strategy's display metadata."""
    kind: StrategyKind
    name: str
    category: str
    is_reverse: bool = False


@dataclass(frozen=True)
class Classification:
    """Result of strategy recognition."""
    kind: StrategyKind
    name: str                   # e.g., "Reverse Iron Condor"
    category: str               # e.g., "Condor"
    direction: Direction
    is_credit: bool
    is_reverse: bool
    composition: Composition

    @property
    def is_custom(self) -> bool:
        return self.kind is StrategyKind.CUSTOM


def distinct_strikes(legs: List[Leg]) -> Optional[List[float]]:
    """Sorted distinct strikes, or None when any leg lacks a positive strike."""
    strikes = [leg.strike for leg in legs]
    if any(strike <= 0 for strike in strikes):
        return None
    return sorted(set(strikes))

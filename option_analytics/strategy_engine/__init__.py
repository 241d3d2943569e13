"""Strategy Engine: leg model, payoff and strategy recognition.

Public API:
    classify(legs) -> Classification
    payoff_at(leg, price) -> float
    strategy_payoff(legs, price) -> float
    coerce_legs(raw_legs) -> List[Leg]
"""

from .recognizer import classify, composition_of, net_premium, not_applicable
from .payoff import payoff_at, strategy_payoff
from .parsing import DEFAULTS, coerce_leg, coerce_legs
from .types import (
    Action,
    Classification,
    Composition,
    Direction,
    Leg,
    OptionType,
    StrategyDef,
    StrategyKind,
)
from .constants import STRATEGIES

__all__ = [
    "classify", "composition_of", "net_premium", "not_applicable",
    "payoff_at", "strategy_payoff",
    "DEFAULTS", "coerce_leg", "coerce_legs",
    "Action", "Classification", "Composition", "Direction", "Leg", "OptionType",
    "StrategyDef", "StrategyKind", "STRATEGIES",
]

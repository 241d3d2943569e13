"""
Metrics Engine: risk/reward figures for a set of option legs.

Samples the expiration payoff across a strike-based price range, reads max
profit, max loss and breakevens off the samples, then corrects the sides a
finite grid cannot see (unbounded call exposure, long/short put floors).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from option_analytics.config import EngineSettings, get_settings
from option_analytics.strategy_engine.parsing import coerce_legs, parse_optional_float
from option_analytics.strategy_engine.recognizer import classify, net_premium, not_applicable
from option_analytics.strategy_engine.types import Classification, Leg

from .bounds import UNBOUNDED, Bound, Bounded, Estimate, NOT_COMPUTED, bound_to_json
from .explanations import explain
from .sampling import find_breakevens, price_range, sample_payoff, sample_prices

logger = logging.getLogger(__name__)

__all__ = ["StrategyMetrics", "compute_metrics", "empty_metrics", "upside_slope"]


def _cents(value: float) -> float:
    # + 0.0 folds -0.0 into 0.0
    return round(value, 2) + 0.0


@dataclass(frozen=True)
class StrategyMetrics:
    """Everything the strategy form displays and the trade record stores."""
    net_premium: float
    max_profit: Bound
    max_loss: Bound             # magnitude of the worst outcome; positive is a loss
    breakevens: Tuple[float, ...]
    roi: float
    classification: Classification
    prob_profit: Estimate = NOT_COMPUTED
    max_profit_explanation: str = ""
    max_loss_explanation: str = ""

    @property
    def strategy_name(self) -> str:
        return self.classification.name

    def to_dict(self) -> dict:
        c = self.classification
        return {
            "net_premium": self.net_premium,
            "max_profit": bound_to_json(self.max_profit),
            "max_loss": bound_to_json(self.max_loss),
            "breakevens": list(self.breakevens),
            "prob_profit": self.prob_profit.value,
            "roi": self.roi,
            "strategy_name": c.name,
            "strategy_type": c.category,
            "direction": c.direction.value,
            "is_credit": c.is_credit,
            "is_reverse": c.is_reverse,
            "option_type": c.composition.value,
            "max_profit_explanation": self.max_profit_explanation,
            "max_loss_explanation": self.max_loss_explanation,
        }


def empty_metrics() -> StrategyMetrics:
    """Zero-valued metrics for an empty leg list."""
    return StrategyMetrics(
        net_premium=0.0,
        max_profit=Bounded(0.0),
        max_loss=Bounded(0.0),
        breakevens=(),
        roi=0.0,
        classification=not_applicable(),
    )


def upside_slope(legs: Iterable[Leg]) -> int:
    """Payoff change per $1 of underlying above the highest strike.

    Only calls contribute: bought calls +contracts, sold calls -contracts.
    """
    return sum(leg.contracts * (1 if leg.is_buy else -1) for leg in legs if leg.is_call)


def _resolve_bounds(legs: List[Leg], max_profit: Bound, max_loss: Bound) -> Tuple[Bound, Bound]:
    slope = upside_slope(legs)
    if slope > 0:
        max_profit = UNBOUNDED
    elif slope < 0:
        max_loss = UNBOUNDED

    # A lone put is worth most at a zero underlying, usually below the grid
    if len(legs) == 1 and not legs[0].is_call:
        leg = legs[0]
        floor = Bounded(_cents(max(0.0, leg.strike - leg.premium) * leg.contracts))
        if leg.is_buy:
            max_profit = floor
        else:
            max_loss = floor
    return max_profit, max_loss


def compute_metrics(
    legs: Optional[Iterable[Union[Leg, Mapping[str, Any]]]],
    asset_price: Any = None,
    margin_required: Any = None,
    settings: Optional[EngineSettings] = None,
) -> StrategyMetrics:
    """Compute net premium, max profit/loss, breakevens, ROI and classification.

    Parameters:
        legs: Leg objects or loosely typed leg mappings (form values)
        asset_price: Current underlying price; informational only
        margin_required: User-supplied margin; ROI is 0 when it is missing or zero,
            a negative margin is divided through as given
        settings: Sampling overrides (defaults to the environment settings)

    Never raises on malformed numeric fields; see ``strategy_engine.parsing``.
    """
    settings = settings or get_settings()
    legs = coerce_legs(legs)
    if not legs:
        logger.debug("No legs supplied, returning empty metrics")
        return empty_metrics()

    premium = net_premium(legs)

    start, end = price_range(legs, settings)
    points = sample_payoff(legs, sample_prices(start, end, settings.sample_points))
    payoffs = [point.payoff for point in points]
    max_profit, max_loss = _resolve_bounds(
        legs,
        Bounded(_cents(max(payoffs))),
        Bounded(_cents(-min(payoffs))),
    )
    breakevens = tuple(find_breakevens(points))

    margin = parse_optional_float(margin_required, allow_negative=True)
    roi = premium / margin * 100 if margin else 0.0

    classification = classify(legs)
    profit_text, loss_text = explain(classification, legs)

    logger.debug(
        "Metrics for %s over [%.2f, %.2f] (asset price %s): net=%.2f breakevens=%s",
        classification.name, start, end, parse_optional_float(asset_price), premium, breakevens,
    )

    return StrategyMetrics(
        net_premium=_cents(premium),
        max_profit=max_profit,
        max_loss=max_loss,
        breakevens=breakevens,
        roi=_cents(roi),
        classification=classification,
        max_profit_explanation=profit_text,
        max_loss_explanation=loss_text,
    )

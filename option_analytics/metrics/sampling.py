"""Price grids, payoff sampling and breakeven detection.

Shared by the metrics engine and the chart builder so both find breakevens
the same way.
"""

from typing import Iterable, List, NamedTuple, Sequence, Tuple

from option_analytics.config import EngineSettings
from option_analytics.strategy_engine.payoff import strategy_payoff
from option_analytics.strategy_engine.types import Leg

__all__ = ["PayoffPoint", "price_range", "sample_prices", "sample_payoff", "find_breakevens"]


class PayoffPoint(NamedTuple):
    price: float
    payoff: float

    def to_dict(self) -> dict:
        return {"price": self.price, "payoff": self.payoff}


def price_range(legs: Iterable[Leg], settings: EngineSettings) -> Tuple[float, float]:
    """[min strike * low factor, max strike * high factor] over positive strikes."""
    strikes = [leg.strike for leg in legs if leg.strike > 0]
    min_strike = min(strikes) if strikes else settings.fallback_min_strike
    max_strike = max(strikes) if strikes else settings.fallback_max_strike
    return (max(0.0, min_strike * settings.range_low_factor),
            max_strike * settings.range_high_factor)


def sample_prices(start: float, end: float, intervals: int) -> List[float]:
    """*intervals* + 1 equally spaced prices, both ends included."""
    span = end - start
    return [start + span * i / intervals for i in range(intervals + 1)]


def sample_payoff(legs: Sequence[Leg], prices: Iterable[float]) -> List[PayoffPoint]:
    return [PayoffPoint(price, strategy_payoff(legs, price)) for price in prices]


def find_breakevens(points: Sequence[Tuple[float, float]]) -> List[float]:
    """Zero crossings of a sampled payoff curve.

    A crossing is a consecutive pair that changes sign (zero counts on
    either side); its price is linearly interpolated. Results are rounded to
    cents, negatives dropped, duplicates removed, sorted ascending.
    """
    crossings = set()
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        if (y1 <= 0 < y2) or (y1 >= 0 > y2):
            price = x1 - y1 * (x2 - x1) / (y2 - y1)
            if price >= 0:
                crossings.add(round(price, 2) + 0.0)
    return sorted(crossings)

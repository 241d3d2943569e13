"""
Payoff chart data: a dense expiration curve plus the annotation lines drawn
over it (max profit, max loss, zero, strikes, breakevens, asset price).

The curve is independent of the metrics sampler. Extra points are inserted
around each strike so a piecewise-linear renderer draws the kink exactly.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from option_analytics.config import EngineSettings, get_settings
from option_analytics.metrics.sampling import PayoffPoint, find_breakevens
from option_analytics.strategy_engine.parsing import coerce_legs, parse_optional_float
from option_analytics.strategy_engine.payoff import strategy_payoff
from option_analytics.strategy_engine.types import Leg

logger = logging.getLogger(__name__)

__all__ = [
    "STRIKE_OFFSETS",
    "AnnotationLine",
    "ChartAnnotations",
    "ChartData",
    "build_curve",
    "chart_window",
    "extract_annotations",
    "build_chart_data",
]

STRIKE_OFFSETS = (-0.5, -0.1, 0.0, 0.1, 0.5)

# Prices closer than this are the same chart point
_PRICE_KEY_DIGITS = 9


def _grid(start_price: float, end_price: float, step: float) -> List[float]:
    count = int(math.floor((end_price - start_price) / step + 1e-9))
    return [start_price + i * step for i in range(count + 1)]


def build_curve(
    legs: Iterable[Union[Leg, Mapping[str, Any]]],
    start_price: float,
    end_price: float,
    step: float,
) -> List[PayoffPoint]:
    """Sample the strategy payoff from *start_price* to *end_price*.

    Every grid point within one step of a strike pulls in the points
    ``strike + offset`` for each of :data:`STRIKE_OFFSETS` (clipped to the
    range). Prices are deduplicated and sorted, then each is evaluated with
    ``strategy_payoff`` directly. A non-positive step or reversed range
    yields no points.
    """
    legs = coerce_legs(legs)
    if step <= 0 or end_price < start_price:
        logger.debug("Empty curve for range [%s, %s] step %s", start_price, end_price, step)
        return []

    strikes = sorted({leg.strike for leg in legs})
    prices = {}

    def add(price: float) -> None:
        prices.setdefault(round(price, _PRICE_KEY_DIGITS), price)

    for price in _grid(start_price, end_price, step):
        for strike in strikes:
            if abs(price - strike) < step:
                for offset in STRIKE_OFFSETS:
                    strike_point = strike + offset
                    if start_price <= strike_point <= end_price:
                        add(strike_point)
        add(price)

    ordered = sorted(prices.values())
    return [PayoffPoint(price, strategy_payoff(legs, price)) for price in ordered]


def chart_window(
    legs: Iterable[Union[Leg, Mapping[str, Any]]],
    settings: Optional[EngineSettings] = None,
) -> Tuple[float, float, float]:
    """(start, end, step) for the payoff chart: strikes padded by the chart margin."""
    settings = settings or get_settings()
    strikes = [leg.strike for leg in coerce_legs(legs)]
    if not strikes:
        strikes = [settings.fallback_min_strike, settings.fallback_max_strike]
    start = max(0.0, min(strikes) - settings.chart_margin)
    end = max(strikes) + settings.chart_margin
    step = (end - start) / settings.chart_steps
    return start, end, step


@dataclass(frozen=True)
class AnnotationLine:
    """One reference line. Horizontal lines sit on the payoff axis (y)."""
    kind: str           # "max_profit", "max_loss", "zero", "strike", "breakeven", "asset_price"
    axis: str           # "x" (vertical line at a price) or "y" (horizontal line at a payoff)
    value: float
    label: str

    def to_dict(self) -> dict:
        return {"kind": self.kind, "axis": self.axis, "value": self.value, "label": self.label}


@dataclass(frozen=True)
class ChartAnnotations:
    max_payoff: float
    min_payoff: float
    strikes: Tuple[float, ...] = ()
    breakevens: Tuple[float, ...] = ()

    def lines(self) -> List[AnnotationLine]:
        lines = [
            AnnotationLine("max_profit", "y", self.max_payoff, f"Max Profit: ${self.max_payoff:.2f}"),
            AnnotationLine("max_loss", "y", self.min_payoff, f"Max Loss: ${self.min_payoff:.2f}"),
            AnnotationLine("zero", "y", 0.0, ""),
        ]
        lines.extend(AnnotationLine("strike", "x", s, f"Strike: ${s:g}") for s in self.strikes)
        lines.extend(
            AnnotationLine("breakeven", "x", b, f"Break Even: ${b:.2f}") for b in self.breakevens
        )
        return lines


def extract_annotations(
    points: Sequence[Tuple[float, float]],
    legs: Iterable[Union[Leg, Mapping[str, Any]]] = (),
) -> ChartAnnotations:
    """Max/min payoff lines, strike lines and breakevens of a sampled curve.

    Breakevens are recomputed over *points* with the same crossing rule the
    metrics engine uses, so they agree with it to sampling tolerance.
    """
    strikes = tuple(sorted({leg.strike for leg in coerce_legs(legs)}))
    if not points:
        return ChartAnnotations(max_payoff=0.0, min_payoff=0.0, strikes=strikes)

    payoffs = [payoff for _, payoff in points]
    return ChartAnnotations(
        max_payoff=max(payoffs),
        min_payoff=min(payoffs),
        strikes=strikes,
        breakevens=tuple(find_breakevens(points)),
    )


@dataclass(frozen=True)
class ChartData:
    points: List[PayoffPoint] = field(default_factory=list)
    annotations: Optional[ChartAnnotations] = None
    asset_price: Optional[float] = None

    def lines(self) -> List[AnnotationLine]:
        lines = self.annotations.lines() if self.annotations else []
        if self.asset_price is not None:
            lines.append(AnnotationLine("asset_price", "x", self.asset_price,
                                        f"Asset Price: ${self.asset_price:,.2f}"))
        return lines

    def to_dict(self) -> dict:
        return {
            "points": [point.to_dict() for point in self.points],
            "annotations": [line.to_dict() for line in self.lines()],
        }


def build_chart_data(
    legs: Iterable[Union[Leg, Mapping[str, Any]]],
    asset_price: Any = None,
    settings: Optional[EngineSettings] = None,
) -> ChartData:
    """Curve and annotations over the default chart window. No legs, no chart."""
    legs = coerce_legs(legs)
    price = parse_optional_float(asset_price)
    if not legs:
        return ChartData(asset_price=price)

    start, end, step = chart_window(legs, settings)
    points = build_curve(legs, start, end, step)
    logger.debug("Chart curve: %d points over [%.2f, %.2f]", len(points), start, end)
    return ChartData(points=points, annotations=extract_annotations(points, legs), asset_price=price)

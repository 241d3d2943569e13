"""Metrics Engine: net premium, max profit/loss, breakevens, ROI.

Public API:
    compute_metrics(legs, asset_price=None, margin_required=None) -> StrategyMetrics
"""

from .bounds import UNBOUNDED, Bound, Bounded, Estimate, NOT_COMPUTED, Unbounded, bound_value
from .engine import StrategyMetrics, compute_metrics, empty_metrics, upside_slope
from .explanations import explain
from .sampling import PayoffPoint, find_breakevens, price_range, sample_payoff, sample_prices

__all__ = [
    "UNBOUNDED", "Bound", "Bounded", "Estimate", "NOT_COMPUTED", "Unbounded", "bound_value",
    "StrategyMetrics", "compute_metrics", "empty_metrics", "upside_slope",
    "explain",
    "PayoffPoint", "find_breakevens", "price_range", "sample_payoff", "sample_prices",
]

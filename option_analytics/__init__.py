"""Options strategy analytics: classification, risk/reward metrics and payoff curves."""

from option_analytics.strategy_engine import Leg, classify, payoff_at, strategy_payoff
from option_analytics.metrics import UNBOUNDED, Bounded, StrategyMetrics, compute_metrics
from option_analytics.chart import build_chart_data, build_curve, extract_annotations
from option_analytics.records import to_trade_record

__version__ = "1.0.0"

__all__ = [
    "Leg", "classify", "payoff_at", "strategy_payoff",
    "UNBOUNDED", "Bounded", "StrategyMetrics", "compute_metrics",
    "build_chart_data", "build_curve", "extract_annotations",
    "to_trade_record",
]

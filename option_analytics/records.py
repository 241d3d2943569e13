"""Projection of engine output onto the stored trade record."""

from option_analytics.chart import ChartData
from option_analytics.metrics.bounds import bound_value
from option_analytics.metrics.engine import StrategyMetrics
from option_analytics.schemas import ChartDataModel, TradeMetricsRecord


def to_trade_record(metrics: StrategyMetrics) -> TradeMetricsRecord:
    """The metrics fields a saved trade keeps.

    ``max_profit`` / ``max_loss`` become ``None`` when unbounded, which is
    how the trade table stores an unlimited side.
    """
    classification = metrics.classification
    return TradeMetricsRecord(
        strategy_type=classification.name,
        max_profit=bound_value(metrics.max_profit),
        max_loss=bound_value(metrics.max_loss),
        net_premium=metrics.net_premium,
        breakevens=list(metrics.breakevens),
        roi=metrics.roi,
        is_credit=classification.is_credit,
        direction=classification.direction.value,
    )


def to_chart_model(chart: ChartData) -> ChartDataModel:
    return ChartDataModel.model_validate(chart.to_dict())

"""Pydantic models for values handed to the trade-record and chart layers."""

from typing import List, Optional

from pydantic import BaseModel, Field


class TradeMetricsRecord(BaseModel):
    """Metrics fields a saved trade stores verbatim. Unbounded sides are null."""
    strategy_type: str
    max_profit: Optional[float] = None
    max_loss: Optional[float] = None
    net_premium: float
    breakevens: List[float] = Field(default_factory=list)
    roi: float = 0.0
    is_credit: bool = False
    direction: str


class PayoffPointModel(BaseModel):
    price: float
    payoff: float


class AnnotationModel(BaseModel):
    kind: str
    axis: str
    value: float
    label: str = ""


class ChartDataModel(BaseModel):
    points: List[PayoffPointModel] = Field(default_factory=list)
    annotations: List[AnnotationModel] = Field(default_factory=list)

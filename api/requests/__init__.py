from __future__ import annotations

from datetime import date
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from config import PREDICTION_METRICS
from engine.enums import SmoothingMethod


class ForecastRequest(BaseModel):
    values: List[Optional[float]]
    periods: int = Field(default=8, ge=0, le=104)


class SmoothingRequest(BaseModel):
    values: List[Optional[float]]
    method: SmoothingMethod = SmoothingMethod.sma
    period: Optional[int] = None
    alpha: Optional[float] = None


class DecomposeRequest(BaseModel):
    values: List[Optional[float]]
    season_length: Optional[int] = Field(default=None, ge=1, le=104)


class AnomalyRequest(BaseModel):
    values: List[Optional[float]]
    threshold: Optional[float] = Field(default=None, gt=0.0, le=10.0)


class AccuracyRequest(BaseModel):
    actual: List[float]
    predicted: List[float]
    history: Optional[List[float]] = None


class LifecycleRequest(BaseModel):
    values: List[Optional[float]]


class ForecastReportRequest(BaseModel):
    revenue: List[float]
    units: List[float]
    week_starts: List[date] = Field(default_factory=list)
    weeks: Optional[int] = None
    product_id: Optional[str] = None

    @model_validator(mode="after")
    def _aligned(self) -> "ForecastReportRequest":
        if len(self.units) != len(self.revenue):
            raise ValueError("revenue and units must have one value per week")
        if self.week_starts and len(self.week_starts) != len(self.revenue):
            raise ValueError("week_starts must have one label per week")
        return self


class ProductSales(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    product_id: str
    product_name: str
    sku: Optional[str] = None
    order_count: int = 0
    total_units: int = 0
    total_revenue: float = 0.0
    avg_unit_price: float = 0.0
    period_days: int = 1
    revenue_30d: float = 0.0
    revenue_60d: float = 0.0
    revenue_90d: float = 0.0
    weekly_units: List[float] = Field(default_factory=list)
    first_sale_date: Optional[date] = None
    last_sale_date: Optional[date] = None


class PerformanceRequest(BaseModel):
    products: List[ProductSales] = Field(default_factory=list)
    sort_by: Literal["revenue", "velocity", "growth", "score"] = "revenue"


class PredictionRequest(BaseModel):
    supplier_id: str
    metrics: Dict[str, List[float]]
    as_of: Optional[date] = None

    @model_validator(mode="after")
    def _known_metrics(self) -> "PredictionRequest":
        unknown = set(self.metrics) - set(PREDICTION_METRICS)
        if unknown:
            raise ValueError(f"unsupported metric(s): {', '.join(sorted(unknown))}")
        return self

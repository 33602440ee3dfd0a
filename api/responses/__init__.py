"""
Response models for API endpoints and report services.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
from datetime import date
from typing import Any, Dict, List, Optional

import numpy as np
from pydantic import BaseModel, Field, model_serializer

from engine.anomaly import Anomaly
from engine.enums import LifecycleStage, Trend
from engine.forecast import FitQuality


def _coerce(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _coerce(dataclasses.asdict(obj))
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


def to_payload(result: Any) -> Any:
    """Plain JSON-ready structure for an engine record (dataclasses, numpy scalars, nested lists)."""
    return _coerce(result)


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class Band(NpModel):

    lower: List[float] = Field(default_factory=list)
    upper: List[float] = Field(default_factory=list)


class RevenueForecast(NpModel):

    historical: List[float]
    predictions: List[float]
    confidence_1sigma: Band
    confidence_2sigma: Band
    quality: FitQuality
    anomalies: List[Anomaly] = Field(default_factory=list)


class UnitsForecast(NpModel):

    historical: List[float]
    predictions: List[float]
    confidence_1sigma: Band
    confidence_2sigma: Band


class WeekLabels(NpModel):

    historical: List[date]
    future: List[date]


class ForecastAccuracy(NpModel):

    mape: float
    accuracy_percent: float
    r_squared: float
    trend: Trend
    test_size: int


class ForecastSummary(NpModel):

    avg_historical_revenue: float
    avg_forecast_revenue: float
    forecast_total: float
    std_dev: float


class SupplierForecastReport(NpModel):

    success: bool
    error: Optional[str] = None
    message: Optional[str] = None
    weeks_available: Optional[int] = None
    forecast_weeks: int
    historical_weeks: int
    product_id: Optional[str] = None
    revenue: Optional[RevenueForecast] = None
    units: Optional[UnitsForecast] = None
    weeks: Optional[WeekLabels] = None
    accuracy: Optional[ForecastAccuracy] = None
    summary: Optional[ForecastSummary] = None


class ProductPerformance(NpModel):

    product_id: str
    product_name: str
    sku: Optional[str] = None
    order_count: int
    total_units: int
    total_revenue: float
    avg_unit_price: float
    velocity: float
    revenue_trending: Dict[str, float]
    growth_rate: float
    lifecycle: LifecycleStage
    performance_score: float
    first_sale_date: Optional[date] = None
    last_sale_date: Optional[date] = None
    period_days: int


class PerformanceSummary(NpModel):

    total_products: int
    total_revenue: float
    avg_velocity: float
    lifecycle_distribution: Dict[str, int]


class PerformanceReport(NpModel):

    success: bool = True
    sort_by: str
    data: List[ProductPerformance]
    top_performers: List[ProductPerformance]
    bottom_performers: List[ProductPerformance]
    summary: PerformanceSummary


class PredictionRow(NpModel):

    supplier_id: str
    prediction_date: date
    metric_type: str
    predicted_value: float
    confidence_lower: float
    confidence_upper: float
    confidence_score: float
    anomaly_threshold_high: float
    anomaly_threshold_low: float
    data_quality_score: float


class PredictionBatch(NpModel):

    suppliers: int
    succeeded: int
    skipped: int
    failed: int
    rows: List[PredictionRow] = Field(default_factory=list)

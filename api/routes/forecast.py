"""
Forecast routes: combined trend forecast over a posted series, the weekly supplier forecast report, and nightly prediction rows.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from api.requests import ForecastReportRequest, ForecastRequest, PredictionRequest
from api.responses import PredictionBatch, SupplierForecastReport
from api.routes.common import clean_series, payload
from api.routes.exception import handle_exceptions
from engine.forecast import generate
from services.forecast_service import build_report
from services.prediction_service import prediction_service

router = APIRouter(tags=["Forecast"])


@router.post("/forecast", summary="Linear trend forecast with confidence bands and anomalies")
@handle_exceptions
async def forecast(req: ForecastRequest) -> Dict[str, Any]:
    history = clean_series(req.values)
    return payload(generate(history, req.periods))


@router.post("/forecast/report", summary="Weekly revenue and units forecast report", response_model=SupplierForecastReport)
@handle_exceptions
async def forecast_report(req: ForecastReportRequest) -> SupplierForecastReport:
    return build_report(
        clean_series(req.revenue, label="revenue"),
        clean_series(req.units, label="units"),
        week_starts=req.week_starts,
        weeks=req.weeks,
        product_id=req.product_id,
    )


@router.post("/forecast/predictions", summary="Nightly prediction rows for one supplier", response_model=PredictionBatch)
@handle_exceptions
async def forecast_predictions(req: PredictionRequest) -> PredictionBatch:
    metrics = {name: clean_series(vals, label=name) for name, vals in req.metrics.items()}
    return prediction_service.run_batch({req.supplier_id: metrics}, as_of=req.as_of)

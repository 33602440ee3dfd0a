"""
Metric routes: forecast accuracy (MAPE and hold-out backtest), lifecycle classification, and the product performance report.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from api.requests import AccuracyRequest, LifecycleRequest, PerformanceRequest
from api.responses import PerformanceReport, to_payload
from api.routes.common import clean_series
from api.routes.exception import handle_exceptions
from engine.metrics import backtest, classify_lifecycle, mape
from services.performance_service import build_report

router = APIRouter(tags=["Metrics"])


@router.post("/metrics/accuracy", summary="MAPE between actual and predicted values")
@handle_exceptions
async def metric_accuracy(req: AccuracyRequest) -> Dict[str, Any]:
    actual = clean_series(req.actual, label="actual")
    predicted = clean_series(req.predicted, label="predicted")
    if len(actual) != len(predicted):
        raise HTTPException(status_code=400, detail="actual and predicted must have the same length")
    error = mape(actual, predicted)
    body: Dict[str, Any] = {"mape": error, "accuracy_percent": max(0.0, 100.0 - error)}
    if req.history is not None:
        body["backtest"] = to_payload(backtest(clean_series(req.history, label="history")))
    return body


@router.post("/metrics/lifecycle", summary="Product lifecycle stage from weekly sales")
@handle_exceptions
async def metric_lifecycle(req: LifecycleRequest) -> Dict[str, Any]:
    vals = clean_series(req.values)
    return {"lifecycle": classify_lifecycle(vals), "weeks": len(vals)}


@router.post("/metrics/performance", summary="Product performance ranking", response_model=PerformanceReport)
@handle_exceptions
async def metric_performance(req: PerformanceRequest) -> PerformanceReport:
    products = [
        p.model_copy(update={"weekly_units": clean_series(p.weekly_units, label=p.product_id)})
        for p in req.products
    ]
    return build_report(products, sort_by=req.sort_by)

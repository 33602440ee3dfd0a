"""
Weekly supplier forecast report: revenue and unit forecasts with confidence bands, future week labels, hold-out accuracy and a revenue summary, built from weekly purchase order totals.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional, Sequence

import numpy as np

from api.responses import (
    Band,
    ForecastAccuracy,
    ForecastSummary,
    RevenueForecast,
    SupplierForecastReport,
    UnitsForecast,
    WeekLabels,
)
from config import settings
from engine.forecast import ConfidenceBand, generate
from engine.metrics import backtest

log = logging.getLogger(__name__)


def clamp_weeks(weeks: Optional[int]) -> int:
    if weeks is None:
        weeks = settings.report_default_weeks
    return max(settings.report_min_weeks, min(settings.report_max_weeks, int(weeks)))


def future_weeks(week_starts: Sequence[date], weeks: int) -> List[date]:
    if not week_starts:
        return []
    last = week_starts[-1]
    return [last + timedelta(weeks=i) for i in range(1, weeks + 1)]


def _band(band: ConfidenceBand) -> Band:
    return Band(lower=band.lower, upper=band.upper)


def _mean(vals: Sequence[float]) -> float:
    return float(np.mean(vals)) if len(vals) else 0.0


def build_report(
    revenue: Sequence[float],
    units: Sequence[float],
    week_starts: Sequence[date] = (),
    weeks: Optional[int] = None,
    product_id: Optional[str] = None,
) -> SupplierForecastReport:
    if len(units) != len(revenue):
        raise ValueError(f"revenue has {len(revenue)} weeks but units has {len(units)}")
    if week_starts and len(week_starts) != len(revenue):
        raise ValueError(f"revenue has {len(revenue)} weeks but {len(week_starts)} week labels were given")

    forecast_weeks = clamp_weeks(weeks)
    history = len(revenue)

    if history < settings.report_min_history:
        log.info("forecast report skipped: %d week(s) of history, need %d", history, settings.report_min_history)
        return SupplierForecastReport(
            success=False,
            error="Insufficient historical data",
            message=f"At least {settings.report_min_history} weeks of historical data required for forecasting",
            weeks_available=history,
            forecast_weeks=forecast_weeks,
            historical_weeks=history,
            product_id=product_id,
        )

    revenue_fc = generate(revenue, forecast_weeks)
    units_fc = generate(units, forecast_weeks)
    check = backtest(revenue)
    log.debug(
        "forecast report: weeks=%d history=%d r2=%.4f mape=%.2f",
        forecast_weeks, history, revenue_fc.quality.r_squared, check.mape,
    )

    return SupplierForecastReport(
        success=True,
        forecast_weeks=forecast_weeks,
        historical_weeks=history,
        product_id=product_id,
        revenue=RevenueForecast(
            historical=list(revenue),
            predictions=revenue_fc.predictions,
            confidence_1sigma=_band(revenue_fc.confidence_1sigma),
            confidence_2sigma=_band(revenue_fc.confidence_2sigma),
            quality=revenue_fc.quality,
            anomalies=revenue_fc.anomalies,
        ),
        units=UnitsForecast(
            historical=list(units),
            predictions=units_fc.predictions,
            confidence_1sigma=_band(units_fc.confidence_1sigma),
            confidence_2sigma=_band(units_fc.confidence_2sigma),
        ),
        weeks=WeekLabels(
            historical=list(week_starts),
            future=future_weeks(week_starts, forecast_weeks),
        ),
        accuracy=ForecastAccuracy(
            mape=round(check.mape, 2),
            accuracy_percent=round(check.accuracy_pct, 2),
            r_squared=round(revenue_fc.quality.r_squared, 4),
            trend=revenue_fc.quality.trend,
            test_size=check.test_size,
        ),
        summary=ForecastSummary(
            avg_historical_revenue=_mean(revenue),
            avg_forecast_revenue=_mean(revenue_fc.predictions),
            forecast_total=float(sum(revenue_fc.predictions)),
            std_dev=revenue_fc.std_dev,
        ),
    )

"""
Combined forecast for a sales series: a linear trend projection with one- and two-sigma confidence bands, fit quality, and the anomalies found in the history.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from engine.anomaly import Anomaly, detect as detect_anomalies
from engine.enums import ForecastMethod, Status, Trend
from engine.forecast.intervals import ConfidenceBand, confidence_intervals
from engine.forecast.regression import linear_regression
from config import settings


@dataclass(frozen=True)
class FitQuality:
    r_squared: float = 0.0
    slope: float = 0.0
    trend: Trend = Trend.stable


@dataclass(frozen=True)
class ForecastReport:
    method: ForecastMethod
    predictions: List[float] = field(default_factory=list)
    confidence_1sigma: ConfidenceBand = field(default_factory=ConfidenceBand)
    confidence_2sigma: ConfidenceBand = field(default_factory=ConfidenceBand)
    quality: FitQuality = field(default_factory=FitQuality)
    anomalies: List[Anomaly] = field(default_factory=list)
    std_dev: float = 0.0
    status: Status = Status.ok


def generate(history: Sequence[float], periods: int | None = None) -> ForecastReport:
    if periods is None:
        periods = settings.forecast_default_periods
    if len(history) == 0:
        return ForecastReport(method=ForecastMethod.none, status=Status.insufficient_data)

    fit = linear_regression(history, periods)
    z_narrow, z_wide = settings.forecast_confidence_levels
    narrow = confidence_intervals(fit.predictions, history, z_narrow)
    wide = confidence_intervals(fit.predictions, history, z_wide)

    return ForecastReport(
        method=ForecastMethod.linear_regression,
        predictions=fit.predictions,
        confidence_1sigma=narrow,
        confidence_2sigma=wide,
        quality=FitQuality(
            r_squared=fit.r_squared,
            slope=fit.slope,
            trend=Trend.from_slope(fit.slope),
        ),
        anomalies=detect_anomalies(history),
        std_dev=narrow.std_dev,
        status=fit.status,
    )

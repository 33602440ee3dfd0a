"""
Linear trend fitting for sales series, using ordinary least squares over 1-indexed period numbers to project future periods (floored at zero demand) and scoring the historical fit with R-squared.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from engine.enums import Status
from config import settings


@dataclass(frozen=True)
class RegressionFit:
    slope: float
    intercept: float
    predictions: List[float] = field(default_factory=list)
    r_squared: float = 0.0
    status: Status = Status.ok


def _linear_fit(vals: Sequence[float]) -> tuple[float, float]:
    v = np.asarray(vals, dtype=float)
    n = len(v)
    x = np.arange(1, n + 1, dtype=float)
    mean_x, mean_y = x.mean(), v.mean()
    numerator = float(np.sum(x * v) - n * mean_x * mean_y)
    denominator = float(np.sum(x * x) - n * mean_x * mean_x)
    slope = numerator / denominator if denominator != 0 else 0.0
    intercept = float(mean_y - slope * mean_x)
    return slope, intercept


def _r_squared(vals: Sequence[float], slope: float, intercept: float) -> float:
    v = np.asarray(vals, dtype=float)
    if len(v) < 2:
        return 0.0
    x = np.arange(1, len(v) + 1, dtype=float)
    predicted = slope * x + intercept
    ss_res = np.sum((v - predicted) ** 2)
    ss_tot = np.sum((v - np.mean(v)) ** 2)
    return float(1.0 - ss_res / ss_tot) if ss_tot > 0 else 0.0


def project(slope: float, intercept: float, start: int, periods: int) -> List[float]:
    """Point predictions for x = start .. start + periods - 1, floored at zero."""
    if periods <= 0:
        return []
    x = np.arange(start, start + periods, dtype=float)
    return np.maximum(0.0, slope * x + intercept).tolist()


def linear_regression(vals: Sequence[float], periods: int | None = None) -> RegressionFit:
    if periods is None:
        periods = settings.forecast_default_periods
    if periods < 0:
        return RegressionFit(slope=0.0, intercept=0.0, status=Status.invalid_parameter)
    if len(vals) < settings.forecast_regression_min_length:
        return RegressionFit(slope=0.0, intercept=0.0, status=Status.insufficient_data)

    slope, intercept = _linear_fit(vals)
    return RegressionFit(
        slope=slope,
        intercept=intercept,
        predictions=project(slope, intercept, len(vals) + 1, periods),
        r_squared=_r_squared(vals, slope, intercept),
    )

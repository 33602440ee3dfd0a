"""
Derived sales metrics: weekly velocity, period-over-period growth rate, and product lifecycle stage from the slope of weekly sales.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from engine.enums import LifecycleStage
from engine.forecast.regression import linear_regression
from config import settings


def sales_velocity(total_units: float, total_days: float) -> float:
    if total_days <= 0:
        return 0.0
    return total_units / total_days * settings.velocity_days_per_week


def growth_rate(current: float, previous: float) -> float:
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100


def classify_lifecycle(weekly: Sequence[float]) -> LifecycleStage:
    if len(weekly) < settings.lifecycle_min_points:
        return LifecycleStage.new

    avg_sales = float(np.mean(np.asarray(weekly, dtype=float)))
    if avg_sales < settings.lifecycle_min_avg_sales:
        return LifecycleStage.new

    slope = linear_regression(weekly, 0).slope
    cutoff = avg_sales * settings.lifecycle_slope_ratio
    if slope > cutoff:
        return LifecycleStage.growth
    if slope < -cutoff:
        return LifecycleStage.decline
    return LifecycleStage.mature

"""
Constants and configuration for Supplycast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, List, Tuple

from pydantic_settings import BaseSettings


SUPPLYCAST_HOST: str = os.getenv("SUPPLYCAST_HOST", "0.0.0.0")
SUPPLYCAST_PORT: int = int(os.getenv("SUPPLYCAST_PORT", "4323"))
SUPPLYCAST_LOG_LEVEL: str = os.getenv("SUPPLYCAST_LOG_LEVEL", "info").lower()

API_PREFIX = "/api/v1"

# weight values assigned to severity labels for comparison and ranking
SEVERITY_WEIGHTS: dict[str, int] = {
    "medium": 2,
    "high": 4,
}

# metric names accepted by the nightly prediction job
PREDICTION_METRICS: Tuple[str, ...] = ("revenue", "units", "orders")


class Settings(BaseSettings):
    # smoothing defaults
    sma_default_period: int = 4
    wma_default_period: int = 4
    ema_default_alpha: float = 0.3

    # regression / orchestrator
    forecast_default_periods: int = 8
    forecast_regression_min_length: int = 2
    # z multipliers for the two bands attached to every forecast
    forecast_confidence_levels: List[float] = [1.0, 2.0]

    # confidence intervals
    interval_default_z: float = 1.0

    # anomaly detection
    anomaly_zscore_threshold: float = 2.0
    anomaly_high_severity_z: float = 3.0
    anomaly_min_samples: int = 3

    # seasonal decomposition
    seasonal_default_length: int = 4

    # lifecycle classification
    lifecycle_min_points: int = 4
    lifecycle_min_avg_sales: float = 1.0
    lifecycle_slope_ratio: float = 0.1

    # quick lifecycle rule used when no weekly history is supplied
    lifecycle_new_max_days: int = 30
    lifecycle_growth_rate_cutoff: float = 20.0

    # velocity
    velocity_days_per_week: int = 7

    # hold-out backtest
    backtest_test_fraction: float = 0.2
    backtest_test_max: int = 8
    backtest_min_train: int = 8

    # weekly forecast report
    report_default_weeks: int = 8
    report_min_weeks: int = 4
    report_max_weeks: int = 12
    report_min_history: int = 8

    # nightly predictions
    prediction_horizon_weeks: int = 4
    prediction_min_history: int = 12
    prediction_anomaly_z: float = 2.0
    prediction_full_history_weeks: int = 52

    # product performance scoring
    performance_velocity_scale: float = 10.0
    performance_revenue_divisor: float = 100.0
    performance_score_cap: float = 100.0
    performance_weights: Dict[str, float] = {"velocity": 0.4, "revenue": 0.6}
    performance_top_n: int = 10

    model_config = {
        "env_prefix": "SUPPLYCAST_",
        "extra": "ignore",
    }


settings = Settings()

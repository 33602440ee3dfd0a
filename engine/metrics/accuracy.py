"""
Forecast accuracy: mean absolute percentage error between actual and predicted series, and a hold-out backtest that refits the trend on the older part of a history and scores it against the newest periods.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from engine.enums import Status
from engine.forecast.regression import linear_regression
from config import settings


@dataclass(frozen=True)
class Backtest:
    mape: float
    accuracy_pct: float
    train_size: int
    test_size: int
    status: Status = Status.ok


def mape(actual: Sequence[float], predicted: Sequence[float]) -> float:
    if len(actual) != len(predicted) or len(actual) == 0:
        return 0.0
    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    # zero actuals carry no percentage error and are left out of the mean
    valid = a != 0
    if not valid.any():
        return 0.0
    return float(np.mean(np.abs((a[valid] - p[valid]) / a[valid])) * 100)


def backtest(vals: Sequence[float]) -> Backtest:
    n = len(vals)
    test_size = min(settings.backtest_test_max, int(n * settings.backtest_test_fraction))
    train_size = n - test_size
    if test_size == 0 or train_size <= settings.backtest_min_train:
        return Backtest(
            mape=0.0,
            accuracy_pct=0.0,
            train_size=train_size,
            test_size=test_size,
            status=Status.insufficient_data,
        )

    fit = linear_regression(list(vals[:train_size]), test_size)
    error = mape(list(vals[train_size:]), fit.predictions)
    return Backtest(
        mape=error,
        accuracy_pct=max(0.0, 100.0 - error),
        train_size=train_size,
        test_size=test_size,
    )

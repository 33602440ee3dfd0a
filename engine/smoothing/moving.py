"""
Moving average smoothing for sales series: simple, exponential and linearly weighted averages, plus the centered average used as the trend estimate in seasonal decomposition.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from engine.enums import SmoothingMethod, Status
from config import settings


@dataclass(frozen=True)
class Smoothed:
    method: SmoothingMethod
    values: List[float]
    status: Status


def _window_status(n: int, period: int) -> Status:
    if period <= 0:
        return Status.invalid_parameter
    if n == 0 or period > n:
        return Status.insufficient_data
    return Status.ok


def sma(values: Sequence[float], period: int | None = None) -> List[float]:
    if period is None:
        period = settings.sma_default_period
    if _window_status(len(values), period) is not Status.ok:
        return []
    windows = sliding_window_view(np.asarray(values, dtype=float), period)
    return windows.mean(axis=1).tolist()


def ema(values: Sequence[float], alpha: float | None = None) -> List[float]:
    if alpha is None:
        alpha = settings.ema_default_alpha
    if len(values) == 0 or alpha <= 0 or alpha > 1:
        return []
    result = np.zeros(len(values))
    result[0] = values[0]
    for i in range(1, len(values)):
        result[i] = alpha * values[i] + (1 - alpha) * result[i - 1]
    return result.tolist()


def wma(values: Sequence[float], period: int | None = None) -> List[float]:
    if period is None:
        period = settings.wma_default_period
    if _window_status(len(values), period) is not Status.ok:
        return []
    # oldest point in each window gets weight 1, newest gets weight `period`
    weights = np.arange(1, period + 1, dtype=float)
    denominator = period * (period + 1) / 2
    windows = sliding_window_view(np.asarray(values, dtype=float), period)
    return (windows @ weights / denominator).tolist()


def centered_moving_average(values: Sequence[float], period: int) -> List[Optional[float]]:
    """Trend estimate aligned to ``values``; the first and last ``period // 2`` points are ``None``.

    Odd periods average ``period`` points around the centre. Even periods use
    the classical 2xP average: ``period + 1`` points with the two end points
    at half weight, so every window still spans exactly one season.
    """
    n = len(values)
    half = period // 2
    trend: List[Optional[float]] = [None] * n
    if period <= 0 or n < 2 * half + 1:
        return trend

    if period % 2:
        kernel = np.full(period, 1.0 / period)
    else:
        kernel = np.ones(period + 1)
        kernel[0] = kernel[-1] = 0.5
        kernel /= period

    smoothed = np.convolve(np.asarray(values, dtype=float), kernel, mode="valid")
    for offset, value in enumerate(smoothed):
        trend[half + offset] = float(value)
    return trend


def smooth(
    values: Sequence[float],
    method: SmoothingMethod | str = SmoothingMethod.sma,
    period: int | None = None,
    alpha: float | None = None,
) -> Smoothed:
    method = SmoothingMethod(method)

    if method is SmoothingMethod.ema:
        if alpha is None:
            alpha = settings.ema_default_alpha
        if alpha <= 0 or alpha > 1:
            status = Status.invalid_parameter
        elif len(values) == 0:
            status = Status.insufficient_data
        else:
            status = Status.ok
        return Smoothed(method=method, values=ema(values, alpha), status=status)

    if period is None:
        period = settings.sma_default_period if method is SmoothingMethod.sma else settings.wma_default_period
    fn = sma if method is SmoothingMethod.sma else wma
    return Smoothed(method=method, values=fn(values, period), status=_window_status(len(values), period))

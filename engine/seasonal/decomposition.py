"""
Additive seasonal decomposition of a sales series into a centered moving average trend, a repeating seasonal pattern, and the leftover residual.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np

from engine.enums import Status
from engine.smoothing import centered_moving_average
from config import settings


@dataclass(frozen=True)
class Decomposition:
    trend: List[Optional[float]] = field(default_factory=list)
    seasonal: List[float] = field(default_factory=list)
    residual: List[Optional[float]] = field(default_factory=list)
    pattern: List[float] = field(default_factory=list)
    status: Status = Status.ok


def _seasonal_pattern(detrended: Dict[int, float], season_length: int) -> List[float]:
    buckets: Dict[int, List[float]] = {k: [] for k in range(season_length)}
    for i, v in detrended.items():
        buckets[i % season_length].append(v)
    return [float(np.mean(buckets[k])) if buckets[k] else 0.0 for k in range(season_length)]


def decompose(vals: Sequence[float], season_length: int | None = None) -> Decomposition:
    if season_length is None:
        season_length = settings.seasonal_default_length
    if season_length <= 0:
        return Decomposition(status=Status.invalid_parameter)
    n = len(vals)
    if n < season_length * 2:
        return Decomposition(status=Status.insufficient_data)

    trend = centered_moving_average(vals, season_length)
    detrended = {i: vals[i] - t for i, t in enumerate(trend) if t is not None}

    pattern = _seasonal_pattern(detrended, season_length)
    seasonal = [pattern[i % season_length] for i in range(n)]
    residual: List[Optional[float]] = [
        float(vals[i] - t - seasonal[i]) if t is not None else None
        for i, t in enumerate(trend)
    ]

    return Decomposition(
        trend=trend,
        seasonal=seasonal,
        residual=residual,
        pattern=pattern,
    )

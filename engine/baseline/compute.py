"""
Compute logic for population baseline statistics (mean, standard deviation and the mean +/- z*sigma band) over a sales series, shared by confidence intervals, anomaly detection and the nightly anomaly thresholds.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from config import settings


@dataclass(frozen=True)
class Baseline:
    mean: float
    std: float
    lower: float
    upper: float
    sample_count: int = 0


def population_std(vals: Sequence[float]) -> float:
    # divide by N, not N-1: interval widths and anomaly cutoffs depend on it
    if len(vals) == 0:
        return 0.0
    return float(np.std(np.asarray(vals, dtype=float)))


def compute(vals: Sequence[float], z_threshold: float | None = None) -> Baseline:
    if z_threshold is None:
        z_threshold = settings.prediction_anomaly_z
    n = len(vals)
    if n == 0:
        return Baseline(mean=0.0, std=0.0, lower=0.0, upper=0.0, sample_count=0)

    m = float(np.mean(np.asarray(vals, dtype=float)))
    s = population_std(vals)
    return Baseline(
        mean=m,
        std=s,
        lower=max(0.0, m - z_threshold * s),
        upper=m + z_threshold * s,
        sample_count=n,
    )


def score(val: float, baseline: Baseline) -> Tuple[bool, float]:
    z = abs(val - baseline.mean) / baseline.std if baseline.std else 0.0
    return (val < baseline.lower or val > baseline.upper), round(z, 3)

"""
Detection logic for flagging unusual periods in a sales series with the z-score method, classifying each flagged point as medium or high severity by how many standard deviations it sits from the series mean.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from engine.baseline import compute as compute_baseline
from engine.enums import Severity
from config import settings


@dataclass(frozen=True)
class Anomaly:
    index: int
    value: float
    z_score: float
    severity: Severity


def _z_scores(arr: np.ndarray, mean: float, std: float) -> np.ndarray:
    return np.abs(arr - mean) / std


def detect(values: Sequence[float], threshold: float | None = None) -> List[Anomaly]:
    if threshold is None:
        threshold = settings.anomaly_zscore_threshold
    if len(values) < settings.anomaly_min_samples:
        return []

    arr = np.asarray(values, dtype=float)
    baseline = compute_baseline(arr)
    if baseline.std == 0:
        return []

    z_scores = _z_scores(arr, baseline.mean, baseline.std)
    anomalies: List[Anomaly] = []
    for i, (v, z) in enumerate(zip(arr, z_scores)):
        if z <= threshold:
            continue
        anomalies.append(Anomaly(
            index=i,
            value=float(v),
            z_score=float(z),
            severity=Severity.from_z(float(z)),
        ))
    return anomalies

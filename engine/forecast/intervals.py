"""
Confidence bands around point forecasts, sized by the population standard deviation of the history and a normal z multiplier.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
from scipy.stats import norm

from engine.baseline import population_std
from engine.enums import Status
from config import settings


@dataclass(frozen=True)
class ConfidenceBand:
    lower: List[float] = field(default_factory=list)
    upper: List[float] = field(default_factory=list)
    std_dev: float = 0.0
    z: float = 0.0
    coverage: float = 0.0
    status: Status = Status.ok


def coverage_for_z(z: float) -> float:
    """Probability mass of a normal distribution inside +/- z sigma (1.0 -> ~0.683)."""
    if z <= 0:
        return 0.0
    return float(2 * norm.cdf(z) - 1)


def z_for_coverage(level: float) -> float:
    """Two-sided z multiplier for a coverage level in (0, 1) (0.95 -> ~1.96)."""
    if not 0 < level < 1:
        raise ValueError(f"coverage level must be in (0, 1), got {level}")
    return float(norm.ppf((1 + level) / 2))


def confidence_intervals(
    predictions: Sequence[float],
    history: Sequence[float],
    z: float | None = None,
) -> ConfidenceBand:
    if z is None:
        z = settings.interval_default_z
    if z < 0:
        return ConfidenceBand(z=z, status=Status.invalid_parameter)
    if len(predictions) == 0 or len(history) == 0:
        return ConfidenceBand(z=z, status=Status.insufficient_data)

    sigma = population_std(history)
    p = np.asarray(predictions, dtype=float)
    return ConfidenceBand(
        lower=np.maximum(0.0, p - z * sigma).tolist(),
        upper=(p + z * sigma).tolist(),
        std_dev=sigma,
        z=z,
        coverage=coverage_for_z(z),
    )

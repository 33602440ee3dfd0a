"""
Enumerations for Severity, Trend, Lifecycle Stages, Result Status and Methods

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import SEVERITY_WEIGHTS, settings


class Severity(str, Enum):
    medium = "medium"
    high = "high"

    @classmethod
    def from_z(cls, z: float) -> Severity:
        if abs(z) > settings.anomaly_high_severity_z:
            return cls.high
        return cls.medium

    def weight(self) -> int:
        return SEVERITY_WEIGHTS[self.value]


class Status(str, Enum):
    ok = "ok"
    insufficient_data = "insufficient_data"
    invalid_parameter = "invalid_parameter"

    @property
    def has_signal(self) -> bool:
        return self is Status.ok


class Trend(str, Enum):
    increasing = "increasing"
    decreasing = "decreasing"
    stable = "stable"

    @classmethod
    def from_slope(cls, slope: float) -> Trend:
        if slope > 0:
            return cls.increasing
        if slope < 0:
            return cls.decreasing
        return cls.stable


class LifecycleStage(str, Enum):
    new = "new"
    growth = "growth"
    mature = "mature"
    decline = "decline"


class ForecastMethod(str, Enum):
    none = "none"
    linear_regression = "linear_regression"


class SmoothingMethod(str, Enum):
    sma = "sma"
    ema = "ema"
    wma = "wma"

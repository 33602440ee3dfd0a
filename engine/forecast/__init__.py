"""
Forecasting logic for supplier sales series, including linear trend regression with R-squared scoring, confidence bands sized from historical variance, and a combined forecast that attaches fit quality and historical anomalies to the projection.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.regression import RegressionFit, linear_regression
from engine.forecast.intervals import ConfidenceBand, confidence_intervals, coverage_for_z, z_for_coverage
from engine.forecast.orchestrator import FitQuality, ForecastReport, generate

__all__ = [
    "RegressionFit",
    "linear_regression",
    "ConfidenceBand",
    "confidence_intervals",
    "coverage_for_z",
    "z_for_coverage",
    "FitQuality",
    "ForecastReport",
    "generate",
]

"""
Test cases for the combined forecast: trend projection, confidence bands, fit quality and historical anomalies in a single report.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from engine.enums import ForecastMethod, Status, Trend
from engine.forecast import ForecastReport, generate


def test_linear_history_forecast(linear_history):
    report = generate(linear_history, 4)
    assert isinstance(report, ForecastReport)
    assert report.method is ForecastMethod.linear_regression
    assert report.status is Status.ok
    assert report.predictions == pytest.approx([26.0, 28.0, 30.0, 32.0])
    assert report.quality.r_squared == pytest.approx(1.0)
    assert report.quality.slope == pytest.approx(2.0)
    assert report.quality.trend is Trend.increasing
    assert report.anomalies == []


def test_bands_nest_around_predictions(linear_history):
    report = generate(linear_history, 4)
    narrow, wide = report.confidence_1sigma, report.confidence_2sigma
    assert report.std_dev > 0
    for i, p in enumerate(report.predictions):
        assert wide.lower[i] <= narrow.lower[i] < p < narrow.upper[i] <= wide.upper[i]


def test_empty_history():
    report = generate([], 4)
    assert report.method is ForecastMethod.none
    assert report.status is Status.insufficient_data
    assert report.predictions == []
    assert report.confidence_1sigma.lower == []


def test_single_point_history():
    report = generate([12.0], 3)
    assert report.method is ForecastMethod.linear_regression
    assert report.status is Status.insufficient_data
    assert report.predictions == []


def test_declining_history_trend():
    report = generate([40, 35, 30, 25, 20], 2)
    assert report.quality.trend is Trend.decreasing
    assert all(lo >= 0 for lo in report.confidence_2sigma.lower)


def test_anomalies_in_history_are_reported():
    history = [5] * 14 + [50]
    report = generate(history, 2)
    assert [a.index for a in report.anomalies] == [14]


def test_default_horizon(monkeypatch, linear_history):
    monkeypatch.setattr(settings, "forecast_default_periods", 2)
    assert len(generate(linear_history).predictions) == 2

"""
Test cases for linear trend regression, including exact fits, R-squared scoring, zero-floored predictions and degenerate inputs.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from engine.enums import Status
from engine.forecast.regression import RegressionFit, _linear_fit, _r_squared, linear_regression, project


def test_linear_fit_and_r2():
    vals = [2, 4, 6, 8, 10]
    slope, intercept = _linear_fit(vals)
    assert slope == pytest.approx(2.0)
    assert intercept == pytest.approx(0.0, abs=1e-9)
    assert _r_squared(vals, slope, intercept) == pytest.approx(1.0)


def test_regression_predictions_continue_trend():
    fit = linear_regression([2, 4, 6, 8, 10], 3)
    assert isinstance(fit, RegressionFit)
    assert fit.status is Status.ok
    assert fit.predictions == pytest.approx([12.0, 14.0, 16.0])
    assert fit.r_squared == pytest.approx(1.0)


def test_predictions_floor_at_zero():
    fit = linear_regression([100, 70, 40, 10], 4)
    assert fit.slope < 0
    assert all(p >= 0 for p in fit.predictions)
    assert fit.predictions == [0.0, 0.0, 0.0, 0.0]


def test_constant_series_has_zero_slope_and_r2():
    fit = linear_regression([5, 5, 5, 5], 2)
    assert fit.slope == pytest.approx(0.0)
    assert fit.intercept == pytest.approx(5.0)
    assert fit.r_squared == 0.0
    assert fit.predictions == pytest.approx([5.0, 5.0])


def test_zig_zag_has_weak_fit():
    fit = linear_regression([1, 9, 1, 9, 1, 9], 1)
    assert 0.0 <= fit.r_squared < 0.2


def test_short_series_is_insufficient():
    fit = linear_regression([42], 4)
    assert fit.status is Status.insufficient_data
    assert fit.slope == 0.0
    assert fit.intercept == 0.0
    assert fit.predictions == []
    assert fit.r_squared == 0.0


def test_negative_periods_are_invalid():
    fit = linear_regression([1, 2, 3], -1)
    assert fit.status is Status.invalid_parameter
    assert fit.predictions == []


def test_zero_periods_still_fit():
    fit = linear_regression([1, 2, 3, 4], 0)
    assert fit.predictions == []
    assert fit.slope == pytest.approx(1.0)


def test_default_periods_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "forecast_default_periods", 3)
    assert len(linear_regression([1, 2, 3]).predictions) == 3


def test_project_window():
    assert project(2.0, 1.0, 4, 2) == pytest.approx([9.0, 11.0])
    assert project(2.0, 1.0, 4, 0) == []


def test_regression_is_pure():
    vals = [3, 8, 2, 9, 4]
    assert linear_regression(vals, 4) == linear_regression(vals, 4)

"""
Test cases for derived sales metrics: weekly velocity, growth rate and lifecycle classification.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from engine.enums import LifecycleStage
from engine.metrics import classify_lifecycle, growth_rate, sales_velocity


def test_sales_velocity_is_weekly():
    assert sales_velocity(70, 7) == pytest.approx(70.0)
    assert sales_velocity(30, 14) == pytest.approx(15.0)


@pytest.mark.parametrize("days", [0, -3])
def test_sales_velocity_without_days(days):
    assert sales_velocity(50, days) == 0.0


def test_growth_rate():
    assert growth_rate(150, 100) == pytest.approx(50.0)
    assert growth_rate(50, 100) == pytest.approx(-50.0)
    assert growth_rate(100, 100) == 0.0


def test_growth_rate_from_zero_is_zero():
    assert growth_rate(500, 0) == 0.0


def test_lifecycle_growth(linear_history):
    assert classify_lifecycle(linear_history) is LifecycleStage.growth


def test_lifecycle_decline(linear_history):
    assert classify_lifecycle(list(reversed(linear_history))) is LifecycleStage.decline


def test_lifecycle_mature():
    assert classify_lifecycle([10, 10, 11, 10, 10]) is LifecycleStage.mature
    # a gentle drift under a tenth of the average is still mature
    assert classify_lifecycle([100, 101, 102, 103]) is LifecycleStage.mature


def test_lifecycle_new_for_short_history():
    assert classify_lifecycle([1, 50, 100]) is LifecycleStage.new
    assert classify_lifecycle([]) is LifecycleStage.new


def test_lifecycle_new_for_tiny_sales():
    assert classify_lifecycle([0, 0, 0, 1]) is LifecycleStage.new


def test_lifecycle_thresholds_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "lifecycle_slope_ratio", 0.001)
    assert classify_lifecycle([100, 101, 102, 103]) is LifecycleStage.growth

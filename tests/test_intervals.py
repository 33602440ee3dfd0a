"""
Test cases for confidence bands around forecasts, including containment, monotone widening with z, zero flooring and normal coverage conversion.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from engine.enums import Status
from engine.forecast import confidence_intervals, coverage_for_z, z_for_coverage


HISTORY = [2, 4, 4, 4, 5, 5, 7, 9]  # population sigma is exactly 2


def test_band_uses_population_sigma():
    band = confidence_intervals([10.0, 20.0], HISTORY, 1.0)
    assert band.std_dev == pytest.approx(2.0)
    assert band.lower == pytest.approx([8.0, 18.0])
    assert band.upper == pytest.approx([12.0, 22.0])
    assert band.status is Status.ok


@pytest.mark.parametrize("z", [0.0, 0.5, 1.0, 2.0, 3.0])
def test_band_contains_predictions(z):
    preds = [0.5, 3.0, 12.0]
    band = confidence_intervals(preds, HISTORY, z)
    for p, lo, hi in zip(preds, band.lower, band.upper):
        assert lo <= p <= hi
        assert lo >= 0


def test_band_widens_with_z():
    preds = [10.0, 11.0]
    narrow = confidence_intervals(preds, HISTORY, 1.0)
    wide = confidence_intervals(preds, HISTORY, 2.0)
    for a, b in zip(narrow.lower, wide.lower):
        assert b <= a
    for a, b in zip(narrow.upper, wide.upper):
        assert b >= a


def test_lower_bound_floors_at_zero():
    band = confidence_intervals([1.0], HISTORY, 2.0)
    assert band.lower == [0.0]
    assert band.upper == pytest.approx([5.0])


def test_empty_inputs_are_insufficient():
    for preds, hist in (([], HISTORY), ([1.0], [])):
        band = confidence_intervals(preds, hist, 1.0)
        assert band.lower == [] and band.upper == []
        assert band.std_dev == 0.0
        assert band.status is Status.insufficient_data


def test_negative_z_is_invalid():
    band = confidence_intervals([1.0], HISTORY, -1.0)
    assert band.status is Status.invalid_parameter
    assert band.lower == []


def test_coverage_conversion():
    assert coverage_for_z(1.0) == pytest.approx(0.6827, abs=1e-4)
    assert coverage_for_z(2.0) == pytest.approx(0.9545, abs=1e-4)
    assert coverage_for_z(0.0) == 0.0
    assert z_for_coverage(0.95) == pytest.approx(1.96, abs=1e-2)
    assert coverage_for_z(z_for_coverage(0.8)) == pytest.approx(0.8)


@pytest.mark.parametrize("level", [0.0, 1.0, -0.5, 1.5, math.nan])
def test_z_for_coverage_rejects_bad_levels(level):
    with pytest.raises(ValueError):
        z_for_coverage(level)


def test_band_records_coverage():
    band = confidence_intervals([5.0], HISTORY, 2.0)
    assert band.z == 2.0
    assert band.coverage == pytest.approx(0.9545, abs=1e-4)

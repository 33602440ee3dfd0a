"""
Test cases for population baseline statistics and the mean +/- z*sigma band.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.baseline import Baseline, compute, population_std, score


def test_population_std_divides_by_n():
    assert population_std([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)
    assert population_std([]) == 0.0
    assert population_std([3]) == 0.0


def test_compute_band():
    b = compute([2, 4, 4, 4, 5, 5, 7, 9], 2.0)
    assert b.mean == pytest.approx(5.0)
    assert b.std == pytest.approx(2.0)
    assert b.lower == pytest.approx(1.0)
    assert b.upper == pytest.approx(9.0)
    assert b.sample_count == 8


def test_lower_threshold_floors_at_zero():
    b = compute([1, 1, 1, 10], 2.0)
    assert b.lower == 0.0
    assert b.upper > b.mean


def test_empty_baseline():
    assert compute([]) == Baseline(mean=0.0, std=0.0, lower=0.0, upper=0.0, sample_count=0)


def test_score_against_baseline():
    b = compute([2, 4, 4, 4, 5, 5, 7, 9], 2.0)
    assert score(5.0, b) == (False, 0.0)
    outside, z = score(10.0, b)
    assert outside is True
    assert z == 2.5


def test_score_with_flat_baseline():
    b = compute([4, 4, 4], 2.0)
    assert score(4.0, b) == (False, 0.0)
    assert score(6.0, b)[0] is True

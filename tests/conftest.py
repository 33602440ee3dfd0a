import os
import sys

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def linear_history():
    """Eight weeks rising by two units a week."""
    return [10, 12, 14, 16, 18, 20, 22, 24]


@pytest.fixture
def seasonal_history():
    """Four full quarters: a rising trend plus a fixed +/- quarterly pattern."""
    pattern = [2.0, 10.0, -4.0, -8.0]
    return [20.0 + 0.5 * i + pattern[i % 4] for i in range(16)]


@pytest.fixture
def weekly_revenue():
    return [1200, 1350, 1280, 1420, 1500, 1480, 1610, 1590, 1700, 1760, 1820, 1790]


@pytest.fixture
def weekly_units():
    return [40, 44, 42, 47, 50, 49, 53, 52, 56, 58, 60, 59]

"""
Sales metrics derived from raw series (velocity, growth, lifecycle stage) and forecast accuracy measures (MAPE and hold-out backtesting).

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.metrics.derived import classify_lifecycle, growth_rate, sales_velocity
from engine.metrics.accuracy import Backtest, backtest, mape

__all__ = ["sales_velocity", "growth_rate", "classify_lifecycle", "Backtest", "backtest", "mape"]

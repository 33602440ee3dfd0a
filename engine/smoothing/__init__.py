"""
Smoothing functions for sales series: simple, exponential and weighted moving averages, with a dispatcher that reports whether a result carries signal or degraded for lack of data.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.smoothing.moving import Smoothed, centered_moving_average, ema, sma, smooth, wma

__all__ = ["Smoothed", "sma", "ema", "wma", "centered_moving_average", "smooth"]

"""
Baseline statistics (population mean, standard deviation and z-band) for sales series, used to size confidence intervals and anomaly thresholds.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.baseline.compute import Baseline, compute, population_std, score

__all__ = ["Baseline", "compute", "population_std", "score"]

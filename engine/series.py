"""
Series coercion for raw sales rows arriving as JSON or database values, turning numbers, numeric strings and nulls into a clean float series ready for the forecasting functions.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Optional

log = logging.getLogger(__name__)


def coerce(raw: Optional[Iterable[Any]], label: str = "series") -> List[float]:
    if raw is None:
        return []
    if isinstance(raw, (str, bytes, dict)):
        log.warning("coerce(%s) expected a sequence of numbers, got %s", label, type(raw).__name__)
        return []

    vals: list[float] = []
    dropped = 0
    for p in raw:
        try:
            v = float(p)
        except (ValueError, TypeError):
            dropped += 1
            continue
        if not math.isfinite(v):
            dropped += 1
            continue
        # demand is never negative; returns and corrections floor at zero
        vals.append(max(0.0, v))

    if dropped:
        log.warning("coerce(%s) dropped %d malformed point(s) of %d", label, dropped, dropped + len(vals))
    return vals

"""
Anomaly routes for z-score detection over a posted sales series.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from api.requests import AnomalyRequest
from api.responses import to_payload
from api.routes.common import clean_series, payload
from api.routes.exception import handle_exceptions
from config import settings
from engine import anomaly
from engine.baseline import compute as compute_baseline

router = APIRouter(tags=["Anomalies"])


@router.post("/anomalies", summary="Z-score anomalies in a sales series")
@handle_exceptions
async def detect_anomalies(req: AnomalyRequest) -> Dict[str, Any]:
    vals = clean_series(req.values)
    threshold = req.threshold if req.threshold is not None else settings.anomaly_zscore_threshold
    found = anomaly.detect(vals, threshold)
    worst = max(found, key=lambda a: (a.severity.weight(), a.z_score), default=None)
    return payload(
        {"anomalies": found},
        threshold=threshold,
        worst=to_payload(worst),
        baseline=to_payload(compute_baseline(vals, threshold)),
    )

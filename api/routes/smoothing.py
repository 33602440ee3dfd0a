"""
Smoothing routes for simple, exponential and weighted moving averages over a posted series.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from api.requests import SmoothingRequest
from api.routes.common import clean_series, payload
from api.routes.exception import handle_exceptions
from engine.smoothing import smooth

router = APIRouter(tags=["Smoothing"])


@router.post("/smoothing", summary="SMA / EMA / WMA smoothing")
@handle_exceptions
async def smoothing(req: SmoothingRequest) -> Dict[str, Any]:
    vals = clean_series(req.values)
    return payload(smooth(vals, req.method, period=req.period, alpha=req.alpha))

"""
Health check route reporting service liveness and the active engine defaults.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from api.routes.exception import handle_exceptions
from config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
@handle_exceptions
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "defaults": {
            "forecast_periods": settings.forecast_default_periods,
            "anomaly_threshold": settings.anomaly_zscore_threshold,
            "season_length": settings.seasonal_default_length,
        },
    }

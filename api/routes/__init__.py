"""
Routes initialization for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health import router as health_router
from api.routes.forecast import router as forecast_router
from api.routes.smoothing import router as smoothing_router
from api.routes.seasonal import router as seasonal_router
from api.routes.anomalies import router as anomalies_router
from api.routes.metrics import router as metrics_router

router = APIRouter()

router.include_router(health_router)
router.include_router(forecast_router)
router.include_router(smoothing_router)
router.include_router(seasonal_router)
router.include_router(anomalies_router)
router.include_router(metrics_router)

__all__ = ["router"]

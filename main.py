"""
Entry point for the Supplycast Forecasting Engine API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from api.routes import router
from config import API_PREFIX, SUPPLYCAST_HOST, SUPPLYCAST_LOG_LEVEL, SUPPLYCAST_PORT, settings

logging.basicConfig(
    level=SUPPLYCAST_LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log.info(
        "forecasting engine ready (periods=%d, anomaly z=%.1f, season=%d)",
        settings.forecast_default_periods,
        settings.anomaly_zscore_threshold,
        settings.seasonal_default_length,
    )
    yield
    log.info("forecasting engine shutting down")


app = FastAPI(
    title="Supplycast Forecasting Engine",
    description="Sales forecasting, smoothing, seasonality and anomaly detection for supplier purchase order history.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix=API_PREFIX)


@app.get(f"{API_PREFIX}/ready", tags=["health"], summary="Readiness probe")
async def ready() -> JSONResponse:
    # the engine is stateless; ready as soon as the app is serving
    return JSONResponse(status_code=200, content={"ready": True})


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=SUPPLYCAST_HOST,
        port=SUPPLYCAST_PORT,
        log_level=SUPPLYCAST_LOG_LEVEL,
        access_log=True,
    )

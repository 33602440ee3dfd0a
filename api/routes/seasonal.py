from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from api.requests import DecomposeRequest
from api.routes.common import clean_series, payload
from api.routes.exception import handle_exceptions
from engine.seasonal import decompose

router = APIRouter(tags=["Seasonal"])


@router.post("/seasonal/decompose", summary="Additive trend / seasonal / residual decomposition")
@handle_exceptions
async def seasonal_decompose(req: DecomposeRequest) -> Dict[str, Any]:
    vals = clean_series(req.values)
    return payload(decompose(vals, req.season_length))

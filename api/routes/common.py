"""
Shared helpers for API route modules.

Keeps request-body series cleaning and engine-result serialization in one
place so that individual route files stay thin.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from api.responses import to_payload
from engine.series import coerce


def clean_series(raw: Optional[Iterable[Any]], label: str = "values") -> List[float]:
    return coerce(raw, label=label)


def payload(result: Any, **extra: Any) -> Dict[str, Any]:
    body = to_payload(result)
    if not isinstance(body, dict):
        body = {"result": body}
    body.update(extra)
    return body

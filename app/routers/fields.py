from __future__ import annotations

import json
from typing import Any, Dict

from fastapi import HTTPException, Request

from app.types import RequestFields


async def _json_body(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body must be valid JSON")
    return body if isinstance(body, dict) else {}


async def request_fields(request: Request) -> RequestFields:
    """Collect body, query string and path parameters of the current request."""
    return RequestFields(
        body=await _json_body(request),
        query=dict(request.query_params),
        params=dict(request.path_params),
    )

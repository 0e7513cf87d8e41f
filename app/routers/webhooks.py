from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, HTTPException

from app.adapters.registry import AdapterRegistry
from app.types import NormalizedEvent

logger = logging.getLogger("wagw.routers.webhooks")

router = APIRouter(prefix="", tags=["webhooks"])


@router.post("/webhooks/{provider}")
async def webhook_events(
    provider: str,
    payload: Any = Body(..., description="Raw webhook JSON payload"),
) -> Dict[str, Any]:
    """Normalize a provider webhook into canonical events.

    - Looks up the adapter registered for `provider` (404 when unknown)
    - Canonicalizes every address and classifies every message in the payload
    """
    try:
        adapter = AdapterRegistry.get(provider)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown provider: {provider}")

    events: List[NormalizedEvent] = adapter.normalize_events(payload if isinstance(payload, dict) else {})
    logger.info("webhook %s normalized %d event(s)", provider, len(events))
    return {"ok": True, "events": [event.model_dump(mode="json") for event in events]}

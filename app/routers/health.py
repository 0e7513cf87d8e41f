from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.adapters.registry import AdapterRegistry
from server.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Liveness plus the settings that change how webhooks are normalized."""
    return {
        "ok": True,
        "service": "wagw",
        "version": settings.app_version,
        "adapters": AdapterRegistry.names(),
        "storage_enabled": settings.storage_enabled,
    }


@router.get("/healthz")
async def healthz() -> Dict[str, str]:
    return {"status": "ok"}

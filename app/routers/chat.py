from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from server.config import get_settings
from app.routers.fields import request_fields
from app.types import (
    ClassifiedContent,
    NumberCheck,
    PresenceRequest,
    RequestFields,
    WhatsAppNumbersRequest,
    WhatsAppNumbersResponse,
)
from app.utils.conversation import classify_message
from app.utils.jid import canonicalize_many, create_jid
from app.utils.request_fields import resolve_and_validate

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/whatsappNumbers/{instanceName}")
async def whatsapp_numbers(fields: RequestFields = Depends(request_fields)) -> WhatsAppNumbersResponse:
    """Canonical address for each number. Existence is not checked, so `exists` stays false."""
    data = resolve_and_validate(fields, WhatsAppNumbersRequest)
    return WhatsAppNumbersResponse(
        numbers=[NumberCheck(jid=jid) for jid in canonicalize_many(data.numbers)]
    )


@router.post("/sendPresence/{instanceName}", status_code=201)
async def send_presence(fields: RequestFields = Depends(request_fields)) -> Dict[str, Any]:
    data = resolve_and_validate(fields, PresenceRequest)
    return {
        "ok": True,
        "jid": create_jid(data.number),
        "presence": data.presence.value,
        "delay": data.delay or 0,
    }


@router.post("/classify")
async def classify(
    payload: Dict[str, Any] = Body(..., description="Message envelope JSON"),
) -> ClassifiedContent:
    return classify_message(payload, storage_enabled=get_settings().storage_enabled)

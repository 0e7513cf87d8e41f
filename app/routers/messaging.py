from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from app.routers.fields import request_fields
from app.types import (
    ContactCard,
    MessageKey,
    PreparedMessage,
    RequestFields,
    SendContactRequest,
    SendLocationRequest,
    SendMediaRequest,
    SendOptions,
    SendReactionRequest,
    SendTextRequest,
)
from app.utils.jid import create_jid, split_jid
from app.utils.request_fields import resolve_and_validate

logger = logging.getLogger("wagw.routers.messaging")

router = APIRouter(prefix="/message", tags=["messaging"])


def _message_id(options: Optional[SendOptions]) -> str:
    if options is not None and options.message_id:
        return options.message_id
    return uuid.uuid4().hex[:20].upper()


def _prepare(
    fields: RequestFields,
    remote_jid: str,
    message_type: str,
    content: Any,
    options: Optional[SendOptions] = None,
) -> PreparedMessage:
    """Build the outbound record for an already canonical destination."""
    prepared = PreparedMessage(
        key=MessageKey(id=_message_id(options), remote_jid=remote_jid, from_me=True),
        message={message_type: content},
        message_type=message_type,
        instance=fields.params.get("instanceName"),
        options=options.model_dump(by_alias=True, exclude_none=True) if options else None,
    )
    logger.info("prepared %s for %s", message_type, remote_jid)
    return prepared


def _vcard(card: ContactCard) -> str:
    wuid = card.wuid or split_jid(create_jid(card.phone_number)).local_part
    lines = ["BEGIN:VCARD", "VERSION:3.0", f"N:{card.full_name}", f"FN:{card.full_name}"]
    if card.organization:
        lines.append(f"ORG:{card.organization};")
    if card.email:
        lines.append(f"EMAIL:{card.email}")
    if card.url:
        lines.append(f"URL:{card.url}")
    lines.append(f"item1.TEL;waid={wuid}:{card.phone_number}")
    lines.append("item1.X-ABLabel:Cell")
    lines.append("END:VCARD")
    return "\n".join(lines)


@router.post("/sendText/{instanceName}", status_code=201)
async def send_text(fields: RequestFields = Depends(request_fields)) -> PreparedMessage:
    data = resolve_and_validate(fields, SendTextRequest)
    return _prepare(fields, create_jid(data.number), "conversation", data.text, data.options)


@router.post("/sendLocation/{instanceName}", status_code=201)
async def send_location(fields: RequestFields = Depends(request_fields)) -> PreparedMessage:
    data = resolve_and_validate(fields, SendLocationRequest)
    content = {
        "degreesLatitude": data.latitude,
        "degreesLongitude": data.longitude,
        "name": data.name,
        "address": data.address,
    }
    return _prepare(
        fields,
        create_jid(data.number),
        "locationMessage",
        {k: v for k, v in content.items() if v is not None},
        data.options,
    )


@router.post("/sendContact/{instanceName}", status_code=201)
async def send_contact(fields: RequestFields = Depends(request_fields)) -> PreparedMessage:
    data = resolve_and_validate(fields, SendContactRequest)
    remote_jid = create_jid(data.number)
    cards: List[Dict[str, Any]] = [
        {"displayName": card.full_name, "vcard": _vcard(card)} for card in data.contact
    ]
    if len(cards) == 1:
        return _prepare(fields, remote_jid, "contactMessage", cards[0], data.options)
    return _prepare(
        fields,
        remote_jid,
        "contactsArrayMessage",
        {"displayName": f"{len(cards)} contacts", "contacts": cards},
        data.options,
    )


@router.post("/sendReaction/{instanceName}", status_code=201)
async def send_reaction(fields: RequestFields = Depends(request_fields)) -> PreparedMessage:
    data = resolve_and_validate(fields, SendReactionRequest)
    remote_jid = create_jid(data.key.remote_jid)
    content = {
        "key": {"id": data.key.id, "remoteJid": remote_jid, "fromMe": data.key.from_me},
        "text": data.reaction,
    }
    return _prepare(fields, remote_jid, "reactionMessage", content)


@router.post("/sendMedia/{instanceName}", status_code=201)
async def send_media(fields: RequestFields = Depends(request_fields)) -> PreparedMessage:
    data = resolve_and_validate(fields, SendMediaRequest)
    source = "url" if data.media.startswith(("http://", "https://")) else "base64"
    content = {
        source: data.media,
        "mimetype": data.mimetype,
        "caption": data.caption,
        "fileName": data.file_name,
    }
    return _prepare(
        fields,
        create_jid(data.number),
        f"{data.mediatype.value}Message",
        {k: v for k, v in content.items() if v is not None},
        data.options,
    )

from __future__ import annotations

from typing import Any, Dict, Optional


def envelope(
    message: Optional[Dict[str, Any]] = None,
    *,
    key_id: str = "k1",
    remote_jid: str = "5511987654321@s.whatsapp.net",
    from_me: bool = False,
    participant: Optional[str] = None,
    ad_body: Optional[str] = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "key": {"id": key_id, "remoteJid": remote_jid, "fromMe": from_me},
        "message": message if message is not None else {"conversation": "hi"},
        "pushName": "Ana",
        "messageTimestamp": 1717000000,
    }
    if participant:
        payload["key"]["participant"] = participant
    if ad_body is not None:
        payload["contextInfo"] = {"externalAdReply": {"body": ad_body, "title": "Promo"}}
    return payload


def baileys_webhook(
    data: Any,
    *,
    event: str = "messages.upsert",
    instance: str = "main",
) -> Dict[str, Any]:
    return {"event": event, "instance": instance, "data": data}


def status_update(
    status: Any,
    *,
    key_id: str = "k1",
    remote_jid: str = "5511987654321:12@s.whatsapp.net",
) -> Dict[str, Any]:
    return {"key": {"id": key_id, "remoteJid": remote_jid, "fromMe": True}, "status": status}

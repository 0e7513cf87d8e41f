from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from app.types import MessagingAdapter, NormalizedEvent
from app.utils.conversation import classify_message
from app.utils.jid import create_jid
from app.utils.status import normalize_status, render_status

logger = logging.getLogger("wagw.adapters.baileys")


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


class BaileysAdapter(MessagingAdapter):
    """Adapter for multi-device socket webhooks.

    Bodies look like ``{"event": "messages.upsert", "instance": "main",
    "data": <envelope or list of envelopes>}``. Each envelope already has the
    ``key``/``message``/``contextInfo`` shape the classifier reads, so the
    adapter only canonicalizes addresses and classifies content. Status
    updates (``messages.update``) carry a numeric or textual status instead of
    a ``message`` block.
    """

    def normalize_events(self, body: Dict[str, Any]) -> List[NormalizedEvent]:
        if not isinstance(body, dict):
            return []

        event = _optional_str(body.get("event"))
        instance = _optional_str(body.get("instance"))

        data = body.get("data")
        if isinstance(data, dict):
            items = [data]
        elif isinstance(data, list):
            items = [item for item in data if isinstance(item, dict)]
        else:
            logger.debug("webhook body without data block", extra={"event": event})
            return []

        return [self._normalize_one(item, event, instance) for item in items]

    def _normalize_one(
        self, data: Dict[str, Any], event: Optional[str], instance: Optional[str]
    ) -> NormalizedEvent:
        key = data.get("key")
        if not isinstance(key, dict):
            key = {}

        remote_jid = key.get("remoteJid") or data.get("remoteJid")
        participant = key.get("participant") or data.get("participant")

        normalized = NormalizedEvent(
            event=event,
            instance=instance,
            message_id=_optional_str(key.get("id")) or _optional_str(data.get("keyId")),
            remote_jid=create_jid(remote_jid) if remote_jid else None,
            participant=create_jid(participant) if participant else None,
            from_me=bool(key.get("fromMe", data.get("fromMe", False))),
            push_name=_optional_str(data.get("pushName")),
        )

        if "message" in data:
            classified = classify_message(data)
            normalized.message_type = classified.message_type
            normalized.content = classified.content
        elif "status" in data:
            normalized.status = self._status_label(data["status"])
        return normalized

    @staticmethod
    def _status_label(raw: Any) -> str:
        if isinstance(raw, int) and not isinstance(raw, bool):
            try:
                return render_status(raw).value
            except ValueError:
                logger.warning("unknown receipt code %r", raw)
        return normalize_status(raw)

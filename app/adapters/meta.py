from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from app.types import MessageEnvelope, MessageKey, MessagingAdapter, NormalizedEvent
from app.utils.conversation import classify_message
from app.utils.jid import create_jid, is_status_broadcast
from app.utils.status import normalize_status

logger = logging.getLogger("wagw.adapters.meta")

_MEDIA_KINDS = ("image", "video", "audio", "document", "sticker")


def _optional_id(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _block(message: Dict[str, Any], name: str) -> Optional[Dict[str, Any]]:
    value = message.get(name)
    return value if isinstance(value, dict) else None


def _media_content(kind: str, media: Dict[str, Any]) -> Dict[str, Any]:
    content: Dict[str, Any] = {
        "mimetype": media.get("mime_type"),
        "url": f"media:{media.get('id')}",
        "sha256": media.get("sha256"),
    }
    if kind in ("image", "video"):
        content["caption"] = media.get("caption")
    if kind == "document":
        content["fileName"] = media.get("filename")
        content["caption"] = media.get("caption")
    return {f"{kind}Message": {k: v for k, v in content.items() if v is not None}}


def _message_content(message: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Envelope ``message`` block for one Cloud API message.

    Returns None for messages that are not conversation content (system
    notices and error reports).
    """
    text = _block(message, "text")
    if text is not None:
        return {"conversation": text.get("body")}

    for kind in _MEDIA_KINDS:
        media = _block(message, kind)
        if media is not None:
            return _media_content(kind, media)

    if isinstance(message.get("contacts"), list):
        return {"contactsArrayMessage": message["contacts"]}

    location = _block(message, "location")
    if location is not None:
        return {
            "locationMessage": {
                "degreesLatitude": location.get("latitude"),
                "degreesLongitude": location.get("longitude"),
                "name": location.get("name"),
                "address": location.get("address"),
            }
        }

    reaction = _block(message, "reaction")
    if reaction is not None:
        return {
            "reactionMessage": {
                "key": {"id": reaction.get("message_id")},
                "text": reaction.get("emoji"),
            }
        }

    interactive = _block(message, "interactive")
    if interactive is not None:
        interactive_type = interactive.get("type")
        reply = interactive.get(interactive_type) if isinstance(interactive_type, str) else None
        reply = reply if isinstance(reply, dict) else {}
        return {
            "conversation": reply.get("title")
            or reply.get("description")
            or f"Reply: {interactive_type}",
            "contextInfo": {"interactiveResponseMessage": interactive},
        }

    button = _block(message, "button")
    if button is not None:
        return {"conversation": button.get("text")}

    if "system" in message:
        logger.info("system message received", extra={"system": message.get("system")})
        return None
    if "errors" in message:
        logger.error(
            "provider reported errors for message %s", message.get("id"),
            extra={"errors": message.get("errors")},
        )
        return None

    logger.warning("unhandled message type %r", message.get("type"))
    return {"conversation": f"[Unsupported message type: {message.get('type')}]"}


def build_envelope(
    message: Dict[str, Any],
    contact: Optional[Dict[str, Any]] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Optional[MessageEnvelope]:
    """Turn one Cloud API webhook message into a message envelope."""
    content = _message_content(message)
    if content is None:
        return None

    metadata = metadata or {}
    remote_jid = create_jid(message.get("from"))
    context = _block(message, "context")
    participant = context.get("participant") if context else None

    if context is not None:
        mentioned = context.get("mentioned_jid")
        context_info = dict(content.get("contextInfo") or {})
        context_info.update(
            {
                "quotedMessage": {"key": {"id": context.get("id")}},
                "stanzaId": message.get("id"),
                "mentionedJid": [create_jid(jid) for jid in mentioned]
                if isinstance(mentioned, list)
                else None,
            }
        )
        content["contextInfo"] = context_info

    profile = contact.get("profile") if isinstance(contact, dict) else None
    push_name = profile.get("name") if isinstance(profile, dict) else None
    if not isinstance(push_name, str) or not push_name:
        push_name = remote_jid.split("@")[0]

    sender = message.get("from")

    timestamp = message.get("timestamp")
    try:
        message_timestamp = int(timestamp) if timestamp is not None else None
    except (TypeError, ValueError):
        message_timestamp = None

    return MessageEnvelope(
        key=MessageKey(
            id=_optional_id(message.get("id")),
            remote_jid=remote_jid,
            from_me=sender is not None and sender == metadata.get("phone_number_id"),
            participant=create_jid(participant) if participant else None,
        ),
        message=content,
        push_name=push_name,
        message_timestamp=message_timestamp,
    )


class MetaAdapter(MessagingAdapter):
    """Adapter for Cloud API webhooks (``entry[].changes[].value``).

    Messages are rebuilt as envelopes and classified; delivery statuses become
    status events. Statuses for the status feed or for device-scoped
    addresses are skipped.
    """

    def normalize_events(self, body: Dict[str, Any]) -> List[NormalizedEvent]:
        if not isinstance(body, dict):
            return []

        events: List[NormalizedEvent] = []
        entries = body.get("entry")
        for entry in entries if isinstance(entries, list) else []:
            changes = entry.get("changes") if isinstance(entry, dict) else None
            for change in changes if isinstance(changes, list) else []:
                if not isinstance(change, dict):
                    continue
                value = change.get("value")
                if change.get("field") == "messages" and isinstance(value, dict):
                    events.extend(self._handle_value(value))
                else:
                    logger.warning("unhandled webhook change", extra={"change": change})
        return events

    def _handle_value(self, value: Dict[str, Any]) -> List[NormalizedEvent]:
        metadata = value.get("metadata") if isinstance(value.get("metadata"), dict) else {}
        contacts = value.get("contacts")
        contact = contacts[0] if isinstance(contacts, list) and contacts else None

        messages = value.get("messages")
        if isinstance(messages, list):
            return [
                event
                for event in (
                    self._message_event(message, contact, metadata)
                    for message in messages
                    if isinstance(message, dict)
                )
                if event is not None
            ]

        statuses = value.get("statuses")
        if isinstance(statuses, list):
            return [
                event
                for event in (self._status_event(status) for status in statuses if isinstance(status, dict))
                if event is not None
            ]

        logger.warning("webhook value without messages or statuses")
        return []

    def _message_event(
        self, message: Dict[str, Any], contact: Optional[Dict[str, Any]], metadata: Dict[str, Any]
    ) -> Optional[NormalizedEvent]:
        envelope = build_envelope(message, contact, metadata)
        if envelope is None:
            return None
        classified = classify_message(envelope)
        return NormalizedEvent(
            event="messages.upsert",
            message_id=envelope.key.id,
            remote_jid=envelope.key.remote_jid,
            participant=envelope.key.participant,
            from_me=envelope.key.from_me,
            push_name=envelope.push_name,
            message_type=classified.message_type,
            content=classified.content,
        )

    def _status_event(self, status: Dict[str, Any]) -> Optional[NormalizedEvent]:
        remote_jid = create_jid(status.get("recipient_id"))
        if is_status_broadcast(remote_jid) or ":" in remote_jid:
            logger.debug("skipping status update for %s", remote_jid)
            return None
        return NormalizedEvent(
            event="messages.update",
            message_id=_optional_id(status.get("id")),
            remote_jid=remote_jid,
            participant=remote_jid,
            from_me=True,
            status=normalize_status(status.get("status")),
        )

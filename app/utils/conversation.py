"""Message content classification.

An envelope's ``message`` block carries at most one populated content shape.
`classify_message` walks a fixed, ordered table of extractors (one per
`MessageVariant`) and keeps the first one that finds a value, so the table
order is the tie-break when a payload unexpectedly carries several shapes.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from app.types import ClassifiedContent, MessageEnvelope, MessageVariant
from server.config import get_settings

AD_REPLY_KEY = "externalAdReplyBody"

Extractor = Callable[[Mapping[str, Any], Optional[str]], Any]


def _dig(value: Any, *keys: str) -> Any:
    """Follow `keys` through nested mappings; None as soon as a level is missing."""
    for key in keys:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def _is_set(value: Any) -> bool:
    # Blocks are present whenever they exist, even when empty.
    if isinstance(value, (Mapping, list)):
        return True
    return bool(value)


def _render(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), skipkeys=True, default=str)
    return str(value)


def build_media_tag(kind: str, media_id: Any, caption: Any = None) -> str:
    """``kind|mediaId`` with ``|caption`` appended when the caption is non-empty."""
    tag = f"{kind}|{_render(media_id)}"
    if _is_set(caption):
        tag = f"{tag}|{_render(caption)}"
    return tag


def _media(kind: str, *path: str) -> Extractor:
    def extract(message: Mapping[str, Any], media_id: Optional[str]) -> Optional[str]:
        block = _dig(message, *path)
        if not _is_set(block) or not _is_set(media_id):
            return None
        return build_media_tag(kind, media_id, _dig(block, "caption"))

    return extract


def _field(*path: str) -> Extractor:
    def extract(message: Mapping[str, Any], media_id: Optional[str]) -> Any:
        return _dig(message, *path)

    return extract


def _view_once_url(message: Mapping[str, Any], media_id: Optional[str]) -> Any:
    inner = _dig(message, "viewOnceMessageV2", "message")
    url = None
    for kind in ("imageMessage", "videoMessage", "audioMessage"):
        url = _dig(inner, kind, "url")
        if _is_set(url):
            return url
    # none non-empty: the audio slot's value stands, even when it is ""
    return url


def _button_reply(message: Mapping[str, Any], media_id: Optional[str]) -> Any:
    selected = _dig(message, "templateButtonReplyMessage", "selectedId")
    if selected is None:
        selected = _dig(message, "buttonsResponseMessage", "selectedButtonId")
    return selected


_audio_reference = _media(MessageVariant.AUDIO.value, "audioMessage")


def _audio(message: Mapping[str, Any], media_id: Optional[str]) -> Any:
    transcript = message.get("speechToText")
    if _is_set(transcript):
        return transcript
    return _audio_reference(message, media_id)


VARIANT_EXTRACTORS: Tuple[Tuple[MessageVariant, Extractor], ...] = (
    (MessageVariant.CONVERSATION, _field("conversation")),
    (MessageVariant.EXTENDED_TEXT, _field("extendedTextMessage", "text")),
    (MessageVariant.CONTACT, _field("contactMessage", "displayName")),
    (MessageVariant.LOCATION, _field("locationMessage", "degreesLatitude")),
    (MessageVariant.VIEW_ONCE, _view_once_url),
    (MessageVariant.LIST_RESPONSE, _field("listResponseMessage", "title")),
    (
        MessageVariant.RESPONSE_ROW_ID,
        _field("listResponseMessage", "singleSelectReply", "selectedRowId"),
    ),
    (MessageVariant.TEMPLATE_BUTTON_REPLY, _button_reply),
    (MessageVariant.AUDIO, _audio),
    (MessageVariant.IMAGE, _media(MessageVariant.IMAGE.value, "imageMessage")),
    (MessageVariant.VIDEO, _media(MessageVariant.VIDEO.value, "videoMessage")),
    (MessageVariant.DOCUMENT, _media(MessageVariant.DOCUMENT.value, "documentMessage")),
    (
        MessageVariant.DOCUMENT_WITH_CAPTION,
        _media(
            MessageVariant.DOCUMENT_WITH_CAPTION.value,
            "documentWithCaptionMessage",
            "message",
            "documentMessage",
        ),
    ),
)


def _as_mapping(envelope: Any) -> Mapping[str, Any]:
    if isinstance(envelope, MessageEnvelope):
        return envelope.as_payload()
    if isinstance(envelope, Mapping):
        return envelope
    return {}


def resolve_media_id(envelope: Any, storage_enabled: Optional[bool] = None) -> Any:
    """Identifier used in media references: the key id, or the stored media URL."""
    data = _as_mapping(envelope)
    if storage_enabled is None:
        storage_enabled = get_settings().storage_enabled
    media_id = _dig(data, "key", "id")
    media_url = _dig(data, "message", "mediaUrl")
    if storage_enabled and _is_set(media_url):
        media_id = media_url
    return media_id


def _ad_reply(data: Mapping[str, Any]) -> Optional[str]:
    body = _dig(data, "contextInfo", "externalAdReply", "body")
    if not _is_set(body):
        return None
    return f"{AD_REPLY_KEY}|{_render(body)}"


def extract_variants(
    envelope: Any, storage_enabled: Optional[bool] = None
) -> Dict[str, Optional[str]]:
    """Every candidate value keyed by variant tag, plus the ad-reply entry.

    Empty when the envelope has no ``message`` block. Useful for debugging
    payloads that classify unexpectedly.
    """
    data = _as_mapping(envelope)
    message = data.get("message")
    if not isinstance(message, Mapping):
        return {}

    media_id = resolve_media_id(data, storage_enabled)
    candidates: Dict[str, Optional[str]] = {}
    for variant, extract in VARIANT_EXTRACTORS:
        value = extract(message, media_id)
        candidates[variant.value] = None if value is None else _render(value)
    candidates[AD_REPLY_KEY] = _ad_reply(data)
    return candidates


def classify_message(envelope: Any, storage_enabled: Optional[bool] = None) -> ClassifiedContent:
    """Classify an envelope into one variant tag and its content.

    `envelope` may be a `MessageEnvelope` or a plain mapping; anything else
    (including None) classifies as unknown. Never raises.

    Example:
        >>> classify_message({"key": {"id": "k1"}, "message": {"conversation": "hi"}})
        ClassifiedContent(message_type=<MessageVariant.CONVERSATION: 'conversation'>, content='hi')
    """
    candidates = extract_variants(envelope, storage_enabled)
    if not candidates:
        return ClassifiedContent()

    message_type = MessageVariant.UNKNOWN
    content: Optional[str] = None
    for variant, _ in VARIANT_EXTRACTORS:
        value = candidates[variant.value]
        if value is not None:
            message_type, content = variant, value
            break

    ad_reply = candidates[AD_REPLY_KEY]
    if ad_reply is not None:
        content = f"{content or ''}\n{ad_reply}".strip()

    return ClassifiedContent(message_type=message_type, content=content)


def get_conversation_message(envelope: Any, storage_enabled: Optional[bool] = None) -> Optional[str]:
    """Content text of `classify_message`, or None."""
    return classify_message(envelope, storage_enabled).content

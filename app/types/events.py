from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .enums import MessageVariant


class NormalizedEvent(BaseModel):
    """Adapter-agnostic normalized inbound event.

    Routers should depend on this model rather than provider-specific webhook
    shapes. Adapters are responsible for mapping their payloads to this common
    schema. Fields are optional where providers may omit data.

    Attributes:
        event: Provider-specific event name (e.g., "messages.upsert").
        instance: Name of the connected instance the event belongs to.
        message_id: Unique identifier of the inbound message.
        remote_jid: Canonical address of the conversation.
        participant: Canonical address of the author inside a group.
        from_me: True when the connected account sent the message.
        push_name: Display name reported by the sender.
        message_type: Classified content variant.
        content: Classified content text.
        status: Normalized delivery status for status events.

    Example:
        >>> from app.types import NormalizedEvent
        >>> NormalizedEvent(remote_jid="5511987654321@s.whatsapp.net", content="Hi")
    """

    event: Optional[str] = None
    instance: Optional[str] = None
    message_id: Optional[str] = None
    remote_jid: Optional[str] = None
    participant: Optional[str] = None
    from_me: bool = False
    push_name: Optional[str] = None
    message_type: Optional[MessageVariant] = None
    content: Optional[str] = None
    status: Optional[str] = None

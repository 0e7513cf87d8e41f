from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import MessageStatus


class MessageKey(BaseModel):
    """Identifying block of a message envelope.

    Fields:
        id: provider-assigned message id (also the default media identifier)
        remote_jid: conversation address (individual, group or broadcast)
        from_me: True when the message was sent by the connected account
        participant: author inside a group conversation
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = None
    remote_jid: Optional[str] = Field(default=None, alias="remoteJid")
    from_me: bool = Field(default=False, alias="fromMe")
    participant: Optional[str] = None


class MessageEnvelope(BaseModel):
    """Inbound message envelope.

    `message` holds at most one populated content variant (``conversation``,
    ``imageMessage``, ``listResponseMessage``...). It is kept as a free-form
    mapping because the set of shapes is open on the wire; the classifier
    only reads the shapes it knows and ignores the rest. `context_info` is the
    envelope-level context block that may carry an ``externalAdReply``.

    Example:
        >>> from app.types import MessageEnvelope
        >>> MessageEnvelope.model_validate({"key": {"id": "k1"}, "message": {"conversation": "hi"}})
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    key: Optional[MessageKey] = None
    message: Optional[Dict[str, Any]] = None
    context_info: Optional[Dict[str, Any]] = Field(default=None, alias="contextInfo")
    push_name: Optional[str] = Field(default=None, alias="pushName")
    message_timestamp: Optional[int] = Field(default=None, alias="messageTimestamp")

    def as_payload(self) -> Dict[str, Any]:
        """Wire-shaped dict (camelCase keys, unset fields dropped)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PreparedMessage(BaseModel):
    """Outbound message record built by the send endpoints.

    The record is what a session would hand to the network: the canonical
    destination in `key.remote_jid`, the content variant in `message`, and a
    `PENDING` status. Nothing is transmitted.
    """

    model_config = ConfigDict(populate_by_name=True)

    key: MessageKey
    message: Dict[str, Any]
    message_type: str = Field(alias="messageType")
    instance: Optional[str] = None
    status: MessageStatus = MessageStatus.PENDING
    options: Optional[Dict[str, Any]] = None

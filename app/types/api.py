"""Request field containers and the declarative request schemas.

Each schema is a pydantic model used by `app.utils.request_fields`. Field
descriptions double as the user-facing message when a field fails
validation, so they are written as instructions to the API caller.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import MediaType, PresenceType, RequestSource


class RequestFields(BaseModel):
    """The three candidate sources of request fields.

    Example:
        >>> from app.types import RequestFields
        >>> RequestFields(body={"number": "5511987654321"}, params={"instanceName": "main"})
    """

    body: Dict[str, Any] = Field(default_factory=dict)
    query: Dict[str, Any] = Field(default_factory=dict)
    params: Dict[str, Any] = Field(default_factory=dict)

    def source(self, name: RequestSource) -> Dict[str, Any]:
        return getattr(self, RequestSource(name).value)


class _RequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SendOptions(_RequestSchema):
    delay: Optional[int] = Field(
        default=None, ge=0, description="options.delay must be a non-negative integer (ms)"
    )
    mentions: Optional[List[str]] = None
    message_id: Optional[str] = Field(default=None, alias="messageId")
    quoted: Optional[Dict[str, Any]] = None


class _NumberedRequest(_RequestSchema):
    number: str = Field(
        min_length=1,
        description="number is required: a phone number or a recipient JID",
    )
    options: Optional[SendOptions] = None


class SendTextRequest(_NumberedRequest):
    text: str = Field(min_length=1, description="text is required and cannot be empty")


class SendLocationRequest(_NumberedRequest):
    latitude: float = Field(description="latitude is required and must be a number")
    longitude: float = Field(description="longitude is required and must be a number")
    name: Optional[str] = None
    address: Optional[str] = None


class ContactCard(_RequestSchema):
    full_name: str = Field(
        alias="fullName", min_length=1, description="contact.fullName is required"
    )
    wuid: Optional[str] = Field(
        default=None, pattern=r"^\d+$", description="contact.wuid must contain only digits"
    )
    phone_number: str = Field(
        alias="phoneNumber", min_length=1, description="contact.phoneNumber is required"
    )
    organization: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None


class SendContactRequest(_NumberedRequest):
    contact: List[ContactCard] = Field(
        min_length=1, description="contact must be a non-empty list of contact cards"
    )


class ReactionKey(_RequestSchema):
    id: str = Field(min_length=1, description="key.id is required")
    remote_jid: str = Field(
        alias="remoteJid", min_length=1, description="key.remoteJid is required"
    )
    from_me: bool = Field(default=False, alias="fromMe")


class SendReactionRequest(_RequestSchema):
    key: ReactionKey
    # An empty string removes a previous reaction.
    reaction: str = Field(max_length=16)


class SendMediaRequest(_NumberedRequest):
    mediatype: MediaType = Field(
        description="mediatype must be one of: image, document, video, audio, sticker"
    )
    media: str = Field(min_length=1, description="media is required: a URL or base64 data")
    mimetype: Optional[str] = None
    caption: Optional[str] = None
    file_name: Optional[str] = Field(default=None, alias="fileName")


class InstanceRequest(_RequestSchema):
    instance_name: str = Field(
        alias="instanceName",
        pattern=r"^[A-Za-z0-9_.-]+$",
        description=(
            "instanceName is required in the body, query or path "
            "(letters, digits, '.', '_' or '-')"
        ),
    )
    token: Optional[str] = None
    number: Optional[str] = None
    qrcode: Optional[bool] = None


class PresenceRequest(_NumberedRequest):
    presence: PresenceType = Field(
        description="presence must be one of: available, unavailable, composing, recording, paused"
    )
    delay: Optional[int] = Field(default=None, ge=0)


class WhatsAppNumbersRequest(_RequestSchema):
    numbers: List[str] = Field(
        min_length=1, description="numbers must be a non-empty list of phone numbers"
    )


class GroupJidRequest(_RequestSchema):
    group_jid: str = Field(alias="groupJid", pattern=r"^[\d-]+@g\.us$")


class NumberCheck(BaseModel):
    exists: bool = False
    jid: str


class WhatsAppNumbersResponse(BaseModel):
    numbers: List[NumberCheck]

"""Core types for the gateway's canonicalization pipeline.

This package centralizes all enums, envelope models, adapter protocols, and
request/result schemas in one place to keep the codebase discoverable and
maintainable. Most modules should import types from here rather than directly
from submodules.

Usage:
    from app.types import MessageEnvelope, CanonicalIdentifier, JidDomain
"""

from .enums import (
    JidDomain,
    MediaType,
    MessageStatus,
    MessageVariant,
    PresenceType,
    RequestSource,
)
from .events import NormalizedEvent
from .identifiers import CanonicalIdentifier
from .messages import MessageEnvelope, MessageKey, PreparedMessage
from .protocols import MessagingAdapter
from .results import ClassifiedContent
from .api import (
    ContactCard,
    GroupJidRequest,
    InstanceRequest,
    NumberCheck,
    PresenceRequest,
    ReactionKey,
    RequestFields,
    SendContactRequest,
    SendLocationRequest,
    SendMediaRequest,
    SendOptions,
    SendReactionRequest,
    SendTextRequest,
    WhatsAppNumbersRequest,
    WhatsAppNumbersResponse,
)

__all__ = [
    "JidDomain",
    "MediaType",
    "MessageStatus",
    "MessageVariant",
    "PresenceType",
    "RequestSource",
    "NormalizedEvent",
    "CanonicalIdentifier",
    "MessageEnvelope",
    "MessageKey",
    "PreparedMessage",
    "MessagingAdapter",
    "ClassifiedContent",
    "ContactCard",
    "GroupJidRequest",
    "InstanceRequest",
    "NumberCheck",
    "PresenceRequest",
    "ReactionKey",
    "RequestFields",
    "SendContactRequest",
    "SendLocationRequest",
    "SendMediaRequest",
    "SendOptions",
    "SendReactionRequest",
    "SendTextRequest",
    "WhatsAppNumbersRequest",
    "WhatsAppNumbersResponse",
]

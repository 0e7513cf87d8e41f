from __future__ import annotations

from enum import Enum


class JidDomain(str, Enum):
    """Domain suffixes a canonical address can carry.

    - INDIVIDUAL: a single user's phone-number address
    - GROUP: a group conversation (numeric or legacy ``creator-timestamp`` ids)
    - LINKED_DEVICE: an opaque linked-device identity
    - BROADCAST: broadcast lists and the status feed

    Example:
        >>> from app.types import JidDomain
        >>> JidDomain.GROUP.value
        'g.us'
    """

    INDIVIDUAL = "s.whatsapp.net"
    GROUP = "g.us"
    LINKED_DEVICE = "lid"
    BROADCAST = "broadcast"

    @property
    def suffix(self) -> str:
        return f"@{self.value}"


class RequestSource(str, Enum):
    """Where a request field came from."""

    BODY = "body"
    QUERY = "query"
    PARAMS = "params"


class MessageVariant(str, Enum):
    """Content shapes recognised by the classifier.

    Declaration order is the classification priority: when an envelope carries
    more than one populated shape, the member declared first wins. Do not
    reorder.
    """

    CONVERSATION = "conversation"
    EXTENDED_TEXT = "extendedTextMessage"
    CONTACT = "contactMessage"
    LOCATION = "locationMessage"
    VIEW_ONCE = "viewOnceMessageV2"
    LIST_RESPONSE = "listResponseMessage"
    RESPONSE_ROW_ID = "responseRowId"
    TEMPLATE_BUTTON_REPLY = "templateButtonReplyMessage"
    AUDIO = "audioMessage"
    IMAGE = "imageMessage"
    VIDEO = "videoMessage"
    DOCUMENT = "documentMessage"
    DOCUMENT_WITH_CAPTION = "documentWithCaptionMessage"
    UNKNOWN = "unknown"


class MessageStatus(str, Enum):
    """Delivery receipt labels, indexed by the numeric receipt code (0-5)."""

    ERROR = "ERROR"
    PENDING = "PENDING"
    SERVER_ACK = "SERVER_ACK"
    DELIVERY_ACK = "DELIVERY_ACK"
    READ = "READ"
    PLAYED = "PLAYED"


class PresenceType(str, Enum):
    """Presence states accepted by the presence endpoint."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    COMPOSING = "composing"
    RECORDING = "recording"
    PAUSED = "paused"


class MediaType(str, Enum):
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"
    AUDIO = "audio"
    STICKER = "sticker"

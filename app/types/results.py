from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import MessageVariant


class ClassifiedContent(BaseModel):
    """Result of classifying a message envelope.

    Attributes:
        message_type: First populated variant in priority order, or
            `MessageVariant.UNKNOWN` when none is populated.
        content: Text of the selected variant (tagged ``kind|mediaId[|caption]``
            for media), with any ad-reply body appended on a new line.

    Example:
        >>> from app.types import ClassifiedContent, MessageVariant
        >>> ClassifiedContent(message_type=MessageVariant.CONVERSATION, content="hi")
    """

    model_config = ConfigDict(populate_by_name=True)

    message_type: MessageVariant = Field(default=MessageVariant.UNKNOWN, alias="messageType")
    content: Optional[str] = None

    @property
    def is_unknown(self) -> bool:
        return self.message_type == MessageVariant.UNKNOWN

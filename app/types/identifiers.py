from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .enums import JidDomain


class CanonicalIdentifier(BaseModel):
    """A canonical ``localPart@domain`` address.

    `local_part` is a digit string for individual addresses. Group ids may
    keep one internal ``-`` (legacy ``creator-timestamp`` form). Addresses
    that were already canonical when they reached the canonicalizer are kept
    verbatim, so their local part is whatever the caller supplied.

    Example:
        >>> from app.types import CanonicalIdentifier, JidDomain
        >>> str(CanonicalIdentifier(local_part="5511987654321", domain=JidDomain.INDIVIDUAL))
        '5511987654321@s.whatsapp.net'
    """

    model_config = ConfigDict(frozen=True)

    local_part: str
    domain: JidDomain

    @property
    def jid(self) -> str:
        return f"{self.local_part}{self.domain.suffix}"

    @property
    def is_group(self) -> bool:
        return self.domain == JidDomain.GROUP

    def __str__(self) -> str:
        return self.jid

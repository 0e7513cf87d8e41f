"""Canonical address (JID) helpers.

Any phone number, partial identifier or already-canonical address goes in;
one ``localPart@domain`` address comes out. `create_jid` never raises: input
it cannot make sense of degrades to an address with an empty or partial local
part, which callers validate downstream when it matters.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List

from app.types import CanonicalIdentifier, JidDomain

logger = logging.getLogger("wagw.jid")

_DEVICE_SEGMENT = re.compile(r":\d+", re.ASCII)
_CANONICAL_SUFFIX = re.compile(r"@(g\.us|s\.whatsapp\.net|lid|broadcast)\Z")
_FORMATTING = re.compile(r"[\s+()]")
_ADDRESS_SEPARATOR = re.compile(r"[:@]")
_NOT_DIGIT_OR_HYPHEN = re.compile(r"[^0-9-]")
# country(2) area(2) extra digit(1) subscriber(8)
_BR_MOBILE = re.compile(r"(\d{2})(\d{2})\d(\d{8})", re.ASCII)

_GROUP_MIN_LENGTH = 18
_LEGACY_GROUP_MIN_LENGTH = 24

STATUS_BROADCAST_JID = f"status{JidDomain.BROADCAST.suffix}"


def _format_mx_or_ar(number: str) -> str:
    """Drop the mobile-prefix digit of 13-digit Mexican/Argentinian numbers."""
    country = number[:2]
    if country in ("52", "54") and len(number) == 13:
        return country + number[3:]
    return number


def _format_br(number: str) -> str:
    """Drop the extra ninth digit of Brazilian mobiles where the network omits it.

    The digit is kept for subscriber numbers starting below 7 and for area
    codes below 31.
    """
    match = _BR_MOBILE.fullmatch(number)
    if match is None:
        return number
    country, area, subscriber = match.groups()
    if country != "55":
        return number
    if int(subscriber[0]) < 7 or int(area) < 31:
        return number
    return f"{country}{area}{subscriber}"


def _is_group_number(number: str) -> bool:
    if "-" in number and len(number) >= _LEGACY_GROUP_MIN_LENGTH:
        return True
    return len(number) >= _GROUP_MIN_LENGTH


def canonicalize(raw: Any) -> CanonicalIdentifier:
    """Convert any number or address into a `CanonicalIdentifier`.

    Steps, in order:
    1. drop the first ``:<digits>`` linked-device segment
    2. keep addresses that already end in a known domain suffix as they are
    3. strip formatting, anything after ``:``/``@``, and every character that
       is not a digit or ``-``
    4. long strings (or long hyphenated legacy ids) are group addresses
    5. apply the Mexico/Argentina and Brazil mobile-digit rules
    6. everything else is an individual address

    Example:
        >>> str(canonicalize("+55 11 98765-4321"))
        '5511987654321@s.whatsapp.net'
    """
    if raw is None:
        raw = ""
    elif not isinstance(raw, str):
        raw = str(raw)

    number = _DEVICE_SEGMENT.sub("", raw, count=1)

    if _CANONICAL_SUFFIX.search(number):
        local_part, _, domain = number.rpartition("@")
        return CanonicalIdentifier(local_part=local_part, domain=JidDomain(domain))

    number = _FORMATTING.sub("", number)
    number = _ADDRESS_SEPARATOR.split(number, maxsplit=1)[0]
    number = _NOT_DIGIT_OR_HYPHEN.sub("", number)

    if _is_group_number(number):
        return CanonicalIdentifier(local_part=number, domain=JidDomain.GROUP)

    number = number.replace("-", "")
    number = _format_mx_or_ar(number)
    number = _format_br(number)

    if not number:
        logger.debug("address %r has no digits; returning empty local part", raw)
    return CanonicalIdentifier(local_part=number, domain=JidDomain.INDIVIDUAL)


def create_jid(raw: Any) -> str:
    """Serialized form of `canonicalize`."""
    return canonicalize(raw).jid


def canonicalize_many(numbers: Iterable[Any]) -> List[str]:
    return [create_jid(number) for number in numbers]


def split_jid(jid: str) -> CanonicalIdentifier:
    """Parse an already-serialized address.

    Raises:
        ValueError: if `jid` does not end in a known domain suffix.
    """
    if not isinstance(jid, str) or not _CANONICAL_SUFFIX.search(jid):
        raise ValueError(f"Not a canonical address: {jid!r}")
    local_part, _, domain = jid.rpartition("@")
    return CanonicalIdentifier(local_part=local_part, domain=JidDomain(domain))


def _has_domain(jid: Any, domain: JidDomain) -> bool:
    return isinstance(jid, str) and jid.endswith(domain.suffix)


def is_group_jid(jid: Any) -> bool:
    return _has_domain(jid, JidDomain.GROUP)


def is_status_broadcast(jid: Any) -> bool:
    """True for the status feed address, not for ordinary broadcast lists."""
    return jid == STATUS_BROADCAST_JID

"""Delivery status helpers."""

from __future__ import annotations

from typing import Any, Dict

from app.types import MessageStatus

_RECEIPT_CODES: Dict[int, MessageStatus] = dict(enumerate(MessageStatus))


def render_status(code: Any) -> MessageStatus:
    """Map a numeric receipt code (0-5) to its label.

    Raises:
        ValueError: for codes outside 0-5.
    """
    try:
        return _RECEIPT_CODES[int(code)]
    except (KeyError, TypeError, ValueError):
        raise ValueError(f"Unknown receipt code: {code!r}") from None


def normalize_status(raw: Any) -> str:
    return str(raw or "").strip().upper()

import pytest

from app.types import MessageStatus
from app.utils.status import normalize_status, render_status


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, MessageStatus.ERROR),
        (1, MessageStatus.PENDING),
        (2, MessageStatus.SERVER_ACK),
        (3, MessageStatus.DELIVERY_ACK),
        (4, MessageStatus.READ),
        (5, MessageStatus.PLAYED),
    ],
)
def test_render_status(code: int, expected: MessageStatus) -> None:
    assert render_status(code) is expected


@pytest.mark.parametrize("code", [6, -7, "x", None])
def test_render_status_unknown(code) -> None:
    with pytest.raises(ValueError):
        render_status(code)


def test_normalize_status() -> None:
    assert normalize_status(" delivered ") == "DELIVERED"
    assert normalize_status(None) == ""

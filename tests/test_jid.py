import pytest

from app.types import CanonicalIdentifier, JidDomain
from app.utils.jid import (
    canonicalize,
    canonicalize_many,
    create_jid,
    is_group_jid,
    is_status_broadcast,
    split_jid,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        # Brazil, area code below 31 keeps the ninth digit
        ("+55 11 98765-4321", "5511987654321@s.whatsapp.net"),
        # Brazil, area 41 and subscriber starting with 9 drops it
        ("5541999999999", "554199999999@s.whatsapp.net"),
        # Mexico, 13 digits drops the mobile prefix digit
        ("5215512345678", "525512345678@s.whatsapp.net"),
        # hyphenated legacy group id
        ("123456789012345678-1", "123456789012345678-1@g.us"),
    ],
)
def test_create_jid_scenarios(raw: str, expected: str) -> None:
    assert create_jid(raw) == expected


@pytest.mark.parametrize(
    "jid",
    [
        "5511987654321@s.whatsapp.net",
        "120363025246125486@g.us",
        "123456789012345678-1@g.us",
        "10987654321@lid",
        "status@broadcast",
    ],
)
def test_canonical_addresses_are_unchanged(jid: str) -> None:
    assert create_jid(jid) == jid
    assert create_jid(create_jid(jid)) == jid


@pytest.mark.parametrize("raw", ["", "   ", "abc", "++()", None, 12345, "@", ":"])
def test_create_jid_never_raises(raw) -> None:
    result = canonicalize(raw)
    assert isinstance(result, CanonicalIdentifier)


def test_empty_input_degrades_to_empty_local_part() -> None:
    assert create_jid("") == "@s.whatsapp.net"
    assert create_jid("not a number") == "@s.whatsapp.net"


def test_device_segment_is_dropped() -> None:
    assert create_jid("5511987654321:12@s.whatsapp.net") == "5511987654321@s.whatsapp.net"


def test_only_first_device_segment_is_dropped() -> None:
    # the second segment is cut by the separator rule instead
    assert create_jid("5511987654321:1:2") == "5511987654321@s.whatsapp.net"


def test_unknown_domain_is_rebuilt_as_individual() -> None:
    assert create_jid("5511987654321@c.us") == "5511987654321@s.whatsapp.net"


def test_long_numbers_are_groups() -> None:
    assert create_jid("120363025246125486") == "120363025246125486@g.us"


def test_short_hyphenated_numbers_are_individual() -> None:
    assert create_jid("55-11-98765-4321") == "5511987654321@s.whatsapp.net"


def test_argentina_drops_mobile_prefix() -> None:
    assert create_jid("5491123456789") == "541123456789@s.whatsapp.net"


@pytest.mark.parametrize(
    "raw, expected",
    [
        # subscriber starts below 7
        ("5541912345678", "5541912345678@s.whatsapp.net"),
        # area code 21 is below 31
        ("5521998765432", "5521998765432@s.whatsapp.net"),
        # area 31 with subscriber starting at 8
        ("5531987654321", "553187654321@s.whatsapp.net"),
        # 12-digit numbers are left alone
        ("553187654321", "553187654321@s.whatsapp.net"),
    ],
)
def test_brazil_ninth_digit(raw: str, expected: str) -> None:
    assert create_jid(raw) == expected


def test_brazil_rule_needs_brazil_country_code() -> None:
    assert create_jid("4471987654321") == "4471987654321@s.whatsapp.net"


def test_canonicalize_returns_parts() -> None:
    ident = canonicalize("+55 (11) 98765-4321")
    assert ident.local_part == "5511987654321"
    assert ident.domain is JidDomain.INDIVIDUAL
    assert str(ident) == "5511987654321@s.whatsapp.net"
    assert not ident.is_group


def test_canonicalize_many_keeps_order() -> None:
    assert canonicalize_many(["5511987654321", "120363025246125486@g.us"]) == [
        "5511987654321@s.whatsapp.net",
        "120363025246125486@g.us",
    ]


def test_split_jid() -> None:
    ident = split_jid("120363025246125486@g.us")
    assert ident.local_part == "120363025246125486"
    assert ident.is_group


def test_split_jid_rejects_unknown_domain() -> None:
    with pytest.raises(ValueError):
        split_jid("5511987654321@c.us")


def test_domain_predicates() -> None:
    assert is_group_jid("1@g.us")
    assert not is_group_jid("1@s.whatsapp.net")
    assert not is_group_jid(None)
    assert is_status_broadcast("status@broadcast")
    assert not is_status_broadcast("1234@broadcast")

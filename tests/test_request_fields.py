import pytest
from pydantic import BaseModel, Field

from app.types import (
    InstanceRequest,
    RequestFields,
    RequestSource,
    SendContactRequest,
    SendReactionRequest,
    SendTextRequest,
)
from app.utils.request_fields import (
    CREATE_PRECEDENCE,
    DEFAULT_PRECEDENCE,
    DELETE_PRECEDENCE,
    ValidationFailure,
    derive_message,
    require_group_jid,
    require_query_param,
    resolve_and_validate,
    resolve_fields,
    resolve_instance_name,
    validate_fields,
)


def test_later_source_wins() -> None:
    merged = resolve_fields(
        {"body": {"a": 1}, "query": {"a": 2, "b": 3}},
        (RequestSource.QUERY, RequestSource.BODY),
    )
    assert merged == {"a": 1, "b": 3}


def test_named_precedences() -> None:
    fields = RequestFields(
        body={"instanceName": "from-body"},
        query={"instanceName": "from-query"},
        params={"instanceName": "from-path"},
    )
    assert resolve_fields(fields, DEFAULT_PRECEDENCE)["instanceName"] == "from-path"
    assert resolve_fields(fields, CREATE_PRECEDENCE)["instanceName"] == "from-body"
    assert resolve_fields(fields, DELETE_PRECEDENCE)["instanceName"] == "from-query"


def test_missing_sources_contribute_nothing() -> None:
    assert resolve_fields({"body": None, "query": "x"}) == {}


def test_missing_field_uses_description() -> None:
    with pytest.raises(ValidationFailure) as excinfo:
        resolve_and_validate(RequestFields(body={"number": "5511987654321"}), SendTextRequest)
    assert excinfo.value.messages == ["text is required and cannot be empty"]


def test_missing_field_without_description_is_derived() -> None:
    body = {"key": {"id": "m1", "remoteJid": "5511987654321@s.whatsapp.net"}}
    with pytest.raises(ValidationFailure) as excinfo:
        resolve_and_validate(RequestFields(body=body), SendReactionRequest)
    assert excinfo.value.messages == ["reaction: Field required"]


def test_every_failure_is_reported_once_joined() -> None:
    with pytest.raises(ValidationFailure) as excinfo:
        resolve_and_validate(RequestFields(), SendTextRequest)
    assert str(excinfo.value) == (
        "number is required: a phone number or a recipient JID\n"
        "text is required and cannot be empty"
    )
    assert excinfo.value.message == str(excinfo.value)


def test_nested_field_description() -> None:
    body = {"number": "5511987654321", "contact": [{"fullName": "", "phoneNumber": "1"}]}
    with pytest.raises(ValidationFailure) as excinfo:
        resolve_and_validate(RequestFields(body=body), SendContactRequest)
    assert excinfo.value.messages == ["contact.fullName is required"]


def test_fields_found_in_any_source() -> None:
    fields = RequestFields(query={"number": "5511987654321"}, body={"text": "hi"})
    data = resolve_and_validate(fields, SendTextRequest)
    assert data.number == "5511987654321"
    assert data.text == "hi"


def test_validate_fields_returns_model() -> None:
    data = validate_fields({"instanceName": "main"}, InstanceRequest)
    assert data.instance_name == "main"


def test_root_level_error_is_bare_message() -> None:
    class Strict(BaseModel):
        value: int = Field(gt=0)

    assert derive_message({"loc": (), "msg": "Input should be a valid dictionary"}) == (
        "Input should be a valid dictionary"
    )
    with pytest.raises(ValidationFailure) as excinfo:
        validate_fields({"value": 0}, Strict)
    assert excinfo.value.messages == ["value: Input should be greater than 0"]


def test_http_location_prefix_is_stripped() -> None:
    error = {"loc": ("body", "options", "delay"), "msg": "Input should be greater than or equal to 0"}
    assert derive_message(error, strip_prefix=True) == (
        "options.delay: Input should be greater than or equal to 0"
    )
    assert derive_message(error) == "body.options.delay: Input should be greater than or equal to 0"


def test_model_fields_named_like_locations_are_kept() -> None:
    class Target(BaseModel):
        number: str = Field(description="number is required")

    class Envelope(BaseModel):
        instance: str
        body: Target

    with pytest.raises(ValidationFailure) as excinfo:
        validate_fields({"instance": "main", "body": {}}, Envelope)
    assert excinfo.value.messages == ["number is required"]


def test_list_index_in_location_is_rendered() -> None:
    error = {"loc": ("body", "contact", 0, "phoneNumber"), "msg": "Field required"}
    assert derive_message(error, strip_prefix=True) == "contact.0.phoneNumber: Field required"


def test_resolve_instance_name_checks_highest_precedence_first() -> None:
    fields = RequestFields(body={"instanceName": "b"}, query={"instanceName": "q"})
    assert resolve_instance_name(fields, DELETE_PRECEDENCE) == "q"
    assert resolve_instance_name(fields, CREATE_PRECEDENCE) == "b"
    assert resolve_instance_name(RequestFields()) is None


def test_require_query_param() -> None:
    assert require_query_param(RequestFields(query={"inviteCode": "AbC"}), "inviteCode") == "AbC"
    with pytest.raises(ValidationFailure) as excinfo:
        require_query_param(RequestFields(body={"inviteCode": "AbC"}), "inviteCode")
    assert excinfo.value.messages == ['The "inviteCode" query parameter is required.']


def test_require_group_jid_prefers_body_and_appends_domain() -> None:
    fields = RequestFields(body={"groupJid": "120363"}, query={"groupJid": "999@g.us"})
    assert require_group_jid(fields) == "120363@g.us"
    assert require_group_jid(RequestFields(query={"groupJid": "999@g.us"})) == "999@g.us"


def test_require_group_jid_missing() -> None:
    with pytest.raises(ValidationFailure):
        require_group_jid(RequestFields())

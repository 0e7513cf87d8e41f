"""Pure helpers for the gateway's request and message pipeline."""

from .conversation import classify_message, extract_variants, get_conversation_message
from .jid import canonicalize, canonicalize_many, create_jid, split_jid
from .request_fields import (
    CREATE_PRECEDENCE,
    DEFAULT_PRECEDENCE,
    DELETE_PRECEDENCE,
    ValidationFailure,
    require_group_jid,
    require_query_param,
    resolve_and_validate,
    resolve_fields,
    resolve_instance_name,
    validate_fields,
)
from .status import normalize_status, render_status

__all__ = [
    "classify_message",
    "extract_variants",
    "get_conversation_message",
    "canonicalize",
    "canonicalize_many",
    "create_jid",
    "split_jid",
    "CREATE_PRECEDENCE",
    "DEFAULT_PRECEDENCE",
    "DELETE_PRECEDENCE",
    "ValidationFailure",
    "require_group_jid",
    "require_query_param",
    "resolve_and_validate",
    "resolve_fields",
    "resolve_instance_name",
    "validate_fields",
    "normalize_status",
    "render_status",
]

"""Request field resolution and schema validation.

A request can carry the same field in its body, its query string and its path
parameters. `resolve_fields` merges the three under an explicit precedence
order (later sources win), and `validate_fields` checks the merged record
against a pydantic schema, turning every failed constraint into one line of a
single `ValidationFailure`.
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
    get_args,
)

from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from app.types import JidDomain, RequestFields, RequestSource
from app.utils.jid import is_group_jid

logger = logging.getLogger("wagw.validation")

SchemaT = TypeVar("SchemaT", bound=BaseModel)
Sources = Union[RequestFields, Mapping[str, Any]]
Precedence = Tuple[RequestSource, ...]

# Later entries overwrite earlier ones.
DEFAULT_PRECEDENCE: Precedence = (RequestSource.BODY, RequestSource.QUERY, RequestSource.PARAMS)
CREATE_PRECEDENCE: Precedence = (RequestSource.PARAMS, RequestSource.QUERY, RequestSource.BODY)
DELETE_PRECEDENCE: Precedence = (RequestSource.PARAMS, RequestSource.BODY, RequestSource.QUERY)

# Location prefixes FastAPI adds to request errors; not part of the field path.
_INSTANCE_PREFIXES = {"body", "query", "path", "header", "cookie"}


class ValidationFailure(ValueError):
    """One or more request fields failed validation.

    `messages` holds one entry per failed constraint; `str(exc)` joins them
    with newlines.
    """

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages: List[str] = list(messages)
        super().__init__("\n".join(self.messages))

    @property
    def message(self) -> str:
        return "\n".join(self.messages)


def _source(sources: Sources, name: RequestSource) -> Mapping[str, Any]:
    if isinstance(sources, RequestFields):
        value: Any = sources.source(name)
    elif isinstance(sources, Mapping):
        value = sources.get(name.value)
    else:
        value = None
    return value if isinstance(value, Mapping) else {}


def resolve_fields(sources: Sources, precedence: Iterable[RequestSource] = DEFAULT_PRECEDENCE) -> Dict[str, Any]:
    """Merge request sources in `precedence` order; later sources win per key.

    Example:
        >>> resolve_fields({"body": {"a": 1}, "query": {"a": 2, "b": 3}},
        ...                (RequestSource.QUERY, RequestSource.BODY))
        {'a': 1, 'b': 3}
    """
    merged: Dict[str, Any] = {}
    for name in precedence:
        merged.update(_source(sources, RequestSource(name)))
    return merged


def _nested_model(annotation: Any) -> Optional[Type[BaseModel]]:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in get_args(annotation):
        found = _nested_model(arg)
        if found is not None:
            return found
    return None


def _lookup_field(model: Type[BaseModel], key: str) -> Optional[FieldInfo]:
    for name, field in model.model_fields.items():
        if key == name or key == field.alias:
            return field
    return None


def _field_description(schema: Optional[Type[BaseModel]], loc: Sequence[Any]) -> Optional[str]:
    """Description of the field an error location points at, if the schema has one."""
    model = schema
    description: Optional[str] = None
    for part in loc:
        if isinstance(part, int):
            continue
        if model is None:
            return None
        field = _lookup_field(model, str(part))
        if field is None:
            return None
        description = field.description
        model = _nested_model(field.annotation)
    return description


def _error_loc(error: Mapping[str, Any], strip_prefix: bool) -> Tuple[Any, ...]:
    loc = tuple(error.get("loc", ()))
    if strip_prefix and loc and loc[0] in _INSTANCE_PREFIXES:
        loc = loc[1:]
    return loc


def derive_message(error: Mapping[str, Any], strip_prefix: bool = False) -> str:
    """Fallback message for a failed constraint: ``path: reason``.

    `strip_prefix` drops the leading ``body``/``query``/``path`` part that
    FastAPI puts on request errors.
    """
    path = ".".join(str(part) for part in _error_loc(error, strip_prefix))
    reason = str(error.get("msg", "is invalid"))
    return f"{path}: {reason}" if path else reason


def format_validation_errors(
    errors: Iterable[Mapping[str, Any]],
    schema: Optional[Type[BaseModel]] = None,
    strip_prefix: bool = False,
) -> List[str]:
    """Render pydantic errors, preferring the schema's field descriptions."""
    messages: List[str] = []
    for error in errors:
        if schema is not None:
            description = _field_description(schema, _error_loc(error, strip_prefix))
            if description:
                messages.append(description)
                continue
        messages.append(derive_message(error, strip_prefix))
    return messages


def validate_fields(record: Mapping[str, Any], schema: Type[SchemaT]) -> SchemaT:
    """Validate a merged record; raise one `ValidationFailure` listing every failure."""
    try:
        return schema.model_validate(dict(record))
    except ValidationError as exc:
        failure = ValidationFailure(format_validation_errors(exc.errors(), schema))
        logger.error(failure.message)
        raise failure from exc


def resolve_and_validate(
    sources: Sources,
    schema: Type[SchemaT],
    precedence: Iterable[RequestSource] = DEFAULT_PRECEDENCE,
) -> SchemaT:
    return validate_fields(resolve_fields(sources, precedence), schema)


def resolve_instance_name(
    sources: Sources, precedence: Sequence[RequestSource] = DEFAULT_PRECEDENCE
) -> Optional[str]:
    """First non-empty ``instanceName``, checking the highest-precedence source first."""
    for name in reversed(tuple(precedence)):
        value = _source(sources, RequestSource(name)).get("instanceName")
        if value:
            return str(value)
    return None


def require_query_param(sources: Sources, name: str, message: Optional[str] = None) -> Any:
    value = _source(sources, RequestSource.QUERY).get(name)
    if not value:
        raise ValidationFailure([message or f'The "{name}" query parameter is required.'])
    return value


def require_group_jid(sources: Sources) -> str:
    """Group address from the body, else from the query string, with ``@g.us`` ensured."""
    group_jid = _source(sources, RequestSource.BODY).get("groupJid")
    if group_jid is None:
        from_query = _source(sources, RequestSource.QUERY).get("groupJid")
        group_jid = from_query if isinstance(from_query, str) else ""
    if not group_jid:
        raise ValidationFailure(
            ['The "groupJid" parameter must be provided in the query (e.g. ?groupJid=120362@g.us).']
        )
    group_jid = str(group_jid)
    if not is_group_jid(group_jid):
        group_jid += JidDomain.GROUP.suffix
    return group_jid

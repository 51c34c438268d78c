import re
from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import SchemaValidator, core_schema

from ..models.errors import DecodingError

T = TypeVar("T")

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _check_date_format(value: Any) -> Any:
    if isinstance(value, str) and not DATE_PATTERN.fullmatch(value):
        raise ValueError("date must be formatted as yyyy-MM-dd")
    return value


def _with_strict_dates(schema: Any) -> Any:
    """Copy of ``schema`` where every ``date`` node only accepts ``yyyy-MM-dd``.

    Builds new containers; the schema shared with the model is left untouched.
    """
    if isinstance(schema, dict):
        rebuilt = {key: _with_strict_dates(value) for key, value in schema.items()}
        if rebuilt.get("type") == "date":
            return core_schema.no_info_before_validator_function(
                _check_date_format, rebuilt
            )
        return rebuilt
    if isinstance(schema, list):
        return [_with_strict_dates(item) for item in schema]
    return schema


def _build_validator(shape: Any) -> SchemaValidator:
    return SchemaValidator(_with_strict_dates(TypeAdapter(shape).core_schema))


@lru_cache(maxsize=128)
def _validator(shape: Any) -> SchemaValidator:
    return _build_validator(shape)


def decode(data: bytes, shape: Type[T]) -> T:
    """Decode a JSON payload into ``shape``.

    Validation runs in strict mode: ``date`` fields only accept ``yyyy-MM-dd``
    strings (timestamps are rejected) and values are never coerced between types.

    Args:
        data: Raw response payload.
        shape: Target type, e.g. a pydantic model, ``list[Model]`` or ``dict``.

    Returns:
        The decoded value.

    Raises:
        DecodingError: If the payload is malformed or does not match ``shape``.
    """
    try:
        validator = _validator(shape)
    except TypeError:
        # unhashable shapes skip the cache
        validator = _build_validator(shape)

    try:
        return validator.validate_json(data, strict=True)
    except ValidationError as e:
        raise DecodingError(str(e)) from e

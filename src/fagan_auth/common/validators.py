from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import ValidationError


def camel_case(field_name: str) -> str:
    head, *rest = field_name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _lookup(payload: Mapping[str, Any], field_name: str) -> Any:
    # The shell's invoke() sends camelCase argument names; accept either spelling.
    if field_name in payload:
        return payload[field_name]
    return payload.get(camel_case(field_name))


def require_str(payload: Mapping[str, Any], field_name: str) -> str:
    """Pull a string field out of a decoded request payload.

    ``user_id`` is also found as ``userId``. Empty strings are allowed: the
    core decides what they mean.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError(f"Expected an object containing '{field_name}'")
    value = _lookup(payload, field_name)
    if not isinstance(value, str):
        raise ValidationError(f"Field '{field_name}' is required and must be a string")
    return value


def require_mapping(payload: Mapping[str, Any], field_name: str) -> Mapping[str, Any]:
    value = _lookup(payload, field_name) if isinstance(payload, Mapping) else None
    if not isinstance(value, Mapping):
        raise ValidationError(f"Field '{field_name}' is required and must be an object")
    return value

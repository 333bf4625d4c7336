"""
Human-readable messages for request validation errors.

Pydantic reports every violated constraint; clients only get the first one as
the error message, phrased per field.
"""

from typing import Any, Mapping, Sequence

FIELD_LABELS = {
    "body": "Request body",
    "name": "Name",
    "email": "E-mail",
    "description": "Description",
    "is_on_diet": "Is on diet",
    "date": "Date",
}

_TYPE_NAMES = {
    "string_type": "a string",
    "bool_type": "a boolean",
    "datetime_type": "a date",
    "model_attributes_type": "a JSON object",
    "model_type": "a JSON object",
    "dict_type": "a JSON object",
}


def field_label(loc: Sequence[Any]) -> str:
    """Label for the innermost named field of a pydantic error location"""
    for part in reversed(loc):
        if isinstance(part, str):
            return FIELD_LABELS.get(part, part.replace("_", " ").capitalize())
    return "Value"


def error_message(error: Mapping[str, Any]) -> str:
    """Render a single pydantic error dict as a message"""
    label = field_label(error.get("loc", ()))
    kind = error.get("type", "")

    if kind == "missing":
        return f"{label} is required"
    if kind in _TYPE_NAMES:
        return f"{label} must be {_TYPE_NAMES[kind]}"
    if kind == "string_too_short":
        min_length = (error.get("ctx") or {}).get("min_length", 1)
        return f"{label} must contain at least {min_length} character(s)"
    if kind.startswith("datetime"):
        return f"{label} must be a valid date"
    if kind == "json_invalid":
        return "Request body must be valid JSON"
    if label == FIELD_LABELS["email"] and kind == "value_error":
        return "Invalid email address"
    return f"{label}: {error.get('msg', 'invalid value')}"


def first_error_message(errors: Sequence[Mapping[str, Any]]) -> str:
    if not errors:
        return "Request validation failed"
    return error_message(errors[0])

from typing import Any, Dict, Mapping

from marshmallow import Schema, ValidationError as SchemaError

from diet_tracker.errors import ValidationError
from diet_tracker.schemas.fields import MISSING

ALL_FIELDS_REQUIRED = "All fields are required"


def _flatten(messages) -> list:
    if isinstance(messages, str):
        return [messages]
    if isinstance(messages, Mapping):
        out = []
        for value in messages.values():
            out.extend(_flatten(value))
        return out
    if isinstance(messages, (list, tuple)):
        out = []
        for value in messages:
            out.extend(_flatten(value))
        return out
    return [str(messages)]


def load_payload(schema: Schema, data: Mapping[str, Any], missing_message: str = ALL_FIELDS_REQUIRED) -> Dict[str, Any]:
    """Run ``schema.load`` and turn marshmallow errors into a 400.

    Missing or blank required fields collapse into ``missing_message``; any
    other failure reports the first field message.
    """
    try:
        return schema.load(data)
    except SchemaError as exc:
        messages = _flatten(exc.messages)
        if not messages or MISSING in messages:
            raise ValidationError(missing_message) from exc
        raise ValidationError(messages[0]) from exc

from __future__ import annotations

from flask import request
from marshmallow import Schema, ValidationError, fields, post_load, validate
from werkzeug.routing import IntegerConverter

from .errors import InvalidBodyError

# largest value a SQLite INTEGER column can hold
MAX_ROW_ID = 2**63 - 1


class RowIdConverter(IntegerConverter):
    """``<row_id:...>`` URL segment: an ``int`` the store can hold, else 404."""

    def __init__(self, map, *args, **kwargs):
        kwargs.setdefault("max", MAX_ROW_ID)
        super().__init__(map, *args, **kwargs)


def row_id(**kwargs) -> fields.Int:
    """Strict integer reference to another row."""
    return fields.Int(strict=True, validate=validate.Range(min=0, max=MAX_ROW_ID), **kwargs)


def _not_blank(value: str) -> None:
    if not value.strip():
        raise ValidationError("Field may not be blank.")


def required_str(max_length: int) -> fields.Str:
    return fields.Str(
        required=True,
        validate=[_not_blank, validate.Length(max=max_length)],
        error_messages={"required": "Field is required.", "null": "Field is required."},
    )


def optional_str(max_length: int | None = None) -> fields.Str:
    validators = [validate.Length(max=max_length)] if max_length else []
    return fields.Str(allow_none=True, load_default=None, validate=validators)


class IsoDate(fields.Date):
    """Accepts ``YYYY-MM-DD`` and hands the normalized ISO string on."""

    def _deserialize(self, value, attr, data, **kwargs):
        return super()._deserialize(value, attr, data, **kwargs).isoformat()


class StrictNumber(fields.Float):
    """A float field that refuses numeric strings and booleans."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self.make_error("invalid")
        return super()._deserialize(value, attr, data, **kwargs)


class RecordSchema(Schema):
    """Base for request bodies: unknown keys are rejected, blank optionals become None."""

    @post_load
    def normalize_strings(self, data, **kwargs):
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip() or None
            cleaned[key] = value
        return cleaned


def read_json() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise InvalidBodyError("Request body must be a JSON object")
    return payload


def describe_errors(err: ValidationError) -> str:
    messages = err.messages
    if isinstance(messages, dict):
        return "Missing or invalid fields: " + ", ".join(sorted(messages))
    return "Invalid request body"

from marshmallow import fields, validate

from ..validation import (
    MAX_ROW_ID,
    RecordSchema,
    StrictNumber,
    optional_str,
    required_str,
    row_id,
)


class PetCreateSchema(RecordSchema):
    """POST /pets body."""

    name = required_str(120)
    species = required_str(50)
    breed = optional_str(120)
    age = fields.Int(
        strict=True,
        allow_none=True,
        load_default=None,
        validate=validate.Range(min=0, max=MAX_ROW_ID),
    )
    weight = StrictNumber(allow_none=True, load_default=None, validate=validate.Range(min=0))
    health_condition = optional_str(255)
    owner_id = row_id(
        required=True,
        error_messages={"required": "Field is required.", "null": "Field is required."},
    )


class PetUpdateSchema(PetCreateSchema):
    """
    PUT /pets/<id> body. Every descriptive field is replaced (absent means NULL);
    ``owner_id`` may be omitted to keep the current owner.
    """

    owner_id = row_id(allow_none=True, load_default=None)

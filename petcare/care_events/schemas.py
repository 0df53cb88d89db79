
from ..validation import IsoDate, RecordSchema, optional_str, required_str, row_id

_REQUIRED = {"required": "Field is required.", "null": "Field is required."}


class CareEventUpdateSchema(RecordSchema):
    type = required_str(80)
    description = optional_str()
    date = IsoDate(required=True, error_messages=_REQUIRED)


class CareEventCreateSchema(CareEventUpdateSchema):
    pet_id = row_id(required=True, error_messages=_REQUIRED)

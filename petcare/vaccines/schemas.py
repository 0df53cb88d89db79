
from ..validation import IsoDate, RecordSchema, required_str, row_id

_REQUIRED = {"required": "Field is required.", "null": "Field is required."}


class VaccineUpdateSchema(RecordSchema):
    name = required_str(120)
    application_date = IsoDate(required=True, error_messages=_REQUIRED)


class VaccineCreateSchema(VaccineUpdateSchema):
    pet_id = row_id(required=True, error_messages=_REQUIRED)

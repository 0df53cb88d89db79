from ..validation import RecordSchema, optional_str, required_str


class OwnerCreateSchema(RecordSchema):
    """POST /owners body. Only the name is mandatory."""

    name = required_str(120)
    email = optional_str(255)
    phone = optional_str(40)


class OwnerUpdateSchema(OwnerCreateSchema):
    """PUT /owners/<id> body: full replace, and the email becomes mandatory."""

    email = required_str(255)

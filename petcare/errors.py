from __future__ import annotations


class PetCareError(Exception):
    """Base class for errors the HTTP layer maps to a status code."""

    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error_code": self.error_code, "message": self.message}


class NotFoundError(PetCareError):
    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, label: str, item_id: int):
        super().__init__(f"{label} not found")
        self.label = label
        self.item_id = item_id


class StorageError(PetCareError):
    """The store rejected or failed a statement; carries the driver detail."""

    status_code = 500
    error_code = "STORAGE_ERROR"

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.detail = detail

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["detail"] = self.detail
        return payload


class InvalidBodyError(PetCareError):
    status_code = 400
    error_code = "INVALID_BODY"

"""
Errors raised by the check-in store.

Each error carries the HTTP status the API layer answers with, so route
handlers can let them propagate to the exception handler in ``main``.
"""
from fastapi import status


class CheckInError(Exception):
    """Base class for store failures; unexpected unless subclassed"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CheckInError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, key, field: str = "id", message: str = None):
        super().__init__(message or f"{entity} with {field} {key} not found")
        self.entity = entity
        self.key = key


class RecordValidationError(CheckInError):
    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateRecordError(RecordValidationError):
    def __init__(self, entity: str, field: str, value):
        super().__init__(f"{entity} with {field} {value} already exists")
        self.entity = entity
        self.field = field


class InvalidCodeError(CheckInError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid verification code"):
        super().__init__(message)


class NotificationNotVerifiedError(CheckInError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Mobile number is not verified for notifications"):
        super().__init__(message)

"""
Request errors raised by the booking service
The router translates them to HTTP status codes.
"""
from enum import Enum


class ErrorKind(str, Enum):
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"


_STATUS_CODES = {
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
}


class RequestError(Exception):
    """Business rejection carrying an error kind and an HTTP status"""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.kind]


class ForbiddenError(RequestError):
    """Ineligible ticket, duplicate or missing booking, full room"""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(ErrorKind.FORBIDDEN, message)


class NotFoundError(RequestError):
    """Missing booking or room"""

    def __init__(self, message: str = "Not Found"):
        super().__init__(ErrorKind.NOT_FOUND, message)

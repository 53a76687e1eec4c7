"""Application error surfaced to callers of commands and queries."""

from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    """Failure category, each with its HTTP-like status."""

    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL = "INTERNAL"

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.CONFLICT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.INTERNAL: 500,
}


class ApiError(Exception):
    """Single error type every command converts its failures into.

    Carries a user-facing message, a numeric status code and the kind, so
    callers can tell a duplicate email from bad credentials from an
    unexpected failure.

    Examples:
        >>> err = ApiError.conflict("Email already taken")
        >>> err.status_code
        400
        >>> err.to_dict()
        {'message': 'Email already taken', 'status': 400, 'code': 'CONFLICT'}
    """

    def __init__(self, message: str, kind: ErrorKind, status_code: int | None = None):
        self.message = message
        self.kind = kind
        self.status_code = status_code if status_code is not None else kind.status_code
        super().__init__(message)

    @classmethod
    def conflict(cls, message: str) -> "ApiError":
        return cls(message, ErrorKind.CONFLICT)

    @classmethod
    def not_found(cls, message: str) -> "ApiError":
        return cls(message, ErrorKind.NOT_FOUND)

    @classmethod
    def unauthorized(cls, message: str) -> "ApiError":
        return cls(message, ErrorKind.UNAUTHORIZED)

    @classmethod
    def bad_request(cls, message: str) -> "ApiError":
        return cls(message, ErrorKind.BAD_REQUEST)

    @classmethod
    def internal(cls, message: str) -> "ApiError":
        return cls(message, ErrorKind.INTERNAL)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "status": self.status_code, "code": self.kind.value}

    def __repr__(self) -> str:
        return f"ApiError({self.message!r}, kind={self.kind.value}, status={self.status_code})"

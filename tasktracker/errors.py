"""Error values and results returned by every service operation.

Services never raise for expected outcomes: they return ``Ok(value)`` or
``Err(Error)``, where the error carries exactly one kind and a message.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ErrorKind(str, Enum):
    NOT_FOUND = "NotFound"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    BAD_REQUEST = "BadRequest"
    INTERNAL_ERROR = "InternalError"


@dataclass(frozen=True)
class Error:
    kind: ErrorKind
    message: str

    @classmethod
    def not_found(cls, message: str) -> "Error":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def unauthorized(cls, message: str) -> "Error":
        return cls(ErrorKind.UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: str) -> "Error":
        return cls(ErrorKind.FORBIDDEN, message)

    @classmethod
    def bad_request(cls, message: str) -> "Error":
        return cls(ErrorKind.BAD_REQUEST, message)

    @classmethod
    def internal(cls, message: str = "Internal server error") -> "Error":
        return cls(ErrorKind.INTERNAL_ERROR, message)


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: Error

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok, Err]

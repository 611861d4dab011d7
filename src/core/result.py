"""Success/failure envelope returned by every service operation.

A ``Success`` carries the payload; a ``Failure`` carries only a status code
and messages. ``Failure`` has no ``value`` attribute at all, so a caller
cannot read a payload without first narrowing on ``is_success``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Generic, Iterable, Optional, TypeVar, Union

from rest_framework import status

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."
ERROR_SEPARATOR = ","


class ErrorKind(enum.Enum):
    """Failure taxonomy shared by the services."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    STORAGE = "storage"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Success(Generic[T]):
    status_code: int = status.HTTP_200_OK
    value: Optional[T] = None

    is_success: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    status_code: int
    errors: tuple[str, ...] = (DEFAULT_ERROR_MESSAGE,)
    kind: ErrorKind = ErrorKind.UNEXPECTED

    is_success: ClassVar[bool] = False

    @property
    def error(self) -> str:
        """All messages joined into one delimited string."""
        return ERROR_SEPARATOR.join(self.errors)

    @classmethod
    def validation(cls, errors: str | Iterable[str]) -> "Failure":
        return failure(status.HTTP_400_BAD_REQUEST, errors, ErrorKind.VALIDATION)

    @classmethod
    def conflict(cls, error: str) -> "Failure":
        return failure(status.HTTP_400_BAD_REQUEST, error, ErrorKind.CONFLICT)

    @classmethod
    def not_found(cls, error: str) -> "Failure":
        return failure(status.HTTP_404_NOT_FOUND, error, ErrorKind.NOT_FOUND)

    @classmethod
    def forbidden(cls, error: str) -> "Failure":
        return failure(status.HTTP_403_FORBIDDEN, error, ErrorKind.FORBIDDEN)

    @classmethod
    def storage(cls, errors: str | Iterable[str] | None = None) -> "Failure":
        return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, errors, ErrorKind.STORAGE)

    @classmethod
    def unexpected(cls, error: str | None = None) -> "Failure":
        return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, error, ErrorKind.UNEXPECTED)


Result = Union[Success[T], Failure]


def success(value: Optional[T] = None, status_code: int = status.HTTP_200_OK) -> Success[T]:
    """Build a successful result; omit ``value`` for operations with no payload."""
    return Success(status_code=status_code, value=value)


def failure(
    status_code: int,
    errors: str | Iterable[str] | None = None,
    kind: ErrorKind = ErrorKind.UNEXPECTED,
) -> Failure:
    """Build a failed result from one message or many.

    Empty input falls back to the generic message so a failure always has
    something human-readable to show.
    """
    if errors is None:
        messages: tuple[str, ...] = ()
    elif isinstance(errors, str):
        messages = (errors,) if errors else ()
    else:
        messages = tuple(str(e) for e in errors if e)
    return Failure(status_code=status_code, errors=messages or (DEFAULT_ERROR_MESSAGE,), kind=kind)


__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
    "failure",
    "success",
]

"""Tagged results returned by the service layer."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    UNEXPECTED = "unexpected"


@dataclass
class ServiceResult(Generic[T]):
    """Outcome of a service call.

    ``server_error`` separates internal failures (HTTP 500) from caller-fixable
    ones (HTTP 400); it is only ever true for ``ErrorKind.UNEXPECTED``.
    """

    ok: bool
    value: Optional[T] = None
    message: Optional[str] = None
    kind: Optional[ErrorKind] = None
    errors: List[str] = field(default_factory=list)

    @property
    def server_error(self) -> bool:
        return self.kind is ErrorKind.UNEXPECTED

    @classmethod
    def success(cls, value: T | None = None) -> "ServiceResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def not_found(cls, message: str) -> "ServiceResult[T]":
        return cls(ok=False, message=message, kind=ErrorKind.NOT_FOUND)

    @classmethod
    def invalid(cls, message: str, errors: list[str] | None = None) -> "ServiceResult[T]":
        return cls(ok=False, message=message, kind=ErrorKind.VALIDATION, errors=list(errors or []))

    @classmethod
    def rule_violation(cls, message: str) -> "ServiceResult[T]":
        return cls(ok=False, message=message, kind=ErrorKind.BUSINESS_RULE)

    @classmethod
    def unexpected(cls, message: str, cause: BaseException | None = None) -> "ServiceResult[T]":
        errors = [first_line(cause)] if cause is not None else []
        return cls(ok=False, message=message, kind=ErrorKind.UNEXPECTED, errors=errors)


def first_line(exc: BaseException) -> str:
    """First line of the exception text; tracebacks and SQL blocks go to the log only."""
    text = str(exc).strip().splitlines()
    return text[0] if text else type(exc).__name__


def unexpected_failure(logger: logging.Logger, action: str, exc: BaseException) -> ServiceResult:
    """Log ``exc`` with its traceback and wrap it as a server-class failure."""
    logger.exception("Unexpected failure while %s", action)
    return ServiceResult.unexpected(f"An error occurred while {action}.", exc)

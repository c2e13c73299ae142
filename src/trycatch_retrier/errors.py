"""Exceptions used by the Try Catch Retrier."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .types import ErrorCode


class RetrierError(Exception):
    """Base error class for all retrier exceptions."""

    code: ErrorCode
    details: Optional[Dict[str, Any]]
    suggestion: Optional[str]

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details
        self.suggestion = suggestion

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> Dict[str, Any]:
        """Return a serialisable representation of the error."""

        return {
            "code": self.code.value,
            "message": str(self),
            "details": self.details,
            "suggestion": self.suggestion,
        }

    def get_display_message(self) -> str:
        """Human friendly message including suggestions when available."""

        if self.suggestion:
            return f"{self} Suggestion: {self.suggestion}"
        return str(self)


class ConfigurationError(RetrierError):
    """Raised when an option passed to a retrier is invalid."""

    field: str
    value: Any

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        super().__init__(
            ErrorCode.INVALID_CONFIGURATION,
            message,
            details={"field": field},
            suggestion="Check the retrier options and try again",
        )
        self.field = field
        self.value = value


class TryCatchError(RetrierError):
    """Failure captured from a single attempt.

    These are collected into the failure record returned by a retrier call;
    the retrier itself never raises them.
    """

    attempt: int
    cause: Optional[BaseException]

    def __init__(
        self, message: str, attempt: int, cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(
            ErrorCode.ATTEMPT_FAILED,
            message,
            details={"attempt": attempt},
        )
        self.attempt = attempt
        self.cause = cause

    @classmethod
    def from_exception(cls, exc: BaseException, attempt: int) -> "TryCatchError":
        return cls(str(exc) or "Unknown error", attempt, cause=exc)

    def __repr__(self) -> str:
        return f"TryCatchError({str(self)!r}, attempt={self.attempt})"


__all__ = [
    "ConfigurationError",
    "RetrierError",
    "TryCatchError",
]

"""Core type definitions for the Try Catch Retrier.

These containers carry no behaviour of their own. They describe what the
retry loop hands to the ``retry_on`` predicate and the ``log`` callback, and
what a retrier call returns.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, NamedTuple, Optional, Tuple

from .utils import is_truthy

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .errors import TryCatchError


class ErrorCode(str, Enum):
    """Codes attached to retrier errors."""

    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    ATTEMPT_FAILED = "ATTEMPT_FAILED"


@dataclass(frozen=True, slots=True)
class AttemptState:
    """Outcome of one attempt as seen by the ``retry_on`` predicate."""

    error: Optional["TryCatchError"]
    attempt: int
    result: Any = None


@dataclass(frozen=True, slots=True)
class AttemptLog:
    """Payload handed to the ``log`` callback after an attempt."""

    title: str
    result: Any
    attempt: int
    error: Optional["TryCatchError"] = None


class RetryResult(NamedTuple):
    """Final value of a retrier call together with its failure record."""

    result: Any
    errors: Tuple["TryCatchError", ...]

    @property
    def failed(self) -> bool:
        """``True`` when no truthy result was produced."""

        return not is_truthy(self.result)


RetryOnFunction = Callable[[AttemptState], bool]
LogFunction = Callable[[AttemptLog], None]


OPTION_NAMES = (
    "title",
    "max_attempts",
    "delay",
    "exponential",
    "retry_on",
    "log",
)

# Accept the camelCase spellings used by callers coming from JSON configs.
CAMEL_CASE_OPTIONS: Dict[str, str] = {
    "maxAttempts": "max_attempts",
    "retryOn": "retry_on",
}


__all__ = [
    "AttemptLog",
    "AttemptState",
    "CAMEL_CASE_OPTIONS",
    "ErrorCode",
    "LogFunction",
    "OPTION_NAMES",
    "RetryOnFunction",
    "RetryResult",
]

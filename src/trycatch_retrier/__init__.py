"""Try Catch Retrier - keep calling an operation until it succeeds or the budget runs out.

Failures raised by the operation are caught and returned, never re-raised, so
callers inspect the failure record instead of wrapping the call in
``try``/``except``.

Example:
    Using the preconfigured retrier (one attempt, no waiting):

    >>> from trycatch_retrier import tc_retry
    >>> result, errors = await tc_retry(fetch_profile)

    A dedicated retrier with exponential backoff:

    >>> from trycatch_retrier import create_retrier, logger_hook
    >>> retrier = create_retrier(max_attempts=4, delay=200, log=logger_hook())
    >>> result, errors = await retrier(fetch_profile, title="profile")
    >>> [(error.attempt, error.message) for error in errors]
    [(1, 'connection reset'), (2, 'connection reset')]
"""

from __future__ import annotations

from ._async_utils import run_sync
from .errors import ConfigurationError, RetrierError, TryCatchError
from .hooks import logger_hook
from .retrier import Operation, Retrier, create_retrier, tc_retry
from .settings import DefaultSettings
from .types import (
    AttemptLog,
    AttemptState,
    ErrorCode,
    LogFunction,
    RetryOnFunction,
    RetryResult,
)
from .utils import compute_delay, wait

__version__ = "1.0.0"

__all__ = [
    # Retrier
    "Retrier",
    "create_retrier",
    "tc_retry",
    "Operation",

    # Settings
    "DefaultSettings",

    # Types
    "AttemptLog",
    "AttemptState",
    "ErrorCode",
    "LogFunction",
    "RetryOnFunction",
    "RetryResult",

    # Errors
    "ConfigurationError",
    "RetrierError",
    "TryCatchError",

    # Utilities
    "compute_delay",
    "logger_hook",
    "run_sync",
    "wait",
]

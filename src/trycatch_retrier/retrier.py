"""The retry loop."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, List, Mapping, Optional, Union

from ._async_utils import run_sync
from .errors import TryCatchError
from .settings import DefaultSettings
from .types import AttemptLog, AttemptState, RetryResult
from .utils import compute_delay, is_truthy, wait

logger = logging.getLogger(__name__)

Operation = Callable[[], Union[Awaitable[Any], Any]]


class Retrier:
    """Callable that retries an operation until it returns something truthy.

    Every call merges its overrides into :attr:`settings`, which is shared by
    all calls of this retrier, and then runs the attempt loop. Failures
    raised by the operation are never re-raised; they come back as the
    failure record of the :class:`~trycatch_retrier.types.RetryResult`.
    """

    settings: DefaultSettings

    def __init__(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> None:
        self.settings = DefaultSettings(options, **overrides)

    async def __call__(
        self,
        operation: Operation,
        options: Optional[Mapping[str, Any]] = None,
        **overrides: Any,
    ) -> RetryResult:
        settings = self.settings.update(options, **overrides)
        result: Any = None
        errors: List[TryCatchError] = []
        attempt = 0

        # Success is detected by truthiness: a falsy return value is retried.
        while not is_truthy(result) and attempt < settings.max_attempts:
            attempt += 1
            await wait(compute_delay(attempt, settings.delay, settings.exponential))

            error: Optional[TryCatchError] = None
            try:
                value = operation()
                if inspect.isawaitable(value):
                    value = await value
                result = value
            except Exception as exc:
                error = TryCatchError.from_exception(exc, attempt)
                errors.append(error)
                logger.debug("%s: attempt %d raised %r", settings.title, attempt, exc)

            if not settings.retry_on(AttemptState(error=error, attempt=attempt, result=result)):
                logger.debug("%s: retry_on stopped the loop after attempt %d", settings.title, attempt)
                break
            settings.log(AttemptLog(title=settings.title, result=result, attempt=attempt, error=error))

        return RetryResult(result, tuple(errors))

    def run_sync(
        self,
        operation: Operation,
        options: Optional[Mapping[str, Any]] = None,
        **overrides: Any,
    ) -> RetryResult:
        """Blocking variant of calling the retrier."""

        return run_sync(lambda: self(operation, options, **overrides))

    def __repr__(self) -> str:
        return f"Retrier({self.settings!r})"

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_env(cls, *, prefix: str = "TC_RETRIER", **overrides: Any) -> "Retrier":
        """Create a retrier whose defaults are read from the environment."""

        retrier = cls()
        retrier.settings = DefaultSettings.from_env(prefix=prefix, **overrides)
        return retrier


def create_retrier(options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> Retrier:
    """Create a retrier with its own default settings.

    Args:
        options: Mapping of option names to values (snake_case or camelCase)
        **overrides: The same options as keyword arguments: ``max_attempts``,
            ``delay`` (milliseconds), ``exponential``, ``retry_on``, ``log``
            and ``title``

    Returns:
        A :class:`Retrier`; await it with an operation to run the loop

    Example:
        >>> fetch = create_retrier(max_attempts=3, delay=250)
        >>> value, errors = await fetch(lambda: client.get("/status"))
    """

    return Retrier(options, **overrides)


tc_retry = create_retrier()


__all__ = ["Operation", "Retrier", "create_retrier", "tc_retry"]

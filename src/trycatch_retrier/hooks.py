"""Ready-made ``log`` callbacks."""

from __future__ import annotations

import logging
from typing import Optional

from .types import AttemptLog, LogFunction

logger = logging.getLogger(__name__)


def logger_hook(
    target: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    failure_level: int = logging.WARNING,
) -> LogFunction:
    """Build a ``log`` callback that reports attempts through :mod:`logging`.

    Failed attempts are written at ``failure_level``; attempts that did not
    raise are written at ``level``.
    """

    log = target or logger

    def _log(entry: AttemptLog) -> None:
        if entry.error is not None:
            log.log(
                failure_level,
                "%s: attempt %d failed: %s",
                entry.title,
                entry.attempt,
                entry.error,
            )
        else:
            log.log(level, "%s: attempt %d returned %r", entry.title, entry.attempt, entry.result)

    return _log


__all__ = ["logger_hook"]

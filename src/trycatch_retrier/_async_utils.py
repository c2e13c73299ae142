"""Bridge for driving a retrier from synchronous code."""

from __future__ import annotations

import asyncio
import contextvars
import threading
from collections.abc import Awaitable, Callable
from typing import TypeVar

_T = TypeVar("_T")

_THREAD_NAME = "trycatch-retrier-sync"


def _as_awaitable(call: Callable[[], Awaitable[_T]] | Awaitable[_T]) -> Awaitable[_T]:
    awaitable = call() if callable(call) and not isinstance(call, Awaitable) else call
    if not isinstance(awaitable, Awaitable):
        raise TypeError("run_sync expected an awaitable or a callable returning one")
    return awaitable


async def _await(call: Callable[[], Awaitable[_T]] | Awaitable[_T]) -> _T:
    return await _as_awaitable(call)


def run_sync(call: Callable[[], Awaitable[_T]] | Awaitable[_T]) -> _T:
    """Run ``call`` to completion and return its result.

    Without a running event loop this is ``asyncio.run``. When the caller is
    already inside a loop (a notebook, an async framework calling sync code)
    the coroutine is driven by a private loop on a helper thread, since the
    running loop cannot be re-entered. Either way the current
    :mod:`contextvars` context is carried along.
    """

    context = contextvars.copy_context()

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return context.run(asyncio.run, _await(call))

    outcome: dict[str, object] = {}

    def drive() -> None:
        try:
            outcome["value"] = context.run(asyncio.run, _await(call))
        except BaseException as exc:  # re-raised on the calling thread
            outcome["error"] = exc

    worker = threading.Thread(target=drive, name=_THREAD_NAME, daemon=True)
    worker.start()
    worker.join()

    if "error" in outcome:
        raise outcome["error"]  # type: ignore[misc]
    return outcome["value"]  # type: ignore[return-value]


__all__ = ["run_sync"]

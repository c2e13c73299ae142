"""Tests for the synchronous bridge used by ``Retrier.run_sync``."""

from __future__ import annotations

import asyncio
import contextvars
import sys
import threading
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from trycatch_retrier import create_retrier, run_sync  # noqa: E402


async def _echo(value: str) -> str:
    await asyncio.sleep(0)
    return value


def test_run_sync_without_running_loop():
    assert run_sync(lambda: _echo("ok")) == "ok"


def test_run_sync_accepts_coroutine_object():
    assert run_sync(_echo("direct")) == "direct"


def test_run_sync_inside_running_loop_uses_helper_thread():
    """Inside a running loop the coroutine is driven on a separate thread."""

    async def thread_name() -> str:
        return threading.current_thread().name

    async def runner() -> str:
        return run_sync(thread_name)

    assert asyncio.run(runner()) == "trycatch-retrier-sync"


def test_run_sync_preserves_contextvars():
    marker: contextvars.ContextVar[str | None] = contextvars.ContextVar("marker", default=None)

    async def read_marker() -> str | None:
        return marker.get()

    async def runner() -> str | None:
        token = marker.set("inside-loop")
        try:
            return run_sync(read_marker)
        finally:
            marker.reset(token)

    assert asyncio.run(runner()) == "inside-loop"


def test_run_sync_propagates_exceptions():
    async def raises() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        run_sync(raises)


def test_run_sync_rejects_nonawaitable():
    with pytest.raises(TypeError):
        run_sync(lambda: "not awaitable")


def test_retrier_run_sync():
    """``Retrier.run_sync`` runs the whole loop from blocking code."""

    attempts = []

    def operation():
        attempts.append(1)
        if len(attempts) < 2:
            raise ConnectionError("reset")
        return "connected"

    retrier = create_retrier(max_attempts=3, delay=0)

    result, errors = retrier.run_sync(operation)

    assert result == "connected"
    assert [error.message for error in errors] == ["reset"]


def test_retrier_run_sync_inside_running_loop():
    retrier = create_retrier(max_attempts=2, delay=0)

    async def runner():
        return retrier.run_sync(lambda: _echo("from-thread"))

    result, errors = asyncio.run(runner())

    assert result == "from-thread"
    assert errors == ()

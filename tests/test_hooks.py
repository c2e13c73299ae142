import asyncio
import logging
import sys
from pathlib import Path

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from trycatch_retrier import AttemptLog, TryCatchError, create_retrier, logger_hook  # noqa: E402


def test_logger_hook_levels(caplog):
    hook = logger_hook()

    with caplog.at_level(logging.INFO, logger="trycatch_retrier.hooks"):
        hook(AttemptLog(title="sync", result=None, attempt=1, error=TryCatchError("timeout", 1)))
        hook(AttemptLog(title="sync", result={"rows": 3}, attempt=2))

    assert [record.name for record in caplog.records] == ["trycatch_retrier.hooks"] * 2
    assert [record.levelno for record in caplog.records] == [logging.WARNING, logging.INFO]
    assert caplog.records[0].getMessage() == "sync: attempt 1 failed: timeout"
    assert caplog.records[1].getMessage() == "sync: attempt 2 returned {'rows': 3}"


def test_logger_hook_with_custom_logger(caplog):
    target = logging.getLogger("jobs.retry")
    retrier = create_retrier(
        max_attempts=2,
        delay=0,
        title="jobs",
        log=logger_hook(target, level=logging.DEBUG, failure_level=logging.ERROR),
    )
    calls = []

    def operation():
        calls.append(1)
        if len(calls) == 1:
            raise OSError("disk busy")
        return "written"

    with caplog.at_level(logging.DEBUG, logger="jobs.retry"):
        asyncio.run(retrier(operation))

    messages = [(record.name, record.levelno, record.getMessage()) for record in caplog.records if record.name == "jobs.retry"]
    assert messages == [
        ("jobs.retry", logging.ERROR, "jobs: attempt 1 failed: disk busy"),
        ("jobs.retry", logging.DEBUG, "jobs: attempt 2 returned 'written'"),
    ]


def test_retrier_emits_debug_records(caplog):
    async def fails():
        raise RuntimeError("nope")

    with caplog.at_level(logging.DEBUG, logger="trycatch_retrier.retrier"):
        asyncio.run(create_retrier(max_attempts=1, title="probe")(fails))

    assert any("probe: attempt 1 raised" in record.getMessage() for record in caplog.records)

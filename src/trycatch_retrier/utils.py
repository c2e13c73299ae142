"""Utility helpers for the Try Catch Retrier."""

from __future__ import annotations

import asyncio
import math
from typing import Any, Optional, Union

Number = Union[int, float]


async def wait(ms: Number) -> None:
    """Suspend the current task for ``ms`` milliseconds."""

    await asyncio.sleep(ms / 1000)


def compute_delay(attempt: int, delay: Number, exponential: bool) -> Number:
    """Return how long to wait, in milliseconds, before ``attempt``.

    The first attempt never waits. Later attempts wait ``delay`` or, with
    exponential backoff, ``delay * 2 ** (attempt - 2)``.
    """

    if attempt <= 1:
        return 0
    if not exponential:
        return delay
    return delay * 2 ** (attempt - 2)


def is_truthy(value: Any) -> bool:
    """Truthiness used to decide whether an attempt produced a result.

    Objects whose ``__bool__`` raises (numpy arrays, DataFrames) count as a
    result.
    """

    try:
        return bool(value)
    except Exception:
        return True


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    if not is_number(value):
        return False
    return isinstance(value, int) or math.isfinite(value)


def coerce_optional_bool(value: Any) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in {"true", "1", "yes"}:
            return True
        if text in {"false", "0", "no"}:
            return False
    return None


def coerce_optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        result = int(value)
    except (TypeError, ValueError):
        return None
    return result


def coerce_optional_number(value: Any) -> Optional[Number]:
    """Parse ``value`` as an int when possible, otherwise as a float."""

    as_int = coerce_optional_int(value)
    if as_int is not None:
        return as_int
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


__all__ = [
    "compute_delay",
    "coerce_optional_bool",
    "coerce_optional_int",
    "coerce_optional_number",
    "is_finite_number",
    "is_number",
    "is_truthy",
    "wait",
]

"""Default settings shared by every call of one retrier."""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigurationError
from .types import CAMEL_CASE_OPTIONS, OPTION_NAMES, AttemptLog, AttemptState, LogFunction, RetryOnFunction
from .utils import coerce_optional_bool, coerce_optional_number, is_finite_number

_DEFAULT_ENV_PREFIX = "TC_RETRIER"


def _always_retry(state: AttemptState) -> bool:
    return True


def _no_log(entry: AttemptLog) -> None:
    return None


class DefaultSettings:
    """Long-lived configuration of a retrier.

    ``update`` merges overrides into this object *in place* and returns it,
    so a field set by one call stays in effect for every later call that
    does not mention it.
    """

    title: str
    max_attempts: int
    delay: float
    exponential: bool
    retry_on: RetryOnFunction
    log: LogFunction

    def __init__(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> None:
        self.title = "Try Catch Retrier"
        self.max_attempts = 1
        self.delay = 100
        self.exponential = True
        self.retry_on = _always_retry
        self.log = _no_log
        self.update(options, **overrides)

    def update(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> "DefaultSettings":
        """Validate ``options`` and apply every supplied field onto these settings."""

        merged: Dict[str, Any] = dict(options or {})
        merged.update(overrides)
        for key, value in self.validate(merged).items():
            setattr(self, key, value)
        return self

    def validate(self, options: Mapping[str, Any]) -> Dict[str, Any]:
        """Check ``options`` without applying them.

        Returns the supplied fields under their snake_case names with
        ``None`` values dropped. Raises :class:`ConfigurationError` on the
        first invalid field.
        """

        normalised: Dict[str, Any] = {}
        for key, value in options.items():
            name = CAMEL_CASE_OPTIONS.get(key, key)
            if name not in OPTION_NAMES:
                raise ConfigurationError(key, f"Unknown retrier option '{key}'", value)
            if value is not None:
                normalised[name] = value

        if "max_attempts" in normalised:
            value = normalised["max_attempts"]
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError("max_attempts", "max_attempts must be an integer", value)
            if value <= 0:
                raise ConfigurationError("max_attempts", "max_attempts must be greater than 0", value)

        if "delay" in normalised:
            value = normalised["delay"]
            if not is_finite_number(value) or value < 0:
                raise ConfigurationError("delay", "delay must be a positive number", value)

        if "exponential" in normalised and not isinstance(normalised["exponential"], bool):
            raise ConfigurationError("exponential", "exponential must be a boolean", normalised["exponential"])

        if "retry_on" in normalised and not callable(normalised["retry_on"]):
            raise ConfigurationError(
                "retry_on", "retry_on must be a function that returns a boolean", normalised["retry_on"]
            )

        if "log" in normalised and not callable(normalised["log"]):
            raise ConfigurationError("log", "log must be a function", normalised["log"])

        if "title" in normalised and not isinstance(normalised["title"], str):
            raise ConfigurationError("title", "title must be a string", normalised["title"])

        return normalised

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the current values."""

        return {name: getattr(self, name) for name in OPTION_NAMES}

    def __repr__(self) -> str:
        return (
            f"DefaultSettings(title={self.title!r}, max_attempts={self.max_attempts}, "
            f"delay={self.delay}, exponential={self.exponential})"
        )

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_env(
        cls,
        *,
        prefix: str = _DEFAULT_ENV_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> "DefaultSettings":
        """Create settings from ``<PREFIX>_*`` environment variables.

        ``MAX_ATTEMPTS``, ``DELAY``, ``EXPONENTIAL`` and ``TITLE`` are read;
        keyword overrides take precedence over the environment.
        """

        env = os.environ if environ is None else environ
        options: Dict[str, Any] = {}

        raw_attempts = env.get(f"{prefix}_MAX_ATTEMPTS")
        if raw_attempts is not None:
            attempts = coerce_optional_number(raw_attempts)
            if not isinstance(attempts, int):
                raise ConfigurationError(
                    "max_attempts", f"{prefix}_MAX_ATTEMPTS must be an integer", raw_attempts
                )
            options["max_attempts"] = attempts

        raw_delay = env.get(f"{prefix}_DELAY")
        if raw_delay is not None:
            delay = coerce_optional_number(raw_delay)
            if delay is None:
                raise ConfigurationError("delay", f"{prefix}_DELAY must be a number", raw_delay)
            options["delay"] = delay

        raw_exponential = env.get(f"{prefix}_EXPONENTIAL")
        if raw_exponential is not None:
            exponential = coerce_optional_bool(raw_exponential)
            if exponential is None:
                raise ConfigurationError(
                    "exponential", f"{prefix}_EXPONENTIAL must be a boolean value", raw_exponential
                )
            options["exponential"] = exponential

        title = env.get(f"{prefix}_TITLE")
        if title:
            options["title"] = title

        options.update(overrides)
        return cls(options)


__all__ = ["DefaultSettings"]

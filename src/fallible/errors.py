"""Error types raised when an unsafe accessor is used on the wrong case."""

from __future__ import annotations

import dataclasses
import json
from typing import Any


class FallibleError(Exception):
    """Base error type for container misuse."""


class OptionError(FallibleError):
    """An `Option` related error."""


class ResultError(FallibleError):
    """A `Result` related error."""


class EmptyValueError(OptionError):
    """Raised by `Option.unwrap()` when there is no value."""

    def __init__(self, message: str = "No value to unwrap.") -> None:
        super().__init__(message)


class UnwrappedFailureError(ResultError):
    """Raised by `Result.unwrap()` on an `Err`.

    The raw error payload is kept on ``error``; the message is a best-effort
    rendering of it (see `render_error`).
    """

    def __init__(self, error: Any) -> None:
        super().__init__(render_error(error))
        self.error = error


class UnwrappedSuccessError(ResultError):
    """Raised by `Result.unwrap_err()` on an `Ok`."""

    def __init__(self, message: str = "There is no Err value to unwrap.") -> None:
        super().__init__(message)


class ExpectedValueError(OptionError):
    """Raised by `Option.expect()` when there is no value."""


class UnmetExpectationError(ResultError):
    """Raised by `Result.expect()` and `Result.expect_err()` on the wrong case."""


def render_error(error: Any) -> str:
    """
    Render an arbitrary error payload as a message string.

    Callables render as ``[Function]``, bare ``object()`` sentinels as
    ``[Symbol]``, containers, dataclasses and ``None`` as JSON, and anything
    else through ``str()``.
    """
    if callable(error):
        return "[Function]"
    if type(error) is object:
        return "[Symbol]"

    if dataclasses.is_dataclass(error):
        # Fields may hold objects that cannot be deep-copied (locks, sockets)
        error = {f.name: getattr(error, f.name) for f in dataclasses.fields(error)}
    if error is None or isinstance(error, (dict, list, tuple)):
        try:
            return json.dumps(error, default=str)
        except (TypeError, ValueError):
            # Non-string keys or circular references
            return repr(error)

    return str(error)

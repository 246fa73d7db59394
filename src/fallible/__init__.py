"""
fallible - Option and Result containers for Python

Manage absence and failure as ordinary values instead of ``None`` checks and
exceptions. All operations are synchronous and never perform I/O.

Usage:
    from fallible import attempt, err, none, ok, some

    # Options hold a value or nothing
    total = some(5).map(lambda v: v * 2).map(lambda v: v * 10).unwrap_or(0)

    # Results hold a success value or an error value
    result = ok("abc").and_then(lambda v: ok(True) if len(v) == 3 else err("bad"))
    if result.is_ok():
        print(result.unwrap())

    # Convert exceptions at the boundary
    parsed = attempt(lambda: int("not a number"))
    if parsed.is_err():
        print(f"Error: {parsed.unwrap_err()}")
"""

import logging

from .errors import (
    EmptyValueError,
    ExpectedValueError,
    FallibleError,
    OptionError,
    ResultError,
    UnmetExpectationError,
    UnwrappedFailureError,
    UnwrappedSuccessError,
    render_error,
)
from .option import Option, absent, maybe, none, present, some
from .result import Err, Ok, Result, attempt, err, ok
from .types import Compute, Predicate, Produce

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Compute",
    "EmptyValueError",
    "Err",
    "ExpectedValueError",
    "FallibleError",
    "Ok",
    "Option",
    "OptionError",
    "Predicate",
    "Produce",
    "Result",
    "ResultError",
    "UnmetExpectationError",
    "UnwrappedFailureError",
    "UnwrappedSuccessError",
    "absent",
    "attempt",
    "err",
    "maybe",
    "none",
    "ok",
    "present",
    "render_error",
    "some",
]

__version__ = "1.0.0"

"""Result type for error handling as values."""

from __future__ import annotations

import logging
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from .errors import UnmetExpectationError, UnwrappedFailureError, UnwrappedSuccessError
from .option import Option, none, some
from .types import Compute, Produce

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class Result(Generic[T, E], metaclass=ABCMeta):
    """
    Outcome of an operation that can fail.

    A result is exactly one of two frozen cases: `Ok` holding a success value,
    or `Err` holding an error value. The base itself cannot be instantiated
    and no other subclass can be declared. Operations that cannot apply to
    the active case short-circuit without calling their callback.
    """

    __slots__ = ()
    _sealed = False

    def __init_subclass__(cls, **kwargs: Any) -> None:
        if Result._sealed:
            raise TypeError(f"Result cannot be subclassed (got {cls.__name__})")
        super().__init_subclass__(**kwargs)

    @abstractmethod
    def is_ok(self) -> bool:
        """Check if this is a success result."""

    @abstractmethod
    def is_err(self) -> bool:
        """Check if this is an error result."""

    @abstractmethod
    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return `other` on success, otherwise this error."""

    @abstractmethod
    def and_then(self, fn: Compute[T, Result[U, E]]) -> Result[U, E]:
        """Chain an operation that returns a Result."""

    @abstractmethod
    def map(self, fn: Compute[T, U]) -> Result[U, E]:
        """Transform the success value."""

    @abstractmethod
    def map_err(self, fn: Compute[E, F]) -> Result[T, F]:
        """Transform the error value."""

    @abstractmethod
    def map_or(self, default: U, fn: Compute[T, U]) -> U:
        """Transform the success value, or return `default`."""

    @abstractmethod
    def map_or_else(self, default: Compute[E, U], fn: Compute[T, U]) -> U:
        """Transform the success value, or compute a default from the error."""

    @abstractmethod
    def ok(self) -> Option[T]:
        """Project the success value into an Option."""

    @abstractmethod
    def err(self) -> Option[E]:
        """Project the error value into an Option."""

    @abstractmethod
    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return this success, otherwise `other`."""

    @abstractmethod
    def or_else(self, fn: Compute[E, Result[T, F]]) -> Result[T, F]:
        """Return this success, otherwise recover from the error."""

    @abstractmethod
    def expect(self, message: str) -> T:
        """Get the success value, or raise UnmetExpectationError with `message`."""

    @abstractmethod
    def expect_err(self, message: str) -> E:
        """Get the error value, or raise UnmetExpectationError with `message`."""

    @abstractmethod
    def unwrap(self) -> T:
        """Get the success value, or raise UnwrappedFailureError."""

    @abstractmethod
    def unwrap_err(self) -> E:
        """Get the error value, or raise UnwrappedSuccessError."""

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Get the success value or return default."""

    @abstractmethod
    def unwrap_or_else(self, fn: Compute[E, T]) -> T:
        """Get the success value or compute one from the error."""


@dataclass(frozen=True, slots=True)
class Ok(Result[T, E]):
    """Success case containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return `other`, since this is a success."""
        return other

    def and_then(self, fn: Compute[T, Result[U, E]]) -> Result[U, E]:
        """Chain operations that return Result."""
        return fn(self.value)

    def map(self, fn: Compute[T, U]) -> Result[U, E]:
        """Transform the success value."""
        return Ok(fn(self.value))

    def map_err(self, fn: Compute[E, F]) -> Result[T, F]:
        """Transform the error (no-op for Ok)."""
        return Ok(self.value)

    def map_or(self, default: U, fn: Compute[T, U]) -> U:
        return fn(self.value)

    def map_or_else(self, default: Compute[E, U], fn: Compute[T, U]) -> U:
        return fn(self.value)

    def ok(self) -> Option[T]:
        """Return the value as Some."""
        return some(self.value)

    def err(self) -> Option[E]:
        """Return Nothing, since there is no error."""
        return none()

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return a copy of this success."""
        return Ok(self.value)

    def or_else(self, fn: Compute[E, Result[T, F]]) -> Result[T, F]:
        """Handle error case (no-op for Ok)."""
        return Ok(self.value)

    def expect(self, message: str) -> T:
        return self.value

    def expect_err(self, message: str) -> NoReturn:
        raise UnmetExpectationError(message)

    def unwrap(self) -> T:
        """Get the value. Safe to call after checking is_ok()."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raises UnwrappedSuccessError. Check is_err() first."""
        raise UnwrappedSuccessError()

    def unwrap_or(self, default: T) -> T:
        """Get value or return default."""
        return self.value

    def unwrap_or_else(self, fn: Compute[E, T]) -> T:
        """Get value or compute from error (no-op for Ok)."""
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Result[T, E]):
    """Error case containing an error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return a copy of this error."""
        return Err(self.error)

    def and_then(self, fn: Compute[T, Result[U, E]]) -> Result[U, E]:
        """Chain operations (no-op for Err)."""
        return Err(self.error)

    def map(self, fn: Compute[T, U]) -> Result[U, E]:
        """Transform success value (no-op for Err)."""
        return Err(self.error)

    def map_err(self, fn: Compute[E, F]) -> Result[T, F]:
        """Transform the error."""
        return Err(fn(self.error))

    def map_or(self, default: U, fn: Compute[T, U]) -> U:
        return default

    def map_or_else(self, default: Compute[E, U], fn: Compute[T, U]) -> U:
        return default(self.error)

    def ok(self) -> Option[T]:
        """Return Nothing, since there is no value."""
        return none()

    def err(self) -> Option[E]:
        """Return the error as Some."""
        return some(self.error)

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return `other`, since this is an error."""
        return other

    def or_else(self, fn: Compute[E, Result[T, F]]) -> Result[T, F]:
        """Handle error case."""
        return fn(self.error)

    def expect(self, message: str) -> NoReturn:
        raise UnmetExpectationError(message)

    def expect_err(self, message: str) -> E:
        return self.error

    def unwrap(self) -> NoReturn:
        """Raises UnwrappedFailureError. Check is_ok() first."""
        if isinstance(self.error, BaseException):
            raise UnwrappedFailureError(self.error) from self.error
        raise UnwrappedFailureError(self.error)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        """Return the default since this is an error."""
        return default

    def unwrap_or_else(self, fn: Compute[E, T]) -> T:
        """Compute value from error."""
        return fn(self.error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result._sealed = True


def ok(value: T) -> Result[T, Any]:
    """Wrap a success value."""
    return Ok(value)


def err(error: E) -> Result[Any, E]:
    """Wrap an error value."""
    return Err(error)


def attempt(fn: Produce[T]) -> Result[T, Exception]:
    """
    Call `fn` and capture its outcome as a Result.

    Returns `Ok` with the return value, or `Err` holding the exact exception
    that `fn` raised. Exceptions are never re-raised.

    Only `Exception` subclasses are captured, which deliberately narrows
    "capture every raised value": `BaseException`-only signals such as
    KeyboardInterrupt and SystemExit propagate unchanged.
    """
    try:
        return Ok(fn())
    except Exception as e:
        logger.debug("attempt captured %s", type(e).__name__)
        return Err(e)

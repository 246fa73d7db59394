"""Option type for values that may or may not be present."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Iterator, TypeVar

from .errors import EmptyValueError, ExpectedValueError
from .types import Compute, Predicate, Produce

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

_EMPTY: Any = object()


class Option(Generic[T]):
    """
    Manages access to a value that may be optionally present.

    An option is either ``Some`` (holding exactly one value) or ``Nothing``.
    The active case is private; use `is_some()` / `is_none()` to tell them
    apart. Build options with `some()`, `none()` or `maybe()`.

    Every operation returns a new option or a plain value, except
    `replace()`, `get_or_insert()` and `get_or_insert_with()`, which update
    the receiver in place.
    """

    __slots__ = ("_is_some", "_value")

    def __init__(self, value: T = _EMPTY) -> None:
        self._is_some = value is not _EMPTY
        self._value = value if self._is_some else None

    def is_some(self) -> bool:
        """Return True if a value is present."""
        return self._is_some

    def is_none(self) -> bool:
        """Return True if no value is present."""
        return not self._is_some

    is_present = is_some
    is_absent = is_none

    def and_(self, other: Option[U]) -> Option[U]:
        """Return `other` if this is Some, otherwise Nothing."""
        if self._is_some:
            return other
        return none()

    def and_then(self, fn: Compute[T, Option[U]]) -> Option[U]:
        """Chain an operation that returns an option."""
        if self._is_some:
            return fn(self._value)
        return none()

    def filter(self, predicate: Predicate[T]) -> Option[T]:
        """Keep the value only if `predicate` accepts it."""
        if self._is_some and predicate(self._value):
            return self
        return none()

    def map(self, fn: Compute[T, U]) -> Option[U]:
        """Transform the value if present."""
        if self._is_some:
            return some(fn(self._value))
        return none()

    def map_or(self, default: U, fn: Compute[T, U]) -> U:
        """Transform the value if present, or return `default`."""
        if self._is_some:
            return fn(self._value)
        return default

    def map_or_else(self, default: Produce[U], fn: Compute[T, U]) -> U:
        """Transform the value if present, or compute a default."""
        if self._is_some:
            return fn(self._value)
        return default()

    def ok_or(self, error: E) -> Result[T, E]:
        """Convert into `Ok(value)`, or `Err(error)` if there is no value."""
        from .result import Err, Ok

        if self._is_some:
            return Ok(self._value)
        return Err(error)

    def ok_or_else(self, error: Produce[E]) -> Result[T, E]:
        """Convert into `Ok(value)`, or `Err` holding a computed error."""
        from .result import Err, Ok

        if self._is_some:
            return Ok(self._value)
        return Err(error())

    def or_(self, other: Option[T]) -> Option[T]:
        """Return this option if Some, otherwise `other`."""
        if self._is_some:
            return self
        return other

    def or_else(self, other: Produce[Option[T]]) -> Option[T]:
        """Return this option if Some, otherwise compute another."""
        if self._is_some:
            return self
        return other()

    def xor(self, other: Option[T]) -> Option[T]:
        """Return whichever option is Some when exactly one of them is."""
        if self._is_some and not other.is_some():
            return self
        if not self._is_some and other.is_some():
            return other
        return none()

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair both values if both options are Some."""
        if self._is_some and other.is_some():
            return some((self._value, other.unwrap()))
        return none()

    def replace(self, value: T) -> Option[T]:
        """
        Put `value` into this option and return the previous contents.

        The receiver is always Some afterwards. The returned option holds the
        old value, or is Nothing if there was none.
        """
        old = some(self._value) if self._is_some else none()
        self._is_some = True
        self._value = value
        return old

    def get_or_insert(self, value: T) -> T:
        """Return the value, inserting `value` first if there is none."""
        if not self._is_some:
            self.replace(value)
        return self._value

    def get_or_insert_with(self, fn: Produce[T]) -> T:
        """Return the value, inserting a computed one first if there is none."""
        if not self._is_some:
            self.replace(fn())
        return self._value

    def expect(self, message: str) -> T:
        """Get the value, or raise ExpectedValueError with `message`."""
        if self._is_some:
            return self._value
        raise ExpectedValueError(message)

    def unwrap(self) -> T:
        """Get the value. Safe to call after checking is_some()."""
        if self._is_some:
            return self._value
        raise EmptyValueError()

    def unwrap_or(self, default: T) -> T:
        """Get value or return default."""
        if self._is_some:
            return self._value
        return default

    def unwrap_or_else(self, fn: Produce[T]) -> T:
        """Get value or compute a default."""
        if self._is_some:
            return self._value
        return fn()

    def __iter__(self) -> Iterator[T]:
        if self._is_some:
            yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self._is_some and other._is_some:
            return self._value == other._value
        return self._is_some == other._is_some

    # Mutable through replace(), so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._is_some:
            return f"Some({self._value!r})"
        return "Nothing"


def some(value: T) -> Option[T]:
    """Wrap a value, whatever it is, in a Some option."""
    return Option(value)


def none() -> Option[Any]:
    """Create an option with no value."""
    return Option()


def maybe(value: T | None) -> Option[T]:
    """Wrap `value` in Some, or return Nothing if it is ``None``."""
    if value is None:
        return none()
    return some(value)


present = some
absent = none

"""Callback shapes shared by Option and Result signatures."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")
U = TypeVar("U")

# Computes a new value from the given value.
Compute = Callable[[T], U]

# Returns a value without taking any arguments.
Produce = Callable[[], T]

# Checks the given value against a condition.
Predicate = Callable[[T], bool]

"""Pytest fixtures for all test modules."""
from unittest.mock import Mock

import pytest


@pytest.fixture
def spy():
    """
    Build call-recording callbacks.

    Returns:
        callable: Factory taking an optional return value (or side effect)
        and returning a Mock that records every call.
    """

    def make(return_value=None, side_effect=None):
        return Mock(return_value=return_value, side_effect=side_effect)

    return make


@pytest.fixture
def never_called():
    """
    Callback that fails the test if it is ever invoked.

    Returns:
        Mock: Callback whose call_count must stay at zero.
    """
    return Mock(side_effect=AssertionError("callback must not be invoked"))

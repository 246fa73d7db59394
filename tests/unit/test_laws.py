"""Property tests for the algebraic laws both containers obey."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from fallible import EmptyValueError, err, none, ok, some

pytestmark = pytest.mark.unit

values = st.one_of(st.none(), st.integers(), st.text(), st.booleans(), st.floats(allow_nan=False))

options = st.one_of(st.builds(none), values.map(some))
results = st.one_of(values.map(ok), values.map(err))


def double(v):
    return (v, v)


def describe(v):
    return f"<{v!r}>"


@given(options)
def test_option_has_exactly_one_case(option):
    assert option.is_some() != option.is_none()


@given(results)
def test_result_has_exactly_one_case(result):
    assert result.is_ok() != result.is_err()


@given(options)
def test_option_map_identity(option):
    assert option.map(lambda v: v) == option


@given(results)
def test_result_map_identity(result):
    assert result.map(lambda v: v) == result


@given(options)
def test_option_map_composition(option):
    assert option.map(double).map(describe) == option.map(lambda v: describe(double(v)))


@given(results)
def test_result_map_composition(result):
    assert result.map(double).map(describe) == result.map(lambda v: describe(double(v)))


@given(values, values)
def test_round_trip_through_result(value, error):
    assert some(value).ok_or(error).ok().unwrap() is value
    assert none().ok_or(error).err().unwrap() is error


@given(values)
def test_some_unwrap_is_identity(value):
    assert some(value).unwrap() is value


def test_none_unwrap_always_raises():
    with pytest.raises(EmptyValueError):
        none().unwrap()


@given(options, options)
def test_zip_is_some_only_when_both_are(left, right):
    zipped = left.zip(right)
    assert zipped.is_some() == (left.is_some() and right.is_some())
    if zipped.is_some():
        assert zipped.unwrap() == (left.unwrap(), right.unwrap())


@given(options, options)
def test_xor_keeps_the_single_present_operand(left, right):
    result = left.xor(right)
    if left.is_some() == right.is_some():
        assert result.is_none()
    elif left.is_some():
        assert result is left
    else:
        assert result is right

# test/test_exceptions.py
import pytest

from sigtrack.core import (
    CoreError,
    InvalidSample,
    InvalidLabel,
    InvalidInterpolation,
    InvalidEntity,
    InvalidMeta,
    InvalidCounter,
    EntityNotFound,
)


def test_exception_inheritance_validation():
    assert issubclass(InvalidSample, CoreError)
    assert issubclass(InvalidLabel, CoreError)
    assert issubclass(InvalidInterpolation, CoreError)
    assert issubclass(InvalidEntity, CoreError)
    assert issubclass(InvalidMeta, CoreError)
    assert issubclass(InvalidCounter, CoreError)


def test_bad_input_errors_are_valueerrors():
    assert issubclass(InvalidSample, ValueError)
    assert issubclass(InvalidLabel, ValueError)
    assert issubclass(InvalidInterpolation, ValueError)
    assert issubclass(InvalidCounter, ValueError)


def test_exception_inheritance_lookup_keyerror():
    assert issubclass(EntityNotFound, KeyError)
    assert issubclass(EntityNotFound, CoreError)


def test_lookup_errors_can_be_raised_and_caught_as_keyerror():
    with pytest.raises(KeyError):
        raise EntityNotFound(3)

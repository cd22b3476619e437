# test/test_interpolate.py
import pytest

from sigtrack.core.interpolate import Interpolation, linear, step
from sigtrack.core import InvalidInterpolation


def test_linear_formula():
    assert linear(10, 10.0, 16, 20.0, 13) == 15.0
    assert linear(0, 1.0, 4, -1.0, 1) == 0.5
    assert linear(2, 5.0, 3, 5.0, 2) == 5.0


def test_step_holds_value():
    assert step(3.25) == 3.25
    assert step(0) == 0.0
    assert isinstance(step(0), float)


def test_parse_kind():
    assert Interpolation.parse("linear") is Interpolation.LINEAR
    assert Interpolation.parse(" Step ") is Interpolation.STEP
    assert Interpolation.parse(Interpolation.STEP) is Interpolation.STEP

    with pytest.raises(InvalidInterpolation):
        Interpolation.parse("spline")
    with pytest.raises(InvalidInterpolation):
        Interpolation.parse(1)  # type: ignore[arg-type]

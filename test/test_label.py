# test/test_label.py
import numpy as np
import pytest

from sigtrack.core import SignalLabel, InvalidLabel


@pytest.mark.parametrize(
    "raw, expected",
    [
        (SignalLabel.POSITION_Y, SignalLabel.POSITION_Y),
        ("position_x", SignalLabel.POSITION_X),
        (" POSITION_Z ", SignalLabel.POSITION_Z),
        (1, SignalLabel.POSITION_Y),
        (np.int8(2), SignalLabel.POSITION_Z),
    ],
)
def test_parse_accepts_members_names_and_values(raw, expected):
    assert SignalLabel.parse(raw) is expected


@pytest.mark.parametrize("raw", ["velocity", "", 3, -1, True, 0.0, None])
def test_parse_rejects_outside_closed_set(raw):
    with pytest.raises(InvalidLabel):
        SignalLabel.parse(raw)


def test_label_set_is_closed_and_indexed_from_zero():
    assert [label.value for label in SignalLabel] == [0, 1, 2]
    assert SignalLabel.POSITION_X.slug == "position_x"

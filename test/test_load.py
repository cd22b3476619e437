# test/test_load.py
from sigtrack.core import Registry, SignalLabel
from sigtrack.io.load import build_registry


def test_build_registry_creates_entities_in_order():
    reg = build_registry(
        [
            {"position_x": {2: 10.0, 16: 20.0}},
            {SignalLabel.POSITION_Y: [(0, 1.0), (10, 3.0)]},
            {},
        ]
    )

    assert reg.entity_count() == 3
    assert reg[0].query_linear("position_x", 9) == 15.0
    assert reg[1].query_linear(SignalLabel.POSITION_Y, 5) == 2.0
    assert len(reg[2]) == 0


def test_build_registry_applies_pairs_in_order():
    reg = build_registry([{SignalLabel.POSITION_Z: [(5, 1.0), (5, 2.0)]}])
    assert list(reg[0].track(SignalLabel.POSITION_Z)) == [(5, 2.0)]


def test_build_registry_attaches_tracks_without_samples():
    reg = build_registry([{"position_x": {}}])
    assert reg[0].has_track("position_x")
    assert reg[0].query_step("position_x", 0) is None


def test_build_registry_extends_existing_registry():
    reg = Registry()
    reg.create_entity()

    out = build_registry([{"position_x": {0: 1.0}}], registry=reg)

    assert out is reg
    assert set(reg) == {0, 1}
    assert reg[1].query_step("position_x", 3) == 1.0

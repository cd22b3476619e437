# test/test_demo.py
import logging

import pytest

from sigtrack.core import SignalLabel
from sigtrack.demo import DEMO_SAMPLES, build_demo_registry, main


def test_build_demo_registry():
    reg = build_demo_registry()

    assert reg.entity_count() == 3
    track = reg[0].track(SignalLabel.POSITION_X)
    assert track.n == len(DEMO_SAMPLES)
    assert track.t_start == 2
    assert track.t_end == 44
    assert len(reg[1]) == 0 and len(reg[2]) == 0


@pytest.mark.integration
def test_main_logs_queries_and_summary(caplog):
    caplog.set_level(logging.DEBUG)

    assert main([]) == 0

    messages = [r.getMessage() for r in caplog.records]
    assert "Linear value at t=13 : 15.0" in messages
    assert "Step value at t=15 : 10.0" in messages
    assert "There are 3 entities in the registry, and the next identifier will be 3." in messages
    assert "Key [44,10]" in messages


def test_main_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        main(["--log-level", "LOUD"])

# sigtrack/demo.py
"""
Small end-to-end run: three entities, one populated POSITION_X track,
a couple of queries and a summary dump.

    sigtrack-demo
    python -m sigtrack.demo --log-level INFO
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from sigtrack.core import Registry, SignalLabel
from sigtrack.io.report import log_summary

logger = logging.getLogger(__name__)

# Inserted out of order on purpose; the track sorts them.
DEMO_SAMPLES: list[tuple[int, float]] = [
    (8, 10.0),
    (7, 10.0),
    (10, 10.0),
    (2, 10.0),
    (6, 10.0),
    (16, 20.0),
    (44, 10.0),
]


def build_demo_registry() -> Registry:
    registry = Registry()
    for _ in range(3):
        registry.create_entity()

    entity = registry[0]
    entity.attach_track(SignalLabel.POSITION_X)
    for t, v in DEMO_SAMPLES:
        entity.append_sample(SignalLabel.POSITION_X, t, v)
    return registry


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sigtrack-demo", description="Run the sigtrack demo.")
    parser.add_argument(
        "--log-level",
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: DEBUG)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s [%(name)s] %(message)s",
    )

    logger.debug("Start")
    registry = build_demo_registry()
    entity = registry[0]

    logger.info("Linear value at t=13 : %s", entity.query_linear(SignalLabel.POSITION_X, 13))
    logger.info("Step value at t=15 : %s", entity.query_step(SignalLabel.POSITION_X, 15))

    log_summary(registry)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

# sigtrack/io/report.py
from __future__ import annotations

import logging

from sigtrack.core import Entity, Registry, SignalTrack

logger = logging.getLogger(__name__)


def _format_value(v: float) -> str:
    # whole numbers print without a trailing ".0"
    return str(int(v)) if v.is_integer() else repr(v)


def _track_lines(track: SignalTrack) -> list[str]:
    label = track.label.slug if track.label is not None else "?"
    lines = [f"Track {label} ({len(track)} samples)."]
    lines.extend(f"Key [{t},{_format_value(v)}]" for t, v in track.for_each_sample())
    return lines


def _entity_lines(entity: Entity) -> list[str]:
    lines = [f"Entity {entity.identifier}."]
    for _, track in entity.for_each_track():
        lines.extend(_track_lines(track))
    return lines


def summarize(registry: Registry) -> list[str]:
    """Human-readable dump of `registry`, entities sorted by identifier."""
    lines = [
        f"There are {registry.entity_count()} entities in the registry, "
        f"and the next identifier will be {registry.next_identifier}."
    ]
    for entity in sorted(registry.for_each_entity(), key=lambda e: e.identifier):
        lines.extend(_entity_lines(entity))
    return lines


def log_summary(
    registry: Registry,
    log: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> None:
    log = logger if log is None else log
    for line in summarize(registry):
        log.log(level, line)

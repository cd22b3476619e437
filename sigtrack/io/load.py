# sigtrack/io/load.py
from __future__ import annotations

from typing import Iterable, Mapping, Union

from sigtrack.core import Registry, SignalLabel

Samples = Union[Mapping[int, float], Iterable[tuple[int, float]]]


def _iter_samples(samples: Samples) -> Iterable[tuple[int, float]]:
    if isinstance(samples, Mapping):
        return samples.items()
    return samples


def build_registry(
    entities: Iterable[Mapping[SignalLabel | str | int, Samples]],
    registry: Registry | None = None,
) -> Registry:
    """
    Create one entity per mapping in `entities` and fill its tracks.

    Each mapping goes label -> samples, where samples is either a mapping
    t -> v or an iterable of (t, v) pairs, applied in iteration order.
    Entities are created in the order given; pass `registry` to extend an
    existing one instead of starting fresh.
    """
    registry = Registry() if registry is None else registry

    for tracks in entities:
        entity = registry[registry.create_entity()]
        for label, samples in tracks.items():
            entity.attach_track(label)
            for t, v in _iter_samples(samples):
                entity.append_sample(label, t, v)

    return registry

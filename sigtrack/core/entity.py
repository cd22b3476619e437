# sigtrack/core/entity.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from numbers import Integral
from typing import Iterator

from .exceptions import InvalidEntity, InvalidMeta
from .interpolate import Interpolation
from .label import SignalLabel
from .metadata import EntityMeta, TrackMeta
from .track import SignalTrack, check_time

logger = logging.getLogger(__name__)


def _empty_slots() -> list[SignalTrack | None]:
    return [None] * len(SignalLabel)


@dataclass(frozen=True, slots=True, eq=False)
class Entity:
    """
    An Entity namespaces one SignalTrack per SignalLabel.

    Design goals:
    - stable identity: `identifier` is fixed at construction
    - closed label set: tracks live in a fixed slot per label
    - permissive writes: samples for an unattached label are discarded
    - absence, not errors: queries on an unattached label return None
    """
    identifier: int
    meta: EntityMeta = field(default_factory=EntityMeta, repr=False)
    _tracks: list[SignalTrack | None] = field(default_factory=_empty_slots, init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.identifier, bool) or not isinstance(self.identifier, Integral):
            raise InvalidEntity("Entity.identifier must be an integer.")
        if self.meta is None:
            object.__setattr__(self, "meta", EntityMeta())
        elif not isinstance(self.meta, EntityMeta):
            raise InvalidMeta("Entity.meta must be an EntityMeta instance.")

    # ---- tracks ----
    def attach_track(self, label: SignalLabel | str | int, meta: TrackMeta | None = None) -> SignalTrack:
        """
        Attach an empty track for `label` and return it.

        An existing track for the same label is replaced, discarding its
        samples. This is a reset, not a merge.
        """
        label = SignalLabel.parse(label)
        if self._tracks[label.value] is not None:
            logger.debug("Entity %s: resetting track %s.", self.identifier, label.slug)
        track = SignalTrack(label=label, meta=meta.copy() if isinstance(meta, TrackMeta) else meta)
        self._tracks[label.value] = track
        return track

    def track(self, label: SignalLabel | str | int) -> SignalTrack | None:
        return self._tracks[SignalLabel.parse(label).value]

    def has_track(self, label: SignalLabel | str | int) -> bool:
        return self.track(label) is not None

    def labels(self) -> list[SignalLabel]:
        return [label for label, _ in self.for_each_track()]

    def for_each_track(self) -> Iterator[tuple[SignalLabel, SignalTrack]]:
        for label in SignalLabel:
            track = self._tracks[label.value]
            if track is not None:
                yield label, track

    def __len__(self) -> int:
        return sum(1 for t in self._tracks if t is not None)

    def __contains__(self, label: object) -> bool:
        try:
            return self.has_track(label)  # type: ignore[arg-type]
        except ValueError:
            return False

    # ---- routed operations ----
    def append_sample(self, label: SignalLabel | str | int, t: int, v: float) -> None:
        track = self.track(label)
        if track is None:
            logger.debug(
                "Entity %s: no track for %s, discarding value %s at time %s.",
                self.identifier, SignalLabel.parse(label).slug, v, t,
            )
            return
        track.add_sample(t, v)

    def query_linear(self, label: SignalLabel | str | int, t: int) -> float | None:
        t = check_time(t)
        track = self.track(label)
        return None if track is None else track.query_linear(t)

    def query_step(self, label: SignalLabel | str | int, t: int) -> float | None:
        t = check_time(t)
        track = self.track(label)
        return None if track is None else track.query_step(t)

    def query(
        self,
        label: SignalLabel | str | int,
        t: int,
        kind: Interpolation | str = Interpolation.LINEAR,
    ) -> float | None:
        kind = Interpolation.parse(kind)
        t = check_time(t)
        track = self.track(label)
        return None if track is None else track.query(t, kind)

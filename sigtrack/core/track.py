# sigtrack/core/track.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Iterator

import numpy as np
from sortedcontainers import SortedDict

from . import interpolate
from .exceptions import InvalidMeta, InvalidSample
from .interpolate import Interpolation
from .label import SignalLabel
from .metadata import TrackMeta

logger = logging.getLogger(__name__)

TIME_MAX = int(np.iinfo(np.uint64).max)


def check_time(t: object) -> int:
    if isinstance(t, bool) or not isinstance(t, Integral):
        raise InvalidSample(f"Timestamp must be an integer, got {type(t).__name__}.")
    if t < 0:
        raise InvalidSample(f"Timestamp must be non-negative, got {t}.")
    if t > TIME_MAX:
        raise InvalidSample(f"Timestamp must fit in 64 bits, got {t}.")
    return int(t)


def _check_value(v: object) -> float:
    if isinstance(v, bool) or not isinstance(v, Real):
        raise InvalidSample(f"Value must be a real number, got {type(v).__name__}.")
    v = float(v)
    if not math.isfinite(v):
        raise InvalidSample("Value must be finite (no NaN/Inf).")
    return v


@dataclass(slots=True, eq=False)
class SignalTrack:
    """
    Sparse scalar signal: timestamp (int >= 0) -> value (float).

    Samples may arrive in any order; they are kept sorted by timestamp and
    a sample at an existing timestamp overwrites the previous value.
    Queries never extrapolate and report absence as None.
    """

    label: SignalLabel | None = None
    meta: TrackMeta = field(default_factory=TrackMeta, repr=False)
    _samples: SortedDict = field(default_factory=SortedDict, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.label is not None:
            self.label = SignalLabel.parse(self.label)
        if self.meta is None:
            self.meta = TrackMeta()
        elif not isinstance(self.meta, TrackMeta):
            raise InvalidMeta("SignalTrack.meta must be a TrackMeta instance.")

    # ---- writes ----
    def add_sample(self, t: int, v: float) -> None:
        t = check_time(t)
        v = _check_value(v)
        logger.debug("Adding value %s at time %s.", v, t)
        self._samples[t] = v

    # ---- queries ----
    def query_linear(self, t: int) -> float | None:
        """
        Linearly interpolate between the nearest sample strictly before `t`
        and the nearest sample at or after `t`.

        Returns None when either bound is missing. Left and right bounds can
        never coincide: the left search is strict and timestamps are unique.
        """
        t = check_time(t)
        samples = self._samples
        i = samples.bisect_left(t)
        if i == 0 or i == len(samples):
            return None

        t0, v0 = samples.peekitem(i - 1)
        t1, v1 = samples.peekitem(i)
        if t1 == t:
            return v1
        return interpolate.linear(t0, v0, t1, v1, t)

    def query_step(self, t: int) -> float | None:
        """Value of the nearest sample at or before `t`, held constant."""
        t = check_time(t)
        i = self._samples.bisect_right(t)
        if i == 0:
            return None
        _, v0 = self._samples.peekitem(i - 1)
        return interpolate.step(v0)

    def query(self, t: int, kind: Interpolation | str = Interpolation.LINEAR) -> float | None:
        kind = Interpolation.parse(kind)
        if kind is Interpolation.STEP:
            return self.query_step(t)
        return self.query_linear(t)

    # ---- enumeration ----
    def for_each_sample(self) -> Iterator[tuple[int, float]]:
        """Yield (timestamp, value) pairs in ascending timestamp order."""
        yield from self._samples.items()

    def __iter__(self) -> Iterator[tuple[int, float]]:
        return self.for_each_sample()

    def __len__(self) -> int:
        return len(self._samples)

    def __contains__(self, t: object) -> bool:
        return t in self._samples

    @property
    def n(self) -> int:
        return len(self._samples)

    @property
    def t_start(self) -> int | None:
        return None if not self._samples else self._samples.peekitem(0)[0]

    @property
    def t_end(self) -> int | None:
        return None if not self._samples else self._samples.peekitem(-1)[0]

    def to_numpy(self) -> tuple[np.ndarray, np.ndarray]:
        """Return fresh (time, values) arrays, uint64 and float64."""
        time = np.fromiter(self._samples.keys(), dtype=np.uint64, count=len(self._samples))
        values = np.fromiter(self._samples.values(), dtype=np.float64, count=len(self._samples))
        return time, values

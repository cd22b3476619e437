# sigtrack/core/interpolate.py
"""
Interpolation kinds and the pure formulas behind them.

Both helpers take already-resolved bounds; the ordered search lives in
SignalTrack.
"""
from __future__ import annotations

from enum import Enum

from .exceptions import InvalidInterpolation


class Interpolation(Enum):
    LINEAR = "linear"
    STEP = "step"

    @classmethod
    def parse(cls, kind: "Interpolation | str") -> "Interpolation":
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind.strip().lower())
            except ValueError as e:
                raise InvalidInterpolation(f"Unknown interpolation kind '{kind}'.") from e
        raise InvalidInterpolation(
            f"Interpolation kind must be an Interpolation or str, got {type(kind).__name__}."
        )


def linear(t0: int, v0: float, t1: int, v1: float, t: int) -> float:
    """Straight line through (t0, v0) and (t1, v1), evaluated at t. Requires t0 != t1."""
    return v0 + (t - t0) * (v1 - v0) / (t1 - t0)


def step(v0: float) -> float:
    """Zero-order hold: the preceding value, unchanged."""
    return float(v0)

# sigtrack/core/__init__.py
"""
Core domain objects for sigtrack.

This module defines the in-memory signal store:
- SignalTrack: sparse (timestamp, value) samples with linear / step queries
- Entity: one SignalTrack per SignalLabel, with a fixed identifier
- Registry: collection of entities, issuing identifiers from an IdCounter

The core layer is independent from loading and reporting helpers.
"""

from .label import SignalLabel
from .interpolate import Interpolation
from .track import SignalTrack
from .entity import Entity
from .counter import IdCounter
from .registry import Registry
from .metadata import TrackMeta, EntityMeta
from .exceptions import (
    CoreError,
    InvalidSample,
    InvalidLabel,
    InvalidInterpolation,
    InvalidEntity,
    InvalidMeta,
    InvalidCounter,
    EntityNotFound,
)


__all__ = [
    # signals
    "SignalLabel",
    "Interpolation",
    "SignalTrack",

    # domain objects
    "Entity",
    "IdCounter",
    "Registry",

    # metadata
    "TrackMeta",
    "EntityMeta",

    # exceptions
    "CoreError",
    "InvalidSample",
    "InvalidLabel",
    "InvalidInterpolation",
    "InvalidEntity",
    "InvalidMeta",
    "InvalidCounter",
    "EntityNotFound",
]

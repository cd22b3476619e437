# sigtrack/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all core-domain exceptions."""


# ---- Validation / construction errors ----
class InvalidSample(CoreError, ValueError):
    """Raised when a sample timestamp or value is outside its type domain."""


class InvalidLabel(CoreError, ValueError):
    """Raised when a label is not a member of the closed SignalLabel set."""


class InvalidInterpolation(CoreError, ValueError):
    """Raised when an unknown interpolation kind is requested."""


class InvalidEntity(CoreError):
    """Raised when an Entity is constructed with invalid inputs."""


class InvalidMeta(CoreError):
    """Raised when TrackMeta / EntityMeta is constructed with invalid inputs."""


class InvalidCounter(CoreError, ValueError):
    """Raised when an IdCounter is constructed with an invalid start value."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class EntityNotFound(CoreError, KeyError):
    """Raised when a requested entity identifier is not present."""

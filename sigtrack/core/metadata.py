# sigtrack/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidMeta


@dataclass(frozen=True, slots=True)
class TrackMeta:
    """
    Metadata attached to a SignalTrack.

    - unit: physical unit of the values (m, rad, ...)
    - description: human-friendly description
    - attrs: arbitrary additional fields
    """
    unit: str | None = None
    description: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidMeta("TrackMeta.attrs must be a dict.")

    def copy(self) -> "TrackMeta":
        return TrackMeta(unit=self.unit, description=self.description, attrs=self.attrs.copy())


@dataclass(frozen=True, slots=True)
class EntityMeta:
    """
    Metadata attached to an Entity.

    Example kinds:
    - vehicle
    - camera
    - marker
    """
    name: str | None = None
    kind: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidMeta("EntityMeta.attrs must be a dict.")

    def copy(self) -> "EntityMeta":
        return EntityMeta(name=self.name, kind=self.kind, attrs=self.attrs.copy())

# sigtrack/core/label.py
from __future__ import annotations

from enum import Enum
from numbers import Integral

from .exceptions import InvalidLabel


class SignalLabel(Enum):
    """Closed set of signals an entity can carry, one track each."""

    POSITION_X = 0
    POSITION_Y = 1
    POSITION_Z = 2

    @property
    def slug(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, label: "SignalLabel | str | int") -> "SignalLabel":
        """
        Coerce `label` to a SignalLabel.

        Accepts a member, its name (case-insensitive, e.g. "position_x")
        or its integer value. Raises InvalidLabel for anything else.
        """
        if isinstance(label, cls):
            return label
        if isinstance(label, str):
            try:
                return cls[label.strip().upper()]
            except KeyError as e:
                raise InvalidLabel(f"Unknown signal label '{label}'.") from e
        if isinstance(label, Integral) and not isinstance(label, bool):
            try:
                return cls(int(label))
            except ValueError as e:
                raise InvalidLabel(f"Unknown signal label value {label}.") from e
        raise InvalidLabel(f"Signal label must be a SignalLabel, str or int, got {type(label).__name__}.")

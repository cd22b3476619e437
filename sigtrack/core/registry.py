# sigtrack/core/registry.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from .counter import IdCounter
from .entity import Entity
from .exceptions import EntityNotFound, InvalidCounter
from .metadata import EntityMeta

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class Registry:
    """
    Registry = every Entity in the process, keyed by identifier.

    Identifiers come from `counter`; create_entity() is the only way to
    add an entity, so uniqueness follows from the counter alone. Pass the
    same IdCounter to several registries to share one identifier space.
    """
    counter: IdCounter = field(default_factory=IdCounter)
    _entities: dict[int, Entity] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.counter is None:
            self.counter = IdCounter()
        elif not isinstance(self.counter, IdCounter):
            raise InvalidCounter("Registry.counter must be an IdCounter instance.")

    def create_entity(self, meta: EntityMeta | None = None) -> int:
        identifier = self.counter.fetch_and_increment()
        self._entities[identifier] = Entity(identifier=identifier, meta=meta.copy() if isinstance(meta, EntityMeta) else meta)
        logger.debug("Created entity %s.", identifier)
        return identifier

    def entity_count(self) -> int:
        return len(self._entities)

    def for_each_entity(self) -> Iterator[Entity]:
        """Yield every entity; order is unspecified."""
        yield from self._entities.values()

    @property
    def next_identifier(self) -> int:
        return self.counter.peek()

    # ---- dict-like API ----
    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[int]:
        return iter(self._entities)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entities

    def __getitem__(self, identifier: int) -> Entity:
        try:
            return self._entities[identifier]
        except KeyError as e:
            raise EntityNotFound(identifier) from e

    def get(self, identifier: int, default: Entity | None = None) -> Entity | None:
        return self._entities.get(identifier, default)

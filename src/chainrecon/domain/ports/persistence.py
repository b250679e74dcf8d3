"""Ports for persisting derived entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chainrecon.domain.model import Entity


@runtime_checkable
class EntityStore(Protocol):
    """Keyed entity store, parameterised by entity class.

    ``save`` creates or overwrites the entity stored under ``entity.key``.
    ``remove`` on an absent key does nothing.
    """

    def load[TEntity: Entity](self, entity_type: type[TEntity], key: str) -> TEntity | None: ...

    def save(self, entity: Entity) -> None: ...

    def remove(self, entity_type: type[Entity], key: str) -> None: ...

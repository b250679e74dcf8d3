"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chainrecon.domain.ports import EntityStore

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from chainrecon.domain.model import Entity


class SqlAlchemyEntityStore(EntityStore):
    """Keyed entity store over one session; entities are mapped by natural key."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def load[TEntity: Entity](self, entity_type: type[TEntity], key: str) -> TEntity | None:
        return self.session.get(entity_type, key)

    def save(self, entity: Entity) -> None:
        # merge: the caller may hand over a fresh instance for an existing key
        self.session.merge(entity)
        self.session.flush()

    def remove(self, entity_type: type[Entity], key: str) -> None:
        entity = self.session.get(entity_type, key)
        if entity is None:
            return
        self.session.delete(entity)
        self.session.flush()

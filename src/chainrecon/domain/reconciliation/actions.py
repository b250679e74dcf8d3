"""Store actions produced by the reconcilers.

Reconcilers decide first and mutate second: every decision is expressed as one
of :class:`NoOp`, :class:`Upsert` or :class:`Remove`, and
:func:`apply_action` turns it into at most one store mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chainrecon.domain.model import Entity
    from chainrecon.domain.ports import EntityStore


@dataclass(frozen=True, slots=True)
class NoOp:
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class Upsert:
    entity: Entity


@dataclass(frozen=True, slots=True)
class Remove:
    entity_type: type[Entity]
    key: str


type Action = NoOp | Upsert | Remove


def apply_action(store: EntityStore, action: Action) -> None:
    if isinstance(action, Upsert):
        store.save(action.entity)
    elif isinstance(action, Remove):
        store.remove(action.entity_type, action.key)

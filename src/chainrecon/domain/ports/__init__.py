"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import EntityStore
from .unit_of_work import (
    ReconcileRepositories,
    ReconcileUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "EntityStore",
    "ReconcileRepositories",
    "ReconcileUnitOfWork",
    "RepositoryCollection",
    "UnitOfWork",
]

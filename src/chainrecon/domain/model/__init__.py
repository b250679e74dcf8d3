"""Public domain model surface."""

from __future__ import annotations

from chainrecon.domain.model.chain import BlockHeader, Event, Timestamp, Transaction
from chainrecon.domain.model.entities import (
    CLASS_BY_ENTITY_TYPE,
    ENTITY_CLASSES,
    Binding,
    Block,
    Entity,
    Proposal,
    Relation,
    Rule,
    Transfer,
)
from chainrecon.domain.model.enums import EntityType, OperationType

__all__ = [  # noqa: RUF022
    # base
    "Entity",
    "EntityType",
    "OperationType",
    "ENTITY_CLASSES",
    "CLASS_BY_ENTITY_TYPE",
    # governance
    "Rule",
    "Binding",
    "Relation",
    "Proposal",
    # chain data
    "Block",
    "Transfer",
    # inputs
    "BlockHeader",
    "Event",
    "Timestamp",
    "Transaction",
]

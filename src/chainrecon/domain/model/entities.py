"""
Derived entities.

Every entity is identified by a natural key taken verbatim from event or
transaction data; there is no surrogate id layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from chainrecon.domain.model.enums import EntityType


@dataclass(kw_only=True)
class Entity(ABC):
    """Base for all persisted entities."""

    # class-level discriminator; subclasses must override
    ENTITY_TYPE: ClassVar[EntityType]

    @property
    def entity_type(self) -> EntityType:
        return self.ENTITY_TYPE

    @property
    @abstractmethod
    def key(self) -> str:
        """Natural key under which the entity is stored."""


@dataclass(kw_only=True)
class Rule(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.RULE

    name: str
    content: str
    hash: str

    @property
    def key(self) -> str:
        return self.name


@dataclass(kw_only=True)
class Binding(Entity):
    """Permission binding; ``rules`` keeps the announced order, repeats included."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.BINDING

    name: str
    content: str
    hash: str
    rules: list[str] = field(default_factory=list[str])

    @property
    def key(self) -> str:
        return self.name


@dataclass(kw_only=True)
class Relation(Entity):
    """Maps one contract address to one binding."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.RELATION

    contract_address: str
    binding: str

    @property
    def key(self) -> str:
        return self.contract_address


@dataclass(kw_only=True)
class Proposal(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.PROPOSAL

    id: str
    result: str

    @property
    def key(self) -> str:
        return self.id


@dataclass(kw_only=True)
class Block(Entity):
    """Observed block header; ``timestamp`` is Unix time in nanoseconds."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.BLOCK

    hash: str
    height: int
    app_hash: str
    data_hash: str
    proposer_address: str
    timestamp: int

    @property
    def key(self) -> str:
        return self.hash


@dataclass(kw_only=True)
class Transfer(Entity):
    """Value transfer carried by a transaction.

    ``timestamp`` is the containing block's Unix time in seconds. ``value`` is an
    exact integer amount in the smallest unit of ``tokenname``.
    """

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.TRANSFER

    hash: str
    sender: str
    receiver: str
    value: int
    tokenname: str
    timestamp: int
    contract_address: str | None = None

    @property
    def key(self) -> str:
        return self.hash


ENTITY_CLASSES: tuple[type[Entity], ...] = (Rule, Binding, Relation, Proposal, Block, Transfer)

CLASS_BY_ENTITY_TYPE: dict[EntityType, type[Entity]] = {
    cls.ENTITY_TYPE: cls for cls in ENTITY_CLASSES
}

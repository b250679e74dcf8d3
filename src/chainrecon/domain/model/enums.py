"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityType(StrEnum):
    """Discriminator for the derived entities kept in the store."""

    RULE = "rule"
    BINDING = "binding"
    RELATION = "relation"
    PROPOSAL = "proposal"
    BLOCK = "block"
    TRANSFER = "transfer"


class OperationType(StrEnum):
    """Mutation intent carried by the ``operation_type`` event attribute."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: str | None) -> OperationType | None:
        """Return the matching operation, or ``None`` for absent/unknown values."""

        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

"""SQLAlchemy mapping metadata for the chainrecon domain model."""

from __future__ import annotations

import json
import logging
from functools import cache
from typing import TYPE_CHECKING, Any, Final, cast

from sqlalchemy import BigInteger, Column, Dialect, String, Table, Text, TypeDecorator, orm
from sqlalchemy.orm import configure_mappers

from chainrecon.domain.model import ENTITY_CLASSES, EntityType

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class DecimalIntegerType(TypeDecorator[int]):
    """Arbitrary-precision integers persisted as decimal text."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: int | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> int | None:
        _ = dialect
        if value is None:
            return None
        return int(value)


class StringListType(TypeDecorator[list[str]]):
    """Ordered string lists persisted as a JSON array."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: list[str] | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return json.dumps(list(value))

    def process_result_value(self, value: str | None, dialect: Dialect) -> list[str]:
        _ = dialect
        if value is None:
            return []
        loaded = json.loads(value)
        if not isinstance(loaded, list):
            return []
        items = cast(list[Any], loaded)
        return [str(item) for item in items]


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Governance tables -----------------------------------------------------------

rule_table = Table(
    "rule",
    mapper_registry.metadata,
    Column("name", String, primary_key=True),
    Column("content", Text, nullable=False),
    Column("hash", String, nullable=False),
)

binding_table = Table(
    "binding",
    mapper_registry.metadata,
    Column("name", String, primary_key=True),
    Column("content", Text, nullable=False),
    Column("hash", String, nullable=False),
    Column("rules", StringListType(), nullable=False, default=list),
)

relation_table = Table(
    "relation",
    mapper_registry.metadata,
    Column("contract_address", String, primary_key=True),
    Column("binding", String, nullable=False, index=True),
)

proposal_table = Table(
    "proposal",
    mapper_registry.metadata,
    Column("id", String, primary_key=True),
    Column("result", String, nullable=False),
)

# Chain tables ----------------------------------------------------------------

block_table = Table(
    "block",
    mapper_registry.metadata,
    Column("hash", String, primary_key=True),
    Column("height", BigInteger, nullable=False, index=True),
    Column("app_hash", String, nullable=False),
    Column("data_hash", String, nullable=False),
    Column("proposer_address", String, nullable=False),
    Column("timestamp", BigInteger, nullable=False),
)

transfer_table = Table(
    "transfer",
    mapper_registry.metadata,
    Column("hash", String, primary_key=True),
    Column("sender", String, nullable=False, index=True),
    Column("receiver", String, nullable=False, index=True),
    Column("value", DecimalIntegerType(), nullable=False),
    Column("tokenname", String, nullable=False),
    Column("timestamp", BigInteger, nullable=False),
    Column("contract_address", String, nullable=True),
)

TABLE_BY_ENTITY_TYPE: Final[dict[EntityType, Table]] = {
    EntityType.RULE: rule_table,
    EntityType.BINDING: binding_table,
    EntityType.RELATION: relation_table,
    EntityType.PROPOSAL: proposal_table,
    EntityType.BLOCK: block_table,
    EntityType.TRANSFER: transfer_table,
}

@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    for entity_cls in ENTITY_CLASSES:
        mapper_registry.map_imperatively(
            entity_cls,
            TABLE_BY_ENTITY_TYPE[entity_cls.ENTITY_TYPE],
        )

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)

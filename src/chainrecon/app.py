"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from chainrecon.adapters.feed import read_feed
from chainrecon.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from chainrecon.domain.ingestion import ReconcileRecordsResult, reconcile_chain_records
from chainrecon.domain.ports import ReconcileUnitOfWork

if TYPE_CHECKING:
    from pathlib import Path

    from chainrecon.domain.routing import EventRouter

UnitOfWorkFactory = Callable[[], ReconcileUnitOfWork]


log = getLogger(__name__)


def initialise_database(*, database_uri: str | None = None) -> None:
    """Start the SQLAlchemy adapter, creating tables if needed."""

    if is_started() and database_uri is None:
        return
    startup(database_uri=database_uri, force=True)


def replay_feed(
    path: Path,
    *,
    database_uri: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    router: EventRouter | None = None,
) -> ReconcileRecordsResult:
    """Reconcile every record of a JSON-lines feed file into the store."""

    effective_uow = unit_of_work_factory
    if effective_uow is None:
        initialise_database(database_uri=database_uri)
        effective_uow = SqlAlchemyUnitOfWork
    log.info("Starting feed replay: path=%s", path)

    return reconcile_chain_records(
        read_feed(path),
        unit_of_work_factory=effective_uow,
        router=router,
    )

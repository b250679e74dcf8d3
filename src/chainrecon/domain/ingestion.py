"""Application service applying chain records to the entity store."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from chainrecon.domain.model import BlockHeader
from chainrecon.domain.routing import EventRouter, ReconcileSummary

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from chainrecon.domain.model import Transaction
    from chainrecon.domain.ports import ReconcileUnitOfWork

log = getLogger(__name__)


@dataclass(slots=True)
class ReconcileRecordsResult:
    """Outcome of reconciling a stream of chain records."""

    blocks: int = 0
    transactions: int = 0
    summary: ReconcileSummary = field(default_factory=ReconcileSummary)


def reconcile_chain_records(
    records: Iterable[BlockHeader | Transaction],
    *,
    unit_of_work_factory: Callable[[], ReconcileUnitOfWork],
    router: EventRouter | None = None,
) -> ReconcileRecordsResult:
    """Apply records in order, committing after each one.

    A failing record is rolled back and its error propagates; records applied
    before it stay committed. Reconciliation is idempotent, so the whole stream
    can be replayed after fixing the input.
    """

    effective_router = router or EventRouter()
    result = ReconcileRecordsResult()

    with unit_of_work_factory() as uow:
        store = uow.repositories.entities
        for record in records:
            if isinstance(record, BlockHeader):
                summary = effective_router.handle_block(store, record)
                result.blocks += 1
            else:
                summary = effective_router.handle_transaction(store, record)
                result.transactions += 1
            uow.commit()
            result.summary.merge(summary)

    log.info(
        "Reconciled %d blocks and %d transactions: upserted=%d, removed=%d, unchanged=%d",
        result.blocks,
        result.transactions,
        result.summary.upserted,
        result.summary.removed,
        result.summary.unchanged,
    )
    return result

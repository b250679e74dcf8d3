"""Route chain records to the reconcilers that own them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from chainrecon.domain.reconciliation import (
    Action,
    NoOp,
    Remove,
    TransferAggregator,
    Upsert,
    reconcile_binding,
    reconcile_block,
    reconcile_proposal,
    reconcile_relation,
    reconcile_rule,
)

if TYPE_CHECKING:
    from chainrecon.domain.model import BlockHeader, Event, Transaction
    from chainrecon.domain.ports import EntityStore

type EventHandler = Callable[[EntityStore, Event], Action]

log = getLogger(__name__)


DEFAULT_EVENT_HANDLERS: dict[str, EventHandler] = {
    "rule": reconcile_rule,
    "binding": reconcile_binding,
    "relation": reconcile_relation,
    "proposal": reconcile_proposal,
}


@dataclass(slots=True)
class ReconcileSummary:
    """Counts of the actions taken while reconciling a batch of records."""

    upserted: int = 0
    removed: int = 0
    unchanged: int = 0
    ignored_events: int = 0

    def record(self, action: Action) -> None:
        if isinstance(action, Upsert):
            self.upserted += 1
        elif isinstance(action, Remove):
            self.removed += 1
        elif isinstance(action, NoOp):
            self.unchanged += 1

    def merge(self, other: ReconcileSummary) -> None:
        self.upserted += other.upserted
        self.removed += other.removed
        self.unchanged += other.unchanged
        self.ignored_events += other.ignored_events


class EventRouter:
    """Dispatch events by kind and aggregate transfers once per transaction."""

    def __init__(
        self,
        handlers: dict[str, EventHandler] | None = None,
        *,
        transfers: TransferAggregator | None = None,
    ) -> None:
        self._handlers: dict[str, EventHandler] = dict(
            DEFAULT_EVENT_HANDLERS if handlers is None else handlers
        )
        self.transfers = transfers or TransferAggregator()

    @property
    def kinds(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def register(self, kind: str, handler: EventHandler) -> None:
        self._handlers[kind] = handler

    def handle_event(self, store: EntityStore, event: Event) -> Action | None:
        handler = self._handlers.get(event.kind)
        if handler is None:
            return None
        return handler(store, event)

    def handle_transaction(self, store: EntityStore, transaction: Transaction) -> ReconcileSummary:
        summary = ReconcileSummary()
        for event in transaction.events:
            action = self.handle_event(store, event)
            if action is None:
                if event.kind != self.transfers.kind:
                    log.debug("No handler for %s event in %s", event.kind, transaction.hash)
                    summary.ignored_events += 1
                continue
            summary.record(action)
        summary.record(self.transfers.handle(store, transaction))
        return summary

    def handle_block(self, store: EntityStore, header: BlockHeader) -> ReconcileSummary:
        summary = ReconcileSummary()
        summary.record(reconcile_block(store, header))
        return summary

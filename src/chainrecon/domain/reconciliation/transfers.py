"""Transaction-scoped transfer reconciliation.

A transaction is represented by at most one :class:`Transfer`, keyed by the
transaction hash. Whether it exists is a function of the transaction's
*current* event list: a transaction can be delivered again with a filtered
event list (for example after a compliance pass rejected the transfer), in
which case the previously recorded transfer is retracted.

Policy for transactions with several ``transfer`` events: the first one in
event order is the evidence, later ones are ignored. Once a transfer is
recorded it is not rewritten by re-deliveries that still carry evidence.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from chainrecon.domain.model import Transfer

from .actions import Action, NoOp, Remove, Upsert, apply_action
from .attributes import TransferAttributes, extract_attributes
from .keys import transfer_key

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chainrecon.domain.model import Event, Transaction
    from chainrecon.domain.ports import EntityStore

TRANSFER_EVENT_KIND: Final[str] = "transfer"

log = getLogger(__name__)


def find_evidence(events: Iterable[Event], kind: str = TRANSFER_EVENT_KIND) -> Event | None:
    """Return the first event of ``kind``, if any."""

    for event in events:
        if event.kind == kind:
            return event
    return None


def build_transfer(transaction: Transaction, event: Event) -> Transfer:
    attributes = extract_attributes(TransferAttributes, event)
    return Transfer(
        hash=transfer_key(transaction),
        sender=attributes.sender,
        receiver=attributes.recipient,
        value=attributes.amount,
        tokenname=attributes.denom,
        timestamp=transaction.block.time.seconds,
        contract_address=attributes.contract_address,
    )


def reconcile_transfer(
    existing: Transfer | None,
    transaction: Transaction,
    *,
    kind: str = TRANSFER_EVENT_KIND,
) -> Action:
    """Decide what happens to the transfer of ``transaction``.

    Pure: reads nothing but its arguments and mutates nothing.
    """

    evidence = find_evidence(transaction.events, kind)
    if evidence is None:
        if existing is None:
            return NoOp("no transfer event")
        return Remove(Transfer, transfer_key(transaction))
    if existing is not None:
        return NoOp("transfer already recorded")
    return Upsert(build_transfer(transaction, evidence))


class TransferAggregator:
    """Keeps the store's transfer for a transaction in line with its events."""

    def __init__(self, kind: str = TRANSFER_EVENT_KIND) -> None:
        self.kind = kind

    def handle(self, store: EntityStore, transaction: Transaction) -> Action:
        key = transfer_key(transaction)
        existing = store.load(Transfer, key)
        action = reconcile_transfer(existing, transaction, kind=self.kind)
        apply_action(store, action)
        if isinstance(action, Upsert):
            log.info("Recorded transfer for transaction %s", key)
        elif isinstance(action, Remove):
            log.info("Transfer event no longer present, removed transfer %s", key)
        return action

    __call__ = handle

from __future__ import annotations

from chainrecon.domain.model import Binding, Block, Event, Proposal, Rule, Transfer
from chainrecon.domain.ports import EntityStore
from chainrecon.domain.reconciliation import Action, NoOp, TransferAggregator
from chainrecon.domain.routing import EventRouter, ReconcileSummary
from tests.helpers.chain import (
    binding_event,
    make_event,
    make_header,
    make_transaction,
    rule_event,
    transfer_event,
)
from tests.helpers.stores import InMemoryEntityStore


def test_transaction_events_dispatched_in_order(store: InMemoryEntityStore) -> None:
    transaction = make_transaction(
        "0xabc",
        [
            rule_event("insert"),
            rule_event("update", content="c2", hash_="h2"),
            binding_event("insert", rules="r1"),
            make_event("proposal", proposal_id="1", proposal_result="passed"),
            transfer_event(),
        ],
    )

    summary = EventRouter().handle_transaction(store, transaction)

    assert store.load(Rule, "r1") == Rule(name="r1", content="c2", hash="h2")
    assert store.load(Binding, "b1") is not None
    assert store.load(Proposal, "1") == Proposal(id="1", result="passed")
    assert store.load(Transfer, "0xabc") is not None
    assert summary == ReconcileSummary(upserted=5, removed=0, unchanged=0, ignored_events=0)


def test_unknown_event_kinds_are_counted_and_skipped(store: InMemoryEntityStore) -> None:
    transaction = make_transaction("0xabc", [make_event("message", module="bank")])

    summary = EventRouter().handle_transaction(store, transaction)

    assert summary.ignored_events == 1
    assert summary.unchanged == 1
    assert store.mutations == []


def test_redelivery_without_transfer_retracts(store: InMemoryEntityStore) -> None:
    router = EventRouter()
    router.handle_transaction(store, make_transaction("0xabc", [transfer_event()]))

    summary = router.handle_transaction(store, make_transaction("0xabc", []))

    assert summary.removed == 1
    assert store.load(Transfer, "0xabc") is None


def test_register_custom_handler(store: InMemoryEntityStore) -> None:
    seen: list[Event] = []

    def handler(_store: EntityStore, event: Event) -> Action:
        seen.append(event)
        return NoOp("recorded")

    router = EventRouter(handlers={})
    router.register("audit", handler)
    event = make_event("audit", note="x")

    router.handle_transaction(store, make_transaction("0x1", [event, rule_event("insert")]))

    assert seen == [event]
    assert router.kinds == frozenset({"audit"})
    assert store.load(Rule, "r1") is None


def test_custom_transfer_kind(store: InMemoryEntityStore) -> None:
    router = EventRouter(transfers=TransferAggregator(kind="coin_move"))
    event = make_event("coin_move", sender="S", recipient="R", amount="9", denom="atom")

    summary = router.handle_transaction(store, make_transaction("0x1", [event]))

    assert summary.ignored_events == 0
    transfer = store.load(Transfer, "0x1")
    assert transfer is not None
    assert transfer.value == 9


def test_handle_block(store: InMemoryEntityStore) -> None:
    summary = EventRouter().handle_block(store, make_header("0xb1"))

    assert summary.upserted == 1
    assert store.load(Block, "0xb1") is not None


def test_summary_merge() -> None:
    total = ReconcileSummary(upserted=1)
    total.merge(ReconcileSummary(upserted=2, removed=1, unchanged=3, ignored_events=4))

    assert total == ReconcileSummary(upserted=3, removed=1, unchanged=3, ignored_events=4)

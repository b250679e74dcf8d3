"""Translate feed payloads into domain chain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chainrecon.domain.model import BlockHeader, Event, Timestamp, Transaction

from .schema import BlockRecord, TransactionRecord

if TYPE_CHECKING:
    from .schema import EventPayload, HeaderPayload


def to_block_header(payload: HeaderPayload) -> BlockHeader:
    return BlockHeader(
        hash=payload.hash,
        height=payload.height,
        app_hash=payload.app_hash,
        data_hash=payload.data_hash,
        proposer_address=payload.proposer_address,
        time=Timestamp(seconds=payload.time.seconds, nanos=payload.time.nanos),
    )


def to_event(payload: EventPayload) -> Event:
    attributes: dict[str, str] = {}
    for attribute in payload.attributes:
        # repeated keys: the first occurrence wins
        attributes.setdefault(attribute.key, attribute.value)
    return Event(kind=payload.type, attributes=attributes)


def to_transaction(payload: TransactionRecord) -> Transaction:
    return Transaction(
        hash=payload.hash,
        block=to_block_header(payload.block),
        events=tuple(to_event(event) for event in payload.events),
    )


def translate_record(record: BlockRecord | TransactionRecord) -> BlockHeader | Transaction:
    if isinstance(record, BlockRecord):
        return to_block_header(record.header)
    return to_transaction(record)

from __future__ import annotations

import json
from pathlib import Path

import pytest

from chainrecon.adapters.feed import FeedFormatError, parse_feed_lines, read_feed
from chainrecon.domain.model import BlockHeader, Timestamp, Transaction

FEED_PATH = Path(__file__).resolve().parents[2] / "data" / "feed.jsonl"


def _header(**overrides: object) -> dict[str, object]:
    header: dict[str, object] = {
        "hash": "0xb1",
        "height": 3,
        "app_hash": "aa",
        "data_hash": "dd",
        "proposer_address": "ff",
        "time": {"seconds": 5, "nanos": 6},
    }
    header.update(overrides)
    return header


def test_read_feed_translates_records_in_order() -> None:
    records = list(read_feed(FEED_PATH))

    assert [type(record) for record in records] == [
        BlockHeader,
        Transaction,
        Transaction,
        Transaction,
    ]
    block = records[0]
    assert isinstance(block, BlockHeader)
    assert block.hash == "0xb10c01"
    assert block.app_hash == "0xaa01"
    assert block.data_hash == "0x"
    assert block.proposer_address == "0xf00d"
    assert block.time == Timestamp(seconds=1_700_000_000, nanos=42)


def test_transaction_hash_normalised_and_events_kept() -> None:
    transaction = list(read_feed(FEED_PATH))[1]

    assert isinstance(transaction, Transaction)
    assert transaction.hash == "0xabc123"
    assert [event.kind for event in transaction.events] == [
        "rule",
        "binding",
        "relation",
        "transfer",
    ]
    assert transaction.events[3].attribute("amount") == "1000"


def test_repeated_attribute_keys_keep_first_value() -> None:
    line = json.dumps(
        {
            "type": "tx",
            "hash": "0x01",
            "block": _header(),
            "events": [
                {
                    "type": "transfer",
                    "attributes": [
                        {"key": "amount", "value": "1"},
                        {"key": "amount", "value": "2"},
                    ],
                }
            ],
        }
    )

    (transaction,) = parse_feed_lines([line])

    assert isinstance(transaction, Transaction)
    assert transaction.events[0].attributes == {"amount": "1"}


def test_block_record() -> None:
    (header,) = parse_feed_lines([json.dumps({"type": "block", "header": _header()})])

    assert header == BlockHeader(
        hash="0xb1",
        height=3,
        app_hash="0xaa",
        data_hash="0xdd",
        proposer_address="0xff",
        time=Timestamp(seconds=5, nanos=6),
    )


@pytest.mark.parametrize(
    "record",
    [
        {"type": "receipt"},
        {"type": "block", "header": _header(height=-1)},
        {"type": "block", "header": _header(hash="0xnothex")},
        {"type": "tx", "hash": "0x01", "block": _header(time={"seconds": 1, "nanos": -1})},
    ],
)
def test_invalid_records_report_line_number(record: dict[str, object]) -> None:
    lines = ["", json.dumps({"type": "block", "header": _header()}), json.dumps(record)]

    with pytest.raises(FeedFormatError) as exc:
        list(parse_feed_lines(lines))

    assert exc.value.line_number == 3


def test_invalid_json_is_feed_error() -> None:
    with pytest.raises(FeedFormatError, match="line 1"):
        list(parse_feed_lines(["{not json"]))

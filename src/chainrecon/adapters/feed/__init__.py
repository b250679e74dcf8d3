"""JSON-lines chain feed adapter."""

from __future__ import annotations

from .reader import FeedFormatError, parse_feed_lines, read_feed
from .schema import BlockRecord, HeaderPayload, TransactionRecord
from .translator import to_block_header, to_transaction, translate_record

__all__ = [
    "BlockRecord",
    "FeedFormatError",
    "HeaderPayload",
    "TransactionRecord",
    "parse_feed_lines",
    "read_feed",
    "to_block_header",
    "to_transaction",
    "translate_record",
]

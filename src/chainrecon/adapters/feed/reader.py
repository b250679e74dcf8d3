"""Read chain records from a JSON-lines feed file."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import FEED_RECORD_ADAPTER
from .translator import translate_record

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from chainrecon.domain.model import BlockHeader, Transaction

log = getLogger(__name__)


class FeedFormatError(ValueError):
    """Raised when a feed line is not a valid block or transaction record."""

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


def parse_feed_lines(lines: Iterable[str]) -> Iterator[BlockHeader | Transaction]:
    """Yield domain records for each non-blank line, in order."""

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            record = FEED_RECORD_ADAPTER.validate_json(line)
        except ValidationError as exc:
            raise FeedFormatError(line_number, str(exc)) from exc
        try:
            yield translate_record(record)
        except ValueError as exc:
            raise FeedFormatError(line_number, str(exc)) from exc


def read_feed(path: Path) -> Iterator[BlockHeader | Transaction]:
    log.info("Reading chain feed from %s", path)
    with path.open(encoding="utf-8") as handle:
        yield from parse_feed_lines(handle)

"""Chain input records handed to the reconcilers by the delivery layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, slots=True)
class Timestamp:
    """Protobuf-style timestamp: whole seconds plus a nanosecond remainder."""

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            raise ValueError("nanos must be within [0, 1e9)")

    @property
    def unix_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos


@dataclass(frozen=True, slots=True)
class Event:
    """Structured event emitted by a transaction; attribute order is preserved."""

    kind: str
    attributes: Mapping[str, str] = field(default_factory=dict[str, str])

    def attribute(self, name: str) -> str | None:
        return self.attributes.get(name)


@dataclass(frozen=True, slots=True)
class BlockHeader:
    hash: str
    height: int
    app_hash: str
    data_hash: str
    proposer_address: str
    time: Timestamp

    def __post_init__(self) -> None:
        if self.height < 0:
            raise ValueError("block height must be non-negative")


@dataclass(frozen=True, slots=True)
class Transaction:
    hash: str
    block: BlockHeader
    events: tuple[Event, ...] = ()

"""Pydantic models describing chain feed records."""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

_HEX = re.compile(r"[0-9a-f]*")


def normalize_hex(value: object) -> object:
    """Lower-case a hex string and give it a ``0x`` prefix."""

    if not isinstance(value, str):
        return value
    text = value.strip().lower()
    if text.startswith("0x"):
        text = text[2:]
    if not _HEX.fullmatch(text):
        raise ValueError(f"not a hex string: {value!r}")
    return f"0x{text}"


class FeedBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TimePayload(FeedBaseModel):
    seconds: int = Field(ge=0)
    nanos: int = Field(default=0, ge=0, lt=1_000_000_000)


class HeaderPayload(FeedBaseModel):
    hash: str = Field(min_length=3)
    height: int = Field(ge=0)
    app_hash: str = Field(alias="appHash")
    data_hash: str = Field(alias="dataHash")
    proposer_address: str = Field(alias="proposerAddress")
    time: TimePayload

    _normalize_hashes = field_validator(
        "hash", "app_hash", "data_hash", "proposer_address", mode="before"
    )(normalize_hex)


class AttributePayload(FeedBaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    key: str
    value: str


class EventPayload(FeedBaseModel):
    type: str = Field(min_length=1)
    attributes: list[AttributePayload] = Field(default_factory=list[AttributePayload])


class BlockRecord(FeedBaseModel):
    type: Literal["block"]
    header: HeaderPayload


class TransactionRecord(FeedBaseModel):
    type: Literal["tx"]
    hash: str = Field(min_length=3)
    block: HeaderPayload
    events: list[EventPayload] = Field(default_factory=list[EventPayload])

    _normalize_hash = field_validator("hash", mode="before")(normalize_hex)


FeedRecord = Annotated[BlockRecord | TransactionRecord, Field(discriminator="type")]

FEED_RECORD_ADAPTER: TypeAdapter[BlockRecord | TransactionRecord] = TypeAdapter(FeedRecord)

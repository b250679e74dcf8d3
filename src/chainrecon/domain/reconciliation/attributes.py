"""Typed extraction of event attributes.

Each event kind the reconcilers understand has a pydantic model describing the
attributes it must carry. Validation failures are re-raised as
:class:`MissingAttributeError` or :class:`MalformedAttributeError` so callers
never see raw attribute strings or pydantic internals.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from chainrecon.domain.errors import MalformedAttributeError, MissingAttributeError
from chainrecon.domain.model import OperationType

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

    from chainrecon.domain.errors import AttributeExtractionError
    from chainrecon.domain.model import Event

RULE_NAMES_SEPARATOR = ","

_DECIMAL_INTEGER = re.compile(r"[0-9]+")
_MISSING_ERROR_TYPES = frozenset({"missing", "string_too_short"})

NaturalKey = Annotated[str, Field(min_length=1)]


class EventAttributes(BaseModel):
    """Base for per-kind attribute models."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    EVENT_KIND: ClassVar[str]

    def require(self, name: str) -> str:
        """Return an optional text attribute, raising if the event did not carry it."""

        value = getattr(self, name)
        if value is None:
            raise MissingAttributeError(self.EVENT_KIND, name, "attribute is required")
        return value


class OperationAttributes(EventAttributes):
    """Attributes of events that carry an ``operation_type``."""

    operation_type: str | None = None

    @property
    def operation(self) -> OperationType | None:
        return OperationType.parse(self.operation_type)


class RuleAttributes(OperationAttributes):
    EVENT_KIND: ClassVar[str] = "rule"

    rule_name: NaturalKey
    rule_content: str | None = None
    rule_hash: str | None = None


class BindingAttributes(OperationAttributes):
    EVENT_KIND: ClassVar[str] = "binding"

    binding_name: NaturalKey
    binding_content: str | None = None
    binding_hash: str | None = None
    binding_rule_files_names: str | None = None

    def rule_names(self) -> list[str]:
        """Split the announced rule list, keeping order and repeats."""

        raw = self.require("binding_rule_files_names")
        if not raw:
            return []
        return raw.split(RULE_NAMES_SEPARATOR)


class RelationAttributes(OperationAttributes):
    EVENT_KIND: ClassVar[str] = "relation"

    contract_address: NaturalKey
    binding_name: str | None = None


class ProposalAttributes(EventAttributes):
    EVENT_KIND: ClassVar[str] = "proposal"

    proposal_id: NaturalKey
    proposal_result: str


class TransferAttributes(EventAttributes):
    EVENT_KIND: ClassVar[str] = "transfer"

    sender: NaturalKey
    recipient: NaturalKey
    amount: int
    denom: NaturalKey
    contract_address: str | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def _parse_amount(cls, value: object) -> int:
        # amounts are exact; reject signs, separators, whitespace and floats
        if isinstance(value, str) and _DECIMAL_INTEGER.fullmatch(value):
            return int(value)
        raise ValueError(f"not a non-negative decimal integer: {value!r}")


def extract_attributes[TAttributes: EventAttributes](
    model: type[TAttributes], event: Event
) -> TAttributes:
    """Validate ``event``'s attributes against ``model``."""

    try:
        return model.model_validate(dict(event.attributes))
    except ValidationError as exc:
        raise _translate_error(event.kind, exc.errors()[0]) from exc


def _translate_error(event_kind: str, error: ErrorDetails) -> AttributeExtractionError:
    attribute = ".".join(str(part) for part in error["loc"]) or "<event>"
    if error["type"] in _MISSING_ERROR_TYPES:
        return MissingAttributeError(event_kind, attribute, "attribute is required")
    return MalformedAttributeError(event_kind, attribute, error["msg"])

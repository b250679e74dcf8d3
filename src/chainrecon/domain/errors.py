"""Errors raised while reconciling events into entities."""

from __future__ import annotations


class ReconciliationError(Exception):
    """Base class for failures that abort reconciliation of one event or transaction."""


class AttributeExtractionError(ReconciliationError, ValueError):
    """Raised when an event's attributes cannot be turned into typed values."""

    def __init__(self, event_kind: str, attribute: str, message: str) -> None:
        super().__init__(f"{event_kind} event, attribute {attribute!r}: {message}")
        self.event_kind = event_kind
        self.attribute = attribute


class MissingAttributeError(AttributeExtractionError):
    """A required attribute is absent or empty."""


class MalformedAttributeError(AttributeExtractionError):
    """An attribute is present but its value cannot be parsed."""

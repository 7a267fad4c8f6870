"""Base event classes for domain event sourcing.

This module provides the foundational event class that all domain events
inherit from. It extends the eventsourcing library's DomainEvent with
distributed tracing fields and standardized serialization.

Example:
    Define a domain event by subclassing BaseEvent::

        from dataclasses import dataclass
        from fundamenta.foundation.domain.events import BaseEvent

        @dataclass(frozen=True, kw_only=True)
        class CustomerRegistered(BaseEvent):
            name: str
            document: str

        CustomerRegistered.get_topic()
        # Returns: "myapp.domain.events:CustomerRegistered"

Event Schema Evolution:
    Events are immutable once persisted. Adding optional fields with
    defaults is backward compatible; renaming, retyping or removing
    fields requires a transcoder upcaster registered on the application.
    Identifier value objects (Cpf, Cnpj, Phone) should be stored in their
    plain canonical string form so replays never depend on display formats.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eventsourcing.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class BaseEvent(DomainEvent):
    """Base class for all domain events.

    Extends eventsourcing.domain.DomainEvent with cross-cutting concerns:

    - Distributed tracing via correlation_id and causation_id
    - Audit trail via user_id

    Attributes:
        correlation_id: Request or workflow ID for distributed tracing.
            Links all events triggered by a single user request.
        causation_id: Parent event ID that triggered this event.
            Forms a causal chain between events.
        user_id: Acting user identifier for audit trail.

    Inherited from DomainEvent (eventsourcing library):
        originator_id: Aggregate ID (UUID) that emitted this event.
        originator_version: Aggregate version for optimistic concurrency control.
        timestamp: Event occurrence time (datetime with timezone, UTC).

    Note:
        Events are immutable (frozen dataclass). Attempting to modify any
        field after instantiation will raise a FrozenInstanceError.
    """

    correlation_id: str | None = None
    causation_id: str | None = None
    user_id: str | None = None

    @classmethod
    def get_topic(cls) -> str:
        """Get fully-qualified topic for event routing.

        The topic is used by the eventsourcing library for event
        deserialization (topic resolves to Python class) and projection
        filtering.

        Returns:
            Fully-qualified topic string in format "module:class".
        """
        return f"{cls.__module__}:{cls.__qualname__}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize the base event fields to a dictionary.

        UUIDs are converted to their hyphenated string form and timestamps
        to ISO 8601 strings. Subclass fields are NOT included; subclasses
        should override this method if they need them serialized.

        Returns:
            Dictionary containing all base event fields.
        """
        originator_id = self.originator_id
        originator_id_str = str(originator_id) if originator_id is not None else None

        timestamp = self.timestamp
        timestamp_str: str | None = None
        if timestamp is not None:
            timestamp_str = timestamp.isoformat()

        return {
            "originator_id": originator_id_str,
            "originator_version": self.originator_version,
            "timestamp": timestamp_str,
            "topic": self.get_topic(),
            "correlation_id": self.correlation_id,
            "causation_id": self.causation_id,
            "user_id": self.user_id,
        }

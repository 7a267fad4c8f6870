"""Base aggregate classes for domain event sourcing.

This module provides the aggregate base that domain aggregates inherit
from. BaseAggregate extends the eventsourcing library's Aggregate class
with an optimistic concurrency check.

Example:
    >>> from fundamenta.foundation.domain.aggregates import BaseAggregate
    >>> from eventsourcing.domain import event
    >>>
    >>> class Customer(BaseAggregate):
    ...     @event('Registered')
    ...     def __init__(self, *, name: str, document: str):
    ...         self.name = name
    ...         self.document = document
"""

from __future__ import annotations

from eventsourcing.domain import Aggregate

from fundamenta.foundation.domain.exceptions import ConcurrencyError


class BaseAggregate(Aggregate):
    """Base class for all domain aggregates.

    Extends eventsourcing.domain.Aggregate with an explicit version check
    for commands that were prepared against an earlier snapshot of the
    aggregate (e.g., a form submitted with the version it was rendered at).

    Inherited from Aggregate (eventsourcing library):
        id: Aggregate identifier (UUID, auto-generated)
        version: Current version for optimistic concurrency
        created_on: Timestamp of first event
        modified_on: Timestamp of last event

    Usage Pattern:
        Subclasses must:
        1. Decorate __init__ with @event('Created') (or another past-tense name)
        2. Use @event decorator for all state-changing methods
        3. Keep state changes within decorated methods only

    Example:
        >>> class Customer(BaseAggregate):
        ...     @event('Registered')
        ...     def __init__(self, *, name: str):
        ...         self.name = name
        ...
        ...     @event('Renamed')
        ...     def rename(self, name: str) -> None:
        ...         self.name = name
        ...
        >>> customer = Customer(name='Ana')
        >>> customer.rename('Ana Maria')
        >>> customer.version
        2
        >>> customer.check_version(2)

    Value objects such as Cpf or Money are best stored on the aggregate in
    their plain string form and rebuilt by a property, so event payloads
    stay transcoder-friendly.
    """

    def check_version(self, expected_version: int) -> None:
        """Ensure the aggregate is still at the version the caller expects.

        Args:
            expected_version: Version the caller based its change on.

        Raises:
            ConcurrencyError: If the aggregate has moved past (or is behind)
                the expected version.
        """
        if self.version != expected_version:
            raise ConcurrencyError(
                aggregate_id=str(self.id),
                expected_version=expected_version,
                actual_version=self.version,
            )

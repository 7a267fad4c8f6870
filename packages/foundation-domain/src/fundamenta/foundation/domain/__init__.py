"""Fundamenta Foundation Domain -- pure Python domain primitives.

This package provides the foundational domain building blocks for DDD/ES
applications: exceptions, an explicit result type, specifications,
events, aggregates and generic value objects.
"""

from fundamenta.foundation.domain.aggregates import BaseAggregate
from fundamenta.foundation.domain.contact_value_objects import Email
from fundamenta.foundation.domain.events import BaseEvent
from fundamenta.foundation.domain.exceptions import (
    BusinessRuleError,
    ConcurrencyError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from fundamenta.foundation.domain.money_value_objects import Money
from fundamenta.foundation.domain.result import Err, Ok, Result
from fundamenta.foundation.domain.specification import (
    PredicateSpecification,
    Specification,
)
from fundamenta.foundation.domain.time_value_objects import BirthDate, DateTimeRange

__all__ = [
    "BaseAggregate",
    "BaseEvent",
    "BirthDate",
    "BusinessRuleError",
    "ConcurrencyError",
    "ConflictError",
    "DateTimeRange",
    "DomainError",
    "Email",
    "Err",
    "Money",
    "NotFoundError",
    "Ok",
    "PredicateSpecification",
    "Result",
    "Specification",
    "ValidationError",
]

"""Domain exception hierarchy for type-safe error handling.

This module provides the base exception hierarchy for all domain errors.
Exceptions include structured error codes and context for consistent
error reporting and logging across bounded contexts.

Example:
    >>> from fundamenta.foundation.domain.exceptions import ValidationError
    >>> raise ValidationError("email", "Invalid email format")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "BusinessRuleError",
    "ConcurrencyError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Provides error code and structured context for debugging. All domain
    exceptions inherit from this class to enable consistent error
    handling and logging.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information (aggregate IDs, field names).

    Example:
        >>> raise DomainError("Operation failed", context={"aggregate_id": "123"})
        DomainError: Operation failed (aggregate_id=123)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
                     Values are typically strings, UUIDs, or primitive types.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist.

    Attributes:
        error_code: "RESOURCE_NOT_FOUND" (class constant).
        resource_type: Type of missing resource.
        resource_id: Identifier of missing resource.

    Example:
        >>> raise NotFoundError("Company", "11444777000161")
        NotFoundError: Company not found: 11444777000161
    """

    error_code: str = "RESOURCE_NOT_FOUND"

    def __init__(
        self,
        resource_type: str,
        resource_id: Any,
        **extra_context: Any,
    ) -> None:
        """Initialize not found error.

        Args:
            resource_type: Type of resource (e.g., "Customer", "Company").
            resource_id: Identifier of missing resource. Converted to string
                in the context.
            **extra_context: Additional debugging context.
        """
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type} not found: {resource_id}"
        context = {
            "resource_type": resource_type,
            "resource_id": str(resource_id),
            **extra_context,
        }
        super().__init__(message, context)


class ValidationError(DomainError):
    """Raised when input fails domain validation rules.

    Use for domain rule violations on value object or command input, not for
    Pydantic schema validation (which has its own error type).

    Attributes:
        error_code: "VALIDATION_ERROR" (class constant).
        field: Field path that failed validation.
        reason: Human-readable validation failure reason.

    Example:
        >>> raise ValidationError("amount", "Amount cannot be negative")
        ValidationError: Validation failed for 'amount': Amount cannot be negative
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        field: str,
        reason: str,
        **extra_context: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            field: Field path that failed validation. Supports dot notation
                   for nested fields (e.g., "customer.document").
            reason: Human-readable validation failure reason.
            **extra_context: Additional debugging context.
        """
        self.field = field
        self.reason = reason
        message = f"Validation failed for '{field}': {reason}"
        context = {
            "field": field,
            "reason": reason,
            **extra_context,
        }
        super().__init__(message, context)


class ConflictError(DomainError):
    """Raised when operation conflicts with current system state.

    Use for duplicate resource creation or state transition conflicts.

    Attributes:
        error_code: "CONFLICT" (class constant).
        reason: Description of the conflict.

    Example:
        >>> raise ConflictError("Resource already exists", resource_id="abc")
        ConflictError: Conflict: Resource already exists (resource_id=abc)
    """

    error_code: str = "CONFLICT"

    def __init__(
        self,
        reason: str,
        **context: Any,
    ) -> None:
        """Initialize conflict error.

        Args:
            reason: Description of conflict.
            **context: Additional debugging context.
        """
        self.reason = reason
        message = f"Conflict: {reason}"
        super().__init__(message, context)


class ConcurrencyError(ConflictError):
    """Raised when an aggregate was modified concurrently.

    Inherits from ConflictError so callers handling conflicts also
    handle optimistic lock failures.

    Attributes:
        error_code: "CONCURRENCY_CONFLICT" (class constant).
        aggregate_id: Identifier of the aggregate, if known.
        expected_version: Version the caller based its change on.
        actual_version: Version currently held by the aggregate.

    Example:
        >>> raise ConcurrencyError(aggregate_id="42", expected_version=5, actual_version=7)
        ConcurrencyError: Conflict: Concurrent modification detected (aggregate_id=42, ...)
    """

    error_code: str = "CONCURRENCY_CONFLICT"

    def __init__(
        self,
        reason: str = "Concurrent modification detected",
        *,
        aggregate_id: str | None = None,
        expected_version: int | None = None,
        actual_version: int | None = None,
    ) -> None:
        self.aggregate_id = aggregate_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            reason,
            aggregate_id=aggregate_id,
            expected_version=expected_version,
            actual_version=actual_version,
        )


class BusinessRuleError(DomainError):
    """Raised when an operation would break a business invariant.

    Attributes:
        error_code: "BUSINESS_RULE_VIOLATION" (class constant).
        rule_name: Optional name of the violated rule.

    Example:
        >>> raise BusinessRuleError("Order total exceeds credit limit", rule_name="credit_limit")
    """

    error_code: str = "BUSINESS_RULE_VIOLATION"

    def __init__(self, message: str, rule_name: str | None = None, **context: Any) -> None:
        self.rule_name = rule_name
        if rule_name is not None:
            context = {"rule_name": rule_name, **context}
        super().__init__(message, context)

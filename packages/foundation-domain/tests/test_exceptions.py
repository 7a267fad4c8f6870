"""Tests for domain exception hierarchy."""

from __future__ import annotations

import pytest

from fundamenta.foundation.domain.exceptions import (
    BusinessRuleError,
    ConcurrencyError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)


@pytest.mark.unit
class TestDomainError:
    """Tests for base DomainError."""

    def test_message_and_code(self) -> None:
        err = DomainError("Something failed")
        assert err.message == "Something failed"
        assert err.error_code == "DOMAIN_ERROR"
        assert err.context == {}

    def test_context_dict(self) -> None:
        ctx = {"key": "value", "count": 42}
        err = DomainError("Failed", context=ctx)
        assert err.context == ctx

    def test_str_without_context(self) -> None:
        err = DomainError("Simple failure")
        assert str(err) == "Simple failure"

    def test_str_with_context(self) -> None:
        err = DomainError("Failed", context={"a": "1"})
        assert str(err) == "Failed (a=1)"

    def test_repr(self) -> None:
        err = DomainError("Failed", context={"a": "1"})
        assert "DomainError" in repr(err)
        assert "Failed" in repr(err)

    def test_is_exception(self) -> None:
        assert issubclass(DomainError, Exception)


@pytest.mark.unit
class TestNotFoundError:
    """Tests for NotFoundError."""

    def test_error_code(self) -> None:
        err = NotFoundError("Company", "11444777000161")
        assert err.error_code == "RESOURCE_NOT_FOUND"

    def test_message_format(self) -> None:
        err = NotFoundError("Company", "11444777000161")
        assert str(err).startswith("Company not found: 11444777000161")

    def test_resource_id_stringified_in_context(self) -> None:
        err = NotFoundError("Customer", 42)
        assert err.resource_id == 42
        assert err.context["resource_id"] == "42"

    def test_extra_context(self) -> None:
        err = NotFoundError("Customer", "abc", source="crm")
        assert err.context["source"] == "crm"

    def test_inherits_domain_error(self) -> None:
        assert issubclass(NotFoundError, DomainError)


@pytest.mark.unit
class TestValidationError:
    """Tests for ValidationError."""

    def test_error_code(self) -> None:
        err = ValidationError("amount", "cannot be negative")
        assert err.error_code == "VALIDATION_ERROR"

    def test_field_and_reason(self) -> None:
        err = ValidationError("customer.document", "check digits do not match")
        assert err.field == "customer.document"
        assert err.reason == "check digits do not match"
        assert err.context["field"] == "customer.document"

    def test_message_format(self) -> None:
        err = ValidationError("amount", "cannot be negative")
        assert err.message == "Validation failed for 'amount': cannot be negative"


@pytest.mark.unit
class TestConflictErrors:
    """Tests for ConflictError and ConcurrencyError."""

    def test_conflict_message(self) -> None:
        err = ConflictError("Document already registered", document="cpf")
        assert err.error_code == "CONFLICT"
        assert err.message == "Conflict: Document already registered"
        assert err.context == {"document": "cpf"}

    def test_concurrency_defaults(self) -> None:
        err = ConcurrencyError(aggregate_id="42", expected_version=3, actual_version=5)
        assert err.error_code == "CONCURRENCY_CONFLICT"
        assert err.reason == "Concurrent modification detected"
        assert err.expected_version == 3
        assert err.actual_version == 5
        assert err.context["aggregate_id"] == "42"

    def test_concurrency_is_conflict(self) -> None:
        with pytest.raises(ConflictError):
            raise ConcurrencyError()


@pytest.mark.unit
class TestBusinessRuleError:
    """Tests for BusinessRuleError."""

    def test_rule_name_in_context(self) -> None:
        err = BusinessRuleError("Minor cannot sign", rule_name="adult_signer")
        assert err.error_code == "BUSINESS_RULE_VIOLATION"
        assert err.rule_name == "adult_signer"
        assert err.context == {"rule_name": "adult_signer"}

    def test_without_rule_name(self) -> None:
        err = BusinessRuleError("Nope")
        assert err.rule_name is None
        assert str(err) == "Nope"

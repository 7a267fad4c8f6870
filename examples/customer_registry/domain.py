"""Customer Registry domain model: aggregate and exceptions.

Demonstrates BaseAggregate usage with the two-method command pattern:
public methods validate, private @event-decorated methods mutate state.
Documents are stored as their plain canonical strings and exposed as value
objects through properties.
"""

from __future__ import annotations

from eventsourcing.domain import event

from fundamenta.domain.documents import Cpf, DocumentFormat, Phone
from fundamenta.foundation.domain import (
    BaseAggregate,
    BirthDate,
    BusinessRuleError,
    ConflictError,
    NotFoundError,
)

MIN_AGE = 18


class Customer(BaseAggregate):
    """An adult customer identified by CPF.

    Example:
        >>> customer = Customer.register(
        ...     name="Ana", cpf=Cpf("52998224725"), birth_date=BirthDate.of(1990, 4, 2)
        ... )
        >>> customer.document.format(DocumentFormat.SAFE)
        '***.982.247-25'
    """

    @classmethod
    def register(
        cls,
        *,
        name: str,
        cpf: Cpf,
        birth_date: BirthDate,
        phone: Phone | None = None,
    ) -> Customer:
        """Register a new customer.

        Raises:
            BusinessRuleError: If the customer is younger than 18.
        """
        if not birth_date.is_adult(min_age=MIN_AGE):
            raise BusinessRuleError("Customer must be an adult", rule_name="min_age")
        return cls(
            name=name,
            cpf=cpf.value,
            birth_date=str(birth_date),
            phone=phone.canonical if phone is not None else None,
        )

    @event("Registered")
    def __init__(self, *, name: str, cpf: str, birth_date: str, phone: str | None) -> None:
        self.name = name
        self.cpf = cpf
        self.birth_date = birth_date
        self.phone = phone

    @property
    def document(self) -> Cpf:
        return Cpf(self.cpf)

    @property
    def contact_phone(self) -> Phone | None:
        return Phone.from_canonical(self.phone) if self.phone is not None else None

    def change_phone(self, phone: Phone, expected_version: int) -> None:
        """Replace the contact phone.

        Raises:
            ConcurrencyError: If the customer changed since ``expected_version``.
        """
        self.check_version(expected_version)
        if phone.canonical == self.phone:
            return
        self._change_phone(phone.canonical)

    @event("PhoneChanged")
    def _change_phone(self, phone: str) -> None:
        self.phone = phone


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer cannot be found by ID."""

    def __init__(self, customer_id: str) -> None:
        super().__init__("Customer", customer_id)


class DuplicateCustomerError(ConflictError):
    """Raised when a CPF is already registered."""

    def __init__(self, cpf: Cpf) -> None:
        super().__init__("Customer already registered", cpf=cpf.format(DocumentFormat.SAFE))

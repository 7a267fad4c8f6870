"""Customer Registry event-sourced application.

Usage::

    from examples.customer_registry import CustomerRegistry, RegisterCustomerRequest

    registry = CustomerRegistry()
    customer_id = registry.register_customer(
        RegisterCustomerRequest(name="Ana", cpf="529.982.247-25", birth_date="1990-04-02")
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from eventsourcing.application import AggregateNotFoundError, Application
from eventsourcing.utils import get_topic

from fundamenta.domain.documents import DocumentFormat
from fundamenta.foundation.domain import BirthDate
from fundamenta.infra.observability import get_logger

from .domain import Customer, CustomerNotFoundError, DuplicateCustomerError

if TYPE_CHECKING:
    from eventsourcing.utils import EnvType

    from fundamenta.domain.documents import Cpf

    from .commands import ChangePhoneRequest, RegisterCustomerRequest


class CustomerRegistry(Application[UUID]):
    """Registers customers and keeps a CPF lookup index in memory.

    Persistence uses the eventsourcing defaults (in-memory POPO recorders)
    unless ``PERSISTENCE_MODULE`` is set in the environment. The CPF index
    is rebuilt from the stored ``Customer.Registered`` events on startup,
    so a registry over a persistent store keeps rejecting duplicates.
    """

    index_batch_size = 100

    def __init__(self, env: EnvType | None = None) -> None:
        super().__init__(env)
        self._ids_by_cpf: dict[str, UUID] = {}
        self._logger = get_logger(__name__)
        self._rebuild_cpf_index()

    def register_customer(self, request: RegisterCustomerRequest) -> UUID:
        """Register a customer.

        Raises:
            DuplicateCustomerError: If the CPF is already registered.
            BusinessRuleError: If the customer is not an adult.
        """
        if request.cpf.value in self._ids_by_cpf:
            self._logger.info("customer_duplicate", cpf=request.cpf)
            raise DuplicateCustomerError(request.cpf)
        customer = Customer.register(
            name=request.name,
            cpf=request.cpf,
            birth_date=BirthDate(request.birth_date),
            phone=request.phone,
        )
        self.save(customer)
        self._ids_by_cpf[customer.cpf] = customer.id
        self._logger.info("customer_registered", customer_id=str(customer.id), cpf=request.cpf)
        return customer.id

    def get_customer(self, customer_id: UUID) -> Customer:
        """Load a customer.

        Raises:
            CustomerNotFoundError: If no customer has this ID.
        """
        try:
            return self.repository.get(customer_id)
        except AggregateNotFoundError:
            raise CustomerNotFoundError(str(customer_id)) from None

    def find_by_cpf(self, cpf: Cpf) -> Customer:
        """Load a customer by CPF.

        Raises:
            CustomerNotFoundError: If the CPF is not registered.
        """
        customer_id = self._ids_by_cpf.get(cpf.value)
        if customer_id is None:
            raise CustomerNotFoundError(cpf.format(DocumentFormat.SAFE))
        return self.get_customer(customer_id)

    def change_phone(self, customer_id: UUID, request: ChangePhoneRequest) -> None:
        """Replace a customer's phone.

        Raises:
            CustomerNotFoundError: If no customer has this ID.
            ConcurrencyError: If the customer changed since ``expected_version``.
        """
        customer = self.get_customer(customer_id)
        customer.change_phone(request.phone, request.expected_version)
        self.save(customer)
        self._logger.info("customer_phone_changed", customer_id=str(customer_id), phone=request.phone)

    def _rebuild_cpf_index(self) -> None:
        """Replay Registered notifications into the CPF index."""
        registered_topic = get_topic(Customer.Registered)
        start = 1
        while True:
            notifications = self.recorder.select_notifications(start, self.index_batch_size)
            for notification in notifications:
                if notification.topic == registered_topic:
                    registered = self.mapper.to_domain_event(notification)
                    self._ids_by_cpf[registered.cpf] = registered.originator_id
            if len(notifications) < self.index_batch_size:
                break
            start = notifications[-1].id + 1
        if self._ids_by_cpf:
            self._logger.info("customer_index_rebuilt", customers=len(self._ids_by_cpf))

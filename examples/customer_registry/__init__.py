"""Customer Registry: minimal example app built on the Fundamenta toolkit.

Registers customers identified by CPF, keeps their phone number in
canonical form and logs every step through the redacting structlog setup,
so raw documents never reach the log output.

Modules:
    domain:   Customer aggregate, CustomerNotFoundError, DuplicateCustomerError
    commands: pydantic request models using the document field types
    app:      CustomerRegistry event-sourced application
"""

from .app import CustomerRegistry
from .commands import ChangePhoneRequest, RegisterCustomerRequest
from .domain import Customer, CustomerNotFoundError, DuplicateCustomerError

__all__ = [
    "ChangePhoneRequest",
    "Customer",
    "CustomerNotFoundError",
    "CustomerRegistry",
    "DuplicateCustomerError",
    "RegisterCustomerRequest",
]

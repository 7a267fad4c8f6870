"""Request models for the Customer Registry.

Input is parsed straight into value objects by the document field types,
so the application layer never sees a raw CPF or phone string.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from fundamenta.infra.validation import CpfField, PhoneField


class RegisterCustomerRequest(BaseModel):
    name: str = Field(min_length=1)
    cpf: CpfField
    birth_date: date
    phone: PhoneField | None = None


class ChangePhoneRequest(BaseModel):
    phone: PhoneField
    expected_version: int = Field(ge=1)

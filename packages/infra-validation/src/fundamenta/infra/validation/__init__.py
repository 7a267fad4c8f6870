"""Fundamenta Infra Validation -- pydantic adapters for Brazilian documents."""

from __future__ import annotations

from fundamenta.infra.validation.constraints import (
    CnpjField,
    CpfField,
    DocumentKind,
    PhoneField,
    cpf_or_cnpj,
    is_valid_document,
    is_valid_phone,
    phone_br,
)
from fundamenta.infra.validation.settings import (
    ValidationSettings,
    get_validation_settings,
)

__all__ = [
    "CnpjField",
    "CpfField",
    "DocumentKind",
    "PhoneField",
    "ValidationSettings",
    "cpf_or_cnpj",
    "get_validation_settings",
    "is_valid_document",
    "is_valid_phone",
    "phone_br",
]

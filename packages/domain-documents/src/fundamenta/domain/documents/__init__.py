"""Fundamenta Documents -- Brazilian identifier validation and canonicalization.

Value objects for CPF (individual taxpayer ID), CNPJ (company ID, legacy
and alphanumeric) and phone numbers, with the normalization and checksum
helpers they are built on. Every operation is pure: parsing, formatting
and generation never touch shared state, and generators take an injected
``random.Random``.
"""

from fundamenta.domain.documents.cnpj import Cnpj
from fundamenta.domain.documents.cpf import Cpf
from fundamenta.domain.documents.exceptions import (
    InvalidDocumentError,
    InvalidDocumentReason,
)
from fundamenta.domain.documents.formats import DocumentFormat
from fundamenta.domain.documents.phone import AREA_CODES, Phone

__all__ = [
    "AREA_CODES",
    "Cnpj",
    "Cpf",
    "DocumentFormat",
    "InvalidDocumentError",
    "InvalidDocumentReason",
    "Phone",
]

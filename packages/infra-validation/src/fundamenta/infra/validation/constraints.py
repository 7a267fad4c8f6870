"""Pydantic constraints backed by the document value objects.

Two flavours are provided:

- Annotated field types (``CpfField``, ``CnpjField``, ``PhoneField``) that
  parse input into the value object and serialize back to the plain or
  canonical string.
- Boolean-style constraints for plain ``str`` fields
  (``cpf_or_cnpj(...)``, ``phone_br(...)``) that only check validity and
  keep the value as typed.

Only the public parse API of the value objects is used here, so the
core stays free of any framework wiring.

Example:
    >>> from typing import Annotated
    >>> from pydantic import BaseModel
    >>> class Customer(BaseModel):
    ...     cpf: CpfField
    ...     phone: PhoneField | None = None
    ...     billing_document: Annotated[str | None, cpf_or_cnpj()] = None
    >>> Customer(cpf="529.982.247-25").model_dump()["cpf"]
    '52998224725'
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any

from pydantic import AfterValidator, PlainSerializer, PlainValidator

from fundamenta.domain.documents import Cnpj, Cpf, Phone
from fundamenta.domain.documents.normalizer import only_alnum
from fundamenta.foundation.domain.result import Err
from fundamenta.infra.validation.settings import get_validation_settings

__all__ = [
    "CnpjField",
    "CpfField",
    "DocumentKind",
    "PhoneField",
    "cpf_or_cnpj",
    "is_valid_document",
    "is_valid_phone",
    "phone_br",
]

_CPF_LENGTH = 11
_CNPJ_LENGTH = 14


class DocumentKind(StrEnum):
    """Which documents a constraint accepts."""

    CPF = "cpf"
    CNPJ = "cnpj"
    CPF_OR_CNPJ = "cpf_or_cnpj"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _cnpj_accepted(cnpj: Cnpj, allow_alphanumeric: bool | None) -> bool:
    if allow_alphanumeric is None:
        allow_alphanumeric = get_validation_settings().allow_alphanumeric_cnpj
    return allow_alphanumeric or not cnpj.is_alphanumeric


def is_valid_document(
    value: Any,
    accept: DocumentKind = DocumentKind.CPF_OR_CNPJ,
    allow_null: bool | None = None,
    allow_alphanumeric: bool | None = None,
) -> bool:
    """Boolean check for a CPF and/or CNPJ string.

    The document is told apart by its number of alphanumeric characters:
    11 is a CPF, 14 a CNPJ, anything else is invalid.

    Args:
        value: Raw input, with or without punctuation.
        accept: Which document kinds pass.
        allow_null: Result for None or blank input. Defaults to
            ``ValidationSettings.allow_null``.
        allow_alphanumeric: Accept alphanumeric CNPJ roots. Defaults to
            ``ValidationSettings.allow_alphanumeric_cnpj``.
    """
    if _is_blank(value):
        return get_validation_settings().allow_null if allow_null is None else allow_null
    if not isinstance(value, str):
        return False
    clean = only_alnum(value)
    if len(clean) == _CPF_LENGTH:
        return accept in (DocumentKind.CPF, DocumentKind.CPF_OR_CNPJ) and Cpf.is_valid(clean)
    if len(clean) == _CNPJ_LENGTH:
        if accept not in (DocumentKind.CNPJ, DocumentKind.CPF_OR_CNPJ):
            return False
        cnpj = Cnpj.try_parse(clean)
        return cnpj is not None and _cnpj_accepted(cnpj, allow_alphanumeric)
    return False


def is_valid_phone(value: Any, allow_null: bool | None = None) -> bool:
    """Boolean check for a Brazilian phone string."""
    if _is_blank(value):
        return get_validation_settings().allow_null if allow_null is None else allow_null
    return Phone.is_valid(value)


def cpf_or_cnpj(
    accept: DocumentKind = DocumentKind.CPF_OR_CNPJ,
    allow_null: bool | None = None,
) -> AfterValidator:
    """Constraint for ``str`` fields holding a CPF and/or CNPJ.

    Example:
        ``document: Annotated[str, cpf_or_cnpj(DocumentKind.CNPJ)]``
    """

    def _check(value: Any) -> Any:
        if not is_valid_document(value, accept=accept, allow_null=allow_null):
            msg = f"Invalid {accept.value.replace('_', ' ').upper()}"
            raise ValueError(msg)
        return value

    return AfterValidator(_check)


def phone_br(allow_null: bool | None = None) -> AfterValidator:
    """Constraint for ``str`` fields holding a Brazilian phone number."""

    def _check(value: Any) -> Any:
        if not is_valid_phone(value, allow_null=allow_null):
            msg = "Invalid Brazilian phone number"
            raise ValueError(msg)
        return value

    return AfterValidator(_check)


def _to_cpf(value: Any) -> Cpf:
    if isinstance(value, Cpf):
        return value
    result = Cpf.parse(value)
    if isinstance(result, Err):
        raise ValueError(str(result.error))
    return result.value


def _to_cnpj(value: Any) -> Cnpj:
    cnpj = value if isinstance(value, Cnpj) else None
    if cnpj is None:
        result = Cnpj.parse(value)
        if isinstance(result, Err):
            raise ValueError(str(result.error))
        cnpj = result.value
    if not _cnpj_accepted(cnpj, None):
        msg = "Alphanumeric CNPJ is not accepted"
        raise ValueError(msg)
    return cnpj


def _to_phone(value: Any) -> Phone:
    if isinstance(value, Phone):
        return value
    result = Phone.parse(value)
    if isinstance(result, Err):
        raise ValueError(str(result.error))
    return result.value


CpfField = Annotated[Cpf, PlainValidator(_to_cpf), PlainSerializer(str, return_type=str)]
CnpjField = Annotated[Cnpj, PlainValidator(_to_cnpj), PlainSerializer(str, return_type=str)]
PhoneField = Annotated[Phone, PlainValidator(_to_phone), PlainSerializer(str, return_type=str)]

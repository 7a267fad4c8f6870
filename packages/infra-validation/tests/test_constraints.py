"""Tests for the pydantic document constraints."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from fundamenta.domain.documents import Cnpj, Cpf, Phone
from fundamenta.infra.validation import (
    CnpjField,
    CpfField,
    DocumentKind,
    PhoneField,
    cpf_or_cnpj,
    get_validation_settings,
    is_valid_document,
    is_valid_phone,
    phone_br,
)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("DOCUMENT_VALIDATION_ALLOW_ALPHANUMERIC_CNPJ", raising=False)
    monkeypatch.delenv("DOCUMENT_VALIDATION_ALLOW_NULL", raising=False)
    get_validation_settings.cache_clear()
    yield
    get_validation_settings.cache_clear()


class Customer(BaseModel):
    cpf: CpfField
    phone: PhoneField | None = None


class Company(BaseModel):
    cnpj: CnpjField


class Invoice(BaseModel):
    billing_document: Annotated[str | None, cpf_or_cnpj()] = None
    company_document: Annotated[str, cpf_or_cnpj(DocumentKind.CNPJ, allow_null=False)] = "11444777000161"
    contact_phone: Annotated[str | None, phone_br()] = None


@pytest.mark.unit
class TestIsValidDocument:
    @pytest.mark.parametrize("value", ["529.982.247-25", "11.444.777/0001-61", "12.abc.345/01de-45"])
    def test_valid(self, value: str) -> None:
        assert is_valid_document(value)

    @pytest.mark.parametrize("value", ["111.111.111-11", "11222333000182", "123", "12345678901234567", 42])
    def test_invalid(self, value: object) -> None:
        assert not is_valid_document(value)

    def test_accept_restricts_kind(self) -> None:
        assert not is_valid_document("529.982.247-25", accept=DocumentKind.CNPJ)
        assert not is_valid_document("11.444.777/0001-61", accept=DocumentKind.CPF)
        assert is_valid_document("11.444.777/0001-61", accept=DocumentKind.CNPJ)

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_uses_allow_null(self, value: str | None) -> None:
        assert is_valid_document(value)
        assert not is_valid_document(value, allow_null=False)

    def test_legacy_only_mode(self) -> None:
        assert not is_valid_document("12.ABC.345/01DE-45", allow_alphanumeric=False)
        assert is_valid_document("11.444.777/0001-61", allow_alphanumeric=False)

    def test_legacy_only_mode_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCUMENT_VALIDATION_ALLOW_ALPHANUMERIC_CNPJ", "false")
        get_validation_settings.cache_clear()
        assert not is_valid_document("12.ABC.345/01DE-45")


@pytest.mark.unit
class TestIsValidPhone:
    def test_valid(self) -> None:
        assert is_valid_phone("(11) 98765-4321")

    def test_invalid(self) -> None:
        assert not is_valid_phone("0098765432")

    def test_blank(self) -> None:
        assert is_valid_phone(None)
        assert not is_valid_phone("", allow_null=False)


@pytest.mark.unit
class TestFieldTypes:
    def test_parses_into_value_objects(self) -> None:
        customer = Customer(cpf="529.982.247-25", phone="(11) 98765-4321")
        assert customer.cpf == Cpf("52998224725")
        assert customer.phone == Phone("+5511987654321")

    def test_serializes_plain_forms(self) -> None:
        customer = Customer(cpf="529.982.247-25", phone="(11) 98765-4321")
        assert customer.model_dump() == {"cpf": "52998224725", "phone": "+5511987654321"}
        assert '"cpf":"52998224725"' in customer.model_dump_json()

    def test_accepts_value_object_instances(self) -> None:
        assert Customer(cpf=Cpf("52998224725")).cpf.value == "52998224725"

    def test_invalid_cpf_names_kind(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            Customer(cpf="529.982.247-26")
        assert "checksum_mismatch" in str(exc_info.value)

    def test_invalid_phone_names_kind(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            Customer(cpf="52998224725", phone="(20) 98765-4321")
        assert "unknown_area_code" in str(exc_info.value)

    def test_cnpj_alphanumeric(self) -> None:
        assert Company(cnpj="12.abc.345/01de-45").cnpj == Cnpj("12ABC34501DE45")

    def test_cnpj_legacy_only_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCUMENT_VALIDATION_ALLOW_ALPHANUMERIC_CNPJ", "false")
        get_validation_settings.cache_clear()
        with pytest.raises(PydanticValidationError, match="Alphanumeric CNPJ is not accepted"):
            Company(cnpj="12.abc.345/01de-45")
        assert Company(cnpj="11.444.777/0001-61").cnpj.value == "11444777000161"


@pytest.mark.unit
class TestStringConstraints:
    def test_keeps_value_as_typed(self) -> None:
        invoice = Invoice(billing_document="529.982.247-25")
        assert invoice.billing_document == "529.982.247-25"

    def test_optional_accepts_none(self) -> None:
        assert Invoice(billing_document=None).billing_document is None

    def test_invalid_document(self) -> None:
        with pytest.raises(PydanticValidationError, match="Invalid CPF OR CNPJ"):
            Invoice(billing_document="111.111.111-11")

    def test_cnpj_only(self) -> None:
        with pytest.raises(PydanticValidationError, match="Invalid CNPJ"):
            Invoice(company_document="529.982.247-25")

    def test_phone(self) -> None:
        assert Invoice(contact_phone="011987654321").contact_phone == "011987654321"
        with pytest.raises(PydanticValidationError, match="Invalid Brazilian phone number"):
            Invoice(contact_phone="12345")

"""Tests for the Cpf value object."""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError
from random import Random

import pytest

from fundamenta.domain.documents import (
    Cpf,
    DocumentFormat,
    InvalidDocumentError,
    InvalidDocumentReason,
)
from fundamenta.foundation.domain.result import Err, Ok

VALID = "52998224725"


@pytest.mark.unit
class TestCpfParse:
    @pytest.mark.parametrize("raw", [VALID, "529.982.247-25", " 529 982 247 25 ", "529982247-25"])
    def test_accepts_common_formats(self, raw: str) -> None:
        assert Cpf.parse(raw) == Ok(Cpf(VALID))

    def test_repeated_digits(self) -> None:
        result = Cpf.parse("111.111.111-11")
        assert isinstance(result, Err)
        assert result.error.kind is InvalidDocumentReason.REPEATED_SEQUENCE

    def test_checksum_mismatch(self) -> None:
        result = Cpf.parse("52998224726")
        assert isinstance(result, Err)
        assert result.error.kind is InvalidDocumentReason.CHECKSUM_MISMATCH

    @pytest.mark.parametrize("raw", ["", "5299822472", "529982247250", "abc"])
    def test_malformed(self, raw: str) -> None:
        result = Cpf.parse(raw)
        assert isinstance(result, Err)
        assert result.error.kind is InvalidDocumentReason.MALFORMED

    @pytest.mark.parametrize("raw", [None, 52998224725, b"52998224725"])
    def test_non_string_input(self, raw: object) -> None:
        assert not Cpf.parse(raw)
        assert Cpf.try_parse(raw) is None
        assert Cpf.is_valid(raw) is False

    def test_error_context_has_no_raw_value(self) -> None:
        result = Cpf.parse("52998224726")
        assert isinstance(result, Err)
        assert "52998224726" not in str(result.error)
        assert result.error.context["document_type"] == "cpf"
        assert result.error.context["kind"] == "checksum_mismatch"

    def test_try_parse_and_is_valid(self) -> None:
        assert Cpf.is_valid(VALID)
        assert not Cpf.is_valid("11111111111")
        assert Cpf.try_parse("529.982.247-25") == Cpf(VALID)


@pytest.mark.unit
class TestCpfConstruction:
    def test_direct_construction_requires_plain_form(self) -> None:
        with pytest.raises(InvalidDocumentError) as exc_info:
            Cpf("529.982.247-25")
        assert exc_info.value.kind is InvalidDocumentReason.MALFORMED

    def test_direct_construction_checks_digits(self) -> None:
        with pytest.raises(InvalidDocumentError, match="check digits do not match"):
            Cpf("52998224724")

    def test_frozen(self) -> None:
        cpf = Cpf(VALID)
        with pytest.raises(FrozenInstanceError):
            cpf.value = "x"  # type: ignore[misc]


@pytest.mark.unit
class TestCpfFromBase:
    def test_appends_check_digits(self) -> None:
        assert Cpf.from_base("529982247") == Cpf(VALID)

    @pytest.mark.parametrize("base", ["52998224", "5299822470", "52998224a", "529.982.24"])
    def test_malformed_base(self, base: str) -> None:
        with pytest.raises(InvalidDocumentError, match="exactly 9 decimal digits"):
            Cpf.from_base(base)

    def test_repeated_base(self) -> None:
        with pytest.raises(InvalidDocumentError) as exc_info:
            Cpf.from_base("000000000")
        assert exc_info.value.kind is InvalidDocumentReason.REPEATED_SEQUENCE


@pytest.mark.unit
class TestCpfRandom:
    def test_deterministic_for_seed(self) -> None:
        assert Cpf.random(Random(7)) == Cpf.random(Random(7))

    def test_random_list(self) -> None:
        cpfs = Cpf.random_list(20, Random(1))
        assert len(cpfs) == 20
        assert all(Cpf.is_valid(c.value) for c in cpfs)

    def test_random_list_empty(self) -> None:
        assert Cpf.random_list(0, Random(1)) == []

    def test_random_list_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Cpf.random_list(-1, Random(1))


@pytest.mark.unit
class TestCpfFormat:
    def test_plain(self) -> None:
        assert Cpf(VALID).format() == VALID
        assert str(Cpf(VALID)) == VALID

    def test_masked(self) -> None:
        assert Cpf(VALID).format(DocumentFormat.MASKED) == "529.982.247-25"

    def test_safe(self) -> None:
        assert Cpf(VALID).format(DocumentFormat.SAFE) == "***.982.247-25"

    def test_accessors(self) -> None:
        cpf = Cpf(VALID)
        assert cpf.base_digits == "529982247"
        assert cpf.verifier_digits == "25"
        assert cpf.as_int() == 52998224725

    def test_leading_zero_kept(self) -> None:
        cpf = Cpf.from_base("012345678")
        assert cpf.value.startswith("0")
        assert cpf.as_int() < 10**10


@pytest.mark.unit
class TestCpfRejectionLogging:
    def test_rejection_logs_kind_only(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="fundamenta.domain.documents")
        Cpf.parse("529.982.247-26")

        [record] = [r for r in caplog.records if r.getMessage() == "cpf_rejected"]
        assert record.levelno == logging.DEBUG
        assert record.kind == "checksum_mismatch"
        assert "52998224726" not in caplog.text

    def test_valid_input_logs_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="fundamenta.domain.documents")
        Cpf.parse(VALID)
        assert caplog.records == []

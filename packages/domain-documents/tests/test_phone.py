"""Tests for Brazilian phone canonicalization."""

from __future__ import annotations

import hashlib
import logging

import pytest

from fundamenta.domain.documents import (
    AREA_CODES,
    InvalidDocumentError,
    InvalidDocumentReason,
    Phone,
)
from fundamenta.foundation.domain.result import Err

CANONICAL = "+5511987654321"

UNASSIGNED_CODES = ["00", "10", "20", "23", "25", "26", "29", "30", "36", "39", "50", "52"]


@pytest.mark.unit
class TestPhoneParse:
    @pytest.mark.parametrize(
        "raw",
        ["11987654321", "(11) 98765-4321", "+5511987654321", "011987654321", "+55 (11) 9 8765-4321"],
    )
    def test_mobile_shapes(self, raw: str) -> None:
        phone = Phone.parse(raw).unwrap()
        assert phone.canonical == CANONICAL
        assert phone.is_mobile
        assert not phone.is_landline

    def test_landline(self) -> None:
        phone = Phone.parse("(11) 3456-7890").unwrap()
        assert phone.canonical == "+551134567890"
        assert phone.is_landline
        assert phone.formatted == "(11) 3456-7890"

    def test_unknown_area_code_is_falsy(self) -> None:
        result = Phone.parse("0098765432")
        assert not result
        assert isinstance(result, Err)
        assert result.error.kind is InvalidDocumentReason.UNKNOWN_AREA_CODE

    def test_nine_digit_local_must_start_with_nine(self) -> None:
        result = Phone.parse("11887654321")
        assert isinstance(result, Err)
        assert result.error.kind is InvalidDocumentReason.MALFORMED
        assert "starting with 9" in result.error.reason

    @pytest.mark.parametrize("raw", ["", "   ", "123", "1198765432100", None, 11987654321])
    def test_malformed(self, raw: object) -> None:
        result = Phone.parse(raw)
        assert isinstance(result, Err)
        assert result.error.kind is InvalidDocumentReason.MALFORMED

    def test_try_parse_and_is_valid(self) -> None:
        assert Phone.is_valid("(21) 99876-5432")
        assert not Phone.is_valid("(20) 99876-5432")
        assert Phone.try_parse("garbage") is None


@pytest.mark.unit
class TestPhoneFromCanonical:
    def test_round_trip(self) -> None:
        assert Phone.from_canonical(CANONICAL) == Phone.parse("11987654321").unwrap()

    @pytest.mark.parametrize(
        "canonical",
        ["5511987654321", "+1511987654321", "+55119876543x1", "+55 11987654321"],
    )
    def test_rejects_non_canonical(self, canonical: str) -> None:
        with pytest.raises(InvalidDocumentError):
            Phone.from_canonical(canonical)


@pytest.mark.unit
class TestPhoneAccessors:
    def test_parts(self) -> None:
        phone = Phone.from_canonical(CANONICAL)
        assert phone.digits == "5511987654321"
        assert phone.country_code == "55"
        assert phone.area_code == "11"
        assert phone.local_number == "987654321"
        assert str(phone) == CANONICAL

    def test_masked(self) -> None:
        assert Phone.from_canonical(CANONICAL).masked == "+55******4321"

    def test_formatted_mobile(self) -> None:
        assert Phone.from_canonical(CANONICAL).formatted == "(11) 98765-4321"

    def test_fingerprint(self) -> None:
        expected = hashlib.sha256(CANONICAL.encode()).hexdigest()
        assert Phone.from_canonical(CANONICAL).fingerprint() == expected


@pytest.mark.unit
class TestAreaCodes:
    def test_size(self) -> None:
        assert len(AREA_CODES) == 67

    @pytest.mark.parametrize("code", UNASSIGNED_CODES)
    def test_unassigned_codes_absent(self, code: str) -> None:
        assert code not in AREA_CODES


@pytest.mark.unit
class TestPhoneRejectionLogging:
    def test_rejection_logs_kind_only(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="fundamenta.domain.documents")
        Phone.parse("(00) 98765-4321")

        [record] = [r for r in caplog.records if r.getMessage() == "phone_rejected"]
        assert record.kind == "unknown_area_code"
        assert "98765" not in caplog.text

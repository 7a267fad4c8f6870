"""Brazilian phone numbers in canonical ``+55<DDD><number>`` form.

Input arrives in many shapes ("(11) 98765-4321", "11987654321",
"+55 11 98765-4321", "011987654321" with the trunk prefix). After
stripping non-digits the number is brought to the international form,
then checked against the table of area codes (DDD) and the local number
rules: 9 digits starting with 9 for mobiles, 8 digits for landlines.

Example:
    >>> from fundamenta.domain.documents import Phone
    >>> phone = Phone.parse("(11) 98765-4321").unwrap()
    >>> phone.canonical
    '+5511987654321'
    >>> phone.formatted
    '(11) 98765-4321'
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fundamenta.domain.documents.exceptions import (
    InvalidDocumentError,
    InvalidDocumentReason,
)
from fundamenta.domain.documents.normalizer import only_digits
from fundamenta.foundation.domain.result import Err, Ok

if TYPE_CHECKING:
    from fundamenta.foundation.domain.result import Result

logger = logging.getLogger(__name__)

DOCUMENT_TYPE = "phone"
COUNTRY_CODE = "55"
TRUNK_PREFIX = "0"

MOBILE_LENGTH = 9
LANDLINE_LENGTH = 8

# Area codes (DDD) assigned by Anatel.
AREA_CODES: frozenset[str] = frozenset(
    {
        "11", "12", "13", "14", "15", "16", "17", "18", "19",  # SP
        "21", "22", "24",  # RJ
        "27", "28",  # ES
        "31", "32", "33", "34", "35", "37", "38",  # MG
        "41", "42", "43", "44", "45", "46",  # PR
        "47", "48", "49",  # SC
        "51", "53", "54", "55",  # RS
        "61",  # DF
        "62", "64",  # GO
        "63",  # TO
        "65", "66",  # MT
        "67",  # MS
        "68",  # AC
        "69",  # RO
        "71", "73", "74", "75", "77",  # BA
        "79",  # SE
        "81", "87",  # PE
        "82",  # AL
        "83",  # PB
        "84",  # RN
        "85", "88",  # CE
        "86", "89",  # PI
        "91", "93", "94",  # PA
        "92", "97",  # AM
        "95",  # RR
        "96",  # AP
        "98", "99",  # MA
    }
)  # fmt: skip


@dataclass(frozen=True, slots=True)
class Phone:
    """Validated Brazilian phone number.

    Attributes:
        canonical: ``+55`` followed by the 2-digit area code and the 8- or
            9-digit local number, e.g. ``+5511987654321``.

    Raises:
        InvalidDocumentError: On direct construction with a non-canonical
            or invalid value.
    """

    canonical: str

    def __post_init__(self) -> None:
        value = self.canonical
        if not isinstance(value, str) or not value.startswith("+" + COUNTRY_CODE):
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.MALFORMED)
        digits = value[1:]
        if not (digits.isascii() and digits.isdigit()) or len(digits) not in (12, 13):
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.MALFORMED)
        if digits[2:4] not in AREA_CODES:
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.UNKNOWN_AREA_CODE)
        local = digits[4:]
        if not (len(local) == LANDLINE_LENGTH or (len(local) == MOBILE_LENGTH and local[0] == "9")):
            raise InvalidDocumentError(
                DOCUMENT_TYPE,
                InvalidDocumentReason.MALFORMED,
                "local number must be 8 digits or 9 digits starting with 9",
            )

    # -- factories ---------------------------------------------------------

    @classmethod
    def parse(cls, raw: Any) -> Result[Phone, InvalidDocumentError]:
        """Canonicalize a phone number typed in any common national format."""
        digits = only_digits(raw) if isinstance(raw, str) else ""
        international = _with_country_code(digits)
        if international is None:
            return _reject(InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.MALFORMED))
        try:
            return Ok(cls("+" + international))
        except InvalidDocumentError as exc:
            return _reject(exc)

    @classmethod
    def try_parse(cls, raw: Any) -> Phone | None:
        return cls.parse(raw).ok()

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        return cls.parse(raw).is_ok()

    @classmethod
    def from_canonical(cls, canonical: str) -> Phone:
        """Rebuild a Phone from its stored canonical string.

        Raises:
            InvalidDocumentError: If ``canonical`` is not a valid
                ``+55...`` number.
        """
        return cls(canonical)

    # -- accessors ---------------------------------------------------------

    @property
    def digits(self) -> str:
        return self.canonical[1:]

    @property
    def country_code(self) -> str:
        return COUNTRY_CODE

    @property
    def area_code(self) -> str:
        return self.digits[2:4]

    @property
    def local_number(self) -> str:
        return self.digits[4:]

    @property
    def is_mobile(self) -> bool:
        local = self.local_number
        return len(local) == MOBILE_LENGTH and local[0] == "9"

    @property
    def is_landline(self) -> bool:
        return len(self.local_number) == LANDLINE_LENGTH

    @property
    def masked(self) -> str:
        """Only the last four digits visible: ``+55******4321``."""
        return f"+{COUNTRY_CODE}******{self.local_number[-4:]}"

    @property
    def formatted(self) -> str:
        """National display form: ``(11) 98765-4321`` or ``(11) 3456-7890``."""
        local = self.local_number
        split = 5 if self.is_mobile else 4
        return f"({self.area_code}) {local[:split]}-{local[split:]}"

    def fingerprint(self) -> str:
        """SHA-256 hex digest of the canonical form, usable as a lookup key."""
        return hashlib.sha256(self.canonical.encode("ascii")).hexdigest()

    def __str__(self) -> str:
        return self.canonical


def _with_country_code(digits: str) -> str | None:
    """Bring a digit string to ``55...`` form, or None if no shape matches."""
    if digits.startswith(COUNTRY_CODE) and len(digits) >= 12:
        return digits
    if len(digits) in (10, 11):
        return COUNTRY_CODE + digits
    if digits.startswith(TRUNK_PREFIX) and len(digits) == 12:
        return COUNTRY_CODE + digits[1:]
    return None


def _reject(error: InvalidDocumentError) -> Err[InvalidDocumentError]:
    logger.debug("phone_rejected", extra={"kind": error.kind.value})
    return Err(error)

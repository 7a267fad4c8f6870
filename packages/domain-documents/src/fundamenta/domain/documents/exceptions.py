"""Errors raised or returned when a Brazilian document fails validation.

Every failure is classified with an InvalidDocumentReason so callers can
tell a typo (checksum) from garbage input (malformed) or an unknown area
code, without the raw value ever being placed in the error context.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from fundamenta.foundation.domain.exceptions import ValidationError

__all__ = ["InvalidDocumentError", "InvalidDocumentReason"]


class InvalidDocumentReason(StrEnum):
    """Why a document value was rejected.

    Uses StrEnum for native JSON serialization.
    """

    MALFORMED = "malformed"
    REPEATED_SEQUENCE = "repeated_sequence"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    UNKNOWN_AREA_CODE = "unknown_area_code"


_DESCRIPTIONS: dict[InvalidDocumentReason, str] = {
    InvalidDocumentReason.MALFORMED: "wrong length or character set",
    InvalidDocumentReason.REPEATED_SEQUENCE: "all characters are identical",
    InvalidDocumentReason.CHECKSUM_MISMATCH: "check digits do not match",
    InvalidDocumentReason.UNKNOWN_AREA_CODE: "area code is not a valid DDD",
}


class InvalidDocumentError(ValidationError):
    """Raised (or carried in an Err) when a CPF, CNPJ or phone is invalid.

    Attributes:
        error_code: "INVALID_DOCUMENT" (class constant).
        document_type: "cpf", "cnpj" or "phone".
        kind: Classification of the failure (InvalidDocumentReason).
        reason: Human-readable description of the failure.

    Example:
        >>> raise InvalidDocumentError("cpf", InvalidDocumentReason.CHECKSUM_MISMATCH)
        InvalidDocumentError: Validation failed for 'cpf': check digits do not match (...)
    """

    error_code: str = "INVALID_DOCUMENT"

    def __init__(
        self,
        document_type: str,
        kind: InvalidDocumentReason,
        detail: str | None = None,
        **extra_context: Any,
    ) -> None:
        """Initialize invalid document error.

        Args:
            document_type: Kind of document being validated.
            kind: Classification of the failure.
            detail: Optional human-readable detail replacing the default
                description of the kind. Must not contain the raw value.
            **extra_context: Additional debugging context.
        """
        self.document_type = document_type
        self.kind = kind
        super().__init__(
            document_type,
            detail or _DESCRIPTIONS[kind],
            document_type=document_type,
            kind=kind.value,
            **extra_context,
        )

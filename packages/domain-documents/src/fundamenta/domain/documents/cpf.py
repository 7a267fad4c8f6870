"""CPF (Cadastro de Pessoas Físicas): the Brazilian individual taxpayer ID.

A CPF is 11 decimal digits: a 9-digit base followed by two check digits,
each a weighted modulo-11 checksum of the digits before it. Sequences of a
single repeated digit ("111.111.111-11") satisfy the checksum but are not
issued, so they are rejected.

Example:
    >>> from fundamenta.domain.documents import Cpf, DocumentFormat
    >>> cpf = Cpf.parse("529.982.247-25").unwrap()
    >>> cpf.format(DocumentFormat.MASKED)
    '529.982.247-25'
    >>> Cpf.is_valid("111.111.111-11")
    False
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fundamenta.domain.documents.checksum import (
    CPF_WEIGHTS_FIRST,
    CPF_WEIGHTS_SECOND,
    check_digit,
)
from fundamenta.domain.documents.exceptions import (
    InvalidDocumentError,
    InvalidDocumentReason,
)
from fundamenta.domain.documents.formats import DocumentFormat
from fundamenta.domain.documents.normalizer import DIGITS, extract_digits, is_repeated
from fundamenta.foundation.domain.result import Err, Ok

if TYPE_CHECKING:
    from random import Random

    from fundamenta.foundation.domain.result import Result

logger = logging.getLogger(__name__)

DOCUMENT_TYPE = "cpf"
CPF_LENGTH = 11
BASE_LENGTH = 9


@dataclass(frozen=True, slots=True)
class Cpf:
    """Validated CPF in plain (digits only) form.

    Build instances with ``parse``/``try_parse`` for user input,
    ``from_base`` to complete a 9-digit base, or ``random`` for synthetic
    test data. Direct construction accepts only the plain 11-digit form.

    Attributes:
        value: The 11 digits, no punctuation.

    Raises:
        InvalidDocumentError: On direct construction with an invalid value.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or extract_digits(self.value, CPF_LENGTH) != self.value:
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.MALFORMED)
        if is_repeated(self.value):
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.REPEATED_SEQUENCE)
        if self.value[9:] != _verifier_digits(self.value[:BASE_LENGTH]):
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.CHECKSUM_MISMATCH)

    # -- factories ---------------------------------------------------------

    @classmethod
    def parse(cls, raw: Any) -> Result[Cpf, InvalidDocumentError]:
        """Parse a CPF in any punctuation, returning Ok(cpf) or Err(error)."""
        digits = extract_digits(raw, CPF_LENGTH) if isinstance(raw, str) else None
        if digits is None:
            return _reject(InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.MALFORMED))
        try:
            return Ok(cls(digits))
        except InvalidDocumentError as exc:
            return _reject(exc)

    @classmethod
    def try_parse(cls, raw: Any) -> Cpf | None:
        """Parse a CPF, returning None instead of an error."""
        return cls.parse(raw).ok()

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        return cls.parse(raw).is_ok()

    @classmethod
    def from_base(cls, base: str) -> Cpf:
        """Complete a 9-digit base with its two check digits.

        Raises:
            InvalidDocumentError: If ``base`` is not exactly 9 decimal digits
                or is a single repeated digit.
        """
        if not isinstance(base, str) or len(base) != BASE_LENGTH or any(c not in DIGITS for c in base):
            raise InvalidDocumentError(
                DOCUMENT_TYPE,
                InvalidDocumentReason.MALFORMED,
                "base must contain exactly 9 decimal digits",
            )
        if is_repeated(base):
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.REPEATED_SEQUENCE)
        return cls(base + _verifier_digits(base))

    @classmethod
    def random(cls, rng: Random) -> Cpf:
        """Generate a valid CPF from the injected random source."""
        while True:
            base = "".join(rng.choice(DIGITS) for _ in range(BASE_LENGTH))
            if not is_repeated(base):
                return cls.from_base(base)

    @classmethod
    def random_list(cls, count: int, rng: Random) -> list[Cpf]:
        if count < 0:
            msg = f"count must be non-negative, got {count}"
            raise ValueError(msg)
        return [cls.random(rng) for _ in range(count)]

    # -- accessors ---------------------------------------------------------

    @property
    def base_digits(self) -> str:
        return self.value[:BASE_LENGTH]

    @property
    def verifier_digits(self) -> str:
        return self.value[BASE_LENGTH:]

    def as_int(self) -> int:
        return int(self.value)

    def format(self, style: DocumentFormat = DocumentFormat.PLAIN) -> str:
        """Render as PLAIN ``52998224725``, MASKED ``529.982.247-25`` or SAFE ``***.982.247-25``."""
        v = self.value
        match style:
            case DocumentFormat.PLAIN:
                return v
            case DocumentFormat.MASKED:
                return f"{v[0:3]}.{v[3:6]}.{v[6:9]}-{v[9:11]}"
            case DocumentFormat.SAFE:
                return f"***.{v[3:6]}.{v[6:9]}-{v[9:11]}"
        msg = f"Unknown document format: {style!r}"
        raise ValueError(msg)

    def __str__(self) -> str:
        return self.value


def _verifier_digits(base: str) -> str:
    first = check_digit(base, CPF_WEIGHTS_FIRST)
    second = check_digit(f"{base}{first}", CPF_WEIGHTS_SECOND)
    return f"{first}{second}"


def _reject(error: InvalidDocumentError) -> Err[InvalidDocumentError]:
    logger.debug("cpf_rejected", extra={"kind": error.kind.value})
    return Err(error)

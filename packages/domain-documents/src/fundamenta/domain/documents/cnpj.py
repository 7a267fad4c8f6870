"""CNPJ (Cadastro Nacional da Pessoa Jurídica): the Brazilian company ID.

A CNPJ is 14 characters: a 12-character root (8-character company number
plus 4-character branch) followed by two decimal check digits. Legacy
roots are all-decimal; the alphanumeric scheme allows ``A-Z`` in the root.
Both are validated by the same weighted modulo-11 rule, letters counting
as their base-36 value, so an all-decimal root is just a special case.

Example:
    >>> from fundamenta.domain.documents import Cnpj, DocumentFormat
    >>> Cnpj.parse("11.444.777/0001-61").unwrap().format(DocumentFormat.SAFE)
    '**.444.777/0001-61'
    >>> Cnpj.is_valid("12.abc.345/01de-45")
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fundamenta.domain.documents.checksum import (
    CNPJ_WEIGHTS_FIRST,
    CNPJ_WEIGHTS_SECOND,
    check_digit,
)
from fundamenta.domain.documents.exceptions import (
    InvalidDocumentError,
    InvalidDocumentReason,
)
from fundamenta.domain.documents.formats import DocumentFormat
from fundamenta.domain.documents.normalizer import (
    ALPHANUMERIC,
    DIGITS,
    LETTERS,
    extract_alnum,
    is_repeated,
)
from fundamenta.foundation.domain.result import Err, Ok

if TYPE_CHECKING:
    from random import Random

    from fundamenta.foundation.domain.result import Result

logger = logging.getLogger(__name__)

DOCUMENT_TYPE = "cnpj"
CNPJ_LENGTH = 14
ROOT_LENGTH = 12

_ROOT_CHARS = frozenset(ALPHANUMERIC)
_DIGIT_CHARS = frozenset(DIGITS)


@dataclass(frozen=True, slots=True)
class Cnpj:
    """Validated CNPJ in plain (upper-case, no punctuation) form.

    Attributes:
        value: 12-character root followed by 2 check digits.

    Raises:
        InvalidDocumentError: On direct construction with an invalid value.
    """

    value: str

    def __post_init__(self) -> None:
        if (
            not isinstance(self.value, str)
            or len(self.value) != CNPJ_LENGTH
            or any(c not in _ROOT_CHARS for c in self.value[:ROOT_LENGTH])
            or any(c not in _DIGIT_CHARS for c in self.value[ROOT_LENGTH:])
        ):
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.MALFORMED)
        root = self.value[:ROOT_LENGTH]
        if is_repeated(root):
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.REPEATED_SEQUENCE)
        if self.value[ROOT_LENGTH:] != _verifier_digits(root):
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.CHECKSUM_MISMATCH)

    # -- factories ---------------------------------------------------------

    @classmethod
    def parse(cls, raw: Any) -> Result[Cnpj, InvalidDocumentError]:
        """Parse a legacy or alphanumeric CNPJ in any punctuation or case."""
        normalized = extract_alnum(raw, CNPJ_LENGTH) if isinstance(raw, str) else None
        if normalized is None:
            return _reject(InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.MALFORMED))
        try:
            return Ok(cls(normalized))
        except InvalidDocumentError as exc:
            return _reject(exc)

    @classmethod
    def try_parse(cls, raw: Any) -> Cnpj | None:
        return cls.parse(raw).ok()

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        return cls.parse(raw).is_ok()

    @classmethod
    def from_base(cls, root: str) -> Cnpj:
        """Complete a 12-character root (``0-9A-Z``) with its check digits.

        Lower-case letters are accepted and upper-cased.

        Raises:
            InvalidDocumentError: If ``root`` is not 12 characters of
                ``0-9A-Z`` or is a single repeated character.
        """
        normalized = root.upper() if isinstance(root, str) and root.isascii() else None
        if normalized is None or len(normalized) != ROOT_LENGTH or any(c not in _ROOT_CHARS for c in normalized):
            raise InvalidDocumentError(
                DOCUMENT_TYPE,
                InvalidDocumentReason.MALFORMED,
                "root must contain exactly 12 characters [0-9A-Z]",
            )
        if is_repeated(normalized):
            raise InvalidDocumentError(DOCUMENT_TYPE, InvalidDocumentReason.REPEATED_SEQUENCE)
        return cls(normalized + _verifier_digits(normalized))

    @classmethod
    def random(cls, rng: Random, alphanumeric: bool = True) -> Cnpj:
        """Generate a valid CNPJ from the injected random source.

        With ``alphanumeric`` each root character is a digit or a letter
        with equal probability; otherwise the root is all-decimal.
        """
        while True:
            root = "".join(_random_root_char(rng, alphanumeric) for _ in range(ROOT_LENGTH))
            if not is_repeated(root):
                return cls.from_base(root)

    @classmethod
    def random_list(cls, count: int, rng: Random, alphanumeric: bool = True) -> list[Cnpj]:
        if count < 0:
            msg = f"count must be non-negative, got {count}"
            raise ValueError(msg)
        return [cls.random(rng, alphanumeric) for _ in range(count)]

    # -- accessors ---------------------------------------------------------

    @property
    def root(self) -> str:
        return self.value[:ROOT_LENGTH]

    @property
    def branch(self) -> str:
        return self.value[8:ROOT_LENGTH]

    @property
    def verifier_digits(self) -> str:
        return self.value[ROOT_LENGTH:]

    @property
    def is_alphanumeric(self) -> bool:
        """True if the root uses the alphanumeric scheme (contains a letter)."""
        return any(c not in _DIGIT_CHARS for c in self.root)

    def format(self, style: DocumentFormat = DocumentFormat.PLAIN) -> str:
        """Render as PLAIN, MASKED ``11.444.777/0001-61`` or SAFE ``**.444.777/0001-61``."""
        v = self.value
        match style:
            case DocumentFormat.PLAIN:
                return v
            case DocumentFormat.MASKED:
                return f"{v[0:2]}.{v[2:5]}.{v[5:8]}/{v[8:12]}-{v[12:14]}"
            case DocumentFormat.SAFE:
                return f"**.{v[2:5]}.{v[5:8]}/{v[8:12]}-{v[12:14]}"
        msg = f"Unknown document format: {style!r}"
        raise ValueError(msg)

    def __str__(self) -> str:
        return self.value


def _verifier_digits(root: str) -> str:
    first = check_digit(root, CNPJ_WEIGHTS_FIRST)
    second = check_digit(f"{root}{first}", CNPJ_WEIGHTS_SECOND)
    return f"{first}{second}"


def _random_root_char(rng: Random, alphanumeric: bool) -> str:
    if alphanumeric and rng.getrandbits(1):
        return rng.choice(LETTERS)
    return rng.choice(DIGITS)


def _reject(error: InvalidDocumentError) -> Err[InvalidDocumentError]:
    logger.debug("cnpj_rejected", extra={"kind": error.kind.value})
    return Err(error)

"""Value objects for contact information.

Immutable, validated domain primitives. All validation occurs at construction.
Phone numbers live in ``fundamenta.domain.documents.phone`` together with
the other Brazil-specific canonicalizers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

MAX_EMAIL_LENGTH = 320


@dataclass(frozen=True, slots=True)
class Email:
    """Validated email address value object.

    Format: simplified RFC 5322 (local part, ``@``, dotted domain with a
    TLD of at least two letters), max 320 characters.

    Attributes:
        value: The validated email string, as given.

    Raises:
        ValueError: If email is blank, malformed or exceeds 320 chars.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            msg = "Email cannot be blank"
            raise ValueError(msg)
        if len(self.value) > MAX_EMAIL_LENGTH:
            msg = f"Email too long: {len(self.value)} chars (max {MAX_EMAIL_LENGTH})"
            raise ValueError(msg)
        if not _EMAIL_PATTERN.match(self.value):
            msg = f"Invalid email format: '{self.value}'"
            raise ValueError(msg)

    @classmethod
    def try_parse(cls, value: str) -> Email | None:
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def local_part(self) -> str:
        return self.value.rsplit("@", 1)[0]

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    def normalized(self) -> str:
        """Lower-cased address for case-insensitive comparison."""
        return self.value.lower()

    def __str__(self) -> str:
        return self.value

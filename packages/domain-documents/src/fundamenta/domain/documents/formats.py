"""Display formats shared by the identifier value objects."""

from __future__ import annotations

from enum import StrEnum


class DocumentFormat(StrEnum):
    """How an identifier is rendered.

    PLAIN is the canonical storage form and parses back unchanged; MASKED is
    the punctuated display form; SAFE redacts part of the value for logs.
    """

    PLAIN = "plain"
    MASKED = "masked"
    SAFE = "safe"

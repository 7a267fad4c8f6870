"""Extraction of fixed-length candidate strings from free-form input.

Users type documents with any punctuation ("529.982.247-25",
"52998224725", "cpf: 529 982 247 25"); these helpers keep only the
meaningful characters and enforce the expected length in a single pass.
"""

from __future__ import annotations

from collections.abc import Sequence

DIGITS = "0123456789"
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHANUMERIC = DIGITS + LETTERS

_DIGIT_SET = frozenset(DIGITS)
_ALNUM_SET = frozenset(ALPHANUMERIC)


def extract_digits(raw: str, expected_len: int) -> str | None:
    """Return exactly ``expected_len`` decimal digits from ``raw`` or None.

    The scan stops as soon as one digit too many is found.

    Example:
        >>> extract_digits("529.982.247-25", 11)
        '52998224725'
        >>> extract_digits("529.982.247-2", 11) is None
        True
    """
    return _extract(raw, expected_len, _DIGIT_SET, fold_case=False)


def extract_alnum(raw: str, expected_len: int) -> str | None:
    """Return exactly ``expected_len`` characters of ``0-9A-Z`` or None.

    ASCII letters are upper-cased before matching, so "12.abc.345/01de-45"
    yields "12ABC34501DE45".
    """
    return _extract(raw, expected_len, _ALNUM_SET, fold_case=True)


def only_digits(raw: str | None) -> str:
    """Strip everything but ``0-9``; empty string for None."""
    if not raw:
        return ""
    return "".join(c for c in raw if c in _DIGIT_SET)


def only_alnum(raw: str | None) -> str:
    """Strip everything but ``0-9A-Z`` after upper-casing; empty string for None."""
    if not raw:
        return ""
    return "".join(c.upper() for c in raw if c.isascii() and c.upper() in _ALNUM_SET)


def is_repeated(chars: Sequence[str]) -> bool:
    """True if ``chars`` is non-empty and every character equals the first."""
    if not chars:
        return False
    first = chars[0]
    return all(c == first for c in chars)


def _extract(raw: str, expected_len: int, allowed: frozenset[str], *, fold_case: bool) -> str | None:
    found: list[str] = []
    for c in raw:
        if fold_case and "a" <= c <= "z":
            c = c.upper()
        if c in allowed:
            if len(found) == expected_len:
                return None
            found.append(c)
    if len(found) != expected_len:
        return None
    return "".join(found)

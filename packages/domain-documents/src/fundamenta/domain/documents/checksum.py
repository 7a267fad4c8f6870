"""Weighted modulo-11 check digits used by CPF and CNPJ.

Both documents share the same rule: multiply each character value by its
weight, take the sum modulo 11, and map remainders 0 and 1 to check digit
0, anything else to ``11 - remainder``. Character values are base-36 so the
alphanumeric CNPJ root ("12ABC34501DE") runs through the same arithmetic as
the legacy all-decimal one.
"""

from __future__ import annotations

from collections.abc import Sequence

CPF_WEIGHTS_FIRST: tuple[int, ...] = (10, 9, 8, 7, 6, 5, 4, 3, 2)
CPF_WEIGHTS_SECOND: tuple[int, ...] = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)

CNPJ_WEIGHTS_FIRST: tuple[int, ...] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_SECOND: tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

MODULUS = 11


def char_value(c: str) -> int:
    """Numeric value of a ``0-9A-Z`` character (``0``-``35``).

    Raises:
        ValueError: For any other character. Callers must normalize input
            first; reaching this is a programming error, not bad user input.
    """
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + 10
    msg = f"Invalid base-36 character: {c!r}"
    raise ValueError(msg)


def check_digit(chars: str, weights: Sequence[int]) -> int:
    """Compute the check digit (``0``-``9``) for ``chars`` under ``weights``.

    Example:
        >>> check_digit("529982247", CPF_WEIGHTS_FIRST)
        2
        >>> check_digit("5299822472", CPF_WEIGHTS_SECOND)
        5

    Raises:
        ValueError: If ``chars`` and ``weights`` differ in length or a
            character is outside ``0-9A-Z``.
    """
    if len(chars) != len(weights):
        msg = f"Expected {len(weights)} characters for these weights, got {len(chars)}"
        raise ValueError(msg)
    total = sum(char_value(c) * w for c, w in zip(chars, weights, strict=True))
    remainder = total % MODULUS
    return 0 if remainder < 2 else MODULUS - remainder

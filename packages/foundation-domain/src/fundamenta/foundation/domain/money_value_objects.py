"""Monetary value objects.

Immutable, validated domain primitives. All validation occurs at
construction time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

DEFAULT_CURRENCY = "BRL"

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


@dataclass(frozen=True, slots=True)
class Money:
    """Non-negative amount in a single ISO 4217 currency.

    Arithmetic is only defined between values of the same currency and
    always returns a new Money, so the invariants are re-checked on every
    result (e.g., subtraction that would go negative raises).

    Attributes:
        amount: The monetary amount as a Decimal (never negative).
        currency: Three-letter upper-case ISO 4217 code. Default: "BRL".

    Raises:
        ValueError: If amount is negative, not a Decimal, or the currency
            code is malformed.

    Example:
        >>> Money.of("10.50") + Money.of("4.50")
        Money(amount=Decimal('15.00'), currency='BRL')
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            msg = f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            raise ValueError(msg)
        if not self.amount.is_finite():
            msg = f"Money amount must be finite: {self.amount}"
            raise ValueError(msg)
        if self.amount < 0:
            msg = f"Amount cannot be negative: {self.amount}"
            raise ValueError(msg)
        if not _CURRENCY_PATTERN.match(self.currency):
            msg = f"Currency must be an ISO 4217 code: '{self.currency}'"
            raise ValueError(msg)

    @classmethod
    def of(cls, amount: str | int | float, currency: str = DEFAULT_CURRENCY) -> Money:
        """Build Money from a string, int or float amount.

        Floats go through ``str()`` first so ``Money.of(0.1)`` is exactly
        ``Decimal("0.1")``.
        """
        try:
            value = Decimal(str(amount))
        except InvalidOperation as exc:
            msg = f"Invalid money amount: {amount!r}"
            raise ValueError(msg) from exc
        return cls(value, currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls(Decimal(0), currency)

    def __add__(self, other: Money) -> Money:
        self._require_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._require_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, multiplier: int | Decimal) -> Money:
        if isinstance(multiplier, bool) or not isinstance(multiplier, int | Decimal):
            return NotImplemented
        return Money(self.amount * multiplier, self.currency)

    __rmul__ = __mul__

    def is_greater_than(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self.amount > other.amount

    def is_less_than(self, other: Money) -> bool:
        self._require_same_currency(other)
        return self.amount < other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def _require_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            msg = f"Cannot operate on different currencies: {self.currency} and {other.currency}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.currency} {self.amount}"

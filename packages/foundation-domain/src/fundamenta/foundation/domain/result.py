"""Explicit success/failure result type.

Operations that fail for expected reasons (bad user input, unknown
references) return a ``Result`` instead of raising, so callers can branch
on the outcome without try/except. ``Err`` always carries a DomainError,
which keeps the error code and structured context available for logging.

Example:
    >>> from fundamenta.foundation.domain.result import Err, Ok
    >>> result = Ok(21).map(lambda v: v * 2)
    >>> result.unwrap()
    42
    >>> match result:
    ...     case Ok(value):
    ...         print(value)
    ...     case Err(error):
    ...         print(error.error_code)
    42
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from fundamenta.foundation.domain.exceptions import DomainError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=DomainError)

__all__ = ["Err", "Ok", "Result"]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value

    def ok(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying the domain error that caused it.

    ``Err`` is falsy, so ``if result:`` reads as "did it succeed".
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self, default: U) -> U:
        return default

    def ok(self) -> None:
        return None

    def map(self, fn: Callable[[object], object]) -> Err[E]:
        return self

    def and_then(self, fn: Callable[[object], object]) -> Err[E]:
        return self

    def __bool__(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]  # noqa: UP007

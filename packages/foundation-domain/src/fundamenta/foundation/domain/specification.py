"""Specification pattern for composable business rules.

Specifications wrap a single predicate over a candidate and can be
combined with ``&``, ``|`` and ``~`` (or the ``and_``/``or_``/``not_``
methods) into larger rules without touching the candidate type.

Example:
    >>> from fundamenta.foundation.domain.specification import PredicateSpecification
    >>> positive = PredicateSpecification(lambda n: n > 0)
    >>> even = PredicateSpecification(lambda n: n % 2 == 0)
    >>> (positive & ~even).is_satisfied_by(3)
    True
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = [
    "AndSpecification",
    "NotSpecification",
    "OrSpecification",
    "PredicateSpecification",
    "Specification",
]


class Specification(ABC, Generic[T]):
    """Base class for a business rule evaluated against a candidate."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """Return True if the candidate satisfies this rule."""

    def and_(self, other: Specification[T]) -> Specification[T]:
        return AndSpecification(self, other)

    def or_(self, other: Specification[T]) -> Specification[T]:
        return OrSpecification(self, other)

    def not_(self) -> Specification[T]:
        return NotSpecification(self)

    def __and__(self, other: Specification[T]) -> Specification[T]:
        return self.and_(other)

    def __or__(self, other: Specification[T]) -> Specification[T]:
        return self.or_(other)

    def __invert__(self) -> Specification[T]:
        return self.not_()


class PredicateSpecification(Specification[T]):
    """Specification backed by a plain callable."""

    def __init__(self, predicate: Callable[[T], bool]) -> None:
        self._predicate = predicate

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(candidate))


class AndSpecification(Specification[T]):
    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)


class OrSpecification(Specification[T]):
    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)


class NotSpecification(Specification[T]):
    def __init__(self, spec: Specification[T]) -> None:
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)

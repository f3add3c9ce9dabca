"""
Predicate specifications with a lazily compiled evaluator.

Example::

    adult = Specification(lambda p: p.age >= 18)
    american = Specification(lambda p: p.country == "US")

    voter = adult & american          # same as adult.and_(american)
    voter.is_satisfied_by(person)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from domain_kit_core.domain.specification import ISpecification

from .exceptions import InvalidSpecificationError
from .expression import (
    AndAlso,
    CompiledPredicate,
    Negation,
    OrElse,
    Predicate,
    PredicateExpression,
)

logger = logging.getLogger("domain_kit.specifications")

T = TypeVar("T")


class Specification(Generic[T]):
    """
    Reusable boolean condition over values of type ``T``.

    The predicate is stored as a :class:`PredicateExpression` and is never
    replaced. It is compiled into a single closure on the first call to
    :meth:`is_satisfied_by`; the compiled form is cached on the instance and
    reused afterwards. Combining specifications never touches the operands:
    ``and_``, ``or_`` and ``not_`` return new instances, each with an empty
    cache of its own.
    """

    __slots__ = ("_predicate", "_compiled", "_lock")

    def __init__(
        self, predicate: Callable[[T], Any] | PredicateExpression[T]
    ) -> None:
        if isinstance(predicate, PredicateExpression):
            self._predicate: PredicateExpression[T] = predicate
        elif callable(predicate):
            self._predicate = Predicate(predicate)
        else:
            raise InvalidSpecificationError("predicate", predicate)
        self._compiled: CompiledPredicate[T] | None = None
        self._lock = threading.Lock()

    @property
    def predicate(self) -> PredicateExpression[T]:
        return self._predicate

    @property
    def is_compiled(self) -> bool:
        return self._compiled is not None

    def _evaluator(self) -> CompiledPredicate[T]:
        compiled = self._compiled
        if compiled is None:
            with self._lock:
                compiled = self._compiled
                if compiled is None:
                    compiled = self._compiled = self._predicate.compile()
                    if logger.isEnabledFor(logging.DEBUG):
                        logger.debug(
                            "Compiled specification (depth=%d)", self._predicate.depth
                        )
        return compiled

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._evaluator()(candidate)

    __call__ = is_satisfied_by

    def filter(self, candidates: Iterable[T]) -> Iterator[T]:
        """Yield the candidates that satisfy this specification."""
        evaluate = self._evaluator()
        return (candidate for candidate in candidates if evaluate(candidate))

    # -- composition ---------------------------------------------------------

    def and_(self, other: ISpecification[T]) -> Specification[T]:
        """Both conditions; *other* is skipped when this one fails."""
        return Specification(AndAlso(self._predicate, _expression_of(other)))

    def or_(self, other: ISpecification[T]) -> Specification[T]:
        """Either condition; *other* is skipped when this one holds."""
        return Specification(OrElse(self._predicate, _expression_of(other)))

    def not_(self) -> Specification[T]:
        return Specification(Negation(self._predicate))

    def merge(self, other: ISpecification[T]) -> Specification[T]:
        """Merge with another specification using logical AND."""
        return self.and_(other)

    def __and__(self, other: ISpecification[T]) -> Specification[T]:
        return self.and_(other)

    def __or__(self, other: ISpecification[T]) -> Specification[T]:
        return self.or_(other)

    def __invert__(self) -> Specification[T]:
        return self.not_()

    def to_dict(self) -> dict[str, Any]:
        return self._predicate.to_dict()

    def __repr__(self) -> str:
        return f"Specification({self._predicate!r})"


def _expression_of(other: object) -> PredicateExpression[Any]:
    if isinstance(other, Specification):
        return other.predicate
    if isinstance(other, ISpecification):
        return Predicate(other.is_satisfied_by)
    raise InvalidSpecificationError("other", other)

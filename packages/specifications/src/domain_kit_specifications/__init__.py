from .exceptions import InvalidSpecificationError, SpecificationError
from .expression import (
    AndAlso,
    CompiledPredicate,
    Negation,
    OrElse,
    Predicate,
    PredicateExpression,
)
from .specification import Specification

__all__ = [
    # Core types
    "Specification",
    # Expression trees
    "PredicateExpression",
    "Predicate",
    "AndAlso",
    "OrElse",
    "Negation",
    "CompiledPredicate",
    # Exceptions
    "SpecificationError",
    "InvalidSpecificationError",
]

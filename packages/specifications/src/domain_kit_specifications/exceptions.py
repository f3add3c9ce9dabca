"""
Specification exception hierarchy.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any

from domain_kit_core.primitives.exceptions import DomainKitError


class SpecificationError(DomainKitError):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidSpecificationError(SpecificationError, TypeError):
    """
    A specification was built from an unusable argument.

    Raised eagerly, at construction or combination time, when a predicate
    is missing or not callable, or when an operand is not a specification.
    """

    def __init__(self, argument: str, value: object) -> None:
        self.argument = argument
        self.value = value
        if value is None:
            message = f"'{argument}' is required, got None."
        else:
            message = (
                f"'{argument}' must be callable or a specification, "
                f"got {type(value).__name__}."
            )
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_SPECIFICATION",
            "argument": self.argument,
            "message": str(self),
        }

"""IEntityValidator — the validation capability an entity delegates to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


@runtime_checkable
class IEntityValidator(Protocol):
    """Protocol for the validator owned by every
    :class:`~domain_kit_core.domain.entity.Entity`.

    The entity never interprets findings itself: storage, rule evaluation
    and error text formatting all belong to the implementation.
    The default implementation is
    :class:`~domain_kit_core.validation.entity.EntityValidator`.
    """

    @property
    def results(self) -> ValidationResult:
        """Current findings."""
        ...

    def add_result(self, message: str, key: str) -> None:
        """Record one finding tagged by field *key*."""
        ...

    def validate(self) -> None:
        """Run the rule set, refreshing the findings it produces."""
        ...

    def is_valid(self) -> bool:
        """Return True iff no blocking findings exist."""
        ...

    def error_summary(self) -> str:
        """Human-readable text covering every finding."""
        ...

    def error_for(self, key: str) -> str:
        """Human-readable text for the findings of a single field."""
        ...

"""Validation system: findings, ValidationResult, EntityValidator."""

from __future__ import annotations

from .entity import EntityValidator, ValidationRule
from .result import ValidationFinding, ValidationResult

__all__ = [
    "EntityValidator",
    "ValidationFinding",
    "ValidationResult",
    "ValidationRule",
]

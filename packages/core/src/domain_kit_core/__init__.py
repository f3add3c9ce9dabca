"""domain-kit-core — entity base type and its validation capability.

Depends on pydantic only.
"""

from __future__ import annotations

# ── Domain ───────────────────────────────────────────────────────
from .domain import Entity, ISpecification

# ── Ports ────────────────────────────────────────────────────────
from .ports import IEntityValidator

# ── Primitives ──────────────────────────────────────────────────
from .primitives import DomainKitError

# ── Validation ──────────────────────────────────────────────────
from .validation import (
    EntityValidator,
    ValidationFinding,
    ValidationResult,
    ValidationRule,
)

__all__: list[str] = [
    # Domain
    "Entity",
    "ISpecification",
    # Ports
    "IEntityValidator",
    # Validation
    "EntityValidator",
    "ValidationFinding",
    "ValidationResult",
    "ValidationRule",
    # Primitives
    "DomainKitError",
]

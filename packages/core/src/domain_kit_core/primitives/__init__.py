"""Primitives: the exception root."""

from __future__ import annotations

from .exceptions import DomainKitError

__all__ = [
    "DomainKitError",
]

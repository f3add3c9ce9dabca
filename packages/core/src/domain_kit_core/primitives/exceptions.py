"""Exception root for domain-kit."""

from __future__ import annotations


class DomainKitError(Exception):
    """Root exception for the entire domain-kit toolkit.

    ``Entity`` itself raises nothing: errors from its validator propagate
    as they are. Specification contract violations derive from this class.
    """

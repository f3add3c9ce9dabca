"""The structural contract a specification fulfils."""

from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol, Generic[T]):
    """A boolean condition over values of type ``T``.

    ``Specification`` combinators accept any object with both methods, so
    conditions written elsewhere can be joined with predicate-based ones.
    An object offering only ``is_satisfied_by`` does not qualify.
    """

    def is_satisfied_by(self, candidate: T) -> bool: ...

    def to_dict(self) -> dict[str, Any]:
        """Describe the condition as ``{"op": ..., ...}`` for logs and debugging."""
        ...

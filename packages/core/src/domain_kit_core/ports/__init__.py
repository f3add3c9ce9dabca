from .validation import IEntityValidator

__all__ = [
    "IEntityValidator",
]

"""ValidationResult — ordered collection of validation findings."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationFinding:
    """One recorded validation failure, tagged by the field it concerns."""

    message: str
    key: str

    def __str__(self) -> str:
        return f"{self.key}: {self.message}"


def default_findings_factory() -> list[ValidationFinding]:
    """Factory for the mutable default list in ValidationResult fields."""
    return []


@dataclass
class ValidationResult:
    """Collects field-level validation findings in the order they were added.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure({"name": ["is required"]})
        result.add_error("age", "must be positive")
    """

    findings: list[ValidationFinding] = field(
        default_factory=default_findings_factory
    )

    @property
    def is_valid(self) -> bool:
        return len(self.findings) == 0

    @property
    def errors(self) -> dict[str, list[str]]:
        """Messages grouped by field key, keys in first-seen order."""
        grouped: dict[str, list[str]] = {}
        for finding in self.findings:
            grouped.setdefault(finding.key, []).append(finding.message)
        return grouped

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, list[str]]) -> ValidationResult:
        result = cls()
        for key, messages in errors.items():
            for message in messages:
                result.add_error(key, message)
        return result

    # ── Mutation / merging ───────────────────────────────────────

    def add_error(self, key: str, message: str) -> ValidationFinding:
        """Record a single finding for *key*."""
        finding = ValidationFinding(message=message, key=key)
        self.findings.append(finding)
        return finding

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding this result's findings then *other*'s."""
        return ValidationResult(findings=[*self.findings, *other.findings])

    def for_key(self, key: str) -> list[ValidationFinding]:
        return [finding for finding in self.findings if finding.key == key]

    def clear(self) -> None:
        self.findings.clear()

    def __len__(self) -> int:
        return len(self.findings)

    def __iter__(self) -> Iterator[ValidationFinding]:
        return iter(self.findings)

    def __bool__(self) -> bool:
        return self.is_valid

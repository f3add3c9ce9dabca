"""EntityValidator — default validator owned by each entity."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices
from pydantic import ValidationError as PydanticValidationError

from .result import ValidationFinding, ValidationResult

if TYPE_CHECKING:
    from pydantic import BaseModel
    from pydantic.fields import FieldInfo

logger = logging.getLogger("domain_kit.validation")

ValidationRule = Callable[[Any], Iterable[ValidationFinding | tuple[str, str]]]
"""A rule receives the entity and yields findings or ``(key, message)`` pairs."""


class EntityValidator:
    """Stores findings for one entity and evaluates its rules.

    Two sources feed the findings:

    * findings recorded by hand through :meth:`add_result`, which are kept
      until :meth:`clear` is called;
    * findings produced by :meth:`validate`, which re-validates the
      entity's current field values through its pydantic model and then
      runs every registered rule. Each call replaces the findings of the
      previous call.

    Rules default to the ``validation_rules`` declared on the entity class.

    Usage::

        def adult(person):
            if person.age < 18:
                yield "age", "must be an adult"

        class Person(Entity[int]):
            validation_rules = (adult,)
            age: int

        person = Person(id=1, age=12)
        person.validate()
        person.error_for("age")  # "must be an adult"
    """

    def __init__(
        self,
        owner: BaseModel,
        rules: Iterable[ValidationRule] | None = None,
    ) -> None:
        self._owner = owner
        if rules is None:
            rules = getattr(type(owner), "validation_rules", ())
        self._rules: list[ValidationRule] = list(rules)
        self._recorded = ValidationResult.success()
        self._evaluated = ValidationResult.success()

    @property
    def results(self) -> ValidationResult:
        """Snapshot of all findings; recorded findings come first."""
        return self._recorded.merge(self._evaluated)

    def add_rule(self, rule: ValidationRule) -> None:
        """Append a rule evaluated by subsequent :meth:`validate` calls."""
        self._rules.append(rule)

    def add_result(self, message: str, key: str) -> None:
        self._recorded.add_error(key, message)

    def validate(self) -> None:
        evaluated = self._validate_model()
        for rule in self._rules:
            for item in rule(self._owner):
                if isinstance(item, ValidationFinding):
                    evaluated.findings.append(item)
                else:
                    key, message = item
                    evaluated.add_error(key, message)
        self._evaluated = evaluated
        logger.debug(
            "Validated %s: %d rule(s), %d finding(s)",
            type(self._owner).__name__,
            len(self._rules),
            len(evaluated),
        )

    def _validate_model(self) -> ValidationResult:
        model = type(self._owner)
        try:
            model.model_validate(_validation_input(self._owner))
            return ValidationResult.success()
        except PydanticValidationError as exc:
            result = ValidationResult.success()
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
                result.add_error(loc, error.get("msg", "validation error"))
            return result

    def is_valid(self) -> bool:
        return self._recorded.is_valid and self._evaluated.is_valid

    def error_summary(self) -> str:
        return "\n".join(str(finding) for finding in self.results)

    def error_for(self, key: str) -> str:
        return "; ".join(finding.message for finding in self.results.for_key(key))

    def clear(self) -> None:
        """Drop every finding, recorded and evaluated."""
        self._recorded.clear()
        self._evaluated.clear()


def _validation_input(owner: BaseModel) -> dict[str, Any]:
    """Current field values, keyed the way ``model_validate`` reads them."""
    dumped = owner.model_dump(by_alias=True, round_trip=True)
    data: dict[str, Any] = {}
    for name, info in type(owner).model_fields.items():
        dump_key = info.serialization_alias or info.alias or name
        if dump_key in dumped:
            value = dumped[dump_key]
        elif name in owner.__dict__:
            # exclude=True keeps the field out of the dump
            value = owner.__dict__[name]
        else:
            continue
        data[_input_key(name, info)] = value
    return data


def _input_key(name: str, info: FieldInfo) -> str:
    alias = info.validation_alias
    if isinstance(alias, AliasChoices):
        alias = alias.choices[0]
    if isinstance(alias, str):
        return alias
    return info.alias or name

"""Entity base class with Generic ID support and delegated validation."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, PrivateAttr

from ..validation.entity import EntityValidator

if TYPE_CHECKING:
    from ..ports.validation import IEntityValidator
    from ..validation.entity import ValidationRule
    from ..validation.result import ValidationResult

ID = TypeVar("ID", str, int, UUID)


class Entity(BaseModel, Generic[ID]):
    """Base class for identity-bearing domain objects.

    Generic over ``ID`` to support UUID, int, or str identities. ``id`` is a
    plain attribute: it may be left unset (``None``) and assigned later.
    Every instance owns exactly one validator, built by ``validator_factory``
    when the instance is created or copied; all validation operations are
    forwarded to it and anything it raises reaches the caller unchanged.

    Usage::

        class Customer(Entity[UUID]):
            name: str

        customer = Customer(id=uuid4(), name="Ada")
        customer.add_validation_result("is blacklisted", "name")
        customer.is_valid()          # False
        customer.error_for("name")   # "is blacklisted"
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    validator_factory: ClassVar[Callable[[Any], IEntityValidator]] = EntityValidator
    validation_rules: ClassVar[tuple[ValidationRule, ...]] = ()

    id: ID | None = None
    _validator: IEntityValidator = PrivateAttr()

    def model_post_init(self, context: Any) -> None:
        # Runs for __init__, model_validate and model_construct alike.
        self._validator = type(self).validator_factory(self)

    def __copy__(self) -> Entity[ID]:
        return super().__copy__()._with_own_validator()

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> Entity[ID]:
        memo = {} if memo is None else memo
        # The validator points back at this entity; the copy builds its own.
        key = id(self._validator)
        memo[key] = None
        try:
            copied = super().__deepcopy__(memo)
        finally:
            del memo[key]
        return copied._with_own_validator()

    def _with_own_validator(self) -> Entity[ID]:
        self._validator = type(self).validator_factory(self)
        return self

    @property
    def validator(self) -> IEntityValidator:
        return self._validator

    # ── Validation delegation ────────────────────────────────────

    @property
    def validation_results(self) -> ValidationResult:
        return self._validator.results

    def add_validation_result(self, message: str, key: str) -> None:
        self._validator.add_result(message, key)

    def validate(self) -> None:
        self._validator.validate()

    def is_valid(self) -> bool:
        return self._validator.is_valid()

    @property
    def error(self) -> str:
        """Aggregate error text supplied by the validator."""
        return self._validator.error_summary()

    def error_for(self, column_name: str) -> str:
        """Error text for one field, as formatted by the validator."""
        return self._validator.error_for(column_name)

    def __getitem__(self, column_name: str) -> str:
        return self.error_for(column_name)

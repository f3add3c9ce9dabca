from __future__ import annotations

import copy
from uuid import UUID, uuid4

import pytest

from domain_kit_core.domain.entity import Entity
from domain_kit_core.ports.validation import IEntityValidator
from domain_kit_core.validation import EntityValidator, ValidationResult

# --- Test Models ---


class Customer(Entity[UUID]):
    name: str


class Ticket(Entity[int]):
    title: str


class ExplodingValidator:
    """Validator whose operations all fail."""

    def __init__(self, owner: object) -> None:
        self.owner = owner

    @property
    def results(self) -> ValidationResult:
        raise LookupError("results unavailable")

    def add_result(self, message: str, key: str) -> None:
        raise LookupError("add_result unavailable")

    def validate(self) -> None:
        raise LookupError("validate unavailable")

    def is_valid(self) -> bool:
        raise LookupError("is_valid unavailable")

    def error_summary(self) -> str:
        raise LookupError("error_summary unavailable")

    def error_for(self, key: str) -> str:
        raise LookupError("error_for unavailable")


class FragileTicket(Entity[int]):
    validator_factory = ExplodingValidator

    title: str


# --- Identity ---


def test_entity_id_accessors() -> None:
    ticket = Ticket(id=1, title="Broken build")
    assert ticket.id == 1

    ticket.id = 2
    assert ticket.id == 2


def test_entity_id_is_optional() -> None:
    ticket = Ticket(title="No id yet")
    assert ticket.id is None

    ticket.id = 7
    assert ticket.id == 7
    assert ticket.is_valid()


def test_entity_id_default_can_be_overridden() -> None:
    class Draft(Entity[int]):
        id: int = 0

    assert Draft().id == 0


# --- Validator ownership ---


def test_each_entity_owns_a_validator() -> None:
    a = Customer(id=uuid4(), name="Ada")
    b = Customer(id=uuid4(), name="Grace")

    assert isinstance(a.validator, EntityValidator)
    assert isinstance(a.validator, IEntityValidator)
    assert a.validator is not b.validator


def test_validator_survives_model_validate() -> None:
    customer = Customer.model_validate({"id": uuid4(), "name": "Ada"})

    assert customer.validator is not None
    assert customer.is_valid()


@pytest.mark.parametrize(
    "duplicate",
    [
        copy.copy,
        copy.deepcopy,
        lambda entity: entity.model_copy(),
        lambda entity: entity.model_copy(deep=True),
    ],
)
def test_copies_get_their_own_validator(duplicate) -> None:
    original = Ticket(id=1, title="Broken build")
    original.add_validation_result("is a duplicate", "title")

    copied = duplicate(original)

    assert copied.validator is not original.validator
    assert copied.is_valid()
    assert copied.title == "Broken build"

    copied.add_validation_result("bad", "title")
    copied.title = "Renamed"
    assert original.error_for("title") == "is a duplicate"
    assert original.title == "Broken build"


@pytest.mark.parametrize("duplicate", [copy.copy, copy.deepcopy])
def test_copied_validator_checks_the_copy(duplicate) -> None:
    def named(ticket: Ticket):
        if not ticket.title.strip():
            yield "title", "must not be blank"

    class NamedTicket(Ticket):
        validation_rules = (named,)

    original = NamedTicket(id=1, title="Fine")
    copied = duplicate(original)
    copied.title = " "

    copied.validate()
    original.validate()

    assert copied.error_for("title") == "must not be blank"
    assert original.is_valid()


def test_deepcopy_inside_a_container() -> None:
    tickets = [Ticket(id=1, title="a"), Ticket(id=2, title="b")]

    copied = copy.deepcopy(tickets)

    assert [t.title for t in copied] == ["a", "b"]
    assert all(c.validator is not t.validator for c, t in zip(copied, tickets))


# --- Delegation ---


def test_entity_is_valid_after_construction() -> None:
    customer = Customer(id=uuid4(), name="Ada")

    assert customer.is_valid()
    assert len(customer.validation_results) == 0
    assert customer.error == ""


def test_add_validation_result_records_one_finding() -> None:
    customer = Customer(id=uuid4(), name="Ada")
    before = len(customer.validation_results)

    customer.add_validation_result("msg", "field")

    results = customer.validation_results
    assert len(results) == before + 1
    finding = list(results)[-1]
    assert finding.key == "field"
    assert finding.message == "msg"
    assert not customer.is_valid()


def test_error_lookup_by_field() -> None:
    customer = Customer(id=uuid4(), name="Ada")
    customer.add_validation_result("is suspended", "name")

    assert customer.error_for("name") == "is suspended"
    assert customer["name"] == "is suspended"
    assert customer.error_for("email") == ""
    assert customer.error == "name: is suspended"


def test_entity_validate_delegates() -> None:
    def named(ticket: Ticket):
        if not ticket.title.strip():
            yield "title", "must not be blank"

    class NamedTicket(Ticket):
        validation_rules = (named,)

    ticket = NamedTicket(id=1, title="  ")
    assert ticket.validate() is None
    assert ticket.error_for("title") == "must not be blank"

    ticket.title = "Fixed"
    ticket.validate()
    assert ticket.is_valid()


def test_validate_reports_field_constraints() -> None:
    ticket = Ticket.model_construct(id=1, title=None)

    ticket.validate()

    assert not ticket.is_valid()
    assert ticket.error_for("title") != ""


@pytest.mark.parametrize(
    "call",
    [
        lambda t: t.validation_results,
        lambda t: t.add_validation_result("m", "k"),
        lambda t: t.validate(),
        lambda t: t.is_valid(),
        lambda t: t.error,
        lambda t: t.error_for("title"),
    ],
)
def test_validator_errors_propagate_unchanged(call) -> None:
    ticket = FragileTicket(id=1, title="x")

    with pytest.raises(LookupError):
        call(ticket)

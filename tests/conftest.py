"""Shared pytest configuration, fixtures, and rules for validation testing."""

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from scoped_validation.validation import Validation


@dataclass
class Address:
    """Minimal nested sub-object."""

    street: Optional[str]
    zip_code: Optional[str]


@dataclass
class PhoneNumber:
    """Collection member."""

    number: Optional[str]


@dataclass
class Person:
    """Root object with a nested object and a collection."""

    name: Optional[str]
    age: Optional[int]
    address: Optional[Address] = None
    phones: List[PhoneNumber] = field(default_factory=list)


def address_rules(address: Address, v: Validation) -> None:
    """Rules for an Address scope."""
    v.not_blank(address.street, "street").presence(address.zip_code, "zip_code")


def phone_rules(phone: PhoneNumber, v: Validation) -> None:
    """Rules for one PhoneNumber scope."""
    v.not_blank(phone.number, "number")


def person_rules(person: Person, v: Validation) -> None:
    """Rules for a Person, descending into address and phones."""
    v.not_blank(person.name, "name").presence(person.age, "age")
    if person.age is not None:
        v.greater_than_or_equal_to(person.age, 18, "age")
    v.presence(person.address, "address")
    if person.address is not None:
        v.is_valid(person.address, "address", address_rules)
    v.each(person.phones, "phones", phone_rules)


@pytest.fixture
def valid_person() -> Person:
    """A person passing every rule."""
    return Person(
        name="Ada",
        age=36,
        address=Address(street="12 Analytical St", zip_code="10001"),
        phones=[PhoneNumber("555-0100")],
    )


@pytest.fixture
def invalid_person() -> Person:
    """A person failing one rule at each level of the tree."""
    return Person(
        name="  ",
        age=36,
        address=Address(street=None, zip_code="10001"),
        phones=[PhoneNumber("555-0100"), PhoneNumber("")],
    )

# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the schema catalog."""

import pytest

from hydralink.catalog import SchemaCatalog
from hydralink.errors import UnknownTypeError
from hydralink.model import PropertyDefinition, TypeDescriptor

# ###############
# Test Helpers
# ###############


class Person:
    pass


class Employee(Person):
    pass


class Address:
    pass


def _catalog() -> SchemaCatalog:
    """Create a catalog documenting Person and Address."""
    types = [
        TypeDescriptor(name="Person", properties=(PropertyDefinition(name="name"), PropertyDefinition(name="age"))),
        TypeDescriptor(name="Address"),
    ]
    return SchemaCatalog(types, {Person: "Person"})


# ###############
# Lookups
# ###############


def test_type_name_of_bound_class() -> None:
    """A bound class resolves to its semantic type name."""
    assert _catalog().type_name_for(Person) == "Person"


def test_subclass_resolves_to_documented_ancestor() -> None:
    """Subclasses inherit the type of their nearest documented ancestor."""
    assert _catalog().type_name_for(Employee) == "Person"


def test_subclass_binding_takes_precedence() -> None:
    """A binding on the subclass itself wins over the ancestor's."""
    catalog = _catalog()
    catalog.bind(Employee, "Address")
    assert catalog.type_name_for(Employee) == "Address"
    assert catalog.type_name_for(Person) == "Person"


def test_is_documented() -> None:
    """Only bound classes and their subclasses are documented."""
    catalog = _catalog()
    assert catalog.is_documented(Employee)
    assert not catalog.is_documented(Address)
    assert not catalog.is_documented(str)


def test_unbound_class_raises() -> None:
    """Looking up an undocumented class raises UnknownTypeError."""
    with pytest.raises(UnknownTypeError, match="Address"):
        _catalog().type_name_for(Address)


def test_properties_in_declaration_order() -> None:
    """Properties are returned in the order they were declared."""
    assert [p.name for p in _catalog().properties_of("Person")] == ["name", "age"]


def test_properties_of_unknown_type() -> None:
    """Asking for the properties of an undeclared type raises."""
    with pytest.raises(UnknownTypeError):
        _catalog().properties_of("Robot")


def test_types_listed_in_order() -> None:
    """The catalog keeps type declaration order."""
    assert [t.name for t in _catalog().types] == ["Person", "Address"]


# ###############
# Error Cases
# ###############


def test_bind_to_unknown_type() -> None:
    """Binding a class to an undeclared type name raises UnknownTypeError."""
    with pytest.raises(UnknownTypeError, match="Robot"):
        _catalog().bind(Address, "Robot")


def test_duplicate_type_names() -> None:
    """Two descriptors with the same name are rejected."""
    with pytest.raises(ValueError, match="Duplicate"):
        SchemaCatalog([TypeDescriptor(name="Person"), TypeDescriptor(name="Person")])

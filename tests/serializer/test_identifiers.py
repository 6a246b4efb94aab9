# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for reference documents built by the identifier resolver."""

from __future__ import annotations

import pytest

from hydralink.errors import MissingIdentityError
from hydralink.model.routes import RouteDefinition
from hydralink.model.schema import FieldAccess, LinkSpec, PropertyDefinition, TypeDescriptor
from hydralink.routing.router import Router
from hydralink.serializer.identifiers import IdentifierResolver

# ###############
# Helpers
# ###############

USER = TypeDescriptor(
    name="User",
    properties=(
        PropertyDefinition(name="@id", readonly=True, link=LinkSpec(route="user_get", variables=("id",))),
        PropertyDefinition(name="login"),
    ),
)


class User:
    def __init__(self, id=None):
        self.id = id

    def get_id(self):
        return self.id


def _resolver(**kwargs) -> IdentifierResolver:
    return IdentifierResolver(Router([RouteDefinition(name="user_get", path="/users/{id}")]), **kwargs)


# ###############
# Tests
# ###############


class TestReference:
    def test_reference_document(self) -> None:
        assert _resolver().reference(User(3), USER) == {"@id": "/users/3", "@type": "vocab:User"}

    def test_reference_keys(self) -> None:
        assert list(_resolver().reference(User(3), USER)) == ["@id", "@type"]

    def test_type_without_identifier(self) -> None:
        descriptor = TypeDescriptor(name="Note", properties=(PropertyDefinition(name="text"),))
        assert _resolver().reference(User(3), descriptor) == {}

    def test_identifier_without_link(self) -> None:
        descriptor = TypeDescriptor(name="Note", properties=(PropertyDefinition(name="@id"),))
        assert _resolver().reference(User(3), descriptor) == {}

    def test_object_without_identity(self) -> None:
        with pytest.raises(MissingIdentityError):
            _resolver().reference(object(), USER)

    def test_field_identity(self) -> None:
        resolver = _resolver(identity=FieldAccess(name="id"))

        class Row:
            id = 11

        assert resolver.reference(Row(), USER)["@id"] == "/users/11"


class TestIdentity:
    def test_exposes_identity(self) -> None:
        resolver = _resolver()
        assert resolver.exposes_identity(User())
        assert not resolver.exposes_identity(42)

    def test_identity_of(self) -> None:
        assert _resolver().identity_of(User(5)) == 5

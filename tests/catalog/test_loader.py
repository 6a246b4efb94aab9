# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for loading YAML schema files."""

from decimal import Decimal
from pathlib import Path

import pytest

from hydralink.catalog import (
    SchemaDocument,
    SchemaError,
    build_catalog,
    build_router,
    load_schema,
    merge_schemas,
    parse_schema,
)
from hydralink.model import FieldAccess, LinkShape, MethodCall
from hydralink.routing import CONTEXT_ROUTE, VOCAB_ROUTE

# ###############
# Test Helpers
# ###############

SCHEMA = """\
routes:
  person_get:
    path: /people/{id}
  person_page:
    path: /people/{id}/pages/{page}
    defaults:
      page: 1
types:
  Person:
    properties:
      "@id":
        link: person_get
        readonly: true
      name:
        setter: name
      age:
        getter: get_age()
        setter: set_age()
        iri: http://schema.org/age
      city:
        element: address.city
      pages:
        link:
          route: person_page
          shape: collection-link
      best_friend:
        link:
          route: person_page
          variables: [id]
          defaults: {}
          bindings:
            id: best_friend_id
"""


def _write_schema(tmp_path: Path, content: str, name: str = "schema.yaml") -> Path:
    """Write a schema file and return its path."""
    schema_file = tmp_path / name
    schema_file.write_text(content, encoding="utf-8")
    return schema_file


def _person():
    return parse_schema(SCHEMA).types[0]


# ###############
# Normal Cases
# ###############


def test_routes_are_compiled() -> None:
    """Routes keep their path, defaults and placeholder variables."""
    document = parse_schema(SCHEMA)
    page = document.route("person_page")
    assert page is not None
    assert page.variables == ("id", "page")
    assert page.defaults == {"page": 1}
    assert document.route("missing") is None


def test_property_order_is_preserved() -> None:
    """Properties keep the order of the YAML file."""
    assert [p.name for p in _person().properties] == ["@id", "name", "age", "city", "pages", "best_friend"]


def test_accessor_shorthand() -> None:
    """``name`` is a field and ``name()`` a method call."""
    age = _person().get_property("age")
    assert age.getter == MethodCall(name="get_age")
    assert age.setter == MethodCall(name="set_age")
    assert _person().get_property("name").setter == FieldAccess(name="name")


def test_default_getters() -> None:
    """Plain properties read the field of the same name; ``@id`` calls get_id()."""
    person = _person()
    assert person.get_property("name").getter == FieldAccess(name="name")
    assert person.get_property("@id").getter == MethodCall(name="get_id")


def test_iri_and_element() -> None:
    """Explicit IRIs and decode paths are kept."""
    person = _person()
    assert person.property_iri(person.get_property("age")) == "http://schema.org/age"
    assert person.property_iri(person.get_property("name")) == "Person/name"
    assert person.get_property("city").path == "address.city"


def test_link_shorthand_inherits_route_variables() -> None:
    """A link given as a route name uses the route's variables and defaults."""
    link = _person().get_property("@id").link
    assert link.route == "person_get"
    assert link.variables == ("id",)
    assert link.shape is LinkShape.SCALAR


def test_collection_link() -> None:
    """Link mappings accept a shape and inherit defaults from the route."""
    link = _person().get_property("pages").link
    assert link.shape is LinkShape.COLLECTION
    assert link.variables == ("id", "page")
    assert link.defaults == {"page": 1}


def test_link_overrides_and_bindings() -> None:
    """Explicit variables, defaults and bindings replace the route's."""
    link = _person().get_property("best_friend").link
    assert link.variables == ("id",)
    assert link.defaults == {}
    assert link.bindings == {"id": FieldAccess(name="best_friend_id")}


def test_empty_file() -> None:
    """An empty schema has neither routes nor types."""
    document = parse_schema("")
    assert document.routes == []
    assert document.types == []


def test_property_without_options() -> None:
    """A property may be declared with an empty value."""
    document = parse_schema("types:\n  Tag:\n    properties:\n      label:\n")
    assert document.types[0].get_property("label").getter == FieldAccess(name="label")


def test_load_schema_from_file(tmp_path: Path) -> None:
    """load_schema reads a YAML file from disk."""
    document = load_schema(_write_schema(tmp_path, SCHEMA))
    assert [t.name for t in document.types] == ["Person"]


# ###############
# Merging and building
# ###############


def test_merge_keeps_order() -> None:
    """Merged documents keep routes and types in file order."""
    first = parse_schema("types:\n  A: {}\n")
    second = parse_schema("routes:\n  r:\n    path: /r\ntypes:\n  B: {}\n")
    merged = merge_schemas([first, second])
    assert [t.name for t in merged.types] == ["A", "B"]
    assert [r.name for r in merged.routes] == ["r"]


@pytest.mark.parametrize(
    "second",
    ["types:\n  A: {}\n", "routes:\n  r:\n    path: /other\n"],
)
def test_merge_rejects_duplicates(second: str) -> None:
    """Types and routes may only be declared once across files."""
    first = parse_schema("routes:\n  r:\n    path: /r\ntypes:\n  A: {}\n")
    with pytest.raises(SchemaError, match="more than once"):
        merge_schemas([first, parse_schema(second)])


def test_build_catalog_imports_classes() -> None:
    """``class`` entries are imported and bound."""
    document = parse_schema("types:\n  Amount:\n    class: decimal:Decimal\n")
    catalog = build_catalog(document)
    assert catalog.type_name_for(Decimal) == "Amount"


def test_build_catalog_accepts_dotted_class_path() -> None:
    """``module.Class`` is accepted as well as ``module:Class``."""
    catalog = build_catalog(parse_schema("types:\n  Amount:\n    class: decimal.Decimal\n"))
    assert catalog.is_documented(Decimal)


def test_build_catalog_without_import() -> None:
    """With import_classes=False, class entries are left unbound."""
    document = parse_schema("types:\n  Broken:\n    class: no_such_module:Nothing\n")
    catalog = build_catalog(document, import_classes=False)
    assert [t.name for t in catalog.types] == ["Broken"]


@pytest.mark.parametrize(
    "class_path",
    ["no_such_module_xyz:Thing", "decimal:NoSuchClass", "decimal:getcontext", "Decimal"],
)
def test_build_catalog_bad_class(class_path: str) -> None:
    """Unimportable or non-class entries raise SchemaError."""
    document = parse_schema(f"types:\n  Amount:\n    class: '{class_path}'\n")
    with pytest.raises(SchemaError):
        build_catalog(document)


def test_build_router_adds_default_routes() -> None:
    """The context and vocabulary routes are added when not declared."""
    router = build_router(SchemaDocument(), base_url="https://api.example.com")
    assert router.generate(CONTEXT_ROUTE, {"type": "Person"}) == "/contexts/Person"
    assert router.generate(VOCAB_ROUTE, absolute=True) == "https://api.example.com/vocab"


def test_build_router_keeps_declared_context_route() -> None:
    """A schema may override the context route."""
    router = build_router(parse_schema("routes:\n  hydra_context:\n    path: /ld/{type}.jsonld\n"))
    assert router.generate(CONTEXT_ROUTE, {"type": "Person"}) == "/ld/Person.jsonld"


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """A missing schema file raises SchemaError."""
    with pytest.raises(SchemaError, match="Cannot read"):
        load_schema(tmp_path / "missing.yaml")


def test_invalid_yaml() -> None:
    """Malformed YAML raises SchemaError."""
    with pytest.raises(SchemaError, match="Invalid YAML"):
        parse_schema("types: [unclosed")


def test_non_mapping_document() -> None:
    """The top level must be a mapping."""
    with pytest.raises(SchemaError, match="mapping"):
        parse_schema("- a\n- b\n")


@pytest.mark.parametrize(
    "content",
    [
        "unknown: 1\n",
        "types:\n  A:\n    properties:\n      x:\n        colour: red\n",
        "routes:\n  r: {}\n",
        "types:\n  A:\n    properties:\n      x:\n        link:\n          route: r\n          shape: triangle\n",
    ],
)
def test_invalid_structure(content: str) -> None:
    """Unknown keys, missing paths and unknown shapes are rejected."""
    with pytest.raises(SchemaError, match="Invalid schema"):
        parse_schema(content)

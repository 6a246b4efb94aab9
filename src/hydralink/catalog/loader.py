# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML schema files: loading, merging, and building catalogs and routers.

A schema file declares routes and documented types::

    routes:
      person_get:
        path: /people/{id}
    types:
      Person:
        class: myapp.models:Person
        properties:
          "@id":
            link: person_get
            readonly: true
          name:
            getter: name
            setter: name
          friends:
            getter: get_friends()
            link:
              route: person_friends
              shape: collection-link

Accessors use a shorthand: ``name`` reads or writes an attribute,
``get_name()`` calls a method.
"""

from __future__ import annotations

import importlib
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hydralink.catalog.catalog import SchemaCatalog
from hydralink.model.routes import RouteDefinition
from hydralink.model.schema import (
    ID_PROPERTY,
    LinkShape,
    LinkSpec,
    MethodCall,
    PropertyDefinition,
    TypeDescriptor,
    parse_accessor,
)
from hydralink.routing.router import CONTEXT_ROUTE, VOCAB_ROUTE, Router

# ###############
# Public Interface
# ###############

DEFAULT_CONTEXT_PATH = "/contexts/{type}"
DEFAULT_VOCAB_PATH = "/vocab"


class SchemaError(Exception):
    """Raised when a schema file cannot be read, is invalid, or names an unknown class."""


@dataclass
class SchemaDocument:
    """The compiled contents of one or more schema files.

    Attributes:
        routes: Route definitions in declaration order.
        types: Type descriptors in declaration order.
    """

    routes: list[RouteDefinition] = field(default_factory=list)
    types: list[TypeDescriptor] = field(default_factory=list)

    def route(self, name: str) -> RouteDefinition | None:
        for route in self.routes:
            if route.name == name:
                return route
        return None


def load_schema(path: Path) -> SchemaDocument:
    """Load and compile a YAML schema file.

    Raises:
        SchemaError: If the file cannot be read, is not valid YAML, or does
            not match the schema file structure.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"Cannot read schema file '{path}': {exc}") from exc
    return parse_schema(text, source_label=str(path))


def parse_schema(text: str, source_label: str = "<string>") -> SchemaDocument:
    """Compile schema YAML *text* into a :class:`SchemaDocument`."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SchemaError(f"{source_label}: schema must be a YAML mapping")

    try:
        raw = _RawSchema.model_validate(data)
    except ValidationError as exc:
        raise SchemaError(f"Invalid schema '{source_label}': {exc}") from exc

    routes = [RouteDefinition(name=name, path=r.path, defaults=r.defaults) for name, r in raw.routes.items()]
    route_table = {route.name: route for route in routes}
    types = [_compile_type(name, raw_type, route_table) for name, raw_type in raw.types.items()]
    return SchemaDocument(routes=routes, types=types)


def merge_schemas(documents: Iterable[SchemaDocument]) -> SchemaDocument:
    """Concatenate schema documents, rejecting duplicate route or type names."""
    merged = SchemaDocument()
    for document in documents:
        for route in document.routes:
            if merged.route(route.name) is not None:
                raise SchemaError(f"Route '{route.name}' is declared more than once")
            merged.routes.append(route)
        for descriptor in document.types:
            if any(t.name == descriptor.name for t in merged.types):
                raise SchemaError(f"Type '{descriptor.name}' is declared more than once")
            merged.types.append(descriptor)
    return merged


def build_catalog(document: SchemaDocument, *, import_classes: bool = True) -> SchemaCatalog:
    """Build a :class:`SchemaCatalog` from *document*.

    Args:
        document: The compiled schema.
        import_classes: When true, every ``class`` entry is imported and bound
            to its type. Types without a ``class`` entry can be bound later
            with :meth:`SchemaCatalog.bind`.

    Raises:
        SchemaError: If a ``class`` entry cannot be imported.
    """
    catalog = SchemaCatalog(document.types)
    if import_classes:
        for descriptor in document.types:
            if descriptor.class_path is not None:
                catalog.bind(_import_class(descriptor.class_path), descriptor.name)
    return catalog


def build_router(document: SchemaDocument, *, base_url: str = "") -> Router:
    """Build a :class:`Router` from *document*.

    The ``hydra_context`` and ``hydra_vocab`` routes are added with their
    default paths unless the schema declares them.
    """
    router = Router(document.routes, base_url=base_url)
    if not router.has_route(CONTEXT_ROUTE):
        router.add(RouteDefinition(name=CONTEXT_ROUTE, path=DEFAULT_CONTEXT_PATH))
    if not router.has_route(VOCAB_ROUTE):
        router.add(RouteDefinition(name=VOCAB_ROUTE, path=DEFAULT_VOCAB_PATH))
    return router


# ################
# Implementation
# ################

# The identity getter used for ``@id`` properties that declare no getter.
_DEFAULT_ID_GETTER = MethodCall(name="get_id")


class _RawRoute(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str
    defaults: dict[str, Any] = Field(default_factory=dict)


class _RawLink(BaseModel):
    model_config = ConfigDict(extra="forbid")

    route: str
    variables: list[str] | None = None
    defaults: dict[str, Any] | None = None
    bindings: dict[str, str] | None = None
    shape: LinkShape = LinkShape.SCALAR


class _RawProperty(BaseModel):
    model_config = ConfigDict(extra="forbid")

    iri: str | None = None
    element: str | None = None
    readonly: bool = False
    writeonly: bool = False
    getter: str | None = None
    setter: str | None = None
    link: str | _RawLink | None = None


class _RawType(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    class_path: str | None = Field(default=None, alias="class")
    properties: dict[str, _RawProperty | None] = Field(default_factory=dict)


class _RawSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    routes: dict[str, _RawRoute] = Field(default_factory=dict)
    types: dict[str, _RawType] = Field(default_factory=dict)


def _compile_type(name: str, raw: _RawType, routes: dict[str, RouteDefinition]) -> TypeDescriptor:
    properties = tuple(
        _compile_property(prop_name, raw_prop or _RawProperty(), routes) for prop_name, raw_prop in raw.properties.items()
    )
    return TypeDescriptor(name=name, properties=properties, class_path=raw.class_path)


def _compile_property(name: str, raw: _RawProperty, routes: dict[str, RouteDefinition]) -> PropertyDefinition:
    if raw.getter is not None:
        getter = parse_accessor(raw.getter)
    elif name == ID_PROPERTY:
        getter = _DEFAULT_ID_GETTER
    elif name.startswith("@"):
        getter = None
    else:
        getter = parse_accessor(name)

    return PropertyDefinition(
        name=name,
        iri=raw.iri,
        element=raw.element,
        readonly=raw.readonly,
        writeonly=raw.writeonly,
        getter=getter,
        setter=parse_accessor(raw.setter) if raw.setter is not None else None,
        link=_compile_link(raw.link, routes) if raw.link is not None else None,
    )


def _compile_link(raw: str | _RawLink, routes: dict[str, RouteDefinition]) -> LinkSpec:
    if isinstance(raw, str):
        raw = _RawLink(route=raw)

    # Variables and defaults fall back to the route table. Unknown routes are
    # reported by check_schema, not here.
    route = routes.get(raw.route)
    variables = raw.variables if raw.variables is not None else (list(route.variables) if route else [])
    defaults = raw.defaults if raw.defaults is not None else (dict(route.defaults) if route else {})
    bindings = (
        {var: parse_accessor(accessor) for var, accessor in raw.bindings.items()} if raw.bindings is not None else None
    )
    return LinkSpec(
        route=raw.route,
        variables=tuple(variables),
        defaults=defaults,
        bindings=bindings,
        shape=raw.shape,
    )


def _import_class(class_path: str) -> type:
    """Import ``module:Qualname`` (or ``module.Qualname``) and return the class."""
    if ":" in class_path:
        module_name, _, qualname = class_path.partition(":")
    else:
        module_name, _, qualname = class_path.rpartition(".")
    if not module_name or not qualname:
        raise SchemaError(f"Invalid class path '{class_path}'; expected 'module:Class'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise SchemaError(f"Cannot import module '{module_name}' for class '{class_path}': {exc}") from exc

    for attr in qualname.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            raise SchemaError(f"Module '{module_name}' has no class '{qualname}'") from None

    if not isinstance(obj, type):
        raise SchemaError(f"'{class_path}' is not a class")
    return obj

# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Encoding of documented objects into JSON-LD documents."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from hydralink.catalog.catalog import SchemaCatalog
from hydralink.errors import CyclicGraphError, InvalidInputError, PropertyPathError
from hydralink.model.document import CONTEXT_KEY, HYDRA_COLLECTION, ID_KEY, TYPE_KEY, Document
from hydralink.model.schema import ID_PROPERTY, LinkShape, PropertyDefinition, TypeDescriptor
from hydralink.routing.router import CONTEXT_ROUTE, Router
from hydralink.serializer.identifiers import IdentifierResolver
from hydralink.serializer.links import build_link, link_parameters
from hydralink.serializer.values import ValueEncoder


# ###############
# Public Interface
# ###############


class DocumentEncoder:
    """Walks a type's property definitions and assembles its document.

    Args:
        catalog: Source of type names and property definitions.
        router: Expands the context route and link properties.
        resolver: Builds reference representations.
        values: Encodes plain property values.
        context_route: Name of the route serving a type's JSON-LD context;
            it receives the semantic type name as its ``type`` variable.
    """

    def __init__(
        self,
        catalog: SchemaCatalog,
        router: Router,
        resolver: IdentifierResolver,
        values: ValueEncoder,
        *,
        context_route: str = CONTEXT_ROUTE,
    ) -> None:
        self._catalog = catalog
        self._router = router
        self._resolver = resolver
        self._values = values
        self._context_route = context_route

    def encode(self, obj: object, embed: bool = True, include: Iterable[str] = ()) -> Document:
        """Encode *obj*.

        Args:
            obj: A documented object.
            embed: Produce the full document; when false, only the reference
                (``@id`` and ``@type``) is produced.
            include: Dotted property paths whose related objects are embedded
                instead of referenced, e.g. ``"friends"`` or
                ``"friends.address"``.

        Raises:
            InvalidInputError: If *obj* is not a domain object.
            UnknownTypeError: If the type of *obj* is not documented.
            RouteResolutionError: If a link cannot be built.
            CyclicGraphError: If *include* leads back to an object that is
                already being embedded.
        """
        if obj is None or isinstance(obj, _NON_OBJECTS):
            raise InvalidInputError(f"Only objects can be serialized, got {type(obj).__qualname__}")
        return self._encode(obj, embed, frozenset(include), frozenset())

    # ################
    # Implementation
    # ################

    def _encode(self, obj: object, embed: bool, include: frozenset[str], active: frozenset[int]) -> Document:
        descriptor = self._catalog.descriptor(self._catalog.type_name_for(type(obj)))

        if not embed:
            return self._resolver.reference(obj, descriptor)

        if id(obj) in active:
            raise CyclicGraphError(f"Cannot embed {descriptor.name} inside its own representation")
        active = active | {id(obj)}

        document: Document = {CONTEXT_KEY: self._router.generate(self._context_route, {"type": descriptor.name})}

        for prop in descriptor.properties:
            if prop.writeonly:
                continue

            if prop.link is not None:
                self._encode_link(obj, descriptor, prop, document)
                continue

            nested = _nested_paths(include, prop.name)

            def encode_related(related: object, embed_related: bool, _nested: frozenset[str] = nested) -> Document:
                return self._encode(related, embed_related, _nested, active)

            document[prop.name] = self._values.encode(_read(obj, prop), encode_related, prop.name in include)

        return document

    def _encode_link(
        self,
        obj: object,
        descriptor: TypeDescriptor,
        prop: PropertyDefinition,
        document: Document,
    ) -> None:
        link = prop.link
        assert link is not None

        value = None if link.bindings is not None else _read(obj, prop)
        parameters = link_parameters(obj, prop, value, self._resolver)
        if parameters is None:
            return

        href = build_link(self._router, link.route, link.variables, link.defaults, parameters)
        if link.shape is LinkShape.COLLECTION:
            document[prop.name] = {ID_KEY: href, TYPE_KEY: HYDRA_COLLECTION}
        else:
            document[prop.name] = href

        # The canonical location makes the document self-describing.
        if prop.name == ID_PROPERTY:
            document[TYPE_KEY] = descriptor.name


_NON_OBJECTS = (str, bytes, bytearray, int, float, complex, bool, Mapping, list, tuple, set, frozenset, type)


def _read(obj: object, prop: PropertyDefinition) -> Any:
    if prop.getter is None:
        return None
    try:
        return prop.getter.read(obj)
    except AttributeError as exc:
        raise PropertyPathError(f"Cannot read property '{prop.name}' of {type(obj).__qualname__}: {exc}") from exc


def _nested_paths(include: frozenset[str], name: str) -> frozenset[str]:
    prefix = f"{name}."
    return frozenset(path[len(prefix) :] for path in include if path.startswith(prefix))

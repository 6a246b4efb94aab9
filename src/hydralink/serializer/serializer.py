# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON-LD serializer.

Serializes documented objects to JSON-LD and deserializes JSON-LD payloads
back into them. Every collaborator is injected; :func:`hydralink.config.create_serializer`
wires a ready instance from a settings file.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from hydralink.catalog.catalog import SchemaCatalog
from hydralink.errors import UnsupportedFormatError
from hydralink.graph.parser import GraphParseError, JsonLdParser
from hydralink.model.document import Document
from hydralink.model.schema import FieldAccess, MethodCall
from hydralink.routing.router import CONTEXT_ROUTE, VOCAB_ROUTE, Router
from hydralink.serializer.accessor import PropertyAccessor
from hydralink.serializer.context import build_context
from hydralink.serializer.decoder import DocumentDecoder, Payload
from hydralink.serializer.encoder import DocumentEncoder
from hydralink.serializer.identifiers import DEFAULT_IDENTITY, IdentifierResolver
from hydralink.serializer.values import NormalizerRegistry, ValueEncoder, default_normalizers

T = TypeVar("T")

# ###############
# Public Interface
# ###############

JSONLD_FORMAT = "jsonld"


class Serializer:
    """Serializes objects to JSON-LD and back.

    Args:
        catalog: The documented types.
        router: Expands links, the context route and the vocabulary route.
        normalizers: Custom value normalizers; defaults to
            :func:`~hydralink.serializer.values.default_normalizers`.
        parser: Graph parser used on decode; defaults to a
            :class:`~hydralink.graph.parser.JsonLdParser` that resolves this
            serializer's own context links locally.
        accessor: Property accessor used on decode.
        identity: How identity values are read from objects.
        context_route: Route serving a type's context.
        vocab_route: Route serving the vocabulary.
        strict: Enable strict decoding.
    """

    def __init__(
        self,
        catalog: SchemaCatalog,
        router: Router,
        *,
        normalizers: NormalizerRegistry | None = None,
        parser: JsonLdParser | None = None,
        accessor: PropertyAccessor | None = None,
        identity: FieldAccess | MethodCall = DEFAULT_IDENTITY,
        context_route: str = CONTEXT_ROUTE,
        vocab_route: str = VOCAB_ROUTE,
        strict: bool = False,
    ) -> None:
        self._catalog = catalog
        self._router = router
        self._context_route = context_route
        self._encoder = DocumentEncoder(
            catalog,
            router,
            IdentifierResolver(router, identity),
            ValueEncoder(catalog, normalizers if normalizers is not None else default_normalizers()),
            context_route=context_route,
        )
        self._decoder = DocumentDecoder(
            catalog,
            router,
            parser if parser is not None else JsonLdParser(context_loader=self.load_context),
            accessor,
            vocab_route=vocab_route,
            strict=strict,
        )

    def serialize(self, data: object, format: str = JSONLD_FORMAT, include: Iterable[str] = ()) -> str:
        """Serialize *data* to a JSON-LD string.

        Raises:
            UnsupportedFormatError: If *format* is not ``jsonld``.
            InvalidInputError: If *data* is not a domain object.
        """
        _require_format(format, "Serialization")
        return json.dumps(self.encode(data, include=include), indent=4, ensure_ascii=False)

    def encode(self, data: object, embed: bool = True, include: Iterable[str] = ()) -> Document:
        """Encode *data* into a document without converting it to text."""
        return self._encoder.encode(data, embed=embed, include=include)

    def deserialize(self, data: Payload, type_: type[T], format: str = JSONLD_FORMAT) -> T:
        """Deserialize *data* into a new instance of *type_*.

        Raises:
            UnsupportedFormatError: If *format* is not ``jsonld``.
            UnsupportedTypeError: If *type_* requires constructor arguments.
        """
        _require_format(format, "Deserialization")
        return self._decoder.decode(data, type_)

    def deserialize_into(self, data: Payload, entity: T, format: str = JSONLD_FORMAT) -> T:
        """Deserialize *data* into the existing object *entity*."""
        _require_format(format, "Deserialization")
        return self._decoder.decode(data, entity)

    def context(self, type_name: str) -> Document:
        """Return the JSON-LD context document of the semantic type *type_name*."""
        return build_context(self._catalog.descriptor(type_name), self._decoder.vocab_base())

    def load_context(self, url: str) -> Mapping[str, Any]:
        """Resolve one of this serializer's context links without network access.

        Raises:
            GraphParseError: If *url* is not the context link of a documented type.
        """
        for descriptor in self._catalog.types:
            parameters = {"type": descriptor.name}
            if url in (
                self._router.generate(self._context_route, parameters),
                self._router.generate(self._context_route, parameters, absolute=True),
            ):
                return self.context(descriptor.name)
        raise GraphParseError(f"Cannot load remote context '{url}'")


# ################
# Implementation
# ################


def _require_format(format: str, operation: str) -> None:
    if format != JSONLD_FORMAT:
        raise UnsupportedFormatError(f"{operation} for the format {format!r} is not supported")

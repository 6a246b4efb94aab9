# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Decoding of JSON-LD payloads into documented objects.

Only plain properties are written back. Link properties are not parsed back
into route variables; permissive mode skips them, strict mode rejects
payloads that carry them.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from hydralink.catalog.catalog import SchemaCatalog
from hydralink.errors import (
    AmbiguousNodeError,
    LinkDecodingError,
    MissingSetterError,
    UndocumentedTypeError,
    UnsupportedTypeError,
)
from hydralink.graph.parser import JsonLdParser
from hydralink.routing.router import VOCAB_ROUTE, Router
from hydralink.serializer.accessor import PropertyAccessor

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ###############
# Public Interface
# ###############

Payload = str | bytes | Mapping[str, Any] | list[Any]


class DocumentDecoder:
    """Populates objects from the single node of their type in a payload.

    Args:
        catalog: Source of type names and property definitions.
        router: Expands the vocabulary route into the vocabulary base IRI.
        parser: Indexes payloads into graphs.
        accessor: Writes property values along their property paths.
        vocab_route: Name of the route serving the vocabulary.
        strict: Raise on writable properties without a setter and on link
            properties present in the payload instead of skipping them.
    """

    def __init__(
        self,
        catalog: SchemaCatalog,
        router: Router,
        parser: JsonLdParser,
        accessor: PropertyAccessor | None = None,
        *,
        vocab_route: str = VOCAB_ROUTE,
        strict: bool = False,
    ) -> None:
        self._catalog = catalog
        self._router = router
        self._parser = parser
        self._accessor = accessor or PropertyAccessor()
        self._vocab_route = vocab_route
        self._strict = strict

    def vocab_base(self) -> str:
        """Return the absolute vocabulary IRI that type and property IRIs extend."""
        return self._router.generate(self._vocab_route, {}, absolute=True) + "#"

    def decode(self, payload: Payload, target: T | type[T]) -> T:
        """Decode *payload* into *target*.

        Args:
            payload: JSON-LD text or decoded JSON.
            target: The object to populate, or a class to instantiate with
                no arguments.

        Returns:
            The populated object.

        Raises:
            UnsupportedTypeError: If *target* is a class whose constructor
                requires arguments.
            UndocumentedTypeError: If the target type has no schema entry.
            GraphParseError: If the payload cannot be parsed.
            AmbiguousNodeError: If the payload does not contain exactly one
                node of the target type.
            MissingSetterError: In strict mode, for a writable property
                without a setter.
            LinkDecodingError: In strict mode, for a link property present in
                the payload.
        """
        entity: Any = _instantiate(target) if isinstance(target, type) else target

        runtime_type = type(entity)
        if not self._catalog.is_documented(runtime_type):
            raise UndocumentedTypeError(
                f"Cannot decode into {runtime_type.__qualname__}: the type is not documented"
            )
        descriptor = self._catalog.descriptor(self._catalog.type_name_for(runtime_type))

        vocab_base = self.vocab_base()
        type_iri = vocab_base + descriptor.name

        nodes = self._parser.parse(payload).nodes_of_type(type_iri)
        if len(nodes) != 1:
            raise AmbiguousNodeError(
                f"The payload contains {len(nodes)} nodes of type {descriptor.name} ({type_iri}); expected 1"
            )
        node = nodes[0]

        for prop in descriptor.properties:
            if prop.readonly:
                continue

            iri = descriptor.expanded_property_iri(prop, vocab_base)

            if prop.link is not None:
                if self._strict and node.has_property(iri):
                    raise LinkDecodingError(f"Decoding link property '{descriptor.name}.{prop.name}' is not supported")
                logger.debug("Skipping link property '%s.%s'", descriptor.name, prop.name)
                continue

            if prop.setter is None:
                if self._strict:
                    raise MissingSetterError(f"Property '{descriptor.name}.{prop.name}' declares no setter")
                logger.debug("Skipping property '%s.%s': no setter", descriptor.name, prop.name)
                continue

            self._accessor.write(entity, prop.path, node.get_property(iri), prop.setter)

        return entity


# ################
# Implementation
# ################


def _instantiate(cls: type[T]) -> T:
    """Create an instance of *cls* without arguments."""
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        signature = None

    if signature is not None:
        required = [
            p.name
            for p in signature.parameters.values()
            if p.default is inspect.Parameter.empty
            and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        ]
        if required:
            raise UnsupportedTypeError(
                f"Cannot create an instance of {cls.__qualname__} from serialized data because its "
                f"constructor has required parameters: {', '.join(required)}"
            )
    return cls()

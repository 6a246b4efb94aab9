# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser that indexes a JSON-LD payload into a :class:`~hydralink.graph.graph.Graph`.

This is not a full JSON-LD processor. It implements the subset needed to
locate typed nodes and read their properties by expanded IRI:

* inline, remote (via a context loader), array and nested ``@context`` values,
* ``@vocab``, prefixes, compact IRIs and expanded term definitions
  (``{"@id": ..., "@type": "@id"}``),
* ``@graph`` containers, nested node objects and ``@value`` objects,
* node merging by ``@id`` and generated blank node identifiers.

Keys that do not expand to an IRI are dropped, as are ``null`` values.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from hydralink.graph.graph import Graph, Node
from hydralink.model.document import CONTEXT_KEY, GRAPH_KEY, ID_KEY, TYPE_KEY, VALUE_KEY, VOCAB_KEY

# ###############
# Public Interface
# ###############

# Resolves a remote context IRI to the document holding its ``@context``.
ContextLoader = Callable[[str], Mapping[str, Any]]


class GraphParseError(Exception):
    """Raised when a payload is not valid JSON or not a usable JSON-LD document."""


class JsonLdParser:
    """Parses JSON-LD payloads into graphs.

    Args:
        context_loader: Called with the IRI of every remote context. When
            absent, payloads referencing remote contexts are rejected.
    """

    def __init__(self, context_loader: ContextLoader | None = None) -> None:
        self._context_loader = context_loader

    def parse(self, payload: str | bytes | Mapping[str, Any] | list[Any]) -> Graph:
        """Parse *payload* (JSON text or already decoded JSON) into a graph.

        Raises:
            GraphParseError: If the payload is not valid JSON, is not an
                object or array, or uses a context that cannot be loaded.
        """
        if isinstance(payload, (str, bytes, bytearray)):
            try:
                data = json.loads(payload)
            except ValueError as exc:
                raise GraphParseError(f"Invalid JSON: {exc}") from exc
        else:
            data = payload

        if not isinstance(data, (Mapping, list)):
            raise GraphParseError("A JSON-LD document must be an object or an array")

        return _GraphBuilder(self._context_loader).build(data)


# ################
# Implementation
# ################


@dataclass(frozen=True)
class _Term:
    iri: str
    type: str | None = None


@dataclass(frozen=True)
class _Context:
    """The active context: vocabulary mapping plus term definitions."""

    vocab: str | None = None
    terms: Mapping[str, _Term] = field(default_factory=dict)

    def expand(self, value: str, *, vocab: bool) -> str:
        """Expand a term, compact IRI, or relative value to an IRI.

        Terms and ``@vocab`` only apply when *vocab* is true, i.e. for
        property names and type values, not for node identifiers.
        """
        if value.startswith("@"):
            return value
        if vocab and value in self.terms:
            return self.terms[value].iri
        if ":" in value:
            prefix, _, suffix = value.partition(":")
            if prefix == "_" or suffix.startswith("//"):
                return value
            term = self.terms.get(prefix)
            return term.iri + suffix if term is not None else value
        if vocab and self.vocab is not None:
            return self.vocab + value
        return value


class _GraphBuilder:
    """Builds one graph from one payload. Not reused between payloads."""

    def __init__(self, context_loader: ContextLoader | None) -> None:
        self._context_loader = context_loader
        self._graph = Graph()
        self._blank_nodes = 0
        self._remote_contexts: dict[str, Any] = {}
        self._loading: set[str] = set()

    def build(self, data: Mapping[str, Any] | list[Any]) -> Graph:
        items = data if isinstance(data, list) else [data]
        for item in items:
            if isinstance(item, Mapping):
                self._node(item, _Context())
        return self._graph

    def _node(self, obj: Mapping[str, Any], ctx: _Context) -> Node | None:
        if CONTEXT_KEY in obj:
            ctx = self._extend(ctx, obj[CONTEXT_KEY])

        if GRAPH_KEY in obj:
            for item in _as_list(obj[GRAPH_KEY]):
                if isinstance(item, Mapping):
                    self._node(item, ctx)
            if set(obj) <= {CONTEXT_KEY, GRAPH_KEY, ID_KEY}:
                return None

        node = self._graph.node(self._node_id(obj, ctx))

        for type_value in _as_list(obj.get(TYPE_KEY)):
            if not isinstance(type_value, str):
                raise GraphParseError(f"Invalid @type value {type_value!r}; expected a string")
            type_iri = ctx.expand(type_value, vocab=True)
            if type_iri not in node.types:
                node.types.append(type_iri)

        for key, value in obj.items():
            if key.startswith("@"):
                continue
            iri = ctx.expand(key, vocab=True)
            if ":" not in iri:
                continue
            converted = self._value(value, ctx, ctx.terms.get(key))
            if converted is not None:
                node.properties[iri] = converted

        return node

    def _node_id(self, obj: Mapping[str, Any], ctx: _Context) -> str:
        node_id = obj.get(ID_KEY)
        if node_id is None:
            self._blank_nodes += 1
            return f"_:b{self._blank_nodes - 1}"
        if not isinstance(node_id, str):
            raise GraphParseError(f"Invalid @id value {node_id!r}; expected a string")
        return ctx.expand(node_id, vocab=False)

    def _value(self, value: Any, ctx: _Context, term: _Term | None) -> Any:
        if value is None:
            return None
        if isinstance(value, list):
            return [v for v in (self._value(item, ctx, term) for item in value) if v is not None]
        if isinstance(value, Mapping):
            if VALUE_KEY in value:
                return value[VALUE_KEY]
            if "@list" in value:
                return self._value(_as_list(value["@list"]), ctx, term)
            if "@set" in value:
                return self._value(_as_list(value["@set"]), ctx, term)
            return self._node(value, ctx)
        if isinstance(value, str) and term is not None:
            if term.type == ID_KEY:
                return ctx.expand(value, vocab=False)
            if term.type == VOCAB_KEY:
                return ctx.expand(value, vocab=True)
        return value

    def _extend(self, ctx: _Context, local: Any) -> _Context:
        for item in local if isinstance(local, list) else [local]:
            if item is None:
                ctx = _Context()
            elif isinstance(item, str):
                if item in self._loading:
                    raise GraphParseError(f"Recursive inclusion of context '{item}'")
                self._loading.add(item)
                try:
                    ctx = self._extend(ctx, self._load(item))
                finally:
                    self._loading.discard(item)
            elif isinstance(item, Mapping):
                ctx = self._define(ctx, item)
            else:
                raise GraphParseError(f"Invalid @context entry {item!r}")
        return ctx

    def _load(self, url: str) -> Any:
        if url not in self._remote_contexts:
            if self._context_loader is None:
                raise GraphParseError(f"Cannot load remote context '{url}': no context loader configured")
            document = self._context_loader(url)
            if not isinstance(document, Mapping):
                raise GraphParseError(f"Remote context '{url}' is not a JSON object")
            self._remote_contexts[url] = document.get(CONTEXT_KEY, document)
        return self._remote_contexts[url]

    def _define(self, ctx: _Context, definitions: Mapping[str, Any]) -> _Context:
        vocab = ctx.vocab
        terms = dict(ctx.terms)
        raw: dict[str, tuple[str, str | None]] = {}

        for key, value in definitions.items():
            if key == VOCAB_KEY:
                vocab = value
            elif key.startswith("@"):
                continue
            elif value is None:
                terms.pop(key, None)
            elif isinstance(value, str):
                raw[key] = (value, None)
            elif isinstance(value, Mapping):
                raw[key] = (value.get(ID_KEY, key), value.get(TYPE_KEY))
            else:
                raise GraphParseError(f"Invalid definition for term '{key}': {value!r}")

        # Definitions may use prefixes declared in the same context.
        pending = _Context(vocab=vocab, terms={**terms, **{key: _Term(iri) for key, (iri, _) in raw.items()}})
        for key, (iri, term_type) in raw.items():
            if ":" in iri or iri.startswith("@"):
                expanded = pending.expand(iri, vocab=False)
            elif vocab is not None:
                expanded = vocab + iri
            else:
                expanded = iri
            terms[key] = _Term(expanded, term_type)

        return _Context(vocab=vocab, terms=terms)


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]

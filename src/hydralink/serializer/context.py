# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON-LD context documents for documented types."""

from __future__ import annotations

from hydralink.model.document import CONTEXT_KEY, HYDRA_NAMESPACE, HYDRA_PREFIX, ID_KEY, TYPE_KEY, VOCAB_PREFIX, Document
from hydralink.model.schema import TypeDescriptor, is_absolute_iri

# ###############
# Public Interface
# ###############


def build_context(descriptor: TypeDescriptor, vocab_base: str) -> Document:
    """Return the context document served for *descriptor*.

    The context maps the ``vocab`` and ``hydra`` prefixes, the type name, and
    every property to its vocabulary IRI. Link properties are
    coerced to ``@id`` so their values are read as IRIs.

    Args:
        descriptor: The documented type.
        vocab_base: Absolute vocabulary IRI ending in ``#``.
    """
    terms: Document = {
        VOCAB_PREFIX: vocab_base,
        HYDRA_PREFIX: HYDRA_NAMESPACE,
        descriptor.name: f"{VOCAB_PREFIX}:{descriptor.name}",
    }
    for prop in descriptor.properties:
        if prop.name.startswith("@"):
            continue
        iri = descriptor.property_iri(prop)
        if not is_absolute_iri(iri):
            iri = f"{VOCAB_PREFIX}:{iri}"
        terms[prop.name] = {ID_KEY: iri, TYPE_KEY: ID_KEY} if prop.is_link else iri
    return {CONTEXT_KEY: terms}

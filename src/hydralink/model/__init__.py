# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema and document model for HydraLink."""

from hydralink.model.document import (
    CONTEXT_KEY,
    HYDRA_COLLECTION,
    HYDRA_NAMESPACE,
    ID_KEY,
    TYPE_KEY,
    VOCAB_PREFIX,
    Document,
    DocumentValue,
)
from hydralink.model.routes import RouteDefinition
from hydralink.model.schema import (
    ID_PROPERTY,
    Accessor,
    FieldAccess,
    LinkShape,
    LinkSpec,
    MethodCall,
    PropertyDefinition,
    TypeDescriptor,
    is_absolute_iri,
    parse_accessor,
)

__all__ = [
    # Schema
    "ID_PROPERTY",
    "Accessor",
    "FieldAccess",
    "MethodCall",
    "LinkShape",
    "LinkSpec",
    "PropertyDefinition",
    "TypeDescriptor",
    "parse_accessor",
    "is_absolute_iri",
    "RouteDefinition",
    # Documents
    "CONTEXT_KEY",
    "ID_KEY",
    "TYPE_KEY",
    "HYDRA_COLLECTION",
    "HYDRA_NAMESPACE",
    "VOCAB_PREFIX",
    "Document",
    "DocumentValue",
]

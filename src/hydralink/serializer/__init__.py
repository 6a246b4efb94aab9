# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Encode/decode engine between documented objects and JSON-LD documents."""

from hydralink.serializer.accessor import PropertyAccessor
from hydralink.serializer.context import build_context
from hydralink.serializer.decoder import DocumentDecoder
from hydralink.serializer.encoder import DocumentEncoder
from hydralink.serializer.identifiers import DEFAULT_IDENTITY, IdentifierResolver
from hydralink.serializer.links import build_link, link_parameters
from hydralink.serializer.serializer import JSONLD_FORMAT, Serializer
from hydralink.serializer.values import (
    Normalizer,
    NormalizerRegistry,
    ValueEncoder,
    default_normalizers,
    is_sequence,
)

__all__ = [
    "JSONLD_FORMAT",
    "Serializer",
    "DocumentEncoder",
    "DocumentDecoder",
    "IdentifierResolver",
    "DEFAULT_IDENTITY",
    "build_link",
    "link_parameters",
    "Normalizer",
    "NormalizerRegistry",
    "ValueEncoder",
    "default_normalizers",
    "is_sequence",
    "PropertyAccessor",
    "build_context",
]

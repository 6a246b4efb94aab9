# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised by the encode/decode engine.

Errors that belong to a single collaborator live next to it:
:class:`~hydralink.routing.router.RouteResolutionError`,
:class:`~hydralink.catalog.loader.SchemaError`,
:class:`~hydralink.graph.parser.GraphParseError` and
:class:`~hydralink.config.settings.SettingsError`.
"""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class SerializerError(Exception):
    """Base class for all encode and decode failures."""


class UnsupportedFormatError(SerializerError):
    """Raised when a format other than ``jsonld`` is requested."""


class InvalidInputError(SerializerError):
    """Raised when a value that is not a domain object is passed for encoding."""


class UnknownTypeError(SerializerError):
    """Raised when a runtime type or semantic type name is absent from the schema catalog."""


class UndocumentedTypeError(UnknownTypeError):
    """Raised when decoding into a runtime type that has no schema entry."""


class MissingIdentityError(SerializerError):
    """Raised when a reference is requested for an object without an identity accessor."""


class CyclicGraphError(SerializerError):
    """Raised when an object would be embedded inside its own embedded representation."""


class UnsupportedTypeError(SerializerError):
    """Raised when a target type cannot be instantiated without constructor arguments."""


class AmbiguousNodeError(SerializerError):
    """Raised when a payload does not contain exactly one node of the expected type."""


class PropertyPathError(SerializerError):
    """Raised when a property path cannot be resolved on an object."""


class DecodingError(SerializerError):
    """Base class for failures raised by strict decoding."""


class MissingSetterError(DecodingError):
    """Raised in strict mode when a writable property declares no setter."""


class LinkDecodingError(DecodingError):
    """Raised in strict mode when a payload carries a value for a link property."""

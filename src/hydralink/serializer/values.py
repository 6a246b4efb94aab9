# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Encoding of plain (non-link) property values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol
from uuid import UUID

from hydralink.catalog.catalog import SchemaCatalog
from hydralink.errors import UnknownTypeError
from hydralink.model.document import Document, DocumentValue

# ###############
# Public Interface
# ###############


class Normalizer(Protocol):
    """Converts values of one runtime type into a document fragment."""

    def normalize(self, value: Any) -> DocumentValue: ...


# Encodes a documented object; the flag selects embedding over referencing.
ObjectEncoder = Callable[[object, bool], Document]


class NormalizerRegistry:
    """Custom normalizers keyed by runtime type.

    Lookup walks the MRO of the value's type, so a normalizer registered for
    a base class also handles its subclasses.
    """

    def __init__(self) -> None:
        self._normalizers: dict[type, Normalizer] = {}

    def register(self, runtime_type: type, normalizer: Normalizer | Callable[[Any], DocumentValue]) -> None:
        """Register *normalizer* for *runtime_type*; plain callables are accepted."""
        if not hasattr(normalizer, "normalize"):
            normalizer = _FunctionNormalizer(normalizer)  # type: ignore[arg-type]
        self._normalizers[runtime_type] = normalizer  # type: ignore[assignment]

    def has_normalizer(self, runtime_type: type) -> bool:
        return self._lookup(runtime_type) is not None

    def normalizer_for(self, runtime_type: type) -> Normalizer:
        normalizer = self._lookup(runtime_type)
        if normalizer is None:
            raise LookupError(f"No normalizer registered for {runtime_type.__qualname__}")
        return normalizer

    def _lookup(self, runtime_type: type) -> Normalizer | None:
        for klass in runtime_type.__mro__:
            normalizer = self._normalizers.get(klass)
            if normalizer is not None:
                return normalizer
        return None


def default_normalizers() -> NormalizerRegistry:
    """Return a registry with normalizers for common standard library types."""
    registry = NormalizerRegistry()
    registry.register(datetime, datetime.isoformat)
    registry.register(date, date.isoformat)
    registry.register(time, time.isoformat)
    registry.register(Decimal, str)
    registry.register(UUID, str)
    registry.register(Enum, lambda member: member.value)
    return registry


def is_sequence(value: Any) -> bool:
    """Return True if *value* is encoded element by element.

    Strings, bytes and mappings are iterable but encoded as single values.
    """
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray, Mapping))


class ValueEncoder:
    """Encodes the raw value of a plain property.

    Resolution order: registered normalizer, mapping (passed through),
    sequence (each element encoded), documented object (delegated to the
    object encoder). Any other object raises :class:`UnknownTypeError`.
    """

    def __init__(self, catalog: SchemaCatalog, normalizers: NormalizerRegistry) -> None:
        self._catalog = catalog
        self._normalizers = normalizers

    def encode(self, value: Any, encode_object: ObjectEncoder, embed: bool = False) -> DocumentValue:
        """Encode *value*.

        Args:
            value: The raw property value.
            encode_object: Encodes documented objects found in the value.
            embed: Embed documented objects instead of referencing them.

        Raises:
            UnknownTypeError: If the value, or an element of it, is an object
                that is neither documented nor normalizable.
        """
        if value is None or type(value) in _LITERALS:
            return value
        runtime_type = type(value)
        if self._normalizers.has_normalizer(runtime_type):
            return self._normalizers.normalizer_for(runtime_type).normalize(value)
        if isinstance(value, Mapping):
            return dict(value)
        if is_sequence(value):
            return [self.encode(item, encode_object, embed) for item in value]
        if isinstance(value, _LITERAL_TYPES):
            return value
        if not self._catalog.is_documented(runtime_type):
            raise UnknownTypeError(
                f"Cannot encode value of type {runtime_type.__module__}.{runtime_type.__qualname__}: "
                "it is neither documented nor handled by a normalizer"
            )
        return encode_object(value, embed)


# ################
# Implementation
# ################

_LITERAL_TYPES = (str, int, float, bool)
_LITERALS = frozenset(_LITERAL_TYPES)


class _FunctionNormalizer:
    def __init__(self, func: Callable[[Any], DocumentValue]) -> None:
        self._func = func

    def normalize(self, value: Any) -> DocumentValue:
        return self._func(value)

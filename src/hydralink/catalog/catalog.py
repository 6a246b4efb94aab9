# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""In-memory lookup table from runtime types to documented semantic types."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from hydralink.errors import UnknownTypeError
from hydralink.model.schema import PropertyDefinition, TypeDescriptor

# ###############
# Public Interface
# ###############


class SchemaCatalog:
    """Maps runtime types to semantic type names and type names to their properties.

    The catalog is configuration: populate it once at startup and share it
    read-only between encode and decode calls.

    Args:
        types: The documented type descriptors.
        bindings: Mapping from runtime classes to semantic type names.
    """

    def __init__(
        self,
        types: Iterable[TypeDescriptor] = (),
        bindings: Mapping[type, str] | None = None,
    ) -> None:
        self._types: dict[str, TypeDescriptor] = {}
        self._class2type: dict[type, str] = {}
        for descriptor in types:
            if descriptor.name in self._types:
                raise ValueError(f"Duplicate type '{descriptor.name}' in schema catalog")
            self._types[descriptor.name] = descriptor
        for runtime_type, type_name in (bindings or {}).items():
            self.bind(runtime_type, type_name)

    @property
    def types(self) -> list[TypeDescriptor]:
        return list(self._types.values())

    def bind(self, runtime_type: type, type_name: str) -> None:
        """Document *runtime_type* as the semantic type *type_name*."""
        if type_name not in self._types:
            raise UnknownTypeError(f"Cannot bind {runtime_type.__qualname__}: unknown type '{type_name}'")
        self._class2type[runtime_type] = type_name

    def is_documented(self, runtime_type: type) -> bool:
        return self._lookup(runtime_type) is not None

    def type_name_for(self, runtime_type: type) -> str:
        """Return the semantic type name of *runtime_type*.

        Subclasses of a documented class resolve to the nearest documented
        ancestor in the MRO.

        Raises:
            UnknownTypeError: If neither the type nor any ancestor is documented.
        """
        type_name = self._lookup(runtime_type)
        if type_name is None:
            raise UnknownTypeError(f"Type {runtime_type.__module__}.{runtime_type.__qualname__} is not documented")
        return type_name

    def descriptor(self, type_name: str) -> TypeDescriptor:
        try:
            return self._types[type_name]
        except KeyError:
            raise UnknownTypeError(f"Unknown semantic type '{type_name}'") from None

    def properties_of(self, type_name: str) -> tuple[PropertyDefinition, ...]:
        """Return the property definitions of *type_name* in declaration order."""
        return self.descriptor(type_name).properties

    # ################
    # Implementation
    # ################

    def _lookup(self, runtime_type: type) -> str | None:
        for klass in runtime_type.__mro__:
            type_name = self._class2type.get(klass)
            if type_name is not None:
                return type_name
        return None

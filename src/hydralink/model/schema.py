# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema model: type descriptors, property definitions, and accessors.

The schema is read-only configuration. It is built once (usually by
:mod:`hydralink.catalog.loader`) and shared by every encode and decode call.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

ID_PROPERTY = "@id"


class FieldAccess(BaseModel):
    """Direct attribute access on the owning object."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["field"] = "field"
    name: str

    def read(self, obj: object) -> Any:
        return getattr(obj, self.name)

    def assign(self, obj: object, value: Any) -> None:
        setattr(obj, self.name, value)


class MethodCall(BaseModel):
    """A zero-argument getter or a one-argument setter method on the owning object."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["method"] = "method"
    name: str

    def read(self, obj: object) -> Any:
        return getattr(obj, self.name)()

    def assign(self, obj: object, value: Any) -> None:
        getattr(obj, self.name)(value)


# How a value is read from or written to an object.
Accessor = Annotated[FieldAccess | MethodCall, _Field(discriminator="kind")]


def parse_accessor(text: str) -> FieldAccess | MethodCall:
    """Parse the shorthand accessor notation used in schema files.

    ``"name"`` is a field access, ``"get_name()"`` a method call.
    """
    text = text.strip()
    if text.endswith("()"):
        return MethodCall(name=text[:-2])
    return FieldAccess(name=text)


class LinkShape(Enum):
    """How a generated link is emitted in a document."""

    SCALAR = "scalar-link"
    COLLECTION = "collection-link"


class LinkSpec(BaseModel):
    """Route binding for a property that is serialized as a link.

    Attributes:
        route: Name of the route to expand.
        variables: Required route variables, in declaration order.
        defaults: Default route parameters.
        bindings: Explicit variable-to-accessor mapping evaluated on the
            owning object. When absent, the variables are inferred from the
            property value.
        shape: Whether the link is a plain IRI or a ``hydra:Collection``.
    """

    model_config = ConfigDict(frozen=True)

    route: str
    variables: tuple[str, ...] = ()
    defaults: dict[str, Any] = _Field(default_factory=dict)
    bindings: dict[str, Accessor] | None = None
    shape: LinkShape = LinkShape.SCALAR


class PropertyDefinition(BaseModel):
    """A single exposed property of a documented type."""

    model_config = ConfigDict(frozen=True)

    name: str
    iri: str | None = None
    element: str | None = None
    readonly: bool = False
    writeonly: bool = False
    getter: Accessor | None = None
    setter: Accessor | None = None
    link: LinkSpec | None = None

    @property
    def is_link(self) -> bool:
        return self.link is not None

    @property
    def path(self) -> str:
        """The property path written on decode."""
        return self.element or self.name


class TypeDescriptor(BaseModel):
    """A semantic type and its ordered property definitions."""

    model_config = ConfigDict(frozen=True)

    name: str
    properties: tuple[PropertyDefinition, ...] = ()
    class_path: str | None = None

    def get_property(self, name: str) -> PropertyDefinition | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    @property
    def identifier(self) -> PropertyDefinition | None:
        """The ``@id`` property, if the type declares one."""
        return self.get_property(ID_PROPERTY)

    def property_iri(self, prop: PropertyDefinition) -> str:
        """Return the vocabulary-relative IRI of *prop*."""
        return prop.iri or f"{self.name}/{prop.name}"

    def expanded_property_iri(self, prop: PropertyDefinition, vocab_base: str) -> str:
        """Return the absolute IRI of *prop*; explicit absolute IRIs are kept as they are."""
        iri = self.property_iri(prop)
        return iri if is_absolute_iri(iri) else vocab_base + iri


def is_absolute_iri(value: str) -> bool:
    return ":" in value


LinkSpec.model_rebuild()
PropertyDefinition.model_rebuild()

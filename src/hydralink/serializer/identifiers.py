# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reference (``@id`` + ``@type``) representations of documented objects."""

from __future__ import annotations

from typing import Any

from hydralink.errors import MissingIdentityError
from hydralink.model.document import ID_KEY, TYPE_KEY, VOCAB_PREFIX, Document
from hydralink.model.schema import FieldAccess, MethodCall, TypeDescriptor
from hydralink.routing.router import Router
from hydralink.serializer.links import build_link

# ###############
# Public Interface
# ###############

DEFAULT_IDENTITY = MethodCall(name="get_id")


class IdentifierResolver:
    """Builds reference documents from an object's identity.

    Args:
        router: Expands the route of the type's ``@id`` property.
        identity: How the identity value is read from an object.
    """

    def __init__(self, router: Router, identity: FieldAccess | MethodCall = DEFAULT_IDENTITY) -> None:
        self._router = router
        self._identity = identity

    def exposes_identity(self, obj: object) -> bool:
        """Return True if *obj* can provide an identity value."""
        if isinstance(self._identity, MethodCall):
            return callable(getattr(obj, self._identity.name, None))
        return hasattr(obj, self._identity.name)

    def identity_of(self, obj: object) -> Any:
        if not self.exposes_identity(obj):
            raise MissingIdentityError(f"{type(obj).__qualname__} does not expose an identity accessor")
        return self._identity.read(obj)

    def reference(self, obj: object, descriptor: TypeDescriptor) -> Document:
        """Return the reference representation of *obj*.

        Types that declare a linked ``@id`` property yield exactly ``@id`` and
        ``@type``; the type is prefixed with ``vocab:``, unlike the bare type
        name used in embedded documents. Other types yield an empty document.
        """
        identifier = descriptor.identifier
        if identifier is None or identifier.link is None:
            return {}

        link = identifier.link
        href = build_link(self._router, link.route, link.variables, link.defaults, {"id": self.identity_of(obj)})
        return {ID_KEY: href, TYPE_KEY: f"{VOCAB_PREFIX}:{descriptor.name}"}

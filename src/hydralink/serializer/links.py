# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Link building: route parameters derived from objects, expanded by the router."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from hydralink.errors import PropertyPathError
from hydralink.model.schema import PropertyDefinition
from hydralink.routing.router import RouteResolutionError, Router

if TYPE_CHECKING:
    from hydralink.serializer.identifiers import IdentifierResolver

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def build_link(
    router: Router,
    route: str,
    variables: Iterable[str],
    defaults: Mapping[str, Any],
    parameters: Mapping[str, Any],
    *,
    absolute: bool = False,
) -> str:
    """Merge *defaults* and *parameters* and expand *route*.

    Raises:
        RouteResolutionError: If a required variable has no value.
    """
    merged = {**defaults, **parameters}
    missing = [var for var in variables if merged.get(var) is None]
    if missing:
        raise RouteResolutionError(f"Cannot build link to route '{route}': unbound variable(s) {', '.join(missing)}")
    return router.generate(route, merged, absolute=absolute)


def link_parameters(
    obj: object,
    prop: PropertyDefinition,
    value: Any,
    resolver: IdentifierResolver,
) -> dict[str, Any] | None:
    """Derive the route parameters of the link property *prop* of *obj*.

    Parameters start from the link defaults. Explicit bindings are then read
    from *obj*; without bindings, a mapping *value* fills the parameters that
    are still unset, and a single-variable route takes a scalar *value* itself
    (or its identity when *value* is an identifiable object); any other value
    leaves the variable unbound. Finally an unbound ``id`` variable falls
    back to the identity of *obj*.

    Returns:
        The route parameters, or None if the link must be omitted because
        its only variable resolved to None.
    """
    link = prop.link
    assert link is not None
    parameters: dict[str, Any] = dict(link.defaults)

    if link.bindings is not None:
        for var, accessor in link.bindings.items():
            try:
                parameters[var] = accessor.read(obj)
            except AttributeError as exc:
                raise PropertyPathError(
                    f"Cannot read binding '{var}' of link property '{prop.name}' on {type(obj).__qualname__}: {exc}"
                ) from exc
    elif isinstance(value, Mapping):
        for key, item in value.items():
            parameters.setdefault(key, item)
    elif len(link.variables) == 1:
        if value is None:
            logger.debug("Omitting link property '%s': its value is None", prop.name)
            return None
        if resolver.exposes_identity(value):
            parameters[link.variables[0]] = resolver.identity_of(value)
        elif isinstance(value, _SCALARS):
            parameters[link.variables[0]] = value

    if "id" in link.variables and parameters.get("id") is None and resolver.exposes_identity(obj):
        parameters["id"] = resolver.identity_of(obj)

    return parameters


# ################
# Implementation
# ################


_SCALARS = (str, int, float, bool)

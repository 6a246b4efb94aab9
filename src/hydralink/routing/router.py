# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""URL generation from named route templates.

The router is the link-generation collaborator of the serializer: it turns a
route name and a parameter mapping into a concrete URI. It holds no mutable
state once constructed and is safe to share between threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote, urlencode

from hydralink.model.routes import RouteDefinition

# ###############
# Public Interface
# ###############

CONTEXT_ROUTE = "hydra_context"
VOCAB_ROUTE = "hydra_vocab"


class RouteResolutionError(Exception):
    """Raised when a route is unknown or a required route variable has no value."""


class Router:
    """Expands named routes into URIs.

    Args:
        routes: Route definitions to register.
        base_url: Scheme and authority prepended to absolute URIs,
            e.g. ``https://api.example.com``.
    """

    def __init__(self, routes: Iterable[RouteDefinition] = (), *, base_url: str = "") -> None:
        self._routes: dict[str, RouteDefinition] = {}
        self._base_url = base_url.rstrip("/")
        for route in routes:
            self.add(route)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def routes(self) -> list[RouteDefinition]:
        return list(self._routes.values())

    def add(self, route: RouteDefinition) -> None:
        """Register *route*. Route names must be unique."""
        if route.name in self._routes:
            raise ValueError(f"Route '{route.name}' is already registered")
        self._routes[route.name] = route

    def has_route(self, name: str) -> bool:
        return name in self._routes

    def get(self, name: str) -> RouteDefinition:
        """Return the route called *name*.

        Raises:
            RouteResolutionError: If no such route is registered.
        """
        try:
            return self._routes[name]
        except KeyError:
            raise RouteResolutionError(f"Unknown route '{name}'") from None

    def generate(
        self,
        name: str,
        parameters: Mapping[str, Any] | None = None,
        absolute: bool = False,
    ) -> str:
        """Generate the URI of route *name*.

        Placeholders are filled from *parameters*, falling back to the route
        defaults. Parameters that are not route variables and differ from the
        defaults are appended as a query string with sorted keys.

        Raises:
            RouteResolutionError: If the route is unknown or a placeholder
                has no value.
        """
        route = self.get(name)
        given = dict(parameters or {})
        merged = {**route.defaults, **given}

        missing = [var for var in route.variables if merged.get(var) is None]
        if missing:
            raise RouteResolutionError(
                f"Cannot generate route '{name}': missing value(s) for {', '.join(missing)}"
            )

        uri = route.expand({var: quote(_to_text(merged[var]), safe="") for var in route.variables})

        query = {
            key: _to_text(value)
            for key, value in sorted(given.items())
            if key not in route.variables
            and value is not None
            and not (key in route.defaults and route.defaults[key] == value)
        }
        if query:
            uri = f"{uri}?{urlencode(query)}"

        if absolute:
            uri = self._base_url + uri
        return uri


# ################
# Implementation
# ################


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)

# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Route registry and URL generation."""

from hydralink.routing.router import CONTEXT_ROUTE, VOCAB_ROUTE, RouteResolutionError, Router

__all__ = [
    "CONTEXT_ROUTE",
    "VOCAB_ROUTE",
    "RouteResolutionError",
    "Router",
]

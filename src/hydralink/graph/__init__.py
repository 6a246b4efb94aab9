# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON-LD graph parsing and indexing."""

from hydralink.graph.graph import Graph, Node
from hydralink.graph.parser import ContextLoader, GraphParseError, JsonLdParser

__all__ = [
    "ContextLoader",
    "Graph",
    "GraphParseError",
    "JsonLdParser",
    "Node",
]

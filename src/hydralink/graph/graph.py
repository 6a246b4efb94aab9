# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Graph of typed nodes produced by the JSON-LD parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# ###############
# Public Interface
# ###############


@dataclass
class Node:
    """A node of a parsed graph.

    Property keys are fully expanded IRIs. Values are plain JSON values,
    nested :class:`Node` objects, or lists of either.

    Attributes:
        id: The node identifier; blank nodes use ``_:b<n>``.
        types: Expanded type IRIs in declaration order.
    """

    id: str
    types: list[str] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)

    def is_of_type(self, type_iri: str) -> bool:
        return type_iri in self.types

    def has_property(self, iri: str) -> bool:
        return iri in self.properties

    def get_property(self, iri: str) -> Any:
        """Return the value of property *iri*, or None if the node lacks it."""
        return self.properties.get(iri)

    @property
    def is_blank(self) -> bool:
        return self.id.startswith("_:")


class Graph:
    """An ordered collection of nodes, indexed by identifier."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    def get_node(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def node(self, node_id: str) -> Node:
        """Return the node called *node_id*, creating it if needed."""
        existing = self._nodes.get(node_id)
        if existing is None:
            existing = self._nodes[node_id] = Node(id=node_id)
        return existing

    def nodes_of_type(self, type_iri: str) -> list[Node]:
        """Return every node declaring *type_iri*, in document order."""
        return [node for node in self._nodes.values() if node.is_of_type(type_iri)]

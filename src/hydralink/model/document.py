# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Document value types and the reserved JSON-LD / Hydra keywords."""

from __future__ import annotations

# ###############
# Public Interface
# ###############

CONTEXT_KEY = "@context"
ID_KEY = "@id"
TYPE_KEY = "@type"
GRAPH_KEY = "@graph"
VALUE_KEY = "@value"
VOCAB_KEY = "@vocab"

HYDRA_NAMESPACE = "http://www.w3.org/ns/hydra/core#"
HYDRA_PREFIX = "hydra"
HYDRA_COLLECTION = "hydra:Collection"

# Prefix of the ``@type`` emitted for references, e.g. ``vocab:Person``.
VOCAB_PREFIX = "vocab"

DocumentScalar = str | int | float | bool | None
DocumentValue = DocumentScalar | dict[str, "DocumentValue"] | list["DocumentValue"]

# An encoded document. Key order is significant and follows the schema.
Document = dict[str, DocumentValue]

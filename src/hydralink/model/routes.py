# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Named, parameterized URI templates."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class RouteDefinition(BaseModel):
    """A named route such as ``person_get`` -> ``/people/{id}``."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    defaults: dict[str, Any] = _Field(default_factory=dict)

    @property
    def variables(self) -> tuple[str, ...]:
        """Placeholder names in order of appearance, without duplicates."""
        return tuple(dict.fromkeys(_PLACEHOLDER.findall(self.path)))

    def expand(self, values: Mapping[str, str]) -> str:
        """Substitute every placeholder with its (already encoded) value."""
        return _PLACEHOLDER.sub(lambda match: values[match.group(1)], self.path)


# ################
# Implementation
# ################

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

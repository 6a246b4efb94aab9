# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema catalog: documented types, schema files, and schema checks."""

from hydralink.catalog.catalog import SchemaCatalog
from hydralink.catalog.checks import CheckError, CheckResult, CheckWarning, check_schema
from hydralink.catalog.loader import (
    SchemaDocument,
    SchemaError,
    build_catalog,
    build_router,
    load_schema,
    merge_schemas,
    parse_schema,
)

__all__ = [
    "SchemaCatalog",
    "SchemaDocument",
    "SchemaError",
    "load_schema",
    "parse_schema",
    "merge_schemas",
    "build_catalog",
    "build_router",
    "CheckError",
    "CheckResult",
    "CheckWarning",
    "check_schema",
]

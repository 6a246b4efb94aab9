# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of a ready-to-use serializer from a settings file."""

from __future__ import annotations

from pathlib import Path

from hydralink.catalog.loader import build_catalog, build_router, load_schema, merge_schemas
from hydralink.config.settings import SerializerSettings, load_settings
from hydralink.serializer.serializer import Serializer
from hydralink.serializer.values import NormalizerRegistry

# ###############
# Public Interface
# ###############


def create_serializer(
    settings: Path | SerializerSettings,
    *,
    normalizers: NormalizerRegistry | None = None,
    import_classes: bool = True,
) -> Serializer:
    """Create a :class:`Serializer` from a settings file or parsed settings.

    Schema files are loaded and merged in order; their ``class`` entries are
    imported unless *import_classes* is false.

    Raises:
        SettingsError: If the settings file is invalid.
        SchemaError: If a schema file is invalid or names an unknown class.
    """
    if isinstance(settings, Path):
        settings = load_settings(settings)

    document = merge_schemas(load_schema(path) for path in settings.schema_files)
    return Serializer(
        build_catalog(document, import_classes=import_classes),
        build_router(document, base_url=settings.base_url),
        normalizers=normalizers,
        context_route=settings.context_route,
        vocab_route=settings.vocab_route,
        strict=settings.strict,
    )

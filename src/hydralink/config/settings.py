# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the HydraLink settings file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from hydralink.routing.router import CONTEXT_ROUTE, VOCAB_ROUTE

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = "hydralink.yaml"


class SettingsError(Exception):
    """Raised when a settings file is invalid or cannot be loaded."""


@dataclass
class SerializerSettings:
    """The parsed HydraLink settings.

    Attributes:
        schema_files: Schema files, resolved against the settings file's directory.
        base_url: Scheme and authority used for absolute IRIs.
        context_route: Route serving a type's JSON-LD context.
        vocab_route: Route serving the vocabulary.
        strict: Enable strict decoding.
    """

    schema_files: list[Path] = field(default_factory=list)
    base_url: str = ""
    context_route: str = CONTEXT_ROUTE
    vocab_route: str = VOCAB_ROUTE
    strict: bool = False


def load_settings(path: Path) -> SerializerSettings:
    """Load and parse a HydraLink settings file.

    Args:
        path: Path to the ``hydralink.yaml`` file.

    Returns:
        A SerializerSettings instance populated from the file.

    Raises:
        SettingsError: If the file cannot be read or the settings are invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SettingsError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file: {exc}") from exc

    return _parse_settings(text, base_dir=path.parent, source_label=str(path))


# ################
# Implementation
# ################


def _parse_settings(text: str, base_dir: Path, source_label: str = "<string>") -> SerializerSettings:
    """Parse settings YAML text into a SerializerSettings.

    Args:
        text: Raw YAML content.
        base_dir: Directory that relative schema file paths are resolved against.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        SettingsError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(f"{source_label}: settings must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise SettingsError(f"{source_label}: unknown setting(s) {', '.join(unknown)}")

    raw_files = data.get("schema-files", [])
    if not isinstance(raw_files, list) or not all(isinstance(f, str) for f in raw_files):
        raise SettingsError(f"{source_label}: 'schema-files' must be a list of paths")

    strict = data.get("strict", False)
    if not isinstance(strict, bool):
        raise SettingsError(f"{source_label}: 'strict' must be true or false")

    return SerializerSettings(
        schema_files=[(base_dir / f).resolve() for f in raw_files],
        base_url=_optional_string(data, "base-url", "", source_label),
        context_route=_optional_string(data, "context-route", CONTEXT_ROUTE, source_label),
        vocab_route=_optional_string(data, "vocab-route", VOCAB_ROUTE, source_label),
        strict=strict,
    )


_KNOWN_KEYS = frozenset({"schema-files", "base-url", "context-route", "vocab-route", "strict"})


def _optional_string(mapping: dict[str, object], key: str, default: str, source_label: str) -> str:
    """Extract an optional string field, raising SettingsError if it has another type."""
    value = mapping.get(key, default)
    if not isinstance(value, str):
        raise SettingsError(f"{source_label}: '{key}' must be a string")
    return value

# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for assembling a serializer from settings."""

from fractions import Fraction
from pathlib import Path

import pytest

from hydralink.catalog import SchemaError
from hydralink.config import SerializerSettings, SettingsError, create_serializer
from hydralink.errors import LinkDecodingError
from hydralink.serializer import NormalizerRegistry, Serializer

# ###############
# Helpers
# ###############

SCHEMA = """\
routes:
  ratio_get:
    path: /ratios/{id}
types:
  Ratio:
    class: fractions:Fraction
    properties:
      numerator:
        readonly: true
      denominator:
        readonly: true
      real:
        readonly: true
      simplified:
        link:
          route: ratio_get
          bindings:
            id: numerator
"""


def _workspace(tmp_path: Path, settings: str = "", schema: str = SCHEMA) -> Path:
    """Write a schema and a settings file referring to it."""
    (tmp_path / "schema.yaml").write_text(schema, encoding="utf-8")
    settings_file = tmp_path / "hydralink.yaml"
    settings_file.write_text(f"schema-files: [schema.yaml]\n{settings}", encoding="utf-8")
    return settings_file


# ###############
# Normal Cases
# ###############


def test_create_from_settings_file(tmp_path: Path) -> None:
    """Schema classes are imported and bound."""
    serializer = create_serializer(_workspace(tmp_path))

    assert isinstance(serializer, Serializer)
    doc = serializer.encode(Fraction(3, 4))
    assert doc["@context"] == "/contexts/Ratio"
    assert doc["numerator"] == 3
    assert doc["denominator"] == 4
    assert doc["simplified"] == "/ratios/3"


def test_create_from_parsed_settings(tmp_path: Path) -> None:
    """Parsed settings are accepted as well as a path."""
    _workspace(tmp_path)
    settings = SerializerSettings(schema_files=[tmp_path / "schema.yaml"], base_url="https://api.example.com")
    serializer = create_serializer(settings, import_classes=False)

    context = serializer.context("Ratio")["@context"]
    assert context["vocab"] == "https://api.example.com/vocab#"


def test_settings_are_applied(tmp_path: Path) -> None:
    """Base URL and strict mode reach the serializer."""
    serializer = create_serializer(_workspace(tmp_path, "base-url: https://api.example.com\nstrict: true\n"))
    payload = {"@context": "/contexts/Ratio", "@type": "Ratio", "simplified": "/ratios/1"}

    with pytest.raises(LinkDecodingError):
        serializer.deserialize_into(payload, Fraction(1, 2))


def test_custom_normalizers(tmp_path: Path) -> None:
    """Custom normalizers are passed through."""
    normalizers = NormalizerRegistry()
    normalizers.register(Fraction, str)
    serializer = create_serializer(_workspace(tmp_path), normalizers=normalizers)

    assert serializer.encode(Fraction(3, 4))["real"] == "3/4"


def test_multiple_schema_files(tmp_path: Path) -> None:
    """Schema files are merged in order."""
    (tmp_path / "a.yaml").write_text("types:\n  A: {}\n", encoding="utf-8")
    (tmp_path / "b.yaml").write_text("types:\n  B: {}\n", encoding="utf-8")
    settings = tmp_path / "hydralink.yaml"
    settings.write_text("schema-files: [a.yaml, b.yaml]\n", encoding="utf-8")

    serializer = create_serializer(settings)
    assert serializer.context("B")["@context"]["B"] == "vocab:B"


# ###############
# Error Cases
# ###############


def test_missing_settings(tmp_path: Path) -> None:
    """A missing settings file raises SettingsError."""
    with pytest.raises(SettingsError):
        create_serializer(tmp_path / "hydralink.yaml")


def test_missing_schema_file(tmp_path: Path) -> None:
    """A settings file naming a missing schema raises SchemaError."""
    settings = tmp_path / "hydralink.yaml"
    settings.write_text("schema-files: [missing.yaml]\n", encoding="utf-8")
    with pytest.raises(SchemaError):
        create_serializer(settings)


def test_unimportable_class(tmp_path: Path) -> None:
    """Unimportable classes fail unless imports are disabled."""
    settings = _workspace(tmp_path, schema="types:\n  Ghost:\n    class: no_such_module_xyz:Ghost\n")
    with pytest.raises(SchemaError):
        create_serializer(settings)
    assert create_serializer(settings, import_classes=False).context("Ghost")

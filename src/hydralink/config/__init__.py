# Copyright 2026 HydraLink Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings loading and serializer assembly."""

from hydralink.config.bootstrap import create_serializer
from hydralink.config.settings import SETTINGS_FILE_NAME, SerializerSettings, SettingsError, load_settings

__all__ = [
    "SETTINGS_FILE_NAME",
    "SerializerSettings",
    "SettingsError",
    "create_serializer",
    "load_settings",
]

from __future__ import annotations

from .errors import (
    ConfigFileNotFoundError,
    ConfigToolsError,
    ConnectionStringNotFoundError,
    InvalidArgumentError,
    KeyDepthExceededError,
    KeyPathNotFoundError,
    NotFoundError,
)
from .key_path import MAX_KEY_DEPTH
from .settings import Settings, get_settings
from .settings_document import ConnectionStringRecord, SettingsDocument
from .store import (
    ConfigStore,
    set_app_setting,
    set_app_settings,
    set_connection_string,
    set_connection_strings,
    set_json_connection_string,
    set_json_value,
)

__all__ = [
    "ConfigStore",
    "ConnectionStringRecord",
    "SettingsDocument",
    "Settings",
    "get_settings",
    "MAX_KEY_DEPTH",
    "set_app_setting",
    "set_app_settings",
    "set_connection_string",
    "set_connection_strings",
    "set_json_connection_string",
    "set_json_value",
    "ConfigToolsError",
    "InvalidArgumentError",
    "KeyDepthExceededError",
    "ConfigFileNotFoundError",
    "NotFoundError",
    "ConnectionStringNotFoundError",
    "KeyPathNotFoundError",
]

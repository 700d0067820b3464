from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

from .disk_store import DiskJsonDocumentStore, DiskSettingsDocumentStore
from .errors import ConnectionStringNotFoundError, InvalidArgumentError
from .key_path import assign_path, coerce_value, parse_key_path
from .paths import CONFIG_DIR_NAME, CONFIG_FILE_NAME, conventional_config_path, ensure_dir
from .settings import Settings, get_settings
from .settings_document import ConnectionStringRecord, SettingsDocument

logger = logging.getLogger(__name__)

JSON_CONNECTION_STRINGS = "ConnectionStrings"

PathLike = str | os.PathLike[str]


def _require_key(key: str) -> str:
    if key is None or not str(key).strip():
        raise InvalidArgumentError("Key cannot be empty")
    return key


def _blank(key: str | None) -> bool:
    return key is None or not str(key).strip()


def _json_indent(indent: int | None) -> int:
    # CONFIGTOOLS_JSON_INDENT applies unless the caller passes indent=
    return get_settings().json_indent if indent is None else indent


class ConfigStore:
    """
    Reads and writes the conventional settings file, ``<base_dir>/config/app.config``.

    Every call loads the file fresh, applies one change and writes the whole
    document back. Nothing is cached and nothing is locked: two writers racing
    on the same file will lose one of the updates.
    """

    def __init__(
        self,
        base_dir: PathLike,
        *,
        config_dir_name: str = CONFIG_DIR_NAME,
        config_file_name: str = CONFIG_FILE_NAME,
    ):
        self._base_dir = Path(base_dir)
        self._path = conventional_config_path(self._base_dir, config_dir_name, config_file_name)
        self._store = DiskSettingsDocumentStore(self._path)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConfigStore":
        return cls(
            settings.base_dir,
            config_dir_name=settings.config_dir_name,
            config_file_name=settings.config_file_name,
        )

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @property
    def path(self) -> Path:
        return self._path

    def ensure_exists(self) -> Path:
        ensure_dir(self._path.parent)
        if not self._store.exists():
            self._store.save(SettingsDocument.empty())
            logger.info("CONFIG CREATE: wrote empty settings file %s", self._path)
        return self._path

    def _load(self) -> SettingsDocument:
        self.ensure_exists()
        return self._store.load()

    def read_setting(self, key: str) -> str:
        if _blank(key):
            return ""
        value = self._load().get_app_setting(key)
        return value if value is not None else ""

    def write_setting(self, key: str, value: str) -> None:
        _require_key(key)
        doc = self._load()
        doc.put_app_setting(key, value)
        self._store.save(doc)
        logger.debug("CONFIG WRITE: appSettings[%s] in %s", key, self._path)

    def read_connection_string(self, key: str) -> str:
        if _blank(key):
            return ""
        rec = self._load().get_connection_string(key)
        return rec.connection_string if rec is not None else ""

    def write_connection_string(self, key: str, value: str, provider_name: str = "") -> None:
        _require_key(key)
        doc = self._load()
        doc.put_connection_string(
            ConnectionStringRecord(name=key, connection_string=value, provider_name=provider_name)
        )
        self._store.save(doc)
        logger.debug("CONFIG WRITE: connectionStrings[%s] in %s", key, self._path)


def set_app_setting(path: PathLike, key: str, value: str) -> None:
    """Set one appSettings entry in an existing settings file."""
    _require_key(key)
    store = DiskSettingsDocumentStore(Path(path))
    doc = store.load()
    doc.put_app_setting(key, value)
    store.save(doc)


def set_connection_string(path: PathLike, key: str, value: str) -> None:
    """
    Replace the connection string of an existing entry, keeping its provider
    name. The entry has to exist already; a brand-new connection string cannot
    be added this way.
    """
    _require_key(key)
    store = DiskSettingsDocumentStore(Path(path))
    doc = store.load()
    existing = doc.get_connection_string(key)
    if existing is None:
        raise ConnectionStringNotFoundError(key, store.path)
    doc.put_connection_string(
        ConnectionStringRecord(name=key, connection_string=value, provider_name=existing.provider_name)
    )
    store.save(doc)


def set_app_settings(path: PathLike, settings: Mapping[str, str]) -> None:
    # One load/save per entry; a failure leaves earlier entries persisted.
    for key, value in settings.items():
        set_app_setting(path, key, value)


def set_connection_strings(path: PathLike, connection_strings: Mapping[str, str]) -> None:
    for key, value in connection_strings.items():
        set_connection_string(path, key, value)


def set_json_connection_string(path: PathLike, key: str, value: str, *, indent: int | None = None) -> None:
    """Set ``ConnectionStrings[key]`` in a JSON configuration file."""
    _require_key(key)
    store = DiskJsonDocumentStore(Path(path), indent=_json_indent(indent))
    doc = store.load()
    assign_path(doc, (JSON_CONNECTION_STRINGS, key), str(value), key=f"{JSON_CONNECTION_STRINGS}:{key}")
    store.save(doc)


def set_json_value(path: PathLike, key: str, value: Any, *, indent: int | None = None) -> None:
    """
    Set a nested value in a JSON configuration file.

    ``key`` is colon-delimited, e.g. ``Logging:LogLevel:Default``, at most five
    segments deep. ints and bools are stored as-is, every other value as its
    string form. Intermediate objects must already exist.
    """
    segments = parse_key_path(key)
    coerced = coerce_value(value)
    store = DiskJsonDocumentStore(Path(path), indent=_json_indent(indent))
    doc = store.load()
    assign_path(doc, segments, coerced, key=key)
    store.save(doc)
    logger.debug("JSON WRITE: %s=%r in %s", key, coerced, store.path)

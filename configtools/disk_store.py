from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .interfaces import DocumentStore
from .json_store import atomic_write_bytes, atomic_write_json, read_json, require_file
from .settings_document import SettingsDocument

logger = logging.getLogger(__name__)


class DiskSettingsDocumentStore(DocumentStore):
    """
    Stores an app.config settings document on disk at a fixed path.

    - load() raises ConfigFileNotFoundError when the file is missing.
    - Writes atomically (temp file + replace).
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> SettingsDocument:
        raw = require_file(self._path).read_bytes()
        logger.debug("CONFIG READ: %s (%d bytes)", self._path, len(raw))
        return SettingsDocument.from_xml(raw)

    def save(self, doc: SettingsDocument) -> None:
        atomic_write_bytes(self._path, doc.to_xml())
        logger.debug("CONFIG WRITE: %s", self._path)


class DiskJsonDocumentStore(DocumentStore):
    """
    Stores a single JSON document on disk at a fixed path.

    Key order is preserved on save and output is indented.
    """

    def __init__(self, path: Path, *, indent: int = 2):
        self._path = Path(path)
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> Any:
        doc = read_json(self._path)
        logger.debug("JSON READ: %s", self._path)
        return doc

    def save(self, doc: Any) -> None:
        atomic_write_json(self._path, doc, indent=self._indent)
        logger.debug("JSON WRITE: %s", self._path)

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import ConfigFileNotFoundError


def require_file(path: Path) -> Path:
    if not path.is_file():
        raise ConfigFileNotFoundError(path)
    return path


def read_json(path: Path) -> Any:
    """
    Read JSON from disk.

    Raises ConfigFileNotFoundError for missing files. Malformed JSON is not
    masked: json.JSONDecodeError reaches the caller.
    """
    raw = require_file(path).read_text(encoding="utf-8-sig")
    return json.loads(raw)


def atomic_write_bytes(path: Path, payload: bytes) -> None:
    """
    Atomically write bytes to disk by writing to a temp file then replacing.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("wb") as f:
        f.write(payload)
    tmp_path.replace(path)


def atomic_write_json(path: Path, payload: Any, *, indent: int = 2, sort_keys: bool = False) -> None:
    text = json.dumps(payload, indent=indent, sort_keys=sort_keys, ensure_ascii=False) + "\n"
    atomic_write_bytes(path, text.encode("utf-8"))

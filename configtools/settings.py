from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())


@dataclass(frozen=True)
class Settings:
    # Install root; the conventional settings file lives beneath it
    base_dir: Path
    config_dir_name: str
    config_file_name: str

    # JSON output
    json_indent: int

    @property
    def config_path(self) -> Path:
        return self.base_dir / self.config_dir_name / self.config_file_name


def get_settings(env_file: str | os.PathLike[str] | None = None) -> Settings:
    if env_file is not None:
        load_dotenv(env_file)

    raw_base = os.getenv("CONFIGTOOLS_BASE_DIR", "").strip()
    base_dir = Path(raw_base).expanduser() if raw_base else Path.cwd()

    config_dir_name = os.getenv("CONFIGTOOLS_CONFIG_DIR", "config").strip() or "config"
    config_file_name = os.getenv("CONFIGTOOLS_CONFIG_FILE", "app.config").strip() or "app.config"

    json_indent = _env_int("CONFIGTOOLS_JSON_INDENT", 2)

    return Settings(
        base_dir=base_dir,
        config_dir_name=config_dir_name,
        config_file_name=config_file_name,
        json_indent=json_indent,
    )

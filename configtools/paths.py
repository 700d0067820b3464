from __future__ import annotations

from pathlib import Path

CONFIG_DIR_NAME = "config"
CONFIG_FILE_NAME = "app.config"


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def config_dir(base_dir: Path, dir_name: str = CONFIG_DIR_NAME) -> Path:
    return Path(base_dir) / dir_name


def conventional_config_path(
    base_dir: Path,
    dir_name: str = CONFIG_DIR_NAME,
    file_name: str = CONFIG_FILE_NAME,
) -> Path:
    # <base_dir>/config/app.config
    return config_dir(base_dir, dir_name) / file_name

from __future__ import annotations

import asyncio
from typing import Any, Mapping, Protocol

from . import store as _sync
from .settings import Settings
from .store import ConfigStore, PathLike


class AsyncSettingsRepository(Protocol):
    async def ensure_exists(self): ...

    async def read_setting(self, key: str) -> str: ...
    async def write_setting(self, key: str, value: str) -> None: ...

    async def read_connection_string(self, key: str) -> str: ...
    async def write_connection_string(self, key: str, value: str, provider_name: str = "") -> None: ...


class AsyncConfigStore(AsyncSettingsRepository):
    """
    Async wrapper around ConfigStore.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O; it
    adds no coordination between concurrent callers.
    """

    def __init__(self, base_dir: PathLike, **kwargs: str) -> None:
        self._store = ConfigStore(base_dir, **kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AsyncConfigStore":
        return cls(
            settings.base_dir,
            config_dir_name=settings.config_dir_name,
            config_file_name=settings.config_file_name,
        )

    @property
    def sync(self) -> ConfigStore:
        return self._store

    async def ensure_exists(self):
        return await asyncio.to_thread(self._store.ensure_exists)

    async def read_setting(self, key: str) -> str:
        return await asyncio.to_thread(self._store.read_setting, key)

    async def write_setting(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._store.write_setting, key, value)

    async def read_connection_string(self, key: str) -> str:
        return await asyncio.to_thread(self._store.read_connection_string, key)

    async def write_connection_string(self, key: str, value: str, provider_name: str = "") -> None:
        await asyncio.to_thread(self._store.write_connection_string, key, value, provider_name)


async def set_app_setting(path: PathLike, key: str, value: str) -> None:
    await asyncio.to_thread(_sync.set_app_setting, path, key, value)


async def set_connection_string(path: PathLike, key: str, value: str) -> None:
    await asyncio.to_thread(_sync.set_connection_string, path, key, value)


async def set_app_settings(path: PathLike, settings: Mapping[str, str]) -> None:
    for key, value in settings.items():
        await set_app_setting(path, key, value)


async def set_connection_strings(path: PathLike, connection_strings: Mapping[str, str]) -> None:
    for key, value in connection_strings.items():
        await set_connection_string(path, key, value)


async def set_json_connection_string(path: PathLike, key: str, value: str, *, indent: int | None = None) -> None:
    await asyncio.to_thread(_sync.set_json_connection_string, path, key, value, indent=indent)


async def set_json_value(path: PathLike, key: str, value: Any, *, indent: int | None = None) -> None:
    await asyncio.to_thread(_sync.set_json_value, path, key, value, indent=indent)

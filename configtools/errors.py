from __future__ import annotations


class ConfigToolsError(Exception):
    """Base class for every error raised by configtools."""


class InvalidArgumentError(ConfigToolsError, ValueError):
    pass


class KeyDepthExceededError(InvalidArgumentError):
    def __init__(self, depth: int, maximum: int):
        super().__init__(f"Key depth of {depth} exceeds the maximum of {maximum}")
        self.depth = depth
        self.maximum = maximum


class ConfigFileNotFoundError(ConfigToolsError, FileNotFoundError):
    def __init__(self, path):
        super().__init__(f"The configuration file {path} was not found!")
        self.path = str(path)


class NotFoundError(ConfigToolsError, LookupError):
    pass


class ConnectionStringNotFoundError(NotFoundError):
    def __init__(self, name: str, path):
        super().__init__(f"No connection string named {name!r} exists in {path}")
        self.name = name


class KeyPathNotFoundError(NotFoundError):
    def __init__(self, key_path: str, segment: str, reason: str = "does not exist"):
        super().__init__(f"Segment {segment!r} of key path {key_path!r} {reason}")
        self.key_path = key_path
        self.segment = segment

from __future__ import annotations

from typing import Any

from .errors import InvalidArgumentError, KeyDepthExceededError, KeyPathNotFoundError

MAX_KEY_DEPTH = 5
SEPARATOR = ":"


def parse_key_path(key: str, *, max_depth: int = MAX_KEY_DEPTH) -> tuple[str, ...]:
    """
    Split a colon-delimited key such as ``Logging:LogLevel:Default`` into its
    segments. Segments are case-sensitive and there is no escape for a literal
    colon.
    """
    if key is None or not str(key).strip():
        raise InvalidArgumentError("Key cannot be empty")
    segments = tuple(str(key).split(SEPARATOR))
    if len(segments) > max_depth:
        raise KeyDepthExceededError(len(segments), max_depth)
    return segments


def coerce_value(value: Any) -> bool | int | str:
    """
    Integers and booleans are kept as JSON numbers/booleans; anything else is
    written as its string form (so 3.14 becomes "3.14").
    """
    if value is None:
        raise InvalidArgumentError("Value cannot be None")
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    return str(value)


def _child(node: Any, segment: str, key: str) -> Any:
    if isinstance(node, dict):
        if segment not in node:
            raise KeyPathNotFoundError(key, segment)
        return node[segment]
    if isinstance(node, list):
        return node[_index(node, segment, key)]
    raise KeyPathNotFoundError(key, segment, "is below a value that is not an object or array")


def _index(node: list, segment: str, key: str) -> int:
    try:
        idx = int(segment)
    except ValueError:
        raise KeyPathNotFoundError(key, segment, "is not a valid array index") from None
    if not 0 <= idx < len(node):
        raise KeyPathNotFoundError(key, segment, "is out of range")
    return idx


def assign_path(doc: Any, segments: tuple[str, ...], value: Any, *, key: str | None = None) -> Any:
    """
    Walk ``doc`` along every segment but the last and assign ``value`` there.

    Intermediate nodes must already exist; they are never created. The last
    segment may introduce a new key on an object but must be an existing index
    on an array. Returns ``doc`` (mutated in place).
    """
    key = key if key is not None else SEPARATOR.join(segments)
    node = doc
    for segment in segments[:-1]:
        node = _child(node, segment, key)

    last = segments[-1]
    if isinstance(node, dict):
        node[last] = value
    elif isinstance(node, list):
        node[_index(node, last, key)] = value
    else:
        raise KeyPathNotFoundError(key, last, "is below a value that is not an object or array")
    return doc

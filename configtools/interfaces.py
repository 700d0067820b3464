from __future__ import annotations

from typing import Any, Protocol


class DocumentStore(Protocol):
    """
    A single configuration document persisted at a fixed location.
    """

    def exists(self) -> bool:
        ...

    def load(self) -> Any:
        """Load and return the full document, fresh from storage."""
        ...

    def save(self, doc: Any) -> None:
        """Persist the full document in one write."""
        ...

"""Cursor - explicit, restartable iteration over a container.

The container keeps no iteration position. Each cursor owns its own position
over a snapshot of the container's entries, so two cursors never interfere.
"""

from collections.abc import Hashable
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from .base import AbstractCollection


class Cursor:
    """Forward cursor exposing current/key/next/valid/rewind."""

    def __init__(self, container: "AbstractCollection"):
        self._container = container
        self._entries: list[tuple[Hashable, Any]] = []
        self._position = 0
        self.rewind()

    def rewind(self) -> None:
        """Reset to the first entry, picking up any changes to the container."""
        self._entries = self._container.items()
        self._position = 0

    def valid(self) -> bool:
        return self._position < len(self._entries)

    def current(self) -> Any:
        """Value at the cursor, or None when the cursor is exhausted."""
        if not self.valid():
            return None
        return self._entries[self._position][1]

    def key(self) -> Hashable | None:
        """Key at the cursor, or None when the cursor is exhausted."""
        if not self.valid():
            return None
        return self._entries[self._position][0]

    def next(self) -> None:
        if self.valid():
            self._position += 1

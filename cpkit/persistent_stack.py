"""Stack whose states can be saved and restored by version number."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    parent: Optional["_Node"]


class PersistentStack:
    """A stack where every state stays reachable through saved versions."""

    def __init__(self) -> None:
        self._root = _Node(None, None)
        self._current = self._root
        self._versions: dict[int, _Node] = {}

    def push(self, x) -> None:
        self._current = _Node(x, self._current)

    def pop(self) -> None:
        """Drop the top element; an empty stack stays empty."""
        if self._current.parent is not None:
            self._current = self._current.parent

    def save(self, version: int) -> None:
        self._versions[version] = self._current

    def load(self, version: int) -> None:
        """Restore a saved state; unknown versions give the empty stack."""
        self._current = self._versions.get(version, self._root)

    def peek(self):
        if self._current is self._root:
            raise IndexError("peek at an empty stack")
        return self._current.value

    def __len__(self) -> int:
        size, node = 0, self._current
        while node.parent is not None:
            size += 1
            node = node.parent
        return size
"""Doubly linked list with a head sentinel."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ordlists.linked_list import _Node, _NodeChain


class DoubleLinkedList(_NodeChain):
    """A doubly linked list addressed by 1-based position."""

    def __init__(self) -> None:
        self._head = _Node(None)

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the item at ``position``."""
        self._link_after(self._seek(self._head, position - 1, "insert", position), value)

    def delete(self, position: int) -> Any:
        """Remove the item at ``position`` and return it."""
        return self._unlink(self._seek(self._head, position, "delete", position))

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __reversed__(self) -> Iterator[Any]:
        return self._values_back(self._last_node())

    def __str__(self) -> str:
        return self._render()
"""Circular singly linked list with a head sentinel."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ordlists.linked_list import _Node, _NodeChain


class CyclicLinkedList(_NodeChain):
    """A circular singly linked list addressed by 1-based position."""

    def __init__(self) -> None:
        self._head = _Node(None)
        self._head.next = self._head
        self._end = self._head

    def is_empty(self) -> bool:
        """Return True when the list holds no items."""
        return self._head.next is self._head

    def is_tail(self, position: int) -> bool:
        """Return True when the item at ``position`` is the last one."""
        return self._seek(self._head, position, "query", position).next is self._head

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the item at ``position``."""
        self._push_after(self._seek(self._head, position - 1, "insert", position), value)

    def delete(self, position: int) -> Any:
        """Remove the item at ``position`` and return it."""
        prev = self._seek(self._head, position - 1, "delete", position)
        return self._pop_after(prev, position)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __str__(self) -> str:
        return self._render()
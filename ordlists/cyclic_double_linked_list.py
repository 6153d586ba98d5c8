"""Circular doubly linked list with a head sentinel."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ordlists.double_linked_list import DoubleLinkedList
from ordlists.linked_list import _Node


class CyclicDoubleLinkedList(DoubleLinkedList):
    """A circular doubly linked list addressed by 1-based position."""

    def __init__(self) -> None:
        super().__init__()
        self._head.prior = self._head
        self._head.next = self._head
        self._end = self._head

    def _last_node(self) -> _Node:
        return self._head.prior

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the item at ``position``."""
        super().insert(position, value)

    def delete(self, position: int) -> Any:
        """Remove the item at ``position`` and return it."""
        return super().delete(position)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __reversed__(self) -> Iterator[Any]:
        return self._values_back(self._last_node())

    def __str__(self) -> str:
        return self._render()
"""Singly linked list without a head sentinel."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from ordlists.linked_list import _Node, _NodeChain


class HeadlessLinkedList(_NodeChain):
    """A singly linked list whose first node is referenced directly."""

    def __init__(self) -> None:
        self._first: Optional[_Node] = None

    def _first_node(self) -> Optional[_Node]:
        return self._first

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the item at 1-based ``position``."""
        if position == 1:
            self._first = _Node(value, self._first)
            return
        prev = self._seek(self._first, position - 2, "insert", position)
        self._push_after(prev, value)

    def delete(self, position: int) -> Any:
        """Remove the item at 1-based ``position`` and return it."""
        if position == 1 and self._first is not None:
            target = self._first
            self._first = target.next
            return target.value
        prev = self._seek(self._first, position - 2, "delete", position)
        return self._pop_after(prev, position)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __str__(self) -> str:
        return self._render()
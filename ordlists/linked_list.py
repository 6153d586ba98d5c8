"""Singly linked list with a head sentinel, and the node machinery it shares."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "next", "prior")

    def __init__(
        self,
        value: Any,
        next: Optional[_Node] = None,
        prior: Optional[_Node] = None,
    ) -> None:
        self.value = value
        self.next = next
        self.prior = prior


def _range_error(action: str, position: int) -> IndexError:
    return IndexError(f"{action} position {position} out of range")


class _NodeChain:
    """Common walking, linking and rendering for node-based lists."""

    _end: Optional[_Node] = None
    _head: _Node

    def _first_node(self) -> Optional[_Node]:
        return self._head.next

    def _last_node(self) -> _Node:
        node = self._head
        while node.next is not self._end:
            node = node.next
        return node

    def _walk(self, node: _Node, steps: int) -> Optional[_Node]:
        """Follow ``steps`` links from ``node``; None if the end is reached."""
        for _ in range(steps):
            node = node.next
            if node is self._end:
                return None
        return node

    def _seek(
        self, start: Optional[_Node], steps: int, action: str, position: int
    ) -> _Node:
        """Walk ``steps`` links from ``start`` or raise IndexError for ``position``."""
        node = None
        if position >= 1 and steps >= 0 and start is not None:
            node = self._walk(start, steps)
        if node is None:
            raise _range_error(action, position)
        return node

    @staticmethod
    def _push_after(prev: _Node, value: Any) -> None:
        prev.next = _Node(value, prev.next)

    def _pop_after(self, prev: _Node, position: int) -> Any:
        target = prev.next
        if target is self._end:
            raise _range_error("delete", position)
        prev.next = target.next
        return target.value

    @staticmethod
    def _link_after(prev: _Node, value: Any) -> None:
        node = _Node(value, next=prev.next, prior=prev)
        if prev.next is not None:
            prev.next.prior = node
        prev.next = node

    @staticmethod
    def _unlink(node: _Node) -> Any:
        node.prior.next = node.next
        if node.next is not None:
            node.next.prior = node.prior
        return node.value

    def _values_back(self, node: _Node) -> Iterator[Any]:
        while node is not self._head:
            yield node.value
            node = node.prior

    def _values(self) -> Iterator[Any]:
        node = self._first_node()
        while node is not self._end:
            yield node.value
            node = node.next

    def _render(self) -> str:
        return " ".join(map(str, self._values()))


class LinkedList(_NodeChain):
    """A singly linked list supporting insertion at either end."""

    def __init__(self) -> None:
        self._head = _Node(None)

    def head_insert(self, value: Any) -> None:
        """Insert ``value`` as the first item."""
        self._push_after(self._head, value)

    def tail_insert(self, value: Any) -> None:
        """Append ``value`` as the last item."""
        self._push_after(self._last_node(), value)

    def delete(self, position: int) -> Any:
        """Remove the item at 1-based ``position`` and return it."""
        prev = self._seek(self._head, position - 1, "delete", position)
        return self._pop_after(prev, position)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __str__(self) -> str:
        return self._render()
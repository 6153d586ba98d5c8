"""Sequential list backed by storage of fixed capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

MAX_SIZE = 100


class StaticSeqList:
    """An ordered list of at most ``capacity`` items addressed by 1-based position."""

    capacity: int = MAX_SIZE

    def __init__(self) -> None:
        self._items: list[Any] = []

    def _check(self, position: int, limit: int, action: str) -> None:
        if not 1 <= position <= limit:
            raise IndexError(f"{action} position {position} out of range")

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the item at ``position``."""
        self._check(position, len(self._items) + 1, "insert")
        if len(self._items) >= self.capacity:
            raise OverflowError(f"list is full ({self.capacity} items)")
        self._items.insert(position - 1, value)

    def delete(self, position: int) -> Any:
        """Remove the item at ``position`` and return it."""
        self._check(position, len(self._items), "delete")
        return self._items.pop(position - 1)

    def locate(self, value: Any) -> int:
        """Return the position of the first item equal to ``value``, or 0."""
        return next(
            (pos for pos, item in enumerate(self._items, start=1) if item == value),
            0,
        )

    def get(self, position: int) -> Any:
        """Return the item at ``position``."""
        self._check(position, len(self._items), "get")
        return self._items[position - 1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(map(str, self._items))
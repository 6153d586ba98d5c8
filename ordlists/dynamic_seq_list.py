"""Sequential list whose capacity can be enlarged."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ordlists.static_seq_list import StaticSeqList


class DynamicSeqList(StaticSeqList):
    """A sequential list whose capacity is chosen at creation and can grow."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"capacity must not be negative, got {size}")
        super().__init__()
        self.capacity = size

    def increase_size(self, amount: int) -> None:
        """Grow the capacity by ``amount`` items, keeping the stored items."""
        new_capacity = self.capacity + amount
        if new_capacity < len(self):
            raise ValueError(f"capacity {new_capacity} cannot hold {len(self)} items")
        self.capacity = new_capacity

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the item at 1-based ``position``."""
        super().insert(position, value)

    def delete(self, position: int) -> Any:
        """Remove the item at 1-based ``position`` and return it."""
        return super().delete(position)

    def locate(self, value: Any) -> int:
        """Return the 1-based position of the first ``value``, or 0 if absent."""
        return super().locate(value)

    def get(self, position: int) -> Any:
        """Return the item at 1-based ``position``."""
        return super().get(position)

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __str__(self) -> str:
        return super().__str__()
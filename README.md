# ordlists

Ordered list structures addressed by 1-based positions, in several classic
shapes. Each class lives in its own module:

| Module | Class | Shape |
|--------|-------|-------|
| `ordlists.static_seq_list` | `StaticSeqList` | array-backed list with a fixed capacity of 100 |
| `ordlists.dynamic_seq_list` | `DynamicSeqList` | array-backed list whose capacity is chosen at creation and can grow |
| `ordlists.linked_list` | `LinkedList` | singly linked list with a head node; insert at the front or the back |
| `ordlists.headless_linked_list` | `HeadlessLinkedList` | singly linked list without a head node |
| `ordlists.double_linked_list` | `DoubleLinkedList` | doubly linked list with a head node |
| `ordlists.cyclic_linked_list` | `CyclicLinkedList` | circular singly linked list |
| `ordlists.cyclic_double_linked_list` | `CyclicDoubleLinkedList` | circular doubly linked list |

## Positions and errors

Positions count from 1. `insert(position, value)` places the value so that it
becomes the item at `position`; any position from 1 up to length + 1 is valid.
`delete(position)` removes the item at `position` and returns its value.

A position out of range raises `IndexError` and leaves the list unchanged.

## Sequential lists

`StaticSeqList()` holds at most 100 items; inserting into a full list raises
`OverflowError`. Besides `insert` and `delete` it offers `locate(value)`, the
position of the first equal item or 0 when there is none, `get(position)`,
and `len()`.

```python
from ordlists.static_seq_list import StaticSeqList

seq = StaticSeqList()
for position, value in enumerate([1, 2, 3, 4, 5], start=1):
    seq.insert(position, value)
print(seq)            # 1 2 3 4 5
seq.delete(1)         # returns 1
print(seq.locate(3))  # 2
print(seq.get(1))     # 2
print(len(seq))       # 4
```

`DynamicSeqList(size)` works the same way with a capacity of `size` items
(a negative size raises `ValueError`). `increase_size(amount)` changes the
capacity by `amount`, keeping the stored items; it raises `ValueError` if the
new capacity could not hold them.

```python
from ordlists.dynamic_seq_list import DynamicSeqList

seq = DynamicSeqList(2)
seq.insert(1, 10)
seq.insert(2, 20)
seq.increase_size(3)  # room for three more
seq.insert(3, 30)
print(seq)            # 10 20 30
```

## Linked lists

`LinkedList` has `head_insert(value)`, `tail_insert(value)` and
`delete(position)`:

```python
from ordlists.linked_list import LinkedList

items = LinkedList()
for value in (1, 2, 3):
    items.head_insert(value)
for value in (4, 5, 6):
    items.tail_insert(value)
print(items)          # 3 2 1 4 5 6
items.delete(6)       # returns 6
```

`HeadlessLinkedList`, `DoubleLinkedList`, `CyclicLinkedList` and
`CyclicDoubleLinkedList` have `insert(position, value)` and `delete(position)`.
The two doubly linked lists can also be walked backwards with `reversed()`.
`CyclicLinkedList` adds `is_empty()` and `is_tail(position)`, which tells
whether the item at `position` is the last one.

```python
from ordlists.cyclic_double_linked_list import CyclicDoubleLinkedList

ring = CyclicDoubleLinkedList()
ring.insert(1, 1)
ring.insert(2, 2)
ring.insert(1, 4)
print(list(ring))            # [4, 1, 2]
print(list(reversed(ring)))  # [2, 1, 4]
```

Every list iterates over its values in order, and `str()` gives them
separated by single spaces. The linked lists do not support `len()`.

## What it does not do

This is a library only: it has no command-line program, and the lists live
in memory with no way to save or load them.

## Running the tests

```
pip install -e .[test]
pytest
```
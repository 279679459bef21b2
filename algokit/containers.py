"""Bounded and growable containers: vector, stack, queues, deque and a triple stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class ContainerError(Exception):
    """Base class for container errors."""


class ContainerFullError(ContainerError, OverflowError):
    """Raised when an item is added to a container that has no room left."""


class ContainerEmptyError(ContainerError, IndexError):
    """Raised when an item is read or removed from an empty container."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class Vector:
    """Growable array whose capacity doubles whenever it runs out of room."""

    def __init__(self, capacity: int = 1) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def _make_room(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity *= 2

    def push_back(self, item: Any) -> None:
        self._make_room()
        self._items.append(item)

    def pop_back(self) -> Any:
        if not self._items:
            raise ContainerEmptyError("pop from an empty vector")
        return self._items.pop()

    def front(self) -> Any:
        if not self._items:
            raise ContainerEmptyError("empty vector has no front")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise ContainerEmptyError("empty vector has no back")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def capacity(self) -> int:
        return self._capacity

    def clear(self) -> None:
        """Drop every item and shrink the capacity back to one."""
        self._items = []
        self._capacity = 1

    def insert(self, pos: int, item: Any) -> None:
        """Insert *item* before position *pos*; *pos* may equal the length."""
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"insert position {pos} out of range")
        self._make_room()
        self._items.insert(pos, item)

    def erase(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"erase position {pos} out of range")
        del self._items[pos]

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"


class Stack:
    """Unbounded last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        self._items.append(item)

    def top(self) -> Any:
        if not self._items:
            raise ContainerEmptyError("empty stack has no top")
        return self._items[-1]

    def pop(self) -> Any:
        if not self._items:
            raise ContainerEmptyError("pop from an empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class CircularQueue:
    """First-in, first-out queue holding at most *capacity* items."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        if self.is_full():
            raise ContainerFullError("queue overflow")
        self._items.append(item)

    def dequeue(self) -> Any:
        if not self._items:
            raise ContainerEmptyError("queue underflow")
        return self._items.popleft()

    def front(self) -> Any:
        if not self._items:
            raise ContainerEmptyError("empty queue has no front")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class BoundedDeque:
    """Double-ended queue holding at most *capacity* items."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    def push_front(self, item: Any) -> None:
        if self.is_full():
            raise ContainerFullError("deque overflow")
        self._items.appendleft(item)

    def push_rear(self, item: Any) -> None:
        if self.is_full():
            raise ContainerFullError("deque overflow")
        self._items.append(item)

    def pop_front(self) -> Any:
        if not self._items:
            raise ContainerEmptyError("deque underflow")
        return self._items.popleft()

    def pop_rear(self) -> Any:
        if not self._items:
            raise ContainerEmptyError("deque underflow")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class PriorityQueue:
    """Bounded queue kept in ascending priority order; lowest priority leaves first.

    Items are rearranged with an exchange sort after every insertion, so items
    of equal priority are not guaranteed to keep their insertion order.
    """

    def __init__(self, capacity: int = 10) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[tuple[Any, int]] = []

    def _arrange(self) -> None:
        items = self._items
        for i in range(len(items)):
            for j in range(i + 1, len(items)):
                if items[i][1] > items[j][1]:
                    items[i], items[j] = items[j], items[i]

    def enqueue(self, value: Any, priority: int) -> None:
        if self.is_full():
            raise ContainerFullError("priority queue overflow")
        self._items.append((value, priority))
        self._arrange()

    def dequeue(self) -> tuple[Any, int]:
        """Remove and return the front ``(value, priority)`` pair."""
        if not self._items:
            raise ContainerEmptyError("priority queue underflow")
        return self._items.pop(0)

    def front(self) -> tuple[Any, int]:
        if not self._items:
            raise ContainerEmptyError("empty priority queue has no front")
        return self._items[0]

    def rear(self) -> tuple[Any, int]:
        if not self._items:
            raise ContainerEmptyError("empty priority queue has no rear")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[Any, int]]:
        return iter(list(self._items))


class TripleStack:
    """Three stacks laid out over one index range of *size* slots.

    Stack 1 grows up from the start, stack 2 grows down from the end and
    stack 3 grows up from *middle_start*. A stack is full when its top would
    run into a neighbour's, following the layout rules of the original design.
    """

    def __init__(self, size: int = 20, middle_start: int = 3) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        if not 0 <= middle_start < size:
            raise ValueError("middle_start must lie inside the range")
        self._size = size
        self._middle_start = middle_start
        self._stacks: dict[int, list[Any]] = {1: [], 2: [], 3: []}

    def _stack(self, which: int) -> list[Any]:
        try:
            return self._stacks[which]
        except KeyError:
            raise ValueError(f"no stack number {which}; use 1, 2 or 3") from None

    @property
    def _top1(self) -> int:
        return len(self._stacks[1]) - 1

    @property
    def _top2(self) -> int:
        return self._size - len(self._stacks[2])

    @property
    def _top3(self) -> int:
        return self._middle_start - 1 + len(self._stacks[3])

    def is_full(self, which: int) -> bool:
        self._stack(which)
        middle_used = bool(self._stacks[3])
        ends_meet = self._top2 == self._top1 + 1
        if which == 1:
            return (middle_used and self._top1 == self._middle_start) or ends_meet
        if which == 2:
            return (middle_used and self._top2 == self._top3 + 1) or ends_meet
        return self._top2 == self._top3 + 1

    def is_empty(self, which: int) -> bool:
        return not self._stack(which)

    def push(self, which: int, item: Any) -> None:
        stack = self._stack(which)
        if self.is_full(which):
            raise ContainerFullError(f"stack {which} is full")
        stack.append(item)

    def pop(self, which: int) -> Any:
        stack = self._stack(which)
        if not stack:
            raise ContainerEmptyError(f"stack {which} is empty")
        return stack.pop()

    def items(self, which: int) -> list[Any]:
        """Return the items of one stack from bottom to top."""
        return list(self._stack(which))
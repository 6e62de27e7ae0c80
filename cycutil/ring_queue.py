"""A FIFO ring queue that either grows on demand or keeps a fixed capacity."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

WalkFunc = Callable[[int, T], bool]


class RingQueue(Generic[T]):
    """A first-in first-out queue backed by a ring.

    With ``fixed_capacity`` of zero the queue grows automatically, doubling
    its ring size whenever it runs out of room. With a positive
    ``fixed_capacity`` the queue never grows; pushing into a full queue
    discards the oldest element instead.
    """

    DEFAULT_CAPACITY = 32 - 1

    def __init__(self, fixed_capacity: int = 0) -> None:
        if fixed_capacity < 0:
            raise ValueError("fixed_capacity must not be negative")
        self._fixed = fixed_capacity > 0
        # Number of slots in the ring; one slot always stays unused.
        self._end = fixed_capacity + 1 if self._fixed else self.DEFAULT_CAPACITY + 1
        self._items: Deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += len(self._items)
        return self.get(index)

    def __repr__(self) -> str:
        kind = "fixed" if self._fixed else "auto"
        return f"RingQueue({list(self._items)!r}, capacity={self.capacity()}, {kind})"

    def reset(self) -> None:
        """Remove every element."""
        self._items.clear()

    def capacity(self) -> int:
        """Number of elements the queue holds before it must grow or drop."""
        return self._end - 1

    def free_size(self) -> int:
        """Number of elements that can still be pushed without growing."""
        return self.capacity() - len(self._items)

    def empty(self) -> bool:
        return not self._items

    def push(self, value: T) -> None:
        """Append ``value`` at the back of the queue."""
        if self.free_size() == 0:
            self._make_room(1)
        self._items.append(value)

    def front(self) -> T:
        """The oldest element."""
        if not self._items:
            raise IndexError("front of an empty RingQueue")
        return self._items[0]

    def back(self) -> T:
        """The newest element."""
        if not self._items:
            raise IndexError("back of an empty RingQueue")
        return self._items[-1]

    def get(self, index: int) -> T:
        """The element ``index`` places behind the front."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"RingQueue index {index} out of range")
        return self._items[index]

    def pop(self, count: int = 1) -> None:
        """Discard ``count`` elements from the front; all of them if fewer remain."""
        if count >= len(self._items):
            self.reset()
            return
        for _ in range(count):
            self._items.popleft()

    def walk(self, func: Optional[WalkFunc]) -> None:
        """Call ``func(index, value)`` front to back until it returns false."""
        if func is None:
            return
        for index, value in enumerate(list(self._items)):
            if not func(index, value):
                return

    def walk_reverse(self, func: Optional[WalkFunc]) -> None:
        """Call ``func(index, value)`` back to front until it returns false."""
        if func is None:
            return
        snapshot = list(self._items)
        for index in range(len(snapshot) - 1, -1, -1):
            if not func(index, snapshot[index]):
                return

    def _make_room(self, more: int) -> None:
        free = self.free_size()
        if free >= more:
            return
        if self._fixed:
            self.pop(more - free)
            return
        need = more + len(self._items) + 1
        new_size = 2
        while new_size < need:
            new_size *= 2
        self._end = new_size
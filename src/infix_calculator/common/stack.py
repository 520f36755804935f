"""Minimal LIFO stack used by the converter and the evaluator."""
from typing import Generic, Iterator, List, TypeVar


T = TypeVar("T")


class Stack(Generic[T]):
    """
    Last-in, first-out container with ``push``, ``pop`` and ``peek``.

    Popping or peeking an empty stack raises ``IndexError``, like ``list.pop``.
    """

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        """Put an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """
        Remove and return the top item.

        :return: Top item
        :raises IndexError: If the stack is empty
        """
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """
        Return the top item without removing it.

        :return: Top item
        :raises IndexError: If the stack is empty
        """
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        # Bottom to top
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

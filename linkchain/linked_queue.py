"""A queue built on a chain of linked nodes."""

from collections.abc import Iterable, Iterator

from linkchain.singly import _Chain, _Node, _require, _values


class LinkedQueue(_Chain):
    """First-in, first-out queue; iteration runs from front to rear."""

    def __init__(self, items: Iterable[int] | None = None) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        super().__init__(items, self.enqueue)

    def __iter__(self) -> Iterator[int]:
        return _values(self._front)

    def __len__(self) -> int:
        """Return the number of queued values."""
        return self._size

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        new = _Node(value)
        if self._rear is None:
            self._front = new
        else:
            self._rear.next = new
        self._rear = new
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the front value."""
        value = self.peek()
        self._front = self._front.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return value

    def peek(self) -> int:
        """Return the front value without removing it."""
        return _require(self._front, "QUEUE IS EMPTY").value


def main(argv: list[str] | None = None) -> int:
    """Show a short enqueue, dequeue and peek sequence."""
    queue = LinkedQueue([5, 4, -3])
    print(*queue)
    print(f"Popped element is:{queue.dequeue()}")
    print(*queue)
    print(f"The front element of queue is:{queue.peek()}")
    return 0
"""A stack built on a chain of linked nodes."""

from collections.abc import Iterable, Iterator

from linkchain.singly import _Chain, _Node, _require, _values


class LinkedStack(_Chain):
    """Last-in, first-out stack; iteration runs from the top down."""

    def __init__(self, items: Iterable[int] | None = None) -> None:
        self._top: _Node | None = None
        super().__init__(items, self.push)

    def __iter__(self) -> Iterator[int]:
        return _values(self._top)

    def __len__(self) -> int:
        """Return the number of stacked values."""
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)[::-1]!r})"

    def push(self, value: int) -> None:
        """Place ``value`` on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        value = self.peek()
        self._top = self._top.next
        self._size -= 1
        return value

    def peek(self) -> int:
        """Return the top value without removing it."""
        return _require(self._top, "Stack is empty").value


def main(argv: list[str] | None = None) -> int:
    """Show a short push, peek and pop sequence."""
    stack = LinkedStack([2, 3, 4])
    print(*stack)
    print(f"The top element of stack is:{stack.peek()}")
    print(f"The popped element is:{stack.pop()}")
    print(*stack)
    return 0
"""A linked list kept in a fixed pool of slots with a free list."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO


class PoolExhaustedError(OverflowError):
    """Raised when no free slot is left in the pool."""


class StaticLinkedList:
    """A linked list whose nodes live in a preallocated array of slots."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._data = [0] * capacity
        self._next: list[int | None] = [*range(1, capacity), None]
        self._head: int | None = None
        self._avail: int | None = 0
        self._size = 0

    def _slots(self) -> Iterator[int]:
        index = self._head
        while index is not None:
            yield index
            index = self._next[index]

    def _find(self, ref: int) -> int | None:
        return next((i for i in self._slots() if self._data[i] == ref), None)

    def _take(self, value: int) -> int:
        if self._avail is None:
            raise PoolExhaustedError("Overflow: No available node.")
        index = self._avail
        self._avail = self._next[index]
        self._data[index] = value
        self._next[index] = None
        self._size += 1
        return index

    def _release(self, index: int) -> int:
        self._next[index] = self._avail
        self._avail = index
        self._size -= 1
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return (self._data[i] for i in self._slots())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    @property
    def capacity(self) -> int:
        return len(self._data)

    def prepend(self, value: int) -> None:
        """Add ``value`` at the beginning."""
        index = self._take(value)
        self._next[index] = self._head
        self._head = index

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        if self._head is None:
            self.prepend(value)
            return
        *_, last = self._slots()
        self._next[last] = self._take(value)

    def insert_after(self, value: int, ref: int) -> None:
        """Insert ``value`` after the first node holding ``ref``."""
        index = self._find(ref)
        if index is None:
            raise ValueError("Reference value not found.")
        new = self._take(value)
        self._next[new] = self._next[index]
        self._next[index] = new

    def pop_first(self) -> int:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("Underflow: List is empty.")
        index = self._head
        self._head = self._next[index]
        return self._release(index)

    def pop_last(self) -> int:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("Underflow: List is empty.")
        prev: int | None = None
        for index in self._slots():
            if self._next[index] is None:
                break
            prev = index
        if prev is None:
            self._head = None
        else:
            self._next[prev] = None
        return self._release(index)

    def delete_after(self, ref: int) -> int:
        """Remove and return the value following the first ``ref``."""
        if self._head is None:
            raise IndexError("Underflow: List is empty.")
        index = self._find(ref)
        if index is None or self._next[index] is None:
            raise ValueError("No element found after given reference.")
        victim = self._next[index]
        self._next[index] = self._next[victim]
        return self._release(victim)


_MENU = """
----- Static Linked List Menu -----
1. Insert at Beginning
2. Insert at End
3. Insert After a Value
4. Delete from Beginning
5. Delete from End
6. Delete After a Value
7. Display List
0. Exit"""


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError
    try:
        return int(token)
    except ValueError:
        raise EOFError from None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input."""
    chain = StaticLinkedList()
    tokens = _tokens(sys.stdin)
    while True:
        print(_MENU)
        try:
            choice = _ask(tokens, "Enter your choice: ")
            match choice:
                case 1:
                    chain.prepend(_ask(tokens, "Enter value to insert at beginning: "))
                case 2:
                    chain.append(_ask(tokens, "Enter value to insert at end: "))
                case 3:
                    value = _ask(tokens, "Enter value to insert: ")
                    ref = _ask(tokens, "Enter reference value after which to insert: ")
                    chain.insert_after(value, ref)
                case 4:
                    print(f"Deleted value: {chain.pop_first()}")
                case 5:
                    print(f"Deleted value: {chain.pop_last()}")
                case 6:
                    ref = _ask(tokens, "Enter reference value after which to delete: ")
                    print(f"Deleted value: {chain.delete_after(ref)}")
                case 7:
                    print("List: " + "".join(f"{value} " for value in chain))
                case 0:
                    print("Exiting...")
                    return 0
                case _:
                    print("Invalid choice. Try again.")
        except (ValueError, IndexError, PoolExhaustedError) as exc:
            print(exc)
        except EOFError:
            print()
            return 0


if __name__ == "__main__":
    sys.exit(main())
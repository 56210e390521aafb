"""A singly linked circular list of integers, with an interactive menu."""

from collections.abc import Iterable, Iterator

from linkchain.singly import _Ask, _Chain, _Node, _require, _serve


class CircularLinkedList(_Chain):
    """A chain whose last node points back to the first one."""

    def __init__(self, items: Iterable[int] | None = None) -> None:
        # Only the tail is kept: the head is always ``tail.next``.
        self._tail: _Node | None = None
        super().__init__(items, self.append)

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node.value
            if node is self._tail:
                return
            node = node.next

    def __len__(self) -> int:
        """Return the number of nodes."""
        return self._size

    def __str__(self) -> str:
        if self._tail is None:
            return "List is empty."
        return "".join(f"{value} -> " for value in self) + "(back to head)"

    def prepend(self, item: int) -> None:
        """Add ``item`` as the first node."""
        new = _Node(item)
        if self._tail is None:
            new.next = new
            self._tail = new
        else:
            new.next = self._tail.next
            self._tail.next = new
        self._size += 1

    def append(self, item: int) -> None:
        """Add ``item`` as the last node."""
        self.prepend(item)
        self._tail = self._tail.next

    def _remove_after(self, prev: _Node) -> int:
        """Unlink the node following ``prev`` and return its value."""
        victim = prev.next
        if victim is prev:
            self._tail = None
        else:
            prev.next = victim.next
            if victim is self._tail:
                self._tail = prev
        self._size -= 1
        return victim.value

    def pop_first(self) -> int:
        """Remove and return the first value."""
        return self._remove_after(_require(self._tail))

    def pop_last(self) -> int:
        """Remove and return the last value."""
        node = _require(self._tail)
        while node.next is not self._tail:
            node = node.next
        return self._remove_after(node)


_MENU = """
------Circular Singly Linked List Menu-----
1. Create CSLL and add element at last
2. Insert node at beginning
3. Insert node at last
4. Delete node at beginning
5. Delete node at last
6. Display all nodes
0. Exit"""


def _handle(chain: CircularLinkedList, choice: int, ask: _Ask) -> bool:
    match choice:
        case 1:
            chain.append(ask("Enter value to insert: "))
        case 2:
            chain.prepend(ask("Enter value to insert at beginning: "))
        case 3:
            chain.append(ask("Enter value to insert at end: "))
        case 4:
            print("Deleted node from the beginning.")
            chain.pop_first()
        case 5:
            print("Deleted node from the last.")
            chain.pop_last()
        case 6:
            print("The elements of the list are:")
            print(chain)
        case 0:
            print("Exiting.....Good Bye!!!!")
            return True
        case _:
            print("Invalid choice! Try again.")
    return False


def main(argv: list[str] | None = None) -> int:
    """Run the circular list menu on standard input."""
    return _serve(
        CircularLinkedList(),
        _handle,
        "Enter your choice:\n",
        _MENU,
        errors=(IndexError,),
    )
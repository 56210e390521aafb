"""A doubly linked list of integers, with an interactive menu."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from linkchain.singly import _Ask, _Chain, _find, _require, _serve, _values


@dataclass(eq=False, slots=True)
class _Node:
    value: int
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList(_Chain):
    """A chain of nodes linked in both directions."""

    def __init__(self, items: Iterable[int] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        super().__init__(items, self.append)

    def _link(self, prev: _Node | None, value: int, nxt: _Node | None) -> None:
        new = _Node(value, prev, nxt)
        if prev is None:
            self._head = new
        else:
            prev.next = new
        if nxt is None:
            self._tail = new
        else:
            nxt.prev = new
        self._size += 1

    def _unlink(self, node: _Node) -> int:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        return _values(self._head)

    def __reversed__(self) -> Iterator[int]:
        return _values(self._tail, "prev")

    def __len__(self) -> int:
        """Return the number of nodes."""
        return self._size

    def prepend(self, value: int) -> None:
        """Add ``value`` at the beginning."""
        self._link(None, value, self._head)

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        self._link(self._tail, value, None)

    def _locate(self, target: int) -> _Node:
        node = _find(self._head, target)
        if node is None:
            raise ValueError(f"Target {target} not found.")
        return node

    def insert_after(self, target: int, value: int) -> None:
        """Insert ``value`` after the first node holding ``target``."""
        node = self._locate(target)
        self._link(node, value, node.next)

    def insert_before(self, target: int, value: int) -> None:
        """Insert ``value`` before the first node holding ``target``."""
        if self._head is None:
            raise ValueError("List is empty.")
        node = self._locate(target)
        self._link(node.prev, value, node)

    def pop_first(self) -> int:
        """Remove and return the first value."""
        return self._unlink(_require(self._head))

    def pop_last(self) -> int:
        """Remove and return the last value."""
        return self._unlink(_require(self._tail))

    def _neighbour(self, target: int, side: str) -> _Node:
        node = _find(self._head, target)
        neighbour = None if node is None else getattr(node, side)
        if neighbour is None:
            where = "after" if side == "next" else "before"
            raise ValueError(f"No node found {where} {target}.")
        return neighbour

    def delete_after(self, target: int) -> int:
        """Remove and return the value following the first ``target``."""
        return self._unlink(self._neighbour(target, "next"))

    def delete_before(self, target: int) -> int:
        """Remove and return the value preceding the first ``target``."""
        return self._unlink(self._neighbour(target, "prev"))


_MENU = """
======= DOUBLY LINKED LIST MENU =======
1. Insert at Beginning
2. Insert at End
3. Insert After a Node
4. Insert Before a Node
5. Delete from Beginning
6. Delete from End
7. Delete After a Node
8. Delete Before a Node
9. Display List
0. Exit"""


def _show(chain: DoublyLinkedList) -> None:
    if not len(chain):
        print(" List is empty.")
    else:
        print(" List: " + "".join(f"{value} " for value in chain))


def _handle(chain: DoublyLinkedList, choice: int, ask: _Ask) -> bool:
    match choice:
        case 1 | 2:
            value = ask("Enter value: ")
            if choice == 1:
                chain.prepend(value)
                print(f" Inserted {value} at the beginning.")
            else:
                chain.append(value)
                print(f" Inserted {value} at the end.")
        case 3 | 4:
            target = ask("Enter target node and value: ")
            value = ask("")
            if choice == 3:
                chain.insert_after(target, value)
                print(f" Inserted {value} after {target}.")
            else:
                chain.insert_before(target, value)
                print(f" Inserted {value} before {target}.")
        case 5:
            print(f" Deleted {chain.pop_first()} from beginning.")
        case 6:
            print(f" Deleted {chain.pop_last()} from end.")
        case 7:
            target = ask("Enter target node: ")
            print(f" Deleted {chain.delete_after(target)} after {target}.")
        case 8:
            target = ask("Enter target node: ")
            print(f" Deleted {chain.delete_before(target)} before {target}.")
        case 9:
            _show(chain)
        case 0:
            print("Exiting program. Goodbye!")
            return True
        case _:
            print(" Invalid choice. Please try again.")
    return False


def main(argv: list[str] | None = None) -> int:
    """Run the doubly linked list menu on standard input."""
    return _serve(
        DoublyLinkedList(),
        _handle,
        "Enter your choice: ",
        _MENU,
        report=lambda exc: print(f" {exc}"),
    )
"""A singly linked list of integers, with an interactive menu."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any, TextIO


@dataclass(eq=False, slots=True)
class _Node:
    value: int
    next: _Node | None = None


def _walk(node: Any, link: str = "next") -> Iterator[Any]:
    """Yield ``node`` and every node reached by following ``link``."""
    while node is not None:
        yield node
        node = getattr(node, link)


def _values(node: Any, link: str = "next") -> Iterator[int]:
    """Yield the values of the nodes reached from ``node`` along ``link``."""
    return (each.value for each in _walk(node, link))


def _find(head: Any, target: int) -> Any:
    """Return the first node from ``head`` holding ``target``, or None."""
    return next((node for node in _walk(head) if node.value == target), None)


def _require(node: Any, message: str = "List is empty.") -> Any:
    """Return ``node``, raising IndexError with ``message`` when it is None."""
    if node is None:
        raise IndexError(message)
    return node


class _Chain:
    """Shared size bookkeeping, filling and representation for the containers."""

    _size = 0

    def __init__(
        self, items: Iterable[int] | None, add: Callable[[int], None]
    ) -> None:
        for item in items or ():
            add(item)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SinglyLinkedList(_Chain):
    """A chain of nodes each pointing to the next one."""

    def __init__(self, items: Iterable[int] | None = None) -> None:
        self._head: _Node | None = None
        super().__init__(items, self.append)

    def __iter__(self) -> Iterator[int]:
        return _values(self._head)

    def __len__(self) -> int:
        """Return the number of nodes."""
        return self._size

    def _link_after(self, node: _Node, item: int) -> None:
        node.next = _Node(item, node.next)
        self._size += 1

    def append(self, item: int) -> None:
        """Add ``item`` as the last node."""
        if self._head is None:
            self.prepend(item)
            return
        *_, last = _walk(self._head)
        self._link_after(last, item)

    def prepend(self, item: int) -> None:
        """Add ``item`` as the first node."""
        self._head = _Node(item, self._head)
        self._size += 1

    def insert_before(self, target: int, item: int) -> None:
        """Insert ``item`` before the first node holding ``target``."""
        prev: _Node | None = None
        for node in _walk(self._head):
            if node.value == target:
                break
            prev = node
        else:
            raise ValueError(f"Node with value {target} not found.")
        if prev is None:
            self.prepend(item)
        else:
            self._link_after(prev, item)

    def insert_after(self, target: int, item: int) -> None:
        """Insert ``item`` after the first node holding ``target``."""
        node = _find(self._head, target)
        if node is None:
            raise ValueError(f"Node with value {target} not found.")
        self._link_after(node, item)

    def insert_at(self, position: int, item: int) -> None:
        """Insert ``item`` at 1-based ``position``; past the end it is appended."""
        if position <= 1 or self._head is None:
            self.prepend(item)
            return
        *_, node = islice(_walk(self._head), position - 1)
        self._link_after(node, item)

    def _unlink_after(self, node: _Node) -> int:
        victim = node.next
        node.next = victim.next
        self._size -= 1
        return victim.value

    def pop_first(self) -> int:
        """Remove and return the first value."""
        node = _require(self._head)
        self._head = node.next
        self._size -= 1
        return node.value

    def pop_last(self) -> int:
        """Remove and return the last value."""
        if self._head is None or self._head.next is None:
            return self.pop_first()
        *_, before_last, _last = _walk(self._head)
        return self._unlink_after(before_last)

    def delete_at(self, position: int) -> int:
        """Remove and return the value at 1-based ``position``."""
        if position <= 1 or self._head is None:
            return self.pop_first()
        *_, prev = islice(_walk(self._head), position - 1)
        if prev.next is None:
            raise IndexError("Invalid position.")
        return self._unlink_after(prev)

    def delete_after(self, target: int) -> int:
        """Remove and return the value following the first ``target``."""
        node = _find(self._head, target)
        if node is None or node.next is None:
            raise ValueError(f"No node to delete after {target}")
        return self._unlink_after(node)


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


_Ask = Callable[[str], int]


def _serve(
    chain: Any,
    handle: Callable[[Any, int, _Ask], bool],
    prompt: str,
    menu: str,
    *,
    repeat_menu: bool = True,
    errors: tuple[type[Exception], ...] = (ValueError, IndexError),
    report: Callable[[Exception], None] = print,
) -> int:
    """Read choices from standard input and apply them to ``chain`` until told to stop."""
    tokens = _tokens(sys.stdin)

    def ask(text: str) -> int:
        return _ask(tokens, text)

    if not repeat_menu:
        print(menu)
    while True:
        if repeat_menu:
            print(menu)
        try:
            if handle(chain, ask(prompt), ask):
                return 0
        except errors as exc:
            report(exc)
        except EOFError:
            print()
            return 0


_MENU = """
 Main menu:
 1- Create Singly Linked List
 2- Insert as First Node of SLL
 3- Insert as Last Node of SLL
 4- Insert a New Node before a Given node
 5- Insert a New Node after a Given node
 6- Insert a new node at given position
 7- Delete a first node of SLL
 8- Delete node from given position of the SLL
 9- Delete a node after a given node
10- Delete a last node
11- Display all nodes of SLL
12- Exit"""


def _show(chain: SinglyLinkedList) -> None:
    if not len(chain):
        print("\nList is empty.", end="")
    else:
        print("\nNodes of SLL: " + " ".join(map(str, chain)), end="")


def _handle(chain: SinglyLinkedList, choice: int, ask: _Ask) -> bool:
    match choice:
        case 1:
            chain.append(ask("Enter data to insert: "))
        case 2:
            chain.prepend(ask("Enter data to insert as first node: "))
        case 3:
            chain.append(ask("Enter data to insert as last node: "))
        case 4:
            item = ask("Enter data to insert: ")
            chain.insert_before(ask("Enter the node value before which to insert: "), item)
        case 5:
            item = ask("Enter data to insert: ")
            chain.insert_after(ask("Enter the node value after which to insert: "), item)
        case 6:
            item = ask("Enter data to insert: ")
            chain.insert_at(ask("Enter position: "), item)
        case 7:
            chain.pop_first()
        case 8:
            chain.delete_at(ask("Enter position to delete: "))
        case 9:
            chain.delete_after(ask("Enter node value after which to delete: "))
        case 10:
            chain.pop_last()
        case 11:
            _show(chain)
        case 12:
            print("Exiting...")
            return True
        case _:
            print("Invalid choice!", end="")
    return False


def main(argv: list[str] | None = None) -> int:
    """Run the singly linked list menu on standard input."""
    return _serve(
        SinglyLinkedList(),
        _handle,
        "\n\nEnter your choice: ",
        _MENU,
        repeat_menu=False,
        report=lambda exc: print(f"\n{exc}", end=""),
    )
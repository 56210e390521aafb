# linkchain

A small collection of linked data structures built from nodes:

| Module                   | What it holds                                               |
|--------------------------|-------------------------------------------------------------|
| `linkchain.singly`       | `SinglyLinkedList`: insert and delete by value or position  |
| `linkchain.doubly`       | `DoublyLinkedList`: links in both directions                |
| `linkchain.circular`     | `CircularLinkedList`: the last node points back to the head |
| `linkchain.pooled`       | `StaticLinkedList`: nodes taken from a fixed-size pool      |
| `linkchain.linked_stack` | `LinkedStack`: last in, first out                           |
| `linkchain.linked_queue` | `LinkedQueue`: first in, first out                          |
| `linkchain.polynomial`   | `Polynomial` and `Term`: polynomials added term by term     |

No dependencies beyond Python 3.10 or later.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the lists

Every container can be iterated, has a length, and can be built from an
iterable of integers:

```python
from linkchain.singly import SinglyLinkedList

items = SinglyLinkedList([1, 2, 3])
items.prepend(0)
items.append(4)
items.insert_after(2, 25)
items.insert_before(1, 5)
print(list(items), len(items))   # [0, 5, 1, 2, 25, 3, 4] 7

first = items.pop_first()
last = items.pop_last()
```

`SinglyLinkedList` also works by 1-based position: `insert_at(position, item)`
puts the item at the front for a position of 1 or less and at the end for a
position past the end; `delete_at(position)` removes and returns the value
there, and raises `IndexError` for a position past the end. `delete_after(target)`
removes and returns the value following the first node holding `target`.

Operations that look for a value raise `ValueError` when it is not there (or,
for the `delete_after` / `delete_before` operations, when it has no neighbour
on that side). Removing from an empty list raises `IndexError`.

`DoublyLinkedList` has the same insert and delete operations by value, adds
`delete_before`, and can be walked backwards with `reversed()`:

```python
from linkchain.doubly import DoublyLinkedList

values = DoublyLinkedList([10, 20, 30])
values.insert_before(20, 15)
print(list(reversed(values)))   # [30, 20, 15, 10]
```

`CircularLinkedList` keeps its tail linked back to the head; iteration visits
each node once. It supports `prepend`, `append`, `pop_first` and `pop_last`,
and `str()` of it reads like `1 -> 2 -> 3 -> (back to head)`.

`StaticLinkedList` draws its nodes from a pool of a fixed `capacity`
(10 unless given). Its `insert_after(value, ref)` takes the new value first and
the reference value second. When the pool has no free node left, inserting
raises `PoolExhaustedError`, a subclass of `OverflowError`:

```python
from linkchain.pooled import PoolExhaustedError, StaticLinkedList

pool = StaticLinkedList(2)
pool.append(1)
pool.append(2)
try:
    pool.append(3)
except PoolExhaustedError:
    print("pool is full")
```

Removed nodes go back to the pool and are reused.

## Stack and queue

```python
from linkchain.linked_queue import LinkedQueue
from linkchain.linked_stack import LinkedStack

stack = LinkedStack()
stack.push(2)
stack.push(3)
print(stack.peek(), stack.pop())   # 3 3

queue = LinkedQueue()
queue.enqueue(5)
queue.enqueue(4)
print(queue.peek(), queue.dequeue())   # 5 5
```

A stack iterates from the top down, a queue from front to rear. `peek`, `pop`
and `dequeue` raise `IndexError` when empty.

## Polynomials

A `Polynomial` is a sequence of `Term(coefficient, power)` values kept in the
order they are added; addition expects both operands in descending order of
power and merges their terms by power, adding the coefficients of equal
powers:

```python
from linkchain.polynomial import Polynomial

p = Polynomial([(5, 3), (4, 2), (2, 1)])
q = Polynomial()
q.add_term(3, 3)
q.add_term(2, 2)
q.add_term(4, 0)

print(p + q)   # 8x^3+6x^2+2x^1+4x^0
```

## Commands

Each structure also comes with a small program on the command line. The list
programs show a numbered menu and read choices and values from standard
input; the stack, queue and polynomial programs run a short demonstration.

```
linkchain-singly
linkchain-doubly
linkchain-circular
linkchain-static
linkchain-stack
linkchain-queue
linkchain-polynomial
```

## What it does not do

The structures hold integers in memory only; nothing is saved between runs.
The menu programs stop at end of input or at the first token that is not an
integer.
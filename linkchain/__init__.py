"""Linked lists, a stack, a queue and polynomials built from chained nodes."""

__version__ = "0.1.0"

__all__ = [
    "circular",
    "doubly",
    "linked_queue",
    "linked_stack",
    "polynomial",
    "pooled",
    "singly",
]
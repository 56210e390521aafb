"""Polynomials as ordered term chains, with term-by-term addition."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import NamedTuple


class Term(NamedTuple):
    """One ``coefficient * x ** power`` term."""

    coefficient: int
    power: int

    def __str__(self) -> str:
        return f"{self.coefficient}x^{self.power}"


class Polynomial:
    """A sequence of terms, expected in descending order of power."""

    def __init__(self, terms: Iterable[tuple[int, int]] | None = None) -> None:
        self._terms: list[Term] = []
        for coefficient, power in terms or ():
            self.add_term(coefficient, power)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[tuple(t) for t in self._terms]!r})"

    def add_term(self, coefficient: int, power: int) -> None:
        """Append a term at the end."""
        self._terms.append(Term(coefficient, power))

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        left, right = iter(self._terms), iter(other._terms)
        p, q = next(left, None), next(right, None)
        while p is not None and q is not None:
            if p.power > q.power:
                result.add_term(*p)
                p = next(left, None)
            elif p.power < q.power:
                result.add_term(*q)
                q = next(right, None)
            else:
                result.add_term(p.coefficient + q.coefficient, p.power)
                p, q = next(left, None), next(right, None)
        for rest, leftover in ((p, left), (q, right)):
            if rest is not None:
                result.add_term(*rest)
                for term in leftover:
                    result.add_term(*term)
        return result

    def __str__(self) -> str:
        return "+".join(map(str, self._terms))


def main(argv: list[str] | None = None) -> int:
    """Add two sample polynomials and print them."""
    p = Polynomial([(5, 3), (4, 2), (2, 1)])
    q = Polynomial([(3, 3), (2, 2), (4, 0)])
    print(f"First polynomial:{p}")
    print(f"Second polynomial:{q}")
    print(p + q)
    return 0


if __name__ == "__main__":
    sys.exit(main())
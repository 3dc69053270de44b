"""Weighted search terms and the comparisons used to order them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """A query string together with its weight."""

    query: str = ""
    weight: int = 0

    def __lt__(self, other: Term) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.query < other.query

    def __str__(self) -> str:
        return f"{self.weight}\t{self.query}"


def compare_by_weight(t1: Term, t2: Term) -> int:
    """Compare two terms in descending order by weight.

    Returns 1 if ``t1`` is heavier, 0 if the weights are equal, -1 otherwise.
    """
    if t1.weight > t2.weight:
        return 1
    if t1.weight == t2.weight:
        return 0
    return -1


def compare_by_prefix(t1: Term, t2: Term, r: int) -> int:
    """Compare the first ``r`` characters of two queries lexicographically.

    Returns 1 if ``t1``'s prefix sorts first, 0 if the prefixes are equal,
    -1 otherwise.
    """
    if r < 0:
        raise ValueError("The length of the prefix should be a positive number!")
    p1 = t1.query[:r]
    p2 = t2.query[:r]
    if p1 < p2:
        return 1
    if p1 == p2:
        return 0
    return -1
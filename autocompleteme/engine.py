"""Prefix search over a collection of weighted terms."""

from __future__ import annotations

from .sortinglist import SortingList
from .term import Term, compare_by_prefix, compare_by_weight


class Autocomplete:
    """Holds terms and answers prefix queries against them.

    :meth:`sort` must be called after inserting terms and before searching,
    since the lookups rely on binary search over the query order.
    """

    def __init__(self) -> None:
        self._terms: SortingList[Term] = SortingList()

    def insert(self, term: Term) -> None:
        """Add a term to the collection."""
        self._terms.insert(term)

    def sort(self) -> None:
        """Sort all terms by query in lexicographical order."""
        self._terms.std_sort()

    def binary_search(self, prefix: str) -> int | None:
        """Return the index of some term whose query starts with ``prefix``.

        Returns ``None`` when no term matches.
        """
        key = Term(prefix, 0)
        r = len(prefix)
        low, high = 0, len(self._terms) - 1
        while low <= high:
            middle = (low + high) // 2
            order = compare_by_prefix(key, self._terms[middle], r)
            if order > 0:
                high = middle - 1
            elif order < 0:
                low = middle + 1
            else:
                return middle
        return None

    def search(self, key: str) -> range:
        """Return the range of indices of all terms whose query starts with ``key``.

        The range is empty when nothing matches.
        """
        hit = self.binary_search(key)
        if hit is None:
            return range(0)
        r = len(key)
        anchor = self._terms[hit]
        first = hit
        while first > 0 and compare_by_prefix(self._terms[first - 1], anchor, r) == 0:
            first -= 1
        last = hit
        size = len(self._terms)
        while last + 1 < size and compare_by_prefix(self._terms[last + 1], anchor, r) == 0:
            last += 1
        return range(first, last + 1)

    def all_matches(self, prefix: str) -> SortingList[Term]:
        """Return all terms starting with ``prefix``, in descending order of weight."""
        matches = SortingList(self._terms[i] for i in self.search(prefix))
        matches.selection_sort(compare_by_weight)
        return matches

    def __str__(self) -> str:
        return "".join(f"{term}\n" for term in self._terms)
"""A sequence container offering several sorting algorithms."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

Compare = Callable[[T, T], int]


class SortingList(Generic[T]):
    """A list of items that can be sorted with a comparison function.

    The comparison returns a negative number when its second argument
    should come before its first, so ``compare_by_weight`` yields
    descending weight order.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items) if items is not None else []

    def insert(self, item: T) -> None:
        """Append an item to the end of the list."""
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def std_sort(self) -> None:
        """Sort in ascending order using the items' ``<`` operator."""
        self._items.sort()

    def selection_sort(self, compare: Compare) -> None:
        """Sort in place with selection sort."""
        items = self._items
        for i in range(len(items) - 1):
            best = i
            for j in range(i + 1, len(items)):
                if compare(items[best], items[j]) < 0:
                    best = j
            if best != i:
                items[i], items[best] = items[best], items[i]

    def bubble_sort(self, compare: Compare) -> None:
        """Sort in place with bubble sort."""
        items = self._items
        for _ in range(1, len(items)):
            for j in range(len(items) - 1):
                if compare(items[j], items[j + 1]) < 0:
                    items[j], items[j + 1] = items[j + 1], items[j]

    def merge_sort(self, compare: Compare) -> None:
        """Sort with merge sort."""
        self._items = _merge_sorted(self._items, compare)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the items in place."""
        rng = rng if rng is not None else random.Random()
        items = self._items
        for i in range(len(items) - 1, 1, -1):
            j = rng.randrange(i + 1)
            items[i], items[j] = items[j], items[i]

    def render(self) -> str:
        """Return the listing of all items, one per line."""
        body = "".join(f"{item}\n" for item in self._items)
        return f"Data items in the list: \n{body}\n"


def _merge_sorted(items: list[T], compare: Compare) -> list[T]:
    if len(items) <= 1:
        return list(items)
    mid = (len(items) + 1) // 2
    left = _merge_sorted(items[:mid], compare)
    right = _merge_sorted(items[mid:], compare)
    merged: list[T] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if compare(left[li], right[ri]) > 0:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged
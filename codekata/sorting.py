"""Simple comparison sorts."""

from __future__ import annotations

from typing import Iterable, TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return the values sorted by bubble sort, stopping early once a pass swaps nothing."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Return the values sorted by insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items
"""Comparison sorts and a bucket sort over integer values."""

from __future__ import annotations

import bisect
from collections.abc import Iterable
from itertools import chain
from typing import Any

DEFAULT_INTERVAL = 10
DEFAULT_BUCKET_COUNT = 6


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of *values* using bubble sort.

    Stops early once a full pass makes no swap.
    """
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


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of *values* using insertion sort (stable)."""
    items: list[Any] = []
    for value in values:
        pos = len(items)
        while pos > 0 and value < items[pos - 1]:
            pos -= 1
        items.insert(pos, value)
    return items


def _selection_pass(values: Iterable[Any]) -> tuple[list[Any], int]:
    items = list(values)
    updates = 0
    for i in range(len(items)):
        pos = i
        for j in range(i + 1, len(items)):
            if items[j] < items[pos]:
                pos = j
                updates += 1
        items[i], items[pos] = items[pos], items[i]
    return items, updates


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of *values* using selection sort."""
    items, _ = _selection_pass(values)
    return items


def selection_updates(values: Iterable[Any]) -> int:
    """Count how often selection sort finds a new smallest candidate."""
    _, updates = _selection_pass(values)
    return updates


def bucket_index(value: int, interval: int = DEFAULT_INTERVAL) -> int:
    """Return the bucket that *value* falls into for buckets *interval* wide."""
    if interval <= 0:
        raise ValueError("interval must be positive")
    return value // interval


def bucket_sort(
    values: Iterable[int],
    interval: int = DEFAULT_INTERVAL,
    bucket_count: int = DEFAULT_BUCKET_COUNT,
) -> list[int]:
    """Return *values* sorted by distributing them into fixed-width buckets.

    Raises ValueError if a value does not fit into any of the buckets.
    """
    if bucket_count <= 0:
        raise ValueError("bucket_count must be positive")
    buckets: list[list[int]] = [[] for _ in range(bucket_count)]
    for value in values:
        index = bucket_index(value, interval)
        if not 0 <= index < bucket_count:
            raise ValueError(
                f"value {value} falls outside the {bucket_count} buckets"
            )
        bisect.insort(buckets[index], value)
    return list(chain.from_iterable(buckets))
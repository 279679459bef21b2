import random

import pytest

from algokit.sorting import (
    bubble_sort,
    bucket_index,
    bucket_sort,
    insertion_sort,
    selection_sort,
    selection_updates,
)

SOURCE_ARRAY = [64, 34, 25, 12, 22, 11, 90]
SORTED_SOURCE_ARRAY = [11, 12, 22, 25, 34, 64, 90]
BUCKET_ARRAY = [42, 32, 33, 52, 37, 47, 51]


def test_bubble_sort_source_example():
    assert bubble_sort(SOURCE_ARRAY) == SORTED_SOURCE_ARRAY


def test_insertion_sort_source_example():
    assert insertion_sort(SOURCE_ARRAY) == SORTED_SOURCE_ARRAY


def test_selection_sort_source_example():
    assert selection_sort(SOURCE_ARRAY) == SORTED_SOURCE_ARRAY


def test_bubble_sort_does_not_mutate_input():
    data = [3, 1, 2]
    assert bubble_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_insertion_sort_does_not_mutate_input():
    data = [3, 1, 2]
    assert insertion_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_selection_sort_does_not_mutate_input():
    data = [3, 1, 2]
    assert selection_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def _random_lists(seed):
    rng = random.Random(seed)
    return [
        [rng.randint(-100, 100) for _ in range(rng.randint(0, 30))]
        for _ in range(50)
    ]


def test_bubble_sort_random_inputs():
    for data in _random_lists(1234):
        assert bubble_sort(data) == sorted(data)


def test_insertion_sort_random_inputs():
    for data in _random_lists(1234):
        assert insertion_sort(data) == sorted(data)


def test_selection_sort_random_inputs():
    for data in _random_lists(1234):
        assert selection_sort(data) == sorted(data)


def test_bubble_sort_empty_and_single():
    assert bubble_sort([]) == []
    assert bubble_sort([5]) == [5]


def test_insertion_sort_empty_and_single():
    assert insertion_sort([]) == []
    assert insertion_sort([5]) == [5]


def test_selection_sort_empty_and_single():
    assert selection_sort([]) == []
    assert selection_sort([5]) == [5]


def test_insertion_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

    result = [k.pair for k in insertion_sort(Key(p) for p in pairs)]
    assert result == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]


def test_selection_updates_sorted_input_is_zero():
    assert selection_updates([1, 2, 3, 4, 5]) == 0


def test_selection_updates_reverse():
    assert selection_updates([3, 2, 1]) == 2


def test_bucket_index():
    assert bucket_index(42, 10) == 4
    assert bucket_index(0) == 0


def test_bucket_index_rejects_bad_interval():
    with pytest.raises(ValueError):
        bucket_index(5, 0)


def test_bucket_sort_source_example():
    assert bucket_sort(BUCKET_ARRAY, 10, 6) == [32, 33, 37, 42, 47, 51, 52]


def test_bucket_sort_defaults_match_sorted():
    rng = random.Random(7)
    data = [rng.randint(0, 59) for _ in range(40)]
    assert bucket_sort(data) == sorted(data)


def test_bucket_sort_out_of_range():
    with pytest.raises(ValueError):
        bucket_sort([10, 60], 10, 6)
    with pytest.raises(ValueError):
        bucket_sort([-1], 10, 6)


def test_bucket_sort_rejects_no_buckets():
    with pytest.raises(ValueError):
        bucket_sort([1], 10, 0)
import random

import pytest

from codekata.sorting import bubble_sort, insertion_sort

CASES = [
    [11, 13, 7, 12, 16, 9, 24, 5, 3],
    [11, 13, 7, 10, 12, 16, 9, 24, 5, 3],
    [],
    [1],
    [2, 2, 1, 1],
    [-3, 0, -3, 5],
]


@pytest.mark.parametrize("values", CASES)
def test_bubble_sort_matches_builtin_sorted(values):
    assert bubble_sort(values) == sorted(values)


@pytest.mark.parametrize("values", CASES)
def test_insertion_sort_matches_builtin_sorted(values):
    assert insertion_sort(values) == sorted(values)


def test_source_examples():
    assert bubble_sort([11, 13, 7, 12, 16, 9, 24, 5, 3]) == [3, 5, 7, 9, 11, 12, 13, 16, 24]
    assert insertion_sort([11, 13, 7, 10, 12, 16, 9, 24, 5, 3]) == [
        3, 5, 7, 9, 10, 11, 12, 13, 16, 24,
    ]


def test_bubble_sort_leaves_input_alone():
    original = [11, 13, 7, 12, 16, 9, 24, 5, 3]
    snapshot = list(original)
    result = bubble_sort(original)
    assert original == snapshot
    assert result == sorted(snapshot)


def test_insertion_sort_leaves_input_alone():
    original = [11, 13, 7, 12, 16, 9, 24, 5, 3]
    snapshot = list(original)
    result = insertion_sort(original)
    assert original == snapshot
    assert result == sorted(snapshot)


def test_random_inputs():
    rng = random.Random(7)
    for _ in range(50):
        data = [rng.randint(-100, 100) for _ in range(rng.randint(0, 30))]
        assert bubble_sort(data) == sorted(data)
        assert insertion_sort(data) == sorted(data)


def test_accepts_any_iterable():
    data = (3, 1, 2)
    assert bubble_sort(iter(data)) == [1, 2, 3]
    assert insertion_sort(iter(data)) == [1, 2, 3]


def test_sorted_input_stays_sorted():
    data = list(range(20))
    assert bubble_sort(data) == data
    assert insertion_sort(data) == data


def test_strings_sort():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert insertion_sort(words) == expected
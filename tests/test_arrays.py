from collections import Counter

import pytest

from dsaworkbench.arrays import (
    magic_index,
    peaks_and_valleys,
    peaks_and_valleys_sorted,
    sparse_search,
)

SAMPLES = [
    [9, 8, 4, 0, 1, 7],
    [5, 3, 1, 2, 3],
    [5, 8, 6, 2, 3, 4, 6],
    [1],
    [],
    [2, 1],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_sorted_version_is_permutation(values):
    assert Counter(peaks_and_valleys_sorted(values)) == Counter(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_sorted_version_has_peaks_at_even_positions(values):
    result = peaks_and_valleys_sorted(values)
    for i in range(0, len(result), 2):
        if i > 0:
            assert result[i] >= result[i - 1]
        if i + 1 < len(result):
            assert result[i] >= result[i + 1]


@pytest.mark.parametrize("values", SAMPLES)
def test_unsorted_version_is_permutation(values):
    assert Counter(peaks_and_valleys(values)) == Counter(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_unsorted_version_has_peaks_at_odd_positions(values):
    result = peaks_and_valleys(values)
    for i in range(1, len(result), 2):
        assert result[i] >= result[i - 1]
        if i + 1 < len(result):
            assert result[i] >= result[i + 1]


def test_input_is_left_untouched():
    values = [9, 8, 4, 0, 1, 7]
    peaks_and_valleys(values)
    peaks_and_valleys_sorted(values)
    assert values == [9, 8, 4, 0, 1, 7]


SPARSE = ["at", "", "", "", "ball", "", "", "cat", "", "", "dad", ""]


def test_sparse_search_example():
    assert sparse_search(SPARSE, "ball") == 4


@pytest.mark.parametrize("index", [i for i, s in enumerate(SPARSE) if s])
def test_sparse_search_finds_every_word(index):
    assert sparse_search(SPARSE, SPARSE[index]) == index


@pytest.mark.parametrize("target", ["apple", "bat", "zebra", "aa"])
def test_sparse_search_missing(target):
    assert sparse_search(SPARSE, target) is None


def test_sparse_search_empty_list():
    assert sparse_search([], "ball") is None


def test_sparse_search_all_empty():
    assert sparse_search(["", "", ""], "ball") is None


@pytest.mark.parametrize(
    "values",
    [
        [-10, -5, 2, 2, 2, 3, 4, 7, 9, 12, 13],
        [-40, -20, -1, 1, 2, 3, 5, 7, 9, 12, 13],
        [0],
        [-3, 1, 5],
    ],
)
def test_magic_index_found(values):
    index = magic_index(values)
    assert index is not None
    assert values[index] == index


@pytest.mark.parametrize("values", [[], [1, 2, 3], [-5, -4, -3]])
def test_magic_index_absent(values):
    assert magic_index(values) is None
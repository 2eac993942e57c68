from __future__ import annotations

import pytest

from subsample.utils.seqs import (
    Range,
    add_first,
    add_last,
    get_first,
    get_first_first,
    get_last,
    get_points_count,
    get_range,
    is_valid_and_not_empty,
)


def test_first_and_last_of_segment() -> None:
    assert get_first([3, 4, 5]) == 3
    assert get_last([3, 4, 5]) == 5
    assert get_first([]) is None
    assert get_last(None) is None


def test_first_first_skips_empty_segments() -> None:
    assert get_first_first([None, [], ["a", "b"], ["c"]]) == "a"
    assert get_first_first([[], None]) is None
    assert get_first_first(None) is None


def test_add_first_and_last_tolerate_missing_segment() -> None:
    items = [2]
    add_first(items, 1)
    add_last(items, 3)
    assert items == [1, 2, 3]

    add_first(None, 1)
    add_last(None, 1)


@pytest.mark.parametrize(
    ("items", "expected"),
    [(None, False), ([], False), ([None], True), ([[]], True)],
)
def test_is_valid_and_not_empty(items, expected) -> None:
    assert is_valid_and_not_empty(items) is expected


def test_points_count_treats_missing_as_zero() -> None:
    assert get_points_count([[1, 2], None, [], [3]]) == 3
    assert get_points_count(None) == 0


def test_range_spans_first_and_last_non_empty_segments() -> None:
    series = [None, [], [1, 2], [3], [], None]

    result = get_range(series)

    assert result == Range(first=1, last=3)
    assert result.first == 1 and result.last == 3


@pytest.mark.parametrize("series", [None, [], [[], None]])
def test_range_of_empty_series_is_none(series) -> None:
    assert get_range(series) is None

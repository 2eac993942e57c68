"""Helpers shared by the subsampling core."""

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

__all__ = [
    "Range",
    "add_first",
    "add_last",
    "get_first",
    "get_first_first",
    "get_last",
    "get_points_count",
    "get_range",
    "is_valid_and_not_empty",
]

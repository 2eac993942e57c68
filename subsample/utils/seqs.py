"""None-tolerant helpers over segments and segmented series.

A segmented series is a list of segments; a segment is a list of points.
Missing (``None``) and empty segments are skipped wherever the first or last
point is looked up.
"""

from __future__ import annotations

from typing import Any, List, NamedTuple, Optional, Sequence, TypeVar

E = TypeVar("E")


class Range(NamedTuple):
    """Global first and last point of a segmented series."""

    first: Any
    last: Any


def get_first(segment: Optional[Sequence[E]]) -> Optional[E]:
    if segment:
        return segment[0]
    return None


def get_last(segment: Optional[Sequence[E]]) -> Optional[E]:
    if segment:
        return segment[-1]
    return None


def get_first_first(series: Optional[Sequence[Optional[Sequence[E]]]]) -> Optional[E]:
    """Return the first point of the first non-empty segment."""

    if not series:
        return None
    for segment in series:
        first = get_first(segment)
        if first is not None:
            return first
    return None


def add_first(segment: Optional[List[E]], element: E) -> None:
    if segment is not None:
        segment.insert(0, element)


def add_last(segment: Optional[List[E]], element: E) -> None:
    if segment is not None:
        segment.append(element)


def is_valid_and_not_empty(items: Optional[Sequence[Any]]) -> bool:
    return items is not None and len(items) > 0


def get_points_count(series: Optional[Sequence[Optional[Sequence[Any]]]]) -> int:
    """Total number of points across all segments, counting missing ones as 0."""

    if series is None:
        return 0
    return sum(len(segment) for segment in series if segment is not None)


def get_range(series: Optional[Sequence[Optional[Sequence[E]]]]) -> Optional[Range]:
    """Return ``Range(first, last)`` of a series, or ``None`` when it holds no points.

    The first point is taken from the first non-empty segment scanning forward,
    the last point from the last non-empty segment scanning backward.
    """

    if series is None:
        return None

    first_segment = next((segment for segment in series if segment), None)
    last_segment = next((segment for segment in reversed(series) if segment), None)

    if not first_segment or not last_segment:
        return None
    return Range(first_segment[0], last_segment[-1])


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

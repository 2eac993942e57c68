"""Min/max bucket subsampling of segmented, X-ascending series.

Going through the input once, points are divided into buckets of equal X
width measured from the first point. For every bucket the points with the
smallest and the largest Y are kept, in their original X order, so peaks and
valleys survive the reduction. Two input segments are merged in the output
unless the gap between them is at least one bucket wide. The output always
starts and ends with the same points as the input.

Points are opaque; coordinates are read through a ``PointAccessor``. Input
segments must be sorted by X and must not contain ``None`` points. Neither is
validated.
"""

from __future__ import annotations

import logging
import math
from typing import Generic, List, Optional, Sequence, TypeVar

from subsample.accessors import PointAccessor
from subsample.constants import (
    BUCKET_JUMP_THRESHOLD,
    FULL_RESOLUTION_RATIO,
    INITIAL_BUCKET,
    NO_BUCKET,
)
from subsample.utils.seqs import (
    add_first,
    add_last,
    get_first,
    get_first_first,
    get_last,
    get_points_count,
    get_range,
    is_valid_and_not_empty,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Segment = List[T]
Series = Sequence[Optional[Sequence[T]]]


class _SegmentWriter(Generic[T]):
    """Collects output segments together with the global index of every point."""

    def __init__(self, accessor: PointAccessor[T]) -> None:
        self.accessor = accessor
        self.segments: List[List[T]] = []
        self.indices: List[List[int]] = []
        self._points: List[T] = []
        self._point_indices: List[int] = []

    def _add(self, point: T, index: int) -> None:
        self._points.append(point)
        self._point_indices.append(index)

    def insert_pair(self, min_point: Optional[T], max_point: Optional[T], min_index: int, max_index: int) -> None:
        """Emit a bucket's min/max pair in X order, or a single point if they coincide."""

        if min_index < 0 or max_index < 0:
            return
        if min_index == max_index:
            self._add(min_point, min_index)
            return

        min_x = self.accessor.x(min_point)
        max_x = self.accessor.x(max_point)
        if min_x < max_x or (min_x == max_x and min_index <= max_index):
            self._add(min_point, min_index)
            self._add(max_point, max_index)
        else:
            self._add(max_point, max_index)
            self._add(min_point, min_index)

    def close_segment(self) -> None:
        if self._points:
            self.segments.append(self._points)
            self.indices.append(self._point_indices)
            self._points = []
            self._point_indices = []


def _bucket_of(x: float, origin: float, bucket_size: float) -> float:
    if bucket_size <= 0:
        return NO_BUCKET
    quotient = (x - origin) / bucket_size
    if not math.isfinite(quotient):
        return quotient
    return float(math.floor(quotient))


def _run(series: Optional[Series], accessor: PointAccessor[T], bucket_size: float) -> _SegmentWriter[T]:
    writer: _SegmentWriter[T] = _SegmentWriter(accessor)

    if not is_valid_and_not_empty(series):
        return writer
    first_first = get_first_first(series)
    if first_first is None:
        return writer

    x_of = accessor.x
    y_of = accessor.y
    origin = x_of(first_first)

    min_point: Optional[T] = None
    max_point: Optional[T] = None
    min_index = max_index = -1
    last_index = -1
    last_x = 0.0
    last_bucket = INITIAL_BUCKET

    global_index = -1
    for segment in series:
        if not segment:
            continue
        for local_index, current in enumerate(segment):
            global_index += 1
            current_x = x_of(current)
            bucket = _bucket_of(current_x, origin, bucket_size)

            # Gaps are only checked between input segments, never inside one.
            starts_new_segment = local_index == 0 and last_index >= 0 and current_x - last_x >= bucket_size

            if abs(bucket - last_bucket) > BUCKET_JUMP_THRESHOLD or starts_new_segment:
                writer.insert_pair(min_point, max_point, min_index, max_index)
                if starts_new_segment:
                    writer.close_segment()
                writer.insert_pair(current, current, global_index, global_index)

                min_point = max_point = None
                min_index = max_index = -1
                last_bucket = bucket
                last_index = global_index
                last_x = current_x
                continue

            if last_index < 0 or last_bucket != bucket or bucket < 0:
                if last_index >= 0:
                    writer.insert_pair(min_point, max_point, min_index, max_index)
                min_point = max_point = current
                min_index = max_index = global_index

            last_bucket = bucket
            last_index = global_index
            last_x = current_x

            current_y = y_of(current)
            if min_point is None or current_y < y_of(min_point):
                min_point = current
                min_index = global_index
            # Ties move the max to the right so an all-equal run keeps both ends.
            if max_point is None or current_y >= y_of(max_point):
                max_point = current
                max_index = global_index

    writer.insert_pair(min_point, max_point, min_index, max_index)
    writer.close_segment()

    if writer.segments:
        total = global_index + 1
        if get_first(get_first(writer.indices)) != 0:
            add_first(get_first(writer.segments), first_first)
            add_first(get_first(writer.indices), 0)
        if get_last(get_last(writer.indices)) != total - 1:
            input_range = get_range(series)
            add_last(get_last(writer.segments), input_range.last)
            add_last(get_last(writer.indices), total - 1)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Subsampled %d points into %d across %d segments (bucket_size=%s)",
            global_index + 1,
            get_points_count(writer.segments),
            len(writer.segments),
            bucket_size,
        )
    return writer


def subsample(series: Optional[Series], accessor: PointAccessor[T], bucket_size: float) -> List[Segment]:
    """Subsample a segmented series by min/max per X bucket.

    Args:
        series: Segments of points sorted by X. ``None`` or empty segments are skipped.
        accessor: Reads X and Y out of a point.
        bucket_size: X width of one bucket. Points in one bucket collapse into at
            most two output points (their min and max by Y). A value ``<= 0``
            disables bucketing and returns every point. For charts a good value
            is ``visible X width / chart width in pixels``.

    Returns:
        New list of non-empty output segments. The first and last point always
        match the input's.
    """

    return _run(series, accessor, bucket_size).segments


def subsample_indices(series: Optional[Series], accessor: PointAccessor[T], bucket_size: float) -> List[List[int]]:
    """Same as :func:`subsample` but returns the global (flattened) input index of every output point."""

    return _run(series, accessor, bucket_size).indices


def resolve_bucket_size(points_count: int, x_range: float, total_points: int) -> float:
    """Bucket size needed to reduce ``total_points`` to roughly ``points_count`` points.

    Returns 0 (no bucketing) when no count is requested or when the request is
    close to, or above, the input resolution.
    """

    if points_count <= 0 or FULL_RESOLUTION_RATIO * points_count >= total_points:
        return 0.0
    return x_range / points_count


def get_x_range(series: Optional[Series], accessor: PointAccessor[T]) -> float:
    """X distance between the global first and last point, 0 for an empty series."""

    bounds = get_range(series)
    if bounds is None:
        return 0.0
    return accessor.x(bounds.last) - accessor.x(bounds.first)


def subsample_by_count(
    series: Optional[Series],
    accessor: PointAccessor[T],
    points_count: int,
    x_range: Optional[float] = None,
) -> List[Segment]:
    """Subsample to roughly ``points_count`` buckets over ``x_range``.

    ``x_range`` defaults to the X distance covered by the series.
    """

    if x_range is None:
        x_range = get_x_range(series, accessor)
    bucket_size = resolve_bucket_size(points_count, x_range, get_points_count(series))
    return subsample(series, accessor, bucket_size)


class ListSubsample(Generic[T]):
    """A segmented series bound to its accessor, for repeated subsampling at different resolutions."""

    def __init__(self, data: Optional[Series], accessor: PointAccessor[T]) -> None:
        self.data = data
        self.accessor = accessor

    @property
    def points_count(self) -> int:
        return get_points_count(self.data)

    def get_subsample(self, bucket_size: float) -> List[Segment]:
        return subsample(self.data, self.accessor, bucket_size)

    def get_subsample_by_count(self, points_count: int, x_range: Optional[float] = None) -> List[Segment]:
        return subsample_by_count(self.data, self.accessor, points_count, x_range)


__all__ = [
    "ListSubsample",
    "get_x_range",
    "resolve_bucket_size",
    "subsample",
    "subsample_by_count",
    "subsample_indices",
]

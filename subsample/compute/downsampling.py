from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
import polars as pl

from subsample.accessors import array_accessor
from subsample.compute.subsampler import resolve_bucket_size, subsample_indices
from subsample.constants import DEFAULT_TARGET_POINTS

logger = logging.getLogger(__name__)

SEGMENT_COLUMN = "segment"


@dataclass
class DownsampleResult:
    downsampled: pl.DataFrame
    raw_count: int
    downsampled_count: int
    segment_count: int
    bucket_size: float


def split_segments(values: Sequence) -> List[List[int]]:
    """Group row ids into runs of equal consecutive ``values``."""

    keys = np.asarray(values)
    n = len(keys)
    if n == 0:
        return []
    breaks = np.flatnonzero(keys[1:] != keys[:-1]) + 1
    return [chunk.tolist() for chunk in np.split(np.arange(n), breaks)]


def subsample_arrays(
    x: np.ndarray,
    y: np.ndarray,
    bucket_size: float,
    segment_ids: Optional[Sequence] = None,
) -> List[np.ndarray]:
    """Min/max subsample two parallel arrays; returns the kept row ids per output segment."""

    if len(x) != len(y):
        raise ValueError(f"x and y must have the same length ({len(x)} != {len(y)})")

    if segment_ids is None:
        segments = [list(range(len(x)))] if len(x) else []
    else:
        segments = split_segments(segment_ids)

    # Row ids double as points, so global indices are row ids.
    kept = subsample_indices(segments, array_accessor(x, y), bucket_size)
    return [np.asarray(rows, dtype=np.int64) for rows in kept]


def _numeric_x(frame: pl.DataFrame, x_col: str) -> np.ndarray:
    column = frame[x_col]
    if column.dtype.is_temporal():
        column = column.to_physical()
    return column.cast(pl.Float64).to_numpy()


def downsample_frame(
    frame: pl.DataFrame,
    x_col: str,
    y_col: str,
    target_points: int = DEFAULT_TARGET_POINTS,
    segment_col: Optional[str] = None,
    bucket_size: Optional[float] = None,
) -> DownsampleResult:
    """Downsample a frame sorted by ``x_col`` keeping the min/max ``y_col`` row of each bucket.

    ``bucket_size`` wins over ``target_points`` when given. Rows sharing a run of
    equal ``segment_col`` values form one input segment. The result carries an
    extra ``segment`` column with the output segment id of every row.
    """

    for column in (x_col, y_col, segment_col):
        if column is not None and column not in frame.columns:
            raise ValueError(f"Column {column!r} not found; available: {', '.join(frame.columns)}")

    raw_count = frame.height
    if raw_count == 0:
        empty = frame.with_columns(pl.lit(0, dtype=pl.Int64).alias(SEGMENT_COLUMN)).head(0)
        return DownsampleResult(empty, raw_count=0, downsampled_count=0, segment_count=0, bucket_size=0.0)

    x = _numeric_x(frame, x_col)
    y = frame[y_col].cast(pl.Float64).to_numpy()

    if bucket_size is None:
        bucket_size = resolve_bucket_size(target_points, float(x[-1] - x[0]), raw_count)
        logger.debug(
            "Resolved bucket size %s for %d target points over %d rows", bucket_size, target_points, raw_count
        )

    segment_ids = frame[segment_col].to_numpy() if segment_col is not None else None
    kept = subsample_arrays(x, y, bucket_size, segment_ids=segment_ids)

    if kept:
        rows = np.concatenate(kept)
        labels = np.concatenate([np.full(len(chunk), seg, dtype=np.int64) for seg, chunk in enumerate(kept)])
    else:
        rows = np.empty(0, dtype=np.int64)
        labels = np.empty(0, dtype=np.int64)

    sampled = frame[rows.tolist()].with_columns(pl.Series(SEGMENT_COLUMN, labels))
    return DownsampleResult(
        sampled,
        raw_count=raw_count,
        downsampled_count=sampled.height,
        segment_count=len(kept),
        bucket_size=float(bucket_size),
    )


__all__ = ["DownsampleResult", "SEGMENT_COLUMN", "downsample_frame", "split_segments", "subsample_arrays"]

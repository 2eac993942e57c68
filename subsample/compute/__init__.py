"""Subsampling algorithms and their columnar adapters."""

from subsample.compute.downsampling import DownsampleResult, downsample_frame, split_segments, subsample_arrays
from subsample.compute.subsampler import (
    ListSubsample,
    get_x_range,
    resolve_bucket_size,
    subsample,
    subsample_by_count,
    subsample_indices,
)

__all__ = [
    "DownsampleResult",
    "downsample_frame",
    "split_segments",
    "subsample_arrays",
    "ListSubsample",
    "get_x_range",
    "resolve_bucket_size",
    "subsample",
    "subsample_by_count",
    "subsample_indices",
]

"""Fast min/max subsampling of segmented X/Y series for chart rendering."""

from subsample.accessors import PointAccessor, array_accessor, attr_accessor, item_accessor
from subsample.compute.downsampling import DownsampleResult, downsample_frame
from subsample.compute.subsampler import (
    ListSubsample,
    get_x_range,
    resolve_bucket_size,
    subsample,
    subsample_by_count,
    subsample_indices,
)
from subsample.utils.seqs import Range, get_points_count, get_range

__version__ = "0.1.0"

__all__ = [
    "DownsampleResult",
    "ListSubsample",
    "PointAccessor",
    "Range",
    "array_accessor",
    "attr_accessor",
    "downsample_frame",
    "get_points_count",
    "get_range",
    "get_x_range",
    "item_accessor",
    "resolve_bucket_size",
    "subsample",
    "subsample_by_count",
    "subsample_indices",
]

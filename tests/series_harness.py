"""Shared builders and a brute-force reference for subsampler tests."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from subsample.accessors import attr_accessor


class Point:
    """Plain point compared by identity, like the opaque points callers pass in."""

    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"Point({self.x:g}, {self.y:g})"


ACCESSOR = attr_accessor("x", "y")


def segment(*coords: Tuple[float, float]) -> List[Point]:
    return [Point(x, y) for x, y in coords]


def flatten(series: Sequence[Optional[Sequence[Point]]]) -> List[Point]:
    return [point for seg in series if seg for point in seg]


def coords(series: Sequence[Sequence[Point]]) -> List[List[Tuple[float, float]]]:
    return [[(p.x, p.y) for p in seg] for seg in series]


def random_series(
    seed: int,
    n_segments: int = 3,
    max_points: int = 400,
    gap_scale: float = 30.0,
) -> List[List[Point]]:
    """Segments with ascending X (ties allowed) separated by random gaps."""

    rng = np.random.default_rng(seed)
    series: List[List[Point]] = []
    x = 0.0
    for _ in range(n_segments):
        n = int(rng.integers(1, max_points))
        steps = rng.integers(0, 4, size=n).astype(float)
        xs = x + np.cumsum(steps)
        ys = rng.integers(-50, 50, size=n).astype(float)
        series.append([Point(px, py) for px, py in zip(xs, ys)])
        x = float(xs[-1]) + float(rng.uniform(0.0, gap_scale))
    return series


def reference_extremes(points: Sequence[Point], bucket_size: float) -> Dict[int, Tuple[int, int]]:
    """Global indices of the (min, max) point of every bucket.

    Min ties go to the earliest point, max ties to the latest one.
    """

    origin = points[0].x
    extremes: Dict[int, Tuple[int, int]] = {}
    for index, point in enumerate(points):
        bucket = math.floor((point.x - origin) / bucket_size)
        if bucket not in extremes:
            extremes[bucket] = (index, index)
            continue
        min_index, max_index = extremes[bucket]
        if point.y < points[min_index].y:
            min_index = index
        if point.y >= points[max_index].y:
            max_index = index
        extremes[bucket] = (min_index, max_index)
    return extremes


def expected_segment_count(series: Sequence[Sequence[Point]], bucket_size: float) -> int:
    non_empty = [seg for seg in series if seg]
    if not non_empty:
        return 0
    splits = sum(1 for prev, cur in zip(non_empty, non_empty[1:]) if cur[0].x - prev[-1].x >= bucket_size)
    return 1 + splits

"""Capability objects that read X/Y coordinates out of opaque points."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter, itemgetter
from typing import Any, Callable, Generic, Hashable, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PointAccessor(Generic[T]):
    """Pair of pure functions returning the X and Y value of a point.

    ``x`` must agree with the ascending order of the input series; the
    subsampler never re-validates it.
    """

    x: Callable[[T], float]
    y: Callable[[T], float]


def item_accessor(x_key: Hashable = 0, y_key: Hashable = 1) -> PointAccessor[Any]:
    """Accessor for subscriptable points such as ``(x, y)`` tuples or dicts."""

    return PointAccessor(x=itemgetter(x_key), y=itemgetter(y_key))


def attr_accessor(x_attr: str = "x", y_attr: str = "y") -> PointAccessor[Any]:
    """Accessor for objects exposing the coordinates as attributes."""

    return PointAccessor(x=attrgetter(x_attr), y=attrgetter(y_attr))


def array_accessor(x_values: Sequence[float], y_values: Sequence[float]) -> PointAccessor[int]:
    """Accessor whose points are row ids into two parallel numeric arrays."""

    def _x(row: int) -> float:
        return float(x_values[row])

    def _y(row: int) -> float:
        return float(y_values[row])

    return PointAccessor(x=_x, y=_y)


__all__ = ["PointAccessor", "array_accessor", "attr_accessor", "item_accessor"]

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import click


def _non_negative_float(_: click.Context, __: click.Parameter, value: Optional[float]) -> Optional[float]:
    if value is not None and value < 0:
        raise click.BadParameter("Bucket size must be zero or positive.")
    return value


def column_options(func: Callable[..., Any]) -> Callable[..., Any]:
    options = [
        click.option("--x-col", required=True, help="Column holding the X values (sorted ascending)."),
        click.option("--segment-col", default=None, help="Optional column whose runs of equal values form segments."),
    ]

    for option in reversed(options):
        func = option(func)
    return func


def resolution_options(func: Callable[..., Any]) -> Callable[..., Any]:
    options = [
        click.option(
            "--points",
            type=int,
            default=None,
            help="Approximate number of buckets (env: SUBSAMPLE_TARGET_POINTS).",
        ),
        click.option(
            "--bucket-size",
            type=float,
            default=None,
            callback=_non_negative_float,
            help="Explicit X width of a bucket; 0 keeps every point.",
        ),
    ]

    for option in reversed(options):
        func = option(func)
    return func


def output_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--output",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Output file (.csv or .parquet). Defaults to <input>.subsampled<suffix>.",
    )(func)


def build_summary(**kwargs: Any) -> dict[str, Any]:
    return {key: value for key, value in kwargs.items() if value is not None}

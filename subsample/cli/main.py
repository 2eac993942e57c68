from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

import click

from subsample.compute.downsampling import downsample_frame, split_segments
from subsample.data.loader import load_series, write_series

from .config import InvalidConfigurationError, get_settings
from .options import build_summary, column_options, output_option, resolution_options


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, default=str))


def _default_output(path: Path) -> Path:
    return path.with_name(f"{path.stem}.subsampled{path.suffix}")


@click.group()
@click.option("--log-level", envvar="SUBSAMPLE_LOG_LEVEL", help="Logging level (env: SUBSAMPLE_LOG_LEVEL)")
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """Min/max subsampling of X/Y series stored as CSV or Parquet."""

    try:
        settings = get_settings(log_level=log_level)
    except InvalidConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    ctx.obj = {"settings": settings}


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@column_options
@click.option("--y-col", required=True, help="Column holding the Y values.")
@resolution_options
@output_option
@click.pass_context
def run(
    ctx: click.Context,
    path: Path,
    x_col: str,
    segment_col: Optional[str],
    y_col: str,
    points: Optional[int],
    bucket_size: Optional[float],
    output: Optional[Path],
) -> None:
    """Downsample a series file and write the result."""

    if points is not None and bucket_size is not None:
        raise click.UsageError("Use either --points or --bucket-size, not both.")

    settings = ctx.obj["settings"]
    target_points = points if points is not None else settings.target_points
    target_path = output or _default_output(path)

    try:
        frame = load_series(path)
        result = downsample_frame(
            frame,
            x_col,
            y_col,
            target_points=target_points,
            segment_col=segment_col,
            bucket_size=bucket_size,
        )
        write_series(result.downsampled, target_path)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    _echo_json(
        build_summary(
            input=str(path),
            output=str(target_path),
            raw_count=result.raw_count,
            downsampled_count=result.downsampled_count,
            segment_count=result.segment_count,
            bucket_size=result.bucket_size,
        )
    )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@column_options
def info(path: Path, x_col: str, segment_col: Optional[str]) -> None:
    """Print row count, segment count and X-range of a series file."""

    try:
        frame = load_series(path)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    for column in (x_col, segment_col):
        if column is not None and column not in frame.columns:
            raise click.ClickException(f"Column {column!r} not found in {path.name}")

    if segment_col is not None:
        segment_count = len(split_segments(frame[segment_col].to_numpy()))
    else:
        segment_count = 1 if frame.height else 0

    x_values = frame[x_col]
    _echo_json(
        build_summary(
            input=str(path),
            rows=frame.height,
            segments=segment_count,
            x_min=x_values.min() if frame.height else None,
            x_max=x_values.max() if frame.height else None,
        )
    )


def main(argv: Optional[list[str]] = None) -> None:
    argv = argv if argv is not None else sys.argv[1:]
    cli.main(args=argv, prog_name=os.path.basename(sys.argv[0]))


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging
from pathlib import Path

import polars as pl

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".parquet")


class UnsupportedFormatError(ValueError):
    """Raised when a series file is neither CSV nor Parquet."""


def _suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedFormatError(
            f"Unsupported file type {suffix or '<none>'!r} for {path.name}; expected one of {', '.join(SUPPORTED_SUFFIXES)}"
        )
    return suffix


def load_series(path: Path) -> pl.DataFrame:
    """Read a series table from CSV or Parquet, chosen by file suffix."""

    path = Path(path)
    if _suffix(path) == ".parquet":
        frame = pl.read_parquet(path)
    else:
        frame = pl.read_csv(path, try_parse_dates=True)
    logger.debug("Loaded %d rows from %s", frame.height, path)
    return frame


def write_series(frame: pl.DataFrame, path: Path) -> Path:
    """Write ``frame`` as CSV or Parquet depending on the suffix of ``path``."""

    path = Path(path)
    if _suffix(path) == ".parquet":
        frame.write_parquet(path)
    else:
        frame.write_csv(path)
    logger.debug("Wrote %d rows to %s", frame.height, path)
    return path

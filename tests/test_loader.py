from __future__ import annotations

from pathlib import Path

import polars as pl
import pytest

from subsample.data.loader import UnsupportedFormatError, load_series, write_series


@pytest.mark.parametrize("suffix", [".csv", ".parquet"])
def test_series_roundtrip(tmp_path: Path, suffix: str) -> None:
    frame = pl.DataFrame({"x": [0.0, 1.0, 2.5], "y": [3.0, -1.0, 4.0], "sensor": ["a", "a", "b"]})
    path = tmp_path / f"series{suffix}"

    assert write_series(frame, path) == path
    loaded = load_series(path)

    assert loaded.equals(frame)


def test_unsupported_suffix(tmp_path: Path) -> None:
    path = tmp_path / "series.txt"
    path.write_text("x,y\n0,1\n")

    with pytest.raises(UnsupportedFormatError, match=".txt"):
        load_series(path)
    with pytest.raises(ValueError):
        write_series(pl.DataFrame({"x": [1.0]}), tmp_path / "out.json")

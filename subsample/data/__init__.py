"""Data loading helpers."""

from .loader import UnsupportedFormatError, load_series, write_series

__all__ = ["UnsupportedFormatError", "load_series", "write_series"]

"""Conversion of engine output to plain records and DataFrames."""

from . import formats

__all__ = ["formats"]

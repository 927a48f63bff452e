"""Core data structures and shared helpers."""

from . import canon, catalog, rng, types, utils, validate

__all__ = ["canon", "catalog", "rng", "types", "utils", "validate"]

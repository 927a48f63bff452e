from . import (
    exceptions,
    config,
    core,
    simulate,
    analytics,
    io,
)
from .core import canon, catalog, rng, types, utils, validate

__all__ = [
    "exceptions",
    "config",
    "core",
    "canon",
    "catalog",
    "rng",
    "types",
    "utils",
    "validate",
    "simulate",
    "analytics",
    "io",
]

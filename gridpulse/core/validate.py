from __future__ import annotations
import numbers
from typing import Any

from . import canon
from .. import exceptions
from ..exceptions import require


def _is_integer(value: Any) -> bool:
    """Python or numpy integers; bools are rejected."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_days(days: Any) -> int:
    require(
        _is_integer(days),
        f"days must be an integer, got {days!r}",
    )
    require(days >= 0, f"days must be >= 0, got {days}")
    return int(days)


def check_cluster_count(cluster_count: Any) -> int:
    """Cluster count must be a positive integer (the dashboard offers 2–6)."""
    require(
        _is_integer(cluster_count),
        f"cluster_count must be an integer, got {cluster_count!r}",
    )
    require(cluster_count > 0, f"cluster_count must be > 0, got {cluster_count}")
    return int(cluster_count)


def check_label(label: int, cluster_count: int) -> int:
    if not 0 <= label < cluster_count:
        raise exceptions.InvalidArgument(
            f"Cluster label {label} outside [0, {cluster_count})."
        )
    return int(label)


def check_model(model: str) -> str:
    if model not in canon.MODEL_NAMES:
        raise exceptions.InvalidArgument(
            f"Unknown model {model!r}. Available models: {', '.join(canon.MODEL_NAMES)}"
        )
    return model

from __future__ import annotations
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, List, Sequence, Tuple

import pandas as pd

from ..core import canon, utils, validate
from ..core.types import AggregatedPoint, ClusterPoint, ClusterStat
from ..exceptions import MalformedSample

logger = logging.getLogger(__name__)


def _field(sample: Any, name: str) -> Any:
    if isinstance(sample, Mapping):
        return sample.get(name)
    return getattr(sample, name, None)


def _extract(sample: Any, value_field: str) -> Tuple[pd.Timestamp, float]:
    ts = utils.to_timestamp(_field(sample, "timestamp"))
    if ts is None:
        raise MalformedSample("sample has no readable 'timestamp'")
    value = _field(sample, value_field)
    if not utils.is_real_number(value):
        raise MalformedSample(f"'{value_field}' is not numeric: {value!r}")
    return ts, float(value)


def _as_sequence(samples: Any) -> Sequence[Any]:
    """Treat None, strings, mappings and other scalars as an empty input."""
    if samples is None or isinstance(samples, (str, bytes, Mapping)):
        return []
    if not isinstance(samples, Iterable):
        return []
    return list(samples)


def _bucketed(
    samples: Any, value_field: str, key: Callable[[pd.Timestamp], Any]
) -> pd.DataFrame:
    """
    Frame of (bucket, value) rows from well-formed samples.

    Malformed samples are dropped from both sum and count.
    """
    rows = []
    skipped = 0
    for s in _as_sequence(samples):
        try:
            ts, value = _extract(s, value_field)
        except MalformedSample as exc:
            skipped += 1
            logger.debug("Skipping sample: %s", exc)
            continue
        rows.append({"bucket": key(ts), "value": value})
    if skipped:
        logger.debug("Excluded %d malformed samples from '%s' aggregation", skipped, value_field)
    return pd.DataFrame(rows, columns=["bucket", "value"])


def by_day(samples: Any, value_field: str) -> List[AggregatedPoint]:
    """Mean of `value_field` per calendar day (YYYY-MM-DD), chronological."""
    d = _bucketed(samples, value_field, utils.day_label)
    if d.empty:
        return []
    means = d.groupby("bucket", sort=True)["value"].mean()
    return [AggregatedPoint(bucket_key=str(k), mean_value=float(v)) for k, v in means.items()]


def by_hour_of_day(samples: Any, value_field: str) -> List[AggregatedPoint]:
    """Mean of `value_field` per hour of day; always 24 buckets, empty ones at 0."""
    d = _bucketed(samples, value_field, lambda ts: int(ts.hour))
    means = (
        d.groupby("bucket")["value"].mean()
        if not d.empty
        else pd.Series(dtype=float)
    )
    means = means.reindex(range(canon.HOURS_PER_DAY), fill_value=0.0)
    return [AggregatedPoint(bucket_key=int(h), mean_value=float(v)) for h, v in means.items()]


def cluster_stats(
    points: Sequence[ClusterPoint], cluster_count: int
) -> List[ClusterStat]:
    """Per-cluster point count and mean demand/temperature/humidity.

    One row per label in [0, cluster_count); clusters without points report zeros.
    """
    cluster_count = validate.check_cluster_count(cluster_count)
    cols = ["cluster_label", "demand_kwh", "temperature_f", "humidity_pct"]
    d = pd.DataFrame(
        [{c: getattr(p, c) for c in cols} for p in points], columns=cols
    ).astype({"cluster_label": int, "demand_kwh": float, "temperature_f": float, "humidity_pct": float})
    d = d[d["cluster_label"] < cluster_count]

    g = d.groupby("cluster_label")
    stats = (
        pd.concat(
            [
                g.size().rename("count"),
                g[["demand_kwh", "temperature_f", "humidity_pct"]].mean(),
            ],
            axis=1,
        )
        .reindex(range(cluster_count))
        .fillna(0.0)
    )
    return [
        ClusterStat(
            cluster_label=int(label),
            count=int(row["count"]),
            avg_demand_kwh=float(row["demand_kwh"]),
            avg_temperature_f=float(row["temperature_f"]),
            avg_humidity_pct=float(row["humidity_pct"]),
        )
        for label, row in stats.iterrows()
    ]

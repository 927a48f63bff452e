from __future__ import annotations
import logging
from datetime import datetime
from typing import List, Optional, Protocol, Tuple

import pandas as pd

from ..config import ClusterConfig, EngineConfig, default_config
from ..core import canon, catalog, rng as rng_mod, utils, validate
from ..core.rng import RandomSource
from ..core.types import ClusterPoint

logger = logging.getLogger(__name__)


class ClusterLabeler(Protocol):
    """Strategy that assigns a cluster label to the i-th generated point."""

    def assign(self, index: int, cluster_count: int) -> int: ...


class RoundRobinLabeler:
    """
    Label = index mod cluster_count.

    No distance computation is involved; labels are balanced to within one
    point per cluster and the points are then placed around their center.
    """

    def assign(self, index: int, cluster_count: int) -> int:
        return index % cluster_count


def _centers(
    rng: RandomSource, cluster_count: int, cfg: ClusterConfig
) -> List[Tuple[float, float]]:
    e = cfg.center_extent
    return [
        (rng_mod.uniform(rng, -e, e), rng_mod.uniform(rng, -e, e))
        for _ in range(cluster_count)
    ]


def _point_timestamp(
    rng: RandomSource, now: pd.Timestamp, cfg: ClusterConfig
) -> datetime:
    days_back = rng_mod.randint(rng, cfg.lookback_days)
    hour = rng_mod.randint(rng, canon.HOURS_PER_DAY)
    day = (now - pd.DateOffset(days=days_back)).normalize()
    return (day + pd.DateOffset(hours=hour)).to_pydatetime()


def generate_clusters(
    city_id: str,
    cluster_count: int = canon.DEFAULT_CLUSTER_COUNT,
    *,
    rng: Optional[RandomSource] = None,
    now: Optional[datetime] = None,
    labeler: Optional[ClusterLabeler] = None,
    config: Optional[EngineConfig] = None,
) -> List[ClusterPoint]:
    """
    Synthetic 2D point cloud for the cluster scatter plot.

    Centers are drawn in [-4, 4]^2, each point sits within +-1 of its
    label's center. Demand/weather attributes are independent draws.
    """
    cluster_count = validate.check_cluster_count(cluster_count)
    cfg = config or default_config()
    ccfg = cfg.clusters
    source = rng or rng_mod.default_source()
    labeler = labeler or RoundRobinLabeler()
    local = utils.local_now(catalog.tz_for(city_id, cfg.tz), now)

    centers = _centers(source, cluster_count, ccfg)
    points: List[ClusterPoint] = []
    for i in range(ccfg.points):
        label = validate.check_label(labeler.assign(i, cluster_count), cluster_count)
        cx, cy = centers[label]
        points.append(
            ClusterPoint(
                id=i,
                x=cx + rng_mod.uniform(source, -ccfg.spread, ccfg.spread),
                y=cy + rng_mod.uniform(source, -ccfg.spread, ccfg.spread),
                cluster_label=label,
                timestamp=_point_timestamp(source, local, ccfg),
                demand_kwh=rng_mod.uniform(source, *ccfg.demand_range),
                temperature_f=rng_mod.uniform(source, *ccfg.temperature_range),
                humidity_pct=rng_mod.uniform(source, *ccfg.humidity_range),
                wind_speed_mph=rng_mod.uniform(source, *ccfg.wind_range),
                precipitation=rng_mod.uniform(source, *ccfg.precipitation_range),
                city_id=city_id,
            )
        )
    logger.debug(
        "Generated %d cluster points (%d clusters) for %s",
        len(points),
        cluster_count,
        city_id,
    )
    return points

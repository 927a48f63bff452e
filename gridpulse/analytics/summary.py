from __future__ import annotations
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, cast

from ..config import EngineConfig, default_config
from ..core import canon, catalog, rng as rng_mod, validate
from ..core.types import AggregatedPoint
from ..io import formats
from ..simulate import generate_clusters, generate_forecast, generate_series
from . import aggregate, metrics
from .types import CityDataset, DashboardPayload

logger = logging.getLogger(__name__)


def build_city_dataset(
    city_id: str,
    *,
    days: int = canon.DEFAULT_DAYS,
    cluster_count: int = canon.DEFAULT_CLUSTER_COUNT,
    seed: Optional[int] = None,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> Optional[CityDataset]:
    """
    Generate every dataset the dashboard shows for one city.

    Returns None for an unknown city. Each generator gets its own random
    stream (derived from `seed` when given), so the outputs don't depend on
    the order in which they are produced.
    """
    city = catalog.resolve(city_id)
    if city is None:
        logger.info("No data for unknown city %r", city_id)
        return None

    days = validate.check_days(days)
    cluster_count = validate.check_cluster_count(cluster_count)
    cfg = config or default_config()
    series_rng, cluster_rng, forecast_rng = rng_mod.spawn(seed, 3)

    demand, weather = generate_series(city.id, days, rng=series_rng, now=now, config=cfg)
    clusters = generate_clusters(
        city.id, cluster_count, rng=cluster_rng, now=now, config=cfg
    )
    forecasts = generate_forecast(city.id, rng=forecast_rng, now=now, config=cfg)
    return CityDataset(
        city=city,
        demand=demand,
        weather=weather,
        clusters=clusters,
        forecasts=forecasts,
        cluster_count=cluster_count,
    )


def _points(points: Sequence[AggregatedPoint]) -> List[Dict[str, Any]]:
    return [{"key": p.bucket_key, "value": p.mean_value} for p in points]


def summarise(ds: CityDataset, model: str = canon.DEFAULT_MODEL) -> DashboardPayload:
    validate.check_model(model)

    start = ds.demand[0].timestamp.isoformat() if ds.demand else None
    end = ds.demand[-1].timestamp.isoformat() if ds.demand else None
    days = len(ds.demand) // canon.HOURS_PER_DAY

    daily = {
        "demand": _points(aggregate.by_day(ds.demand, canon.DEMAND_FIELD)),
        "temperature": _points(aggregate.by_day(ds.weather, canon.TEMPERATURE_FIELD)),
        "humidity": _points(aggregate.by_day(ds.weather, canon.HUMIDITY_FIELD)),
    }
    hourly = [
        {"hour": p.bucket_key, "demand": p.mean_value}
        for p in aggregate.by_hour_of_day(ds.demand, canon.DEMAND_FIELD)
    ]
    stats = aggregate.cluster_stats(ds.clusters, ds.cluster_count)
    err_metrics = metrics.compute_metrics(ds.forecasts, model)
    errors = metrics.error_series(ds.forecasts, model)

    payload: DashboardPayload = cast(
        DashboardPayload,
        {
            "meta": {
                "city_id": ds.city.id,
                "city_name": ds.city.name,
                "region": ds.city.region,
                "start": start,
                "end": end,
                "days": days,
                "model": model,
                "cluster_count": ds.cluster_count,
            },
            "daily": daily,
            "hourly_demand": hourly,
            "clusters": formats.to_records(stats),
            "metrics": err_metrics.model_dump(),
            "errors": formats.to_records(errors),
        },
    )
    return payload

from __future__ import annotations
from typing import TypedDict, List, Dict, Optional
from dataclasses import dataclass

from ..core.types import (
    City,
    ClusterPoint,
    DemandSample,
    ForecastSample,
    WeatherSample,
)


###
### DATASET
###


@dataclass
class CityDataset:
    city: City
    demand: List[DemandSample]
    weather: List[WeatherSample]
    clusters: List[ClusterPoint]
    forecasts: List[ForecastSample]
    cluster_count: int


###
### SUMMARY
###


class DashboardMeta(TypedDict):
    city_id: str
    city_name: str
    region: str
    start: Optional[str]
    end: Optional[str]
    days: int
    model: str
    cluster_count: int


class DailySeries(TypedDict):
    demand: List[Dict[str, float | str]]
    temperature: List[Dict[str, float | str]]
    humidity: List[Dict[str, float | str]]


class MetricsDict(TypedDict):
    mae: float
    rmse: float
    mape: float


class DashboardPayload(TypedDict):
    meta: DashboardMeta
    daily: DailySeries
    hourly_demand: List[Dict[str, float | int]]
    clusters: List[Dict[str, float | int]]
    metrics: MetricsDict
    errors: List[Dict[str, float | str]]

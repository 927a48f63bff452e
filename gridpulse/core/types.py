from __future__ import annotations
from typing import Literal, Optional, Union
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

ModelName = Literal[
    "ARIMA", "XGBoost", "LSTM", "Linear", "Polynomial", "RandomForest", "Ensemble"
]


class _Entity(BaseModel):
    """Immutable value object; unknown fields are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")


###
### CATALOG
###


class City(_Entity):
    """A supported city.

    Attributes:
        id: Short identifier used across the engine (e.g. 'nyc')
        name: Display name
        region: US state code
        tz: IANA time zone used for generated timestamps
    """

    id: str
    name: str
    region: str
    tz: str


###
### TIME SERIES
###


class DemandSample(_Entity):
    timestamp: datetime
    demand_kwh: float = Field(ge=0)
    city_id: str


class WeatherSample(_Entity):
    timestamp: datetime
    temperature_f: float
    humidity_pct: float = Field(ge=0, le=100)
    wind_speed_mph: float = Field(ge=0)
    precipitation: float = Field(ge=0)
    city_id: str


###
### CLUSTERS
###


class ClusterPoint(_Entity):
    """A point in the 2D embedding used for the cluster scatter plot.

    Demand/weather attributes are sampled independently of (x, y).
    """

    id: int
    x: float
    y: float
    cluster_label: int = Field(ge=0)
    demand_kwh: float = Field(ge=0)
    temperature_f: float
    humidity_pct: float = Field(ge=0, le=100)
    wind_speed_mph: float = Field(ge=0)
    precipitation: float = Field(ge=0)
    timestamp: datetime
    city_id: str


class ClusterStat(_Entity):
    cluster_label: int
    count: int = Field(ge=0)
    avg_demand_kwh: float
    avg_temperature_f: float
    avg_humidity_pct: float


###
### FORECASTS
###


class ForecastSample(_Entity):
    """Forecast row. `actual` is present for historical hours only."""

    timestamp: datetime
    actual: Optional[float] = None
    predicted: float
    city_id: str
    model: ModelName


class ForecastError(_Entity):
    timestamp: datetime
    error: float  # predicted - actual


class ErrorMetrics(_Entity):
    mae: float = Field(default=0.0, ge=0)
    rmse: float = Field(default=0.0, ge=0)
    mape: float = Field(default=0.0, ge=0)


###
### AGGREGATES
###


class AggregatedPoint(_Entity):
    bucket_key: Union[int, str]  # hour-of-day (0-23) or 'YYYY-MM-DD'
    mean_value: float

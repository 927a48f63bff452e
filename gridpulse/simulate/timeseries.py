from __future__ import annotations
import logging
from datetime import datetime
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from ..config import DemandConfig, EngineConfig, WeatherConfig, default_config
from ..core import canon, catalog, rng as rng_mod, utils, validate
from ..core.rng import RandomSource
from ..core.types import DemandSample, WeatherSample

logger = logging.getLogger(__name__)


def _uniform(rng: RandomSource, n: int, low: float, high: float) -> np.ndarray:
    return np.array([rng_mod.uniform(rng, low, high) for _ in range(n)], dtype=float)


def _daily_shape(idx: pd.DatetimeIndex) -> np.ndarray:
    """sin((hour - 6) * pi / 12): peaks at 12:00, troughs at 00:00."""
    hour = idx.hour.to_numpy(dtype=float)
    return np.sin((hour - 6.0) * np.pi / 12.0)


def demand_values(
    idx: pd.DatetimeIndex, rng: RandomSource, cfg: DemandConfig
) -> np.ndarray:
    n = len(idx)
    base = cfg.base_load + _uniform(rng, n, 0.0, cfg.base_load_jitter)
    time_of_day = cfg.daily_amplitude * _daily_shape(idx)
    factor = np.where(utils.weekend_mask(idx), cfg.weekend_factor, 1.0)
    noise = _uniform(rng, n, -cfg.noise, cfg.noise)
    demand = np.maximum(0.0, (base + time_of_day) * factor + noise)
    return np.round(demand, cfg.decimals)


def weather_values(
    idx: pd.DatetimeIndex, rng: RandomSource, cfg: WeatherConfig
) -> dict[str, np.ndarray]:
    """
    Weather columns for an hourly index.

    hour_index is the sample position (day * 24 + hour), driving the
    slow multi-day cycles; the local hour drives the daily cycle.
    """
    n = len(idx)
    hour_index = np.arange(n, dtype=float)

    base_temp = cfg.base_temp_f + cfg.temp_cycle_amplitude * np.sin(
        hour_index * np.pi / cfg.temp_cycle_hours
    )
    hourly = cfg.temp_daily_amplitude * _daily_shape(idx)
    temperature = base_temp + hourly + _uniform(rng, n, -cfg.temp_noise, cfg.temp_noise)

    humidity = (
        cfg.humidity_base
        + cfg.humidity_amplitude * np.sin(hour_index * np.pi / cfg.humidity_cycle_hours)
        + _uniform(rng, n, -cfg.humidity_noise, cfg.humidity_noise)
    )
    humidity = np.clip(humidity, 0.0, 100.0)

    wind = (
        cfg.wind_base
        + cfg.wind_amplitude * np.sin(hour_index * np.pi / cfg.wind_cycle_hours)
        + _uniform(rng, n, 0.0, cfg.wind_gust)
    )
    wind = np.maximum(0.0, wind)

    precip = cfg.precip_amplitude * np.sin(
        hour_index * np.pi / cfg.precip_cycle_hours
    ) + _uniform(rng, n, 0.0, cfg.precip_noise)
    precip = np.maximum(0.0, precip)

    return {
        "temperature_f": np.round(temperature, cfg.decimals),
        "humidity_pct": np.round(humidity, cfg.decimals),
        "wind_speed_mph": np.round(wind, cfg.decimals),
        "precipitation": np.round(precip, cfg.precip_decimals),
    }


def _timeline(
    city_id: str, days: int, now: Optional[datetime], cfg: EngineConfig
) -> pd.DatetimeIndex:
    days = validate.check_days(days)
    tz = catalog.tz_for(city_id, cfg.tz)
    return utils.hourly_window(days, tz=tz, now=now)


def _demand_samples(
    city_id: str, idx: pd.DatetimeIndex, rng: RandomSource, cfg: EngineConfig
) -> List[DemandSample]:
    values = demand_values(idx, rng, cfg.demand)
    return [
        DemandSample(timestamp=ts.to_pydatetime(), demand_kwh=float(v), city_id=city_id)
        for ts, v in zip(idx, values)
    ]


def _weather_samples(
    city_id: str, idx: pd.DatetimeIndex, rng: RandomSource, cfg: EngineConfig
) -> List[WeatherSample]:
    cols = weather_values(idx, rng, cfg.weather)
    return [
        WeatherSample(
            timestamp=ts.to_pydatetime(),
            temperature_f=float(cols["temperature_f"][i]),
            humidity_pct=float(cols["humidity_pct"][i]),
            wind_speed_mph=float(cols["wind_speed_mph"][i]),
            precipitation=float(cols["precipitation"][i]),
            city_id=city_id,
        )
        for i, ts in enumerate(idx)
    ]


def generate_demand(
    city_id: str,
    days: int = canon.DEFAULT_DAYS,
    *,
    rng: Optional[RandomSource] = None,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> List[DemandSample]:
    """Hourly demand for the `days` whole days before today, oldest first."""
    cfg = config or default_config()
    idx = _timeline(city_id, days, now, cfg)
    out = _demand_samples(city_id, idx, rng or rng_mod.default_source(), cfg)
    logger.debug("Generated %d demand samples for %s", len(out), city_id)
    return out


def generate_weather(
    city_id: str,
    days: int = canon.DEFAULT_DAYS,
    *,
    rng: Optional[RandomSource] = None,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> List[WeatherSample]:
    """Hourly weather on the same timeline as generate_demand."""
    cfg = config or default_config()
    idx = _timeline(city_id, days, now, cfg)
    out = _weather_samples(city_id, idx, rng or rng_mod.default_source(), cfg)
    logger.debug("Generated %d weather samples for %s", len(out), city_id)
    return out


def generate_series(
    city_id: str,
    days: int = canon.DEFAULT_DAYS,
    *,
    rng: Optional[RandomSource] = None,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> Tuple[List[DemandSample], List[WeatherSample]]:
    """Demand and weather generated in lockstep from a single timeline."""
    cfg = config or default_config()
    idx = _timeline(city_id, days, now, cfg)
    source = rng or rng_mod.default_source()
    demand = _demand_samples(city_id, idx, source, cfg)
    weather = _weather_samples(city_id, idx, source, cfg)
    logger.debug("Generated %d hourly demand/weather pairs for %s", len(idx), city_id)
    return demand, weather

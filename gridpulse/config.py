from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from .core import canon


@dataclass
class DemandConfig:
    base_load: float = 500.0
    base_load_jitter: float = 100.0  # U(0, jitter) added to base_load
    daily_amplitude: float = 300.0  # peak mid-day, trough overnight
    weekend_factor: float = 0.8  # Saturday/Sunday
    noise: float = 25.0  # U(-noise, noise)
    decimals: int = 2


@dataclass
class WeatherConfig:
    # Temperature: slow multi-day cycle plus a daily cycle
    base_temp_f: float = 60.0
    temp_cycle_amplitude: float = 15.0
    temp_cycle_hours: float = 84.0
    temp_daily_amplitude: float = 10.0
    temp_noise: float = 2.5

    humidity_base: float = 50.0
    humidity_amplitude: float = 20.0
    humidity_cycle_hours: float = 72.0
    humidity_noise: float = 5.0

    wind_base: float = 5.0
    wind_amplitude: float = 3.0
    wind_cycle_hours: float = 48.0
    wind_gust: float = 3.0  # U(0, gust)

    precip_amplitude: float = 2.0
    precip_cycle_hours: float = 60.0
    precip_noise: float = 0.5  # U(0, noise)

    decimals: int = 1
    precip_decimals: int = 2


@dataclass
class ClusterConfig:
    points: int = canon.POINTS_PER_CALL
    center_extent: float = 4.0  # centers in [-extent, extent]^2
    spread: float = 1.0  # points within +-spread of their center
    lookback_days: int = 7

    # (low, high) uniform ranges for point attributes
    demand_range: Tuple[float, float] = (500.0, 1000.0)
    temperature_range: Tuple[float, float] = (50.0, 90.0)
    humidity_range: Tuple[float, float] = (30.0, 90.0)
    wind_range: Tuple[float, float] = (0.0, 15.0)
    precipitation_range: Tuple[float, float] = (0.0, 0.5)


@dataclass
class ForecastConfig:
    history_hours: int = canon.HISTORY_HOURS
    horizon_hours: int = canon.HORIZON_HOURS
    base_value: float = 500.0
    amplitude: float = 300.0
    period_hours: float = 24.0
    phase_shift_hours: int = 24
    actual_noise: float = 50.0  # U(-noise, noise) on historical actuals
    decimals: int = 2

    def base_signal(self, hour: int) -> float:
        return self.base_value + self.amplitude * math.sin(
            (hour + self.phase_shift_hours) * 2 * math.pi / self.period_hours
        )


@dataclass
class EngineConfig:
    tz: str = canon.DEFAULT_TZ  # used for ids missing from the catalog
    demand: DemandConfig = field(default_factory=DemandConfig)
    weather: WeatherConfig = field(default_factory=WeatherConfig)
    clusters: ClusterConfig = field(default_factory=ClusterConfig)
    forecast: ForecastConfig = field(default_factory=ForecastConfig)


def default_config() -> EngineConfig:
    return EngineConfig()

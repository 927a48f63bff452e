"""Tests for hourly demand and weather generation."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import numpy as np
import pytest

from gridpulse.config import default_config
from gridpulse.exceptions import InvalidArgument
from gridpulse.simulate import timeseries



@pytest.mark.parametrize("days", [0, 1, 3, 7])
def test_sample_counts_and_alignment(days, now, make_rng):
    demand = timeseries.generate_demand("nyc", days, rng=make_rng(1), now=now)
    weather = timeseries.generate_weather("nyc", days, rng=make_rng(2), now=now)
    assert len(demand) == days * 24
    assert len(weather) == days * 24
    assert [d.timestamp for d in demand] == [w.timestamp for w in weather]


def test_timestamps_hourly_ascending(now, rng):
    demand = timeseries.generate_demand("nyc", 7, rng=rng, now=now)
    for a, b in zip(demand, demand[1:]):
        assert b.timestamp - a.timestamp == timedelta(hours=1)


def test_window_covers_whole_days_before_today(now, rng):
    """Seven days before 2025-03-20: 13th 00:00 through 19th 23:00 local."""
    demand = timeseries.generate_demand("nyc", 7, rng=rng, now=now)
    first, last = demand[0].timestamp, demand[-1].timestamp
    assert (first.year, first.month, first.day, first.hour) == (2025, 3, 13, 0)
    assert (last.year, last.month, last.day, last.hour) == (2025, 3, 19, 23)
    # demand/weather timelines run on standard time (EST), not EDT
    assert first.utcoffset() == timedelta(hours=-5)


def test_generate_series_lockstep(now, rng):
    demand, weather = timeseries.generate_series("chi", 2, rng=rng, now=now)
    assert len(demand) == len(weather) == 48
    for d, w in zip(demand, weather):
        assert d.timestamp == w.timestamp
        assert d.city_id == w.city_id == "chi"
    # Chicago samples carry Central standard time
    assert demand[0].timestamp.utcoffset() == timedelta(hours=-6)


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
def test_value_bounds_hold_for_any_seed(seed, now, make_rng):
    demand, weather = timeseries.generate_series("phx", 7, rng=make_rng(seed), now=now)
    assert all(d.demand_kwh >= 0 for d in demand)
    for w in weather:
        assert 0 <= w.humidity_pct <= 100
        assert w.wind_speed_mph >= 0
        assert w.precipitation >= 0


def test_clamps_hold_with_extreme_config(now, rng):
    """Forcing the raw signals negative/over 100 still yields clamped values."""
    cfg = default_config()
    cfg.demand.base_load = -2000.0
    cfg.weather.humidity_base = 180.0
    cfg.weather.wind_base = -50.0
    cfg.weather.precip_amplitude = -10.0
    demand, weather = timeseries.generate_series("nyc", 2, rng=rng, now=now, config=cfg)
    assert all(d.demand_kwh == 0 for d in demand)
    assert all(w.humidity_pct == 100 for w in weather)
    assert all(w.wind_speed_mph == 0 for w in weather)
    assert all(w.precipitation >= 0 for w in weather)


def test_weekend_factor_applies(now, rng):
    """Without noise, Saturday noon demand is 0.8 x Friday noon demand."""
    cfg = default_config()
    cfg.demand.base_load_jitter = 0.0
    cfg.demand.noise = 0.0
    demand = timeseries.generate_demand("nyc", 7, rng=rng, now=now, config=cfg)
    by_day_hour = {(d.timestamp.day, d.timestamp.hour): d.demand_kwh for d in demand}
    friday, saturday = by_day_hour[(14, 12)], by_day_hour[(15, 12)]
    assert friday == pytest.approx(800.0)
    assert saturday == pytest.approx(640.0)
    # overnight trough: 500 - 300 on a weekday
    assert by_day_hour[(14, 0)] == pytest.approx(200.0)


def test_values_are_rounded(now, rng):
    demand, weather = timeseries.generate_series("nyc", 1, rng=rng, now=now)
    assert all(round(d.demand_kwh, 2) == d.demand_kwh for d in demand)
    assert all(round(w.temperature_f, 1) == w.temperature_f for w in weather)
    assert all(round(w.precipitation, 2) == w.precipitation for w in weather)


def test_same_seed_same_output(now, make_rng):
    a = timeseries.generate_demand("sd", 3, rng=make_rng(77), now=now)
    b = timeseries.generate_demand("sd", 3, rng=make_rng(77), now=now)
    assert a == b


def test_negative_days_rejected(now, rng):
    with pytest.raises(InvalidArgument):
        timeseries.generate_demand("nyc", -1, rng=rng, now=now)
    with pytest.raises(InvalidArgument):
        timeseries.generate_weather("nyc", -3, rng=rng, now=now)


def test_unknown_city_uses_default_zone(now, rng):
    cfg = default_config()
    cfg.tz = "UTC"
    demand = timeseries.generate_demand("atlantis", 1, rng=rng, now=now, config=cfg)
    assert len(demand) == 24
    assert demand[0].timestamp.utcoffset() == timedelta(0)
    assert demand[0].city_id == "atlantis"


@pytest.mark.parametrize(
    "now_local, day",
    [
        (datetime(2025, 3, 10, 12), 9),  # 2025-03-09 springs forward
        (datetime(2025, 11, 3, 12), 2),  # 2025-11-02 falls back
    ],
)
def test_dst_day_stays_a_whole_calendar_day(now_local, day, rng):
    now = now_local.replace(tzinfo=ZoneInfo("America/New_York"))
    demand, weather = timeseries.generate_series("nyc", 1, rng=rng, now=now)
    assert len(demand) == len(weather) == 24
    assert [d.timestamp.hour for d in demand] == list(range(24))
    assert {d.timestamp.day for d in demand} == {day}
    for a, b in zip(demand, demand[1:]):
        assert b.timestamp - a.timestamp == timedelta(hours=1)


def test_week_across_dst_has_seven_full_days(rng):
    now = datetime(2025, 3, 12, 9, tzinfo=ZoneInfo("America/New_York"))
    demand = timeseries.generate_demand("nyc", 7, rng=rng, now=now)
    days = {}
    for d in demand:
        days.setdefault(d.timestamp.date(), []).append(d.timestamp.hour)
    assert len(days) == 7
    assert all(hours == list(range(24)) for hours in days.values())
    assert demand[-1].timestamp.day == 11 and demand[-1].timestamp.hour == 23


def test_numpy_integer_days_accepted(now, rng):
    demand = timeseries.generate_demand("nyc", np.int64(2), rng=rng, now=now)
    assert len(demand) == 48
    with pytest.raises(InvalidArgument):
        timeseries.generate_demand("nyc", True, rng=rng, now=now)
    with pytest.raises(InvalidArgument):
        timeseries.generate_demand("nyc", 1.5, rng=rng, now=now)

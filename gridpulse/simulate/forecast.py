from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

from ..config import EngineConfig, default_config
from ..core import catalog, rng as rng_mod, utils
from ..core.rng import RandomSource
from ..core.types import ForecastSample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Waveform:
    amplitude: float
    period_hours: float
    phase: float

    def at(self, hour: int) -> float:
        if self.amplitude == 0:
            return 0.0
        return self.amplitude * math.sin(2 * math.pi * hour / self.period_hours + self.phase)


@dataclass(frozen=True)
class ModelProfile:
    """Noise/bias profile of one simulated forecasting model.

    historical_error_factor: relative error band for backtest predictions,
        predicted = actual * (1 + U(-e, e)); lower tracks tighter.
    future_noise_scale: U(-s, s) added to future predictions.
    future_waveform: deterministic model-specific wobble on the future base signal.
    """

    name: str
    historical_error_factor: float
    future_noise_scale: float
    future_waveform: Waveform


MODEL_PROFILES: Sequence[ModelProfile] = (
    ModelProfile("ARIMA", 0.12, 60.0, Waveform(40.0, 12.0, 0.0)),
    ModelProfile("XGBoost", 0.09, 45.0, Waveform(25.0, 8.0, math.pi / 4)),
    ModelProfile("LSTM", 0.08, 40.0, Waveform(30.0, 6.0, math.pi / 3)),
    ModelProfile("Linear", 0.11, 55.0, Waveform(20.0, 24.0, math.pi / 2)),
    ModelProfile("Polynomial", 0.095, 50.0, Waveform(35.0, 10.0, math.pi / 6)),
    ModelProfile("RandomForest", 0.085, 42.0, Waveform(20.0, 9.0, 2 * math.pi / 3)),
    # Stabilised aggregate of the others: smallest noise, no extra waveform
    ModelProfile("Ensemble", 0.07, 20.0, Waveform(0.0, 24.0, 0.0)),
)


def get_profile(name: str) -> Optional[ModelProfile]:
    return next((p for p in MODEL_PROFILES if p.name == name), None)


def generate_forecast(
    city_id: str,
    *,
    rng: Optional[RandomSource] = None,
    now: Optional[datetime] = None,
    profiles: Sequence[ModelProfile] = MODEL_PROFILES,
    config: Optional[EngineConfig] = None,
) -> List[ForecastSample]:
    """
    Forecast rows for relative hours [-72, +24) and every model profile.

    Historical hours share one noisy `actual` per timestamp and each model
    predicts around it; future hours carry predictions only. Rows are grouped
    by timestamp ascending, models in profile order.
    """
    cfg = config or default_config()
    fcfg = cfg.forecast
    source = rng or rng_mod.default_source()
    tz = catalog.tz_for(city_id, cfg.tz)
    idx = utils.relative_hours(-fcfg.history_hours, fcfg.horizon_hours, tz=tz, now=now)

    out: List[ForecastSample] = []
    for hour, ts in zip(range(-fcfg.history_hours, fcfg.horizon_hours), idx):
        base = fcfg.base_signal(hour)
        stamp = ts.to_pydatetime()

        if hour < 0:
            actual = base + rng_mod.uniform(source, -fcfg.actual_noise, fcfg.actual_noise)
            for p in profiles:
                e = p.historical_error_factor
                predicted = actual * (1 + rng_mod.uniform(source, -e, e))
                out.append(
                    ForecastSample(
                        timestamp=stamp,
                        actual=round(actual, fcfg.decimals),
                        predicted=round(predicted, fcfg.decimals),
                        city_id=city_id,
                        model=p.name,
                    )
                )
        else:
            for p in profiles:
                s = p.future_noise_scale
                predicted = base + p.future_waveform.at(hour) + rng_mod.uniform(source, -s, s)
                out.append(
                    ForecastSample(
                        timestamp=stamp,
                        actual=None,
                        predicted=round(predicted, fcfg.decimals),
                        city_id=city_id,
                        model=p.name,
                    )
                )

    logger.debug(
        "Generated %d forecast rows (%d models) for %s", len(out), len(profiles), city_id
    )
    return out

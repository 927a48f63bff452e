from __future__ import annotations
from typing import Final, Tuple

DEFAULT_TZ: Final[str] = "America/New_York"
DEFAULT_DAYS: Final[int] = 7
DEFAULT_CLUSTER_COUNT: Final[int] = 4
POINTS_PER_CALL: Final[int] = 200
HOURS_PER_DAY: Final[int] = 24

# Relative hour window for forecasts: [-HISTORY_HOURS, HORIZON_HOURS)
HISTORY_HOURS: Final[int] = 72
HORIZON_HOURS: Final[int] = 24

# Declaration order drives forecast row order within a timestamp
MODEL_NAMES: Final[Tuple[str, ...]] = (
    "ARIMA",
    "XGBoost",
    "LSTM",
    "Linear",
    "Polynomial",
    "RandomForest",
    "Ensemble",
)
DEFAULT_MODEL: Final[str] = "Ensemble"

# Fields the dashboard aggregates
DEMAND_FIELD: Final[str] = "demand_kwh"
TEMPERATURE_FIELD: Final[str] = "temperature_f"
HUMIDITY_FIELD: Final[str] = "humidity_pct"

from __future__ import annotations
import logging
from typing import List, Sequence

import numpy as np

from ..core import canon
from ..core.types import ErrorMetrics, ForecastError, ForecastSample

logger = logging.getLogger(__name__)


def _historical(
    samples: Sequence[ForecastSample], model_filter: str
) -> List[ForecastSample]:
    """Rows with an actual value for the selected model only."""
    return [s for s in samples if s.actual is not None and s.model == model_filter]


def compute_metrics(
    samples: Sequence[ForecastSample], model_filter: str = canon.DEFAULT_MODEL
) -> ErrorMetrics:
    """
    MAE, RMSE and MAPE of predicted vs actual for one model.

    MAPE divides by max(|actual|, 1), so actuals near zero inflate the
    percentage. An empty selection returns all-zero metrics.
    """
    rows = _historical(samples, model_filter)
    if not rows:
        logger.debug("No historical rows for model %s; returning zero metrics", model_filter)
        return ErrorMetrics(mae=0.0, rmse=0.0, mape=0.0)

    actual = np.array([r.actual or 0.0 for r in rows], dtype=float)
    predicted = np.array([r.predicted for r in rows], dtype=float)
    err = predicted - actual
    abs_err = np.abs(err)

    mae = float(abs_err.mean())
    rmse = float(np.sqrt(np.mean(err**2)))
    mape = float(np.mean(abs_err / np.maximum(np.abs(actual), 1.0)) * 100.0)
    return ErrorMetrics(mae=mae, rmse=rmse, mape=mape)


def error_series(
    samples: Sequence[ForecastSample], model_filter: str = canon.DEFAULT_MODEL
) -> List[ForecastError]:
    """Signed error (predicted - actual) per historical row of one model, input order."""
    return [
        ForecastError(timestamp=r.timestamp, error=r.predicted - (r.actual or 0.0))
        for r in _historical(samples, model_filter)
    ]

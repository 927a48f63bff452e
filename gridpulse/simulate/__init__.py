"""Synthetic data generators."""

from . import clusters, forecast, timeseries
from .clusters import ClusterLabeler, RoundRobinLabeler, generate_clusters
from .forecast import MODEL_PROFILES, ModelProfile, Waveform, generate_forecast
from .timeseries import generate_demand, generate_series, generate_weather

__all__ = [
    "clusters",
    "forecast",
    "timeseries",
    "ClusterLabeler",
    "RoundRobinLabeler",
    "MODEL_PROFILES",
    "ModelProfile",
    "Waveform",
    "generate_clusters",
    "generate_demand",
    "generate_forecast",
    "generate_series",
    "generate_weather",
]

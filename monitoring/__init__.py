"""Monitoring module - Prometheus metrics for the SDK client."""

from monitoring.recorders import Metrics

__all__ = [
    "Metrics",
]

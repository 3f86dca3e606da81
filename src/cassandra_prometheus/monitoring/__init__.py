"""
Monitoring package initialization.

Exports:
- CassandraDriverMetricsCollector: Prometheus collector for driver metrics.
- ClientRegistry: Thread-safe client name to metrics source mapping.
- TimerMetricFamilyBuilder: Timer to quantile/count/mean family translation.
"""

from .collector import CassandraDriverMetricsCollector
from .exposition import create_collector, generate_metrics_text, start_metrics_server
from .registry import ClientRegistry
from .timer import TimerMetricFamilyBuilder

__all__ = [
    "CassandraDriverMetricsCollector",
    "ClientRegistry",
    "TimerMetricFamilyBuilder",
    "create_collector",
    "generate_metrics_text",
    "start_metrics_server",
]

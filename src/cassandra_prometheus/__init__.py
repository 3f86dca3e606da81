"""
Cassandra driver Prometheus exporter

Exposes the counters, gauges and request timer of one or more Cassandra
driver client instances as Prometheus metric families, labeled by client name.
"""

__version__ = "1.0.0"

from .config.settings import Settings
from .monitoring.collector import CassandraDriverMetricsCollector

__all__ = ["Settings", "CassandraDriverMetricsCollector"]

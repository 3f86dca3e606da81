"""
Scrape surface helpers: collector wiring, text rendering and the HTTP endpoint
"""

from prometheus_client import generate_latest, start_http_server
from prometheus_client.registry import REGISTRY, CollectorRegistry

from ..config.settings import Settings
from ..config.settings import settings as default_settings
from ..utils.logging import get_logger
from .collector import CassandraDriverMetricsCollector

logger = get_logger(__name__)


def create_collector(
    settings: Settings | None = None,
    registry: CollectorRegistry = REGISTRY,
) -> CassandraDriverMetricsCollector:
    """Build a collector, registering it when ``auto_register`` is enabled"""
    settings = settings or default_settings

    collector = CassandraDriverMetricsCollector()
    if settings.monitoring.auto_register:
        collector.register(registry)
        logger.info("Cassandra driver collector registered", app_name=settings.app_name)
    return collector


def generate_metrics_text(registry: CollectorRegistry = REGISTRY) -> str:
    """Render ``registry`` in the Prometheus text format"""
    return generate_latest(registry).decode("utf-8")


def start_metrics_server(
    registry: CollectorRegistry = REGISTRY,
    settings: Settings | None = None,
):
    """Serve ``registry`` over HTTP on the configured address.

    Returns whatever ``prometheus_client.start_http_server`` returns
    (the server and its thread on current releases).
    """
    settings = settings or default_settings
    host = settings.monitoring.prometheus_host
    port = settings.monitoring.prometheus_port

    result = start_http_server(port, addr=host, registry=registry)
    logger.info("Metrics endpoint started", host=host, port=port)
    return result

"""
Prometheus collector for Cassandra driver client metrics.

Multiple client instances can report through one collector; their series
are told apart by the ``client`` label. All exported metric names start
with ``cassandra_driver_``.

Example::

    collector = CassandraDriverMetricsCollector().register()
    collector.add_client("global", cluster)
"""

from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily, Metric
from prometheus_client.registry import REGISTRY, Collector, CollectorRegistry

from ..utils.logging import get_logger
from .registry import ClientRegistry
from .sources import ERROR_TYPES, DriverMetrics, ErrorMetrics, MetricsSource
from .timer import TimerMetricFamilyBuilder

logger = get_logger(__name__)

BASE_LABEL_NAMES = ("client",)

# family name, help text, DriverMetrics attribute
GAUGES: tuple[tuple[str, str, str], ...] = (
    (
        "cassandra_driver_known_hosts",
        "The number of Cassandra hosts currently known by the driver",
        "known_hosts",
    ),
    (
        "cassandra_driver_connected_to_hosts",
        "The number of Cassandra hosts the driver is currently connected to",
        "connected_to_hosts",
    ),
    (
        "cassandra_driver_open_connections",
        "The total number of currently opened connections to Cassandra hosts",
        "open_connections",
    ),
    (
        "cassandra_driver_trashed_connections",
        "The total number of currently trashed connections to Cassandra hosts",
        "trashed_connections",
    ),
    (
        "cassandra_driver_in_flight_requests",
        "The total number of in flight requests to Cassandra hosts",
        "in_flight_requests",
    ),
    (
        "cassandra_driver_executor_queue_depth",
        "The number of queued up tasks in the main internal executor, "
        "or -1, if that number is unknown",
        "executor_queue_depth",
    ),
    (
        "cassandra_driver_blocking_executor_queue_depth",
        "The number of queued up tasks in the blocking executor, "
        "or -1, if that number is unknown",
        "blocking_executor_queue_depth",
    ),
    (
        "cassandra_driver_reconnection_scheduler_queue_size",
        "The size of the work queue for the reconnection executor, "
        "or -1, if that number is unknown",
        "reconnection_scheduler_queue_size",
    ),
    (
        "cassandra_driver_task_scheduler_queue_size",
        "The size of the work queue for the scheduled tasks executor, "
        "or -1, if that number is unknown",
        "task_scheduler_queue_size",
    ),
)

COUNTERS: tuple[tuple[str, str, str], ...] = (
    (
        "cassandra_driver_sent_bytes_total",
        "The number of bytes sent so far",
        "bytes_sent",
    ),
    (
        "cassandra_driver_received_bytes_total",
        "The number of bytes received so far",
        "bytes_received",
    ),
)

ERRORS_NAME = "cassandra_driver_errors_total"
ERRORS_HELP = "Encountered error events"

REQUEST_TIME_NAME = "cassandra_driver_request_time_seconds"
REQUEST_TIME_HELP = "Exposes the rate and latency for user requests"


class _FamilyAssembler:
    """Per-pass accumulators; never shared between collection passes"""

    def __init__(self):
        self.gauges = [
            (GaugeMetricFamily(name, help_text, labels=BASE_LABEL_NAMES), attribute)
            for name, help_text, attribute in GAUGES
        ]
        self.counters = [
            (CounterMetricFamily(name, help_text, labels=BASE_LABEL_NAMES), attribute)
            for name, help_text, attribute in COUNTERS
        ]
        self.errors = CounterMetricFamily(
            ERRORS_NAME, ERRORS_HELP, labels=(*BASE_LABEL_NAMES, "error_type")
        )
        self.request_time = TimerMetricFamilyBuilder(
            REQUEST_TIME_NAME, REQUEST_TIME_HELP, BASE_LABEL_NAMES
        )

    def add_client(self, client_name: str, metrics: DriverMetrics) -> None:
        labels = [client_name]

        self.request_time.add_timer_sample(labels, metrics.request_timer)

        for family, attribute in self.gauges:
            family.add_metric(labels, float(getattr(metrics, attribute).value))

        for family, attribute in self.counters:
            family.add_metric(labels, float(getattr(metrics, attribute).count))

        self._add_errors(client_name, metrics.errors)

    def _add_errors(self, client_name: str, errors: ErrorMetrics) -> None:
        for error_type, attribute in ERROR_TYPES:
            self.errors.add_metric(
                [client_name, error_type], float(getattr(errors, attribute).count)
            )

    def build(self) -> list[Metric]:
        families: list[Metric] = [family for family, _ in self.gauges]
        families.extend(family for family, _ in self.counters)
        families.append(self.errors)
        # Timer family goes last, it is only complete after every client
        families.append(self.request_time.build())
        return families


class CassandraDriverMetricsCollector(Collector):
    """Exports Cassandra driver metrics with a ``client`` label per instance"""

    def __init__(self, clients: ClientRegistry | None = None):
        self.clients = clients if clients is not None else ClientRegistry()

    def add_client(self, client_name: str, source: MetricsSource) -> None:
        """Add or replace the client instance with the given name.

        Args:
            client_name: Name of the client instance, used as the ``client``
                label value
            source: Object whose ``metrics`` attribute exposes the driver
                metrics, usually the driver cluster itself
        """
        self.clients.add(client_name, source)
        logger.debug("Client added", client=client_name)

    def remove_client(self, client_name: str) -> None:
        """Remove the client instance with the given name, if any"""
        self.clients.remove(client_name)
        logger.debug("Client removed", client=client_name)

    def clear(self) -> None:
        """Remove all client instances"""
        self.clients.clear()
        logger.debug("All clients removed")

    def collect(self) -> list[Metric]:
        assembler = _FamilyAssembler()
        reported: list[str] = []
        unavailable: list[str] = []

        for client_name, source in self.clients.snapshot():
            metrics = source.metrics
            if metrics is None:
                unavailable.append(client_name)
                continue
            assembler.add_client(client_name, metrics)
            reported.append(client_name)

        logger.debug(
            "Cassandra driver metrics collected",
            clients=reported,
            without_metrics=unavailable,
        )
        return assembler.build()

    def describe(self) -> list[Metric]:
        """Families without samples, used by registries to detect name clashes"""
        return _FamilyAssembler().build()

    def register(
        self, registry: CollectorRegistry = REGISTRY
    ) -> "CassandraDriverMetricsCollector":
        """Register with ``registry`` and return self for chaining"""
        registry.register(self)
        return self

    def unregister(self, registry: CollectorRegistry = REGISTRY) -> None:
        registry.unregister(self)

"""
Read-only views of the driver instrumentation consumed by the collector.

The driver owns the live counters, gauges and the request timer; the
collector only reads them. Any object with the matching attributes satisfies
these protocols, so a driver cluster (or a thin adapter around one) can be
registered directly.

All timer statistics are expressed in nanoseconds.
"""

from typing import Protocol


class GaugeReading(Protocol):
    """A value that can go up and down"""

    @property
    def value(self) -> float: ...


class CountingReading(Protocol):
    """A monotonic counter"""

    @property
    def count(self) -> int: ...


class TimerSnapshot(Protocol):
    """Point-in-time statistics of a decaying-reservoir timer"""

    @property
    def min(self) -> float: ...

    @property
    def max(self) -> float: ...

    @property
    def mean(self) -> float: ...

    @property
    def median(self) -> float: ...

    @property
    def p75(self) -> float: ...

    @property
    def p95(self) -> float: ...

    @property
    def p98(self) -> float: ...

    @property
    def p99(self) -> float: ...

    @property
    def p999(self) -> float: ...


class TimerReading(Protocol):
    """Request rate and latency distribution"""

    @property
    def count(self) -> int: ...

    def snapshot(self) -> TimerSnapshot: ...


class ErrorMetrics(Protocol):
    """Error, retry and ignore counters reported by the driver"""

    connection_errors: CountingReading
    authentication_errors: CountingReading
    write_timeouts: CountingReading
    read_timeouts: CountingReading
    unavailables: CountingReading
    client_timeouts: CountingReading
    others: CountingReading
    retries: CountingReading
    retries_on_write_timeout: CountingReading
    retries_on_read_timeout: CountingReading
    retries_on_unavailable: CountingReading
    retries_on_client_timeout: CountingReading
    retries_on_connection_error: CountingReading
    retries_on_other_errors: CountingReading
    ignores: CountingReading
    ignores_on_write_timeout: CountingReading
    ignores_on_read_timeout: CountingReading
    ignores_on_unavailable: CountingReading
    ignores_on_client_timeout: CountingReading
    ignores_on_connection_error: CountingReading
    ignores_on_other_errors: CountingReading
    speculative_executions: CountingReading


class DriverMetrics(Protocol):
    """Everything one client instance exposes"""

    known_hosts: GaugeReading
    connected_to_hosts: GaugeReading
    open_connections: GaugeReading
    trashed_connections: GaugeReading
    in_flight_requests: GaugeReading

    # -1 when the depth is unknown
    executor_queue_depth: GaugeReading
    blocking_executor_queue_depth: GaugeReading
    reconnection_scheduler_queue_size: GaugeReading
    task_scheduler_queue_size: GaugeReading

    bytes_sent: CountingReading
    bytes_received: CountingReading

    errors: ErrorMetrics
    request_timer: TimerReading


class MetricsSource(Protocol):
    """Handle registered per client; ``metrics`` is None while unavailable"""

    @property
    def metrics(self) -> DriverMetrics | None: ...


# error_type label value -> ErrorMetrics attribute, in export order
ERROR_TYPES: tuple[tuple[str, str], ...] = (
    ("connection-errors", "connection_errors"),
    ("authentication-errors", "authentication_errors"),
    ("write-timeouts", "write_timeouts"),
    ("read-timeouts", "read_timeouts"),
    ("unavailables", "unavailables"),
    ("client-timeouts", "client_timeouts"),
    ("other-errors", "others"),
    ("retries", "retries"),
    ("retries-on-write-timeout", "retries_on_write_timeout"),
    ("retries-on-read-timeout", "retries_on_read_timeout"),
    ("retries-on-unavailable", "retries_on_unavailable"),
    ("retries-on-client-timeout", "retries_on_client_timeout"),
    ("retries-on-connection-error", "retries_on_connection_error"),
    ("retries-on-other-errors", "retries_on_other_errors"),
    ("ignores", "ignores"),
    ("ignores-on-write-timeout", "ignores_on_write_timeout"),
    ("ignores-on-read-timeout", "ignores_on_read_timeout"),
    ("ignores-on-unavailable", "ignores_on_unavailable"),
    ("ignores-on-client-timeout", "ignores_on_client_timeout"),
    ("ignores-on-connection-error", "ignores_on_connection_error"),
    ("ignores-on-other-errors", "ignores_on_other_errors"),
    ("speculative-executions", "speculative_executions"),
)

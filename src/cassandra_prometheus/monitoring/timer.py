"""
Timer to Prometheus summary-style family translation
"""

from collections.abc import Sequence

from prometheus_client.core import Metric, Sample

from .sources import TimerReading, TimerSnapshot

NS_IN_SEC = 1_000_000_000

# quantile label value -> snapshot attribute
QUANTILES: tuple[tuple[str, str], ...] = (
    ("0", "min"),
    ("0.5", "median"),
    ("0.75", "p75"),
    ("0.95", "p95"),
    ("0.98", "p98"),
    ("0.99", "p99"),
    ("0.999", "p999"),
    ("1", "max"),
)


def ns_to_sec(nanos: float) -> float:
    return nanos / NS_IN_SEC


class TimerMetricFamilyBuilder:
    """Accumulates timer samples for many label sets into one family.

    Each timer contributes eight ``quantile`` samples under the family name,
    a ``<name>_count`` sample and a ``<name>_mean`` sample. Durations are
    converted from nanoseconds to seconds; the count is left as is.

    The family is untyped because it mixes three sample naming conventions.
    Call :meth:`build` once, after every timer has been added.
    """

    def __init__(self, name: str, documentation: str, label_names: Sequence[str]):
        self.name = name
        self.documentation = documentation
        self.label_names = tuple(label_names)

        self._quantile_samples: list[Sample] = []
        self._count_samples: list[Sample] = []
        self._mean_samples: list[Sample] = []

    def add_timer_sample(self, label_values: Sequence[str], timer: TimerReading) -> None:
        labels = dict(zip(self.label_names, label_values))

        count = timer.count
        snapshot = timer.snapshot()

        self._count_samples.append(Sample(f"{self.name}_count", labels, float(count)))
        self._mean_samples.append(
            Sample(f"{self.name}_mean", labels, ns_to_sec(snapshot.mean))
        )
        self._add_quantiles(labels, snapshot)

    def _add_quantiles(self, labels: dict[str, str], snapshot: TimerSnapshot) -> None:
        for quantile, attribute in QUANTILES:
            value = ns_to_sec(getattr(snapshot, attribute))
            self._quantile_samples.append(
                Sample(self.name, {**labels, "quantile": quantile}, value)
            )

    def build(self) -> Metric:
        family = Metric(self.name, self.documentation, "untyped")
        family.samples = [
            *self._quantile_samples,
            *self._count_samples,
            *self._mean_samples,
        ]
        return family

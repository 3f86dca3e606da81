"""
Test configuration and fixtures for the Cassandra driver Prometheus exporter
"""

# Third-party imports
import pytest
from prometheus_client.registry import CollectorRegistry

# Local imports
from cassandra_prometheus.config.settings import Settings
from cassandra_prometheus.monitoring.collector import CassandraDriverMetricsCollector
from fakes import FakeCluster, build_driver_metrics

_UNSET = object()


@pytest.fixture
def make_cluster():
    """Factory for fake clusters; pass ``metrics=None`` for an unavailable one"""
    def _make(metrics=_UNSET, **overrides):
        if metrics is _UNSET:
            metrics = build_driver_metrics(**overrides)
        return FakeCluster(metrics=metrics)
    return _make


@pytest.fixture
def collector() -> CassandraDriverMetricsCollector:
    return CassandraDriverMetricsCollector()


@pytest.fixture
def prometheus_registry() -> CollectorRegistry:
    """Isolated registry so tests never touch the global one"""
    return CollectorRegistry()


@pytest.fixture
def test_settings() -> Settings:
    """Test settings configuration"""
    return Settings(
        environment="testing",
        log_level="DEBUG",
        monitoring={"prometheus_host": "127.0.0.1", "prometheus_port": 0},
    )


def _sample_key(sample):
    return sample.name, tuple(sorted(sample.labels.items()))


def _assert_valid_result(result):
    """Family names unique, sample identities unique, client label first"""
    assert result is not None

    seen_family_names = set()
    seen_sample_keys = set()
    for family in result:
        assert family.name.startswith("cassandra_driver_")
        assert family.name not in seen_family_names
        seen_family_names.add(family.name)

        assert family.type
        assert family.documentation
        assert family.samples is not None
        for sample in family.samples:
            assert sample.name.startswith(family.name)
            assert list(sample.labels)[0] == "client"
            key = _sample_key(sample)
            assert key not in seen_sample_keys
            seen_sample_keys.add(key)


def _assert_valid_result_no_samples(result):
    _assert_valid_result(result)
    for family in result:
        assert family.samples == []


def _assert_valid_result_with_samples(result, *client_names):
    _assert_valid_result(result)
    samples = [sample for family in result for sample in family.samples]
    assert samples
    for sample in samples:
        assert sample.labels["client"] in client_names
    assert {sample.labels["client"] for sample in samples} == set(client_names)


@pytest.fixture
def assert_valid_result():
    return _assert_valid_result


@pytest.fixture
def assert_valid_result_no_samples():
    return _assert_valid_result_no_samples


@pytest.fixture
def assert_valid_result_with_samples():
    return _assert_valid_result_with_samples


# Markers for different test categories
def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )

"""
Unit tests for the client registry
"""

import threading

import pytest

from cassandra_prometheus.monitoring.registry import ClientRegistry


@pytest.mark.unit
class TestClientRegistry:
    """Test suite for ClientRegistry"""

    def test_add_and_snapshot(self):
        registry = ClientRegistry()
        a, b = object(), object()

        registry.add("a", a)
        registry.add("b", b)

        assert sorted(registry.snapshot(), key=lambda e: e[0]) == [("a", a), ("b", b)]
        assert len(registry) == 2
        assert "a" in registry

    def test_add_replaces(self):
        registry = ClientRegistry()
        old, new = object(), object()

        assert registry.add("x", old) is None
        registry.add("x", new)

        assert registry.snapshot() == [("x", new)]

    def test_add_none_rejected(self):
        registry = ClientRegistry()
        registry.add("x", object())

        with pytest.raises(ValueError):
            registry.add("x", None)

        assert len(registry) == 1

    def test_remove_missing_is_noop(self):
        registry = ClientRegistry()
        registry.add("a", object())

        registry.remove("missing")
        registry.remove("a")
        registry.remove("a")

        assert len(registry) == 0

    def test_clear(self):
        registry = ClientRegistry()
        registry.add("a", object())
        registry.add("b", object())

        registry.clear()

        assert registry.snapshot() == []
        assert registry.names() == []

    def test_snapshot_is_a_copy(self):
        registry = ClientRegistry()
        registry.add("a", object())

        snapshot = registry.snapshot()
        registry.clear()

        assert [name for name, _ in snapshot] == ["a"]

    def test_concurrent_mutations(self):
        """Concurrent adds and snapshots never lose or duplicate entries"""
        registry = ClientRegistry()
        errors = []

        def writer(prefix):
            try:
                for i in range(200):
                    registry.add(f"{prefix}-{i}", object())
            except Exception as e:
                errors.append(e)

        def reader():
            try:
                for _ in range(200):
                    names = [name for name, _ in registry.snapshot()]
                    assert len(names) == len(set(names))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=writer, args=(p,)) for p in "abcd"]
        threads += [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(registry) == 800

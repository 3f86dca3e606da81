"""
Thread-safe mapping from client name to its metrics source
"""

import threading

from .sources import MetricsSource


class ClientRegistry:
    """Named client instances reported by one collector.

    Every operation takes the internal lock, so individual adds, removals
    and snapshots are atomic. A collection pass works on the list returned
    by :meth:`snapshot` and is unaffected by later mutations.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._clients: dict[str, MetricsSource] = {}

    def add(self, name: str, source: MetricsSource) -> None:
        """Add or replace the source registered under ``name``.

        The replaced source is not closed; that is up to the caller.
        """
        if source is None:
            raise ValueError(f"Client {name!r} needs a metrics source, got None")
        with self._lock:
            self._clients[name] = source

    def remove(self, name: str) -> None:
        """Remove ``name`` if present"""
        with self._lock:
            self._clients.pop(name, None)

    def clear(self) -> None:
        with self._lock:
            self._clients.clear()

    def snapshot(self) -> list[tuple[str, MetricsSource]]:
        """Copy of the current entries"""
        with self._lock:
            return list(self._clients.items())

    def names(self) -> list[str]:
        with self._lock:
            return list(self._clients)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._clients

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

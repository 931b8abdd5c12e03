"""Tracking of live connections."""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar


class Connection(Protocol):
    """Anything that can be started and stopped."""

    def start(self) -> None: ...

    def stop(self) -> None: ...


C = TypeVar("C", bound=Connection)


class ConnectionManager(Generic[C]):
    """Starts connections, keeps them until they are stopped."""

    def __init__(self) -> None:
        self._connections: set[C] = set()

    def start(self, connection: C) -> None:
        """Track a connection and start it."""
        self._connections.add(connection)
        connection.start()

    def stop(self, connection: C) -> None:
        """Stop tracking a connection and stop it."""
        self._connections.discard(connection)
        connection.stop()

    def stop_all(self) -> None:
        """Stop every tracked connection and forget them all."""
        for connection in list(self._connections):
            connection.stop()
        self._connections.clear()

    @property
    def connection_count(self) -> int:
        """Number of tracked connections."""
        return len(self._connections)

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, connection: object) -> bool:
        return connection in self._connections
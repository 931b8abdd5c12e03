from triewebkit.connections import ConnectionManager


class FakeConnection:
    def __init__(self):
        self.events = []

    def start(self):
        self.events.append("start")

    def stop(self):
        self.events.append("stop")


def test_start_tracks_and_starts():
    manager = ConnectionManager()
    connection = FakeConnection()
    manager.start(connection)
    assert connection.events == ["start"]
    assert manager.connection_count == 1
    assert connection in manager


def test_starting_same_connection_twice_tracks_once():
    manager = ConnectionManager()
    connection = FakeConnection()
    manager.start(connection)
    manager.start(connection)
    assert len(manager) == 1
    assert connection.events == ["start", "start"]


def test_stop_untracks_and_stops():
    manager = ConnectionManager()
    connection = FakeConnection()
    manager.start(connection)
    manager.stop(connection)
    assert connection.events == ["start", "stop"]
    assert manager.connection_count == 0
    assert connection not in manager


def test_stop_untracked_connection_still_stops_it():
    manager = ConnectionManager()
    connection = FakeConnection()
    manager.stop(connection)
    assert connection.events == ["stop"]
    assert manager.connection_count == 0


def test_stop_all_stops_everything():
    manager = ConnectionManager()
    connections = [FakeConnection() for _ in range(3)]
    for connection in connections:
        manager.start(connection)
    assert manager.connection_count == 3
    manager.stop_all()
    assert manager.connection_count == 0
    assert all(c.events == ["start", "stop"] for c in connections)
"""Tests for binding a streaming connection to a client."""

from unittest.mock import MagicMock

from core.events import EventEmitter
from sdk import WebrtcClient, bind_streaming_connection, unbind_streaming_connection


class FakeStreamingConnection(EventEmitter):
    """Stand-in for the external streaming client."""

    def __init__(self, connected=False):
        super().__init__()
        self.connected = connected


class TestBindStreamingConnection:
    """Tests for bind_streaming_connection."""

    def test_stores_handle_and_initial_state(self):
        """Should keep the handle and copy its connected flag."""
        # Arrange
        client = WebrtcClient({})
        connection = FakeStreamingConnection(connected=True)

        # Act
        bind_streaming_connection(client, connection)

        # Assert
        assert client.streaming_connection is connection
        assert client.connected is True

    def test_connection_without_flag_is_disconnected(self):
        """A connection object without connected/on should still bind."""
        client = WebrtcClient({})
        connection = object()

        bind_streaming_connection(client, connection)

        assert client.streaming_connection is connection
        assert client.connected is False

    def test_proxies_connected_event(self):
        """Connection events should flip the flag and re-emit on client."""
        # Arrange
        client = WebrtcClient({})
        connection = FakeStreamingConnection()
        handler = MagicMock()
        client.on("connected", handler)
        bind_streaming_connection(client, connection)

        # Act
        connection.emit("connected", {"reconnect": False})

        # Assert
        assert client.connected is True
        handler.assert_called_once_with({"reconnect": False})

    def test_proxies_disconnected_event(self):
        client = WebrtcClient({})
        connection = FakeStreamingConnection(connected=True)
        handler = MagicMock()
        client.on("disconnected", handler)
        bind_streaming_connection(client, connection)

        connection.emit("disconnected")

        assert client.connected is False
        handler.assert_called_once_with()

    def test_extra_connection_event_args_dropped(self):
        """Only payload and details should be forwarded to the client."""
        client = WebrtcClient({})
        connection = MagicMock(connected=False)
        handler = MagicMock()
        client.on("connected", handler)
        bind_streaming_connection(client, connection)
        on_connected = connection.on.call_args_list[0].args[1]

        on_connected("payload", "details", "extra")

        handler.assert_called_once_with("payload", "details")

    def test_rebinding_replaces_old_connection(self):
        """Events from a replaced connection should be ignored."""
        # Arrange
        client = WebrtcClient({})
        old = FakeStreamingConnection()
        new = FakeStreamingConnection()
        bind_streaming_connection(client, old)
        bind_streaming_connection(client, new)

        # Act
        old.emit("connected")

        # Assert
        assert client.streaming_connection is new
        assert client.connected is False


class TestUnbindStreamingConnection:
    """Tests for unbind_streaming_connection."""

    def test_clears_state_and_emits(self):
        """Should reset state and announce the disconnect."""
        # Arrange
        client = WebrtcClient({})
        connection = FakeStreamingConnection(connected=True)
        bind_streaming_connection(client, connection)
        handler = MagicMock()
        client.on("disconnected", handler)

        # Act
        unbind_streaming_connection(client)

        # Assert
        assert client.streaming_connection is None
        assert client.connected is False
        handler.assert_called_once_with()

    def test_no_emit_when_already_disconnected(self):
        client = WebrtcClient({})
        handler = MagicMock()
        client.on("disconnected", handler)

        unbind_streaming_connection(client)

        handler.assert_not_called()

    def test_late_events_ignored_after_unbind(self):
        client = WebrtcClient({})
        connection = FakeStreamingConnection()
        bind_streaming_connection(client, connection)
        unbind_streaming_connection(client)

        connection.emit("connected")

        assert client.connected is False

"""Attach and detach an external streaming connection on a WebrtcClient."""

from typing import Any

from core.utils.logging import get_logger
from monitoring import Metrics

logger = get_logger(__name__)


def _set_connected(client, connected: bool) -> None:
    client._connected = connected
    Metrics.connection_state(client.client_id, connected)


def bind_streaming_connection(client, connection: Any) -> None:
    """
    Store connection on client and mirror its connection state.

    The client's connected flag starts from connection.connected (False if
    the attribute is missing). If the connection exposes on(), its
    "connected" and "disconnected" events update the flag and are
    re-emitted on the client with the same arguments.

    Args:
        client: WebrtcClient to update
        connection: Streaming connection object from the external library
    """
    if client.streaming_connection is not None:
        unbind_streaming_connection(client)

    client._streaming_connection = connection
    _set_connected(client, bool(getattr(connection, "connected", False)))
    logger.debug(f"Bound streaming connection to client {client.client_id}")

    subscribe = getattr(connection, "on", None)
    if not callable(subscribe):
        return

    def on_connected(*args):
        if client.streaming_connection is not connection:
            return
        _set_connected(client, True)
        logger.info("Streaming client connected")
        client.emit("connected", *args[:2])

    def on_disconnected(*args):
        if client.streaming_connection is not connection:
            return
        _set_connected(client, False)
        logger.info("Streaming client disconnected")
        client.emit("disconnected", *args[:2])

    subscribe("connected", on_connected)
    subscribe("disconnected", on_disconnected)


def unbind_streaming_connection(client) -> None:
    """
    Drop the client's streaming connection.

    Emits "disconnected" on the client if it was connected. Events arriving
    later from the old connection are ignored. The client's connection-state
    series is removed from the metrics registry.
    """
    was_connected = client.connected

    client._streaming_connection = None
    client._connected = False
    Metrics.connection_closed(client.client_id)

    if was_connected:
        client.emit("disconnected")

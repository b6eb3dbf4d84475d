"""Metrics recorder - stateless functions to record metrics."""

from monitoring.definitions import CONNECTION_STATE, EVENTS_EMITTED, SDK_ERRORS


class Metrics:
    """
    Stateless metrics recorder.

    Usage:
        from monitoring import Metrics

        Metrics.event_emitted("connected")
        Metrics.connection_state(client.client_id, client.connected)
    """

    @staticmethod
    def event_emitted(event: str) -> None:
        """Record an event emission."""
        EVENTS_EMITTED.labels(event=event).inc()

    @staticmethod
    def sdk_error(error_type: str) -> None:
        """Record an SdkError emitted on a client."""
        SDK_ERRORS.labels(type=error_type).inc()

    @staticmethod
    def connection_state(client_id: str, connected: bool) -> None:
        """Record the current connection state of a client."""
        CONNECTION_STATE.labels(client_id=client_id).set(1 if connected else 0)

    @staticmethod
    def connection_closed(client_id: str) -> None:
        """Drop the connection-state series of a client that let go of its connection."""
        try:
            CONNECTION_STATE.remove(client_id)
        except KeyError:
            pass

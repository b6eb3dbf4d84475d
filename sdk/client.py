"""Event-emitting SDK client."""

import uuid
from typing import Any, Callable, Optional, Union

from core.config.exceptions import InvalidConfigurationError, SdkError, SdkErrorType
from core.events import UNSET, EventEmitter
from core.utils.logging import get_logger
from monitoring import Metrics

logger = get_logger(__name__)


class WebrtcClient:
    """
    SDK client wrapping an external streaming connection.

    The client only tracks state; a connection collaborator (see
    sdk.connection) attaches the streaming connection and flips the
    connected flag. Events are delegated to an owned EventEmitter.

    Usage:
        options = OptionsLoader().load({"access_token": token})
        client = WebrtcClient(options)
        client.on("connected", on_connected)

    Raises:
        InvalidConfigurationError: If options is None
    """

    def __init__(self, options: Any = None):
        if options is None:
            raise InvalidConfigurationError(
                "Options required to create an instance of the SDK"
            )

        self.options = options
        self.client_id = str(uuid.uuid4())

        self._emitter = EventEmitter()
        self._connected = False
        self._streaming_connection = None

    @property
    def connected(self) -> bool:
        """Whether the streaming connection is currently up."""
        return bool(self._connected)

    @property
    def streaming_connection(self) -> Optional[Any]:
        """Handle to the underlying streaming connection, None until bound."""
        return self._streaming_connection

    # Event capability, delegated

    def on(self, event: str, handler: Callable) -> Callable:
        return self._emitter.on(event, handler)

    def once(self, event: str, handler: Callable) -> Callable:
        return self._emitter.once(event, handler)

    def off(self, event: Optional[str] = None, handler: Optional[Callable] = None) -> None:
        self._emitter.off(event, handler)

    def emit(self, event: str, payload: Any = UNSET, details: Any = UNSET) -> bool:
        return self._emitter.emit(event, payload, details)

    def listener_count(self, event: str) -> int:
        return self._emitter.listener_count(event)

    def emit_error(
        self,
        error_type: Optional[SdkErrorType],
        message_or_error: Union[str, Exception],
        details: Any = None,
    ) -> SdkError:
        """
        Build an SdkError and emit it on "sdkError".

        The error is returned, not raised. Callers decide whether to raise.
        """
        error = SdkError(error_type, message_or_error, details)
        logger.error(f"SdkError [{error.type.value}]: {error}")
        Metrics.sdk_error(error.type.value)
        self.emit("sdkError", error)
        return error

    def __repr__(self) -> str:
        return f"WebrtcClient(client_id={self.client_id!r}, connected={self.connected})"

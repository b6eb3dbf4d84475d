"""WebRTC SDK client."""

from sdk.client import WebrtcClient
from sdk.connection import bind_streaming_connection, unbind_streaming_connection

__all__ = [
    "WebrtcClient",
    "bind_streaming_connection",
    "unbind_streaming_connection",
]

"""Prometheus metric definitions."""

from prometheus_client import Counter, Gauge

# ============================================================
# EVENT METRICS
# ============================================================

EVENTS_EMITTED = Counter("sdk_events_emitted_total", "Events emitted", ["event"])

# ============================================================
# ERROR METRICS
# ============================================================

SDK_ERRORS = Counter("sdk_errors_total", "SDK errors emitted", ["type"])

# ============================================================
# CONNECTION METRICS
# ============================================================

CONNECTION_STATE = Gauge(
    "sdk_connection_state", "1 if the streaming connection is up", ["client_id"]
)

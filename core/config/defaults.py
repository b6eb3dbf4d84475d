"""Default SDK options and known values."""

ENVIRONMENTS = [
    "mypurecloud.com",
    "mypurecloud.com.au",
    "mypurecloud.jp",
    "mypurecloud.de",
    "mypurecloud.ie",
    "usw2.pure.cloud",
]

DEFAULT_ENVIRONMENT = "mypurecloud.com"

# Ordered from most to least verbose
LOG_LEVELS = ["debug", "log", "info", "warn", "error"]

DEFAULT_LOG_LEVEL = "info"

DEFAULT_OPTIONS = {
    "access_token": None,
    "environment": DEFAULT_ENVIRONMENT,
    "ws_host": None,
    "log_level": DEFAULT_LOG_LEVEL,
    "auto_connect_sessions": True,
    "ice_transport_policy": "all",
    "ice_servers": [],
    "opt_out_of_telemetry": False,
    "media": {
        "audio": True,
        "video": False,
        "default_audio_device_id": None,
        "default_video_device_id": None,
    },
    "logging": {
        "format_style": "standard",
        "log_file": None,
    },
}

# Environment variable name (without prefix) -> options key
ENV_OPTION_KEYS = {
    "ACCESS_TOKEN": "access_token",
    "ENVIRONMENT": "environment",
    "LOG_LEVEL": "log_level",
    "WS_HOST": "ws_host",
}

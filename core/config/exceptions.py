"""SDK and configuration exceptions."""

from enum import Enum
from typing import Any, Optional, Union


class SdkErrorType(str, Enum):
    """Categories attached to every SdkError."""

    GENERIC = "generic"
    INITIALIZATION = "initialization"
    HTTP = "http"
    INVALID_OPTIONS = "invalid_options"
    NOT_SUPPORTED = "not_supported"
    SESSION = "session"


class SdkError(Exception):
    """
    Base exception for SDK errors.

    Args:
        error_type: Error category, defaults to GENERIC when None
        message_or_error: Message string, or an exception whose message is reused
        details: Optional extra context for logging
    """

    def __init__(
        self,
        error_type: Optional[SdkErrorType],
        message_or_error: Union[str, Exception, None] = None,
        details: Any = None,
    ):
        if isinstance(message_or_error, Exception):
            message = str(message_or_error)
            self.cause_name = type(message_or_error).__name__
        else:
            message = message_or_error or ""
            self.cause_name = None

        super().__init__(message)
        self.type = error_type or SdkErrorType.GENERIC
        self.details = details


class ConfigError(SdkError):
    """Base exception for config errors."""

    def __init__(self, message_or_error=None, details: Any = None):
        super().__init__(SdkErrorType.INVALID_OPTIONS, message_or_error, details)


class InvalidConfigurationError(ConfigError):
    """Raised when options are missing or unusable."""

    pass


class ConfigNotFoundError(ConfigError):
    """Raised when config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when config file has invalid YAML."""

    pass

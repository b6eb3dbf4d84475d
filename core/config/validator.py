"""Field-level validation for SDK options."""

from core.config.defaults import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOG_LEVEL,
    ENVIRONMENTS,
    LOG_LEVELS,
)
from core.config.exceptions import InvalidConfigurationError
from core.utils.logging import get_logger

logger = get_logger(__name__)


def validate_options(options: dict) -> dict:
    """
    Validate and normalize SDK options in place.

    Args:
        options: Options tree, usually produced by OptionsLoader

    Returns:
        The same options dict

    Raises:
        InvalidConfigurationError: If options are missing or have no access token
    """
    if options is None:
        raise InvalidConfigurationError("Options required to create an instance of the SDK")

    if not options.get("access_token"):
        raise InvalidConfigurationError(
            "Access token is required to create an instance of the SDK"
        )

    if not options.get("environment"):
        logger.warning(f"No environment provided, using {DEFAULT_ENVIRONMENT}")
        options["environment"] = DEFAULT_ENVIRONMENT

    if options["environment"] not in ENVIRONMENTS:
        logger.warning(
            "Environment is not in the standard list. You may not be able to connect."
        )

    log_level = options.get("log_level")
    if log_level not in LOG_LEVELS:
        if log_level:
            logger.warning(
                f"Invalid log level: '{log_level}'. "
                f"Default '{DEFAULT_LOG_LEVEL}' will be used instead."
            )
        options["log_level"] = DEFAULT_LOG_LEVEL

    return options

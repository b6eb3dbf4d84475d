"""Options loader - layers defaults, YAML file, env vars and overrides."""

import copy
import os
from pathlib import Path
from typing import Optional

import yaml

from core.config.defaults import DEFAULT_OPTIONS, ENV_OPTION_KEYS
from core.config.exceptions import ConfigNotFoundError, ConfigParseError
from core.config.merger import merge_options
from core.config.validator import validate_options
from core.utils.logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "WEBRTC_SDK_"


class OptionsLoader:
    """
    Builds the options tree handed to WebrtcClient.

    Load order (later wins):
        1. DEFAULT_OPTIONS
        2. YAML options file (optional)
        3. WEBRTC_SDK_* environment variables
        4. Explicit overrides

    Usage:
        loader = OptionsLoader(config_file="sdk.yaml")
        options = loader.load({"media": {"video": True}})
    """

    def __init__(
        self,
        config_file: Optional[Path] = None,
        env_prefix: str = ENV_PREFIX,
    ):
        self.config_file = Path(config_file) if config_file else None
        self.env_prefix = env_prefix

    def _load_yaml(self, path: Path) -> dict:
        """Load and parse a YAML file."""
        if not path.exists():
            raise ConfigNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                content = yaml.safe_load(f) or {}
                logger.debug(f"Loaded options file: {path}")
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Invalid YAML in {path}: {e}")

        if not isinstance(content, dict):
            raise ConfigParseError(f"Expected a mapping at top level of {path}")
        return content

    def _load_env(self) -> dict:
        """Collect options from prefixed environment variables."""
        env_options = {}
        for suffix, key in ENV_OPTION_KEYS.items():
            value = os.environ.get(f"{self.env_prefix}{suffix}")
            if value is not None:
                env_options[key] = value
        return env_options

    def load(self, overrides: Optional[dict] = None, validate: bool = False) -> dict:
        """
        Load complete SDK options.

        Args:
            overrides: Options that win over every other source
            validate: Run validate_options on the result

        Returns:
            Merged options dict (a fresh copy, defaults are never mutated)
        """
        options = copy.deepcopy(DEFAULT_OPTIONS)

        if self.config_file:
            merge_options(options, self._load_yaml(self.config_file))
            logger.info(f"Merged options file: {self.config_file}")

        env_options = self._load_env()
        if env_options:
            merge_options(options, env_options)
            logger.info(f"Merged {len(env_options)} option(s) from environment")

        merge_options(options, overrides)

        if validate:
            validate_options(options)

        return options

    def health_check(self) -> bool:
        """Check the options file, if any, is present."""
        return self.config_file is None or self.config_file.exists()

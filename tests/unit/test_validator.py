"""Tests for options validation."""

import logging

import pytest

from core.config.exceptions import InvalidConfigurationError
from core.config.validator import validate_options


class TestValidateOptions:
    """Tests for validate_options."""

    def test_none_raises(self):
        with pytest.raises(InvalidConfigurationError):
            validate_options(None)

    def test_missing_access_token_raises(self):
        """Should require an access token."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            validate_options({"environment": "mypurecloud.com"})

        assert "Access token" in str(exc_info.value)

    def test_missing_environment_defaults(self, caplog):
        """Should warn and fall back to the default environment."""
        # Arrange
        options = {"access_token": "1234"}

        # Act
        with caplog.at_level(logging.WARNING):
            validate_options(options)

        # Assert
        assert options["environment"] == "mypurecloud.com"
        assert "No environment provided" in caplog.text

    def test_unknown_environment_warns(self, caplog):
        """Unknown environments should warn but be kept."""
        options = {"access_token": "1234", "environment": "mypurecloud.con", "log_level": "info"}

        with caplog.at_level(logging.WARNING):
            validate_options(options)

        assert options["environment"] == "mypurecloud.con"
        assert "not in the standard list" in caplog.text

    def test_invalid_log_level_falls_back(self, caplog):
        """Invalid log level should warn and use info."""
        options = {"access_token": "1234", "environment": "mypurecloud.com", "log_level": "ERROR"}

        with caplog.at_level(logging.WARNING):
            validate_options(options)

        assert options["log_level"] == "info"
        assert "Invalid log level" in caplog.text

    def test_missing_log_level_set_silently(self, caplog):
        options = {"access_token": "1234", "environment": "mypurecloud.com"}

        with caplog.at_level(logging.WARNING):
            validate_options(options)

        assert options["log_level"] == "info"
        assert caplog.text == ""

    def test_valid_options_no_warnings(self, caplog):
        """Should not warn when everything is fine."""
        options = {"access_token": "1234", "environment": "mypurecloud.com", "log_level": "error"}

        with caplog.at_level(logging.WARNING):
            result = validate_options(options)

        assert result is options
        assert caplog.text == ""

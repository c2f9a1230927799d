"""Tests for environment-driven settings."""

import logging
from pathlib import Path

import pytest

from limestore.domain.model.store import PaymentPolicy
from limestore.infrastructure.settings import DEFAULT_DATA_DIR, Settings


class TestSettingsFromEnv:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.return_window == 100
        assert settings.payment_policy is PaymentPolicy.PERMISSIVE
        assert settings.log_level == logging.WARNING

    def test_overrides(self):
        settings = Settings.from_env({
            "LIMESTORE_DATA_DIR": "/tmp/limestore",
            "LIMESTORE_RETURN_WINDOW": "10",
            "LIMESTORE_PAYMENT_POLICY": "EXACT",
            "LIMESTORE_LOG_LEVEL": "debug",
        })
        assert settings.data_dir == Path("/tmp/limestore")
        assert settings.return_window == 10
        assert settings.payment_policy is PaymentPolicy.EXACT
        assert settings.log_level == logging.DEBUG

    def test_bad_window(self):
        with pytest.raises(ValueError, match="must be an integer"):
            Settings.from_env({"LIMESTORE_RETURN_WINDOW": "soon"})

    def test_non_positive_window(self):
        with pytest.raises(ValueError, match="must be positive"):
            Settings.from_env({"LIMESTORE_RETURN_WINDOW": "0"})

    def test_bad_policy(self):
        with pytest.raises(ValueError, match="must be one of"):
            Settings.from_env({"LIMESTORE_PAYMENT_POLICY": "generous"})

    def test_bad_log_level(self):
        with pytest.raises(ValueError, match="Unknown LIMESTORE_LOG_LEVEL"):
            Settings.from_env({"LIMESTORE_LOG_LEVEL": "chatty"})

    def test_errors_do_not_chain_the_parse_failure(self):
        with pytest.raises(ValueError) as window_error:
            Settings.from_env({"LIMESTORE_RETURN_WINDOW": "soon"})
        with pytest.raises(ValueError) as policy_error:
            Settings.from_env({"LIMESTORE_PAYMENT_POLICY": "generous"})

        for error in (window_error, policy_error):
            assert error.value.__cause__ is None
            assert error.value.__suppress_context__

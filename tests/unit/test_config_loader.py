# Path: tests/unit/test_config_loader.py
"""
Unit Tests for ConfigLoader

Tests singleton behaviour, environment parsing and defaults.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from ixbrl_validator.core.config_loader import ConfigLoader


@pytest.fixture
def clean_env():
    """Environment without any IXBRL_VALIDATOR_ variables."""
    with patch.dict(os.environ, {}, clear=False):
        for key in [k for k in os.environ if k.startswith('IXBRL_VALIDATOR_')]:
            del os.environ[key]
        yield


class TestConfigLoader:
    """Test configuration loading."""

    def test_singleton(self, reset_singletons):
        """Every call returns the same instance."""
        assert ConfigLoader() is ConfigLoader()

    def test_defaults(self, reset_singletons, clean_env):
        """Empty environment gives library defaults."""
        config = ConfigLoader()

        assert config.get('environment') == 'production'
        assert config.get('debug') is False
        assert config.get('log_dir') is None
        assert config.get('log_level') == 'INFO'
        assert config.get('log_console') is False
        assert config.get('max_workers') == 4
        assert config.get('batch_timeout') == 0.0

    def test_environment_values(self, reset_singletons, mock_env_vars):
        """Environment variables are typed."""
        config = ConfigLoader()

        assert config.get('environment') == 'test'
        assert config.get('debug') is True
        assert config.get('log_dir') == Path('/tmp/ixbrl_validator_test/logs')
        assert config.get('log_level') == 'DEBUG'
        assert config.get('log_console') is True
        assert config.get('max_workers') == 8
        assert config.get('batch_timeout') == 2.5

    def test_bad_numbers_fall_back(self, reset_singletons, clean_env):
        """Unparsable numbers keep their defaults."""
        with patch.dict(os.environ, {
            'IXBRL_VALIDATOR_MAX_WORKERS': 'many',
            'IXBRL_VALIDATOR_BATCH_TIMEOUT': 'soon',
        }):
            config = ConfigLoader()

        assert config.get('max_workers') == 4
        assert config.get('batch_timeout') == 0.0

    def test_out_of_range_numbers_fall_back(self, reset_singletons, clean_env):
        """Zero workers and a negative timeout keep their defaults."""
        with patch.dict(os.environ, {
            'IXBRL_VALIDATOR_MAX_WORKERS': '0',
            'IXBRL_VALIDATOR_BATCH_TIMEOUT': '-1',
        }):
            config = ConfigLoader()

        assert config.get('max_workers') == 4
        assert config.get('batch_timeout') == 0.0

    def test_unknown_key_default(self, reset_singletons):
        """Unknown keys return the supplied default."""
        assert ConfigLoader().get('missing', 'fallback') == 'fallback'

# Path: ixbrl_validator/core/config_loader.py
"""
Configuration Loader for ixbrl_validator

Reads IXBRL_VALIDATOR_* environment variables, optionally seeded from a
.env file in the working directory. One shared instance per process.

Nothing here is required: the validator is a library and must work with
an empty environment. Validation rules are NOT configuration - they live
in validation/constants.py and validation/data/.

Example:
    config = ConfigLoader()
    workers = config.get('max_workers')    # 4 unless overridden
"""

import os
import threading
from pathlib import Path
from typing import Any, Callable, Optional

from dotenv import load_dotenv


# ==============================================================================
# DEFAULTS
# ==============================================================================

ENV_PREFIX: str = 'IXBRL_VALIDATOR_'

DEFAULT_ENVIRONMENT: str = 'production'
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_LOG_CONSOLE: bool = False

DEFAULT_MAX_WORKERS: int = 4
DEFAULT_BATCH_TIMEOUT: float = 0.0  # 0 disables the batch deadline

TRUE_VALUES = ('true', '1', 'yes', 'on')


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in TRUE_VALUES


def _parse_path(value: str) -> Path:
    return Path(os.path.expandvars(value)) if '${' in value else Path(value)


class ConfigLoader:
    """
    Process-wide configuration, created once under a lock.

    Values are typed on load; a malformed or out-of-range variable falls
    back to its default instead of failing the import.

    Example:
        config = ConfigLoader()
        config.get('log_level')        # 'INFO'
        config.get('batch_timeout')    # 0.0
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        with ConfigLoader._lock:
            if ConfigLoader._initialized:
                return

            env_file = Path.cwd() / '.env'
            if env_file.is_file():
                load_dotenv(dotenv_path=env_file, interpolate=True)

            self._config = self._load_configuration()
            ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """Read and type every supported variable."""
        return {
            # ================================================================
            # ENVIRONMENT
            # ================================================================
            'environment': self._read('ENVIRONMENT', str, DEFAULT_ENVIRONMENT),
            'debug': self._read('DEBUG', _parse_bool, False),

            # ================================================================
            # LOGGING
            # ================================================================
            'log_dir': self._read('LOG_DIR', _parse_path, None),
            'log_level': self._read('LOG_LEVEL', str.upper, DEFAULT_LOG_LEVEL),
            'log_console': self._read('LOG_CONSOLE', _parse_bool, DEFAULT_LOG_CONSOLE),

            # ================================================================
            # BATCH VALIDATION
            # ================================================================
            'max_workers': self._read(
                'MAX_WORKERS', int, DEFAULT_MAX_WORKERS, valid=lambda v: v >= 1
            ),
            'batch_timeout': self._read(
                'BATCH_TIMEOUT', float, DEFAULT_BATCH_TIMEOUT, valid=lambda v: v >= 0
            ),
        }

    @staticmethod
    def _read(
        key: str,
        cast: Callable[[str], Any],
        default: Any,
        valid: Optional[Callable[[Any], bool]] = None
    ) -> Any:
        """
        Read one prefixed variable.

        Args:
            key: Variable name without prefix
            cast: Converter from the raw string
            default: Value when unset, empty, unparsable or rejected
            valid: Optional range check on the converted value

        Returns:
            Converted value or default
        """
        raw = os.getenv(ENV_PREFIX + key)
        if raw is None or not raw.strip():
            return default

        try:
            value = cast(raw.strip())
        except ValueError:
            return default

        if valid is not None and not valid(value):
            return default
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key, e.g. 'max_workers'
            default: Returned when the key is unknown
        """
        return self._config.get(key, default)

    def __repr__(self) -> str:
        return (
            f"ConfigLoader(environment={self._config.get('environment')}, "
            f"log_level={self._config.get('log_level')}, "
            f"max_workers={self._config.get('max_workers')})"
        )


__all__ = ['ConfigLoader']

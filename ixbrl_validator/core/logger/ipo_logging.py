# Path: ixbrl_validator/core/logger/ipo_logging.py
"""
IPO-Aware Logging for ixbrl_validator

Input-Process-Output separated logging for document validation. Every
logger of the package lives under 'ixbrl_validator.<layer>.<name>':

- ixbrl_validator.input.*    document parser
- ixbrl_validator.process.*  validation passes, registry, orchestrator
- ixbrl_validator.output.*   statistics, report renderer

The library never configures logging on import. Host applications call
setup_ipo_logging() (or setup_from_config()) once at start-up, or attach
their own handlers to the 'ixbrl_validator' logger.

Example:
    setup_ipo_logging(log_dir=Path('/var/log/ixbrl'), log_level='DEBUG')

    logger = get_process_logger('structural_validator')
    logger.info("Checking namespace declarations")
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = 'ixbrl_validator'
LAYERS = ('input', 'process', 'output')

FILE_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
CONSOLE_FORMAT = '[%(levelname)s] %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Marks handlers installed here so a second setup call replaces them
_HANDLER_TAG = '_ixbrl_validator_ipo'


class IPOFilter(logging.Filter):
    """Pass only records emitted under one IPO layer."""

    def __init__(self, layer: str):
        """
        Args:
            layer: 'input', 'process' or 'output'
        """
        super().__init__()
        self.prefix = f'{PACKAGE_LOGGER}.{layer}.'

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name.startswith(self.prefix)


def _tagged(
    handler: logging.Handler,
    level: int,
    formatter: logging.Formatter,
    layer: Optional[str] = None
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    if layer is not None:
        handler.addFilter(IPOFilter(layer))
    setattr(handler, _HANDLER_TAG, True)
    return handler


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> logging.Logger:
    """
    Attach IPO handlers to the package logger.

    With a log directory, writes:
    - full_activity.log (every layer)
    - input_activity.log / process_activity.log / output_activity.log

    Calling again replaces the handlers installed by the previous call;
    handlers added by the host application are left alone.

    Args:
        log_dir: Directory for log files (None = no file logging)
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        console_output: Whether to also log to stdout

    Returns:
        The configured 'ixbrl_validator' logger

    Raises:
        ValueError: If log_level is not a logging level name
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            package_logger.removeHandler(handler)
            handler.close()

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_formatter = logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT)

        package_logger.addHandler(_tagged(
            logging.FileHandler(log_dir / 'full_activity.log', encoding='utf-8'),
            logging.DEBUG,
            file_formatter,
        ))
        for layer in LAYERS:
            package_logger.addHandler(_tagged(
                logging.FileHandler(log_dir / f'{layer}_activity.log', encoding='utf-8'),
                logging.DEBUG,
                file_formatter,
                layer,
            ))

    if console_output:
        package_logger.addHandler(_tagged(
            logging.StreamHandler(sys.stdout),
            level,
            logging.Formatter(CONSOLE_FORMAT),
        ))

    return package_logger


def setup_from_config(config=None) -> logging.Logger:
    """
    Set up IPO logging from ConfigLoader values.

    Args:
        config: ConfigLoader instance (default: singleton)
    """
    from ..config_loader import ConfigLoader

    config = config or ConfigLoader()
    return setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('log_console', False),
    )


def get_input_logger(name: str) -> logging.Logger:
    """Logger for the INPUT layer (document parsing)."""
    return logging.getLogger(f'{PACKAGE_LOGGER}.input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Logger for the PROCESS layer (validation passes).

    Args:
        name: Component name, e.g. 'structural_validator'

    Returns:
        'ixbrl_validator.process.<name>' logger
    """
    return logging.getLogger(f'{PACKAGE_LOGGER}.process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """Logger for the OUTPUT layer (statistics and reports)."""
    return logging.getLogger(f'{PACKAGE_LOGGER}.output.{name}')


__all__ = [
    'PACKAGE_LOGGER',
    'IPOFilter',
    'setup_ipo_logging',
    'setup_from_config',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]

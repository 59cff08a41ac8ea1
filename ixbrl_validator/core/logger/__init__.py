# Path: ixbrl_validator/core/logger/__init__.py
"""
ixbrl_validator Logger Package

IPO-aware logging for the validation engine.

Provides separate log streams for:
- INPUT layer (document parser)
- PROCESS layer (validation passes)
- OUTPUT layer (statistics, reports)
"""

from .ipo_logging import (
    PACKAGE_LOGGER,
    IPOFilter,
    setup_ipo_logging,
    setup_from_config,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'PACKAGE_LOGGER',
    'IPOFilter',
    'setup_ipo_logging',
    'setup_from_config',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]

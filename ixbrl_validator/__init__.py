# Path: ixbrl_validator/__init__.py
"""
ixbrl_validator - Inline XBRL Filing Validator

Validates UK iXBRL accounts (FRC 2025 taxonomy) before submission to
Companies House. The engine only diagnoses; it never corrects.

Example:
    from ixbrl_validator import validate, render

    result = validate(markup, 'small')
    print(render(result))

    if result.is_valid:
        submit(markup)
"""

__version__ = '1.0.0'

from .models import (
    Node,
    DocumentTree,
    Context,
    Unit,
    Instant,
    Duration,
    Severity,
    Diagnostic,
    EntitySize,
    ValidationStatistics,
    ValidationResult,
)
from .parser import ParseOutcome, DocumentParser, parse_document
from .output import gather_statistics, render
from .validator import IXBRLValidator, validate, validate_batch

__all__ = [
    '__version__',
    'Node',
    'DocumentTree',
    'Context',
    'Unit',
    'Instant',
    'Duration',
    'Severity',
    'Diagnostic',
    'EntitySize',
    'ValidationStatistics',
    'ValidationResult',
    'ParseOutcome',
    'DocumentParser',
    'parse_document',
    'gather_statistics',
    'render',
    'IXBRLValidator',
    'validate',
    'validate_batch',
]

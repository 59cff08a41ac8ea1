# Path: ixbrl_validator/models/__init__.py
"""
Data models: document tree, contexts/units, diagnostics, results.
"""

from .document import Node, NodePredicate, DocumentTree
from .context import (
    parse_iso_date,
    is_valid_iso_date,
    Instant,
    Duration,
    Period,
    Context,
    Unit,
)
from .error import Severity, Diagnostic, DiagnosticCollection
from .validation import EntitySize, ValidationStatistics, ValidationResult

__all__ = [
    'Node',
    'NodePredicate',
    'DocumentTree',
    'parse_iso_date',
    'is_valid_iso_date',
    'Instant',
    'Duration',
    'Period',
    'Context',
    'Unit',
    'Severity',
    'Diagnostic',
    'DiagnosticCollection',
    'EntitySize',
    'ValidationStatistics',
    'ValidationResult',
]

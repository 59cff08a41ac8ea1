# Path: ixbrl_validator/output/__init__.py
"""
Output layer: statistics and the text report.
"""

from .statistics import count_namespace_declarations, gather_statistics
from .report_generator import TextReportGenerator, render

__all__ = [
    'count_namespace_declarations',
    'gather_statistics',
    'TextReportGenerator',
    'render',
]

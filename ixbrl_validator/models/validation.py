# Path: ixbrl_validator/models/validation.py
"""
Validation Results System

Result model returned by validate() and consumed by the report renderer.

This module defines:
- EntitySize: filer size tier selecting the completeness rule-set
- ValidationStatistics: derived document counts plus elapsed time
- ValidationResult: diagnostics grouped into errors, warnings and
  placeholders, with the submission gate 'is_valid'
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..models.error import Diagnostic, Severity


# ==============================================================================
# ENTITY SIZE
# ==============================================================================

class EntitySize(str, Enum):
    """
    Companies Act size tier of the filing entity.

    Sizes:
        MICRO: Micro-entity (FRS 105), no Directors' Report requirement
        SMALL: Small company
        MEDIUM: Medium-sized company
        LARGE: Large company
    """
    MICRO = "micro"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: 'EntitySize | str') -> 'EntitySize':
        """
        Coerce a string or EntitySize into an EntitySize.

        Raises:
            ValueError: If value is not a known size
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ', '.join(s.value for s in cls)
            raise ValueError(f"Unknown entity size {value!r} (expected one of: {valid})")


# ==============================================================================
# STATISTICS
# ==============================================================================

@dataclass(frozen=True)
class ValidationStatistics:
    """
    Document statistics, derived once per validation run.

    Attributes:
        total_facts: Nodes whose name attribute is a prefixed QName
        tagged_elements: Subset of those in the FRC ('uk-') taxonomy
        contexts: Declared xbrli:context elements
        units: Declared xbrli:unit elements
        namespaces: Namespace declarations on the root element
        validation_time_ms: Elapsed wall-clock time of the run
    """
    total_facts: int = 0
    tagged_elements: int = 0
    contexts: int = 0
    units: int = 0
    namespaces: int = 0
    validation_time_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            'total_facts': self.total_facts,
            'tagged_elements': self.tagged_elements,
            'contexts': self.contexts,
            'units': self.units,
            'namespaces': self.namespaces,
            'validation_time_ms': round(self.validation_time_ms, 3),
        }


# ==============================================================================
# VALIDATION RESULT
# ==============================================================================

@dataclass
class ValidationResult:
    """
    Outcome of validating one document.

    Attributes:
        errors: Blocking diagnostics (fatal parse errors included)
        warnings: Advisory diagnostics
        placeholders: Placeholder/anomaly findings of either severity
        statistics: Document statistics
        entity_size: Size tier the document was validated against
    """
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    placeholders: list[Diagnostic] = field(default_factory=list)
    statistics: ValidationStatistics = field(default_factory=ValidationStatistics)
    entity_size: EntitySize = EntitySize.MICRO

    @property
    def is_valid(self) -> bool:
        """True iff no errors and no error-severity placeholder."""
        return not self.errors and not self.critical_placeholders

    @property
    def critical_placeholders(self) -> list[Diagnostic]:
        """Placeholders that block submission."""
        return [p for p in self.placeholders if p.severity.is_blocking]

    @property
    def warning_placeholders(self) -> list[Diagnostic]:
        """Placeholders that are advisory only."""
        return [p for p in self.placeholders if p.severity == Severity.WARNING]

    @property
    def is_fatal(self) -> bool:
        """Whether parsing failed and no validation pass ran."""
        return any(e.severity == Severity.FATAL for e in self.errors)

    def codes(self) -> list[str]:
        """Codes of every error, warning and placeholder, in report order."""
        return [d.code for d in (*self.errors, *self.warnings, *self.placeholders)]

    def get_errors(self, code: str) -> list[Diagnostic]:
        """Errors with the given code."""
        return [e for e in self.errors if e.code == code]

    def get_warnings(self, code: str) -> list[Diagnostic]:
        """Warnings with the given code."""
        return [w for w in self.warnings if w.code == code]

    def get_placeholders(self, code: str) -> list[Diagnostic]:
        """Placeholders with the given code."""
        return [p for p in self.placeholders if p.code == code]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary representation
        """
        return {
            'is_valid': self.is_valid,
            'entity_size': self.entity_size.value,
            'errors': [e.to_dict() for e in self.errors],
            'warnings': [w.to_dict() for w in self.warnings],
            'placeholders': [p.to_dict() for p in self.placeholders],
            'statistics': self.statistics.to_dict(),
        }


__all__ = [
    'EntitySize',
    'ValidationStatistics',
    'ValidationResult',
]

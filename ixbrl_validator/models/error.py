# Path: ixbrl_validator/models/error.py
"""
Diagnostic System

Tagged diagnostic records produced by the parser and validation passes.

This module defines:
- Severity levels (FATAL, ERROR, WARNING)
- Diagnostic: one located, machine-checkable finding
- DiagnosticCollection: accumulator with severity routing helpers

A diagnostic is never a free-form string: 'code' is a stable identifier
that callers can match on, 'message' is for humans.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Any, Iterator


# ==============================================================================
# SEVERITY LEVELS
# ==============================================================================

class Severity(str, Enum):
    """
    Diagnostic severity classification.

    Levels:
        FATAL: Document could not be parsed; nothing else was checked
        ERROR: Blocks submission
        WARNING: Advisory only
    """
    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value

    @property
    def is_blocking(self) -> bool:
        """Whether a diagnostic of this severity blocks submission."""
        return self is not Severity.WARNING


# ==============================================================================
# DIAGNOSTIC
# ==============================================================================

@dataclass(frozen=True)
class Diagnostic:
    """
    Single validation finding.

    Attributes:
        code: Stable machine-checkable identifier (e.g. 'MISSING_NAMESPACE')
        message: Human-readable description
        severity: Severity level
        location: Where the problem is (context id, offending value, ...)
        element: Element concerned (taxonomy name or tag name)
        value: Offending text, for placeholder findings
        line: Source line number, when known
    """
    code: str
    message: str
    severity: Severity = Severity.ERROR
    location: Optional[str] = None
    element: Optional[str] = None
    value: Optional[str] = None
    line: Optional[int] = None

    def __str__(self) -> str:
        """String representation for logging."""
        parts = [f"[{self.severity.value.upper()}] {self.code}: {self.message}"]

        if self.element:
            parts.append(f"Element: {self.element}")

        if self.location:
            parts.append(f"Location: {self.location}")

        if self.line is not None:
            parts.append(f"Line: {self.line}")

        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary representation, optional fields omitted when unset
        """
        data = {
            'code': self.code,
            'message': self.message,
            'severity': self.severity.value,
        }
        for key in ('location', 'element', 'value', 'line'):
            attr = getattr(self, key)
            if attr is not None:
                data[key] = attr
        return data


# ==============================================================================
# DIAGNOSTIC COLLECTION
# ==============================================================================

@dataclass
class DiagnosticCollection:
    """
    Accumulates diagnostics from one validation pass.

    Attributes:
        diagnostics: Diagnostics in the order they were found
    """
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def add(self, diagnostic: Diagnostic) -> None:
        """Add diagnostic to collection."""
        self.diagnostics.append(diagnostic)

    def extend(self, diagnostics) -> None:
        """Add multiple diagnostics to collection."""
        self.diagnostics.extend(diagnostics)

    def error(self, code: str, message: str, **kwargs) -> None:
        """Add ERROR severity diagnostic."""
        self.add(Diagnostic(code=code, message=message, severity=Severity.ERROR, **kwargs))

    def warning(self, code: str, message: str, **kwargs) -> None:
        """Add WARNING severity diagnostic."""
        self.add(Diagnostic(code=code, message=message, severity=Severity.WARNING, **kwargs))

    def get_by_severity(self, severity: Severity) -> list[Diagnostic]:
        """Get all diagnostics of specific severity."""
        return [d for d in self.diagnostics if d.severity == severity]

    def get_by_code(self, code: str) -> list[Diagnostic]:
        """Get all diagnostics with specific code."""
        return [d for d in self.diagnostics if d.code == code]

    def has_blocking(self) -> bool:
        """Check if collection contains ERROR level or higher."""
        return any(d.severity.is_blocking for d in self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __bool__(self) -> bool:
        return len(self.diagnostics) > 0

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)


__all__ = [
    'Severity',
    'Diagnostic',
    'DiagnosticCollection',
]

# Path: ixbrl_validator/validation/placeholders.py
"""
Placeholder / Anomaly Detector

Scans document text for template leftovers that must never reach a
filing authority.

Three independent checks run on every element that owns text:
1. Ordered placeholder patterns, first match wins (one finding per element)
2. Strict ISO date check on date-bearing elements
3. Runs of five or more identical characters (warning only)

Text is taken per element (its own text, not its descendants'), with
whitespace runs collapsed, so a leftover is reported once, at the
innermost element that holds it. The label used in messages is the
nearest taxonomy name on the element or its ancestors, else the tag.

Example:
    match_placeholder('[Company Name]')   # 'bracket_token'
    match_placeholder('Acme Trading Ltd') # None
    is_date_field('uk-core:BalanceSheetDate')  # True
"""

from typing import Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..models.context import is_valid_iso_date
from ..models.document import DocumentTree, Node
from ..models.error import Diagnostic, DiagnosticCollection, Severity
from ..models.validation import EntitySize
from ..validation.registry import BaseValidator
from ..validation.constants import (
    VALIDATOR_PLACEHOLDERS,
    CATEGORY_CONTENT,
    PLACEHOLDER_TYPE,
    INVALID_DATE_TYPE,
    MSG_PLACEHOLDER_DETECTED,
    MSG_INVALID_DATE,
    MSG_REPEATED_CHARACTERS,
    PLACEHOLDER_PATTERNS,
    DATE_FIELD_MARKERS,
    REPEATED_CHARACTERS_PATTERN,
    WHITESPACE_RUN,
)


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return WHITESPACE_RUN.sub(' ', text).strip()


def match_placeholder(text: str) -> Optional[str]:
    """
    Find the first placeholder pattern matching the text.

    Args:
        text: Element text

    Returns:
        Name of the first matching pattern, or None
    """
    for name, pattern in PLACEHOLDER_PATTERNS:
        if pattern.search(text):
            return name
    return None


def is_date_field(label: Optional[str]) -> bool:
    """Whether a taxonomy name (or tag) denotes a date-bearing element."""
    return bool(label) and any(marker in label for marker in DATE_FIELD_MARKERS)


def has_repeated_characters(text: str) -> bool:
    """Whether the text holds five or more identical consecutive characters."""
    return REPEATED_CHARACTERS_PATTERN.search(text) is not None


class PlaceholderDetector(BaseValidator):
    """
    Detects placeholder text, invalid dates and repeated-character runs.

    Findings of this pass are reported in the result's placeholders
    list rather than among errors and warnings.

    Example:
        detector = PlaceholderDetector()
        findings = detector.validate(tree, EntitySize.MICRO)

        critical = [f for f in findings if f.severity.is_blocking]
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize placeholder detector.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = get_process_logger('placeholder_detector')

    def get_name(self) -> str:
        """Get validator name."""
        return VALIDATOR_PLACEHOLDERS

    def get_category(self) -> str:
        """Get validator category."""
        return CATEGORY_CONTENT

    def validate(self, tree: DocumentTree, entity_size: EntitySize) -> list[Diagnostic]:
        """
        Scan the document for placeholders.

        Args:
            tree: Parsed document
            entity_size: Declared entity size (unused)

        Returns:
            list of placeholder findings
        """
        results = DiagnosticCollection()
        scanned = 0

        for node, ancestors in tree.iter_with_ancestors():
            text = normalize_text(node.direct_text)
            if not text:
                continue

            scanned += 1
            self._check_text(node, self._label(node, ancestors), text, results)

        self.logger.info(
            f"Placeholder scan completed: {scanned} text elements, {len(results)} findings"
        )
        return results.diagnostics

    @staticmethod
    def _label(node: Node, ancestors: tuple[Node, ...]) -> str:
        """Nearest taxonomy name on the node or its ancestors, else the tag."""
        for candidate in (node, *reversed(ancestors)):
            if candidate.name:
                return candidate.name
        return node.tag

    def _check_text(
        self,
        node: Node,
        label: str,
        text: str,
        results: DiagnosticCollection
    ) -> None:
        pattern_name = match_placeholder(text)
        if pattern_name is not None:
            self.logger.debug(f"Placeholder pattern '{pattern_name}' matched in {label}")
            results.add(Diagnostic(
                code=PLACEHOLDER_TYPE,
                message=MSG_PLACEHOLDER_DETECTED.format(name=label),
                severity=Severity.ERROR,
                location=label,
                element=label,
                value=text,
                line=node.line,
            ))

        if is_date_field(label) and not is_valid_iso_date(text):
            results.add(Diagnostic(
                code=INVALID_DATE_TYPE,
                message=MSG_INVALID_DATE.format(name=label),
                severity=Severity.ERROR,
                location=label,
                element=label,
                value=text,
                line=node.line,
            ))

        if has_repeated_characters(text):
            results.add(Diagnostic(
                code=PLACEHOLDER_TYPE,
                message=MSG_REPEATED_CHARACTERS.format(name=label),
                severity=Severity.WARNING,
                location=label,
                element=label,
                value=text,
                line=node.line,
            ))


__all__ = [
    'normalize_text',
    'match_placeholder',
    'is_date_field',
    'has_repeated_characters',
    'PlaceholderDetector',
]

# Path: ixbrl_validator/validation/fact_values.py
"""
Fact Value Validator

Validates the values and required attributes of tagged facts.

Two independent sub-passes:
- Numeric facts (ix:nonFraction): emptiness, contextRef / decimals /
  unitRef presence, numeric normalization, suspicious zeros on major
  accounts, sign attribute on an already negative display value
- Textual facts (ix:nonNumeric): emptiness, contextRef presence

Content patterns (placeholders, dates) are the placeholder detector's
job and are not checked here.

Example:
    normalize_numeric_value('£1,234.56')    # Decimal('1234.56')
    normalize_numeric_value('(1,234.56)')   # Decimal('-1234.56')
    normalize_numeric_value('abc')          # None
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..constants import (
    IX_NON_FRACTION,
    IX_NON_NUMERIC,
    ATTR_CONTEXT_REF,
    ATTR_UNIT_REF,
    ATTR_DECIMALS,
    ATTR_SIGN,
)
from ..models.document import DocumentTree, Node
from ..models.error import Diagnostic, DiagnosticCollection
from ..models.validation import EntitySize
from ..validation.registry import BaseValidator
from ..validation.constants import (
    VALIDATOR_FACT_VALUES,
    CATEGORY_VALUES,
    WARN_EMPTY_NUMERIC_FACT,
    ERR_MISSING_CONTEXT_REF,
    ERR_MISSING_DECIMALS_ATTRIBUTE,
    ERR_MISSING_UNIT_REF,
    ERR_INVALID_NUMERIC_VALUE,
    WARN_SUSPICIOUS_ZERO_VALUE,
    WARN_DOUBLE_NEGATIVE_VALUE,
    WARN_EMPTY_TEXTUAL_FACT,
    MSG_EMPTY_NUMERIC_FACT,
    MSG_MISSING_CONTEXT_REF,
    MSG_MISSING_DECIMALS_ATTRIBUTE,
    MSG_MISSING_UNIT_REF,
    MSG_INVALID_NUMERIC_VALUE,
    MSG_SUSPICIOUS_ZERO_VALUE,
    MSG_DOUBLE_NEGATIVE_VALUE,
    MSG_EMPTY_TEXTUAL_FACT,
    CURRENCY_SYMBOLS,
    THOUSANDS_SEPARATOR,
    DECIMAL_POINT,
    PARENTHESIZED_NEGATIVE,
    WHITESPACE_RUN,
    MAJOR_ACCOUNT_MARKERS,
    NEGATIVE_SIGN,
)


# ==============================================================================
# NORMALIZATION
# ==============================================================================

def normalize_numeric_value(text: Optional[str]) -> Optional[Decimal]:
    """
    Normalize displayed numeric text to a Decimal.

    Strips currency symbols, thousands separators and whitespace, and
    reads a fully parenthesized value as negative. Locale-specific
    separators (1.234,56) are not understood and are rejected.

    Args:
        text: Displayed value

    Returns:
        Decimal, or None when the text is not a finite number
    """
    if text is None:
        return None

    cleaned = text
    for symbol in CURRENCY_SYMBOLS:
        cleaned = cleaned.replace(symbol, '')

    # Comma after the decimal point: locale layout, not a thousands separator
    if DECIMAL_POINT in cleaned and cleaned.rfind(THOUSANDS_SEPARATOR) > cleaned.find(DECIMAL_POINT):
        return None
    cleaned = cleaned.replace(THOUSANDS_SEPARATOR, '')
    cleaned = WHITESPACE_RUN.sub('', cleaned)

    match = PARENTHESIZED_NEGATIVE.match(cleaned)
    if match:
        cleaned = '-' + match.group(1)

    if not cleaned:
        return None

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None

    if not value.is_finite():
        return None
    return value


def is_major_account(name: Optional[str]) -> bool:
    """Whether a taxonomy name belongs to a major balance sheet / P&L account."""
    return bool(name) and any(marker in name for marker in MAJOR_ACCOUNT_MARKERS)


# ==============================================================================
# VALIDATOR
# ==============================================================================

class FactValueValidator(BaseValidator):
    """
    Validates numeric and textual fact values.

    Each required attribute is checked on its own, so a single fact can
    produce several diagnostics.

    Example:
        validator = FactValueValidator()
        diagnostics = validator.validate(tree, EntitySize.SMALL)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize fact value validator.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = get_process_logger('fact_value_validator')

    def get_name(self) -> str:
        """Get validator name."""
        return VALIDATOR_FACT_VALUES

    def get_category(self) -> str:
        """Get validator category."""
        return CATEGORY_VALUES

    def validate(self, tree: DocumentTree, entity_size: EntitySize) -> list[Diagnostic]:
        """
        Validate fact values.

        Args:
            tree: Parsed document
            entity_size: Declared entity size (unused)

        Returns:
            list of fact value diagnostics
        """
        results = DiagnosticCollection()

        numeric_count = 0
        for node in tree.find_by_tag(IX_NON_FRACTION):
            numeric_count += 1
            self._validate_numeric_fact(node, results)

        textual_count = 0
        for node in tree.find_by_tag(IX_NON_NUMERIC):
            textual_count += 1
            self._validate_textual_fact(node, results)

        self.logger.info(
            f"Fact value validation completed: {numeric_count} numeric, "
            f"{textual_count} textual, {len(results)} issues"
        )
        return results.diagnostics

    def _validate_numeric_fact(self, node: Node, results: DiagnosticCollection) -> None:
        name = node.label
        value = node.text_content().strip()

        if not value:
            results.warning(
                WARN_EMPTY_NUMERIC_FACT,
                MSG_EMPTY_NUMERIC_FACT.format(name=name),
                element=name,
                line=node.line,
            )
            return

        if not node.get(ATTR_CONTEXT_REF):
            results.error(
                ERR_MISSING_CONTEXT_REF,
                MSG_MISSING_CONTEXT_REF.format(name=name),
                element=name,
                line=node.line,
            )

        if not node.get(ATTR_DECIMALS):
            results.error(
                ERR_MISSING_DECIMALS_ATTRIBUTE,
                MSG_MISSING_DECIMALS_ATTRIBUTE.format(name=name),
                element=name,
                line=node.line,
            )

        if not node.get(ATTR_UNIT_REF):
            results.error(
                ERR_MISSING_UNIT_REF,
                MSG_MISSING_UNIT_REF.format(name=name),
                element=name,
                line=node.line,
            )

        number = normalize_numeric_value(value)
        if number is None:
            results.error(
                ERR_INVALID_NUMERIC_VALUE,
                MSG_INVALID_NUMERIC_VALUE.format(name=name, value=value),
                element=name,
                value=value,
                line=node.line,
            )
            return

        if number == 0 and is_major_account(node.name):
            results.warning(
                WARN_SUSPICIOUS_ZERO_VALUE,
                MSG_SUSPICIOUS_ZERO_VALUE.format(name=name),
                element=name,
                value=value,
                line=node.line,
            )

        if node.get(ATTR_SIGN) == NEGATIVE_SIGN and number < 0:
            results.warning(
                WARN_DOUBLE_NEGATIVE_VALUE,
                MSG_DOUBLE_NEGATIVE_VALUE.format(name=name, value=value),
                element=name,
                value=value,
                line=node.line,
            )

    def _validate_textual_fact(self, node: Node, results: DiagnosticCollection) -> None:
        name = node.label

        if not node.text_content().strip():
            results.warning(
                WARN_EMPTY_TEXTUAL_FACT,
                MSG_EMPTY_TEXTUAL_FACT.format(name=name),
                element=name,
                line=node.line,
            )

        if not node.get(ATTR_CONTEXT_REF):
            results.error(
                ERR_MISSING_CONTEXT_REF,
                MSG_MISSING_CONTEXT_REF.format(name=name),
                element=name,
                line=node.line,
            )


__all__ = ['normalize_numeric_value', 'is_major_account', 'FactValueValidator']

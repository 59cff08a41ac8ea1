# Path: ixbrl_validator/validation/disclosures.py
"""
Disclosure Recommendations

Advisory FRC 2025 checks. Nothing here blocks submission; every finding
is a warning.

This module checks:
- An accounting framework (FRS 102, FRS 105, FRS 101, UK IFRS) is named
- Accounting policies are tagged (uk-bus:AccountingPolicy*)
- Micro and small entities carry an audit exemption statement
"""

from typing import Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..models.document import DocumentTree
from ..models.error import Diagnostic, DiagnosticCollection
from ..models.validation import EntitySize
from ..validation.registry import BaseValidator
from ..validation.constants import (
    VALIDATOR_DISCLOSURES,
    CATEGORY_COMPLETENESS,
    WARN_MISSING_ACCOUNTING_FRAMEWORK,
    WARN_MISSING_ACCOUNTING_POLICIES,
    WARN_MISSING_AUDIT_EXEMPTION,
    MSG_MISSING_ACCOUNTING_FRAMEWORK,
    MSG_MISSING_ACCOUNTING_POLICIES,
    MSG_MISSING_AUDIT_EXEMPTION,
    ACCOUNTING_FRAMEWORKS,
    ACCOUNTING_POLICY_PREFIX,
    AUDIT_EXEMPTION_ELEMENT,
)

# Sizes entitled to claim audit exemption
AUDIT_EXEMPT_SIZES = (EntitySize.MICRO, EntitySize.SMALL)


class DisclosureValidator(BaseValidator):
    """
    Recommends FRC disclosures missing from the document.

    Example:
        validator = DisclosureValidator()
        warnings = validator.validate(tree, EntitySize.SMALL)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize disclosure validator.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = get_process_logger('disclosure_validator')

    def get_name(self) -> str:
        """Get validator name."""
        return VALIDATOR_DISCLOSURES

    def get_category(self) -> str:
        """Get validator category."""
        return CATEGORY_COMPLETENESS

    def validate(self, tree: DocumentTree, entity_size: EntitySize) -> list[Diagnostic]:
        """
        Check recommended disclosures.

        Args:
            tree: Parsed document
            entity_size: Declared entity size

        Returns:
            list of warnings
        """
        entity_size = EntitySize.parse(entity_size)
        results = DiagnosticCollection()

        if not self._declares_framework(tree):
            results.warning(WARN_MISSING_ACCOUNTING_FRAMEWORK, MSG_MISSING_ACCOUNTING_FRAMEWORK)

        has_policies = any(
            node.name.startswith(ACCOUNTING_POLICY_PREFIX)
            for node in tree.iter_nodes(lambda n: bool(n.name))
        )
        if not has_policies:
            results.warning(
                WARN_MISSING_ACCOUNTING_POLICIES,
                MSG_MISSING_ACCOUNTING_POLICIES,
                element=ACCOUNTING_POLICY_PREFIX,
            )

        if entity_size in AUDIT_EXEMPT_SIZES and not tree.has_name(AUDIT_EXEMPTION_ELEMENT):
            results.warning(
                WARN_MISSING_AUDIT_EXEMPTION,
                MSG_MISSING_AUDIT_EXEMPTION.format(size=entity_size),
                element=AUDIT_EXEMPTION_ELEMENT,
            )

        self.logger.info(f"Disclosure checks completed: {len(results)} recommendations")
        return results.diagnostics

    @staticmethod
    def _declares_framework(tree: DocumentTree) -> bool:
        """Framework named anywhere in text or attribute values, spacing ignored."""
        haystack = [''.join(tree.root.text_content().split()).upper()]
        for node in tree.iter_nodes():
            haystack.extend(''.join(v.split()).upper() for v in node.attributes.values())
        joined = '\n'.join(haystack)
        return any(framework in joined for framework in ACCOUNTING_FRAMEWORKS)


__all__ = ['DisclosureValidator', 'AUDIT_EXEMPT_SIZES']

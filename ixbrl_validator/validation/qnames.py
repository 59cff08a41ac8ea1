# Path: ixbrl_validator/validation/qnames.py
"""
QName Validator

Checks the format of the taxonomy names carried by inline XBRL elements:
no whitespace, and a prefix from the known FRC / XBRL set.
"""

from typing import Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..models.document import DocumentTree
from ..models.error import Diagnostic, DiagnosticCollection
from ..models.validation import EntitySize
from ..validation.registry import BaseValidator
from ..validation.constants import (
    VALIDATOR_QNAMES,
    CATEGORY_STRUCTURAL,
    ERR_INVALID_QNAME,
    WARN_UNKNOWN_QNAME_PREFIX,
    MSG_INVALID_QNAME,
    MSG_UNKNOWN_QNAME_PREFIX,
    KNOWN_QNAME_PREFIXES,
    IX_TAG_PREFIX,
)


class QNameValidator(BaseValidator):
    """
    Validates taxonomy QNames on ix: elements.

    Example:
        validator = QNameValidator()
        diagnostics = validator.validate(tree, EntitySize.MICRO)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize QName validator.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = get_process_logger('qname_validator')

    def get_name(self) -> str:
        """Get validator name."""
        return VALIDATOR_QNAMES

    def get_category(self) -> str:
        """Get validator category."""
        return CATEGORY_STRUCTURAL

    def validate(self, tree: DocumentTree, entity_size: EntitySize) -> list[Diagnostic]:
        """
        Validate QNames.

        Args:
            tree: Parsed document
            entity_size: Declared entity size (unused)

        Returns:
            list of QName diagnostics
        """
        results = DiagnosticCollection()

        for node in tree.iter_nodes(lambda n: n.tag.startswith(IX_TAG_PREFIX) and n.has('name')):
            qname = node.name or ''

            if any(ch.isspace() for ch in qname):
                results.error(
                    ERR_INVALID_QNAME,
                    MSG_INVALID_QNAME.format(name=qname),
                    location=qname,
                    element=node.tag,
                    line=node.line,
                )
                continue

            if ':' in qname:
                prefix = qname.split(':', 1)[0]
                if prefix not in KNOWN_QNAME_PREFIXES:
                    results.warning(
                        WARN_UNKNOWN_QNAME_PREFIX,
                        MSG_UNKNOWN_QNAME_PREFIX.format(name=qname, prefix=prefix),
                        location=qname,
                        element=node.tag,
                        line=node.line,
                    )

        self.logger.info(f"QName validation completed: {len(results)} issues")
        return results.diagnostics


__all__ = ['QNameValidator']

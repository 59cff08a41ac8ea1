# Path: ixbrl_validator/validation/cross_reference.py
"""
Cross-Reference Validator

Verifies that every contextRef / unitRef in the document resolves to a
declared context / unit id.

The check is tree-wide: any element carrying a reference attribute is
checked, however deeply nested and whether or not it is a fact element.
"""

from typing import Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..constants import XBRL_CONTEXT, XBRL_UNIT, ATTR_ID, ATTR_CONTEXT_REF, ATTR_UNIT_REF
from ..models.document import DocumentTree
from ..models.error import Diagnostic, DiagnosticCollection
from ..models.validation import EntitySize
from ..validation.registry import BaseValidator
from ..validation.constants import (
    VALIDATOR_CROSS_REFERENCE,
    CATEGORY_REFERENTIAL,
    ERR_INVALID_CONTEXT_REF,
    ERR_INVALID_UNIT_REF,
    MSG_INVALID_CONTEXT_REF,
    MSG_INVALID_UNIT_REF,
)


class CrossReferenceValidator(BaseValidator):
    """
    Validates context and unit references.

    Example:
        validator = CrossReferenceValidator()
        diagnostics = validator.validate(tree, EntitySize.MICRO)

        for d in diagnostics:
            print(f"{d.element} -> {d.location}")
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize cross-reference validator.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = get_process_logger('cross_reference_validator')

    def get_name(self) -> str:
        """Get validator name."""
        return VALIDATOR_CROSS_REFERENCE

    def get_category(self) -> str:
        """Get validator category."""
        return CATEGORY_REFERENTIAL

    def validate(self, tree: DocumentTree, entity_size: EntitySize) -> list[Diagnostic]:
        """
        Validate references.

        Args:
            tree: Parsed document
            entity_size: Declared entity size (unused)

        Returns:
            list of reference diagnostics
        """
        results = DiagnosticCollection()

        # Build context and unit ID sets
        context_ids = self._declared_ids(tree, XBRL_CONTEXT)
        unit_ids = self._declared_ids(tree, XBRL_UNIT)

        for node in tree.iter_nodes(lambda n: n.has(ATTR_CONTEXT_REF) or n.has(ATTR_UNIT_REF)):
            context_ref = node.get(ATTR_CONTEXT_REF)
            if context_ref is not None and context_ref not in context_ids:
                results.error(
                    ERR_INVALID_CONTEXT_REF,
                    MSG_INVALID_CONTEXT_REF.format(ref=context_ref),
                    location=context_ref,
                    element=node.label,
                    line=node.line,
                )

            unit_ref = node.get(ATTR_UNIT_REF)
            if unit_ref is not None and unit_ref not in unit_ids:
                results.error(
                    ERR_INVALID_UNIT_REF,
                    MSG_INVALID_UNIT_REF.format(ref=unit_ref),
                    location=unit_ref,
                    element=node.label,
                    line=node.line,
                )

        self.logger.info(
            f"Reference validation completed: {len(context_ids)} contexts, "
            f"{len(unit_ids)} units, {len(results)} issues"
        )
        return results.diagnostics

    @staticmethod
    def _declared_ids(tree: DocumentTree, tag: str) -> set[str]:
        return {node.get(ATTR_ID) for node in tree.find_by_tag(tag) if node.get(ATTR_ID)}


__all__ = ['CrossReferenceValidator']

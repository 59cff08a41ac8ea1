# Path: ixbrl_validator/validation/completeness.py
"""
Completeness Validator

Checks that the elements required for the declared entity size are
tagged somewhere in the document.

This module validates:
- Tier-dependent required elements (rule tables in data/required_elements.yaml)
- Regulatory invariants independent of the tables:
  profit and loss (all sizes), directors' report and director names
  (all sizes except micro), average employees (all sizes)
- Recommended elements (warnings only)

Example:
    validator = CompletenessValidator()
    diagnostics = validator.validate(tree, EntitySize.SMALL)

    missing = [d for d in diagnostics if d.code == 'MISSING_REQUIRED_ELEMENT']
"""

from typing import Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..models.document import DocumentTree
from ..models.error import Diagnostic, DiagnosticCollection
from ..models.validation import EntitySize
from ..validation.registry import BaseValidator
from ..validation.rules import RequiredElementRules, default_rules, required_elements_for
from ..validation.constants import (
    VALIDATOR_COMPLETENESS,
    CATEGORY_COMPLETENESS,
    ERR_MISSING_REQUIRED_ELEMENT,
    ERR_MISSING_PROFIT_LOSS,
    ERR_MISSING_DIRECTORS_REPORT,
    ERR_MISSING_DIRECTOR_NAMES,
    ERR_MISSING_AVERAGE_EMPLOYEES,
    WARN_MISSING_RECOMMENDED_ELEMENT,
    MSG_MISSING_REQUIRED_ELEMENT,
    MSG_MISSING_PROFIT_LOSS,
    MSG_MISSING_DIRECTORS_REPORT,
    MSG_MISSING_DIRECTOR_NAMES,
    MSG_MISSING_AVERAGE_EMPLOYEES,
    MSG_MISSING_RECOMMENDED_ELEMENT,
    TURNOVER_ELEMENT,
    PRINCIPAL_ACTIVITIES_ELEMENT,
    DIRECTOR_NAME_ELEMENT,
    AVERAGE_EMPLOYEES_ELEMENT,
)


class CompletenessValidator(BaseValidator):
    """
    Validates presence of required tagged elements.

    Example:
        validator = CompletenessValidator()
        diagnostics = validator.validate(tree, EntitySize.MEDIUM)
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        rules: Optional[RequiredElementRules] = None
    ):
        """
        Initialize completeness validator.

        Args:
            config: Configuration loader
            rules: Rule tables (default: packaged rules)
        """
        self.config = config or ConfigLoader()
        self.logger = get_process_logger('completeness_validator')
        self.rules = rules or default_rules()

    def get_name(self) -> str:
        """Get validator name."""
        return VALIDATOR_COMPLETENESS

    def get_category(self) -> str:
        """Get validator category."""
        return CATEGORY_COMPLETENESS

    def validate(self, tree: DocumentTree, entity_size: EntitySize) -> list[Diagnostic]:
        """
        Validate completeness for an entity size.

        Args:
            tree: Parsed document
            entity_size: Declared entity size

        Returns:
            list of completeness diagnostics
        """
        entity_size = EntitySize.parse(entity_size)
        results = DiagnosticCollection()

        tagged_names = {node.name for node in tree.iter_nodes() if node.name}

        for element in required_elements_for(entity_size, self.rules):
            if element.name not in tagged_names:
                results.error(
                    ERR_MISSING_REQUIRED_ELEMENT,
                    MSG_MISSING_REQUIRED_ELEMENT.format(
                        name=element.name, description=element.description
                    ),
                    element=element.name,
                )

        self._validate_regulatory_invariants(tagged_names, entity_size, results)

        for element in self.rules.recommended:
            if element.name not in tagged_names:
                results.warning(
                    WARN_MISSING_RECOMMENDED_ELEMENT,
                    MSG_MISSING_RECOMMENDED_ELEMENT.format(
                        name=element.name, description=element.description
                    ),
                    element=element.name,
                )

        self.logger.info(
            f"Completeness validation completed ({entity_size}): {len(results)} issues"
        )
        return results.diagnostics

    def _validate_regulatory_invariants(
        self,
        tagged_names: set[str],
        entity_size: EntitySize,
        results: DiagnosticCollection
    ) -> None:
        """Statutory minimums that hold whatever the rule tables say."""
        if TURNOVER_ELEMENT not in tagged_names:
            results.error(
                ERR_MISSING_PROFIT_LOSS,
                MSG_MISSING_PROFIT_LOSS,
                element=TURNOVER_ELEMENT,
            )

        if entity_size is not EntitySize.MICRO:
            if PRINCIPAL_ACTIVITIES_ELEMENT not in tagged_names:
                results.error(
                    ERR_MISSING_DIRECTORS_REPORT,
                    MSG_MISSING_DIRECTORS_REPORT.format(size=entity_size),
                    element=PRINCIPAL_ACTIVITIES_ELEMENT,
                )

            if DIRECTOR_NAME_ELEMENT not in tagged_names:
                results.error(
                    ERR_MISSING_DIRECTOR_NAMES,
                    MSG_MISSING_DIRECTOR_NAMES.format(size=entity_size),
                    element=DIRECTOR_NAME_ELEMENT,
                )

        if AVERAGE_EMPLOYEES_ELEMENT not in tagged_names:
            results.error(
                ERR_MISSING_AVERAGE_EMPLOYEES,
                MSG_MISSING_AVERAGE_EMPLOYEES,
                element=AVERAGE_EMPLOYEES_ELEMENT,
            )


__all__ = ['CompletenessValidator']

# Path: ixbrl_validator/validation/__init__.py
"""
Validation passes and the registry that runs them.

Example:
    from ixbrl_validator.validation import create_default_registry

    registry = create_default_registry()
    run = registry.run(tree, EntitySize.SMALL)
"""

from typing import Optional

from ..core.config_loader import ConfigLoader
from .registry import ValidationRegistry, BaseValidator, ValidatorInfo, RegistryRun
from .rules import (
    RequiredElement,
    RequiredElementRules,
    load_rules,
    default_rules,
    rule_table,
    required_elements_for,
)
from .structural import StructuralValidator
from .contexts import ContextUnitValidator
from .completeness import CompletenessValidator
from .cross_reference import CrossReferenceValidator
from .fact_values import FactValueValidator, normalize_numeric_value, is_major_account
from .placeholders import PlaceholderDetector, match_placeholder, is_date_field
from .qnames import QNameValidator
from .disclosures import DisclosureValidator
from .constants import (
    PRIORITY_STRUCTURAL,
    PRIORITY_CONTEXTS,
    PRIORITY_COMPLETENESS,
    PRIORITY_CROSS_REFERENCE,
    PRIORITY_FACT_VALUES,
    PRIORITY_QNAMES,
    PRIORITY_DISCLOSURES,
    PRIORITY_PLACEHOLDERS,
)


def create_default_registry(config: Optional[ConfigLoader] = None) -> ValidationRegistry:
    """
    Build a registry with every standard pass registered.

    Args:
        config: Configuration loader

    Returns:
        ValidationRegistry ready to run
    """
    registry = ValidationRegistry(config)
    registry.register_validator(StructuralValidator(config), priority=PRIORITY_STRUCTURAL)
    registry.register_validator(ContextUnitValidator(config), priority=PRIORITY_CONTEXTS)
    registry.register_validator(CompletenessValidator(config), priority=PRIORITY_COMPLETENESS)
    registry.register_validator(CrossReferenceValidator(config), priority=PRIORITY_CROSS_REFERENCE)
    registry.register_validator(FactValueValidator(config), priority=PRIORITY_FACT_VALUES)
    registry.register_validator(QNameValidator(config), priority=PRIORITY_QNAMES)
    registry.register_validator(DisclosureValidator(config), priority=PRIORITY_DISCLOSURES)
    registry.register_validator(PlaceholderDetector(config), priority=PRIORITY_PLACEHOLDERS)
    return registry


__all__ = [
    'ValidationRegistry',
    'BaseValidator',
    'ValidatorInfo',
    'RegistryRun',
    'RequiredElement',
    'RequiredElementRules',
    'load_rules',
    'default_rules',
    'rule_table',
    'required_elements_for',
    'StructuralValidator',
    'ContextUnitValidator',
    'CompletenessValidator',
    'CrossReferenceValidator',
    'FactValueValidator',
    'normalize_numeric_value',
    'is_major_account',
    'PlaceholderDetector',
    'match_placeholder',
    'is_date_field',
    'QNameValidator',
    'DisclosureValidator',
    'create_default_registry',
]

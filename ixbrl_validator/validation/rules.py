# Path: ixbrl_validator/validation/rules.py
"""
Required Element Rules

Loads the tier-keyed required-element tables from YAML and validates
them into frozen Pydantic models.

The tables are static data: one entry for every entity size plus an
'all' entry that applies to every size. The effective requirement set
for a run is the union of the two, de-duplicated in declaration order.

Example:
    for element in required_elements_for(EntitySize.SMALL):
        print(element.name, element.description)
"""

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ..core.logger import get_process_logger
from ..models.validation import EntitySize


RULES_FILE = Path(__file__).parent / 'data' / 'required_elements.yaml'

logger = get_process_logger('required_element_rules')


# =============================================================================
# MODELS
# =============================================================================

class RequiredElement(BaseModel):
    """A taxonomy element that must be tagged somewhere in the document."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(
        pattern=r'^[A-Za-z][\w.-]*:[A-Za-z_][\w.-]*$',
        description="Prefixed taxonomy name, e.g. 'uk-gaap:Turnover'"
    )
    description: str = Field(
        min_length=1,
        description="Human-readable description used in diagnostics"
    )


class RequiredElementRules(BaseModel):
    """Complete rule table, one tuple per entity size."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    all_entities: tuple[RequiredElement, ...] = Field(
        default=(),
        alias='all',
        description="Required for every entity size"
    )
    micro: tuple[RequiredElement, ...] = Field(default=())
    small: tuple[RequiredElement, ...] = Field(default=())
    medium: tuple[RequiredElement, ...] = Field(default=())
    large: tuple[RequiredElement, ...] = Field(default=())
    recommended: tuple[RequiredElement, ...] = Field(
        default=(),
        description="Advisory elements, reported as warnings"
    )

    def for_size(self, entity_size: EntitySize) -> tuple[RequiredElement, ...]:
        """Size-specific table (without the 'all' entries)."""
        return getattr(self, EntitySize.parse(entity_size).value)


# =============================================================================
# LOADING
# =============================================================================

def load_rules(path: Optional[Path] = None) -> RequiredElementRules:
    """
    Load and validate a rule file.

    Args:
        path: YAML file (default: packaged required_elements.yaml)

    Returns:
        Validated rule table

    Raises:
        ValueError: If the file is empty
        yaml.YAMLError: If the file is not valid YAML
        pydantic.ValidationError: If the data does not match the schema
    """
    path = Path(path) if path is not None else RULES_FILE

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        raise ValueError(f"Empty rule file: {path}")

    rules = RequiredElementRules.model_validate(data)
    logger.debug(
        f"Loaded required element rules from {path.name}: "
        f"{len(rules.all_entities)} common, {len(rules.recommended)} recommended"
    )
    return rules


@lru_cache(maxsize=1)
def default_rules() -> RequiredElementRules:
    """Packaged rule table, loaded once per process."""
    return load_rules()


def rule_table(
    rules: Optional[RequiredElementRules] = None
) -> Mapping[EntitySize, tuple[RequiredElement, ...]]:
    """
    Read-only map from entity size to its size-specific table.

    Args:
        rules: Rule table (default: packaged rules)

    Returns:
        Immutable EntitySize -> tuple mapping
    """
    rules = rules or default_rules()
    return MappingProxyType({size: rules.for_size(size) for size in EntitySize})


def required_elements_for(
    entity_size: EntitySize,
    rules: Optional[RequiredElementRules] = None
) -> tuple[RequiredElement, ...]:
    """
    Effective required set: 'all' entries plus the size's own entries.

    Args:
        entity_size: Declared entity size
        rules: Rule table (default: packaged rules)

    Returns:
        Required elements, de-duplicated by name in declaration order
    """
    rules = rules or default_rules()
    seen: set[str] = set()
    elements = []

    for element in (*rules.all_entities, *rules.for_size(entity_size)):
        if element.name not in seen:
            seen.add(element.name)
            elements.append(element)

    return tuple(elements)


__all__ = [
    'RULES_FILE',
    'RequiredElement',
    'RequiredElementRules',
    'load_rules',
    'default_rules',
    'rule_table',
    'required_elements_for',
]

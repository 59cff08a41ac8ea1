# Path: ixbrl_validator/output/statistics.py
"""
Statistics Builder

Derives document counts from a parsed tree. Counts are computed once,
after all passes have run, and never change afterwards.
"""

from typing import Optional

from ..core.logger import get_output_logger
from ..constants import (
    FRC_NAME_PREFIX,
    XBRL_CONTEXT,
    XBRL_UNIT,
    XMLNS_ATTR,
    XMLNS_PREFIX,
)
from ..models.document import DocumentTree
from ..models.validation import ValidationStatistics

logger = get_output_logger('statistics')


def count_namespace_declarations(tree: DocumentTree) -> int:
    """Number of xmlns / xmlns:prefix declarations on the root element."""
    return sum(
        1 for key in tree.root.attributes
        if key == XMLNS_ATTR or key.startswith(XMLNS_PREFIX)
    )


def gather_statistics(
    tree: Optional[DocumentTree],
    validation_time_ms: float = 0.0
) -> ValidationStatistics:
    """
    Build statistics for a document.

    Args:
        tree: Parsed document, or None after a fatal parse failure
        validation_time_ms: Elapsed time of the run

    Returns:
        ValidationStatistics (all counts zero when tree is None)
    """
    if tree is None:
        return ValidationStatistics(validation_time_ms=validation_time_ms)

    total_facts = 0
    tagged_elements = 0
    contexts = 0
    units = 0

    for node in tree.iter_nodes():
        name = node.name
        if name and ':' in name:
            total_facts += 1
            if name.startswith(FRC_NAME_PREFIX):
                tagged_elements += 1

        if node.tag == XBRL_CONTEXT:
            contexts += 1
        elif node.tag == XBRL_UNIT:
            units += 1

    statistics = ValidationStatistics(
        total_facts=total_facts,
        tagged_elements=tagged_elements,
        contexts=contexts,
        units=units,
        namespaces=count_namespace_declarations(tree),
        validation_time_ms=validation_time_ms,
    )
    logger.debug(f"Statistics: {statistics}")
    return statistics


__all__ = ['count_namespace_declarations', 'gather_statistics']

# Path: ixbrl_validator/validation/contexts.py
"""
Context & Unit Validator

Validates every declared xbrli:context and xbrli:unit.

This module validates:
- Presence of at least one context and one unit
- Context id (present, unique), entity/identifier, period
- Period shape: exactly one of instant or startDate + endDate
- Strict ISO 'YYYY-MM-DD' dates and end > start for durations
- Unit id (present, unique) and at least one measure

Context and Unit model objects are built along the way; collect()
returns them together with the diagnostics.

Example:
    validator = ContextUnitValidator()
    contexts, units, diagnostics = validator.collect(tree)
"""

from typing import Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..constants import (
    XBRL_CONTEXT,
    XBRL_ENTITY,
    XBRL_IDENTIFIER,
    XBRL_PERIOD,
    XBRL_INSTANT,
    XBRL_START_DATE,
    XBRL_END_DATE,
    XBRL_UNIT,
    XBRL_MEASURE,
    ATTR_ID,
)
from ..models.context import Context, Unit, Instant, Duration, Period, parse_iso_date
from ..models.document import DocumentTree, Node
from ..models.error import Diagnostic, DiagnosticCollection
from ..models.validation import EntitySize
from ..validation.registry import BaseValidator
from ..validation.constants import (
    VALIDATOR_CONTEXTS,
    CATEGORY_STRUCTURAL,
    UNKNOWN_ID,
    ERR_MISSING_CONTEXTS,
    ERR_CONTEXT_MISSING_ID,
    ERR_DUPLICATE_CONTEXT_ID,
    ERR_CONTEXT_MISSING_ENTITY,
    ERR_CONTEXT_MISSING_IDENTIFIER,
    ERR_CONTEXT_MISSING_PERIOD,
    ERR_INVALID_CONTEXT_PERIOD,
    ERR_AMBIGUOUS_CONTEXT_PERIOD,
    ERR_INVALID_INSTANT_DATE,
    ERR_INVALID_START_DATE,
    ERR_INVALID_END_DATE,
    ERR_INVALID_DATE_RANGE,
    ERR_MISSING_UNITS,
    ERR_UNIT_MISSING_ID,
    ERR_DUPLICATE_UNIT_ID,
    ERR_UNIT_MISSING_MEASURE,
    MSG_MISSING_CONTEXTS,
    MSG_CONTEXT_MISSING_ID,
    MSG_DUPLICATE_CONTEXT_ID,
    MSG_CONTEXT_MISSING_ENTITY,
    MSG_CONTEXT_MISSING_IDENTIFIER,
    MSG_CONTEXT_MISSING_PERIOD,
    MSG_INVALID_CONTEXT_PERIOD,
    MSG_AMBIGUOUS_CONTEXT_PERIOD,
    MSG_INVALID_INSTANT_DATE,
    MSG_INVALID_START_DATE,
    MSG_INVALID_END_DATE,
    MSG_INVALID_DATE_RANGE,
    MSG_MISSING_UNITS,
    MSG_UNIT_MISSING_ID,
    MSG_DUPLICATE_UNIT_ID,
    MSG_UNIT_MISSING_MEASURE,
)


class ContextUnitValidator(BaseValidator):
    """
    Validates context and unit declarations.

    Every context and every unit is checked; a broken declaration never
    hides problems in the ones after it.

    Example:
        validator = ContextUnitValidator()
        diagnostics = validator.validate(tree, EntitySize.MICRO)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize context & unit validator.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = get_process_logger('context_unit_validator')

    def get_name(self) -> str:
        """Get validator name."""
        return VALIDATOR_CONTEXTS

    def get_category(self) -> str:
        """Get validator category."""
        return CATEGORY_STRUCTURAL

    def validate(self, tree: DocumentTree, entity_size: EntitySize) -> list[Diagnostic]:
        """
        Validate contexts and units.

        Args:
            tree: Parsed document
            entity_size: Declared entity size (unused)

        Returns:
            list of context/unit diagnostics
        """
        contexts, units, diagnostics = self.collect(tree)
        self.logger.info(
            f"Context/unit validation completed: {len(contexts)} contexts, "
            f"{len(units)} units, {len(diagnostics)} issues"
        )
        return diagnostics

    def collect(self, tree: DocumentTree) -> tuple[list[Context], list[Unit], list[Diagnostic]]:
        """
        Build context/unit models and validate them.

        Args:
            tree: Parsed document

        Returns:
            Tuple of (contexts, units, diagnostics)
        """
        results = DiagnosticCollection()

        context_nodes = list(tree.find_by_tag(XBRL_CONTEXT))
        if not context_nodes:
            results.error(ERR_MISSING_CONTEXTS, MSG_MISSING_CONTEXTS, element=XBRL_CONTEXT)

        seen_context_ids: set[str] = set()
        contexts = [
            self._validate_context(node, seen_context_ids, results)
            for node in context_nodes
        ]

        unit_nodes = list(tree.find_by_tag(XBRL_UNIT))
        if not unit_nodes:
            results.error(ERR_MISSING_UNITS, MSG_MISSING_UNITS, element=XBRL_UNIT)

        seen_unit_ids: set[str] = set()
        units = [
            self._validate_unit(node, seen_unit_ids, results)
            for node in unit_nodes
        ]

        return contexts, units, results.diagnostics

    # ==========================================================================
    # CONTEXTS
    # ==========================================================================

    def _validate_context(
        self,
        node: Node,
        seen_ids: set[str],
        results: DiagnosticCollection
    ) -> Context:
        """Validate one context and build its model."""
        context_id = node.get(ATTR_ID) or None
        label = context_id or UNKNOWN_ID

        if context_id is None:
            results.error(
                ERR_CONTEXT_MISSING_ID,
                MSG_CONTEXT_MISSING_ID,
                element=XBRL_CONTEXT,
                line=node.line,
            )
        elif context_id in seen_ids:
            results.error(
                ERR_DUPLICATE_CONTEXT_ID,
                MSG_DUPLICATE_CONTEXT_ID.format(context_id=context_id),
                location=context_id,
                element=XBRL_CONTEXT,
                line=node.line,
            )
        else:
            seen_ids.add(context_id)

        has_identifier = False
        entity = node.find_first(XBRL_ENTITY)
        if entity is None:
            results.error(
                ERR_CONTEXT_MISSING_ENTITY,
                MSG_CONTEXT_MISSING_ENTITY.format(context_id=label),
                location=label,
                element=XBRL_CONTEXT,
                line=node.line,
            )
        elif entity.find_first(XBRL_IDENTIFIER) is None:
            results.error(
                ERR_CONTEXT_MISSING_IDENTIFIER,
                MSG_CONTEXT_MISSING_IDENTIFIER.format(context_id=label),
                location=label,
                element=XBRL_ENTITY,
                line=entity.line,
            )
        else:
            has_identifier = True

        period: Optional[Period] = None
        period_node = node.find_first(XBRL_PERIOD)
        if period_node is None:
            results.error(
                ERR_CONTEXT_MISSING_PERIOD,
                MSG_CONTEXT_MISSING_PERIOD.format(context_id=label),
                location=label,
                element=XBRL_CONTEXT,
                line=node.line,
            )
        else:
            period = self._validate_period(period_node, label, results)

        return Context(
            id=context_id,
            has_entity_identifier=has_identifier,
            period=period,
            line=node.line,
        )

    def _validate_period(
        self,
        period_node: Node,
        label: str,
        results: DiagnosticCollection
    ) -> Optional[Period]:
        """
        Validate period shape and dates.

        Returns:
            Instant or Duration when the period is well-formed, else None
        """
        instant = period_node.find_first(XBRL_INSTANT)
        start = period_node.find_first(XBRL_START_DATE)
        end = period_node.find_first(XBRL_END_DATE)

        shape_ok = True
        if instant is not None and start is not None and end is not None:
            shape_ok = False
            results.error(
                ERR_AMBIGUOUS_CONTEXT_PERIOD,
                MSG_AMBIGUOUS_CONTEXT_PERIOD.format(context_id=label),
                location=label,
                element=XBRL_PERIOD,
                line=period_node.line,
            )
        elif instant is None and (start is None or end is None):
            shape_ok = False
            results.error(
                ERR_INVALID_CONTEXT_PERIOD,
                MSG_INVALID_CONTEXT_PERIOD.format(context_id=label),
                location=label,
                element=XBRL_PERIOD,
                line=period_node.line,
            )

        instant_date = self._check_date(
            instant, label, ERR_INVALID_INSTANT_DATE, MSG_INVALID_INSTANT_DATE, results
        )
        start_date = self._check_date(
            start, label, ERR_INVALID_START_DATE, MSG_INVALID_START_DATE, results
        )
        end_date = self._check_date(
            end, label, ERR_INVALID_END_DATE, MSG_INVALID_END_DATE, results
        )

        if start_date is not None and end_date is not None and end_date <= start_date:
            results.error(
                ERR_INVALID_DATE_RANGE,
                MSG_INVALID_DATE_RANGE.format(context_id=label),
                location=label,
                element=XBRL_PERIOD,
                line=period_node.line,
            )
            return None

        if not shape_ok:
            return None
        if instant_date is not None:
            return Instant(instant_date)
        if start_date is not None and end_date is not None:
            return Duration(start_date, end_date)
        return None

    @staticmethod
    def _check_date(node, label, code, message, results):
        """Parse a date element's text; report it when not strict ISO."""
        if node is None:
            return None

        value = node.text_content().strip()
        parsed = parse_iso_date(value)
        if parsed is None:
            results.error(
                code,
                message.format(context_id=label, value=value),
                location=label,
                element=node.tag,
                value=value,
                line=node.line,
            )
        return parsed

    # ==========================================================================
    # UNITS
    # ==========================================================================

    def _validate_unit(
        self,
        node: Node,
        seen_ids: set[str],
        results: DiagnosticCollection
    ) -> Unit:
        """Validate one unit and build its model."""
        unit_id = node.get(ATTR_ID) or None
        label = unit_id or UNKNOWN_ID

        if unit_id is None:
            results.error(
                ERR_UNIT_MISSING_ID,
                MSG_UNIT_MISSING_ID,
                element=XBRL_UNIT,
                line=node.line,
            )
        elif unit_id in seen_ids:
            results.error(
                ERR_DUPLICATE_UNIT_ID,
                MSG_DUPLICATE_UNIT_ID.format(unit_id=unit_id),
                location=unit_id,
                element=XBRL_UNIT,
                line=node.line,
            )
        else:
            seen_ids.add(unit_id)

        measures = tuple(
            measure.text_content().strip()
            for measure in node.find_descendants(XBRL_MEASURE)
        )
        if not measures:
            results.error(
                ERR_UNIT_MISSING_MEASURE,
                MSG_UNIT_MISSING_MEASURE.format(unit_id=label),
                location=label,
                element=XBRL_UNIT,
                line=node.line,
            )

        return Unit(id=unit_id, measures=measures, line=node.line)


__all__ = ['ContextUnitValidator']

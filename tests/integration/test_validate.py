# Path: tests/integration/test_validate.py
"""
Integration Tests for the Validation Pipeline

End-to-end: markup in, ValidationResult out, through the parser, every
standard pass, statistics and the report renderer.
"""

import time

import pytest

from ixbrl_validator import IXBRLValidator, render, validate, validate_batch
from ixbrl_validator.models.error import Severity
from ixbrl_validator.models.validation import EntitySize
from ixbrl_validator.validation.registry import BaseValidator, ValidationRegistry

CONTENT_CODES = {'placeholder', 'invalid_date'}


def _fingerprint(result):
    """Everything except elapsed time."""
    diagnostics = [
        (d.code, d.message, d.severity, d.location, d.element, d.value, d.line)
        for d in (*result.errors, *result.warnings, *result.placeholders)
    ]
    stats = result.statistics.to_dict()
    stats.pop('validation_time_ms')
    return diagnostics, stats, result.is_valid


class SlowValidator(BaseValidator):
    """Pass that takes longer than the batch allows."""

    def get_name(self):
        return 'slow'

    def get_category(self):
        return 'structural'

    def validate(self, tree, entity_size):
        time.sleep(0.5)
        return []


# ==============================================================================
# END-TO-END SCENARIOS
# ==============================================================================

class TestScenarios:
    """Typical filings and typical mistakes."""

    def test_minimal_micro_filing_is_valid(self, minimal_document):
        """Complete micro-entity filing: no errors, advisory warnings only."""
        result = validate(minimal_document, EntitySize.MICRO)

        assert result.errors == []
        assert result.placeholders == []
        assert result.is_valid
        assert result.warnings
        assert all(w.severity == Severity.WARNING for w in result.warnings)

    def test_missing_units(self, document_factory):
        """No units: one MISSING_UNITS, plus the dangling unit references."""
        result = validate(document_factory(units=''), EntitySize.MICRO)

        assert len(result.get_errors('MISSING_UNITS')) == 1
        assert len(result.get_errors('INVALID_UNIT_REF')) == 2
        assert not result.is_valid
        assert result.statistics.units == 0

    def test_dangling_context_ref(self, document_factory, fact_markup):
        """A fact pointing at an undeclared context is located by the reference."""
        body = fact_markup['turnover'].replace('contextRef="ctx1"', 'contextRef="ctx99"') + fact_markup['employees']
        result = validate(document_factory(body=body), EntitySize.MICRO)

        errors = result.get_errors('INVALID_CONTEXT_REF')
        assert len(errors) == 1
        assert errors[0].location == 'ctx99'
        assert errors[0].element == 'uk-gaap:Turnover'
        assert not result.is_valid

    def test_placeholder_blocks_submission(self, document_factory, fact_markup):
        """A bracket placeholder in a fact invalidates an otherwise clean filing."""
        body = (
            fact_markup['turnover'] + fact_markup['employees'] +
            '<p><ix:nonNumeric name="uk-core:EntityCurrentLegalOrRegisteredName" '
            'contextRef="ctx1">[Company Name]</ix:nonNumeric></p>'
        )
        result = validate(document_factory(body=body), EntitySize.MICRO)

        assert result.errors == []
        assert len(result.critical_placeholders) == 1
        assert result.critical_placeholders[0].code == 'placeholder'
        assert result.critical_placeholders[0].value == '[Company Name]'
        assert not result.is_valid

    def test_small_entity_needs_principal_activities(self, document_factory, fact_markup):
        """Small filing without principal activities fails; as micro it passes."""
        body = fact_markup['turnover'] + fact_markup['employees'] + fact_markup['director_name']
        document = document_factory(body=body)

        small = validate(document, EntitySize.SMALL)
        micro = validate(document, EntitySize.MICRO)

        assert small.get_errors('MISSING_DIRECTORS_REPORT')
        assert small.get_errors('MISSING_REQUIRED_ELEMENT')
        assert not small.is_valid
        assert not micro.get_errors('MISSING_DIRECTORS_REPORT')
        assert not micro.get_errors('MISSING_REQUIRED_ELEMENT')
        assert micro.is_valid

    def test_invalid_balance_sheet_date(self, document_factory, fact_markup):
        """A date template in a date field gives a placeholder and an invalid date."""
        body = (
            fact_markup['turnover'] + fact_markup['employees'] +
            '<p><ix:nonNumeric name="uk-core:BalanceSheetDate" contextRef="ctx1">'
            '99/99/9999</ix:nonNumeric></p>'
        )
        result = validate(document_factory(body=body), EntitySize.MICRO)

        assert len(result.get_placeholders('invalid_date')) == 1
        assert len(result.get_placeholders('placeholder')) == 1
        assert not result.is_valid

    def test_complete_small_filing(self, small_entity_document):
        """Small filing with the directors' report disclosures passes."""
        assert validate(small_entity_document, 'small').is_valid

    def test_html_entities_in_filing(self, document_factory, fact_markup):
        """&nbsp; and &pound; around a fact do not abort validation."""
        body = fact_markup['turnover'].replace('Turnover: ', 'Turnover:&nbsp;&pound;')
        body += fact_markup['employees']
        result = validate(document_factory(body=body), EntitySize.MICRO)

        assert result.errors == []
        assert result.is_valid
        assert result.statistics.total_facts == 2

    def test_latin1_declared_text_filing(self, document_factory, fact_markup):
        """A pound sign inside a fact survives a Latin-1 declaration on text input."""
        body = fact_markup['turnover'].replace('>125,000<', '>£125,000<')
        body += fact_markup['employees']
        markup = document_factory(body=body).replace(
            'encoding="UTF-8"', 'encoding="ISO-8859-1"'
        )
        result = validate(markup, EntitySize.MICRO)

        assert result.errors == []
        assert result.is_valid


# ==============================================================================
# PIPELINE PROPERTIES
# ==============================================================================

class TestPipeline:
    """Properties of the orchestrator."""

    def test_statistics(self, minimal_document):
        """Statistics reflect the document."""
        stats = validate(minimal_document, EntitySize.MICRO).statistics

        assert stats.total_facts == 2
        assert stats.tagged_elements == 2
        assert stats.contexts == 1
        assert stats.units == 2
        assert stats.namespaces == 9
        assert stats.validation_time_ms > 0

    def test_idempotent(self, small_entity_document):
        """Validating twice gives the same findings."""
        validator = IXBRLValidator()
        first = validator.validate(small_entity_document, EntitySize.MEDIUM)
        second = validator.validate(small_entity_document, EntitySize.MEDIUM)

        assert _fingerprint(first) == _fingerprint(second)

    def test_diagnostics_routed_by_kind(self, document_factory):
        """Errors block, warnings advise, content findings go to placeholders."""
        body = (
            '<p><ix:nonFraction name="uk-gaap:Turnover" contextRef="ctx99" unitRef="GBP">0</ix:nonFraction></p>'
            '<p>Insert principal activity</p>'
        )
        result = validate(document_factory(body=body), EntitySize.SMALL)

        assert result.errors and all(e.severity.is_blocking for e in result.errors)
        assert result.warnings and all(w.severity == Severity.WARNING for w in result.warnings)
        assert {p.code for p in result.placeholders} <= CONTENT_CODES
        assert not any(e.code in CONTENT_CODES for e in result.errors)
        assert result.get_warnings('SUSPICIOUS_ZERO_VALUE')
        assert result.get_errors('MISSING_DECIMALS_ATTRIBUTE')

    def test_fatal_parse_error(self):
        """Unparsable markup stops before any pass runs."""
        result = validate('<html><body><p>Accounts</body></html>', EntitySize.MICRO)

        assert result.is_fatal
        assert not result.is_valid
        assert result.errors[0].code == 'XML_PARSE_ERROR'
        assert result.warnings == []
        assert result.placeholders == []
        assert result.statistics.total_facts == 0
        assert result.statistics.namespaces == 0

    def test_empty_document(self):
        """Empty input is a structural failure."""
        result = validate('', EntitySize.MICRO)
        assert [e.code for e in result.errors] == ['XML_INVALID_STRUCTURE']

    def test_recoverable_parse_issue_reported_first(self):
        """Recovered markup still runs every pass, parser issue first."""
        result = validate('<html><ix:header/></html>', EntitySize.MICRO)

        assert not result.is_fatal
        assert result.errors[0].code == 'XML_PARSE_WARNING'
        assert result.get_errors('MISSING_NAMESPACE')

    def test_unknown_entity_size(self, minimal_document):
        """Unknown sizes are rejected up front."""
        with pytest.raises(ValueError):
            validate(minimal_document, 'enormous')

    def test_pass_failure_does_not_abort(self, minimal_document):
        """A raising pass is reported; the rest still run."""
        class Broken(BaseValidator):
            def get_name(self):
                return 'broken'

            def get_category(self):
                return 'structural'

            def validate(self, tree, entity_size):
                raise KeyError('name')

        validator = IXBRLValidator()
        validator.registry.register_validator(Broken(), priority=1)
        result = validator.validate(minimal_document, EntitySize.MICRO)

        assert [e.code for e in result.errors] == ['VALIDATION_EXCEPTION']
        assert result.warnings

    def test_to_dict(self, document_factory):
        """Serializable shape."""
        data = validate(document_factory(units=''), EntitySize.MICRO).to_dict()

        assert set(data) == {'is_valid', 'entity_size', 'errors', 'warnings', 'placeholders', 'statistics'}
        assert data['is_valid'] is False
        assert data['entity_size'] == 'micro'
        assert data['errors'][0]['code'] == 'MISSING_UNITS'
        assert data['errors'][0]['severity'] == 'error'

    def test_report_renders(self, document_factory):
        """A failed result renders a failed report."""
        text = render(validate(document_factory(units=''), EntitySize.MICRO))
        assert "[MISSING_UNITS]" in text
        assert "VALIDATION FAILED" in text


# ==============================================================================
# BATCH VALIDATION
# ==============================================================================

class TestBatch:
    """Test parallel validation."""

    def test_results_in_input_order(self, minimal_document, document_factory):
        """Results line up with the input documents."""
        documents = [minimal_document, document_factory(units=''), '', minimal_document]
        results = validate_batch(documents, EntitySize.MICRO, max_workers=3)

        assert [r.is_valid for r in results] == [True, False, False, True]
        assert results[2].errors[0].code == 'XML_INVALID_STRUCTURE'

    def test_matches_single_validation(self, small_entity_document):
        """Batch results equal one-by-one results."""
        single = validate(small_entity_document, EntitySize.SMALL)
        batch = validate_batch([small_entity_document], EntitySize.SMALL)

        assert _fingerprint(batch[0]) == _fingerprint(single)

    def test_empty_batch(self):
        assert validate_batch([], EntitySize.MICRO) == []

    def test_timeout(self, minimal_document):
        """Documents still running at the deadline get VALIDATION_TIMEOUT."""
        registry = ValidationRegistry()
        registry.register_validator(SlowValidator())
        validator = IXBRLValidator(registry=registry)

        results = validator.validate_batch(
            [minimal_document, minimal_document], EntitySize.MICRO, max_workers=1, timeout=0.05
        )

        assert [r.errors[0].code for r in results] == ['VALIDATION_TIMEOUT', 'VALIDATION_TIMEOUT']
        assert not any(r.is_valid for r in results)

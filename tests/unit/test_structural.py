# Path: tests/unit/test_structural.py
"""
Unit Tests for StructuralValidator

Tests namespace declarations, ix:header and schema reference checks.
"""

import pytest

from ixbrl_validator.constants import REQUIRED_NAMESPACES
from ixbrl_validator.models.validation import EntitySize
from ixbrl_validator.validation.structural import StructuralValidator


@pytest.fixture
def validator():
    return StructuralValidator()


def _codes(diagnostics):
    return [d.code for d in diagnostics]


class TestNamespaces:
    """Test root namespace declarations."""

    def test_valid_document_passes(self, validator, parse_tree, minimal_document):
        """All namespaces, header and FRC schemaRef present: no findings."""
        assert validator.validate(parse_tree(minimal_document), EntitySize.MICRO) == []

    @pytest.mark.parametrize('missing', [['uk-gaap'], ['uk-core', 'uk-bus'], ['uk-gaap', 'uk-core', 'uk-bus']])
    def test_one_error_per_missing_prefix(self, validator, parse_tree, document_factory, missing):
        """N missing namespaces give exactly N MISSING_NAMESPACE errors."""
        namespaces = {p: u for p, u in REQUIRED_NAMESPACES.items() if p not in missing}
        tree = parse_tree(document_factory(body='<p>Accounts</p>', namespaces=namespaces))

        diagnostics = validator.validate(tree, EntitySize.MICRO)
        missing_codes = [d for d in diagnostics if d.code == 'MISSING_NAMESPACE']

        assert len(missing_codes) == len(missing)
        assert sorted(d.location for d in missing_codes) == sorted(f'xmlns:{p}' for p in missing)

    def test_incorrect_uri(self, validator, parse_tree, document_factory):
        """A declared prefix with the wrong URI is INCORRECT_NAMESPACE_URI."""
        namespaces = dict(REQUIRED_NAMESPACES)
        namespaces['uk-gaap'] = 'http://xbrl.frc.org.uk/frs/2014-09-01/FRS-102-2014-09-01.xsd'
        tree = parse_tree(document_factory(namespaces=namespaces))

        diagnostics = validator.validate(tree, EntitySize.MICRO)

        assert _codes(diagnostics) == ['INCORRECT_NAMESPACE_URI']
        assert diagnostics[0].value == namespaces['uk-gaap']
        assert REQUIRED_NAMESPACES['uk-gaap'] in diagnostics[0].message


class TestHeader:
    """Test ix:header and link:schemaRef."""

    def test_missing_header_skips_schema_checks(self, validator, parse_tree, document_factory):
        """No header: MISSING_IX_HEADER only."""
        tree = parse_tree(document_factory(header=False))
        assert _codes(validator.validate(tree, EntitySize.MICRO)) == ['MISSING_IX_HEADER']

    def test_missing_schema_ref(self, validator, parse_tree, document_factory):
        """Header without schemaRef: MISSING_SCHEMA_REF."""
        tree = parse_tree(document_factory(schema_ref=False))
        assert _codes(validator.validate(tree, EntitySize.MICRO)) == ['MISSING_SCHEMA_REF']

    def test_schema_ref_to_other_publisher(self, validator, parse_tree, document_factory):
        """schemaRef outside the FRC host: INVALID_SCHEMA_REF."""
        tree = parse_tree(document_factory(
            schema_href='https://xbrl.fasb.org/us-gaap/2024/elts/us-gaap-2024.xsd'
        ))
        diagnostics = validator.validate(tree, EntitySize.MICRO)

        assert _codes(diagnostics) == ['INVALID_SCHEMA_REF']
        assert 'fasb' in diagnostics[0].location

    def test_schema_ref_without_href(self, validator, parse_tree, document_factory):
        """Empty href: INVALID_SCHEMA_REF."""
        tree = parse_tree(document_factory(schema_href=''))
        assert _codes(validator.validate(tree, EntitySize.MICRO)) == ['INVALID_SCHEMA_REF']

    def test_multiple_headers(self, validator, parse_tree, document_factory):
        """A second ix:header is reported."""
        extra = '<div style="display:none"><ix:header/></div>'
        tree = parse_tree(document_factory(body=extra))
        assert _codes(validator.validate(tree, EntitySize.MICRO)) == ['MULTIPLE_IX_HEADERS']

    def test_custom_namespace_table(self, parse_tree, minimal_document):
        """The required namespace table is injectable."""
        validator = StructuralValidator(required_namespaces={'ifrs': 'http://xbrl.ifrs.org/taxonomy'})
        diagnostics = validator.validate(parse_tree(minimal_document), EntitySize.MICRO)
        assert _codes(diagnostics) == ['MISSING_NAMESPACE']

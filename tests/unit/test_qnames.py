# Path: tests/unit/test_qnames.py
"""
Unit Tests for QNameValidator
"""

import pytest

from ixbrl_validator.models.error import Severity
from ixbrl_validator.models.validation import EntitySize
from ixbrl_validator.validation.qnames import QNameValidator


@pytest.fixture
def run(parse_tree, document_factory):
    validator = QNameValidator()

    def _run(body):
        return validator.validate(parse_tree(document_factory(body=body)), EntitySize.MICRO)
    return _run


class TestQNames:
    """Test QName checks on ix: elements."""

    def test_known_prefixes(self, run, fact_markup):
        """FRC prefixes pass."""
        assert run(fact_markup['turnover'] + fact_markup['principal_activities']) == []

    def test_whitespace_in_name(self, run):
        """Whitespace in a QName is an error."""
        diagnostics = run('<ix:nonNumeric name="uk-bus:Name Entity" contextRef="ctx1">Acme</ix:nonNumeric>')

        assert [d.code for d in diagnostics] == ['INVALID_QNAME']
        assert diagnostics[0].severity == Severity.ERROR
        assert diagnostics[0].element == 'ix:nonNumeric'

    def test_unknown_prefix(self, run):
        """An unknown prefix is a warning."""
        diagnostics = run('<ix:nonNumeric name="acme:Custom" contextRef="ctx1">Acme</ix:nonNumeric>')

        assert [d.code for d in diagnostics] == ['UNKNOWN_QNAME_PREFIX']
        assert diagnostics[0].severity == Severity.WARNING
        assert diagnostics[0].location == 'acme:Custom'

    def test_non_inline_elements_ignored(self, run):
        """Only ix: elements carry QNames."""
        assert run('<p><span name="acme:Custom">Acme</span><a name="top anchor">Top</a></p>') == []

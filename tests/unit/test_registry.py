# Path: tests/unit/test_registry.py
"""
Unit Tests for ValidationRegistry

Tests registration, execution order, pass isolation and the default
registry.
"""

import pytest

from ixbrl_validator.models.error import Diagnostic, Severity
from ixbrl_validator.models.validation import EntitySize
from ixbrl_validator.validation import create_default_registry
from ixbrl_validator.validation.registry import BaseValidator, RegistryRun, ValidationRegistry, ValidatorInfo


class RecordingValidator(BaseValidator):
    """Validator that records its calls and returns one finding."""

    def __init__(self, name, calls, category='structural', severity=Severity.ERROR):
        self.name = name
        self.calls = calls
        self.category = category
        self.severity = severity

    def get_name(self):
        return self.name

    def get_category(self):
        return self.category

    def validate(self, tree, entity_size):
        self.calls.append(self.name)
        return [Diagnostic(code=self.name.upper(), message=self.name, severity=self.severity)]


class FailingValidator(RecordingValidator):
    """Validator that raises."""

    def validate(self, tree, entity_size):
        self.calls.append(self.name)
        raise RuntimeError("boom")


@pytest.fixture
def tree(parse_tree, minimal_document):
    return parse_tree(minimal_document)


class TestRegistration:
    """Test registering validators."""

    def test_register_and_get(self):
        """Registered validators are retrievable by name."""
        registry = ValidationRegistry()
        validator = RecordingValidator('first', [])
        registry.register_validator(validator, priority=5)

        assert registry.get_validator('first') is validator
        assert registry.list_validators() == [ValidatorInfo('first', 'structural', True, 5)]

    def test_replace(self):
        """Registering the same name twice replaces the first."""
        registry = ValidationRegistry()
        registry.register_validator(RecordingValidator('first', []))
        replacement = RecordingValidator('first', [])
        registry.register_validator(replacement)

        assert registry.get_validator('first') is replacement
        assert len(registry.list_validators()) == 1

    def test_unregister(self):
        """Unregistered validators are gone; unknown names are ignored."""
        registry = ValidationRegistry()
        registry.register_validator(RecordingValidator('first', []))
        registry.unregister_validator('first')
        registry.unregister_validator('missing')

        assert registry.get_validator('first') is None
        assert registry.list_validators() == []


class TestRun:
    """Test running validators."""

    def test_priority_order(self, tree):
        """Lower priority runs first regardless of registration order."""
        calls = []
        registry = ValidationRegistry()
        registry.register_validator(RecordingValidator('late', calls), priority=50)
        registry.register_validator(RecordingValidator('early', calls), priority=10)

        run = registry.run(tree, EntitySize.MICRO)

        assert calls == ['early', 'late']
        assert [info.name for info, _ in run.results] == ['early', 'late']

    def test_failure_isolated(self, tree):
        """A raising pass becomes VALIDATION_EXCEPTION; later passes still run."""
        calls = []
        registry = ValidationRegistry()
        registry.register_validator(FailingValidator('broken', calls), priority=10)
        registry.register_validator(RecordingValidator('healthy', calls), priority=20)

        run = registry.run(tree, EntitySize.MICRO)

        assert calls == ['broken', 'healthy']
        assert [d.code for d in run.failures] == ['VALIDATION_EXCEPTION']
        assert run.failures[0].element == 'broken'
        assert 'boom' in run.failures[0].message
        assert [info.name for info, _ in run.results] == ['healthy']

    def test_disabled_skipped(self, tree):
        """Disabled validators do not run."""
        calls = []
        registry = ValidationRegistry()
        registry.register_validator(RecordingValidator('off', calls), enabled=False)
        registry.register_validator(RecordingValidator('on', calls))

        registry.run(tree, EntitySize.MICRO)

        assert calls == ['on']

    def test_category_split(self, tree):
        """Diagnostics can be split by pass category."""
        registry = ValidationRegistry()
        registry.register_validator(RecordingValidator('shape', [], category='structural'), priority=1)
        registry.register_validator(RecordingValidator('text', [], category='content'), priority=2)

        run = registry.run(tree, EntitySize.MICRO)

        assert [d.code for d in run.diagnostics_for('content')] == ['TEXT']
        assert [d.code for d in run.diagnostics_excluding('content')] == ['SHAPE']

    def test_empty_run(self):
        """A fresh run holds nothing."""
        run = RegistryRun()
        assert run.results == []
        assert run.failures == []


class TestDefaultRegistry:
    """Test the standard pass set."""

    def test_all_passes_in_order(self):
        """Every standard pass is registered in pipeline order."""
        names = [info.name for info in create_default_registry().list_validators()]
        assert names == [
            'structural',
            'contexts_units',
            'completeness',
            'cross_reference',
            'fact_values',
            'qnames',
            'disclosures',
            'placeholders',
        ]

    def test_only_placeholders_are_content(self):
        """The placeholder detector is the only content pass."""
        infos = create_default_registry().list_validators()
        assert [i.name for i in infos if i.category == 'content'] == ['placeholders']

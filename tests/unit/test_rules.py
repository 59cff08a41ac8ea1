# Path: tests/unit/test_rules.py
"""
Unit Tests for Required Element Rules

Tests YAML loading, schema validation and effective requirement sets.
"""

import pytest
from pydantic import ValidationError

from ixbrl_validator.models.validation import EntitySize
from ixbrl_validator.validation.rules import (
    RULES_FILE,
    RequiredElementRules,
    default_rules,
    load_rules,
    required_elements_for,
    rule_table,
)


def _names(elements):
    return [e.name for e in elements]


class TestPackagedRules:
    """Test the packaged rule file."""

    def test_file_shipped(self):
        """Rule file lives beside the module."""
        assert RULES_FILE.exists()

    def test_default_rules_cached(self):
        """Rules are loaded once."""
        assert default_rules() is default_rules()

    def test_common_elements(self):
        """Every size requires turnover and employees."""
        for size in EntitySize:
            names = _names(required_elements_for(size))
            assert 'uk-gaap:Turnover' in names
            assert 'uk-bus:AverageNumberEmployeesDuringPeriod' in names

    def test_micro_has_no_extra_requirements(self):
        """Micro adds nothing beyond the common entries."""
        assert _names(required_elements_for(EntitySize.MICRO)) == [
            'uk-gaap:Turnover',
            'uk-bus:AverageNumberEmployeesDuringPeriod',
        ]

    def test_monotonic_by_size(self):
        """Requirements only grow from micro to large."""
        previous = set()
        for size in (EntitySize.MICRO, EntitySize.SMALL, EntitySize.MEDIUM, EntitySize.LARGE):
            current = set(_names(required_elements_for(size)))
            assert previous <= current
            previous = current

    def test_string_size(self):
        """Size strings are coerced."""
        assert required_elements_for('small') == required_elements_for(EntitySize.SMALL)

    def test_unknown_size_rejected(self):
        """Unknown sizes raise ValueError."""
        with pytest.raises(ValueError):
            required_elements_for('huge')


class TestRuleTable:
    """Test the read-only size map."""

    def test_every_size_present(self):
        """One entry per size."""
        assert set(rule_table()) == set(EntitySize)

    def test_immutable(self):
        """The map cannot be modified."""
        table = rule_table()
        with pytest.raises(TypeError):
            table[EntitySize.MICRO] = ()

    def test_models_frozen(self):
        """Rule models cannot be modified."""
        element = required_elements_for(EntitySize.MICRO)[0]
        with pytest.raises(ValidationError):
            element.name = 'uk-gaap:Other'


class TestLoadRules:
    """Test loading rule files."""

    def test_load_custom_file(self, tmp_path):
        """A custom file is validated into models."""
        path = tmp_path / 'rules.yaml'
        path.write_text(
            'all:\n'
            '  - name: uk-gaap:Turnover\n'
            '    description: Turnover\n'
            'large:\n'
            '  - name: uk-gaap:Turnover\n'
            '    description: Turnover again\n'
            '  - name: uk-bus:NameEntityOfficer\n'
            '    description: Director names\n',
            encoding='utf-8',
        )
        rules = load_rules(path)

        assert _names(rules.all_entities) == ['uk-gaap:Turnover']
        assert rules.micro == ()
        assert _names(required_elements_for(EntitySize.LARGE, rules)) == [
            'uk-gaap:Turnover',
            'uk-bus:NameEntityOfficer',
        ]

    def test_empty_file(self, tmp_path):
        """An empty file is rejected."""
        path = tmp_path / 'empty.yaml'
        path.write_text('', encoding='utf-8')
        with pytest.raises(ValueError):
            load_rules(path)

    def test_unprefixed_name_rejected(self):
        """Element names must be prefixed QNames."""
        with pytest.raises(ValidationError):
            RequiredElementRules.model_validate({
                'all': [{'name': 'Turnover', 'description': 'Turnover'}],
            })

    def test_empty_description_rejected(self):
        """Descriptions are required."""
        with pytest.raises(ValidationError):
            RequiredElementRules.model_validate({
                'all': [{'name': 'uk-gaap:Turnover', 'description': ''}],
            })

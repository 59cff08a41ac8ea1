# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for ixbrl_validator

Provides a configurable iXBRL document builder and common fixtures used
across all test modules.
"""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from ixbrl_validator.constants import REQUIRED_NAMESPACES


# ==============================================================================
# DOCUMENT BUILDING BLOCKS
# ==============================================================================

XHTML_NS = 'http://www.w3.org/1999/xhtml'
ISO4217_NS = 'http://www.xbrl.org/2003/iso4217'

FRC_SCHEMA_HREF = 'https://xbrl.frc.org.uk/FRS-102/2025-01-01/FRS-102-2025-01-01.xsd'

DURATION_CONTEXT = """
      <xbrli:context id="ctx1">
        <xbrli:entity>
          <xbrli:identifier scheme="http://www.companieshouse.gov.uk/">01234567</xbrli:identifier>
        </xbrli:entity>
        <xbrli:period>
          <xbrli:startDate>2023-01-01</xbrli:startDate>
          <xbrli:endDate>2023-12-31</xbrli:endDate>
        </xbrli:period>
      </xbrli:context>"""

GBP_UNIT = """
      <xbrli:unit id="GBP">
        <xbrli:measure>iso4217:GBP</xbrli:measure>
      </xbrli:unit>"""

PURE_UNIT = """
      <xbrli:unit id="pure">
        <xbrli:measure>xbrli:pure</xbrli:measure>
      </xbrli:unit>"""

TURNOVER_FACT = (
    '<p>Turnover: <ix:nonFraction name="uk-gaap:Turnover" contextRef="ctx1" '
    'unitRef="GBP" decimals="0">125,000</ix:nonFraction></p>'
)

EMPLOYEES_FACT = (
    '<p>Average employees: <ix:nonFraction name="uk-bus:AverageNumberEmployeesDuringPeriod" '
    'contextRef="ctx1" unitRef="pure" decimals="0">4</ix:nonFraction></p>'
)

PRINCIPAL_ACTIVITIES_FACT = (
    '<p><ix:nonNumeric name="uk-bus:DescriptionPrincipalActivities" contextRef="ctx1">'
    'Wholesale of garden furniture</ix:nonNumeric></p>'
)

DIRECTOR_NAME_FACT = (
    '<p>Director: <ix:nonNumeric name="uk-bus:NameEntityOfficer" contextRef="ctx1">'
    'Jane Smith</ix:nonNumeric></p>'
)


def build_document(
    body: str = TURNOVER_FACT + EMPLOYEES_FACT,
    contexts: str = DURATION_CONTEXT,
    units: str = GBP_UNIT + PURE_UNIT,
    namespaces: dict = None,
    header: bool = True,
    schema_ref: bool = True,
    schema_href: str = FRC_SCHEMA_HREF,
) -> str:
    """
    Build an iXBRL document.

    Defaults produce a minimal, valid micro-entity filing.

    Args:
        body: Visible content (facts)
        contexts: Markup placed in ix:resources before the units
        units: Unit markup placed in ix:resources
        namespaces: prefix -> URI declared on the root (default: all required)
        header: Whether to emit ix:header
        schema_ref: Whether to emit link:schemaRef inside the header
        schema_href: xlink:href of the schema reference
    """
    if namespaces is None:
        namespaces = dict(REQUIRED_NAMESPACES)

    declarations = ' '.join(f'xmlns:{prefix}="{uri}"' for prefix, uri in namespaces.items())

    references = ''
    if schema_ref:
        references = (
            '<ix:references>'
            f'<link:schemaRef xlink:type="simple" xlink:href="{schema_href}"/>'
            '</ix:references>'
        )

    hidden = ''
    if header:
        hidden = (
            '<div style="display:none"><ix:header>'
            f'{references}'
            f'<ix:resources>{contexts}{units}\n    </ix:resources>'
            '</ix:header></div>'
        )

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<html xmlns="{XHTML_NS}" xmlns:iso4217="{ISO4217_NS}" {declarations}>\n'
        '<head><title>Acme Trading Limited - Annual Accounts</title></head>\n'
        f'<body>\n{hidden}\n{body}\n</body>\n'
        '</html>\n'
    )


# ==============================================================================
# FIXTURES
# ==============================================================================

@pytest.fixture
def document_factory():
    """Provide the document builder."""
    return build_document


@pytest.fixture
def minimal_document():
    """Minimal valid micro-entity document."""
    return build_document()


@pytest.fixture
def small_entity_document():
    """Valid small-entity document (directors' report disclosures included)."""
    return build_document(
        body=TURNOVER_FACT + EMPLOYEES_FACT + PRINCIPAL_ACTIVITIES_FACT + DIRECTOR_NAME_FACT
    )


@pytest.fixture
def parse_tree():
    """Provide a helper parsing markup into a DocumentTree."""
    from ixbrl_validator.parser import parse_document

    def _parse(markup: str):
        outcome = parse_document(markup)
        assert outcome.tree is not None, outcome.diagnostics
        return outcome.tree

    return _parse


@pytest.fixture
def fact_markup():
    """Provide snippets of common facts."""
    return {
        'turnover': TURNOVER_FACT,
        'employees': EMPLOYEES_FACT,
        'principal_activities': PRINCIPAL_ACTIVITIES_FACT,
        'director_name': DIRECTOR_NAME_FACT,
        'context': DURATION_CONTEXT,
        'gbp_unit': GBP_UNIT,
        'pure_unit': PURE_UNIT,
    }


@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'IXBRL_VALIDATOR_ENVIRONMENT': 'test',
        'IXBRL_VALIDATOR_DEBUG': 'true',
        'IXBRL_VALIDATOR_LOG_LEVEL': 'debug',
        'IXBRL_VALIDATOR_LOG_DIR': '/tmp/ixbrl_validator_test/logs',
        'IXBRL_VALIDATOR_LOG_CONSOLE': 'yes',
        'IXBRL_VALIDATOR_MAX_WORKERS': '8',
        'IXBRL_VALIDATOR_BATCH_TIMEOUT': '2.5',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from ixbrl_validator.core.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False

# Path: ixbrl_validator/constants.py
"""
iXBRL Constants

Central repository for iXBRL-specific constants used across the package:
namespaces, qualified tag names, taxonomy publisher markers and the
date format accepted in contexts and date-bearing facts.

Based on:
- XBRL 2.1 Specification
- Inline XBRL 1.1 (2013) Specification
- FRC 2025 taxonomy suite (Companies House filings)
"""

import re

# ==============================================================================
# XBRL NAMESPACES - STANDARD
# ==============================================================================

# Inline XBRL 1.1 (2013 recommendation)
IX_NS = 'http://www.xbrl.org/2013/inlineXBRL'

# XBRL Instance namespace
XBRLI_NS = 'http://www.xbrl.org/2003/instance'

# XBRL Linkbase namespace
LINK_NS = 'http://www.xbrl.org/2003/linkbase'

# XLink namespace
XLINK_NS = 'http://www.w3.org/1999/xlink'

# XML namespace (implicitly bound to the 'xml' prefix)
XML_NS = 'http://www.w3.org/XML/1998/namespace'

# ==============================================================================
# FRC 2025 TAXONOMY NAMESPACES
# ==============================================================================

UK_GAAP_NS = 'https://xbrl.frc.org.uk/frs/2025-01-01/frs-2025-01-01.xsd'
UK_CORE_NS = 'https://xbrl.frc.org.uk/core/2025-01-01/core-2025-01-01.xsd'
UK_BUS_NS = 'https://xbrl.frc.org.uk/cd/2025-01-01/business/bus-2025-01-01.xsd'

# Prefix -> URI every filing must declare on its root element
REQUIRED_NAMESPACES: dict[str, str] = {
    'ix': IX_NS,
    'xbrli': XBRLI_NS,
    'link': LINK_NS,
    'xlink': XLINK_NS,
    'uk-gaap': UK_GAAP_NS,
    'uk-core': UK_CORE_NS,
    'uk-bus': UK_BUS_NS,
}

# ==============================================================================
# TAXONOMY PUBLISHER
# ==============================================================================

# Host that schemaRef targets must point at
FRC_TAXONOMY_HOST = 'xbrl.frc.org.uk'

# Prefix shared by all FRC taxonomy element names
FRC_NAME_PREFIX = 'uk-'

# ==============================================================================
# QUALIFIED TAG NAMES
# ==============================================================================

IX_HEADER = 'ix:header'
IX_NON_FRACTION = 'ix:nonFraction'
IX_NON_NUMERIC = 'ix:nonNumeric'

XBRL_CONTEXT = 'xbrli:context'
XBRL_ENTITY = 'xbrli:entity'
XBRL_IDENTIFIER = 'xbrli:identifier'
XBRL_PERIOD = 'xbrli:period'
XBRL_INSTANT = 'xbrli:instant'
XBRL_START_DATE = 'xbrli:startDate'
XBRL_END_DATE = 'xbrli:endDate'
XBRL_UNIT = 'xbrli:unit'
XBRL_MEASURE = 'xbrli:measure'

LINK_SCHEMA_REF = 'link:schemaRef'

# ==============================================================================
# ATTRIBUTE NAMES
# ==============================================================================

ATTR_ID = 'id'
ATTR_NAME = 'name'
ATTR_CONTEXT_REF = 'contextRef'
ATTR_UNIT_REF = 'unitRef'
ATTR_DECIMALS = 'decimals'
ATTR_SIGN = 'sign'
ATTR_XLINK_HREF = 'xlink:href'

XMLNS_ATTR = 'xmlns'
XMLNS_PREFIX = 'xmlns:'

# ==============================================================================
# DATE FORMAT
# ==============================================================================

# Strict ISO 8601 calendar date, no time or offset
ISO_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')
ISO_DATE_FORMAT = '%Y-%m-%d'


__all__ = [
    'IX_NS', 'XBRLI_NS', 'LINK_NS', 'XLINK_NS', 'XML_NS',
    'UK_GAAP_NS', 'UK_CORE_NS', 'UK_BUS_NS',
    'REQUIRED_NAMESPACES',
    'FRC_TAXONOMY_HOST', 'FRC_NAME_PREFIX',
    'IX_HEADER', 'IX_NON_FRACTION', 'IX_NON_NUMERIC',
    'XBRL_CONTEXT', 'XBRL_ENTITY', 'XBRL_IDENTIFIER', 'XBRL_PERIOD',
    'XBRL_INSTANT', 'XBRL_START_DATE', 'XBRL_END_DATE',
    'XBRL_UNIT', 'XBRL_MEASURE', 'LINK_SCHEMA_REF',
    'ATTR_ID', 'ATTR_NAME', 'ATTR_CONTEXT_REF', 'ATTR_UNIT_REF',
    'ATTR_DECIMALS', 'ATTR_SIGN', 'ATTR_XLINK_HREF',
    'XMLNS_ATTR', 'XMLNS_PREFIX',
    'ISO_DATE_PATTERN', 'ISO_DATE_FORMAT',
]

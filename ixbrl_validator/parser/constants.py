# Path: ixbrl_validator/parser/constants.py
"""
Document Parser Constants

Diagnostic codes and messages raised while turning markup text into a
document tree.
"""

import re

# ==============================================================================
# PARSER DIAGNOSTIC CODES
# ==============================================================================

# Fatal: markup is not well-formed, no tree produced
ERR_XML_PARSE_ERROR = "XML_PARSE_ERROR"

# Fatal: empty input or no root element
ERR_XML_INVALID_STRUCTURE = "XML_INVALID_STRUCTURE"

# Fatal: parser raised unexpectedly
ERR_XML_PARSE_EXCEPTION = "XML_PARSE_EXCEPTION"

# Blocking but recoverable (e.g. undeclared namespace prefix)
ERR_XML_PARSE_WARNING = "XML_PARSE_WARNING"

# ==============================================================================
# PARSER MESSAGES
# ==============================================================================

MSG_XML_PARSE_ERROR = "XML parsing error: {detail}"
MSG_EMPTY_DOCUMENT = "Document is empty"
MSG_NO_ROOT_ELEMENT = "Invalid XML structure - no root element found"
MSG_XML_PARSE_EXCEPTION = "Failed to parse XML: {detail}"
MSG_XML_PARSE_WARNING = "XML parser reported: {detail}"

# ==============================================================================
# PARSER SETTINGS
# ==============================================================================

# Encoding used when the document arrives as text
DEFAULT_DOCUMENT_ENCODING = 'utf-8'

# Prefix lxml never reports for the implicit XML namespace
XML_PREFIX = 'xml'

# Leading <?xml ...?> declaration; dropped from text input, which is
# already decoded, so its encoding pseudo-attribute no longer applies
XML_DECLARATION = re.compile(r'^(\s*)<\?xml[^>]*\?>')

# Named character reference, e.g. &nbsp; or &pound;
ENTITY_REFERENCE = re.compile(rb'&([A-Za-z][A-Za-z0-9]*);')

# Entities XML defines itself; never rewritten
XML_PREDEFINED_ENTITIES = frozenset({b'amp', b'lt', b'gt', b'quot', b'apos'})


__all__ = [
    'ERR_XML_PARSE_ERROR',
    'ERR_XML_INVALID_STRUCTURE',
    'ERR_XML_PARSE_EXCEPTION',
    'ERR_XML_PARSE_WARNING',
    'MSG_XML_PARSE_ERROR',
    'MSG_EMPTY_DOCUMENT',
    'MSG_NO_ROOT_ELEMENT',
    'MSG_XML_PARSE_EXCEPTION',
    'MSG_XML_PARSE_WARNING',
    'DEFAULT_DOCUMENT_ENCODING',
    'XML_PREFIX',
    'XML_DECLARATION',
    'ENTITY_REFERENCE',
    'XML_PREDEFINED_ENTITIES',
]

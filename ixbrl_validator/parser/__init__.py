# Path: ixbrl_validator/parser/__init__.py
"""
Document parser: markup text -> DocumentTree.
"""

from .document_parser import ParseOutcome, DocumentParser, parse_document

__all__ = ['ParseOutcome', 'DocumentParser', 'parse_document']

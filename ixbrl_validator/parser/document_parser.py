# Path: ixbrl_validator/parser/document_parser.py
"""
Document Parser

Turns raw iXBRL markup into an immutable DocumentTree.

This module handles:
- XML parsing with lxml (recovery mode, no network, no entity expansion)
- HTML named entities rewritten as numeric references before parsing;
  the XML declaration of already-decoded text input is dropped
- Fatal vs recoverable parser message classification
- Conversion of lxml elements into Node objects with prefixed tag and
  attribute names, surfaced namespace declarations and source lines

A fatal outcome (malformed markup, empty document, no root element)
carries no tree; the caller must stop there.

Example:
    parser = DocumentParser()
    outcome = parser.parse(markup)

    if outcome.is_fatal:
        for diagnostic in outcome.diagnostics:
            print(diagnostic)
    else:
        tree = outcome.tree
"""

from dataclasses import dataclass, field, replace
from html.entities import name2codepoint
from types import MappingProxyType
from typing import Optional, Union

from lxml import etree

from ..core.config_loader import ConfigLoader
from ..core.logger import get_input_logger
from ..constants import XML_NS, XMLNS_ATTR, XMLNS_PREFIX
from ..models.document import Node, DocumentTree
from ..models.error import Diagnostic, Severity
from ..parser.constants import (
    ERR_XML_PARSE_ERROR,
    ERR_XML_INVALID_STRUCTURE,
    ERR_XML_PARSE_EXCEPTION,
    ERR_XML_PARSE_WARNING,
    MSG_XML_PARSE_ERROR,
    MSG_EMPTY_DOCUMENT,
    MSG_NO_ROOT_ELEMENT,
    MSG_XML_PARSE_EXCEPTION,
    MSG_XML_PARSE_WARNING,
    DEFAULT_DOCUMENT_ENCODING,
    XML_PREFIX,
    XML_DECLARATION,
    ENTITY_REFERENCE,
    XML_PREDEFINED_ENTITIES,
)


@dataclass
class ParseOutcome:
    """
    Result of parsing one document.

    Attributes:
        tree: Parsed tree, None when parsing failed
        diagnostics: Parser diagnostics (fatal or recoverable)
    """
    tree: Optional[DocumentTree] = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def is_fatal(self) -> bool:
        """Whether no usable tree was produced."""
        return self.tree is None


class DocumentParser:
    """
    Parses iXBRL markup into a DocumentTree.

    Stateless apart from configuration and logger; a single instance may
    be shared between threads since each parse builds its own lxml parser.

    Example:
        parser = DocumentParser()
        outcome = parser.parse('<html xmlns:ix="...">...</html>')
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize document parser.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = get_input_logger('document_parser')

    def parse(self, document: Union[str, bytes]) -> ParseOutcome:
        """
        Parse markup text.

        Args:
            document: Markup as text or raw bytes

        Returns:
            ParseOutcome with tree or fatal diagnostics
        """
        if isinstance(document, str):
            text = XML_DECLARATION.sub(r'\1', document, count=1)
            data = text.encode(DEFAULT_DOCUMENT_ENCODING)
        else:
            data = document or b''

        if not data.strip():
            self.logger.warning("Rejected empty document")
            return ParseOutcome(diagnostics=[
                self._fatal(ERR_XML_INVALID_STRUCTURE, MSG_EMPTY_DOCUMENT)
            ])

        data = self._expand_html_entities(data)
        parser = self._create_parser()

        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            self.logger.warning(f"XML syntax error: {e}")
            return ParseOutcome(diagnostics=self._fatal_from_log(parser, str(e)))
        except Exception as e:
            self.logger.error(f"Parser failed unexpectedly: {e}", exc_info=True)
            return ParseOutcome(diagnostics=[
                self._fatal(ERR_XML_PARSE_EXCEPTION, MSG_XML_PARSE_EXCEPTION.format(detail=e))
            ])

        fatal_entries = [
            entry for entry in parser.error_log
            if entry.level == etree.ErrorLevels.FATAL
        ]
        if fatal_entries:
            self.logger.warning(f"Document is not well-formed: {len(fatal_entries)} fatal error(s)")
            return ParseOutcome(diagnostics=[
                self._fatal(
                    ERR_XML_PARSE_ERROR,
                    MSG_XML_PARSE_ERROR.format(detail=entry.message),
                    line=entry.line,
                    location=f"line {entry.line}, column {entry.column}",
                )
                for entry in fatal_entries
            ])

        if root is None:
            self.logger.warning("Parser returned no root element")
            return ParseOutcome(diagnostics=[
                self._fatal(ERR_XML_INVALID_STRUCTURE, MSG_NO_ROOT_ELEMENT)
            ])

        diagnostics = [
            Diagnostic(
                code=ERR_XML_PARSE_WARNING,
                message=MSG_XML_PARSE_WARNING.format(detail=entry.message),
                severity=Severity.ERROR,
                location=f"line {entry.line}, column {entry.column}",
                line=entry.line,
            )
            for entry in parser.error_log
        ]

        tree = DocumentTree(self._convert(root, parent_nsmap={}))
        self.logger.info(
            f"Parsed document: root={tree.root.tag}, "
            f"{len(diagnostics)} recoverable parser issue(s)"
        )
        return ParseOutcome(tree=tree, diagnostics=diagnostics)

    # ==========================================================================
    # PRE-PARSE NORMALIZATION
    # ==========================================================================

    def _expand_html_entities(self, data: bytes) -> bytes:
        """
        Rewrite HTML named entities (&nbsp;, &pound;) as numeric references.

        XML only knows its five predefined entities; filings written as
        HTML routinely use the rest. Unknown names are left for lxml to
        report.
        """
        rewritten = 0

        def _numeric(match) -> bytes:
            nonlocal rewritten
            name = match.group(1)
            if name in XML_PREDEFINED_ENTITIES:
                return match.group(0)
            codepoint = name2codepoint.get(name.decode('ascii'))
            if codepoint is None:
                return match.group(0)
            rewritten += 1
            return b'&#%d;' % codepoint

        data = ENTITY_REFERENCE.sub(_numeric, data)
        if rewritten:
            self.logger.debug(f"Rewrote {rewritten} HTML entity reference(s)")
        return data

    # ==========================================================================
    # LXML -> NODE CONVERSION
    # ==========================================================================

    def _create_parser(self) -> etree.XMLParser:
        """Build a fresh, locked-down lxml parser."""
        return etree.XMLParser(
            recover=True,
            resolve_entities=False,
            no_network=True,
            remove_blank_text=False,
        )

    def _convert(self, element: etree._Element, parent_nsmap: dict) -> Node:
        """
        Convert an lxml element (and its subtree) into a Node.

        Args:
            element: lxml element
            parent_nsmap: Namespace map in scope at the parent

        Returns:
            Node for this element
        """
        nsmap = dict(element.nsmap)
        attributes: dict[str, str] = {}

        for prefix, uri in nsmap.items():
            if prefix not in parent_nsmap or parent_nsmap[prefix] != uri:
                key = XMLNS_ATTR if prefix is None else XMLNS_PREFIX + prefix
                attributes[key] = uri

        for key, value in element.attrib.items():
            attributes[self._qualify_attribute(key, nsmap)] = value

        text = element.text or ''
        children: list[Node] = []

        for child in element:
            if not isinstance(child.tag, str):
                # Comments, processing instructions, entity references
                if child.tail:
                    if children:
                        children[-1] = replace(children[-1], tail=children[-1].tail + child.tail)
                    else:
                        text += child.tail
                continue
            children.append(self._convert(child, nsmap))

        return Node(
            tag=self._qualify_tag(element),
            attributes=MappingProxyType(attributes),
            children=tuple(children),
            text=text,
            tail=element.tail or '',
            line=element.sourceline,
        )

    @staticmethod
    def _local_name(clark: str) -> tuple[Optional[str], str]:
        """Split '{uri}local' into (uri, local); plain names have no uri."""
        if clark.startswith('{'):
            uri, local = clark[1:].split('}', 1)
            return uri, local
        return None, clark

    def _qualify_tag(self, element: etree._Element) -> str:
        """Tag name as written: 'prefix:local' or 'local'."""
        _, local = self._local_name(element.tag)
        if element.prefix:
            return f"{element.prefix}:{local}"
        return local

    def _qualify_attribute(self, key: str, nsmap: dict) -> str:
        """Attribute name as written: 'prefix:local' or 'local'."""
        uri, local = self._local_name(key)
        if uri is None:
            return local
        if uri == XML_NS:
            return f"{XML_PREFIX}:{local}"
        for prefix, candidate in nsmap.items():
            if prefix is not None and candidate == uri:
                return f"{prefix}:{local}"
        return local

    @staticmethod
    def _fatal(code: str, message: str, **kwargs) -> Diagnostic:
        return Diagnostic(code=code, message=message, severity=Severity.FATAL, **kwargs)

    def _fatal_from_log(self, parser: etree.XMLParser, detail: str) -> list[Diagnostic]:
        """Fatal diagnostics from the parser's error log, or the exception text."""
        entries = list(parser.error_log)
        if not entries:
            return [self._fatal(ERR_XML_PARSE_ERROR, MSG_XML_PARSE_ERROR.format(detail=detail))]
        return [
            self._fatal(
                ERR_XML_PARSE_ERROR,
                MSG_XML_PARSE_ERROR.format(detail=entry.message),
                line=entry.line,
                location=f"line {entry.line}, column {entry.column}",
            )
            for entry in entries
        ]


def parse_document(
    document: Union[str, bytes],
    config: Optional[ConfigLoader] = None
) -> ParseOutcome:
    """
    Parse markup text with a default DocumentParser.

    Args:
        document: Markup as text or raw bytes
        config: Optional configuration loader

    Returns:
        ParseOutcome
    """
    return DocumentParser(config).parse(document)


__all__ = ['ParseOutcome', 'DocumentParser', 'parse_document']

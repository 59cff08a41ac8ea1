# Path: ixbrl_validator/validation/structural.py
"""
Structural Validator

Validates document-level iXBRL structure.

This module validates:
- Required namespace declarations on the root element (prefix and URI)
- Presence and uniqueness of the ix:header element
- Taxonomy schema reference inside the header (presence and publisher)

Example:
    validator = StructuralValidator()
    diagnostics = validator.validate(tree, EntitySize.MICRO)

    for diagnostic in diagnostics:
        print(f"{diagnostic.code}: {diagnostic.message}")
"""

from typing import Optional, Mapping

from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..constants import (
    REQUIRED_NAMESPACES,
    FRC_TAXONOMY_HOST,
    IX_HEADER,
    LINK_SCHEMA_REF,
    ATTR_XLINK_HREF,
    XMLNS_PREFIX,
)
from ..models.document import DocumentTree
from ..models.error import Diagnostic, DiagnosticCollection
from ..models.validation import EntitySize
from ..validation.registry import BaseValidator
from ..validation.constants import (
    VALIDATOR_STRUCTURAL,
    CATEGORY_STRUCTURAL,
    ERR_MISSING_NAMESPACE,
    ERR_INCORRECT_NAMESPACE_URI,
    ERR_MISSING_IX_HEADER,
    ERR_MULTIPLE_IX_HEADERS,
    ERR_MISSING_SCHEMA_REF,
    ERR_INVALID_SCHEMA_REF,
    MSG_MISSING_NAMESPACE,
    MSG_INCORRECT_NAMESPACE_URI,
    MSG_MISSING_IX_HEADER,
    MSG_MULTIPLE_IX_HEADERS,
    MSG_MISSING_SCHEMA_REF,
    MSG_INVALID_SCHEMA_REF,
)


class StructuralValidator(BaseValidator):
    """
    Validates iXBRL document structure.

    Checks the root namespace declarations against a fixed prefix -> URI
    table and the ix:header / link:schemaRef pair every filing needs.

    Example:
        validator = StructuralValidator()
        diagnostics = validator.validate(tree, EntitySize.SMALL)
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        required_namespaces: Optional[Mapping[str, str]] = None,
        taxonomy_host: str = FRC_TAXONOMY_HOST
    ):
        """
        Initialize structural validator.

        Args:
            config: Configuration loader
            required_namespaces: prefix -> URI table (default: FRC 2025 set)
            taxonomy_host: Substring schemaRef targets must contain
        """
        self.config = config or ConfigLoader()
        self.logger = get_process_logger('structural_validator')
        self.required_namespaces = dict(required_namespaces or REQUIRED_NAMESPACES)
        self.taxonomy_host = taxonomy_host

    def get_name(self) -> str:
        """Get validator name."""
        return VALIDATOR_STRUCTURAL

    def get_category(self) -> str:
        """Get validator category."""
        return CATEGORY_STRUCTURAL

    def validate(self, tree: DocumentTree, entity_size: EntitySize) -> list[Diagnostic]:
        """
        Validate document structure.

        Args:
            tree: Parsed document
            entity_size: Declared entity size (unused)

        Returns:
            list of structural diagnostics
        """
        results = DiagnosticCollection()

        self._validate_namespaces(tree, results)
        self._validate_header(tree, results)

        self.logger.info(f"Structural validation completed: {len(results)} issues")
        return results.diagnostics

    def _validate_namespaces(self, tree: DocumentTree, results: DiagnosticCollection) -> None:
        """Each required prefix must be declared on the root with the exact URI."""
        root = tree.root

        for prefix, expected in self.required_namespaces.items():
            attribute = XMLNS_PREFIX + prefix
            actual = root.get(attribute)

            if actual is None:
                results.error(
                    ERR_MISSING_NAMESPACE,
                    MSG_MISSING_NAMESPACE.format(prefix=prefix),
                    location=attribute,
                    element=root.tag,
                    line=root.line,
                )
            elif actual != expected:
                results.error(
                    ERR_INCORRECT_NAMESPACE_URI,
                    MSG_INCORRECT_NAMESPACE_URI.format(
                        prefix=prefix, expected=expected, actual=actual
                    ),
                    location=attribute,
                    element=root.tag,
                    value=actual,
                    line=root.line,
                )

    def _validate_header(self, tree: DocumentTree, results: DiagnosticCollection) -> None:
        """ix:header must exist once and carry an FRC schemaRef."""
        headers = list(tree.find_by_tag(IX_HEADER))

        if not headers:
            results.error(ERR_MISSING_IX_HEADER, MSG_MISSING_IX_HEADER, element=IX_HEADER)
            return

        if len(headers) > 1:
            results.error(
                ERR_MULTIPLE_IX_HEADERS,
                MSG_MULTIPLE_IX_HEADERS.format(count=len(headers)),
                element=IX_HEADER,
                line=headers[1].line,
            )

        header = headers[0]
        schema_ref = header.find_first(LINK_SCHEMA_REF)

        if schema_ref is None:
            results.error(
                ERR_MISSING_SCHEMA_REF,
                MSG_MISSING_SCHEMA_REF,
                element=LINK_SCHEMA_REF,
                line=header.line,
            )
            return

        href = schema_ref.get(ATTR_XLINK_HREF)
        if not href or self.taxonomy_host not in href:
            results.error(
                ERR_INVALID_SCHEMA_REF,
                MSG_INVALID_SCHEMA_REF.format(href=href or '(none)'),
                location=href,
                element=LINK_SCHEMA_REF,
                line=schema_ref.line,
            )


__all__ = ['StructuralValidator']

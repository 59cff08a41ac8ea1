# Path: ixbrl_validator/validator.py
"""
iXBRL Validator

Pipeline orchestrator: parse, run every validation pass, route the
diagnostics, compute statistics.

This module provides:
- IXBRLValidator: reusable pipeline (parser + pass registry)
- validate(): validate one document
- validate_batch(): validate independent documents in a thread pool

A fatal parse failure returns immediately with is_valid=False and zero
statistics; otherwise every pass runs to completion and the result
carries every diagnostic found.

Example:
    result = validate(markup, 'small')

    if not result.is_valid:
        for error in result.errors:
            print(f"[{error.code}] {error.message}")
"""

import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Iterable, Optional, Union

from .core.config_loader import ConfigLoader
from .core.logger import get_process_logger
from .models.error import Diagnostic, Severity
from .models.validation import EntitySize, ValidationResult, ValidationStatistics
from .output.statistics import gather_statistics
from .parser.document_parser import DocumentParser
from .validation import create_default_registry
from .validation.registry import ValidationRegistry
from .validation.constants import (
    CATEGORY_CONTENT,
    ERR_VALIDATION_EXCEPTION,
    ERR_VALIDATION_TIMEOUT,
    MSG_VALIDATION_EXCEPTION,
    MSG_VALIDATION_TIMEOUT,
)

Document = Union[str, bytes]


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


class IXBRLValidator:
    """
    Validates iXBRL documents.

    Holds no per-document state: one instance can validate any number of
    documents, from any number of threads.

    Example:
        validator = IXBRLValidator()
        result = validator.validate(markup, EntitySize.MICRO)
        print(result.statistics.total_facts)
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        registry: Optional[ValidationRegistry] = None
    ):
        """
        Initialize validator.

        Args:
            config: Configuration loader
            registry: Pass registry (default: every standard pass)
        """
        self.config = config or ConfigLoader()
        self.logger = get_process_logger('ixbrl_validator')
        self.parser = DocumentParser(self.config)
        self.registry = registry or create_default_registry(self.config)

    def validate(self, document: Document, entity_size: Union[EntitySize, str]) -> ValidationResult:
        """
        Validate one document.

        Args:
            document: iXBRL markup
            entity_size: Declared entity size

        Returns:
            ValidationResult

        Raises:
            ValueError: If entity_size is not a known size
        """
        entity_size = EntitySize.parse(entity_size)
        start = time.perf_counter()

        outcome = self.parser.parse(document)

        if outcome.is_fatal:
            self.logger.warning(
                f"Validation aborted: document could not be parsed "
                f"({len(outcome.diagnostics)} fatal issue(s))"
            )
            return ValidationResult(
                errors=list(outcome.diagnostics),
                statistics=ValidationStatistics(validation_time_ms=_elapsed_ms(start)),
                entity_size=entity_size,
            )

        run = self.registry.run(outcome.tree, entity_size)

        # Recoverable parser issues still block submission
        errors: list[Diagnostic] = list(outcome.diagnostics)
        warnings: list[Diagnostic] = []

        for diagnostic in run.diagnostics_excluding(CATEGORY_CONTENT):
            if diagnostic.severity == Severity.WARNING:
                warnings.append(diagnostic)
            else:
                errors.append(diagnostic)

        errors.extend(run.failures)
        placeholders = run.diagnostics_for(CATEGORY_CONTENT)

        result = ValidationResult(
            errors=errors,
            warnings=warnings,
            placeholders=placeholders,
            statistics=gather_statistics(outcome.tree, _elapsed_ms(start)),
            entity_size=entity_size,
        )

        self.logger.info(
            f"Validation completed ({entity_size}): valid={result.is_valid}, "
            f"{len(errors)} errors, {len(warnings)} warnings, "
            f"{len(placeholders)} placeholders in "
            f"{result.statistics.validation_time_ms:.1f}ms"
        )
        return result

    def validate_batch(
        self,
        documents: Iterable[Document],
        entity_size: Union[EntitySize, str],
        max_workers: Optional[int] = None,
        timeout: Optional[float] = None
    ) -> list[ValidationResult]:
        """
        Validate independent documents in parallel threads.

        Args:
            documents: Documents to validate
            entity_size: Declared entity size, shared by all documents
            max_workers: Thread count (default: config 'max_workers')
            timeout: Seconds the whole batch may take; documents still
                pending at the deadline get a VALIDATION_TIMEOUT result
                (default: config 'batch_timeout', 0 = no limit)

        Returns:
            list of results, in input order
        """
        entity_size = EntitySize.parse(entity_size)
        documents = list(documents)
        if not documents:
            return []

        if max_workers is None:
            max_workers = self.config.get('max_workers', 4)
        if timeout is None:
            timeout = self.config.get('batch_timeout', 0.0) or None

        self.logger.info(
            f"Validating batch of {len(documents)} documents "
            f"(workers={max_workers}, timeout={timeout})"
        )

        deadline = time.monotonic() + timeout if timeout else None
        executor = ThreadPoolExecutor(max_workers=max(1, max_workers))
        results: list[ValidationResult] = []

        try:
            futures = [
                executor.submit(self.validate, document, entity_size)
                for document in documents
            ]

            for index, future in enumerate(futures):
                remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
                try:
                    results.append(future.result(timeout=remaining))
                except FutureTimeoutError:
                    future.cancel()
                    self.logger.warning(f"Document {index} timed out after {timeout}s")
                    results.append(self._failed_result(
                        ERR_VALIDATION_TIMEOUT,
                        MSG_VALIDATION_TIMEOUT.format(timeout=timeout),
                        entity_size,
                    ))
                except Exception as e:
                    self.logger.error(f"Failed to validate document {index}: {e}", exc_info=True)
                    results.append(self._failed_result(
                        ERR_VALIDATION_EXCEPTION,
                        MSG_VALIDATION_EXCEPTION.format(validator='pipeline', detail=e),
                        entity_size,
                    ))
        finally:
            executor.shutdown(wait=deadline is None, cancel_futures=True)

        return results

    @staticmethod
    def _failed_result(code: str, message: str, entity_size: EntitySize) -> ValidationResult:
        return ValidationResult(
            errors=[Diagnostic(code=code, message=message, severity=Severity.ERROR)],
            entity_size=entity_size,
        )


def validate(document: Document, entity_size: Union[EntitySize, str]) -> ValidationResult:
    """
    Validate one iXBRL document.

    Args:
        document: iXBRL markup
        entity_size: Declared entity size ('micro', 'small', 'medium', 'large')

    Returns:
        ValidationResult
    """
    return IXBRLValidator().validate(document, entity_size)


def validate_batch(
    documents: Iterable[Document],
    entity_size: Union[EntitySize, str],
    max_workers: Optional[int] = None,
    timeout: Optional[float] = None
) -> list[ValidationResult]:
    """
    Validate independent documents in parallel threads.

    Args:
        documents: Documents to validate
        entity_size: Declared entity size, shared by all documents
        max_workers: Thread count
        timeout: Seconds the whole batch may take

    Returns:
        list of results, in input order
    """
    return IXBRLValidator().validate_batch(documents, entity_size, max_workers, timeout)


__all__ = ['IXBRLValidator', 'validate', 'validate_batch']

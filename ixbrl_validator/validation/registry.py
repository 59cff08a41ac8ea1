# Path: ixbrl_validator/validation/registry.py
"""
Validation Registry

Coordinates all validation passes over one parsed document.

This module provides:
- BaseValidator: contract every pass implements
- Validator registration with execution priority
- Isolated pass execution (one failing pass never stops the others)
- Per-pass result collection

Example:
    registry = ValidationRegistry()
    registry.register_validator(StructuralValidator(), priority=10)
    registry.register_validator(PlaceholderDetector(), priority=80)

    run = registry.run(tree, EntitySize.SMALL)
    for info, diagnostics in run.results:
        print(f"{info.name}: {len(diagnostics)} findings")
"""

from dataclasses import dataclass, field
from typing import Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..models.document import DocumentTree
from ..models.error import Diagnostic, Severity
from ..models.validation import EntitySize
from ..validation.constants import (
    ERR_VALIDATION_EXCEPTION,
    MSG_VALIDATION_EXCEPTION,
)


@dataclass
class ValidatorInfo:
    """
    Metadata about a registered validator.

    Attributes:
        name: Validator identifier
        category: Validation category
        enabled: Whether validator is enabled
        priority: Execution priority (lower runs first)
    """
    name: str
    category: str
    enabled: bool = True
    priority: int = 100


@dataclass
class RegistryRun:
    """
    Output of one registry run.

    Attributes:
        results: (validator info, diagnostics) per pass that completed,
            in execution order
        failures: VALIDATION_EXCEPTION errors for passes that raised
    """
    results: list[tuple[ValidatorInfo, list[Diagnostic]]] = field(default_factory=list)
    failures: list[Diagnostic] = field(default_factory=list)

    def diagnostics_for(self, category: str) -> list[Diagnostic]:
        """All diagnostics produced by passes of one category."""
        return [
            diagnostic
            for info, diagnostics in self.results if info.category == category
            for diagnostic in diagnostics
        ]

    def diagnostics_excluding(self, category: str) -> list[Diagnostic]:
        """All diagnostics produced by passes outside one category."""
        return [
            diagnostic
            for info, diagnostics in self.results if info.category != category
            for diagnostic in diagnostics
        ]


class BaseValidator:
    """
    Base class for all validation passes.

    A pass reads the tree, never mutates it, and returns its findings.
    All validators must inherit from this class and implement:
    - get_name()
    - get_category()
    - validate()
    """

    def get_name(self) -> str:
        """Get validator name."""
        raise NotImplementedError

    def get_category(self) -> str:
        """Get validator category."""
        raise NotImplementedError

    def validate(self, tree: DocumentTree, entity_size: EntitySize) -> list[Diagnostic]:
        """
        Validate a parsed document.

        Args:
            tree: Parsed document
            entity_size: Declared size tier of the filing entity

        Returns:
            list of diagnostics (empty if valid)
        """
        raise NotImplementedError


class ValidationRegistry:
    """
    Ordered set of validation passes keyed by pass name.

    Every pass sees the same tree. A pass that raises is logged and turned
    into a VALIDATION_EXCEPTION error; the passes after it still run.

    Example:
        registry = ValidationRegistry()
        registry.register_validator(ContextUnitValidator(), priority=20)
        run = registry.run(tree, EntitySize.MICRO)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = get_process_logger('validation_registry')

        # pass name -> (pass, metadata)
        self._entries: dict[str, tuple[BaseValidator, ValidatorInfo]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def register_validator(
        self,
        validator: BaseValidator,
        priority: int = 100,
        enabled: bool = True
    ) -> None:
        """
        Add a pass, or replace the pass already registered under its name.

        Args:
            validator: Pass instance
            priority: Execution order, lower first; ties keep insertion order
            enabled: Disabled passes stay registered but are skipped by run()
        """
        info = ValidatorInfo(
            name=validator.get_name(),
            category=validator.get_category(),
            enabled=enabled,
            priority=priority,
        )
        if info.name in self._entries:
            self.logger.warning(f"Replacing pass '{info.name}'")

        self._entries[info.name] = (validator, info)
        self.logger.debug(f"Pass '{info.name}' [{info.category}] at priority {priority}")

    def unregister_validator(self, validator_name: str) -> None:
        """Remove a pass by name. Unknown names are ignored."""
        if self._entries.pop(validator_name, None) is not None:
            self.logger.debug(f"Pass '{validator_name}' removed")

    def get_validator(self, validator_name: str) -> Optional[BaseValidator]:
        """Registered pass by name, or None."""
        entry = self._entries.get(validator_name)
        return entry[0] if entry else None

    def list_validators(self) -> list[ValidatorInfo]:
        """Metadata of every registered pass, in execution order."""
        return [info for _, info in self._ordered()]

    def _ordered(self) -> list[tuple[BaseValidator, ValidatorInfo]]:
        return sorted(self._entries.values(), key=lambda entry: entry[1].priority)

    def run(self, tree: DocumentTree, entity_size: EntitySize) -> RegistryRun:
        """
        Run every enabled pass over one document.

        Args:
            tree: Parsed document
            entity_size: Declared size tier of the filing entity

        Returns:
            RegistryRun with per-pass diagnostics and pass failures
        """
        run = RegistryRun()

        for validator, info in self._ordered():
            if info.enabled:
                self._run_one(validator, info, tree, entity_size, run)
            else:
                self.logger.debug(f"Pass '{info.name}' disabled")

        self.logger.info(
            f"{len(run.results)} passes completed, {len(run.failures)} failed"
        )
        return run

    def _run_one(
        self,
        validator: BaseValidator,
        info: ValidatorInfo,
        tree: DocumentTree,
        entity_size: EntitySize,
        run: RegistryRun
    ) -> None:
        try:
            diagnostics = validator.validate(tree, entity_size)
        except Exception as e:
            self.logger.error(f"Pass '{info.name}' raised: {e}", exc_info=True)
            run.failures.append(Diagnostic(
                code=ERR_VALIDATION_EXCEPTION,
                message=MSG_VALIDATION_EXCEPTION.format(validator=info.name, detail=e),
                severity=Severity.ERROR,
                element=info.name,
            ))
            return

        run.results.append((info, diagnostics))
        self.logger.debug(f"Pass '{info.name}': {len(diagnostics)} findings")


__all__ = [
    'ValidationRegistry',
    'BaseValidator',
    'ValidatorInfo',
    'RegistryRun',
]

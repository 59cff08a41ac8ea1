# Path: ixbrl_validator/output/report_generator.py
"""
Report Generator

Renders a ValidationResult as a plain-text report for operators and
logs. The report is a projection of the result: rendering never changes
the result, and the same result always renders to the same text.

Sections (empty lists are omitted):
- Status banner
- Document statistics
- Summary counts
- Errors (must fix)
- Critical placeholders (must fix)
- Warnings (recommended fixes)
- Potential issues (warning-level placeholders)
- Conclusion

Example:
    result = validate(markup, EntitySize.SMALL)
    print(render(result))
"""

from ..core.logger import get_output_logger
from ..models.error import Diagnostic
from ..models.validation import ValidationResult

LINE_WIDTH = 70
DIVIDER = '=' * LINE_WIDTH
SUB_DIVIDER = '-' * LINE_WIDTH

TITLE = "ENHANCED iXBRL VALIDATION REPORT"
STATUS_VALID = "VALID - Ready for submission"
STATUS_INVALID = "INVALID - Errors must be fixed"
CONCLUSION_PASSED = "VALIDATION PASSED - Ready for Companies House submission."
CONCLUSION_FAILED = "VALIDATION FAILED - Please fix all errors before attempting submission."


class TextReportGenerator:
    """Renders validation results as ASCII text."""

    def __init__(self):
        self.logger = get_output_logger('report_generator')

    def render(self, result: ValidationResult) -> str:
        """
        Render full report as text.

        Args:
            result: Validation result

        Returns:
            Multi-line report text
        """
        lines = []
        lines.append('')
        lines.append(DIVIDER)
        lines.append(f"  {TITLE}")
        lines.append(DIVIDER)
        lines.append(f"  Status: {STATUS_VALID if result.is_valid else STATUS_INVALID}")
        lines.append(f"  Entity size: {result.entity_size}")

        lines.extend(self._render_statistics(result))
        lines.extend(self._render_summary(result))

        lines.extend(self._render_diagnostics("ERRORS (Must Fix)", result.errors))
        lines.extend(self._render_placeholders(
            "PLACEHOLDERS DETECTED (Must Fix)", result.critical_placeholders
        ))
        lines.extend(self._render_diagnostics("WARNINGS (Recommended Fixes)", result.warnings))
        lines.extend(self._render_placeholders(
            "POTENTIAL ISSUES", result.warning_placeholders
        ))

        lines.append('')
        lines.append(DIVIDER)
        lines.append(f"  {CONCLUSION_PASSED if result.is_valid else CONCLUSION_FAILED}")
        lines.append(DIVIDER)
        lines.append('')

        self.logger.debug(
            f"Rendered report: {len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return '\n'.join(lines)

    def _render_statistics(self, result: ValidationResult) -> list[str]:
        stats = result.statistics
        rows = [
            ("Total Facts", f"{stats.total_facts}"),
            ("UK-Tagged Elements", f"{stats.tagged_elements}"),
            ("Contexts", f"{stats.contexts}"),
            ("Units", f"{stats.units}"),
            ("Namespaces", f"{stats.namespaces}"),
            ("Validation Time", f"{stats.validation_time_ms:.2f} ms"),
        ]
        lines = ['', "  DOCUMENT STATISTICS:", SUB_DIVIDER]
        lines.extend(f"    {label:25s}  {value}" for label, value in rows)
        return lines

    def _render_summary(self, result: ValidationResult) -> list[str]:
        return [
            '',
            "  SUMMARY:",
            SUB_DIVIDER,
            f"    Errors: {len(result.errors)}",
            f"    Warnings: {len(result.warnings)}",
            f"    Placeholders: {len(result.critical_placeholders)} critical, "
            f"{len(result.warning_placeholders)} warnings",
        ]

    def _render_diagnostics(self, title: str, diagnostics: list[Diagnostic]) -> list[str]:
        """Numbered [CODE] message list with element and location lines."""
        if not diagnostics:
            return []

        lines = ['', f"  {title}:", SUB_DIVIDER]
        for index, diagnostic in enumerate(diagnostics, start=1):
            lines.append(f"    {index}. [{diagnostic.code}] {diagnostic.message}")
            if diagnostic.element:
                lines.append(f"       Element: {diagnostic.element}")
            if diagnostic.location:
                lines.append(f"       Location: {diagnostic.location}")
        return lines

    def _render_placeholders(self, title: str, placeholders: list[Diagnostic]) -> list[str]:
        """Numbered [TYPE] message list with offending value and location."""
        if not placeholders:
            return []

        lines = ['', f"  {title}:", SUB_DIVIDER]
        for index, placeholder in enumerate(placeholders, start=1):
            lines.append(f"    {index}. [{placeholder.code.upper()}] {placeholder.message}")
            if placeholder.value is not None:
                lines.append(f"       Value: \"{placeholder.value}\"")
            if placeholder.location:
                lines.append(f"       Location: {placeholder.location}")
        return lines


def render(result: ValidationResult) -> str:
    """
    Render a validation result as a text report.

    Args:
        result: Validation result

    Returns:
        Report text
    """
    return TextReportGenerator().render(result)


__all__ = ['TextReportGenerator', 'render']

# Path: ixbrl_validator/models/context.py
"""
Context and Unit Models

XBRL context (entity + reporting period) and unit (measurement) models
built from the parsed tree by the context & unit validator.

A period is exactly one of:
- Instant: a point in time (balance sheet date)
- Duration: a start/end range (profit and loss period)

Dates are only ever created from strict ISO 'YYYY-MM-DD' text; anything
else is left unparsed so the validator can report it.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Union

from ..constants import ISO_DATE_PATTERN, ISO_DATE_FORMAT


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """
    Parse strict ISO 'YYYY-MM-DD' date.

    Rejects surrounding whitespace, times, offsets and impossible
    calendar dates (2023-02-30).

    Args:
        value: Raw date text

    Returns:
        date or None if the text is not a valid ISO date

    Example:
        parse_iso_date('2023-12-31')   # date(2023, 12, 31)
        parse_iso_date('31/12/2023')   # None
    """
    if value is None or not ISO_DATE_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except ValueError:
        return None


def is_valid_iso_date(value: Optional[str]) -> bool:
    """Check whether text is a strict, real ISO calendar date."""
    return parse_iso_date(value) is not None


@dataclass(frozen=True)
class Instant:
    """Point-in-time period."""
    date: date

    def __str__(self) -> str:
        return self.date.isoformat()


@dataclass(frozen=True)
class Duration:
    """Date-range period; end must be strictly after start."""
    start: date
    end: date

    @property
    def is_well_ordered(self) -> bool:
        return self.end > self.start

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


Period = Union[Instant, Duration]


@dataclass(frozen=True)
class Context:
    """
    Declared XBRL context.

    Attributes:
        id: Context identifier (None when the id attribute is missing)
        has_entity_identifier: Whether entity/identifier is present
        period: Parsed period, None when absent or malformed
        line: Source line of the context element
    """
    id: Optional[str]
    has_entity_identifier: bool = False
    period: Optional[Period] = None
    line: Optional[int] = None

    @property
    def is_instant(self) -> bool:
        return isinstance(self.period, Instant)

    @property
    def is_duration(self) -> bool:
        return isinstance(self.period, Duration)


@dataclass(frozen=True)
class Unit:
    """
    Declared XBRL unit.

    Attributes:
        id: Unit identifier (None when the id attribute is missing)
        measures: Measure values ('iso4217:GBP', 'xbrli:pure', ...)
        line: Source line of the unit element
    """
    id: Optional[str]
    measures: tuple[str, ...] = field(default_factory=tuple)
    line: Optional[int] = None

    @property
    def has_measure(self) -> bool:
        return len(self.measures) > 0


__all__ = [
    'parse_iso_date',
    'is_valid_iso_date',
    'Instant',
    'Duration',
    'Period',
    'Context',
    'Unit',
]

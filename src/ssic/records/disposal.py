"""Disposal date calculation.

Computes when a document becomes eligible for destruction or transfer:
first the cutoff date (when the retention clock starts), then the cutoff
plus the retention period.

"Not computable" is expressed as ``None``: permanent records, records
without a numeric retention period, and event-based cutoffs without an
event date never produce a date.
"""

import calendar
from datetime import UTC, date, datetime, timedelta

from pydantic import BaseModel, ConfigDict

from ssic.records.formatting import get_disposal_summary
from ssic.records.types import (
    EVENT_TRIGGERS,
    ClassificationRecord,
    CutoffTrigger,
    DisposalAction,
    RetentionUnit,
)

# Fiscal years run October 1 - September 30
FISCAL_YEAR_START_MONTH = 10
FISCAL_YEAR_END_MONTH = 9
FISCAL_YEAR_END_DAY = 30


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _add_months(start: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's end."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def calculate_cutoff_date(
    trigger: CutoffTrigger | str,
    record_date: date,
    event_date: date | None = None,
) -> date | None:
    """Calculate the date the retention period starts.

    Args:
        trigger: Cutoff trigger of the record
        record_date: Date the record was created
        event_date: Date of the closing event (case closure, separation,
            supersession); required for event triggers

    Returns:
        The cutoff date, or None if an event trigger has no event date
    """
    record_date = _as_date(record_date)

    match trigger:
        case CutoffTrigger.FISCAL_YEAR:
            year = record_date.year
            if record_date.month >= FISCAL_YEAR_START_MONTH:
                year += 1
            return date(year, FISCAL_YEAR_END_MONTH, FISCAL_YEAR_END_DAY)

        case CutoffTrigger.IMMEDIATE:
            return record_date

        case _ if trigger in EVENT_TRIGGERS:
            return _as_date(event_date) if event_date is not None else None

        case _:
            # CALENDAR_YEAR, and the fallback for UNSPECIFIED
            return date(record_date.year, 12, 31)


def add_retention_period(start: date, value: int, unit: RetentionUnit | str) -> date | None:
    """Add a retention period to a date.

    Years and months land on the same day of the target month, clamped to
    the month's last day (February 29 plus one year is February 28).

    Args:
        start: Date to count from
        value: Number of units
        unit: Retention unit

    Returns:
        The shifted date, or None for non-numeric units or a result past
        the last representable date
    """
    start = _as_date(start)

    try:
        match unit:
            case RetentionUnit.YEARS:
                return _add_months(start, value * 12)
            case RetentionUnit.MONTHS:
                return _add_months(start, value)
            case RetentionUnit.DAYS:
                return start + timedelta(days=value)
            case _:
                return None
    except (ValueError, OverflowError):
        # Past the last representable date
        return None


def calculate_disposal_date(
    record: ClassificationRecord,
    record_date: date,
    event_date: date | None = None,
) -> date | None:
    """Calculate the date a record becomes eligible for disposal.

    Args:
        record: The classification record applied to the document
        record_date: Date the document was created
        event_date: Optional date for event-based cutoffs

    Returns:
        The disposal date, or None if it cannot be calculated
    """
    if record.is_permanent:
        return None

    if not record.has_numeric_retention:
        return None

    cutoff = calculate_cutoff_date(record.cutoff_trigger, record_date, event_date)
    if cutoff is None:
        return None

    return add_retention_period(cutoff, record.retention_value, record.retention_unit)


def days_until(target: date, today: date | None = None) -> int:
    """Days from ``today`` to ``target`` (negative once passed)."""
    today = _as_date(today) if today is not None else datetime.now(UTC).date()
    return (_as_date(target) - today).days


class DisposalSchedule(BaseModel):
    """Retention outcome for one document under one record.

    Attributes:
        record: The record the schedule was computed from.
        record_date: Date the document was created.
        cutoff_date: When the retention clock starts (None if unknown).
        disposal_date: When disposal is allowed (None if not computable).
        days_remaining: Days until disposal (negative once eligible).
        summary: One-line disposal summary.
    """

    model_config = ConfigDict(frozen=True)

    record: ClassificationRecord
    record_date: date
    cutoff_date: date | None = None
    disposal_date: date | None = None
    days_remaining: int | None = None
    summary: str = ""

    @property
    def is_permanent(self) -> bool:
        """Whether the document is kept permanently."""
        return self.record.is_permanent

    @property
    def disposal_action(self) -> DisposalAction:
        """Action to take at the disposal date."""
        return self.record.disposal_action

    @property
    def is_eligible(self) -> bool:
        """Whether the disposal date has been reached."""
        return self.days_remaining is not None and self.days_remaining <= 0


def build_disposal_schedule(
    record: ClassificationRecord,
    record_date: date,
    event_date: date | None = None,
    today: date | None = None,
) -> DisposalSchedule:
    """Compute the full retention outcome for a document.

    Args:
        record: The chosen classification record
        record_date: Date the document was created
        event_date: Optional date for event-based cutoffs
        today: Reference date for ``days_remaining`` (default: today, UTC)

    Returns:
        The disposal schedule
    """
    record_date = _as_date(record_date)
    cutoff = None
    if not record.is_permanent:
        cutoff = calculate_cutoff_date(record.cutoff_trigger, record_date, event_date)

    disposal_date = calculate_disposal_date(record, record_date, event_date)
    remaining = days_until(disposal_date, today) if disposal_date is not None else None

    return DisposalSchedule(
        record=record,
        record_date=record_date,
        cutoff_date=cutoff,
        disposal_date=disposal_date,
        days_remaining=remaining,
        summary=get_disposal_summary(record),
    )

"""Human-readable retention and cutoff descriptions."""

from ssic.records.types import ClassificationRecord, CutoffTrigger, RetentionUnit

_CUTOFF_LABELS = {
    CutoffTrigger.CALENDAR_YEAR: "End of Calendar Year",
    CutoffTrigger.FISCAL_YEAR: "End of Fiscal Year",
    CutoffTrigger.CASE_CLOSURE: "Case Closure",
    CutoffTrigger.SEPARATION: "Separation",
    CutoffTrigger.EVENT_BASED: "Event-Based",
    CutoffTrigger.IMMEDIATE: "Record Date",
}

_TRIGGER_PHRASES = {
    CutoffTrigger.CALENDAR_YEAR: "after end of calendar year",
    CutoffTrigger.FISCAL_YEAR: "after end of fiscal year",
    CutoffTrigger.CASE_CLOSURE: "after case closure",
    CutoffTrigger.SEPARATION: "after separation",
    CutoffTrigger.IMMEDIATE: "from record date",
}

_UNIT_NAMES = {
    RetentionUnit.YEARS: "year",
    RetentionUnit.MONTHS: "month",
}


def _pluralize_period(value: int, unit: RetentionUnit) -> str:
    name = _UNIT_NAMES.get(unit, "day")
    suffix = "s" if value != 1 else ""
    return f"{value} {name}{suffix}"


def format_retention(record: ClassificationRecord) -> str:
    """Format the retention period, e.g. ``"3 years"``."""
    if record.is_permanent:
        return "Permanent - Transfer to NARA"

    if record.retention_unit == RetentionUnit.EVENT_BASED:
        return "Destroy when obsolete/superseded"

    if record.retention_value is None:
        return "Retention not specified"

    return _pluralize_period(record.retention_value, record.retention_unit)


def format_cutoff(trigger: CutoffTrigger | str) -> str:
    """Format a cutoff trigger as a short label."""
    return _CUTOFF_LABELS.get(trigger, "Unspecified")


def get_disposal_summary(record: ClassificationRecord) -> str:
    """One-line disposal summary, e.g. ``"TEMPORARY: 3 years after End of Calendar Year"``."""
    if record.is_permanent:
        return "PERMANENT: Transfer to National Archives"

    retention = format_retention(record)
    cutoff = format_cutoff(record.cutoff_trigger)
    return f"TEMPORARY: {retention} after {cutoff}"


def format_disposal_info(record: ClassificationRecord) -> str:
    """Full disposal instruction, e.g. ``"Destroy 3 years after end of calendar year"``."""
    if record.is_permanent:
        return "Permanent Record - Transfer to National Archives"

    if record.retention_unit == RetentionUnit.EVENT_BASED:
        return f"Destroy when {record.cutoff_description.lower()}"

    if record.retention_value is None:
        return "Retention period not specified"

    period = _pluralize_period(record.retention_value, record.retention_unit)
    trigger = _TRIGGER_PHRASES.get(record.cutoff_trigger, "after cutoff")
    return f"Destroy {period} {trigger}"

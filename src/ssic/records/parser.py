"""Disposition text parser.

Turns one regulatory disposition sentence, e.g.
``"Destroy 3 years after cutoff. Cutoff at end of calendar year."``,
into a structured retention rule.

This is a fixed-precedence keyword heuristic, not a grammar. Every field is
resolved independently and the first matching keyword wins. Text that does
not match anything yields ``UNSPECIFIED`` / ``None`` fields; the parser
never raises. Retention periods are only recognized in the form
``<number> <unit> AFTER|OLD`` ("3 YEARS AFTER", "6 MONTHS OLD"); phrasings
such as "3-year retention period" are not captured.
"""

import re

from pydantic import BaseModel, ConfigDict

from ssic.records.types import (
    ClassificationRecord,
    CutoffTrigger,
    DisposalAction,
    RetentionUnit,
)

# Cutoff rules in precedence order: (trigger, keywords, description)
CUTOFF_RULES: tuple[tuple[CutoffTrigger, tuple[str, ...], str], ...] = (
    (
        CutoffTrigger.CALENDAR_YEAR,
        ("CALENDAR YEAR", "CY.", "AT CY"),
        "End of calendar year (December 31)",
    ),
    (
        CutoffTrigger.FISCAL_YEAR,
        ("FISCAL YEAR", "FY.", "AT FY"),
        "End of fiscal year (September 30)",
    ),
    (
        CutoffTrigger.CASE_CLOSURE,
        ("CASE CLOSURE", "CASE CLOSED"),
        "Upon case closure",
    ),
    (
        CutoffTrigger.SEPARATION,
        ("SEPARATION", "SEPARATED"),
        "Upon separation from service",
    ),
    (
        CutoffTrigger.EVENT_BASED,
        ("SUPERSEDED", "OBSOLETE", "CANCELED"),
        "When superseded, obsolete, or canceled",
    ),
    (
        CutoffTrigger.IMMEDIATE,
        ("IMMEDIATELY", "WHEN 6 MONTHS OLD", "WHEN 90 DAYS"),
        "From date of record creation",
    ),
)

# Retention patterns in precedence order
RETENTION_PATTERNS: tuple[tuple[RetentionUnit, re.Pattern[str]], ...] = (
    (RetentionUnit.YEARS, re.compile(r"([0-9]+)\s*YEARS?\s*(AFTER|OLD)")),
    (RetentionUnit.MONTHS, re.compile(r"([0-9]+)\s*MONTHS?\s*(AFTER|OLD)")),
    (RetentionUnit.DAYS, re.compile(r"([0-9]+)\s*DAYS?\s*(AFTER|OLD)")),
)

EVENT_RETENTION_PHRASES = ("WHEN SUPERSEDED", "WHEN OBSOLETE", "WHEN CANCELED")


class ParsedDisposition(BaseModel):
    """Structured rule extracted from a disposition sentence."""

    model_config = ConfigDict(frozen=True)

    is_permanent: bool = False
    disposal_action: DisposalAction = DisposalAction.UNSPECIFIED
    cutoff_trigger: CutoffTrigger = CutoffTrigger.UNSPECIFIED
    cutoff_description: str = ""
    retention_value: int | None = None
    retention_unit: RetentionUnit = RetentionUnit.UNSPECIFIED


def parse_disposition(disposition_text: str | None) -> ParsedDisposition:
    """Parse a disposition sentence into a structured rule.

    Args:
        disposition_text: Raw disposition text (matched case-insensitively)

    Returns:
        The parsed rule; unmatched fields keep their UNSPECIFIED defaults
    """
    text = (disposition_text or "").upper()

    cutoff_trigger, cutoff_description = _match_cutoff(text)
    retention_value, retention_unit = _match_retention(text)

    return ParsedDisposition(
        is_permanent="PERMANENT" in text,
        disposal_action=_match_disposal_action(text),
        cutoff_trigger=cutoff_trigger,
        cutoff_description=cutoff_description,
        retention_value=retention_value,
        retention_unit=retention_unit,
    )


def _match_disposal_action(text: str) -> DisposalAction:
    if "DESTROY" in text or "DELETE" in text:
        return DisposalAction.DESTROY
    if "TRANSFER" in text and "NATIONAL ARCHIVES" in text:
        return DisposalAction.TRANSFER_NARA
    return DisposalAction.UNSPECIFIED


def _match_cutoff(text: str) -> tuple[CutoffTrigger, str]:
    for trigger, keywords, description in CUTOFF_RULES:
        if any(keyword in text for keyword in keywords):
            return trigger, description
    return CutoffTrigger.UNSPECIFIED, ""


def _match_retention(text: str) -> tuple[int | None, RetentionUnit]:
    for unit, pattern in RETENTION_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        try:
            return int(match.group(1)), unit
        except ValueError:
            # Digit run longer than the int conversion limit
            continue

    if any(phrase in text for phrase in EVENT_RETENTION_PHRASES):
        return None, RetentionUnit.EVENT_BASED

    return None, RetentionUnit.UNSPECIFIED


def build_record(
    code: str,
    disposition_text: str,
    *,
    nomenclature: str = "",
    bucket: str = "",
    bucket_title: str = "",
    owning_authority: str = "",
    series_title: str = "",
) -> ClassificationRecord:
    """Build a classification record by parsing its disposition sentence.

    Args:
        code: SSIC code
        disposition_text: Raw disposition sentence
        nomenclature: Topic label for the code
        bucket: Bucket identifier
        bucket_title: Bucket label
        owning_authority: Disposition authority tag
        series_title: Originating records series

    Returns:
        An immutable ClassificationRecord
    """
    parsed = parse_disposition(disposition_text)
    return ClassificationRecord(
        code=code,
        nomenclature=nomenclature,
        bucket=bucket,
        bucket_title=bucket_title,
        owning_authority=owning_authority,
        disposition_text=disposition_text,
        series_title=series_title,
        **parsed.model_dump(),
    )

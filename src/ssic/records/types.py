"""SSIC record type definitions.

This module defines the core types for records retention scheduling:
- CutoffTrigger: When the retention clock starts
- RetentionUnit: Unit of the retention period
- DisposalAction: Final fate of a record
- ClassificationRecord: One rule-set for one (code, bucket) pair
- ClassificationSearchResult: One ranked search hit
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CutoffTrigger(str, Enum):
    """Cutoff triggers determine WHEN the retention clock starts."""

    CALENDAR_YEAR = "CALENDAR_YEAR"
    """End of calendar year (December 31)."""

    FISCAL_YEAR = "FISCAL_YEAR"
    """End of fiscal year (September 30)."""

    CASE_CLOSURE = "CASE_CLOSURE"
    """When the case or matter is closed."""

    SEPARATION = "SEPARATION"
    """When the individual separates from service."""

    EVENT_BASED = "EVENT_BASED"
    """A specific event (superseded, obsolete, canceled)."""

    IMMEDIATE = "IMMEDIATE"
    """No cutoff, retention starts at the record date."""

    UNSPECIFIED = "UNSPECIFIED"


# Triggers whose cutoff is the date of an external event
EVENT_TRIGGERS = frozenset(
    {CutoffTrigger.CASE_CLOSURE, CutoffTrigger.SEPARATION, CutoffTrigger.EVENT_BASED}
)


class RetentionUnit(str, Enum):
    """Unit of the retention period."""

    YEARS = "YEARS"
    MONTHS = "MONTHS"
    DAYS = "DAYS"
    EVENT_BASED = "EVENT_BASED"
    UNSPECIFIED = "UNSPECIFIED"


# Units that support date arithmetic
NUMERIC_UNITS = frozenset({RetentionUnit.YEARS, RetentionUnit.MONTHS, RetentionUnit.DAYS})


class DisposalAction(str, Enum):
    """Disposal action taken once retention expires."""

    DESTROY = "DESTROY"
    TRANSFER_NARA = "TRANSFER_NARA"
    """Transfer to the National Archives."""

    UNSPECIFIED = "UNSPECIFIED"


class ClassificationRecord(BaseModel):
    """Complete metadata for a single SSIC and bucket combination.

    Field names serialize in camelCase (``bucketTitle``, ``isPermanent``)
    so datasets written by the build step round-trip unchanged.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Identification
    code: str = Field(min_length=1)
    """SSIC code. Numeric-looking but always handled as a string."""

    nomenclature: str = ""
    """Human-readable topic label for the code."""

    bucket: str = ""
    """Sub-category identifier within the code."""

    bucket_title: str = ""
    """Sub-category label within the code."""

    owning_authority: str = ""
    """Tag of the issuing disposition authority."""

    # Disposal classification
    is_permanent: bool = False
    """Permanent records are never destroyed."""

    # Cutoff (when the retention period starts)
    cutoff_trigger: CutoffTrigger = CutoffTrigger.UNSPECIFIED
    cutoff_description: str = ""

    # Retention period
    retention_value: int | None = Field(default=None, ge=0)
    retention_unit: RetentionUnit = RetentionUnit.UNSPECIFIED

    disposal_action: DisposalAction = DisposalAction.UNSPECIFIED

    # Traceability
    disposition_text: str = ""
    """Original disposition sentence the rule was parsed from."""

    series_title: str = ""
    """Title of the originating records series."""

    @property
    def has_numeric_retention(self) -> bool:
        """Whether the retention period can be used for date arithmetic."""
        return self.retention_value is not None and self.retention_unit in NUMERIC_UNITS


class ClassificationSearchResult(BaseModel):
    """One search hit: a code with all of its buckets.

    ``primary_record`` is the default bucket offered to the user; the
    consumer is expected to let a human confirm or override it.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    code: str
    nomenclature: str
    records: tuple[ClassificationRecord, ...]
    primary_record: ClassificationRecord

    @property
    def has_multiple_buckets(self) -> bool:
        """Whether the user has more than one bucket to choose from."""
        return len(self.records) > 1

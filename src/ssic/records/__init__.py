"""SSIC records retention classification and disposal scheduling.

This package provides:
- Disposition text parsing into structured retention rules
- A record store with atomic reload
- Ranked search over SSIC codes and topics
- Disposal date calculation with calendar, fiscal and event cutoffs

Usage:
    from ssic.records import (
        ClassificationSearchEngine,
        RecordStore,
        calculate_disposal_date,
        load_records,
    )

    store = RecordStore(load_records("ssic.json"))
    engine = ClassificationSearchEngine(store)

    result = engine.search("travel")[0]
    disposal = calculate_disposal_date(result.primary_record, date(2024, 3, 15))
"""

from ssic.records.buckets import select_primary_record
from ssic.records.disposal import (
    DisposalSchedule,
    add_retention_period,
    build_disposal_schedule,
    calculate_cutoff_date,
    calculate_disposal_date,
    days_until,
)
from ssic.records.formatting import (
    format_cutoff,
    format_disposal_info,
    format_retention,
    get_disposal_summary,
)
from ssic.records.loader import (
    build_records,
    dump_records,
    load_record_store,
    load_records,
    parse_records,
)
from ssic.records.parser import ParsedDisposition, build_record, parse_disposition
from ssic.records.search import (
    ClassificationSearchEngine,
    SearchConfig,
    create_search_engine,
)
from ssic.records.store import RecordSnapshot, RecordStore, code_sort_key
from ssic.records.types import (
    ClassificationRecord,
    ClassificationSearchResult,
    CutoffTrigger,
    DisposalAction,
    RetentionUnit,
)

__all__ = [
    # Types
    "CutoffTrigger",
    "DisposalAction",
    "RetentionUnit",
    "ClassificationRecord",
    "ClassificationSearchResult",
    # Parser
    "ParsedDisposition",
    "build_record",
    "parse_disposition",
    # Store
    "RecordSnapshot",
    "RecordStore",
    "code_sort_key",
    # Search
    "ClassificationSearchEngine",
    "SearchConfig",
    "create_search_engine",
    "select_primary_record",
    # Disposal
    "DisposalSchedule",
    "add_retention_period",
    "build_disposal_schedule",
    "calculate_cutoff_date",
    "calculate_disposal_date",
    "days_until",
    # Formatting
    "format_cutoff",
    "format_disposal_info",
    "format_retention",
    "get_disposal_summary",
    # Loading
    "build_records",
    "dump_records",
    "load_record_store",
    "load_records",
    "parse_records",
]

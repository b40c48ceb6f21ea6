"""Record store holding the loaded set of classification records.

The store is an explicit object owned by the caller. Each call to
``initialize`` builds a new immutable ``RecordSnapshot`` and publishes it
with a single reference assignment, so a reader that captures
``snapshot()`` once sees either the previous set or the new one in full.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType

from ssic.core.logging import get_logger
from ssic.records.buckets import select_primary_record
from ssic.records.types import ClassificationRecord

logger = get_logger(__name__)


def code_sort_key(code: str) -> tuple[int, int, str]:
    """Sort key ordering codes by numeric value.

    All-digit codes sort by integer value with the string as tie-breaker;
    anything else sorts after them by string.
    """
    if code.isascii() and code.isdigit():
        return (0, int(code), code)
    return (1, 0, code)


@dataclass(frozen=True)
class RecordSnapshot:
    """Immutable view of one loaded record set.

    Attributes:
        records: All records in load order.
        by_code: Read-only index of code -> records in load order.
        generation: Sequence number of the initialization that built it.
        loaded_at: When the snapshot was built.
    """

    records: tuple[ClassificationRecord, ...] = ()
    by_code: Mapping[str, tuple[ClassificationRecord, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    generation: int = 0
    loaded_at: datetime | None = None

    @classmethod
    def build(
        cls,
        records: Iterable[ClassificationRecord],
        generation: int = 0,
    ) -> "RecordSnapshot":
        """Build a snapshot and its code index from records."""
        ordered = tuple(records)
        index: dict[str, list[ClassificationRecord]] = {}
        for record in ordered:
            index.setdefault(record.code, []).append(record)

        return cls(
            records=ordered,
            by_code=MappingProxyType({code: tuple(group) for code, group in index.items()}),
            generation=generation,
            loaded_at=datetime.now(UTC),
        )

    def get_records(self, code: str) -> tuple[ClassificationRecord, ...]:
        """Get all records for an exact code."""
        return self.by_code.get(code, ())


class RecordStore:
    """Holds the currently loaded classification records.

    Usage:
        store = RecordStore()
        store.initialize(records)

        store.get_records_for_ssic("5211")
        store.is_valid_code("5211")
    """

    def __init__(self, records: Iterable[ClassificationRecord] | None = None) -> None:
        """Initialize the store.

        Args:
            records: Optional initial record set
        """
        self._snapshot = RecordSnapshot()
        if records is not None:
            self.initialize(records)

    def initialize(self, records: Iterable[ClassificationRecord]) -> RecordSnapshot:
        """Replace the entire loaded record set.

        Args:
            records: The new record set, in load order

        Returns:
            The newly published snapshot
        """
        snapshot = RecordSnapshot.build(records, generation=self._snapshot.generation + 1)
        self._snapshot = snapshot

        logger.info(
            "record_store_initialized",
            generation=snapshot.generation,
            record_count=len(snapshot.records),
            code_count=len(snapshot.by_code),
        )
        return snapshot

    def snapshot(self) -> RecordSnapshot:
        """Get the currently published snapshot."""
        return self._snapshot

    @property
    def records(self) -> tuple[ClassificationRecord, ...]:
        """Get all loaded records."""
        return self._snapshot.records

    @property
    def generation(self) -> int:
        """Get the number of initializations performed."""
        return self._snapshot.generation

    def __len__(self) -> int:
        return len(self._snapshot.records)

    def get_records_for_ssic(self, code: str) -> list[ClassificationRecord]:
        """Get all records for a specific code.

        Args:
            code: Exact SSIC code

        Returns:
            Records in load order (empty if the code is unknown)
        """
        return list(self._snapshot.get_records(code))

    def get_primary_record(self, code: str) -> ClassificationRecord | None:
        """Get the default record for a specific code.

        Args:
            code: Exact SSIC code

        Returns:
            The primary record, or None if the code is unknown
        """
        return select_primary_record(self._snapshot.get_records(code))

    def is_valid_code(self, code: str) -> bool:
        """Check whether any record exists for a code."""
        return code in self._snapshot.by_code

    def get_all_codes(self) -> list[str]:
        """Get all unique codes sorted by numeric value."""
        return sorted(self._snapshot.by_code, key=code_sort_key)

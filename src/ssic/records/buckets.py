"""Primary bucket selection for codes with several rule-sets."""

from collections.abc import Sequence

from ssic.records.types import ClassificationRecord

# Bucket titles preferred as the default rule-set for a code
PREFERRED_BUCKET_TITLES = ("general correspondence", "general operations")


def select_primary_record(
    records: Sequence[ClassificationRecord],
) -> ClassificationRecord | None:
    """Choose the default record among records sharing one code.

    Prefers the first bucket titled "General Correspondence" or
    "General Operations"; otherwise the first record in list order.

    Args:
        records: Records sharing a code, in insertion order

    Returns:
        The primary record, or None if ``records`` is empty
    """
    for record in records:
        title = record.bucket_title.lower()
        if any(preferred in title for preferred in PREFERRED_BUCKET_TITLES):
            return record
    return records[0] if records else None

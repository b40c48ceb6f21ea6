"""Dataset build and load helpers.

The records dataset is produced offline: raw disposition rows are run
through the parser (``build_records``) and written as a JSON array
(``dump_records``). At startup the array is read back (``load_records``)
and handed to a RecordStore.

Malformed entries are skipped with a warning so the store only ever holds
well-formed records.
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ssic.config.settings import Settings, get_settings
from ssic.core.exceptions import DatasetLoadError
from ssic.core.logging import LogContext, get_logger, log_exception
from ssic.records.parser import build_record
from ssic.records.store import RecordStore
from ssic.records.types import ClassificationRecord

logger = get_logger(__name__)

# Keys used by older exports of the dataset
LEGACY_KEYS = {
    "ssic": "code",
    "dau": "owningAuthority",
}


def _normalize_entry(entry: Mapping[str, Any]) -> dict[str, Any]:
    normalized = dict(entry)
    for legacy, current in LEGACY_KEYS.items():
        if legacy in normalized and current not in normalized:
            normalized[current] = normalized.pop(legacy)
    # Some spreadsheet exports store codes as numbers
    if isinstance(normalized.get("code"), int) and not isinstance(normalized["code"], bool):
        normalized["code"] = str(normalized["code"])
    return normalized


def parse_records(entries: Iterable[Any], source: str = "<memory>") -> list[ClassificationRecord]:
    """Validate raw dataset entries into records.

    Args:
        entries: Decoded JSON objects
        source: Name of the dataset, used in log entries

    Returns:
        Valid records in input order
    """
    records: list[ClassificationRecord] = []
    skipped = 0

    for position, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            skipped += 1
            logger.warning(
                "dataset_entry_skipped",
                source=source,
                position=position,
                reason="not an object",
            )
            continue
        try:
            records.append(ClassificationRecord.model_validate(_normalize_entry(entry)))
        except ValidationError as e:
            skipped += 1
            logger.warning(
                "dataset_entry_skipped",
                source=source,
                position=position,
                reason="validation_failed",
                errors=e.error_count(),
            )

    if skipped:
        logger.info("dataset_entries_filtered", source=source, kept=len(records), skipped=skipped)
    return records


def load_records(path: Path | str) -> list[ClassificationRecord]:
    """Load records from a JSON dataset file.

    Args:
        path: Location of the JSON array

    Returns:
        Valid records in file order

    Raises:
        DatasetLoadError: If the file is missing, unreadable, or not a JSON array
    """
    path = Path(path)

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DatasetLoadError(path, "file not found") from e
    except json.JSONDecodeError as e:
        raise DatasetLoadError(path, f"invalid JSON at line {e.lineno}") from e
    except OSError as e:
        raise DatasetLoadError(path, str(e)) from e

    if not isinstance(data, list):
        raise DatasetLoadError(path, f"expected a JSON array, got {type(data).__name__}")

    with LogContext(dataset=str(path)):
        records = parse_records(data, source=path.name)
        logger.info("dataset_loaded", record_count=len(records))
    return records


def build_records(rows: Iterable[Mapping[str, Any]]) -> list[ClassificationRecord]:
    """Build records from raw corpus rows by parsing their dispositions.

    Each row carries ``code`` (or ``ssic``), ``dispositionText`` and the
    optional identification fields ``nomenclature``, ``bucket``,
    ``bucketTitle``, ``owningAuthority`` (or ``dau``) and ``seriesTitle``.
    Rows without a code are skipped.

    Args:
        rows: Raw corpus rows

    Returns:
        Parsed records in row order
    """
    records: list[ClassificationRecord] = []

    for position, raw in enumerate(rows):
        row = _normalize_entry(raw)
        code = str(row.get("code") or "").strip()
        if not code:
            logger.warning("corpus_row_skipped", position=position, reason="missing code")
            continue

        records.append(
            build_record(
                code,
                row.get("dispositionText") or "",
                nomenclature=row.get("nomenclature") or "",
                bucket=str(row.get("bucket") or ""),
                bucket_title=row.get("bucketTitle") or "",
                owning_authority=row.get("owningAuthority") or "",
                series_title=row.get("seriesTitle") or "",
            )
        )

    logger.info("corpus_parsed", record_count=len(records))
    return records


def dump_records(records: Iterable[ClassificationRecord], path: Path | str) -> int:
    """Write records as a camelCase JSON array.

    Args:
        records: Records to write
        path: Destination file

    Returns:
        Number of records written
    """
    path = Path(path)
    payload = [record.model_dump(mode="json", by_alias=True) for record in records]

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
        f.write("\n")

    logger.info("dataset_written", destination=str(path), record_count=len(payload))
    return len(payload)


def load_record_store(
    path: Path | str | None = None,
    settings: Settings | None = None,
) -> RecordStore:
    """Create a RecordStore from the configured dataset.

    Args:
        path: Dataset location (default: ``settings.ssic_data_path``)
        settings: Settings to read the dataset location from

    Returns:
        A store holding the dataset, or an empty store if none is configured

    Raises:
        DatasetLoadError: If the configured dataset cannot be read
    """
    if path is None:
        path = (settings or get_settings()).ssic_data_path

    if path is None:
        logger.warning("dataset_not_configured")
        return RecordStore()

    try:
        records = load_records(path)
    except DatasetLoadError as e:
        log_exception(logger, e, dataset=str(path))
        raise

    return RecordStore(records)

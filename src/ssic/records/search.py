"""Ranked search over SSIC codes and topic nomenclature.

This module provides the ClassificationSearchEngine class, which answers
two kinds of queries against a RecordStore:

- Code search (all-digit query): exact code matches, or prefix matches when
  no exact match exists.
- Topic search (anything else): nomenclature scoring with deterministic
  tie-breaking on numeric code order.
"""

import re
from collections.abc import Iterable

from pydantic import BaseModel, Field

from ssic.config.settings import Settings, get_settings
from ssic.core.logging import get_logger
from ssic.records.buckets import select_primary_record
from ssic.records.store import RecordSnapshot, RecordStore, code_sort_key
from ssic.records.types import ClassificationRecord, ClassificationSearchResult

logger = get_logger(__name__)

_CODE_QUERY = re.compile(r"[0-9]+")

# Topic scoring weights
PHRASE_MATCH_SCORE = 100
WORD_MATCH_SCORE = 10
WORD_PREFIX_BONUS = 5


class SearchConfig(BaseModel):
    """Configuration for the classification search engine.

    Attributes:
        max_results: Maximum number of codes returned by one query.
        min_query_length: Shorter trimmed queries return no results.
        min_word_length: Shorter topic words are ignored for scoring.
    """

    max_results: int = Field(default=15, ge=1)
    min_query_length: int = Field(default=2, ge=1)
    min_word_length: int = Field(default=2, ge=1)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SearchConfig":
        """Build a search configuration from application settings."""
        settings = settings or get_settings()
        return cls(
            max_results=settings.search_max_results,
            min_query_length=settings.search_min_query_length,
        )


def score_nomenclature(nomenclature: str, query: str, words: Iterable[str]) -> int:
    """Score one nomenclature against a lower-cased topic query.

    Args:
        nomenclature: Topic label to score
        query: Full trimmed query, lower-cased
        words: Query words, lower-cased

    Returns:
        The relevance score (0 means no match)
    """
    nom = nomenclature.lower()
    score = 0

    if query in nom:
        score += PHRASE_MATCH_SCORE

    for word in words:
        if word in nom:
            score += WORD_MATCH_SCORE
            if nom.startswith(word):
                score += WORD_PREFIX_BONUS

    return score


class ClassificationSearchEngine:
    """Search engine over the records held by a RecordStore.

    Every query reads one store snapshot, so results are consistent even if
    the store is re-initialized concurrently.

    Usage:
        engine = ClassificationSearchEngine(RecordStore(records))

        results = engine.search("travel")
        for result in results:
            print(result.code, result.primary_record.bucket_title)
    """

    def __init__(
        self,
        store: RecordStore | None = None,
        config: SearchConfig | None = None,
    ) -> None:
        """Initialize the search engine.

        Args:
            store: Record store to search (a new empty store if None)
            config: Optional search configuration
        """
        self._store = store if store is not None else RecordStore()
        self._config = config or SearchConfig()

    @property
    def store(self) -> RecordStore:
        """Get the underlying record store."""
        return self._store

    @property
    def config(self) -> SearchConfig:
        """Get the search configuration."""
        return self._config

    def initialize(self, records: Iterable[ClassificationRecord]) -> None:
        """Replace the searchable record set.

        Args:
            records: The new record set, in load order
        """
        self._store.initialize(records)

    def search(self, query: str) -> list[ClassificationSearchResult]:
        """Search by SSIC code or topic text.

        Args:
            query: Raw user query

        Returns:
            Ranked results, at most ``config.max_results``; empty for
            queries shorter than ``config.min_query_length``
        """
        trimmed = query.strip()
        if len(trimmed) < self._config.min_query_length:
            return []

        snapshot = self._store.snapshot()

        if _CODE_QUERY.fullmatch(trimmed):
            mode = "code"
            matches = self._search_by_code(snapshot, trimmed)
        else:
            mode = "topic"
            matches = self._search_by_topic(snapshot, trimmed)

        results = self._build_results(snapshot, matches[: self._config.max_results])
        logger.debug(
            "classification_search",
            mode=mode,
            query=trimmed,
            result_count=len(results),
            generation=snapshot.generation,
        )
        return results

    def _search_by_code(
        self,
        snapshot: RecordSnapshot,
        code: str,
    ) -> list[tuple[str, ClassificationRecord]]:
        """Exact code match, falling back to prefix matches."""
        exact = snapshot.get_records(code)
        if exact:
            return [(code, exact[0])]

        return [
            (candidate, records[0])
            for candidate, records in snapshot.by_code.items()
            if candidate.startswith(code)
        ]

    def _search_by_topic(
        self,
        snapshot: RecordSnapshot,
        query: str,
    ) -> list[tuple[str, ClassificationRecord]]:
        """Score nomenclature matches and rank codes."""
        lowered = query.lower()
        words = [w for w in lowered.split() if len(w) >= self._config.min_word_length]
        if not words:
            return []

        scores: dict[str, int] = {}
        first_match: dict[str, ClassificationRecord] = {}

        for record in snapshot.records:
            score = score_nomenclature(record.nomenclature, lowered, words)
            if score <= 0:
                continue
            if record.code not in first_match:
                first_match[record.code] = record
                scores[record.code] = score
            elif score > scores[record.code]:
                scores[record.code] = score

        ranked = sorted(scores, key=lambda code: (-scores[code], code_sort_key(code)))
        return [(code, first_match[code]) for code in ranked]

    def _build_results(
        self,
        snapshot: RecordSnapshot,
        matches: list[tuple[str, ClassificationRecord]],
    ) -> list[ClassificationSearchResult]:
        """Assemble results with all buckets and a primary record."""
        results: list[ClassificationSearchResult] = []

        for code, first in matches:
            records = snapshot.get_records(code)
            primary = select_primary_record(records)
            if primary is None:
                continue
            results.append(
                ClassificationSearchResult(
                    code=code,
                    nomenclature=first.nomenclature,
                    records=records,
                    primary_record=primary,
                )
            )

        return results

    def get_records_for_ssic(self, code: str) -> list[ClassificationRecord]:
        """Get all records for a specific code."""
        return self._store.get_records_for_ssic(code)

    def get_primary_record(self, code: str) -> ClassificationRecord | None:
        """Get the default record for a specific code."""
        return self._store.get_primary_record(code)

    def is_valid_code(self, code: str) -> bool:
        """Check whether a code exists in the loaded set."""
        return self._store.is_valid_code(code)

    def get_all_codes(self) -> list[str]:
        """Get all unique codes sorted by numeric value."""
        return self._store.get_all_codes()


def create_search_engine(
    store: RecordStore | None = None,
    settings: Settings | None = None,
) -> ClassificationSearchEngine:
    """Create a search engine configured from application settings.

    Args:
        store: Record store to search
        settings: Settings to read limits from (default: global settings)

    Returns:
        A new ClassificationSearchEngine
    """
    return ClassificationSearchEngine(store=store, config=SearchConfig.from_settings(settings))

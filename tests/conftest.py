"""Pytest fixtures for SSIC records tests."""

from collections.abc import Callable, Generator
from unittest.mock import patch

import pytest
import structlog

from ssic.config.settings import Settings, get_settings
from ssic.records.store import RecordStore
from ssic.records.types import (
    ClassificationRecord,
    CutoffTrigger,
    DisposalAction,
    RetentionUnit,
)


# =============================================================================
# Structlog Configuration Fixture
# =============================================================================


@pytest.fixture(scope="function", autouse=True)
def reset_structlog_after_test():
    """Reset structlog configuration after each test.

    This ensures tests that modify structlog global state
    don't affect other tests.
    """
    yield
    structlog.reset_defaults()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def mock_settings() -> Settings:
    """Create settings for testing."""
    return Settings(
        ENVIRONMENT="development",
        log_level="DEBUG",
        ssic_data_path=None,
        search_max_results=15,
        search_min_query_length=2,
    )


@pytest.fixture
def patch_settings(mock_settings: Settings) -> Generator[Settings, None, None]:
    """Patch get_settings to return mock settings."""
    get_settings.cache_clear()
    with (
        patch("ssic.config.settings.get_settings", return_value=mock_settings),
        patch("ssic.core.logging.get_settings", return_value=mock_settings),
        patch("ssic.records.search.get_settings", return_value=mock_settings),
        patch("ssic.records.loader.get_settings", return_value=mock_settings),
    ):
        yield mock_settings
    get_settings.cache_clear()


# =============================================================================
# Record Fixtures
# =============================================================================


RecordFactory = Callable[..., ClassificationRecord]


@pytest.fixture
def record_factory() -> RecordFactory:
    """Factory for classification records with sensible defaults."""

    def _make(
        code: str,
        nomenclature: str = "",
        bucket: str = "1",
        bucket_title: str = "",
        **overrides,
    ) -> ClassificationRecord:
        values = {
            "cutoff_trigger": CutoffTrigger.CALENDAR_YEAR,
            "cutoff_description": "End of calendar year (December 31)",
            "retention_value": 3,
            "retention_unit": RetentionUnit.YEARS,
            "disposal_action": DisposalAction.DESTROY,
        }
        values.update(overrides)
        return ClassificationRecord(
            code=code,
            nomenclature=nomenclature,
            bucket=bucket,
            bucket_title=bucket_title,
            **values,
        )

    return _make


@pytest.fixture
def sample_records(record_factory: RecordFactory) -> list[ClassificationRecord]:
    """A small record set covering multi-bucket codes and prefix neighbors."""
    return [
        record_factory("1050", "Leave and Liberty", bucket="1", bucket_title="Leave Records"),
        record_factory(
            "1050",
            "Leave and Liberty",
            bucket="2",
            bucket_title="General Correspondence Files",
        ),
        record_factory("10501", "Leave Requests Processing", bucket_title="Case Files"),
        record_factory(
            "4650",
            "Travel Orders",
            bucket="1",
            bucket_title="General Operations Records",
        ),
        record_factory("4650", "Travel Orders", bucket="2", bucket_title="Travel Claims"),
        record_factory(
            "5211",
            "Privacy Act Records",
            bucket_title="Disclosure Accounting",
            is_permanent=True,
            disposal_action=DisposalAction.TRANSFER_NARA,
        ),
        record_factory("900", "Travel Policy", bucket_title="Policy Files"),
        record_factory("7300", "Financial Management and Travel", bucket_title="Ledgers"),
    ]


@pytest.fixture
def record_store(sample_records: list[ClassificationRecord]) -> RecordStore:
    """A record store loaded with the sample records."""
    return RecordStore(sample_records)

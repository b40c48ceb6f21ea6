"""Tests for RecordStore and the bucket selector."""

import threading

import pytest

from ssic.records.buckets import select_primary_record
from ssic.records.store import RecordSnapshot, RecordStore, code_sort_key


class TestCodeSortKey:
    """Tests for numeric code ordering."""

    def test_numeric_order(self) -> None:
        """Test codes sort by integer value, not string."""
        assert sorted(["4650", "900", "10501", "1050"], key=code_sort_key) == [
            "900",
            "1050",
            "4650",
            "10501",
        ]

    def test_leading_zero_tie_is_deterministic(self) -> None:
        """Test equal numeric values fall back to the string."""
        assert sorted(["1050", "01050"], key=code_sort_key) == ["01050", "1050"]

    def test_non_numeric_codes_sort_last(self) -> None:
        """Test non-numeric codes follow numeric ones."""
        assert sorted(["A100", "5000", "1000-1"], key=code_sort_key) == [
            "5000",
            "1000-1",
            "A100",
        ]


class TestRecordSnapshot:
    """Tests for RecordSnapshot."""

    def test_empty_snapshot(self) -> None:
        """Test default snapshot holds nothing."""
        snapshot = RecordSnapshot()
        assert snapshot.records == ()
        assert snapshot.get_records("1050") == ()

    def test_index_preserves_order(self, sample_records) -> None:
        """Test the code index keeps load order."""
        snapshot = RecordSnapshot.build(sample_records)
        buckets = [r.bucket for r in snapshot.get_records("1050")]
        assert buckets == ["1", "2"]

    def test_index_is_read_only(self, sample_records) -> None:
        """Test the code index cannot be mutated."""
        snapshot = RecordSnapshot.build(sample_records)
        with pytest.raises(TypeError):
            snapshot.by_code["9999"] = ()


class TestRecordStore:
    """Tests for RecordStore."""

    def test_empty_store(self) -> None:
        """Test a new store is empty."""
        store = RecordStore()
        assert len(store) == 0
        assert store.generation == 0
        assert store.get_records_for_ssic("1050") == []
        assert store.get_primary_record("1050") is None
        assert store.is_valid_code("1050") is False

    def test_initialize(self, sample_records) -> None:
        """Test loading records."""
        store = RecordStore()
        snapshot = store.initialize(sample_records)

        assert len(store) == len(sample_records)
        assert store.generation == 1
        assert snapshot is store.snapshot()
        assert snapshot.loaded_at is not None

    def test_initialize_from_generator(self, sample_records) -> None:
        """Test any iterable can be loaded."""
        store = RecordStore(r for r in sample_records)
        assert store.records == tuple(sample_records)

    def test_initialize_replaces_set(self, record_store, record_factory) -> None:
        """Test re-initialization replaces the whole set."""
        record_store.initialize([record_factory("2000", "Supply")])

        assert record_store.is_valid_code("2000")
        assert not record_store.is_valid_code("1050")
        assert record_store.generation == 2

    def test_old_snapshot_unchanged_by_reload(self, record_store, record_factory) -> None:
        """Test readers holding a snapshot keep a consistent view."""
        before = record_store.snapshot()
        record_store.initialize([record_factory("2000", "Supply")])

        assert before.get_records("1050")
        assert before.get_records("2000") == ()

    def test_get_records_for_ssic(self, record_store) -> None:
        """Test exact-match lookup."""
        records = record_store.get_records_for_ssic("1050")

        assert [r.bucket for r in records] == ["1", "2"]
        assert record_store.get_records_for_ssic("105") == []

    def test_get_primary_record(self, record_store) -> None:
        """Test the primary record prefers general correspondence."""
        primary = record_store.get_primary_record("1050")
        assert primary is not None
        assert primary.bucket_title == "General Correspondence Files"

    def test_is_valid_code(self, record_store) -> None:
        """Test existence checks are exact."""
        assert record_store.is_valid_code("4650")
        assert not record_store.is_valid_code("465")

    def test_get_all_codes(self, record_store) -> None:
        """Test unique codes in numeric order."""
        assert record_store.get_all_codes() == ["900", "1050", "4650", "5211", "7300", "10501"]

    def test_concurrent_reload_never_mixes_sets(self, record_factory) -> None:
        """Test readers see either the old or the new set in full."""
        set_a = [record_factory(str(1000 + i), "Alpha", series_title="A") for i in range(50)]
        set_b = [record_factory(str(2000 + i), "Beta", series_title="B") for i in range(30)]
        store = RecordStore(set_a)
        torn: list[int] = []
        stop = threading.Event()

        def reader() -> None:
            while not stop.is_set():
                snapshot = store.snapshot()
                series = {r.series_title for r in snapshot.records}
                if len(series) != 1 or len(snapshot.records) not in (50, 30):
                    torn.append(snapshot.generation)

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for i in range(200):
            store.initialize(set_b if i % 2 == 0 else set_a)
        stop.set()
        for thread in threads:
            thread.join()

        assert torn == []
        assert store.generation == 201


class TestSelectPrimaryRecord:
    """Tests for the bucket selector."""

    def test_prefers_general_correspondence(self, record_factory) -> None:
        """Test general correspondence bucket is chosen."""
        records = [
            record_factory("1050", bucket="1", bucket_title="Leave Records"),
            record_factory("1050", bucket="2", bucket_title="GENERAL CORRESPONDENCE"),
        ]
        assert select_primary_record(records).bucket == "2"

    def test_prefers_general_operations(self, record_factory) -> None:
        """Test general operations bucket is chosen."""
        records = [
            record_factory("4650", bucket="1", bucket_title="Claims"),
            record_factory("4650", bucket="2", bucket_title="Unit General Operations Files"),
        ]
        assert select_primary_record(records).bucket == "2"

    def test_first_preferred_bucket_wins(self, record_factory) -> None:
        """Test the first qualifying bucket is chosen."""
        records = [
            record_factory("1", bucket="1", bucket_title="Other"),
            record_factory("1", bucket="2", bucket_title="General Operations"),
            record_factory("1", bucket="3", bucket_title="General Correspondence"),
        ]
        assert select_primary_record(records).bucket == "2"

    def test_falls_back_to_first_record(self, record_factory) -> None:
        """Test list order decides when nothing qualifies."""
        records = [
            record_factory("5211", bucket="7", bucket_title="Disclosure Accounting"),
            record_factory("5211", bucket="3", bucket_title="Request Files"),
        ]
        assert select_primary_record(records).bucket == "7"

    def test_empty(self) -> None:
        """Test an empty list has no primary record."""
        assert select_primary_record([]) is None

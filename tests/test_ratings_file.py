"""Tests for the JSON-file tally store."""

import json
import threading

import pytest

from tierboard.services.tiers import empty_tally
from tierboard.stores import ratings_file
from tierboard.stores.ratings_file import TallyFileStore, TallyStoreError, get_store


def test_init_creates_empty_document(ratings_path) -> None:
    store = TallyFileStore(ratings_path)

    assert store.init() is True
    assert json.loads(ratings_path.read_text(encoding="utf-8")) == {}
    assert store.load() == {}


def test_init_keeps_existing_document(ratings_path) -> None:
    data = {"X": {"S": 1, "A": 0, "B": 0, "C": 0, "D": 0}}
    ratings_path.write_text(json.dumps(data), encoding="utf-8")

    assert TallyFileStore(ratings_path).init() is False
    assert TallyFileStore(ratings_path).load() == data


def test_init_store_installs_instance(store: TallyFileStore) -> None:
    assert get_store() is store
    assert store.path.exists()


def test_save_is_pretty_printed_and_keeps_unicode(store: TallyFileStore) -> None:
    record = empty_tally()
    record["S"] = 1
    store.save({"掠影": record})

    text = store.path.read_text(encoding="utf-8")
    assert "掠影" in text
    assert '\n  "掠影": {\n    "S": 1,' in text


def test_fresh_instance_loads_identical_tallies(store: TallyFileStore) -> None:
    tallies = {
        "RGX 11z Pro": {"S": 3, "A": 1, "B": 0, "C": 0, "D": 2},
        "Prime": {"S": 0, "A": 0, "B": 5, "C": 1, "D": 0},
    }
    store.save(tallies)

    assert TallyFileStore(store.path).load() == tallies


def test_save_leaves_no_temp_files(store: TallyFileStore) -> None:
    store.save({"X": empty_tally()})
    store.clear()

    assert [p.name for p in store.path.parent.iterdir()] == [store.path.name]


def test_save_failure_raises_store_error(tmp_path) -> None:
    store = TallyFileStore(tmp_path / "missing-dir" / "ratings.json")

    with pytest.raises(TallyStoreError):
        store.save({})


def test_load_missing_document_raises(ratings_path) -> None:
    with pytest.raises(TallyStoreError):
        TallyFileStore(ratings_path).load()


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '{"X": {"S": 1}}',
        '{"X": {"S": 1, "A": 0, "B": 0, "C": 0, "D": 0, "Z": 1}}',
        '{"X": {"S": -1, "A": 0, "B": 0, "C": 0, "D": 0}}',
        '{"X": {"S": "1", "A": 0, "B": 0, "C": 0, "D": 0}}',
        '{"X": {"S": true, "A": 0, "B": 0, "C": 0, "D": 0}}',
        '{"X": 5}',
    ],
)
def test_load_corrupt_document_raises(ratings_path, content: str) -> None:
    ratings_path.write_text(content, encoding="utf-8")

    with pytest.raises(TallyStoreError):
        TallyFileStore(ratings_path).load()


@pytest.mark.parametrize(
    "content",
    [
        b'{"\xff\xfe": 1}',
        b"[" * 100000 + b"]" * 100000,
    ],
    ids=["invalid-utf8", "deep-nesting"],
)
def test_load_undecodable_document_raises(ratings_path, content: bytes) -> None:
    ratings_path.write_bytes(content)

    with pytest.raises(TallyStoreError):
        TallyFileStore(ratings_path).load()


def test_save_syncs_parent_directory(store: TallyFileStore, monkeypatch: pytest.MonkeyPatch) -> None:
    synced = []
    real_fsync_dir = ratings_file._fsync_dir

    def record(directory):
        synced.append(directory)
        real_fsync_dir(directory)

    monkeypatch.setattr(ratings_file, "_fsync_dir", record)
    store.save({"X": empty_tally()})

    assert synced == [store.path.parent]


def test_update_skips_save_when_mutation_fails(store: TallyFileStore) -> None:
    store.save({"X": empty_tally()})
    before = store.path.read_text(encoding="utf-8")

    def mutate(tallies):
        raise ValueError("boom")

    with pytest.raises(ValueError):
        store.update(mutate)

    assert store.path.read_text(encoding="utf-8") == before


def test_clear_resets_document(store: TallyFileStore) -> None:
    store.save({"X": empty_tally()})
    store.clear()

    assert store.load() == {}


def test_concurrent_updates_are_not_lost(store: TallyFileStore) -> None:
    threads_count = 8
    updates_per_thread = 25

    def increment(tallies):
        record = tallies.setdefault("X", empty_tally())
        record["S"] += 1
        return tallies

    def worker():
        for _ in range(updates_per_thread):
            store.update(increment)

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.load()["X"]["S"] == threads_count * updates_per_thread

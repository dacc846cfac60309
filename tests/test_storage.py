"""Tests for nebula.storage — key-value stores and the note codec."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from nebula.errors import DataCorruptError
from nebula.models import Note
from nebula.storage import (
    DEFAULT_STORAGE_KEY,
    JsonFileKeyValueStore,
    MemoryKeyValueStore,
    NotePersistence,
)


def _notes() -> list[Note]:
    return [
        Note(title="First", content="alpha", tags=("a", "b"), is_favorite=True),
        Note(title="", content="", created_at=5, updated_at=9),
        Note(title="Third", content="gamma\nmultiline", ai_summary="sum"),
    ]


class TestMemoryKeyValueStore:
    def test_get_missing(self) -> None:
        assert MemoryKeyValueStore().get("nope") is None

    def test_set_and_get(self) -> None:
        kv = MemoryKeyValueStore()
        kv.set("k", "v")
        assert kv.get("k") == "v"

    def test_initial_data_is_copied(self) -> None:
        initial = {"k": "v"}
        kv = MemoryKeyValueStore(initial)
        kv.set("k", "w")
        assert initial["k"] == "v"


class TestJsonFileKeyValueStore:
    def test_exposes_path(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        assert JsonFileKeyValueStore(str(path)).path == path

    def test_unwritable_location_raises_os_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        kv = JsonFileKeyValueStore(blocker / "store.json")
        with pytest.raises(OSError):
            kv.set("k", "v")
        assert kv.get("k") == "v"

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        kv = JsonFileKeyValueStore(tmp_path / "none.json")
        assert kv.get("k") is None
        assert not (tmp_path / "none.json").exists()

    def test_persistence(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "store.json"
        JsonFileKeyValueStore(path).set("k", "v")
        assert path.exists()
        assert JsonFileKeyValueStore(path).get("k") == "v"

    def test_keeps_other_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        kv = JsonFileKeyValueStore(path)
        kv.set("a", "1")
        kv.set("b", "2")
        data = json.loads(path.read_text())
        assert data == {"a": "1", "b": "2"}

    def test_unreadable_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("{not json")
        kv = JsonFileKeyValueStore(path)
        assert kv.get("k") is None

    def test_non_object_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("[1, 2, 3]")
        assert JsonFileKeyValueStore(path).get("k") is None


class TestNotePersistence:
    def test_load_missing_returns_none(self) -> None:
        assert NotePersistence(MemoryKeyValueStore()).load() is None

    def test_roundtrip(self) -> None:
        notes = _notes()
        persistence = NotePersistence(MemoryKeyValueStore())
        persistence.save(notes)
        assert persistence.load() == notes

    def test_codec_roundtrip(self) -> None:
        notes = _notes()
        restored = NotePersistence.loads(NotePersistence.dumps(notes))
        for before, after in zip(notes, restored):
            assert before.model_dump() == after.model_dump()

    def test_serialized_as_camel_case_array(self) -> None:
        kv = MemoryKeyValueStore()
        NotePersistence(kv).save(_notes())
        data = json.loads(kv.get(DEFAULT_STORAGE_KEY))
        assert isinstance(data, list)
        assert len(data) == 3
        assert {"id", "title", "content", "createdAt", "updatedAt", "tags", "isFavorite"} <= set(data[0])

    def test_custom_key(self) -> None:
        kv = MemoryKeyValueStore()
        persistence = NotePersistence(kv, key="other")
        assert persistence.key == "other"
        persistence.save([])
        assert kv.get("other") == "[]"
        assert kv.get(DEFAULT_STORAGE_KEY) is None

    def test_loads_data_without_optional_fields(self) -> None:
        raw = json.dumps(
            [
                {
                    "id": "n1",
                    "title": "WELCOME TO NEBULA",
                    "content": "System initialization complete.",
                    "createdAt": 1700000000000,
                    "updatedAt": 1700000000000,
                    "tags": [],
                    "isFavorite": False,
                }
            ]
        )
        notes = NotePersistence.loads(raw)
        assert notes[0].id == "n1"
        assert notes[0].ai_summary is None

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            '{"notes": []}',
            '[{"id": "x", "createdAt": "yesterday"}]',
            "[1, 2]",
        ],
    )
    def test_corrupt_data_raises(self, raw: str) -> None:
        kv = MemoryKeyValueStore({DEFAULT_STORAGE_KEY: raw})
        with pytest.raises(DataCorruptError):
            NotePersistence(kv).load()

    def test_duplicate_ids_are_corrupt(self) -> None:
        note = Note(title="dup")
        raw = NotePersistence.dumps([note, note])
        with pytest.raises(DataCorruptError, match="Duplicate"):
            NotePersistence.loads(raw)

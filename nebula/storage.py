"""Key-value persistence for the note collection.

The collection is stored as one JSON array under a single key, the same shape
browser local storage would hold. ``JsonFileKeyValueStore`` keeps all keys in
one JSON object on disk; ``MemoryKeyValueStore`` is the in-process fake.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from .errors import DataCorruptError
from .models import NOTES_ADAPTER, Note

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "nebula-notes-data"


class KeyValueStore(Protocol):
    """Minimal get/set string store."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    """Dict-backed key-value store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileKeyValueStore:
    """Key-value store persisted as a JSON object in a local file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._data: dict[str, str] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        """Read the file if it exists. An unreadable file counts as empty."""
        if not self._path.exists():
            logger.info("No storage file found at %s — starting fresh", self._path)
            return
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Failed to read storage file %s: %s", self._path, exc)
            return
        if not isinstance(raw, dict):
            logger.error("Storage file %s is not a JSON object — ignoring", self._path)
            return
        self._data = {k: v for k, v in raw.items() if isinstance(v, str)}

    def _persist(self) -> None:
        """Write current state to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._persist()


class NotePersistence:
    """Serializes the whole note collection under one key."""

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def dumps(notes: list[Note]) -> str:
        """Encode notes as a JSON array with camelCase field names."""
        return NOTES_ADAPTER.dump_json(notes, by_alias=True).decode("utf-8")

    @staticmethod
    def loads(raw: str) -> list[Note]:
        """Decode a JSON array of notes.

        Raises:
            DataCorruptError: if the payload is not a valid note array or
                contains duplicate ids.
        """
        try:
            notes = NOTES_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            raise DataCorruptError(f"Invalid note collection: {exc}") from exc

        seen: set[str] = set()
        for note in notes:
            if note.id in seen:
                raise DataCorruptError(f"Duplicate note id: {note.id}")
            seen.add(note.id)
        return notes

    def load(self) -> list[Note] | None:
        """Return the stored collection, or None if nothing was stored."""
        raw = self._kv.get(self._key)
        if raw is None:
            return None
        return self.loads(raw)

    def save(self, notes: list[Note]) -> None:
        self._kv.set(self._key, self.dumps(notes))

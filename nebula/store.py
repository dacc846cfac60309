"""In-memory note collection synchronized with a persistence adapter."""

from __future__ import annotations

import logging
from typing import Callable

from .errors import DataCorruptError, NoteNotFoundError
from .metrics import NOTE_MUTATIONS, STORAGE_RECOVERIES, STORAGE_WRITE_FAILURES
from .models import Note, NoteUpdate, now_ms
from .storage import NotePersistence

logger = logging.getLogger(__name__)

WELCOME_TITLE = "WELCOME TO NEBULA"
WELCOME_CONTENT = (
    "System initialization complete.\n\n"
    "This is your personal secure data log. Use the Neural Uplink to enhance "
    "your notes with AI processing.\n\n"
    "End of line."
)

ConfirmDelete = Callable[[Note], bool]


def welcome_note() -> Note:
    """Build the note shown when no usable data is stored."""
    return Note(title=WELCOME_TITLE, content=WELCOME_CONTENT)


class NoteStore:
    """Ordered note collection with a single active (selected) note.

    Every change to the collection is written through to ``persistence`` as a
    full snapshot. The active selection is session state and is not persisted.
    """

    def __init__(self, persistence: NotePersistence, *, seed_welcome: bool = True) -> None:
        self._persistence = persistence
        self._seed_welcome = seed_welcome
        self._notes: list[Note] = []
        self._active_id: str | None = None
        self._load()

    def _load(self) -> None:
        """Rehydrate from persistence, falling back to the default state."""
        try:
            notes = self._persistence.load()
        except DataCorruptError as exc:
            logger.error("Data corruption detected in note storage: %s", exc)
            STORAGE_RECOVERIES.inc()
            notes = None

        if notes is None:
            self._notes = [welcome_note()] if self._seed_welcome else []
            self._persist()
            NOTE_MUTATIONS.labels(operation="seed").inc()
            logger.info("Initialized note store with %d default note(s)", len(self._notes))
        else:
            self._notes = notes
            logger.info("Loaded %d notes", len(self._notes))

        self._active_id = self._notes[0].id if self._notes else None

    def _persist(self) -> None:
        """Write the snapshot; on I/O failure keep working from memory."""
        try:
            self._persistence.save(self._notes)
        except OSError as exc:
            logger.error(
                "Failed to persist %d notes under key %r: %s",
                len(self._notes),
                self._persistence.key,
                exc,
            )
            STORAGE_WRITE_FAILURES.inc()

    def _index(self, note_id: str) -> int:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        raise NoteNotFoundError(note_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> list[Note]:
        """Snapshot of the collection, newest first."""
        return list(self._notes)

    def get(self, note_id: str) -> Note | None:
        """Return the note with ``note_id``, or None."""
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    @property
    def active_id(self) -> str | None:
        return self._active_id

    @property
    def active_note(self) -> Note | None:
        if self._active_id is None:
            return None
        return self.get(self._active_id)

    @property
    def count(self) -> int:
        """Number of stored notes."""
        return len(self._notes)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, title: str = "", content: str = "") -> str:
        """Prepend a new note, make it active and return its id."""
        ts = now_ms()
        note = Note(title=title, content=content, created_at=ts, updated_at=ts)
        while self.get(note.id) is not None:
            note = Note(title=title, content=content, created_at=ts, updated_at=ts)
        self._notes.insert(0, note)
        self._active_id = note.id
        self._persist()
        NOTE_MUTATIONS.labels(operation="create").inc()
        logger.info("Created note %s", note.id)
        return note.id

    def update(self, note_id: str, changes: NoteUpdate) -> Note:
        """Apply ``changes`` to a note and return the updated note.

        ``updated_at`` moves forward whenever title or content is named; it is
        bumped past the previous value if the clock has not advanced.

        Raises:
            NoteNotFoundError: if no note has ``note_id``.
        """
        idx = self._index(note_id)
        current = self._notes[idx]
        fields = changes.changes
        if changes.touches_text:
            fields["updated_at"] = max(now_ms(), current.updated_at + 1)

        updated = current.model_copy(update=fields)
        self._notes[idx] = updated
        self._persist()
        NOTE_MUTATIONS.labels(operation="update").inc()
        logger.info("Updated note %s — fields=%s", note_id, sorted(fields))
        return updated

    def delete(self, note_id: str, confirm: ConfirmDelete | None = None) -> bool:
        """Remove a note after confirmation.

        Returns False, leaving the collection untouched, if ``confirm`` declines.

        Raises:
            NoteNotFoundError: if no note has ``note_id``.
        """
        idx = self._index(note_id)
        if confirm is not None and not confirm(self._notes[idx]):
            logger.info("Deletion of note %s cancelled", note_id)
            return False

        del self._notes[idx]
        if self._active_id == note_id:
            self._active_id = None
        self._persist()
        NOTE_MUTATIONS.labels(operation="delete").inc()
        logger.info("Deleted note %s", note_id)
        return True

    def toggle_favorite(self, note_id: str) -> bool:
        """Flip the favorite flag and return its new value."""
        idx = self._index(note_id)
        note = self._notes[idx]
        self._notes[idx] = note.model_copy(update={"is_favorite": not note.is_favorite})
        self._persist()
        NOTE_MUTATIONS.labels(operation="toggle_favorite").inc()
        return not note.is_favorite

    def set_active(self, note_id: str | None) -> None:
        """Select the note being edited, or clear the selection with None."""
        if note_id is not None:
            self._index(note_id)
        self._active_id = note_id

"""Error taxonomy for the note store and the AI enhancement path."""

from __future__ import annotations


class NebulaError(Exception):
    """Base class for all application errors."""

    code = "NEBULA_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InputEmptyError(NebulaError):
    """AI action requested on blank content."""

    code = "INPUT_EMPTY"

    def __init__(self, message: str = "INPUT DATA EMPTY") -> None:
        super().__init__(message)


class CredentialMissingError(NebulaError):
    """No API key configured for the text-generation service."""

    code = "CREDENTIAL_MISSING"

    def __init__(self, message: str = "Neural link offline: API key missing") -> None:
        super().__init__(message)


class GenerationFailedError(NebulaError):
    """The text-generation call raised, timed out, or returned abnormally."""

    code = "GENERATION_FAILED"


class DataCorruptError(NebulaError):
    """Persisted note collection could not be parsed."""

    code = "DATA_CORRUPT"


class NoteNotFoundError(NebulaError, KeyError):
    """A mutation referenced a note id that does not exist."""

    code = "NOT_FOUND"

    def __init__(self, note_id: str) -> None:
        super().__init__(f"Note not found: {note_id}")
        self.note_id = note_id


class AIBusyError(NebulaError):
    """An AI action was requested while another one is still in flight."""

    code = "AI_BUSY"

    def __init__(self, message: str = "AI action already in progress") -> None:
        super().__init__(message)

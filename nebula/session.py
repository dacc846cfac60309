"""AI action session: one in-flight request, explicit apply step.

State machine per invocation::

    IDLE -> PROCESSING -> SUCCEEDED(text) | FAILED(reason) -> IDLE

The note targeted by an action is captured when the action is dispatched.
Applying the result always writes into that note, even if the user has since
selected another one.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

from .errors import AIBusyError, InputEmptyError, NebulaError
from .gateway import EnhancementGateway
from .models import AIAction, NoteUpdate
from .store import NoteStore

logger = logging.getLogger(__name__)

NO_ACTIVE_NOTE = "NO ACTIVE LOG SELECTED"


class AIState(str, Enum):
    IDLE = "IDLE"
    PROCESSING = "PROCESSING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class AISession:
    """Owns the in-flight flag and the transient result of AI actions."""

    def __init__(self, store: NoteStore, gateway: EnhancementGateway) -> None:
        self.store = store
        self.gateway = gateway
        self.state = AIState.IDLE
        self.result: str | None = None
        self.error: str | None = None
        self.target_note_id: str | None = None
        self._title_tasks: set[asyncio.Task] = set()

    @property
    def is_processing(self) -> bool:
        return self.state is AIState.PROCESSING

    def _fail(self, reason: str) -> AIState:
        self.state = AIState.FAILED
        self.result = None
        self.error = reason
        return self.state

    async def run(self, action: AIAction) -> AIState:
        """Run ``action`` on the active note and return the resulting state.

        Raises:
            AIBusyError: if another action is still processing.
            ValueError: if ``action`` is not a known action.
        """
        if self.is_processing:
            raise AIBusyError()
        action = AIAction(action)

        note = self.store.active_note
        if note is None:
            return self._fail(NO_ACTIVE_NOTE)
        if not note.content.strip():
            return self._fail(InputEmptyError().message)

        self.state = AIState.PROCESSING
        self.result = None
        self.error = None
        self.target_note_id = note.id

        try:
            text = await self.gateway.enhance(note.content, action, note.title)
        except NebulaError as exc:
            logger.warning("AI action %s failed for note %s: %s", action.value, note.id, exc)
            return self._fail(exc.message)
        except asyncio.CancelledError:
            self.state = AIState.IDLE
            self.target_note_id = None
            raise
        except Exception as exc:
            logger.exception("Unexpected error in AI action %s for note %s", action.value, note.id)
            return self._fail(str(exc) or type(exc).__name__)

        self.state = AIState.SUCCEEDED
        self.result = text
        return self.state

    async def apply(self) -> bool:
        """Write the last successful result into the note it was produced for.

        Returns False if there is nothing to apply or the target note no longer
        exists; in the latter case the result is discarded. When the target's
        title is empty, a title is requested in the background.
        """
        if self.state is not AIState.SUCCEEDED or self.result is None:
            return False

        note_id, text = self.target_note_id, self.result
        note = self.store.get(note_id) if note_id else None
        if note is None:
            logger.warning("Discarding AI result — note %s no longer exists", note_id)
            self.dismiss()
            return False

        self.store.update(note.id, NoteUpdate(content=text))
        self.dismiss()
        if not note.title:
            task = asyncio.create_task(self._fill_title(note.id, text))
            self._title_tasks.add(task)
            task.add_done_callback(self._title_tasks.discard)
        return True

    async def _fill_title(self, note_id: str, content: str) -> None:
        title = await self.gateway.generate_title(content)
        note = self.store.get(note_id)
        if note is None:
            logger.info("Dropping generated title — note %s was deleted", note_id)
            return
        if not note.title:
            self.store.update(note_id, NoteUpdate(title=title))

    def dismiss(self) -> None:
        """Acknowledge the outcome: clear result and error, return to IDLE."""
        if self.is_processing:
            return
        self.state = AIState.IDLE
        self.result = None
        self.error = None
        self.target_note_id = None

    async def wait_for_titles(self) -> None:
        """Wait until background title generation has finished."""
        if self._title_tasks:
            await asyncio.gather(*list(self._title_tasks))

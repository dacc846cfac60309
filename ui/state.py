"""Per-browser-session wiring of the note store and the AI session.

Streamlit reruns the script on every interaction, so the store and the AI
session are built once and kept in ``st.session_state``. Coroutines are run to
completion with ``asyncio.run`` since Streamlit reruns are synchronous.
"""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, TypeVar

import streamlit as st

from nebula.config import settings
from nebula.gateway import EnhancementGateway
from nebula.session import AISession
from nebula.storage import JsonFileKeyValueStore, NotePersistence
from nebula.store import NoteStore

T = TypeVar("T")


def get_store() -> NoteStore:
    """Return the note store for this browser session."""
    if "store" not in st.session_state:
        kv = JsonFileKeyValueStore(settings.notes_storage_path)
        persistence = NotePersistence(kv, key=settings.notes_storage_key)
        st.session_state.store = NoteStore(persistence)
    return st.session_state.store


def get_ai_session() -> AISession:
    """Return the AI session bound to this browser session's store."""
    if "ai_session" not in st.session_state:
        st.session_state.ai_session = AISession(get_store(), EnhancementGateway(settings))
    return st.session_state.ai_session


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion from a Streamlit callback."""
    return asyncio.run(coro)

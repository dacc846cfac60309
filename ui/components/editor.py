"""Editor pane for the active note."""

from __future__ import annotations

import streamlit as st

from nebula.models import NoteUpdate
from nebula.store import NoteStore


def render(store: NoteStore) -> None:
    """Render title and content inputs bound to the active note."""
    note = store.active_note
    if note is None:
        st.markdown("#### SELECT A LOG OR INITIALIZE NEW ENTRY")
        return

    title = st.text_input(
        "Title",
        value=note.title,
        key=f"title_{note.id}_{note.updated_at}",
        placeholder="ENTER LOG TITLE...",
    )
    content = st.text_area(
        "Content",
        value=note.content,
        key=f"content_{note.id}_{note.updated_at}",
        height=420,
        placeholder="Begin data entry...",
    )

    changes: dict[str, str] = {}
    if title != note.title:
        changes["title"] = title
    if content != note.content:
        changes["content"] = content
    if changes:
        store.update(note.id, NoteUpdate(**changes))

    st.caption(
        f"LOG_ID: {note.id.split('-')[0].upper()} · "
        f"BYTES: {len(note.content.encode('utf-8'))}"
    )

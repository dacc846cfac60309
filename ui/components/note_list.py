"""Sidebar: note list with create, select, favorite and delete controls."""

from __future__ import annotations

from datetime import datetime

import streamlit as st

from nebula.models import Note
from nebula.store import NoteStore

UNTITLED = "Untitled Log"
EMPTY_PREVIEW = "_Empty data stream..._"
PREVIEW_CHARS = 90


def _label(note: Note) -> str:
    """Title line for a note in the list."""
    star = "★ " if note.is_favorite else ""
    return f"{star}{note.title or UNTITLED}"


def preview(note: Note, limit: int = PREVIEW_CHARS) -> str:
    """Single-line excerpt of the content, or a placeholder when empty."""
    text = " ".join(note.content.split())
    if not text:
        return EMPTY_PREVIEW
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


def _render_delete_confirmation(store: NoteStore) -> None:
    """Two-step confirmation for the note pending deletion."""
    note_id = st.session_state.get("pending_delete")
    if not note_id:
        return
    note = store.get(note_id)
    if note is None:
        st.session_state.pop("pending_delete")
        return

    st.warning(f"CONFIRM DELETION: Purge '{note.title or UNTITLED}' permanently?")
    col_yes, col_no = st.columns(2)
    if col_yes.button("Purge", key="confirm_delete", type="primary", use_container_width=True):
        store.delete(note_id)
        st.session_state.pop("pending_delete")
        st.rerun()
    if col_no.button("Cancel", key="cancel_delete", use_container_width=True):
        st.session_state.pop("pending_delete")
        st.rerun()


def render(store: NoteStore) -> None:
    """Render the note list in the sidebar."""
    with st.sidebar:
        st.title("NEBULA")
        if st.button("➕ New log", use_container_width=True):
            store.create()
            st.rerun()

        _render_delete_confirmation(store)

        notes = store.list()
        if not notes:
            st.info("NO DATA LOGS FOUND")
            return

        for note in notes:
            active = note.id == store.active_id
            col_title, col_fav, col_del = st.columns([6, 1, 1])
            if col_title.button(
                _label(note),
                key=f"select_{note.id}",
                type="primary" if active else "secondary",
                use_container_width=True,
            ):
                store.set_active(note.id)
                st.rerun()
            if col_fav.button("☆" if not note.is_favorite else "★", key=f"fav_{note.id}"):
                store.toggle_favorite(note.id)
                st.rerun()
            if col_del.button("🗑", key=f"del_{note.id}"):
                st.session_state.pending_delete = note.id
                st.rerun()
            st.caption(datetime.fromtimestamp(note.updated_at / 1000).strftime("%Y-%m-%d %H:%M"))
            st.caption(preview(note))

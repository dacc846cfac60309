"""Nebula Notes — Streamlit interface.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `ui.*` and `nebula.*` imports
# resolve regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

from nebula.config import settings  # noqa: E402

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)

st.set_page_config(
    page_title="Nebula Notes",
    page_icon="🛰️",
    layout="wide",
    initial_sidebar_state="expanded",
)

from ui import state  # noqa: E402
from ui.components import ai_panel, editor, note_list  # noqa: E402

store = state.get_store()
session = state.get_ai_session()

note_list.render(store)

col_editor, col_ai = st.columns([3, 2])
with col_editor:
    editor.render(store)
with col_ai:
    ai_panel.render(session)

st.divider()
st.caption(
    f"SECURE CONNECTION ESTABLISHED | Model: {settings.gemini_model} | "
    f"{store.count} log(s)"
)

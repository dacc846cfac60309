"""AI panel: action buttons, error box and result preview."""

from __future__ import annotations

import streamlit as st

from nebula.errors import AIBusyError
from nebula.models import AIAction
from nebula.session import AISession
from ui.state import run

# (button label, action)
_ACTIONS: list[tuple[str, AIAction]] = [
    ("⚡ SCI-FI ENCRYPT", AIAction.REWRITE_SCIFI),
    ("📄 TACTICAL SUMMARY", AIAction.SUMMARIZE),
    ("↔ EXTRAPOLATE DATA", AIAction.EXPAND),
    ("✔ DEBUG SYNTAX", AIAction.FIX_GRAMMAR),
]


async def _apply_and_title(session: AISession) -> bool:
    applied = await session.apply()
    await session.wait_for_titles()
    return applied


def render(session: AISession) -> None:
    """Render the neural uplink panel."""
    st.subheader("NEURAL UPLINK")
    if not session.gateway.settings.ai_enabled:
        st.caption("Link offline — set API_KEY to enable AI processing.")

    st.caption("// SELECT NEURAL PROTOCOL //")
    for label, action in _ACTIONS:
        if st.button(
            label,
            key=f"ai_{action.value}",
            disabled=session.is_processing,
            use_container_width=True,
        ):
            with st.spinner("Processing..."):
                try:
                    run(session.run(action))
                except AIBusyError as e:
                    st.toast(str(e))
            st.rerun()

    if session.error:
        st.error(session.error)
        if st.button("Clear error", key="ai_clear_error"):
            session.dismiss()
            st.rerun()

    if session.result:
        st.markdown("**OUTPUT**")
        st.info(session.result)
        col_apply, col_clear = st.columns(2)
        if col_apply.button("OVERWRITE LOG", key="ai_apply", type="primary", use_container_width=True):
            if not run(_apply_and_title(session)):
                st.toast("Target log no longer exists — result discarded.")
            st.rerun()
        if col_clear.button("Discard", key="ai_clear", use_container_width=True):
            session.dismiss()
            st.rerun()

"""Prompt templates for the AI enhancement actions."""

from __future__ import annotations

from typing import assert_never

from .models import AIAction


def _context(content: str, title: str | None, label: str) -> str:
    """Render the note body, prefixed by its title when there is one."""
    if title and title.strip():
        return f"Log title: {title.strip()}\n\n{label}:\n{content}"
    return f"{label}:\n{content}"


def build_prompt(action: AIAction, content: str, title: str | None = None) -> str:
    """Return the prompt for ``action`` applied to ``content``."""
    match action:
        case AIAction.SUMMARIZE:
            return (
                "Analyze the following data log and provide a concise, high-level "
                "tactical summary (max 3 sentences). Style: Military/Sci-fi Log.\n\n"
                + _context(content, title, "Data")
            )
        case AIAction.EXPAND:
            return (
                "Expand upon the following data log entry. Add relevant details, "
                "hypotheticals, or logical extrapolations. Keep the tone consistent "
                "with a futuristic database.\n\n" + _context(content, title, "Entry")
            )
        case AIAction.REWRITE_SCIFI:
            return (
                "Rewrite the following text to sound like a transmission from a "
                "cyberpunk dystopia or high-tech spacecraft. Use technical jargon "
                "(e.g., 'neural link', 'quantum flux', 'sub-routine').\n\n"
                + _context(content, title, "Text")
            )
        case AIAction.FIX_GRAMMAR:
            return (
                "Correct any syntax errors or data corruptions (grammar/spelling) in "
                "the following text. Maintain original meaning strictly. Respond with "
                "only the corrected text.\n\n" + _context(content, title, "Text")
            )
        case _:
            assert_never(action)


def build_title_prompt(content: str) -> str:
    """Prompt asking for a short file-style name for ``content``."""
    return (
        "Generate a short, cool, sci-fi file name (max 5 words) for the following "
        "content. Do not include file extensions like .txt. Examples: "
        '"Project Alpha", "Sector 7 Report", "Neural Dump 01".\n\n'
        f"Content:\n{content}"
    )

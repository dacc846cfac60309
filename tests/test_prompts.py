"""Tests for nebula.prompts — action templates."""

from __future__ import annotations

import pytest

from nebula.models import AIAction
from nebula.prompts import build_prompt, build_title_prompt

CONTENT = "Relay beacon 4 offline since 0300."


class TestBuildPrompt:
    @pytest.mark.parametrize("action", list(AIAction))
    def test_every_action_has_a_template(self, action: AIAction) -> None:
        prompt = build_prompt(action, CONTENT)
        assert CONTENT in prompt
        assert prompt.strip() != CONTENT

    def test_templates_are_distinct(self) -> None:
        prompts = {build_prompt(action, CONTENT) for action in AIAction}
        assert len(prompts) == len(AIAction)

    def test_summary_is_bounded(self) -> None:
        assert "max 3 sentences" in build_prompt(AIAction.SUMMARIZE, CONTENT)

    def test_grammar_preserves_meaning(self) -> None:
        assert "meaning strictly" in build_prompt(AIAction.FIX_GRAMMAR, CONTENT)

    def test_scifi_register(self) -> None:
        assert "cyberpunk" in build_prompt(AIAction.REWRITE_SCIFI, CONTENT)

    def test_title_included_when_present(self) -> None:
        prompt = build_prompt(AIAction.EXPAND, CONTENT, title="Sector 7")
        assert "Log title: Sector 7" in prompt

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_blank_title_omitted(self, title: str | None) -> None:
        assert "Log title" not in build_prompt(AIAction.EXPAND, CONTENT, title=title)


class TestBuildTitlePrompt:
    def test_contains_content(self) -> None:
        prompt = build_title_prompt(CONTENT)
        assert CONTENT in prompt
        assert "max 5 words" in prompt

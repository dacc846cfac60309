"""Tests for nebula.config — environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from nebula.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("API_KEY", "GEMINI_API_KEY", "GEMINI_MODEL", "AI_TIMEOUT", "NOTES_STORAGE_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        assert s.api_key is None
        assert s.ai_enabled is False
        assert s.gemini_model == "gemini-2.5-flash"
        assert s.ai_timeout == 30.0
        assert s.notes_storage_key == "nebula-notes-data"
        assert s.notes_storage_path.name == "storage.json"

    def test_api_key_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_KEY", "secret")
        s = Settings(_env_file=None)
        assert s.api_key == "secret"
        assert s.ai_enabled is True

    def test_gemini_api_key_alias(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "other")
        assert Settings(_env_file=None).api_key == "other"

    def test_blank_key_is_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_KEY", "   ")
        assert Settings(_env_file=None).ai_enabled is False

    def test_overrides_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("GEMINI_MODEL", "gemini-test")
        monkeypatch.setenv("AI_TIMEOUT", "5")
        monkeypatch.setenv("NOTES_STORAGE_PATH", str(tmp_path / "n.json"))
        s = Settings(_env_file=None)
        assert s.gemini_model == "gemini-test"
        assert s.ai_timeout == 5.0
        assert s.notes_storage_path == tmp_path / "n.json"

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("API_KEY=from-file\nLOG_LEVEL=DEBUG\n")
        s = Settings(_env_file=env_file)
        assert s.api_key == "from-file"
        assert s.log_level == "DEBUG"

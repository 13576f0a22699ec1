"""
Unit tests for MentionsSettings.

Tests defaults, validation, and environment variable overrides.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mentions_library.config.settings import MentionsSettings


@pytest.mark.unit
class TestMentionsSettings:
    """Test MentionsSettings model."""

    def test_default_values(self, clean_settings_env: Path) -> None:
        settings = MentionsSettings()

        assert settings.trigger == "@"
        assert settings.diff_timeout == 0.0

    def test_env_overrides_defaults(self, clean_settings_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test MENTIONS_* environment variables are read."""
        monkeypatch.setenv("MENTIONS_TRIGGER", "#")
        monkeypatch.setenv("MENTIONS_DIFF_TIMEOUT", "1.5")

        settings = MentionsSettings()

        assert settings.trigger == "#"
        assert settings.diff_timeout == 1.5

    def test_env_file_is_read(self, clean_settings_env: Path) -> None:
        """Test a .env file in the working directory is read."""
        (clean_settings_env / ".env").write_text("MENTIONS_TRIGGER=+\n")

        assert MentionsSettings().trigger == "+"

    def test_keyword_arguments_win_over_env(self, clean_settings_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MENTIONS_TRIGGER", "#")

        assert MentionsSettings(trigger=">>").trigger == ">>"

    def test_settings_have_no_file_side_effects(self, clean_settings_env: Path) -> None:
        """Test building settings writes nothing to disk."""
        MentionsSettings()

        assert list(clean_settings_env.iterdir()) == []

    def test_empty_trigger_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MentionsSettings(trigger="")

    def test_negative_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MentionsSettings(diff_timeout=-0.5)

    def test_from_dict(self) -> None:
        settings = MentionsSettings(**{"trigger": "#", "diff_timeout": 2})

        assert settings.trigger == "#"
        assert settings.diff_timeout == 2.0

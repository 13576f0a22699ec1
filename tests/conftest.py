"""
Shared pytest fixtures for the mentions_library test suite.

Provides fixtures for:
- Isolated settings environment
"""

from pathlib import Path

import pytest


@pytest.fixture
def clean_settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear MENTIONS_* overrides and run from an empty directory.

    The empty working directory keeps a developer's .env file out of the
    settings under test.

    Args:
        tmp_path: pytest temporary directory
        monkeypatch: pytest monkeypatch fixture

    Returns:
        Path to the working directory
    """
    monkeypatch.delenv("MENTIONS_TRIGGER", raising=False)
    monkeypatch.delenv("MENTIONS_DIFF_TIMEOUT", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path

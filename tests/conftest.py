"""
Shared fixtures for the test suite.
"""

import pytest


ENV_VARS = [
    "GROQ_API_KEY", "VOCAB_FILE", "FLASHCARD_FILE", "FLASHCARD_TYPE",
    "SOURCE_LANGUAGE", "TARGET_LANGUAGE", "GROQ_MODEL", "DEBUG_MODE",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run every test without configuration from the real environment."""
    for name in ENV_VARS:
        # setenv first so values loaded from .env files are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

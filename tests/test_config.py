"""Tests for Settings validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from csvq.config import Settings


def test_log_level_is_normalised_to_upper_case():
    assert Settings(LOG_LEVEL=" debug ").LOG_LEVEL == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError, match="LOG_LEVEL"):
        Settings(LOG_LEVEL="LOUD")


def test_unknown_log_level_from_env_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings()

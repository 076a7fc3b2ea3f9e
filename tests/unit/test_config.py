"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.url_prefix == ""
    assert settings.stats_max_workers == 1
    assert settings.template_dir.endswith("templates")


def test_url_prefix_must_start_with_slash() -> None:
    with pytest.raises(ValidationError, match="must start with"):
        Settings(url_prefix="vantage")


def test_url_prefix_must_not_end_with_slash() -> None:
    with pytest.raises(ValidationError, match="must not end with"):
        Settings(url_prefix="/vantage/")


def test_stats_workers_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(stats_max_workers=0)


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("URL_PREFIX", "/vantage")
    assert Settings().url_prefix == "/vantage"

# tests/unit/config/test_secid_settings.py
from __future__ import annotations

from pathlib import Path

import pytest

from secid.config.settings import Environment, Settings, get_settings
from secid.domain.enums.validation import OnAmbiguous


def test_defaults_without_environment() -> None:
    settings = Settings(_env_file=None)

    assert settings.environment is Environment.DEVELOPMENT
    assert settings.log_level == "WARNING"
    assert settings.default_on_ambiguous is OnAmbiguous.FIRST


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECID_ENVIRONMENT", "ci")
    monkeypatch.setenv("SECID_LOG_LEVEL", " debug ")
    monkeypatch.setenv("SECID_DEFAULT_ON_AMBIGUOUS", "RAISE")

    settings = Settings(_env_file=None)

    assert settings.environment is Environment.CI
    assert settings.log_level == "DEBUG"
    assert settings.default_on_ambiguous is OnAmbiguous.RAISE


def test_variable_names_are_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("secid_default_on_ambiguous", "all")

    assert Settings(_env_file=None).default_on_ambiguous is OnAmbiguous.ALL


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("SECID_LOG_LEVEL", "ERROR")

    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().log_level == "ERROR"


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("SECID_DEFAULT_ON_AMBIGUOUS", "sometimes"),
        ("SECID_LOG_LEVEL", "LOUD"),
        ("SECID_ENVIRONMENT", "staging"),
    ],
)
def test_invalid_values_surface_as_runtime_error(
    monkeypatch: pytest.MonkeyPatch, key: str, value: str
) -> None:
    monkeypatch.setenv(key, value)

    with pytest.raises(RuntimeError, match="Invalid configuration"):
        get_settings()


def test_foreign_dotenv_keys_are_ignored(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / ".env").write_text(
        "DATABASE_URL=postgres://x\nSECID_DEFAULT_ON_AMBIGUOUS=all\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    settings = get_settings()

    assert settings.default_on_ambiguous is OnAmbiguous.ALL
    assert not hasattr(settings, "database_url")

from pathlib import Path

import pytest

from chat_ledger.core import settings


def test_read_config_file(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text(
        "# chat ledger\n"
        "DEFAULT_CURRENCY: usd  # dollars\n"
        "LOG_LEVEL: 'DEBUG'\n"
        "HOST: \"0.0.0.0\"\n"
        "EMPTY:\n"
        "not a pair\n",
        encoding="utf-8",
    )
    assert settings.read_config_file(str(config)) == {
        "DEFAULT_CURRENCY": "usd",
        "LOG_LEVEL": "DEBUG",
        "HOST": "0.0.0.0",
    }

def test_read_missing_config_file(tmp_path: Path) -> None:
    assert settings.read_config_file(str(tmp_path / "absent.yaml")) == {}

def test_get_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "9000")
    assert settings.get_env_int("PORT", 8000, min_value=1) == 9000
    monkeypatch.setenv("PORT", "not-a-port")
    assert settings.get_env_int("PORT", 8000, min_value=1) == 8000
    monkeypatch.setenv("PORT", "0")
    assert settings.get_env_int("PORT", 8000, min_value=1) == 8000

def test_get_env_bool(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INCLUDE_DIAGNOSTICS", "off")
    assert settings.get_env_bool("INCLUDE_DIAGNOSTICS", True) is False
    monkeypatch.setenv("INCLUDE_DIAGNOSTICS", "maybe")
    assert settings.get_env_bool("INCLUDE_DIAGNOSTICS", True) is True

def test_default_currency(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEFAULT_CURRENCY", raising=False)
    assert settings.get_default_currency() == "BDT"
    monkeypatch.setenv("DEFAULT_CURRENCY", "eur")
    assert settings.get_default_currency() == "EUR"

import logging
from pathlib import Path

import pytest

from chat_ledger.logger import ColourizedFormatter, get_logging_config


def make_record(message: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("chat_ledger.test", level, __file__, 1, message, None, None)

def test_tag_and_level_are_coloured() -> None:
    formatter = ColourizedFormatter("%(name)s - %(levelname)s - %(message)s")
    record = make_record("[LEDGER] Recorded expense 300")

    output = formatter.format(record)

    assert f"{ColourizedFormatter.GREEN}INFO{ColourizedFormatter.RESET}" in output
    assert f"{ColourizedFormatter.CYAN}[LEDGER]{ColourizedFormatter.RESET} Recorded" in output
    # The record itself is left untouched for other handlers
    assert record.levelname == "INFO"

def test_untagged_message_is_left_alone() -> None:
    formatter = ColourizedFormatter("%(message)s")
    assert formatter.format(make_record("plain [not a tag]")) == "plain [not a tag]"

def test_file_handler_uses_log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_FILE", "ledger.log")

    config = get_logging_config()

    assert config["handlers"]["file"]["filename"] == str(tmp_path / "ledger.log")
    assert config["handlers"]["file"]["formatter"] == "plain"
    assert config["loggers"][""]["handlers"] == ["console", "file"]

def test_console_only_without_log_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_DIR", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = get_logging_config()

    assert "file" not in config["handlers"]
    assert config["loggers"][""]["level"] == "DEBUG"

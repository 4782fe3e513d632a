# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from chatterchicken.config import Settings

_VARS = (
    "APP_NAME",
    "LOG_LEVEL",
    "LOG_DIR",
    "LOG_BACKUP_DAYS",
    "CONSOLE_ENABLED",
    "SAVE_TASKS",
    "DATA_DIR",
    "TASKS_DB_PATH",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for suffix in _VARS:
        monkeypatch.delenv(f"CHICKEN_{suffix}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "ChatterChicken"
    assert s.log_level == "WARNING"
    assert s.console_enabled is True
    assert s.save_tasks is True
    assert s.data_dir == Path(".local/chatterchicken")
    assert s.tasks_db_path == s.data_dir / "tasks.sqlite3"
    assert s.log_dir == s.data_dir
    assert s.log_backup_days == 7


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CHICKEN_APP_NAME", "Hen")
    monkeypatch.setenv("CHICKEN_LOG_LEVEL", "debug")
    monkeypatch.setenv("CHICKEN_SAVE_TASKS", "off")
    monkeypatch.setenv("CHICKEN_CONSOLE_ENABLED", "no")
    monkeypatch.setenv("CHICKEN_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.app_name == "Hen"
    assert s.log_level == "DEBUG"
    assert s.save_tasks is False
    assert s.console_enabled is False
    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"


def test_bad_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHICKEN_LOG_BACKUP_DAYS", "a week")
    assert Settings.from_env().log_backup_days == 7

    monkeypatch.setenv("CHICKEN_LOG_BACKUP_DAYS", "-3")
    assert Settings.from_env().log_backup_days == 0


def test_settings_are_frozen() -> None:
    s = Settings.from_env()
    with pytest.raises(AttributeError):
        s.app_name = "other"  # type: ignore[misc]

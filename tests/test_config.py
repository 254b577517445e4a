from pathlib import Path

import config
from interface.data_dir_resolver import get_data_dir


def test_log_level_defaults_and_overrides(monkeypatch):
    assert config.get_log_level() == "WARNING"
    config.set_log_level("debug")
    assert config.get_log_level() == "DEBUG"
    monkeypatch.setenv("PAYBACK_LOG_LEVEL", "error")
    assert config.get_log_level() == "ERROR"


def test_clearing_last_value_removes_file(tmp_path):
    config.set_data_dir(str(tmp_path / "people"))
    assert config.user_config_path().exists()
    config.set_data_dir("")
    assert config.get_data_dir() == ""
    assert not config.user_config_path().exists()


def test_broken_config_is_ignored():
    config.user_config_path().write_text("[unclosed", encoding="utf-8")
    assert config.get_data_dir() == ""


def test_data_dir_priority(tmp_path, monkeypatch):
    assert get_data_dir() == (tmp_path / "data").resolve()

    monkeypatch.delenv("PAYBACK_DATA_DIR")
    assert get_data_dir(tmp_path / "explicit") == (tmp_path / "explicit").resolve()

    config.set_data_dir(str(tmp_path / "configured"))
    assert get_data_dir() == (tmp_path / "configured").resolve()
    assert Path(tmp_path / "configured").is_dir()


def test_data_dir_without_create(tmp_path, monkeypatch):
    monkeypatch.setenv("PAYBACK_DATA_DIR", str(tmp_path / "lazy"))
    assert not get_data_dir(create=False).exists()

from __future__ import annotations

from pathlib import Path

from config import get_settings_module, load_settings


def test_app_env_selects_settings_module(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "config.production"
    monkeypatch.setenv("APP_ENV", "TEST")
    assert get_settings_module() == "config.testing"
    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_relative_dirs_resolve_against_working_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.chdir(tmp_path)

    settings = load_settings(data_dir="store", public_dir="web")

    assert settings["DATA_DIR"] == str((tmp_path / "store").resolve())
    assert settings["PUBLIC_DIR"] == str((tmp_path / "web").resolve())
    assert settings["TESTING"] is True
    assert settings["SETTINGS_MODULE"] == "config.testing"


def test_absolute_data_dir_is_kept(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    settings = load_settings(DATA_DIR=str(tmp_path))

    assert Path(settings["DATA_DIR"]) == tmp_path.resolve()


def test_app_uses_resolved_data_dir(app, data_dir):
    assert app.config["DATA_DIR"] == str(data_dir.resolve())
    assert "SETTINGS_MODULE" not in app.config

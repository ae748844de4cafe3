from __future__ import annotations

from datetime import date

import pytest

from src.face_attendance.face_attendance.container import build_container
from src.face_attendance.face_attendance.main import create_app
from src.face_attendance.face_attendance.storage.bootstrap import ensure_data_dirs


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 1, 10)


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def container(data_dir):
    c = build_container(data_dir=data_dir)
    ensure_data_dirs(c.paths)
    return c


@pytest.fixture
def app(data_dir, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    flask_app = create_app(DATA_DIR=str(data_dir), TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()

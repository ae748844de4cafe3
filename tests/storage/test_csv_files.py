from __future__ import annotations

from src.face_attendance.face_attendance.storage.bootstrap import ensure_data_dirs, list_data_files
from src.face_attendance.face_attendance.storage.csv_files import DataPaths, read_rows, write_rows


def test_missing_file_reads_as_empty(tmp_path):
    assert read_rows(tmp_path / "nope.csv") == ([], [])


def test_zero_byte_file_reads_as_empty(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    assert read_rows(path) == ([], [])


def test_write_then_read_keeps_header_order_and_quotes(tmp_path):
    path = tmp_path / "students.csv"
    write_rows(path, ["name", "roll", "descriptors"], [{"name": "Doe, Jane", "roll": "7", "descriptors": "[0.1,0.2]"}])

    header, rows = read_rows(path)

    assert header == ["name", "roll", "descriptors"]
    assert rows == [{"name": "Doe, Jane", "roll": "7", "descriptors": "[0.1,0.2]"}]


def test_short_rows_get_empty_cells(tmp_path):
    path = tmp_path / "sheet.csv"
    path.write_text("name,roll,2024-01-10\nAnn,1\n", encoding="utf-8")

    _, rows = read_rows(path)

    assert rows == [{"name": "Ann", "roll": "1", "2024-01-10": ""}]


def test_bootstrap_creates_directories(tmp_path):
    paths = DataPaths.from_dir(tmp_path / "fresh")

    ensure_data_dirs(paths)
    ensure_data_dirs(paths)

    assert paths.attendance_dir.is_dir()
    assert list_data_files(paths) == []

from __future__ import annotations

import zipfile

import pytest

from src.face_attendance.face_attendance.core.exceptions import NotFoundError


def test_bundle_of_empty_data_dir_is_an_empty_archive(container):
    with zipfile.ZipFile(container.export_service.build_bundle()) as zf:
        assert zf.namelist() == []


def test_bundle_layout(container):
    container.student_service.upsert(name="Ann", roll="1", descriptors="x")
    container.subject_service.create("Math")
    container.subject_service.create("Art")

    with zipfile.ZipFile(container.export_service.build_bundle()) as zf:
        assert sorted(zf.namelist()) == [
            "attendance/Art_attendance.csv",
            "attendance/Math_attendance.csv",
            "students_data.csv",
            "subjects_data.csv",
        ]
        assert zf.read("attendance/Math_attendance.csv") == container.sheets_repo.path_for("Math").read_bytes()


def test_write_bundle_to_file(container, tmp_path):
    container.subject_service.create("Math")
    target = tmp_path / "backup.zip"

    assert container.export_service.write_bundle(target) == 2
    assert zipfile.is_zipfile(target)


def test_sheet_file_missing(container):
    with pytest.raises(NotFoundError):
        container.export_service.sheet_file("Math")

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

import pytest

from src.face_attendance.face_attendance.attendance.model import AttendanceSheet
from src.face_attendance.face_attendance.attendance.service import AttendanceService
from src.face_attendance.face_attendance.core.exceptions import NotFoundError, ValidationError
from src.face_attendance.face_attendance.students.model import Student


@dataclass
class InMemoryStudents:
    students: list[Student] = field(default_factory=list)

    def list_all(self):
        return list(self.students)

    def get_by_roll(self, roll: str) -> Optional[Student]:
        return next((s for s in self.students if s.roll == roll), None)


class InMemorySheets:
    def __init__(self):
        self.sheets: dict[str, AttendanceSheet] = {}
        self.saves = 0

    def exists(self, subject):
        return subject in self.sheets

    def load(self, subject):
        sheet = self.sheets.get(subject)
        return copy.deepcopy(sheet) if sheet is not None else None

    def save(self, sheet):
        self.saves += 1
        self.sheets[sheet.subject] = copy.deepcopy(sheet)

    def list_subjects(self):
        return sorted(self.sheets)

    def delete_all(self):
        n = len(self.sheets)
        self.sheets.clear()
        return n


@pytest.fixture
def students():
    return InMemoryStudents([Student(roll="1", name="Ann", descriptors="[]"), Student(roll="2", name="Bob", descriptors="[]")])


@pytest.fixture
def sheets():
    return InMemorySheets()


@pytest.fixture
def svc(sheets, students):
    return AttendanceService(sheets, students)


def test_get_or_create_seeds_from_roster_without_dates(svc, sheets):
    sheet = svc.get_or_create("Math")

    assert [r.roll for r in sheet] == ["1", "2"]
    assert sheet.dates == []
    assert sheets.exists("Math")


def test_get_or_create_does_not_reseed_existing_sheet(svc, sheets, students):
    svc.get_or_create("Math")
    students.students.append(Student(roll="3", name="Cid", descriptors="[]"))

    sheet = svc.get_or_create("Math")

    assert [r.roll for r in sheet] == ["1", "2"]
    assert sheets.saves == 1


def test_mark_present_existing_row(svc):
    svc.mark_present(subject="Math", roll="1", day="2024-01-10")

    entries = svc.query_by_date(subject="Math", day="2024-01-10")
    assert [e.to_dict() for e in entries] == [
        {"name": "Ann", "roll": "1", "date": "2024-01-10", "time": "00:00:00", "subject": "Math"}
    ]


def test_mark_present_appends_row_for_roster_student_missing_from_sheet(svc, sheets, students):
    svc.get_or_create("Math")
    students.students.append(Student(roll="3", name="Cid", descriptors="[]"))

    svc.mark_present(subject="Math", roll="3", day="2024-01-10")

    row = sheets.sheets["Math"].get("3")
    assert row.name == "Cid"
    assert row.present_dates == {"2024-01-10"}


def test_mark_present_unknown_student(svc):
    with pytest.raises(NotFoundError, match="student 99 not found"):
        svc.mark_present(subject="Math", roll="99", day="2024-01-10")


@pytest.mark.parametrize("day", ["", "10-01-2024", "2024-1-10", "2024-02-30"])
def test_mark_present_rejects_bad_dates(svc, day):
    with pytest.raises(ValidationError):
        svc.mark_present(subject="Math", roll="1", day=day)


def test_query_by_date_for_missing_sheet_is_empty(svc):
    assert svc.query_by_date(subject="Nope", day="2024-01-10") == []


def test_query_by_date_only_returns_present_rows(svc):
    svc.mark_present(subject="Math", roll="2", day="2024-01-10")

    assert [e.roll for e in svc.query_by_date(subject="Math", day="2024-01-10")] == ["2"]
    assert svc.query_by_date(subject="Math", day="2024-01-11") == []


def test_delete_today_column(svc, sheets, fixed_today):
    svc.mark_present(subject="Math", roll="1", day="2024-01-09")
    svc.mark_present(subject="Math", roll="1", day="2024-01-10")

    removed = svc.delete_today_column("Math", today=fixed_today)

    assert removed == "2024-01-10"
    assert sheets.sheets["Math"].dates == ["2024-01-09"]
    assert sheets.sheets["Math"].get("1").present_dates == {"2024-01-09"}


def test_delete_today_column_errors(svc, fixed_today):
    with pytest.raises(NotFoundError, match="file not found"):
        svc.delete_today_column("Math", today=fixed_today)

    svc.mark_present(subject="Math", roll="1", day="2024-01-09")
    with pytest.raises(NotFoundError, match="2024-01-10"):
        svc.delete_today_column("Math", today=fixed_today)


def test_summary_counts(svc):
    svc.mark_present(subject="Math", roll="1", day="2024-01-09")
    svc.mark_present(subject="Math", roll="1", day="2024-01-10")
    svc.mark_present(subject="Math", roll="2", day="2024-01-10")

    summary = svc.summary("Math").to_dict()

    assert summary["total_sessions"] == 2
    assert summary["students"] == [
        {"name": "Ann", "roll": "1", "present": 2, "absent": 0},
        {"name": "Bob", "roll": "2", "present": 1, "absent": 1},
    ]


def test_roster_sync_helpers(svc, sheets):
    svc.get_or_create("Math")
    svc.get_or_create("Art")

    assert svc.add_student_to_all(["Math", "Art", "Music"], name="Cid", roll="3") == 3
    assert "3" in sheets.sheets["Music"]
    assert svc.add_student_to_all(["Math", "Art", "Music"], name="Cid", roll="3") == 0

    assert svc.remove_student_from_all("3") == 3
    assert all("3" not in s for s in sheets.sheets.values())

    assert svc.truncate_all() == 3
    assert all(len(s) == 0 for s in sheets.sheets.values())


def test_mark_present_twice_leaves_file_byte_identical(container):
    container.students_repo.upsert(Student(roll="1", name="Ann", descriptors="[0.5]"))
    svc = container.attendance_service

    svc.mark_present(subject="Math", roll="1", day="2024-01-10")
    first = container.sheets_repo.path_for("Math").read_bytes()
    svc.mark_present(subject="Math", roll="1", day="2024-01-10")

    assert container.sheets_repo.path_for("Math").read_bytes() == first

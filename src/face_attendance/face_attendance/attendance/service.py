from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from ..common.datetime_utils import format_iso_date, today_local
from ..common.validators import require_iso_date, require_non_empty, require_subject_name
from ..core.constants import DEFAULT_ENTRY_TIME
from ..core.exceptions import NotFoundError
from ..students.repository import StudentRepository
from .model import AttendanceEntry, AttendanceSheet, SheetSummary
from .repository import SheetRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases over the per-subject sheets.

    Every mutation is load -> change in memory -> save the whole sheet. There
    is no locking: two concurrent writers on one subject means the last save
    wins.
    """

    def __init__(self, sheets: SheetRepository, students: StudentRepository):
        self._sheets = sheets
        self._students = students

    def get_or_create(self, subject: str) -> AttendanceSheet:
        return self._load_or_seed(require_subject_name(subject))

    def _load_or_seed(self, subject: str) -> AttendanceSheet:
        """Load the sheet, or create it from the roster. `subject` is used as given."""
        sheet = self._sheets.load(subject)
        if sheet is not None:
            return sheet

        sheet = AttendanceSheet(subject=subject)
        for student in self._students.list_all():
            sheet.add_row(student.name, student.roll)
        self._sheets.save(sheet)
        logger.info("created sheet for %r with %d students", subject, len(sheet))
        return sheet

    def mark_present(self, *, subject: str, roll: str, day: str) -> AttendanceSheet:
        subject = require_subject_name(subject)
        roll = require_non_empty(roll, "roll")
        day = require_iso_date(day)

        sheet = self._load_or_seed(subject)
        if roll not in sheet:
            student = self._students.get_by_roll(roll)
            if student is None:
                raise NotFoundError(f"student {roll} not found")
            sheet.add_row(student.name, student.roll)

        sheet.mark_present(roll, day)
        self._sheets.save(sheet)
        logger.info("marked %s present in %r on %s", roll, subject, day)
        return sheet

    def query_by_date(self, *, subject: str, day: str) -> List[AttendanceEntry]:
        sheet = self._sheets.load(subject)
        if sheet is None:
            return []
        return [
            AttendanceEntry(name=row.name, roll=row.roll, date=day, subject=subject, time=DEFAULT_ENTRY_TIME)
            for row in sheet.present_on(day)
        ]

    def summary(self, subject: str) -> SheetSummary:
        sheet = self._sheets.load(subject)
        if sheet is None:
            raise NotFoundError("Attendance records not found")

        students = [
            {
                "name": row.name,
                "roll": row.roll,
                "present": len(row.present_dates),
                "absent": len(sheet.dates) - len(row.present_dates),
            }
            for row in sheet
        ]
        return SheetSummary(subject=subject, dates=list(sheet.dates), students=students)

    def delete_today_column(self, subject: str, *, today: Optional[date] = None) -> str:
        """Drop today's date column from the subject's sheet; returns the date removed."""

        subject = require_subject_name(subject)
        day = format_iso_date(today or today_local())

        sheet = self._sheets.load(subject)
        if sheet is None:
            raise NotFoundError("Attendance file not found.")
        if not sheet.remove_date(day):
            raise NotFoundError(f"No attendance recorded for today ({day}).")

        self._sheets.save(sheet)
        logger.info("removed column %s from %r", day, subject)
        return day

    def delete_all(self) -> int:
        removed = self._sheets.delete_all()
        logger.info("deleted %d attendance sheets", removed)
        return removed

    # Roster sync. Each sheet is loaded and saved on its own; a failure part
    # way through leaves the sheets already written as they are.

    def add_student_to_all(self, subjects: List[str], *, name: str, roll: str) -> int:
        touched = 0
        for subject in subjects:
            sheet = self._load_or_seed(subject)
            if sheet.add_row(name, roll):
                self._sheets.save(sheet)
                touched += 1
        logger.info("added roll %s to %d sheets", roll, touched)
        return touched

    def remove_student_from_all(self, roll: str) -> int:
        touched = 0
        for subject in self._sheets.list_subjects():
            sheet = self._sheets.load(subject)
            if sheet is not None and sheet.remove_row(roll):
                self._sheets.save(sheet)
                touched += 1
        logger.info("removed roll %s from %d sheets", roll, touched)
        return touched

    def truncate_all(self) -> int:
        subjects = list(self._sheets.list_subjects())
        for subject in subjects:
            self._sheets.save(AttendanceSheet(subject=subject))
        logger.info("truncated %d sheets", len(subjects))
        return len(subjects)

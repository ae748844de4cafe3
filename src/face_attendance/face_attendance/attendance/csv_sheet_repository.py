from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from werkzeug.security import safe_join

from ..common.validators import is_subject_name
from ..core.constants import PRESENT_MARK, SHEET_FIXED_FIELDS, SHEET_SUFFIX
from ..core.exceptions import ValidationError
from ..storage.csv_files import DataPaths, read_rows, write_rows
from .model import AttendanceSheet, SheetRow
from .repository import SheetRepository

logger = logging.getLogger(__name__)


class CsvSheetRepository(SheetRepository):
    """One `<subject>_attendance.csv` per subject under the attendance directory.

    The wide file layout only exists here: rows are parsed into the roll/date
    model on load and rendered back on save.
    """

    def __init__(self, paths: DataPaths):
        self._paths = paths

    def path_for(self, subject: str) -> Path:
        joined = safe_join(str(self._paths.attendance_dir), f"{subject}{SHEET_SUFFIX}")
        if joined is None:
            raise ValidationError(f"Invalid subject name: {subject!r}")
        return Path(joined)

    def exists(self, subject: str) -> bool:
        return self.path_for(subject).is_file()

    def load(self, subject: str) -> Optional[AttendanceSheet]:
        path = self.path_for(subject)
        if not path.is_file():
            return None

        header, rows = read_rows(path)
        sheet = AttendanceSheet(subject=subject)
        for column in header:
            if column and column not in SHEET_FIXED_FIELDS:
                sheet.add_date(column)

        for record in rows:
            roll = record.get("roll", "")
            row = sheet.rows.get(roll)
            if row is None:
                row = SheetRow(name=record.get("name", ""), roll=roll)
                sheet.rows[roll] = row
            else:
                logger.warning("duplicate roll %r in %s merged into first row", roll, path.name)
            for day in sheet.dates:
                if record.get(day) == PRESENT_MARK:
                    row.present_dates.add(day)

        return sheet

    def save(self, sheet: AttendanceSheet) -> None:
        fieldnames = [*SHEET_FIXED_FIELDS, *sheet.dates]

        def _render(row: SheetRow) -> dict:
            out = {"name": row.name, "roll": row.roll}
            for day in sheet.dates:
                out[day] = PRESENT_MARK if row.is_present(day) else ""
            return out

        write_rows(self.path_for(sheet.subject), fieldnames, (_render(r) for r in sheet))

    def list_subjects(self) -> Sequence[str]:
        """Subjects with a sheet file, names exactly as on disk.

        Files whose subject could not have been created through the API
        (hidden or path-like names) are skipped.
        """

        directory = self._paths.attendance_dir
        if not directory.is_dir():
            return []
        subjects = []
        for p in directory.iterdir():
            if not (p.is_file() and p.name.endswith(SHEET_SUFFIX)):
                continue
            subject = p.name[: -len(SHEET_SUFFIX)]
            if is_subject_name(subject):
                subjects.append(subject)
            else:
                logger.warning("ignoring sheet file %s", p.name)
        return sorted(subjects)

    def delete_all(self) -> int:
        directory = self._paths.attendance_dir
        if not directory.is_dir():
            return 0
        removed = 0
        for p in directory.iterdir():
            if p.is_file() and p.name.endswith(SHEET_SUFFIX):
                p.unlink()
                removed += 1
        return removed

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import BinaryIO, List, Tuple, Union

from ..attendance.repository import SheetRepository
from ..core.constants import ATTENDANCE_DIR_NAME, BUNDLE_COMPRESS_LEVEL, STUDENTS_FILE_NAME, SUBJECTS_FILE_NAME
from ..core.exceptions import NotFoundError
from ..storage.csv_files import DataPaths

logger = logging.getLogger(__name__)


class ExportService:
    """Read-only downloads of the raw data files."""

    def __init__(self, paths: DataPaths, sheets: SheetRepository):
        self._paths = paths
        self._sheets = sheets

    def sheet_file(self, subject: str) -> Path:
        path = self._sheets.path_for(subject)
        if not path.is_file():
            raise NotFoundError("Attendance records not found")
        return path

    def bundle_members(self) -> List[Tuple[Path, str]]:
        """(source file, name inside the archive) for every file that exists."""

        members: List[Tuple[Path, str]] = []
        for path, arcname in (
            (self._paths.students_file, STUDENTS_FILE_NAME),
            (self._paths.subjects_file, SUBJECTS_FILE_NAME),
        ):
            if path.is_file():
                members.append((path, arcname))

        for subject in self._sheets.list_subjects():
            path = self._sheets.path_for(subject)
            if path.is_file():
                members.append((path, f"{ATTENDANCE_DIR_NAME}/{path.name}"))
        return members

    def write_bundle(self, target: Union[str, Path, BinaryIO]) -> int:
        members = self.bundle_members()
        with zipfile.ZipFile(target, "w", zipfile.ZIP_DEFLATED, compresslevel=BUNDLE_COMPRESS_LEVEL) as zf:
            for path, arcname in members:
                zf.write(path, arcname)
        logger.info("bundled %d data files", len(members))
        return len(members)

    def build_bundle(self) -> io.BytesIO:
        buf = io.BytesIO()
        self.write_bundle(buf)
        buf.seek(0)
        return buf

from __future__ import annotations

from dataclasses import dataclass

from .attendance.csv_sheet_repository import CsvSheetRepository
from .attendance.service import AttendanceService
from .export.service import ExportService
from .storage.csv_files import DataPaths
from .students.csv_student_repository import CsvStudentRepository
from .students.service import StudentService
from .subjects.csv_subject_repository import CsvSubjectRepository
from .subjects.service import SubjectService


@dataclass(frozen=True)
class Container:
    paths: DataPaths

    students_repo: CsvStudentRepository
    subjects_repo: CsvSubjectRepository
    sheets_repo: CsvSheetRepository

    attendance_service: AttendanceService
    subject_service: SubjectService
    student_service: StudentService
    export_service: ExportService


def build_container(*, data_dir) -> Container:
    paths = DataPaths.from_dir(data_dir)

    students_repo = CsvStudentRepository(paths)
    subjects_repo = CsvSubjectRepository(paths)
    sheets_repo = CsvSheetRepository(paths)

    attendance_service = AttendanceService(sheets_repo, students_repo)
    subject_service = SubjectService(subjects_repo, sheets_repo, attendance_service)
    student_service = StudentService(students_repo, subject_service, attendance_service)
    export_service = ExportService(paths, sheets_repo)

    return Container(
        paths=paths,
        students_repo=students_repo,
        subjects_repo=subjects_repo,
        sheets_repo=sheets_repo,
        attendance_service=attendance_service,
        subject_service=subject_service,
        student_service=student_service,
        export_service=export_service,
    )
